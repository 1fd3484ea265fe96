"""
Sound Generator
===============
Procedural sound effects synthesized with numpy.
No audio files are needed.
"""

import pygame
import numpy as np
from typing import Dict, Optional
from dataclasses import dataclass
from enum import Enum

from stickman_fighter.config import AUDIO_SAMPLE_RATE, AUDIO_CHANNELS


class WaveType(Enum):
    """Waveforms for sound synthesis"""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    NOISE = "noise"


@dataclass(frozen=True)
class SoundParams:
    """Parameters for one synthesized sound"""
    frequency: float = 440.0
    duration: float = 0.2
    volume: float = 0.5
    wave_type: WaveType = WaveType.SINE

    # Envelope (ADSR)
    attack: float = 0.01
    decay: float = 0.05
    sustain: float = 0.7
    release: float = 0.1

    # Effects
    pitch_bend: float = 0.0  # Semitones per second
    vibrato_freq: float = 0.0
    vibrato_depth: float = 0.0
    noise_mix: float = 0.0


class SoundGenerator:
    """
    Turns SoundParams into 16-bit sample arrays and pygame Sounds.
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE,
                 rng: Optional[np.random.Generator] = None):
        self.sample_rate = sample_rate
        self.rng = rng if rng is not None else np.random.default_rng()
        self._cache: Dict[SoundParams, pygame.mixer.Sound] = {}

    def synthesize(self, params: SoundParams) -> np.ndarray:
        """Mono int16 samples for params"""
        num_samples = int(params.duration * self.sample_rate)
        t = np.linspace(0, params.duration, num_samples, dtype=np.float32)

        # Frequency with pitch bend
        freq = params.frequency
        if params.pitch_bend != 0:
            freq = freq * np.power(2, params.pitch_bend * t / 12)

        # Vibrato
        if params.vibrato_freq > 0 and params.vibrato_depth > 0:
            vibrato = params.vibrato_depth * np.sin(2 * np.pi * params.vibrato_freq * t)
            freq = freq * np.power(2, vibrato / 12)

        if isinstance(freq, np.ndarray):
            phase = np.cumsum(freq / self.sample_rate) * 2 * np.pi
        else:
            phase = 2 * np.pi * freq * t

        samples = self._generate_wave(phase, params.wave_type)

        if params.noise_mix > 0:
            noise = self.rng.uniform(-1, 1, num_samples).astype(np.float32)
            samples = samples * (1 - params.noise_mix) + noise * params.noise_mix

        samples = samples * self.envelope(params, num_samples) * params.volume
        samples = np.clip(samples, -1, 1)

        return (samples * 32767).astype(np.int16)

    def generate(self, params: SoundParams) -> pygame.mixer.Sound:
        """Sound for params; needs an initialized mixer"""
        if params in self._cache:
            return self._cache[params]

        samples = self.synthesize(params)
        if AUDIO_CHANNELS == 2:
            sound = pygame.sndarray.make_sound(np.column_stack((samples, samples)))
        else:
            sound = pygame.sndarray.make_sound(samples)

        self._cache[params] = sound
        return sound

    def _generate_wave(self, phase: np.ndarray, wave_type: WaveType) -> np.ndarray:
        if wave_type == WaveType.SINE:
            return np.sin(phase)

        elif wave_type == WaveType.SQUARE:
            return np.sign(np.sin(phase))

        elif wave_type == WaveType.SAWTOOTH:
            return 2 * (phase / (2 * np.pi) % 1) - 1

        elif wave_type == WaveType.TRIANGLE:
            return 2 * np.abs(2 * (phase / (2 * np.pi) % 1) - 1) - 1

        elif wave_type == WaveType.NOISE:
            return self.rng.uniform(-1, 1, len(phase)).astype(np.float32)

        return np.zeros_like(phase)

    def envelope(self, params: SoundParams, num_samples: int) -> np.ndarray:
        """ADSR envelope, compressed proportionally when the sound is short"""
        envelope = np.zeros(num_samples, dtype=np.float32)

        attack_samples = int(params.attack * self.sample_rate)
        decay_samples = int(params.decay * self.sample_rate)
        release_samples = int(params.release * self.sample_rate)
        sustain_samples = num_samples - attack_samples - decay_samples - release_samples

        if sustain_samples < 0:
            total = attack_samples + decay_samples + release_samples
            ratio = num_samples / total if total > 0 else 1
            attack_samples = int(attack_samples * ratio)
            decay_samples = int(decay_samples * ratio)
            release_samples = num_samples - attack_samples - decay_samples
            sustain_samples = 0

        idx = 0

        # Attack
        if attack_samples > 0:
            envelope[idx:idx + attack_samples] = np.linspace(0, 1, attack_samples)
            idx += attack_samples

        # Decay
        if decay_samples > 0:
            envelope[idx:idx + decay_samples] = np.linspace(1, params.sustain, decay_samples)
            idx += decay_samples

        # Sustain
        if sustain_samples > 0:
            envelope[idx:idx + sustain_samples] = params.sustain
            idx += sustain_samples

        # Release
        if release_samples > 0:
            start_val = envelope[idx - 1] if idx > 0 else params.sustain
            envelope[idx:] = np.linspace(start_val, 0, len(envelope) - idx)

        return envelope


# Named sound effects
SFX_PARAMS: Dict[str, SoundParams] = {
    # Normal hit - quick, snappy
    'hit': SoundParams(
        frequency=150, duration=0.12, volume=0.5, wave_type=WaveType.NOISE,
        attack=0.001, decay=0.03, sustain=0.4, release=0.08, pitch_bend=-40
    ),
    # Special hit - dramatic
    'special': SoundParams(
        frequency=300, duration=0.3, volume=0.6, wave_type=WaveType.SAWTOOTH,
        attack=0.01, decay=0.05, sustain=0.6, release=0.2, pitch_bend=20,
        vibrato_freq=10, vibrato_depth=2, noise_mix=0.2
    ),
    'jump': SoundParams(
        frequency=300, duration=0.1, volume=0.25, wave_type=WaveType.SINE,
        attack=0.005, decay=0.02, sustain=0.3, release=0.07, pitch_bend=80
    ),
    'ko': SoundParams(
        frequency=150, duration=0.6, volume=0.7, wave_type=WaveType.SAWTOOTH,
        attack=0.005, decay=0.1, sustain=0.5, release=0.4, pitch_bend=-20,
        noise_mix=0.3
    ),
    'menu_select': SoundParams(
        frequency=600, duration=0.08, volume=0.35, wave_type=WaveType.SQUARE,
        attack=0.005, decay=0.02, sustain=0.5, release=0.05, pitch_bend=30
    ),
    'menu_move': SoundParams(
        frequency=400, duration=0.05, volume=0.3, wave_type=WaveType.SINE,
        attack=0.005, decay=0.01, sustain=0.4, release=0.035
    ),
}


class ProceduralSFX:
    """
    Pre-generated sound effects for the fight.
    """

    def __init__(self, generator: Optional[SoundGenerator] = None):
        self.generator = generator or SoundGenerator()
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._generate_all()

    def _generate_all(self):
        for name, params in SFX_PARAMS.items():
            self._sounds[name] = self.generator.generate(params)

    def get(self, name: str) -> Optional[pygame.mixer.Sound]:
        """Get sound by name"""
        return self._sounds.get(name)
