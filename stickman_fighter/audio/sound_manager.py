"""
Sound Manager
=============
Plays the procedural effects for hits, knockouts and menus.
"""

import pygame
from typing import Dict, Iterable, List, Optional
from enum import Enum

from stickman_fighter.config import (
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, MASTER_VOLUME, SFX_VOLUME
)
from stickman_fighter.audio.generator import ProceduralSFX


class SoundChannel(Enum):
    """Channel groups for different sound types"""
    MASTER = "master"
    SFX = "sfx"
    UI = "ui"


def sounds_for_hits(events: Iterable, fighters: Dict) -> List[str]:
    """Sound names for the hits committed in one tick"""
    names = []
    knocked_out = False
    for event in events:
        names.append('special' if event.is_special else 'hit')
        if fighters[event.defender].health <= 0:
            knocked_out = True
    if knocked_out:
        names.append('ko')
    return names


class SoundManager:
    """
    Owns the mixer channels and the generated effects.
    """

    def __init__(self, enabled: bool = AUDIO_ENABLED):
        self.enabled = enabled
        self.initialized = False

        self.volumes: Dict[SoundChannel, float] = {
            SoundChannel.MASTER: MASTER_VOLUME,
            SoundChannel.SFX: SFX_VOLUME,
            SoundChannel.UI: 0.7,
        }
        self.muted = False

        self._channels: Dict[SoundChannel, List[pygame.mixer.Channel]] = {}
        self._channel_index: Dict[SoundChannel, int] = {}

        self._sfx: Optional[ProceduralSFX] = None

        if self.enabled:
            self._init_audio()

    def _init_audio(self):
        """Initialize pygame audio"""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.pre_init(
                    frequency=AUDIO_SAMPLE_RATE,
                    size=-16,
                    channels=AUDIO_CHANNELS,
                    buffer=AUDIO_BUFFER_SIZE
                )
                pygame.mixer.init()

            channel_allocation = {
                SoundChannel.SFX: 6,
                SoundChannel.UI: 2,
            }
            pygame.mixer.set_num_channels(sum(channel_allocation.values()))

            idx = 0
            for channel_type, count in channel_allocation.items():
                self._channels[channel_type] = []
                self._channel_index[channel_type] = 0
                for _ in range(count):
                    self._channels[channel_type].append(pygame.mixer.Channel(idx))
                    idx += 1

            self._sfx = ProceduralSFX()

            self.initialized = True
            print("[Audio] Sound manager initialized")

        except pygame.error as e:
            # No audio device; the game runs silently
            print(f"[Audio] Failed to initialize: {e}")
            self.enabled = False
            self.initialized = False

    def play(self, sound_name: str, channel_type: SoundChannel = SoundChannel.SFX,
             volume: float = 1.0) -> Optional[pygame.mixer.Channel]:
        """Play a named effect on the next channel of its group"""
        if not self.enabled or not self.initialized or self.muted:
            return None

        sound = self._sfx.get(sound_name)
        if not sound:
            return None

        channel = self._get_channel(channel_type)
        if not channel:
            return None

        sound.set_volume(self._calculate_volume(channel_type, volume))
        channel.play(sound)
        return channel

    def play_hits(self, events: Iterable, fighters: Dict):
        for name in sounds_for_hits(events, fighters):
            self.play(name, SoundChannel.SFX)

    def play_ui(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        return self.play(sound_name, SoundChannel.UI)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def _get_channel(self, channel_type: SoundChannel) -> Optional[pygame.mixer.Channel]:
        channels = self._channels.get(channel_type, [])
        if not channels:
            return None

        # Round-robin selection
        idx = self._channel_index.get(channel_type, 0)
        self._channel_index[channel_type] = idx + 1
        return channels[idx % len(channels)]

    def _calculate_volume(self, channel_type: SoundChannel, volume: float) -> float:
        master = self.volumes.get(SoundChannel.MASTER, 1.0)
        return master * self.volumes.get(channel_type, 1.0) * volume

    def cleanup(self):
        """Cleanup audio resources"""
        if self.initialized:
            pygame.mixer.stop()
            pygame.mixer.quit()
            self.initialized = False
            print("[Audio] Sound manager cleaned up")
