import numpy as np
import pytest

from stickman_fighter.config import PlayerSlot, GROUND_Y
from stickman_fighter.fighters.fighter import create_fighter
from stickman_fighter.combat.engine import HitEvent
from stickman_fighter.audio.generator import (
    SoundGenerator, SoundParams, WaveType, SFX_PARAMS
)
from stickman_fighter.audio.sound_manager import SoundManager, sounds_for_hits


def make_generator():
    return SoundGenerator(sample_rate=8000, rng=np.random.default_rng(0))


def test_synthesize_shape_and_range():
    samples = make_generator().synthesize(SFX_PARAMS['hit'])
    assert samples.dtype == np.int16
    assert len(samples) == int(SFX_PARAMS['hit'].duration * 8000)
    assert np.abs(samples.astype(np.int32)).max() <= 32767


def test_envelope_starts_and_ends_silent():
    generator = make_generator()
    params = SoundParams(duration=0.5, attack=0.05, decay=0.05, sustain=0.5, release=0.1)
    envelope = generator.envelope(params, 4000)

    assert envelope[0] == 0
    assert envelope[-1] == pytest.approx(0)
    assert envelope.max() == pytest.approx(1)
    assert envelope[2000] == pytest.approx(0.5)


def test_short_sound_compresses_envelope():
    generator = make_generator()
    params = SoundParams(duration=0.01, attack=0.1, decay=0.1, release=0.1)
    envelope = generator.envelope(params, 80)
    assert len(envelope) == 80
    assert envelope[-1] == pytest.approx(0)


def test_noise_is_seeded():
    params = SoundParams(wave_type=WaveType.NOISE, duration=0.05)
    first = make_generator().synthesize(params)
    second = make_generator().synthesize(params)
    assert np.array_equal(first, second)


def test_every_effect_synthesizes():
    generator = make_generator()
    for name in ('hit', 'special', 'ko', 'jump', 'menu_select'):
        assert len(generator.synthesize(SFX_PARAMS[name])) > 0


def test_sounds_for_hits():
    p1 = create_fighter(PlayerSlot.PLAYER_ONE, "Player 1", 100, GROUND_Y)
    p2 = create_fighter(PlayerSlot.PLAYER_TWO, "Player 2", 140, GROUND_Y)
    fighters = {p1.slot: p1, p2.slot: p2}
    events = [
        HitEvent(attacker=p1.slot, defender=p2.slot, damage=15),
        HitEvent(attacker=p2.slot, defender=p1.slot, damage=25, is_special=True),
    ]

    assert sounds_for_hits(events, fighters) == ['hit', 'special']

    p2.health = 0
    assert sounds_for_hits(events, fighters) == ['hit', 'special', 'ko']
    assert sounds_for_hits([], fighters) == []


def test_disabled_manager_is_silent():
    manager = SoundManager(enabled=False)
    assert not manager.initialized
    assert manager.play('hit') is None
    assert manager.toggle_mute()
    manager.cleanup()
