"""
Audio System
============
Sound manager and procedural sound generation.
"""

from stickman_fighter.audio.sound_manager import SoundManager
from stickman_fighter.audio.generator import SoundGenerator, ProceduralSFX

__all__ = [
    'SoundManager',
    'SoundGenerator',
    'ProceduralSFX',
]
