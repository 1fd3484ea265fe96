"""
Fighter System Module
"""

from stickman_fighter.fighters.fighter import Fighter, FighterInvariantError, create_fighter
from stickman_fighter.fighters.movement import MovementResolver

__all__ = ['Fighter', 'FighterInvariantError', 'create_fighter', 'MovementResolver']
