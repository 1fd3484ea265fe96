"""
Combat System Module
"""

from stickman_fighter.combat.engine import CombatEngine, HitEvent
from stickman_fighter.combat.combo import (
    ComboTracker, normal_hit_damage, special_hit_damage, advance_combo, get_combo_label
)
from stickman_fighter.combat.distance import RangeChecker

__all__ = [
    'CombatEngine', 'HitEvent', 'ComboTracker', 'RangeChecker',
    'normal_hit_damage', 'special_hit_damage', 'advance_combo', 'get_combo_label'
]
