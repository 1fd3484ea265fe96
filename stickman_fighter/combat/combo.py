"""
Combo System
============
Combo scaling rules and the per-match combo tracker.
"""

from typing import Dict, Any

from stickman_fighter.config import (
    MAX_COMBO,
    ATTACK_DAMAGE, ATTACK_COMBO_BONUS, ATTACK_COMBO_STEP,
    SPECIAL_DAMAGE, SPECIAL_COMBO_BONUS, SPECIAL_COMBO_STEP
)


def normal_hit_damage(combo: int) -> int:
    """Damage of a normal attack landed at the given (pre-hit) combo"""
    return ATTACK_DAMAGE + ATTACK_COMBO_BONUS * combo


def special_hit_damage(combo: int) -> int:
    """Damage of a special attack landed at the given (pre-hit) combo"""
    return SPECIAL_DAMAGE + SPECIAL_COMBO_BONUS * combo


def advance_combo(combo: int, is_special: bool = False) -> int:
    step = SPECIAL_COMBO_STEP if is_special else ATTACK_COMBO_STEP
    return min(combo + step, MAX_COMBO)


def get_combo_label(count: int) -> str:
    """Flavor text for the HUD"""
    if count >= 5:
        return "FURY!"
    elif count >= 3:
        return "COMBO!"
    elif count >= 2:
        return "Nice!"
    return ""


class ComboTracker:
    """
    Tracks landed hits for one fighter across a match.
    """

    def __init__(self):
        self.hits_landed = 0
        self.specials_landed = 0
        self.total_damage = 0.0
        self.best_combo = 0

    def add_hit(self, damage: float, combo_after: int, is_special: bool = False):
        self.hits_landed += 1
        if is_special:
            self.specials_landed += 1
        self.total_damage += damage
        self.best_combo = max(self.best_combo, combo_after)

    def reset(self):
        self.hits_landed = 0
        self.specials_landed = 0
        self.total_damage = 0.0
        self.best_combo = 0

    def get_info(self) -> Dict[str, Any]:
        return {
            'hits': self.hits_landed,
            'specials': self.specials_landed,
            'damage': self.total_damage,
            'best_combo': self.best_combo,
        }
