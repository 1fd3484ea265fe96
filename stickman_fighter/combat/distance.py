"""
Distance & Range
================
Spatial predicates between two fighters.
"""

from stickman_fighter.config import ATTACK_RANGE, VERTICAL_TOLERANCE


class RangeChecker:
    """
    Utility class for range checking.
    """

    @staticmethod
    def get_distance(x1: float, x2: float) -> float:
        """Horizontal separation"""
        return abs(x2 - x1)

    @staticmethod
    def get_direction(from_x: float, to_x: float) -> int:
        """Direction (-1 left, 1 right, 0 same)"""
        if to_x > from_x:
            return 1
        elif to_x < from_x:
            return -1
        return 0

    @staticmethod
    def is_in_range(attacker, defender,
                    attack_range: float = ATTACK_RANGE,
                    vertical_tolerance: float = VERTICAL_TOLERANCE) -> bool:
        """Whether an attack from attacker can connect with defender"""
        return (abs(attacker.x - defender.x) < attack_range and
                abs(attacker.y - defender.y) < vertical_tolerance)
