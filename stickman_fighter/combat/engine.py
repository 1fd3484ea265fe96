"""
Combat Engine
=============
Block, attack and special resolution, plus atomic damage commit.

Both fighters resolve against the other's pre-tick snapshot. Landed hits
are queued as HitEvents and applied together by commit() once both
fighters have been updated, so the outcome does not depend on which
fighter was updated first.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass

from stickman_fighter.config import (
    PlayerSlot, FighterState,
    ATTACK_RECOVERY_MS, SPECIAL_RECOVERY_MS, SPECIAL_ENERGY_COST
)
from stickman_fighter.fighters.fighter import Fighter
from stickman_fighter.core.input_handler import ControlInput
from stickman_fighter.combat.combo import (
    ComboTracker, normal_hit_damage, special_hit_damage, advance_combo
)
from stickman_fighter.combat.distance import RangeChecker


@dataclass
class HitEvent:
    """A landed hit waiting to be applied to the defender"""
    attacker: PlayerSlot
    defender: PlayerSlot
    damage: float
    is_special: bool = False
    combo_count: int = 0
    timestamp: float = 0


class CombatEngine:
    """
    Turns attack/block/special controls and proximity into state
    transitions and damage.
    """

    def __init__(self):
        self.combo_trackers: Dict[PlayerSlot, ComboTracker] = {
            PlayerSlot.PLAYER_ONE: ComboTracker(),
            PlayerSlot.PLAYER_TWO: ComboTracker(),
        }

    def reset(self):
        """Reset for a new match"""
        for tracker in self.combo_trackers.values():
            tracker.reset()

    def resolve(self, fighter: Fighter, opponent: Fighter,
                controls: ControlInput, now_ms: float) -> List[HitEvent]:
        """
        Resolve this fighter's block/attack/special for one tick.
        `opponent` must be the pre-tick snapshot; it is never mutated.
        """
        events: List[HitEvent] = []

        self._resolve_block(fighter, controls)

        event = self._resolve_attack(fighter, opponent, controls, now_ms)
        if event:
            events.append(event)

        event = self._resolve_special(fighter, opponent, controls, now_ms)
        if event:
            events.append(event)

        return events

    def _resolve_block(self, fighter: Fighter, controls: ControlInput):
        if (controls.block and fighter.block_cooldown == 0 and
                fighter.state != FighterState.ATTACKING):
            fighter.state = FighterState.BLOCKING
        elif fighter.state == FighterState.BLOCKING and not controls.block:
            fighter.state = FighterState.IDLE

    def _resolve_attack(self, fighter: Fighter, opponent: Fighter,
                        controls: ControlInput, now_ms: float) -> Optional[HitEvent]:
        if not controls.attack or fighter.attack_cooldown != 0:
            return None
        if fighter.state == FighterState.HURT:
            return None

        fighter.state = FighterState.ATTACKING
        fighter.attack_cooldown = ATTACK_RECOVERY_MS
        fighter.last_attack_time = now_ms

        if not RangeChecker.is_in_range(fighter, opponent) or opponent.is_blocking:
            return None

        damage = normal_hit_damage(fighter.combo)
        fighter.combo = advance_combo(fighter.combo)
        return HitEvent(
            attacker=fighter.slot,
            defender=opponent.slot,
            damage=damage,
            combo_count=fighter.combo,
            timestamp=now_ms
        )

    def _resolve_special(self, fighter: Fighter, opponent: Fighter,
                         controls: ControlInput, now_ms: float) -> Optional[HitEvent]:
        if not controls.special or fighter.attack_cooldown != 0:
            return None
        if fighter.energy < SPECIAL_ENERGY_COST:
            return None

        fighter.state = FighterState.ATTACKING
        fighter.attack_cooldown = SPECIAL_RECOVERY_MS
        fighter.energy = max(0.0, fighter.energy - SPECIAL_ENERGY_COST)

        # Specials go through block
        if not RangeChecker.is_in_range(fighter, opponent):
            return None

        damage = special_hit_damage(fighter.combo)
        fighter.combo = advance_combo(fighter.combo, is_special=True)
        return HitEvent(
            attacker=fighter.slot,
            defender=opponent.slot,
            damage=damage,
            is_special=True,
            combo_count=fighter.combo,
            timestamp=now_ms
        )

    def commit(self, events: List[HitEvent], fighters: Dict[PlayerSlot, Fighter]):
        """Apply queued hits to their defenders"""
        for event in events:
            defender = fighters[event.defender]
            defender.health = max(0.0, defender.health - event.damage)
            if defender.health <= 0:
                defender.state = FighterState.DEAD
            else:
                defender.state = FighterState.HURT

            self.combo_trackers[event.attacker].add_hit(
                event.damage, event.combo_count, event.is_special)

    def get_stats(self) -> Dict[str, Dict]:
        """Per-player combat statistics"""
        return {slot.value: tracker.get_info()
                for slot, tracker in self.combo_trackers.items()}
