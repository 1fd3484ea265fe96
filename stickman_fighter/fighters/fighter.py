"""
Fighter Entity
==============
Data shape for one combatant. Behavior lives in the resolvers.
"""

from dataclasses import dataclass, replace

from stickman_fighter.config import (
    PlayerSlot, Facing, FighterState,
    DEFAULT_MAX_HEALTH, DEFAULT_MAX_ENERGY, MAX_COMBO
)


class FighterInvariantError(AssertionError):
    """A fighter left its valid state space. Always a programming error."""


@dataclass
class Fighter:
    """
    One combatant.
    Cooldowns and timestamps are in milliseconds of simulation time.
    """
    slot: PlayerSlot
    name: str
    is_ai: bool = False

    # Spatial
    x: float = 0.0
    y: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    facing: Facing = Facing.RIGHT
    is_grounded: bool = True

    # Vitals
    health: float = DEFAULT_MAX_HEALTH
    max_health: float = DEFAULT_MAX_HEALTH
    energy: float = DEFAULT_MAX_ENERGY
    max_energy: float = DEFAULT_MAX_ENERGY

    # Combat bookkeeping
    attack_cooldown: float = 0.0
    block_cooldown: float = 0.0
    combo: int = 0
    last_attack_time: float = 0.0

    state: FighterState = FighterState.IDLE

    @property
    def health_percent(self) -> float:
        """Health as a ratio (0.0 - 1.0)"""
        return self.health / self.max_health

    @property
    def is_dead(self) -> bool:
        return self.state == FighterState.DEAD

    @property
    def is_attacking(self) -> bool:
        return self.state == FighterState.ATTACKING

    @property
    def is_blocking(self) -> bool:
        return self.state == FighterState.BLOCKING

    def snapshot(self) -> 'Fighter':
        """Independent copy, used as the pre-tick view of this fighter"""
        return replace(self)

    def check_invariants(self):
        """Raise FighterInvariantError if the fighter is in an impossible state"""
        if not 0 <= self.health <= self.max_health:
            raise FighterInvariantError(
                f"{self.name}: health {self.health} outside [0, {self.max_health}]")
        if not 0 <= self.energy <= self.max_energy:
            raise FighterInvariantError(
                f"{self.name}: energy {self.energy} outside [0, {self.max_energy}]")
        if not 0 <= self.combo <= MAX_COMBO:
            raise FighterInvariantError(
                f"{self.name}: combo {self.combo} outside [0, {MAX_COMBO}]")
        if self.attack_cooldown < 0 or self.block_cooldown < 0:
            raise FighterInvariantError(f"{self.name}: negative cooldown")
        if not isinstance(self.state, FighterState):
            raise FighterInvariantError(f"{self.name}: unknown state {self.state!r}")
        if (self.state == FighterState.DEAD) != (self.health <= 0):
            raise FighterInvariantError(
                f"{self.name}: state {self.state.value} with health {self.health}")


def create_fighter(slot: PlayerSlot, name: str, x: float, y: float,
                   is_ai: bool = False) -> Fighter:
    """Build a fighter with canonical starting values for its slot"""
    facing = Facing.RIGHT if slot == PlayerSlot.PLAYER_ONE else Facing.LEFT
    return Fighter(slot=slot, name=name, is_ai=is_ai, x=x, y=y, facing=facing)
