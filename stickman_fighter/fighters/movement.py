"""
Movement Resolver
=================
Per-tick physics for a fighter: timers, walking, jumping, gravity,
arena bounds, ground collision, energy regen, and state settling.
"""

from stickman_fighter.config import (
    Facing, FighterState,
    MOVE_SPEED, JUMP_FORCE, GRAVITY, GROUND_Y,
    ARENA_LEFT, ARENA_RIGHT,
    COMBO_WINDOW_MS, ENERGY_REGEN_PER_TICK,
    ATTACK_STATE_RELEASE_MS, HURT_STATE_RELEASE_MS
)
from stickman_fighter.fighters.fighter import Fighter
from stickman_fighter.core.input_handler import ControlInput


class MovementResolver:
    """
    Applies movement and physics to a fighter in place.
    The match calls the steps in order, with combat resolution
    between apply_input() and integrate().
    """

    def __init__(self, min_x: float = ARENA_LEFT, max_x: float = ARENA_RIGHT,
                 ground_y: float = GROUND_Y):
        self.min_x = min_x
        self.max_x = max_x
        self.ground_y = ground_y

    def decay_timers(self, fighter: Fighter, delta_ms: float, now_ms: float):
        """Cooldown decay and combo expiry"""
        fighter.attack_cooldown = max(0.0, fighter.attack_cooldown - delta_ms)
        fighter.block_cooldown = max(0.0, fighter.block_cooldown - delta_ms)

        if now_ms - fighter.last_attack_time > COMBO_WINDOW_MS:
            fighter.combo = 0

    def apply_input(self, fighter: Fighter, controls: ControlInput):
        """Walking and jumping from held controls"""
        can_walk = fighter.state not in (FighterState.ATTACKING, FighterState.HURT)

        if controls.left and can_walk:
            self._walk(fighter, -1)
        elif controls.right and can_walk:
            self._walk(fighter, 1)
        elif fighter.state == FighterState.WALKING:
            fighter.velocity_x = 0.0
            fighter.state = FighterState.IDLE

        if (controls.up and fighter.is_grounded and
                fighter.state != FighterState.ATTACKING):
            fighter.velocity_y = JUMP_FORCE
            fighter.is_grounded = False
            fighter.state = FighterState.JUMPING

    def _walk(self, fighter: Fighter, direction: int):
        fighter.velocity_x = direction * MOVE_SPEED
        fighter.facing = Facing.RIGHT if direction > 0 else Facing.LEFT
        if fighter.is_grounded:
            fighter.state = FighterState.WALKING

    def integrate(self, fighter: Fighter):
        """Gravity, position update, arena clamp, ground collision"""
        fighter.velocity_y += GRAVITY
        fighter.x += fighter.velocity_x
        fighter.y += fighter.velocity_y

        fighter.x = max(self.min_x, min(self.max_x, fighter.x))

        if fighter.y >= self.ground_y:
            fighter.y = self.ground_y
            fighter.velocity_y = 0.0
            fighter.is_grounded = True
            if fighter.state == FighterState.JUMPING:
                fighter.state = FighterState.IDLE

    def regenerate(self, fighter: Fighter):
        if fighter.energy < fighter.max_energy:
            fighter.energy = min(fighter.max_energy,
                                 fighter.energy + ENERGY_REGEN_PER_TICK)

    def settle_state(self, fighter: Fighter):
        """Terminal transitions; death overrides everything"""
        if (fighter.state == FighterState.ATTACKING and
                fighter.attack_cooldown < ATTACK_STATE_RELEASE_MS):
            fighter.state = FighterState.IDLE

        if (fighter.state == FighterState.HURT and
                fighter.attack_cooldown < HURT_STATE_RELEASE_MS):
            fighter.state = FighterState.IDLE

        if fighter.health <= 0:
            fighter.state = FighterState.DEAD

