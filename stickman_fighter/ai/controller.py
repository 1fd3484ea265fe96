"""
AI Controller
=============
Drives a fighter by synthesizing the same key set a human would hold.
"""

import random
from typing import FrozenSet, Optional, Set

from stickman_fighter.config import (
    AIAction, CONTROL_SCHEMES, AI_REACTION_MIN, AI_REACTION_MAX
)
from stickman_fighter.combat.distance import RangeChecker
from stickman_fighter.ai.decision import (
    AIDecisionState, create_decision_state,
    compute_aggressiveness, decide_action
)


class AIController:
    """
    Decision/execution split for one computer-controlled fighter.

    A new decision is taken once the jittered reaction time has passed
    since the last one. Between decisions the chosen action is replayed
    as virtual key presses until its duration runs out.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.state: AIDecisionState = create_decision_state(self.rng)

    def reset(self):
        """Reset for a new match or mode"""
        self.state = create_decision_state(self.rng)

    def get_keys(self, fighter, opponent, now_ms: float) -> FrozenSet[str]:
        """Virtual held keys for this tick"""
        if now_ms - self.state.last_decision_time > self.state.reaction_time:
            self._decide(fighter, opponent, now_ms)

        if now_ms - self.state.last_decision_time < self.state.action_duration:
            return frozenset(self._synthesize(fighter, opponent))
        return frozenset()

    def _decide(self, fighter, opponent, now_ms: float):
        ai = self.state
        ai.aggressiveness = compute_aggressiveness(
            fighter.health_percent, opponent.health_percent)

        ai.current_action, ai.action_duration = decide_action(
            fighter, opponent, ai.aggressiveness, self.rng)

        ai.last_decision_time = now_ms
        ai.reaction_time = self.rng.uniform(AI_REACTION_MIN, AI_REACTION_MAX)

    def _synthesize(self, fighter, opponent) -> Set[str]:
        """Translate the current action into the fighter's own keys"""
        scheme = CONTROL_SCHEMES[fighter.slot]
        keys: Set[str] = set()

        direction = RangeChecker.get_direction(fighter.x, opponent.x)
        toward = scheme.right if direction > 0 else scheme.left
        away = scheme.left if direction > 0 else scheme.right

        action = self.state.current_action
        if action == AIAction.APPROACH:
            keys.add(toward)
        elif action == AIAction.RETREAT:
            keys.add(away)
        elif action == AIAction.ATTACK:
            keys.add(scheme.attack)
        elif action == AIAction.SPECIAL:
            keys.add(scheme.special)
        elif action == AIAction.BLOCK:
            keys.add(scheme.block)
        elif action == AIAction.JUMP:
            keys.add(scheme.up)
            keys.add(toward)

        return keys
