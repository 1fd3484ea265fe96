"""
AI Decision Rules
=================
Rule-based action selection for the computer opponent.
"""

import random
from typing import Tuple
from dataclasses import dataclass

from stickman_fighter.config import (
    AIAction, FighterState, SPECIAL_ENERGY_COST,
    AI_INITIAL_REACTION_MIN, AI_INITIAL_REACTION_MAX,
    AI_INITIAL_AGGRESSIVENESS,
    AI_BASE_AGGRESSION, AI_OWN_WOUND_WEIGHT, AI_OPPONENT_WOUND_WEIGHT,
    AI_FAR_DISTANCE, AI_CLOSE_DISTANCE, AI_STRIKE_DISTANCE, AI_MEDIUM_DISTANCE,
    AI_BLOCK_CHANCE, AI_SPECIAL_CHANCE, AI_JUMP_CHANCE
)
from stickman_fighter.combat.distance import RangeChecker


@dataclass
class AIDecisionState:
    """Decision memory for one AI-controlled fighter. Times in ms."""
    last_decision_time: float = 0.0
    current_action: AIAction = AIAction.IDLE
    action_duration: float = 0.0
    reaction_time: float = AI_INITIAL_REACTION_MIN
    aggressiveness: float = AI_INITIAL_AGGRESSIVENESS


def create_decision_state(rng: random.Random) -> AIDecisionState:
    """Fresh decision state with a jittered first reaction"""
    return AIDecisionState(
        reaction_time=rng.uniform(AI_INITIAL_REACTION_MIN, AI_INITIAL_REACTION_MAX)
    )


def compute_aggressiveness(own_health_ratio: float,
                           opponent_health_ratio: float) -> float:
    """A wounded AI, or one whose opponent is wounded, presses harder"""
    return (AI_BASE_AGGRESSION +
            AI_OWN_WOUND_WEIGHT * (1 - own_health_ratio) +
            AI_OPPONENT_WOUND_WEIGHT * (1 - opponent_health_ratio))


def decide_action(fighter, opponent, aggressiveness: float,
                  rng: random.Random) -> Tuple[AIAction, float]:
    """
    Pick the next action and how long to hold it (ms).
    Rules are checked in order; the first match wins.
    """
    distance = RangeChecker.get_distance(fighter.x, opponent.x)

    # Too far: close in
    if distance > AI_FAR_DISTANCE:
        return (AIAction.APPROACH, rng.uniform(500, 1000))

    # Point blank and the opponent is swinging
    if distance < AI_CLOSE_DISTANCE and opponent.state == FighterState.ATTACKING:
        if rng.random() < AI_BLOCK_CHANCE:
            action = AIAction.BLOCK
        else:
            action = AIAction.RETREAT
        return (action, rng.uniform(300, 500))

    # Strike range
    if distance < AI_STRIKE_DISTANCE and fighter.attack_cooldown == 0:
        if rng.random() < aggressiveness:
            if fighter.energy >= SPECIAL_ENERGY_COST and rng.random() < AI_SPECIAL_CHANCE:
                return (AIAction.SPECIAL, 200)
            return (AIAction.ATTACK, 200)
        return (AIAction.BLOCK, 400)

    # Medium range: mix in jump-ins
    if AI_STRIKE_DISTANCE <= distance < AI_MEDIUM_DISTANCE:
        if rng.random() < AI_JUMP_CHANCE and fighter.is_grounded:
            return (AIAction.JUMP, 300)
        return (AIAction.APPROACH, 400)

    return (AIAction.APPROACH, 300)
