"""
Match Controller
================
Owns the match state, runs the per-frame simulation, checks win
conditions, and exposes the intents the menus call.
"""

import copy
import random
from typing import Dict, List, Optional, Union
from dataclasses import dataclass

from stickman_fighter.config import (
    PlayerSlot, GameStatus, GameMode, CONTROL_SCHEMES, START_POSITIONS,
    GROUND_Y, ROUND_TIME, DRAW, DEBUG_INVARIANTS,
    PLAYER_ONE_NAME, PLAYER_TWO_NAME, COMPUTER_NAME
)
from stickman_fighter.fighters.fighter import Fighter, create_fighter
from stickman_fighter.fighters.movement import MovementResolver
from stickman_fighter.combat.engine import CombatEngine, HitEvent
from stickman_fighter.ai.controller import AIController
from stickman_fighter.core.input_handler import InputState, ControlInput
from stickman_fighter.core.state_machine import StateMachine
from stickman_fighter.core.game_loop import GameLoop


@dataclass
class MatchState:
    """Everything the renderer and menus need to know about the match"""
    player1: Fighter
    player2: Fighter
    game_status: GameStatus = GameStatus.MENU
    game_mode: Optional[GameMode] = None
    winner: Optional[str] = None
    round: int = 1
    time_left: float = ROUND_TIME
    elapsed_ms: float = 0.0

    def fighters(self) -> Dict[PlayerSlot, Fighter]:
        return {PlayerSlot.PLAYER_ONE: self.player1,
                PlayerSlot.PLAYER_TWO: self.player2}


def create_fighters(mode: GameMode):
    """Both fighters at their starting marks for the given mode"""
    is_ai = mode == GameMode.SINGLE_PLAYER
    player1 = create_fighter(PlayerSlot.PLAYER_ONE, PLAYER_ONE_NAME,
                             START_POSITIONS[PlayerSlot.PLAYER_ONE], GROUND_Y)
    player2 = create_fighter(PlayerSlot.PLAYER_TWO,
                             COMPUTER_NAME if is_ai else PLAYER_TWO_NAME,
                             START_POSITIONS[PlayerSlot.PLAYER_TWO], GROUND_Y,
                             is_ai=is_ai)
    return player1, player2


class MatchController:
    """
    Game status state machine plus the simulation tick.

    Fighter one is updated before fighter two, each against the other's
    pre-tick snapshot. Hits are committed after both updates.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

        self.movement = MovementResolver()
        self.combat_engine = CombatEngine()
        self.ai_controller = AIController(self.rng)

        player1, player2 = create_fighters(GameMode.SINGLE_PLAYER)
        self.state = MatchState(player1=player1, player2=player2)

        self.loop = GameLoop(self.advance)
        self.state_machine = StateMachine(GameStatus.MENU)
        self.state_machine.register_handlers(
            GameStatus.PLAYING,
            enter=self.loop.start,
            exit_handler=self.loop.stop
        )

        # Hits committed during the most recent tick
        self.last_events: List[HitEvent] = []

    # =========================================================================
    # STATUS
    # =========================================================================

    @property
    def game_status(self) -> GameStatus:
        return self.state.game_status

    @property
    def game_mode(self) -> Optional[GameMode]:
        return self.state.game_mode

    @property
    def winner(self) -> Optional[str]:
        return self.state.winner

    def _transition(self, status: GameStatus) -> bool:
        if not self.state_machine.transition_to(status):
            return False
        self.state.game_status = status
        return True

    # =========================================================================
    # INTENTS
    # =========================================================================

    def start_match(self) -> bool:
        """Menu (or game over) -> mode select"""
        if self.state_machine.is_state(GameStatus.GAME_OVER):
            if not self._transition(GameStatus.MODE_SELECT):
                return False
            self.state.winner = None
            return True
        return self._transition(GameStatus.MODE_SELECT)

    def select_mode(self, mode: Union[GameMode, str]) -> bool:
        """Mode select -> playing with fresh fighters"""
        mode = GameMode(mode)
        if not self.state_machine.is_state(GameStatus.MODE_SELECT):
            return False
        self._new_fight(mode, round_number=1)
        return self._transition(GameStatus.PLAYING)

    def reset_to_menu(self) -> bool:
        """Back to the title screen, forgetting mode and winner"""
        if not self._transition(GameStatus.MENU):
            return False
        self.state.game_mode = None
        self.state.winner = None
        return True

    def restart_current_mode(self) -> bool:
        """Rematch in the same mode from game over or pause"""
        mode = self.state.game_mode
        if mode is None:
            return False
        if not self.state_machine.is_state(GameStatus.GAME_OVER) and \
                not self.state_machine.is_state(GameStatus.PAUSED):
            return False
        self._new_fight(mode, round_number=self.state.round + 1)
        return self._transition(GameStatus.PLAYING)

    def toggle_pause(self) -> bool:
        if self.state_machine.is_state(GameStatus.PLAYING):
            return self._transition(GameStatus.PAUSED)
        if self.state_machine.is_state(GameStatus.PAUSED):
            return self._transition(GameStatus.PLAYING)
        return False

    def _new_fight(self, mode: GameMode, round_number: int):
        player1, player2 = create_fighters(mode)
        self.state.player1 = player1
        self.state.player2 = player2
        self.state.game_mode = mode
        self.state.winner = None
        self.state.round = round_number
        self.state.time_left = ROUND_TIME
        self.state.elapsed_ms = 0.0

        self.ai_controller.reset()
        self.combat_engine.reset()
        self.last_events = []

    # =========================================================================
    # FRAME
    # =========================================================================

    def request_frame(self) -> Optional[int]:
        return self.loop.request_frame()

    def frame(self, now_ms: float, input_state: InputState,
              token: Optional[int] = None) -> bool:
        """Host entry point: one animation frame at host time now_ms"""
        return self.loop.tick(now_ms, input_state, token=token)

    def advance(self, delta_ms: float, input_state: InputState):
        """One simulation tick of delta_ms milliseconds"""
        if not self.state_machine.is_state(GameStatus.PLAYING):
            return

        self.state.elapsed_ms += delta_ms
        now_ms = self.state.elapsed_ms

        player1, player2 = self.state.player1, self.state.player2
        pre1, pre2 = player1.snapshot(), player2.snapshot()

        # Input is read once, before anyone moves
        keys1 = self._gather_keys(pre1, pre2, input_state, now_ms)
        keys2 = self._gather_keys(pre2, pre1, input_state, now_ms)

        events = self._update_fighter(player1, pre2, keys1, delta_ms, now_ms)
        events += self._update_fighter(player2, pre1, keys2, delta_ms, now_ms)

        self.combat_engine.commit(events, self.state.fighters())
        self.last_events = events

        if DEBUG_INVARIANTS:
            player1.check_invariants()
            player2.check_invariants()

        self._check_win_conditions(delta_ms)

    def _gather_keys(self, fighter: Fighter, opponent: Fighter,
                     input_state: InputState, now_ms: float):
        if fighter.is_ai and self.state.game_mode == GameMode.SINGLE_PLAYER:
            return self.ai_controller.get_keys(fighter, opponent, now_ms)
        return input_state.keys

    def _update_fighter(self, fighter: Fighter, opponent: Fighter, keys,
                        delta_ms: float, now_ms: float) -> List[HitEvent]:
        # A dead fighter stays exactly where and how it fell
        if fighter.is_dead:
            return []

        controls = ControlInput.from_keys(keys, CONTROL_SCHEMES[fighter.slot])

        self.movement.decay_timers(fighter, delta_ms, now_ms)
        self.movement.apply_input(fighter, controls)
        events = self.combat_engine.resolve(fighter, opponent, controls, now_ms)
        self.movement.integrate(fighter)
        self.movement.regenerate(fighter)
        self.movement.settle_state(fighter)
        return events

    def _check_win_conditions(self, delta_ms: float):
        player1, player2 = self.state.player1, self.state.player2
        winner = None

        if player1.health <= 0 and player2.health <= 0:
            winner = DRAW
        elif player1.health <= 0:
            winner = player2.name
        elif player2.health <= 0:
            winner = player1.name
        else:
            self.state.time_left = max(0.0, self.state.time_left - delta_ms / 1000.0)
            if self.state.time_left <= 0:
                if player1.health > player2.health:
                    winner = player1.name
                elif player2.health > player1.health:
                    winner = player2.name
                else:
                    winner = DRAW

        if winner is not None:
            self.state.winner = winner
            self._transition(GameStatus.GAME_OVER)

    # =========================================================================
    # PUBLISHING
    # =========================================================================

    def snapshot(self) -> MatchState:
        """Read-only copy for renderers"""
        return copy.deepcopy(self.state)

    def get_stats(self) -> Dict[str, Dict]:
        return self.combat_engine.get_stats()
