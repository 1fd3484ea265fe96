"""
State Machine for game flow management
"""

from typing import Dict, Optional, Callable, FrozenSet

from stickman_fighter.config import GameStatus


# Allowed transitions between top-level statuses
TRANSITIONS: Dict[GameStatus, FrozenSet[GameStatus]] = {
    GameStatus.MENU: frozenset({GameStatus.MODE_SELECT}),
    GameStatus.MODE_SELECT: frozenset({GameStatus.PLAYING, GameStatus.MENU}),
    GameStatus.PLAYING: frozenset({GameStatus.PAUSED, GameStatus.GAME_OVER}),
    GameStatus.PAUSED: frozenset({GameStatus.PLAYING, GameStatus.MENU}),
    GameStatus.GAME_OVER: frozenset({
        GameStatus.PLAYING, GameStatus.MODE_SELECT, GameStatus.MENU
    }),
}


class StateMachine:
    """
    Manages game status and transitions.
    Enter/exit handlers run synchronously inside transition_to().
    """

    def __init__(self, initial: GameStatus = GameStatus.MENU):
        self.current_state: GameStatus = initial
        self.previous_state: Optional[GameStatus] = None

        # State handlers
        self._enter_handlers: Dict[GameStatus, Callable] = {}
        self._exit_handlers: Dict[GameStatus, Callable] = {}

    def register_handlers(
        self,
        state: GameStatus,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None
    ):
        """Register handlers for a state"""
        if enter:
            self._enter_handlers[state] = enter
        if exit_handler:
            self._exit_handlers[state] = exit_handler

    def can_transition(self, new_state: GameStatus) -> bool:
        return new_state in TRANSITIONS.get(self.current_state, frozenset())

    def transition_to(self, new_state: GameStatus) -> bool:
        """
        Transition to a new state.
        Calls exit handler on current state, then enter handler on new state.
        Returns False if the transition is not allowed.
        """
        if not self.can_transition(new_state):
            return False

        # Exit current state
        if self.current_state in self._exit_handlers:
            self._exit_handlers[self.current_state]()

        # Update state
        self.previous_state = self.current_state
        self.current_state = new_state

        # Enter new state
        if new_state in self._enter_handlers:
            self._enter_handlers[new_state]()

        return True

    def is_state(self, state: GameStatus) -> bool:
        """Check if current state matches"""
        return self.current_state == state
