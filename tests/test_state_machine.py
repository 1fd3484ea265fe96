from stickman_fighter.config import GameStatus
from stickman_fighter.core.state_machine import StateMachine, TRANSITIONS


def test_starts_in_menu():
    sm = StateMachine()
    assert sm.is_state(GameStatus.MENU)
    assert sm.previous_state is None


def test_allowed_and_rejected_transitions():
    sm = StateMachine()
    assert not sm.transition_to(GameStatus.PLAYING)
    assert sm.is_state(GameStatus.MENU)

    assert sm.transition_to(GameStatus.MODE_SELECT)
    assert sm.transition_to(GameStatus.PLAYING)
    assert sm.previous_state == GameStatus.MODE_SELECT
    assert not sm.transition_to(GameStatus.MENU)
    assert sm.transition_to(GameStatus.GAME_OVER)
    assert sm.transition_to(GameStatus.PLAYING)


def test_every_status_has_a_way_out():
    for status in GameStatus:
        assert TRANSITIONS[status]


def test_handlers_run_in_order():
    calls = []
    sm = StateMachine()
    sm.register_handlers(GameStatus.MODE_SELECT,
                         enter=lambda: calls.append('enter mode'),
                         exit_handler=lambda: calls.append('exit mode'))
    sm.register_handlers(GameStatus.PLAYING, enter=lambda: calls.append('enter play'))

    sm.transition_to(GameStatus.MODE_SELECT)
    sm.transition_to(GameStatus.PLAYING)

    assert calls == ['enter mode', 'exit mode', 'enter play']


def test_rejected_transition_runs_no_handlers():
    calls = []
    sm = StateMachine()
    sm.register_handlers(GameStatus.MENU, exit_handler=lambda: calls.append('exit'))
    sm.transition_to(GameStatus.GAME_OVER)
    assert calls == []
