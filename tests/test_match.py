import random

import pytest

from stickman_fighter.config import (
    GameStatus, GameMode, FighterState, AIAction, ROUND_TIME, DRAW
)
from stickman_fighter.core.input_handler import InputState
from stickman_fighter.core.match import MatchController

TICK = 1000 / 60
NO_INPUT = InputState()


def held(*keys):
    return InputState(frozenset(keys))


def run_ticks(controller, count, input_state=NO_INPUT):
    for _ in range(count):
        controller.advance(TICK, input_state)


def put_in_range(controller, x1=100, x2=140):
    controller.state.player1.x = x1
    controller.state.player2.x = x2


# -- status flow ------------------------------------------------------------

def test_fresh_controller_is_in_menu():
    controller = MatchController()
    assert controller.game_status == GameStatus.MENU
    assert controller.game_mode is None
    assert controller.winner is None


def test_menu_to_playing():
    controller = MatchController()
    assert controller.start_match()
    assert controller.game_status == GameStatus.MODE_SELECT
    assert controller.select_mode("twoPlayer")
    assert controller.game_status == GameStatus.PLAYING
    assert controller.game_mode == GameMode.TWO_PLAYER
    assert controller.state.round == 1
    assert controller.state.time_left == ROUND_TIME


def test_select_mode_outside_mode_select_is_ignored():
    controller = MatchController()
    assert not controller.select_mode(GameMode.SINGLE_PLAYER)
    assert controller.game_status == GameStatus.MENU


def test_unknown_mode_is_rejected():
    controller = MatchController()
    controller.start_match()
    with pytest.raises(ValueError):
        controller.select_mode("threePlayer")


def test_single_player_fighters(single_player_match):
    p1, p2 = single_player_match.state.player1, single_player_match.state.player2
    assert p1.name == "Player 1" and not p1.is_ai
    assert p2.name == "Computer" and p2.is_ai
    assert (p1.x, p2.x) == (150, 650)


def test_two_player_fighters(two_player_match):
    p2 = two_player_match.state.player2
    assert p2.name == "Player 2"
    assert not p2.is_ai


def test_pause_and_resume(two_player_match):
    controller = two_player_match
    controller.frame(0, NO_INPUT)
    controller.frame(100, NO_INPUT)
    elapsed = controller.state.elapsed_ms

    assert controller.toggle_pause()
    assert controller.game_status == GameStatus.PAUSED
    assert not controller.frame(200, held('d'))
    assert controller.state.elapsed_ms == elapsed

    assert controller.toggle_pause()
    assert controller.game_status == GameStatus.PLAYING
    # First frame after resuming has zero delta
    controller.frame(5000, NO_INPUT)
    assert controller.state.elapsed_ms == elapsed


def test_toggle_pause_outside_a_fight():
    controller = MatchController()
    assert not controller.toggle_pause()
    assert controller.game_status == GameStatus.MENU


def test_restart_from_pause_bumps_round(two_player_match):
    controller = two_player_match
    controller.state.player1.health = 30
    controller.toggle_pause()

    assert controller.restart_current_mode()
    assert controller.game_status == GameStatus.PLAYING
    assert controller.state.round == 2
    assert controller.state.player1.health == 100


def test_restart_needs_a_finished_or_paused_fight(two_player_match):
    assert not two_player_match.restart_current_mode()
    assert not MatchController().restart_current_mode()


def test_reset_to_menu_clears_mode(two_player_match):
    controller = two_player_match
    controller.toggle_pause()
    assert controller.reset_to_menu()
    assert controller.game_status == GameStatus.MENU
    assert controller.game_mode is None
    assert controller.winner is None


def test_stale_frame_token_after_pause(two_player_match):
    controller = two_player_match
    token = controller.request_frame()
    controller.toggle_pause()
    controller.toggle_pause()
    assert not controller.frame(100, NO_INPUT, token=token)
    assert controller.frame(100, NO_INPUT, token=controller.request_frame())


# -- simulation -------------------------------------------------------------

def test_ai_approaches_within_first_decision_cycle(single_player_match):
    controller = single_player_match
    start_x = controller.state.player2.x

    run_ticks(controller, 40)

    assert controller.ai_controller.state.current_action == AIAction.APPROACH
    assert controller.state.player2.x < start_x
    assert controller.state.player1.x == 150


def test_ai_ignores_keyboard_in_single_player(single_player_match):
    controller = single_player_match
    controller.ai_controller.state.reaction_time = 10 ** 9
    run_ticks(controller, 5, held('arrowleft'))
    assert controller.state.player2.x == 650


def test_second_player_moves_with_arrows_in_versus(two_player_match):
    controller = two_player_match
    run_ticks(controller, 3, held('arrowleft'))
    assert controller.state.player2.x == 635


def test_basic_hit_lands(two_player_match):
    controller = two_player_match
    put_in_range(controller)

    controller.advance(TICK, held('f'))

    p1, p2 = controller.state.player1, controller.state.player2
    assert p2.health == 85
    assert p2.state == FighterState.HURT
    assert p1.combo == 1
    assert p1.state == FighterState.ATTACKING
    assert [e.damage for e in controller.last_events] == [15]


def test_blocked_attack_deals_nothing(two_player_match):
    controller = two_player_match
    put_in_range(controller)
    controller.advance(TICK, held('l'))
    assert controller.state.player2.state == FighterState.BLOCKING

    controller.advance(TICK, held('f', 'l'))
    assert controller.state.player2.health == 100


def test_hits_resolve_against_pre_tick_state(two_player_match):
    controller = two_player_match
    put_in_range(controller)

    controller.advance(TICK, held('f', 'k'))

    # Both swings land even though player one was updated first
    assert controller.state.player1.health == 85
    assert controller.state.player2.health == 85


def test_timer_runs_down(two_player_match):
    controller = two_player_match
    run_ticks(controller, 60)
    assert controller.state.time_left == pytest.approx(ROUND_TIME - 1)


def test_timer_expiry_awards_higher_health(two_player_match):
    controller = two_player_match
    controller.state.player1.health = 60
    controller.state.player2.health = 40
    controller.state.time_left = 0.01

    controller.advance(TICK, NO_INPUT)

    assert controller.state.time_left == 0
    assert controller.winner == "Player 1"
    assert controller.game_status == GameStatus.GAME_OVER


def test_timer_expiry_with_equal_health_is_a_draw(two_player_match):
    controller = two_player_match
    controller.state.time_left = 0.01
    controller.advance(TICK, NO_INPUT)
    assert controller.winner == DRAW


def test_knockout_wins_and_stops_the_clock(two_player_match):
    controller = two_player_match
    put_in_range(controller)
    controller.state.player2.health = 10

    controller.advance(TICK, held('f'))

    assert controller.winner == "Player 1"
    assert controller.state.player2.state == FighterState.DEAD
    assert controller.state.time_left == ROUND_TIME
    assert controller.game_status == GameStatus.GAME_OVER


def test_simultaneous_knockout_is_a_draw(two_player_match):
    controller = two_player_match
    put_in_range(controller)
    controller.state.player1.health = 10
    controller.state.player2.health = 10

    controller.advance(TICK, held('f', 'k'))

    assert controller.state.player1.health == 0
    assert controller.state.player2.health == 0
    assert controller.winner == DRAW
    assert controller.game_status == GameStatus.GAME_OVER


def test_nothing_moves_after_game_over(two_player_match):
    controller = two_player_match
    controller.frame(0, NO_INPUT)
    put_in_range(controller)
    controller.state.player2.health = 10
    controller.frame(16, held('f'))
    assert controller.game_status == GameStatus.GAME_OVER

    before = controller.snapshot()
    assert not controller.frame(32, held('f', 'a', 'arrowright'))
    controller.advance(TICK, held('f', 'a'))
    after = controller.snapshot()

    assert after.player1 == before.player1
    assert after.player2 == before.player2
    assert after.elapsed_ms == before.elapsed_ms


def test_fight_again_after_game_over(two_player_match):
    controller = two_player_match
    controller.state.time_left = 0.01
    controller.advance(TICK, NO_INPUT)

    assert controller.restart_current_mode()
    assert controller.state.round == 2
    assert controller.winner is None
    assert controller.state.time_left == ROUND_TIME
    assert controller.get_stats()['player1']['hits'] == 0


def test_change_mode_after_game_over(two_player_match):
    controller = two_player_match
    controller.state.time_left = 0.01
    controller.advance(TICK, NO_INPUT)

    assert controller.start_match()
    assert controller.game_status == GameStatus.MODE_SELECT
    assert controller.winner is None
    assert controller.select_mode(GameMode.SINGLE_PLAYER)
    assert controller.state.round == 1


def test_combo_expires_in_simulation_time(two_player_match):
    controller = two_player_match
    put_in_range(controller)
    controller.advance(TICK, held('f'))
    assert controller.state.player1.combo == 1

    run_ticks(controller, 125)
    assert controller.state.player1.combo == 0


def test_late_special_does_not_keep_combo_alive(two_player_match):
    controller = two_player_match
    put_in_range(controller)
    controller.advance(TICK, held('f'))
    run_ticks(controller, 90)
    controller.advance(TICK, held('h'))
    assert controller.state.player1.combo == 3

    # The window still counts from the normal hit near t=0
    run_ticks(controller, 35)
    assert controller.state.player1.combo == 0


def test_late_attack_restarts_combo_window(two_player_match):
    controller = two_player_match
    put_in_range(controller)
    controller.advance(TICK, held('f'))
    run_ticks(controller, 90)
    controller.advance(TICK, held('f'))
    assert controller.state.player1.combo == 2

    run_ticks(controller, 35)
    assert controller.state.player1.combo == 2

    run_ticks(controller, 90)
    assert controller.state.player1.combo == 0


def test_fighters_stay_in_bounds_under_random_input():
    controller = MatchController(rng=random.Random(11))
    controller.start_match()
    controller.select_mode(GameMode.TWO_PLAYER)
    keys = ['a', 'd', 'w', 'f', 'g', 'h', 'arrowleft', 'arrowright',
            'arrowup', 'k', 'l', ';']
    rng = random.Random(5)

    for _ in range(600):
        if controller.game_status != GameStatus.PLAYING:
            break
        pressed = frozenset(k for k in keys if rng.random() < 0.3)
        controller.advance(TICK, InputState(pressed))
        for fighter in controller.state.fighters().values():
            assert 50 <= fighter.x <= 750
            assert fighter.y <= 320
            assert 0 <= fighter.health <= 100
            assert 0 <= fighter.energy <= 100
            assert 0 <= fighter.combo <= 10
