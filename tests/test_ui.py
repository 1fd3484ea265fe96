import pygame

from stickman_fighter.config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, GameStatus, GameMode, FighterState, PlayerSlot,
    GRASS_GREEN, HEALTH_GREEN, HEALTH_YELLOW, HEALTH_RED, DRAW
)
from stickman_fighter.core.input_handler import InputHandler, InputState
from stickman_fighter.core.match import MatchController
from stickman_fighter.core.game import Game, dispatch_menu_action, started_jump
from stickman_fighter.graphics.renderer import Renderer, fighter_color
from stickman_fighter.ui.hud import HUD, format_time, health_color
from stickman_fighter.ui.manager import UIManager
from stickman_fighter.ui import menu


def press(handler, *keys):
    handler.update()
    for key in keys:
        handler.process_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_format_time():
    assert format_time(99) == "1:39"
    assert format_time(59.5) == "0:59"
    assert format_time(0) == "0:00"


def test_health_color_thresholds():
    assert health_color(0.8) == HEALTH_GREEN
    assert health_color(0.4) == HEALTH_YELLOW
    assert health_color(0.1) == HEALTH_RED


def test_hud_reads_match_state():
    controller = MatchController()
    controller.start_match()
    controller.select_mode(GameMode.SINGLE_PLAYER)
    controller.state.player2.health = 40

    hud = HUD()
    hud.update(controller.snapshot())

    assert hud.timer_text == "1:39"
    assert hud.round_text == "Round 1"
    assert hud.mode_text == "Single Player"
    assert hud.player2_health.name == "Computer"
    assert hud.player2_health.current == 40


def test_menu_navigation_wraps_and_confirms():
    handler = InputHandler()
    modes = menu.ModeSelectMenu()

    press(handler, pygame.K_UP)
    assert modes.update(handler) is None
    assert modes.items[modes.selected_index].action == menu.ACTION_BACK

    press(handler, pygame.K_DOWN)
    modes.update(handler)
    press(handler, pygame.K_RETURN)
    assert modes.update(handler) == menu.ACTION_SINGLE_PLAYER


def test_menu_shortcuts():
    handler = InputHandler()
    press(handler, pygame.K_2)
    assert menu.ModeSelectMenu().update(handler) == menu.ACTION_TWO_PLAYER

    press(handler, pygame.K_ESCAPE)
    assert menu.PauseMenu().update(handler) == menu.ACTION_RESUME


def test_manager_resets_selection_on_status_change():
    handler = InputHandler()
    manager = UIManager()

    press(handler, pygame.K_DOWN)
    manager.update_menu(GameStatus.MODE_SELECT, handler)
    assert manager.mode_select.selected_index == 1

    handler.update()
    manager.update_menu(GameStatus.MENU, handler)
    manager.update_menu(GameStatus.MODE_SELECT, handler)
    assert manager.mode_select.selected_index == 0
    assert manager.update_menu(GameStatus.PLAYING, handler) is None


def test_dispatch_walks_the_whole_flow():
    controller = MatchController()

    assert dispatch_menu_action(controller, menu.ACTION_START)
    assert dispatch_menu_action(controller, menu.ACTION_TWO_PLAYER)
    assert controller.game_status == GameStatus.PLAYING

    controller.toggle_pause()
    assert dispatch_menu_action(controller, menu.ACTION_RESUME)
    assert controller.game_status == GameStatus.PLAYING

    controller.state.time_left = 0.01
    controller.advance(20, InputState())
    assert controller.game_status == GameStatus.GAME_OVER

    assert dispatch_menu_action(controller, menu.ACTION_RESTART)
    assert controller.state.round == 2

    controller.toggle_pause()
    assert dispatch_menu_action(controller, menu.ACTION_MAIN_MENU)
    assert controller.game_status == GameStatus.MENU
    assert not dispatch_menu_action(controller, None)


def test_winner_headline_and_results():
    assert menu.winner_headline(DRAW) == "Draw!"
    assert menu.winner_headline("Computer") == "Computer Wins!"
    assert menu.winner_headline(None) == ""

    controller = MatchController()
    controller.state.player1.health = 55
    lines = menu.GameOverMenu.result_lines(
        controller.snapshot(),
        {'player1': {'best_combo': 3}, 'player2': {'best_combo': 0}})
    assert lines[0] == "Player 1: 55 HP  (best combo 3)"
    assert lines[1].startswith("Computer: 100 HP")


def test_describe_controls_lists_scheme_keys():
    lines = menu.describe_controls(PlayerSlot.PLAYER_TWO)
    assert lines[0] == "Move: Left / Right"
    assert "Special: ;" in lines


def test_fighter_color_follows_state():
    controller = MatchController()
    fighter = controller.state.player1
    base = fighter_color(fighter)
    fighter.state = FighterState.HURT
    assert fighter_color(fighter) != base
    assert fighter_color(fighter) == (255, 0, 0)


def test_started_jump():
    controller = MatchController()
    before = controller.snapshot()
    controller.state.player2.is_grounded = False
    assert started_jump(before, controller.snapshot())
    assert not started_jump(before, before)


def test_everything_renders_headless(pygame_fonts):
    surface = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
    controller = MatchController()
    renderer = Renderer()
    manager = UIManager()

    controller.state.player1.combo = 3
    controller.state.player1.state = FighterState.ATTACKING
    controller.state.player2.state = FighterState.WALKING

    for status in GameStatus:
        controller.state.game_status = status
        snapshot = controller.snapshot()
        renderer.render(surface, snapshot)
        manager.render(surface, snapshot, controller.get_stats())

    renderer.render(surface, controller.snapshot())
    assert tuple(surface.get_at((10, 325)))[:3] == GRASS_GREEN


def test_host_keeps_ticking_after_resume_and_rematch(two_player_match):
    controller = two_player_match
    game = Game(controller=controller)
    try:
        game._update()
        game._update()
        assert controller.loop.frame_count == 2

        controller.toggle_pause()
        game._update()
        assert controller.loop.frame_count == 2

        controller.toggle_pause()
        game._update()
        assert controller.loop.frame_count == 3

        controller.state.player2.health = 0.0
        controller.state.player2.state = FighterState.DEAD
        game._update()
        assert controller.game_status == GameStatus.GAME_OVER
        frames = controller.loop.frame_count

        assert controller.restart_current_mode()
        game._update()
        assert controller.loop.frame_count == frames + 1
    finally:
        game._cleanup()
