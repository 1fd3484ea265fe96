"""
Main Game Engine for Stickman Fighter
"""

import pygame
from typing import Optional

from stickman_fighter.config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, FPS, GAME_TITLE,
    GameStatus, DEBUG_FRAMERATE, BLACK, WHITE
)
from stickman_fighter.core.input_handler import InputHandler
from stickman_fighter.core.match import MatchController, MatchState
from stickman_fighter.graphics.renderer import Renderer
from stickman_fighter.ui.manager import UIManager
from stickman_fighter.ui import menu
from stickman_fighter.audio.sound_manager import SoundManager


def dispatch_menu_action(controller: MatchController, action: Optional[str]) -> bool:
    """Turn a menu action into a controller intent"""
    if action == menu.ACTION_START or action == menu.ACTION_CHANGE_MODE:
        return controller.start_match()
    if action == menu.ACTION_SINGLE_PLAYER or action == menu.ACTION_TWO_PLAYER:
        return controller.select_mode(action)
    if action == menu.ACTION_BACK or action == menu.ACTION_MAIN_MENU:
        return controller.reset_to_menu()
    if action == menu.ACTION_RESUME:
        return controller.toggle_pause()
    if action == menu.ACTION_RESTART:
        return controller.restart_current_mode()
    return False


def started_jump(before: MatchState, after: MatchState) -> bool:
    """True when either fighter left the ground between two snapshots"""
    return any(
        old.is_grounded and not new.is_grounded
        for old, new in ((before.player1, after.player1),
                         (before.player2, after.player2))
    )


class Game:
    """
    Main game engine that coordinates all systems.
    """

    def __init__(self, controller: Optional[MatchController] = None):
        pygame.init()

        # Display
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0.0

        # Core systems
        self.controller = controller or MatchController()
        self.input_handler = InputHandler()
        self.renderer = Renderer()
        self.ui_manager = UIManager()
        self.sound_manager = SoundManager()

        self._frame_token: Optional[int] = None
        self._last_status: Optional[GameStatus] = None
        self._last_snapshot: MatchState = self.controller.snapshot()

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(FPS)
            self.fps = self.clock.get_fps()

            self._handle_events()

            if self.input_handler.should_quit():
                self.running = False
                continue

            self._update()
            self._render()

            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        """Update game logic"""
        if self.input_handler.is_key_just_pressed('m'):
            self.sound_manager.toggle_mute()

        status = self.controller.game_status

        if status == GameStatus.PLAYING:
            if self.input_handler.is_key_just_pressed('escape') or \
                    self.input_handler.is_key_just_pressed('p'):
                self.controller.toggle_pause()
        else:
            action = self.ui_manager.update_menu(status, self.input_handler)
            if dispatch_menu_action(self.controller, action):
                self.sound_manager.play_ui('menu_select')
            elif any(self.input_handler.is_key_just_pressed(k)
                     for k in menu.NAV_UP + menu.NAV_DOWN):
                self.sound_manager.play_ui('menu_move')

        if self.controller.game_status == GameStatus.PLAYING:
            # Each entry into playing starts a new loop generation
            if self._last_status != GameStatus.PLAYING:
                self._frame_token = None
            self._update_fighting()
        self._last_status = self.controller.game_status

    def _update_fighting(self):
        """One simulation frame plus its sounds"""
        ticked = self.controller.frame(
            pygame.time.get_ticks(),
            self.input_handler.snapshot(),
            token=self._frame_token
        )
        self._frame_token = self.controller.request_frame()

        if ticked:
            self.sound_manager.play_hits(self.controller.last_events,
                                         self.controller.state.fighters())

    def _render(self):
        """Render current frame"""
        self.screen.fill(BLACK)

        snapshot = self.controller.snapshot()
        if started_jump(self._last_snapshot, snapshot):
            self.sound_manager.play('jump')
        self._last_snapshot = snapshot

        self.renderer.render(self.screen, snapshot)
        self.ui_manager.render(self.screen, snapshot, self.controller.get_stats())

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        font = pygame.font.Font(None, 24)
        fps_text = font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (10, CANVAS_HEIGHT - 24))

    def _cleanup(self):
        """Clean up resources"""
        self.sound_manager.cleanup()
        pygame.quit()
