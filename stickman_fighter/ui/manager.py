"""
UI Manager
==========
Routes input and rendering to the HUD and the menu for the current status.
"""

import pygame
from typing import Dict, Optional

from stickman_fighter.config import GameStatus
from stickman_fighter.ui.hud import HUD
from stickman_fighter.ui.menu import (
    MenuSystem, MainMenu, ModeSelectMenu, PauseMenu, GameOverMenu
)


class UIManager:
    """
    Manages all UI in the game.
    """

    def __init__(self):
        self.hud = HUD()

        # Menus
        self.main_menu = MainMenu()
        self.mode_select = ModeSelectMenu()
        self.pause_menu = PauseMenu()
        self.game_over = GameOverMenu()

        self._menus: Dict[GameStatus, MenuSystem] = {
            GameStatus.MENU: self.main_menu,
            GameStatus.MODE_SELECT: self.mode_select,
            GameStatus.PAUSED: self.pause_menu,
            GameStatus.GAME_OVER: self.game_over,
        }
        self._last_status: Optional[GameStatus] = None

    def menu_for(self, status: GameStatus) -> Optional[MenuSystem]:
        return self._menus.get(status)

    def update_menu(self, status: GameStatus, input_handler) -> Optional[str]:
        """Update the menu shown for status and return its action"""
        menu = self.menu_for(status)
        if status != self._last_status:
            self._last_status = status
            if menu is not None:
                menu.reset_selection()
        if menu is None:
            return None
        return menu.update(input_handler)

    def render(self, surface: pygame.Surface, match_state,
               stats: Optional[Dict[str, Dict]] = None):
        """Render UI based on game status"""
        status = match_state.game_status

        if status in (GameStatus.PLAYING, GameStatus.PAUSED, GameStatus.GAME_OVER):
            self.hud.update(match_state)
            self.hud.render(surface)

        if status == GameStatus.MENU:
            self.main_menu.render(surface)
        elif status == GameStatus.MODE_SELECT:
            self.mode_select.render(surface)
        elif status == GameStatus.PAUSED:
            self.pause_menu.render(surface)
        elif status == GameStatus.GAME_OVER:
            self.game_over.render(surface, match_state, stats)
