"""
Menu System
===========
Title screen, mode select, pause menu and game over panel.
"""

import pygame
from typing import Dict, List, Optional
from dataclasses import dataclass

from stickman_fighter.config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, GAME_TITLE, DRAW,
    CONTROL_SCHEMES, PlayerSlot,
    WHITE, GRAY, OVERLAY_BG, PANEL_BG, PANEL_TEXT, HIGHLIGHT,
    PLAYER_ONE_COLOR, PLAYER_TWO_COLOR
)


# Menu actions returned by update()
ACTION_START = "start"
ACTION_SINGLE_PLAYER = "singlePlayer"
ACTION_TWO_PLAYER = "twoPlayer"
ACTION_BACK = "back"
ACTION_RESUME = "resume"
ACTION_RESTART = "restart"
ACTION_CHANGE_MODE = "changeMode"
ACTION_MAIN_MENU = "mainMenu"

NAV_UP = ('arrowup', 'w')
NAV_DOWN = ('arrowdown', 's')
CONFIRM = ('enter', ' ')


@dataclass
class MenuItem:
    """Single menu item"""
    text: str
    action: str
    enabled: bool = True
    shortcut: Optional[str] = None


class MenuSystem:
    """
    Base menu with keyboard selection and navigation.
    """

    def __init__(self):
        self.items: List[MenuItem] = []
        self.selected_index = 0

        # Visual settings
        self.x = CANVAS_WIDTH // 2
        self.y_start = CANVAS_HEIGHT // 2
        self.item_spacing = 40

        # Fonts are created on first render
        self.font: Optional[pygame.font.Font] = None
        self.title_font: Optional[pygame.font.Font] = None
        self.small_font: Optional[pygame.font.Font] = None

        # Colors
        self.normal_color = WHITE
        self.selected_color = HIGHLIGHT
        self.disabled_color = GRAY

    def _init_fonts(self):
        self.font = pygame.font.Font(None, 32)
        self.title_font = pygame.font.Font(None, 56)
        self.small_font = pygame.font.Font(None, 22)

    def add_item(self, text: str, action: str, enabled: bool = True,
                 shortcut: Optional[str] = None):
        """Add menu item"""
        self.items.append(MenuItem(text=text, action=action, enabled=enabled,
                                   shortcut=shortcut))

    def move_selection(self, direction: int):
        """Move selection up or down, skipping disabled items"""
        if not self.items:
            return

        new_index = self.selected_index
        for _ in range(len(self.items)):
            new_index = (new_index + direction) % len(self.items)
            if self.items[new_index].enabled:
                break

        self.selected_index = new_index

    def select_current(self) -> Optional[str]:
        """Select current item and return action"""
        if self.items and self.items[self.selected_index].enabled:
            return self.items[self.selected_index].action
        return None

    def reset_selection(self):
        self.selected_index = 0

    def update(self, input_handler) -> Optional[str]:
        """Handle navigation keys and return the chosen action, if any"""
        if any(input_handler.is_key_just_pressed(k) for k in NAV_UP):
            self.move_selection(-1)
        elif any(input_handler.is_key_just_pressed(k) for k in NAV_DOWN):
            self.move_selection(1)

        for item in self.items:
            if item.enabled and item.shortcut and \
                    input_handler.is_key_just_pressed(item.shortcut):
                return item.action

        if any(input_handler.is_key_just_pressed(k) for k in CONFIRM):
            return self.select_current()

        return None

    def render_items(self, surface: pygame.Surface, color_override=None):
        """Render the item list centered on self.x"""
        if self.font is None:
            self._init_fonts()

        for i, item in enumerate(self.items):
            y = self.y_start + i * self.item_spacing

            if not item.enabled:
                color = self.disabled_color
            elif i == self.selected_index:
                color = self.selected_color
            else:
                color = color_override or self.normal_color

            text_surface = self.font.render(item.text, True, color)
            text_rect = text_surface.get_rect(center=(self.x, y))

            if i == self.selected_index:
                arrow = self.font.render(">", True, self.selected_color)
                surface.blit(arrow, (text_rect.left - 25, y - arrow.get_height() // 2))

            surface.blit(text_surface, text_rect)

    def render(self, surface: pygame.Surface, title: str = ""):
        if self.font is None:
            self._init_fonts()

        if title:
            title_surface = self.title_font.render(title, True, WHITE)
            title_rect = title_surface.get_rect(center=(self.x, self.y_start - 90))
            surface.blit(title_surface, title_rect)

        self.render_items(surface)


def _draw_overlay(surface: pygame.Surface):
    overlay = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA)
    overlay.fill(OVERLAY_BG)
    surface.blit(overlay, (0, 0))


def describe_controls(slot: PlayerSlot) -> List[str]:
    """Human-readable control lines for one player"""
    scheme = CONTROL_SCHEMES[slot]

    def label(key: str) -> str:
        if key.startswith('arrow'):
            return key[len('arrow'):].capitalize()
        return key.upper()

    return [
        f"Move: {label(scheme.left)} / {label(scheme.right)}",
        f"Jump: {label(scheme.up)}",
        f"Attack: {label(scheme.attack)}",
        f"Block: {label(scheme.block)}",
        f"Special: {label(scheme.special)}",
    ]


class MainMenu(MenuSystem):
    """
    Title screen with both control schemes.
    """

    def __init__(self):
        super().__init__()
        self.y_start = CANVAS_HEIGHT - 60
        self.add_item("START GAME", ACTION_START)

    def render(self, surface: pygame.Surface):
        if self.font is None:
            self._init_fonts()
        _draw_overlay(surface)

        title = self.title_font.render(GAME_TITLE, True, WHITE)
        surface.blit(title, title.get_rect(center=(CANVAS_WIDTH // 2, 60)))

        columns = (
            (CANVAS_WIDTH // 4, "Player 1", PlayerSlot.PLAYER_ONE, PLAYER_ONE_COLOR),
            (CANVAS_WIDTH * 3 // 4, "Player 2", PlayerSlot.PLAYER_TWO, PLAYER_TWO_COLOR),
        )
        for x, heading, slot, color in columns:
            head = self.font.render(heading, True, color)
            surface.blit(head, head.get_rect(center=(x, 120)))
            for i, line in enumerate(describe_controls(slot)):
                text = self.small_font.render(line, True, WHITE)
                surface.blit(text, text.get_rect(center=(x, 155 + i * 24)))

        self.render_items(surface)


class ModeSelectMenu(MenuSystem):
    """
    Single player against the computer, or two players on one keyboard.
    """

    def __init__(self):
        super().__init__()
        self.y_start = CANVAS_HEIGHT // 2 - 10
        self.add_item("SINGLE PLAYER", ACTION_SINGLE_PLAYER, shortcut='1')
        self.add_item("VERSUS MODE", ACTION_TWO_PLAYER, shortcut='2')
        self.add_item("BACK", ACTION_BACK, shortcut='escape')

    def render(self, surface: pygame.Surface):
        _draw_overlay(surface)
        super().render(surface, "Select Mode")


class PauseMenu(MenuSystem):
    """
    Pause menu overlay.
    """

    def __init__(self):
        super().__init__()
        self.add_item("RESUME", ACTION_RESUME, shortcut='p')
        self.add_item("RESTART", ACTION_RESTART, shortcut='r')
        self.add_item("MAIN MENU", ACTION_MAIN_MENU)

    def update(self, input_handler) -> Optional[str]:
        if input_handler.is_key_just_pressed('escape'):
            return ACTION_RESUME
        return super().update(input_handler)

    def render(self, surface: pygame.Surface):
        _draw_overlay(surface)
        super().render(surface, "PAUSED")


def winner_headline(winner: Optional[str]) -> str:
    if winner is None:
        return ""
    if winner == DRAW:
        return "Draw!"
    return f"{winner} Wins!"


class GameOverMenu(MenuSystem):
    """
    Result panel with final health and the best combo of each fighter.
    """

    def __init__(self):
        super().__init__()
        self.y_start = CANVAS_HEIGHT // 2 + 60
        self.item_spacing = 34
        self.add_item("FIGHT AGAIN", ACTION_RESTART, shortcut='r')
        self.add_item("CHANGE MODE", ACTION_CHANGE_MODE)
        self.add_item("MAIN MENU", ACTION_MAIN_MENU, shortcut='escape')

    def render(self, surface: pygame.Surface, match_state=None,
               stats: Optional[Dict[str, Dict]] = None):
        if self.font is None:
            self._init_fonts()
        _draw_overlay(surface)

        panel = pygame.Rect(0, 0, 420, 330)
        panel.center = (CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2)
        pygame.draw.rect(surface, PANEL_BG, panel, border_radius=10)

        title = self.title_font.render("Game Over!", True, PANEL_TEXT)
        surface.blit(title, title.get_rect(center=(panel.centerx, panel.top + 35)))

        if match_state is not None:
            text = winner_headline(match_state.winner)
            if text:
                headline = self.font.render(text, True, HIGHLIGHT)
                surface.blit(headline, headline.get_rect(center=(panel.centerx, panel.top + 75)))

            for i, line in enumerate(self.result_lines(match_state, stats)):
                line_surface = self.small_font.render(line, True, PANEL_TEXT)
                surface.blit(line_surface, line_surface.get_rect(center=(panel.centerx, panel.top + 105 + i * 20)))

        self.render_items(surface, color_override=PANEL_TEXT)

    @staticmethod
    def result_lines(match_state, stats: Optional[Dict[str, Dict]] = None) -> List[str]:
        """Final health (and best combo when stats are available) per fighter"""
        lines = []
        for fighter in (match_state.player1, match_state.player2):
            line = f"{fighter.name}: {max(0, int(fighter.health))} HP"
            if stats and fighter.slot.value in stats:
                line += f"  (best combo {stats[fighter.slot.value]['best_combo']})"
            lines.append(line)
        return lines
