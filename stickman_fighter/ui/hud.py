"""
HUD System
==========
Health bars, energy bars, timer, round and mode indicator.
"""

import pygame
from typing import Tuple, Optional

from stickman_fighter.config import (
    CANVAS_WIDTH, GameMode,
    WHITE, BLACK, DARK_GRAY, OVERLAY_BG,
    HEALTH_GREEN, HEALTH_YELLOW, HEALTH_RED, ENERGY_BLUE
)


def format_time(seconds: float) -> str:
    """Seconds as M:SS"""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def health_color(ratio: float) -> Tuple[int, int, int]:
    """Bar color based on health ratio"""
    if ratio > 0.5:
        return HEALTH_GREEN
    elif ratio > 0.25:
        return HEALTH_YELLOW
    return HEALTH_RED


class HealthBar:
    """
    Health bar with the fighter's name above it.
    """

    def __init__(self, x: int, y: int, width: int = 200, height: int = 20):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

        self.current = 100.0
        self.max_value = 100.0
        self.name = ""

    def set_value(self, value: float, max_value: float, name: str = ""):
        self.current = max(0.0, min(max_value, value))
        self.max_value = max_value
        self.name = name

    def render(self, surface: pygame.Surface, font: pygame.font.Font):
        ratio = self.current / self.max_value

        # Background
        pygame.draw.rect(surface, DARK_GRAY, (self.x, self.y, self.width, self.height))

        # Fill
        fill_width = int(self.width * ratio)
        if fill_width > 0:
            pygame.draw.rect(surface, health_color(ratio),
                             (self.x, self.y, fill_width, self.height))

        # Border
        pygame.draw.rect(surface, BLACK, (self.x, self.y, self.width, self.height), 2)

        # Name
        name_surface = font.render(self.name, True, BLACK)
        surface.blit(name_surface, (self.x, self.y - name_surface.get_height() - 2))


class EnergyBar:
    """
    Thin energy bar under the health bar.
    """

    def __init__(self, x: int, y: int, width: int = 200, height: int = 10):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

        self.current = 100.0
        self.max_value = 100.0

    def set_value(self, value: float, max_value: float):
        self.current = max(0.0, min(max_value, value))
        self.max_value = max_value

    def render(self, surface: pygame.Surface):
        pygame.draw.rect(surface, DARK_GRAY, (self.x, self.y, self.width, self.height))

        fill_width = int(self.width * self.current / self.max_value)
        if fill_width > 0:
            pygame.draw.rect(surface, ENERGY_BLUE,
                             (self.x, self.y, fill_width, self.height))

        pygame.draw.rect(surface, BLACK, (self.x, self.y, self.width, self.height), 1)


class HUD:
    """
    In-fight overlay.
    """

    def __init__(self):
        self.player1_health = HealthBar(50, 20)
        self.player2_health = HealthBar(CANVAS_WIDTH - 250, 20)
        self.player1_energy = EnergyBar(50, 45)
        self.player2_energy = EnergyBar(CANVAS_WIDTH - 250, 45)

        self.timer_text = format_time(0)
        self.round_text = "Round 1"
        self.mode_text = ""

        self.font: Optional[pygame.font.Font] = None
        self.small_font: Optional[pygame.font.Font] = None
        self.timer_font: Optional[pygame.font.Font] = None

    def _init_fonts(self):
        self.font = pygame.font.Font(None, 22)
        self.small_font = pygame.font.Font(None, 18)
        self.timer_font = pygame.font.Font(None, 36)

    def update(self, match_state):
        """Pull values from the match snapshot"""
        p1, p2 = match_state.player1, match_state.player2
        self.player1_health.set_value(p1.health, p1.max_health, p1.name)
        self.player2_health.set_value(p2.health, p2.max_health, p2.name)
        self.player1_energy.set_value(p1.energy, p1.max_energy)
        self.player2_energy.set_value(p2.energy, p2.max_energy)

        self.timer_text = format_time(match_state.time_left)
        self.round_text = f"Round {match_state.round}"
        if match_state.game_mode == GameMode.SINGLE_PLAYER:
            self.mode_text = "Single Player"
        elif match_state.game_mode == GameMode.TWO_PLAYER:
            self.mode_text = "Versus Mode"
        else:
            self.mode_text = ""

    def render(self, surface: pygame.Surface):
        if self.font is None:
            self._init_fonts()

        self.player1_health.render(surface, self.font)
        self.player2_health.render(surface, self.font)
        self.player1_energy.render(surface)
        self.player2_energy.render(surface)

        # Timer box
        timer = self.timer_font.render(self.timer_text, True, WHITE)
        round_label = self.small_font.render(self.round_text, True, WHITE)
        box_width = max(timer.get_width(), round_label.get_width()) + 24
        box = pygame.Surface((box_width, 52), pygame.SRCALPHA)
        box.fill(OVERLAY_BG)
        box_x = CANVAS_WIDTH // 2 - box_width // 2
        surface.blit(box, (box_x, 12))
        surface.blit(timer, timer.get_rect(center=(CANVAS_WIDTH // 2, 30)))
        surface.blit(round_label, round_label.get_rect(center=(CANVAS_WIDTH // 2, 53)))

        # Mode indicator
        if self.mode_text:
            mode = self.small_font.render(self.mode_text, True, WHITE)
            mode_box = pygame.Surface((mode.get_width() + 16, mode.get_height() + 10),
                                      pygame.SRCALPHA)
            mode_box.fill(OVERLAY_BG)
            mode_x = CANVAS_WIDTH - mode_box.get_width() - 10
            surface.blit(mode_box, (mode_x, 70))
            surface.blit(mode, (mode_x + 8, 75))
