"""
Main Renderer
=============
Draws the arena and both stickmen from a match snapshot.
"""

import math
import pygame
from typing import Tuple, Optional

from stickman_fighter.config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, GROUND_Y, ARENA_LEFT, ARENA_RIGHT,
    PlayerSlot, Facing, FighterState, SPECIAL_ENERGY_COST,
    SKY_TOP, SKY_BOTTOM, GROUND_BROWN, GRASS_GREEN, BOUNDARY_GRAY,
    PLAYER_ONE_COLOR, PLAYER_TWO_COLOR, HURT_COLOR, ATTACK_COLOR, BLOCK_COLOR,
    AURA_COLOR, COMBO_TEXT_COLOR
)
from stickman_fighter.combat.combo import get_combo_label


def lerp_color(a: Tuple[int, int, int], b: Tuple[int, int, int],
               t: float) -> Tuple[int, int, int]:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def fighter_color(fighter) -> Tuple[int, int, int]:
    """Stroke color for a fighter's current state"""
    if fighter.state == FighterState.HURT:
        return HURT_COLOR
    if fighter.state == FighterState.ATTACKING:
        return ATTACK_COLOR
    if fighter.state == FighterState.BLOCKING:
        return BLOCK_COLOR
    if fighter.slot == PlayerSlot.PLAYER_ONE:
        return PLAYER_ONE_COLOR
    return PLAYER_TWO_COLOR


class Renderer:
    """
    Main renderer for the game.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 ground_y: int = GROUND_Y):
        self.width = width
        self.height = height
        self.ground_y = ground_y
        self.line_width = 3

        # Background surface (cached)
        self._background: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

    def _create_background(self) -> pygame.Surface:
        """Sky gradient, ground, grass and arena boundaries"""
        surface = pygame.Surface((self.width, self.height))

        for y in range(self.height):
            color = lerp_color(SKY_TOP, SKY_BOTTOM, y / max(1, self.height - 1))
            pygame.draw.line(surface, color, (0, y), (self.width, y))

        pygame.draw.rect(surface, GROUND_BROWN,
                         (0, self.ground_y, self.width, self.height - self.ground_y))
        pygame.draw.rect(surface, GRASS_GREEN, (0, self.ground_y, self.width, 10))

        pygame.draw.line(surface, BOUNDARY_GRAY, (ARENA_LEFT, 0),
                         (ARENA_LEFT, self.ground_y), 2)
        pygame.draw.line(surface, BOUNDARY_GRAY, (ARENA_RIGHT, 0),
                         (ARENA_RIGHT, self.ground_y), 2)
        return surface

    def render(self, surface: pygame.Surface, match_state):
        """Render the arena and both fighters"""
        if self._background is None:
            self._background = self._create_background()
        surface.blit(self._background, (0, 0))

        self._render_fighter(surface, match_state.player1)
        self._render_fighter(surface, match_state.player2)

    def _render_fighter(self, surface: pygame.Surface, fighter):
        """Draw one stickman, mirrored when facing left"""
        ox, oy = fighter.x, fighter.y
        scale = -1 if fighter.facing == Facing.LEFT else 1
        color = fighter_color(fighter)
        width = self.line_width

        def point(dx: float, dy: float) -> Tuple[int, int]:
            return (int(ox + dx * scale), int(oy + dy))

        # Head
        pygame.draw.circle(surface, color, point(0, -60), 12, width)

        # Body
        pygame.draw.line(surface, color, point(0, -48), point(0, -10), width)

        # Arms
        arm_angle = math.pi / 4 if fighter.is_attacking else 0
        arm_y = -35
        reach_x = 20 * math.cos(arm_angle)
        reach_y = arm_y + 20 * math.sin(arm_angle)
        pygame.draw.line(surface, color, point(0, arm_y), point(-reach_x, reach_y), width)
        pygame.draw.line(surface, color, point(0, arm_y), point(reach_x, reach_y), width)

        # Legs
        leg_spread = 10 if fighter.state == FighterState.WALKING else 0
        leg_bend = -10 if fighter.state == FighterState.JUMPING else 0
        pygame.draw.line(surface, color, point(0, -10),
                         point(-10 - leg_spread, 15 + leg_bend), width)
        pygame.draw.line(surface, color, point(0, -10),
                         point(10 + leg_spread, 15 + leg_bend), width)

        # Energy aura
        if fighter.is_attacking and fighter.energy >= SPECIAL_ENERGY_COST:
            pygame.draw.circle(surface, AURA_COLOR, point(0, -30), 25, 1)

        # Combo indicator
        if fighter.combo > 0:
            if self._font is None:
                self._font = pygame.font.Font(None, 18)
            label = f"{fighter.combo}x {get_combo_label(fighter.combo)}".strip()
            text = self._font.render(label, True, COMBO_TEXT_COLOR)
            surface.blit(text, text.get_rect(center=(int(ox), int(oy - 80))))
