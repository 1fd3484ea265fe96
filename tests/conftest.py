import os
import random

import pytest

# Headless SDL for surfaces and fonts
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame

from stickman_fighter.config import GameMode
from stickman_fighter.core.match import MatchController


class ScriptedRandom(random.Random):
    """random.Random whose random() replays a fixed script"""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)


@pytest.fixture
def two_player_match():
    controller = MatchController(rng=random.Random(7))
    controller.start_match()
    controller.select_mode(GameMode.TWO_PLAYER)
    return controller


@pytest.fixture
def single_player_match():
    controller = MatchController(rng=random.Random(7))
    controller.start_match()
    controller.select_mode(GameMode.SINGLE_PLAYER)
    return controller


@pytest.fixture
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()
