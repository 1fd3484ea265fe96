"""
UI System Module
"""

from stickman_fighter.ui.manager import UIManager
from stickman_fighter.ui.hud import HUD, HealthBar, EnergyBar
from stickman_fighter.ui.menu import (
    MenuSystem, MainMenu, ModeSelectMenu, PauseMenu, GameOverMenu
)

__all__ = [
    'UIManager', 'HUD', 'HealthBar', 'EnergyBar',
    'MenuSystem', 'MainMenu', 'ModeSelectMenu', 'PauseMenu', 'GameOverMenu'
]
