"""
Stickman Fighter - Configuration & Constants
============================================
All game settings, enums, and constants in one place.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 400
FPS = 60
GAME_TITLE = "Stickman Fighter"

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (51, 51, 51)

# Background
SKY_TOP = (135, 206, 235)
SKY_BOTTOM = (224, 246, 255)
GROUND_BROWN = (139, 69, 19)
GRASS_GREEN = (34, 139, 34)
BOUNDARY_GRAY = (102, 102, 102)

# Fighters
PLAYER_ONE_COLOR = (0, 102, 204)
PLAYER_TWO_COLOR = (204, 0, 102)
HURT_COLOR = (255, 0, 0)
ATTACK_COLOR = (255, 102, 0)
BLOCK_COLOR = (0, 102, 255)
AURA_COLOR = (255, 255, 0)
COMBO_TEXT_COLOR = (255, 102, 0)

# UI
HEALTH_GREEN = (0, 255, 0)
HEALTH_YELLOW = (255, 255, 0)
HEALTH_RED = (255, 0, 0)
ENERGY_BLUE = (0, 170, 255)
OVERLAY_BG = (0, 0, 0, 190)
PANEL_BG = (255, 255, 255)
PANEL_TEXT = (31, 41, 55)
HIGHLIGHT = (37, 99, 235)

# =============================================================================
# ARENA / PHYSICS SETTINGS
# =============================================================================

GROUND_Y = 320
ARENA_MARGIN = 50
ARENA_LEFT = ARENA_MARGIN
ARENA_RIGHT = CANVAS_WIDTH - ARENA_MARGIN

GRAVITY = 0.8        # added to vertical velocity every tick
JUMP_FORCE = -15     # vertical impulse on jump
MOVE_SPEED = 5       # horizontal velocity while walking

# Starting positions
PLAYER_ONE_START_X = 150
PLAYER_TWO_START_X = 650

# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

DEFAULT_MAX_HEALTH = 100
DEFAULT_MAX_ENERGY = 100
ENERGY_REGEN_PER_TICK = 0.5
MAX_COMBO = 10
COMBO_WINDOW_MS = 2000

# =============================================================================
# COMBAT SETTINGS
# =============================================================================

ATTACK_RANGE = 60           # horizontal separation for a hit
VERTICAL_TOLERANCE = 50     # vertical separation for a hit

ATTACK_DAMAGE = 15
ATTACK_COMBO_BONUS = 2      # per combo step
ATTACK_COMBO_STEP = 1
ATTACK_RECOVERY_MS = 500

SPECIAL_DAMAGE = 25
SPECIAL_COMBO_BONUS = 3
SPECIAL_COMBO_STEP = 2
SPECIAL_RECOVERY_MS = 1000
SPECIAL_ENERGY_COST = 50

# State transitions keyed on the fighter's own attack cooldown
ATTACK_STATE_RELEASE_MS = 300
HURT_STATE_RELEASE_MS = 200

# =============================================================================
# AI SETTINGS
# =============================================================================

AI_INITIAL_REACTION_MIN = 300
AI_INITIAL_REACTION_MAX = 500
AI_REACTION_MIN = 200
AI_REACTION_MAX = 500
AI_INITIAL_AGGRESSIVENESS = 0.6

AI_BASE_AGGRESSION = 0.4
AI_OWN_WOUND_WEIGHT = 0.4
AI_OPPONENT_WOUND_WEIGHT = 0.2

AI_FAR_DISTANCE = 100
AI_CLOSE_DISTANCE = 40
AI_STRIKE_DISTANCE = 70
AI_MEDIUM_DISTANCE = 120

AI_BLOCK_CHANCE = 0.7
AI_SPECIAL_CHANCE = 0.3
AI_JUMP_CHANCE = 0.3

# =============================================================================
# ROUND SETTINGS
# =============================================================================

ROUND_TIME = 99  # seconds
DRAW = "Draw"

# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512
MASTER_VOLUME = 0.8
SFX_VOLUME = 0.7

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_FRAMERATE = False
DEBUG_INVARIANTS = True

# =============================================================================
# GAME ENUMS
# =============================================================================


class PlayerSlot(Enum):
    """Which side of the match a fighter occupies"""
    PLAYER_ONE = "player1"
    PLAYER_TWO = "player2"


class Facing(Enum):
    LEFT = "left"
    RIGHT = "right"


class FighterState(Enum):
    """Behavioral state, exactly one active per tick"""
    IDLE = "idle"
    WALKING = "walking"
    JUMPING = "jumping"
    ATTACKING = "attacking"
    BLOCKING = "blocking"
    HURT = "hurt"
    DEAD = "dead"


class GameStatus(Enum):
    MENU = "menu"
    MODE_SELECT = "modeSelect"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class GameMode(Enum):
    SINGLE_PLAYER = "singlePlayer"
    TWO_PLAYER = "twoPlayer"


class AIAction(Enum):
    """Actions the opponent AI can commit to"""
    IDLE = "idle"
    APPROACH = "approach"
    RETREAT = "retreat"
    ATTACK = "attack"
    SPECIAL = "special"
    BLOCK = "block"
    JUMP = "jump"


# =============================================================================
# CONTROL SCHEMES
# =============================================================================

@dataclass(frozen=True)
class ControlScheme:
    """Key identifiers for one player"""
    left: str
    right: str
    up: str
    down: str
    attack: str
    block: str
    special: str


CONTROL_SCHEMES: Dict[PlayerSlot, ControlScheme] = {
    PlayerSlot.PLAYER_ONE: ControlScheme(
        left='a', right='d', up='w', down='s',
        attack='f', block='g', special='h'
    ),
    PlayerSlot.PLAYER_TWO: ControlScheme(
        left='arrowleft', right='arrowright', up='arrowup', down='arrowdown',
        attack='k', block='l', special=';'
    ),
}

START_POSITIONS: Dict[PlayerSlot, float] = {
    PlayerSlot.PLAYER_ONE: PLAYER_ONE_START_X,
    PlayerSlot.PLAYER_TWO: PLAYER_TWO_START_X,
}

PLAYER_ONE_NAME = "Player 1"
PLAYER_TWO_NAME = "Player 2"
COMPUTER_NAME = "Computer"
