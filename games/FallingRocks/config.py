"""
Falling Rocks - Configuration loader.

Settings come from a .env file in the game directory; real environment
variables take precedence. Values that are not numeric raise ValueError
at import.
"""
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from models import MAX_LIVES, EntityCategory

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display (the usable area handed to the dimension provider)
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 900)
FPS = _get_int('FPS', 60)
FULLSCREEN = _get_bool('FULLSCREEN', False)

# Unscaled playfield
BASE_WIDTH = 800
BASE_HEIGHT = 600
BASE_PLAYER_SIZE = 40
BASE_ENTITY_SIZE = 30
BASE_PLAYER_SPEED = 8.0  # pixels per tick

# Share of the available height the field may use
HEIGHT_FRACTION = 0.6

# Floors applied after scaling
MIN_SCALE = 0.4
MIN_WIDTH = 280
MIN_HEIGHT = 210
MIN_PLAYER_SIZE = 16
MIN_ENTITY_SIZE = 12
MIN_PLAYER_SPEED = 3.0

# Player sits this far above the bottom edge
GROUND_OFFSET = _get_int('GROUND_OFFSET', 20)

# Spawning
SPAWN_INTERVAL_MS = _get_float('SPAWN_INTERVAL_MS', 1000.0)

# Weighted category table: two hazard slots, one per reward
SPAWN_TABLE = (
    EntityCategory.HAZARD,
    EntityCategory.HAZARD,
    EntityCategory.COIN,
    EntityCategory.STAR,
    EntityCategory.GEM,
)

# Unscaled fall speed ranges, pixels per tick, [low, high)
HAZARD_SPEED_RANGE = (3.0, 5.0)
REWARD_SPEED_RANGE = (2.0, 3.5)

# Scoring
CATEGORY_POINTS: Dict[EntityCategory, int] = {
    EntityCategory.COIN: 10,
    EntityCategory.STAR: 25,
    EntityCategory.GEM: 50,
}
HAZARD_DAMAGE = 1

# Lives at the start of every session, 1..MAX_LIVES
STARTING_LIVES = _get_int('STARTING_LIVES', MAX_LIVES)
if not 1 <= STARTING_LIVES <= MAX_LIVES:
    raise ValueError(f"STARTING_LIVES must be between 1 and {MAX_LIVES}, got {STARTING_LIVES}")

# Colors (not configurable via .env)
BACKGROUND_TOP = (125, 211, 252)     # Sky
BACKGROUND_BOTTOM = (74, 222, 128)   # Grass
GROUND_COLOR = (22, 163, 74)
PLAYER_COLOR = (37, 99, 235)
HUD_COLOR = (255, 255, 255)
LIFE_COLOR = (239, 68, 68)
LOST_LIFE_COLOR = (156, 163, 175)
CATEGORY_COLORS = {
    EntityCategory.HAZARD: (120, 113, 108),
    EntityCategory.COIN: (234, 179, 8),
    EntityCategory.STAR: (250, 204, 21),
    EntityCategory.GEM: (56, 189, 248),
}
