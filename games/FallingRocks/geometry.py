"""
Falling Rocks - Dimension provider.

Scales the base 800x600 playfield down to whatever room the viewport
offers. Never scales up, and every derived size has a floor so the
field cannot collapse.
"""
import math

from models import Geometry
from games.FallingRocks import config


def compute_scale(available_width: float, available_height: float) -> float:
    """Scale factor for a viewport, in [MIN_SCALE, 1].

    Only HEIGHT_FRACTION of the available height is given to the field;
    the rest is left for the surrounding HUD.
    """
    return max(
        config.MIN_SCALE,
        min(
            available_width / config.BASE_WIDTH,
            available_height * config.HEIGHT_FRACTION / config.BASE_HEIGHT,
            1.0,
        ),
    )


def compute_geometry(available_width: float, available_height: float) -> Geometry:
    """Derive the playfield geometry for a viewport.

    Total over all inputs: zero or negative sizes fall back to the floors.

    Args:
        available_width: Usable display width in pixels
        available_height: Usable display height in pixels

    Returns:
        Geometry with floored, clamped sizes

    Examples:
        >>> compute_geometry(800, 1000).width
        800
        >>> compute_geometry(0, 0).width >= config.MIN_WIDTH
        True
    """
    scale = compute_scale(available_width, available_height)
    return Geometry(
        width=max(config.MIN_WIDTH, math.floor(config.BASE_WIDTH * scale)),
        height=max(config.MIN_HEIGHT, math.floor(config.BASE_HEIGHT * scale)),
        player_size=max(config.MIN_PLAYER_SIZE, math.floor(config.BASE_PLAYER_SIZE * scale)),
        entity_size=max(config.MIN_ENTITY_SIZE, math.floor(config.BASE_ENTITY_SIZE * scale)),
        player_speed=float(max(config.MIN_PLAYER_SPEED, math.floor(config.BASE_PLAYER_SPEED * scale))),
    )


def fall_speed_scale(geometry: Geometry) -> float:
    """Factor applied to base fall speeds so fall time matches across sizes."""
    return geometry.height / config.BASE_HEIGHT
