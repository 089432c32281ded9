"""
Falling Rocks - Entity spawner.

One entity per SPAWN_INTERVAL_MS of wall-clock time, independent of the
frame rate. Randomness comes from an injected ``random.Random`` so a
seeded generator reproduces the exact spawn sequence.
"""
import random
from typing import Optional, Tuple

from models import Entity, EntityCategory, Geometry
from games.FallingRocks import config
from games.FallingRocks.geometry import fall_speed_scale


def should_spawn(
    now_ms: float,
    last_spawn_ms: float,
    interval_ms: float = config.SPAWN_INTERVAL_MS,
) -> bool:
    """True once strictly more than ``interval_ms`` has passed."""
    return now_ms - last_spawn_ms > interval_ms


def choose_category(rng: random.Random) -> EntityCategory:
    """Draw a category; hazards are twice as likely as any one reward."""
    return rng.choice(config.SPAWN_TABLE)


def _uniform(rng: random.Random, bounds: Tuple[float, float]) -> float:
    # random() is in [0, 1), which keeps the upper bound exclusive
    low, high = bounds
    return low + rng.random() * (high - low)


def base_fall_speed(category: EntityCategory, rng: random.Random) -> float:
    """Unscaled fall speed in pixels per tick."""
    if category.is_hazard:
        return _uniform(rng, config.HAZARD_SPEED_RANGE)
    return _uniform(rng, config.REWARD_SPEED_RANGE)


def create_entity(entity_id: int, geometry: Geometry, rng: random.Random) -> Entity:
    """Create an entity just above the visible top edge.

    Args:
        entity_id: Identifier from the session's counter
        geometry: Geometry in effect at spawn time
        rng: Random source

    Returns:
        New Entity with random category, x and fall speed
    """
    category = choose_category(rng)
    speed = base_fall_speed(category, rng) * fall_speed_scale(geometry)
    max_x = max(0, geometry.width - geometry.entity_size)
    return Entity(
        id=entity_id,
        x=rng.random() * max_x,
        y=-float(geometry.entity_size),
        fall_speed=speed,
        category=category,
        size=geometry.entity_size,
    )


def try_spawn(
    now_ms: float,
    last_spawn_ms: float,
    geometry: Geometry,
    next_id: int,
    rng: random.Random,
    interval_ms: float = config.SPAWN_INTERVAL_MS,
) -> Optional[Entity]:
    """Spawn one entity if the cadence allows it.

    The caller records ``now_ms`` as the new last spawn time and advances
    its id counter whenever an entity comes back.

    Returns:
        The new Entity, or None when it is not yet time
    """
    if not should_spawn(now_ms, last_spawn_ms, interval_ms):
        return None
    return create_entity(next_id, geometry, rng)
