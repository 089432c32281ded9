"""
Falling Rocks - Kinematics and collision.

Every function here is pure: it takes immutable records and returns new
ones. Entity collections are tuples rebuilt wholesale each tick, in
insertion order.
"""
from typing import NamedTuple, Tuple

from models import Entity, Geometry, Intent, Outcome, Player
from games.FallingRocks import config


class KinematicsResult(NamedTuple):
    """Result of one movement/collision step."""
    player: Player
    entities: Tuple[Entity, ...]
    outcomes: Tuple[Outcome, ...]


def place_player(geometry: Geometry) -> Player:
    """Player centered horizontally, GROUND_OFFSET above the bottom edge."""
    size = geometry.player_size
    return Player(
        x=geometry.width / 2 - size / 2,
        y=float(max(0, geometry.height - size - config.GROUND_OFFSET)),
        width=size,
        height=size,
    )


def refit_player(player: Player, geometry: Geometry) -> Player:
    """Adopt a new geometry mid-session.

    Size and height above the ground follow the geometry. ``x`` is kept
    where it still fits and clamped into the new field otherwise.
    """
    placed = place_player(geometry)
    return player.model_copy(update={
        'x': max(0.0, min(geometry.max_player_x, player.x)),
        'y': placed.y,
        'width': placed.width,
        'height': placed.height,
    })


def move_player(player: Player, intent: Intent, geometry: Geometry) -> Player:
    """Apply one tick of horizontal movement, clamped to the field.

    Opposite intents cancel out. The clamp is applied even without
    movement so a shrunken field pulls the player back inside.
    """
    x = player.x + intent.direction * geometry.player_speed
    x = max(0.0, min(geometry.max_player_x, x))
    if x == player.x:
        return player
    return player.model_copy(update={'x': x})


def advance_entities(entities: Tuple[Entity, ...]) -> Tuple[Entity, ...]:
    """Move every entity down by its own fall speed."""
    return tuple(e.model_copy(update={'y': e.y + e.fall_speed}) for e in entities)


def remove_missed(entities: Tuple[Entity, ...], geometry: Geometry) -> Tuple[Entity, ...]:
    """Drop entities that reached the bottom edge. Misses score nothing."""
    return tuple(e for e in entities if e.y < geometry.height)


def collides(entity: Entity, player: Player) -> bool:
    """Axis-aligned bounding-box overlap; touching edges do not count."""
    return entity.bounds.overlaps(player.bounds)


def resolve_collisions(
    entities: Tuple[Entity, ...],
    player: Player,
) -> Tuple[Tuple[Entity, ...], Tuple[Outcome, ...]]:
    """Partition entities into survivors and caught ones.

    Every caught entity yields one Outcome; all of them apply.

    Returns:
        (surviving entities, outcomes in insertion order)
    """
    surviving = []
    outcomes = []
    for entity in entities:
        if collides(entity, player):
            outcomes.append(Outcome(category=entity.category, entity_id=entity.id))
        else:
            surviving.append(entity)
    return tuple(surviving), tuple(outcomes)


def step_kinematics(
    player: Player,
    entities: Tuple[Entity, ...],
    intent: Intent,
    geometry: Geometry,
) -> KinematicsResult:
    """Move the player, let entities fall, drop misses, resolve catches."""
    player = move_player(player, intent, geometry)
    falling = remove_missed(advance_entities(entities), geometry)
    surviving, outcomes = resolve_collisions(falling, player)
    return KinematicsResult(player=player, entities=surviving, outcomes=outcomes)
