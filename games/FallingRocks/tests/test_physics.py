"""Tests for kinematics and collision."""
import pytest

from models import Entity, EntityCategory, Intent
from games.FallingRocks.physics import (
    advance_entities,
    collides,
    move_player,
    place_player,
    refit_player,
    remove_missed,
    resolve_collisions,
    step_kinematics,
)

LEFT = Intent(move_left=True)
RIGHT = Intent(move_right=True)
BOTH = Intent(move_left=True, move_right=True)
IDLE = Intent()


def make_entity(entity_id=0, x=0.0, y=0.0, speed=2.0, category=EntityCategory.COIN, size=30):
    return Entity(id=entity_id, x=x, y=y, fall_speed=speed, category=category, size=size)


class TestPlayerPlacement:

    def test_centered_above_ground(self, geometry):
        player = place_player(geometry)
        assert player.x == 380
        assert player.y == 540
        assert player.width == player.height == 40

    def test_refit_keeps_x_that_fits(self, geometry, narrow_geometry):
        player = place_player(geometry).model_copy(update={'x': 100.0})
        refit = refit_player(player, narrow_geometry)
        assert refit.x == 100.0
        assert refit.y == 260

    def test_refit_clamps_x_into_smaller_field(self, geometry, narrow_geometry):
        player = place_player(geometry).model_copy(update={'x': 700.0})
        refit = refit_player(player, narrow_geometry)
        assert refit.x == 380.0
        assert refit.y == 260
        assert refit.width == 20


class TestMovePlayer:

    def test_left(self, geometry):
        assert move_player(place_player(geometry), LEFT, geometry).x == 372

    def test_right(self, geometry):
        assert move_player(place_player(geometry), RIGHT, geometry).x == 388

    def test_idle_returns_same_player(self, geometry):
        player = place_player(geometry)
        assert move_player(player, IDLE, geometry) is player

    def test_opposite_inputs_cancel(self, geometry):
        player = place_player(geometry)
        assert move_player(player, BOTH, geometry).x == player.x

    def test_clamped_left(self, geometry):
        player = place_player(geometry).model_copy(update={'x': 3.0})
        assert move_player(player, LEFT, geometry).x == 0.0

    def test_clamped_right(self, geometry):
        player = place_player(geometry).model_copy(update={'x': 758.0})
        assert move_player(player, RIGHT, geometry).x == 760.0

    def test_reclamped_after_shrink(self, narrow_geometry):
        player = place_player(narrow_geometry).model_copy(update={'x': 700.0})
        assert move_player(player, IDLE, narrow_geometry).x == 380.0

    def test_y_never_changes(self, geometry):
        player = place_player(geometry)
        for intent in (LEFT, RIGHT, BOTH, IDLE):
            assert move_player(player, intent, geometry).y == player.y


class TestEntities:

    def test_advance(self):
        moved = advance_entities((make_entity(y=10.0, speed=2.5), make_entity(1, y=-30.0, speed=4.0)))
        assert [e.y for e in moved] == [12.5, -26.0]

    def test_advance_preserves_order_and_ids(self):
        entities = tuple(make_entity(i) for i in range(5))
        assert [e.id for e in advance_entities(entities)] == [0, 1, 2, 3, 4]

    def test_remove_missed(self, geometry):
        entities = (make_entity(0, y=599.9), make_entity(1, y=600.0), make_entity(2, y=650.0))
        assert [e.id for e in remove_missed(entities, geometry)] == [0]


class TestCollision:

    def test_overlap(self, geometry):
        player = place_player(geometry)
        assert collides(make_entity(x=385.0, y=530.0), player)

    def test_touching_side_is_not_overlap(self, geometry):
        player = place_player(geometry)
        assert not collides(make_entity(x=420.0, y=540.0), player)
        assert not collides(make_entity(x=350.0, y=540.0), player)

    def test_touching_top_is_not_overlap(self, geometry):
        player = place_player(geometry)
        assert not collides(make_entity(x=385.0, y=510.0), player)

    def test_uses_entity_size(self, geometry):
        player = place_player(geometry)
        assert not collides(make_entity(x=340.0, y=540.0, size=40), player)
        assert collides(make_entity(x=340.0, y=540.0, size=41), player)

    def test_partition(self, geometry):
        player = place_player(geometry)
        entities = (
            make_entity(0, x=385.0, y=530.0, category=EntityCategory.HAZARD),
            make_entity(1, x=10.0, y=100.0),
            make_entity(2, x=390.0, y=560.0, category=EntityCategory.GEM),
        )
        surviving, outcomes = resolve_collisions(entities, player)
        assert [e.id for e in surviving] == [1]
        assert [(o.entity_id, o.category) for o in outcomes] == [
            (0, EntityCategory.HAZARD),
            (2, EntityCategory.GEM),
        ]


class TestStepKinematics:

    def test_collision_after_fall(self, geometry):
        player = place_player(geometry)
        entity = make_entity(x=385.0, y=506.0, speed=5.0)
        result = step_kinematics(player, (entity,), IDLE, geometry)
        assert result.entities == ()
        assert len(result.outcomes) == 1

    def test_uses_moved_player(self, geometry):
        player = place_player(geometry)
        # just right of the player; reachable only after moving right
        entity = make_entity(x=421.0, y=540.0, speed=1.0)
        assert step_kinematics(player, (entity,), IDLE, geometry).outcomes == ()
        assert len(step_kinematics(player, (entity,), RIGHT, geometry).outcomes) == 1

    def test_missed_entity_never_collides(self, geometry):
        player = place_player(geometry).model_copy(update={'y': 580.0})
        entity = make_entity(x=385.0, y=598.0, speed=5.0)
        result = step_kinematics(player, (entity,), IDLE, geometry)
        assert result.entities == ()
        assert result.outcomes == ()

    def test_does_not_mutate_inputs(self, geometry):
        player = place_player(geometry)
        entities = (make_entity(x=10.0, y=10.0),)
        step_kinematics(player, entities, RIGHT, geometry)
        assert player.x == 380
        assert entities[0].y == 10.0
