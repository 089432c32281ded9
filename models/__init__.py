"""
Unified models library for Rockfall games.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Rectangle)
- Falling Rocks: Simulation records (Geometry, Entity, Player, SessionState, ...)

Usage:
    >>> from models import Rectangle, Geometry, EntityCategory
    >>> from models.falling_rocks import Snapshot
"""

from .primitives import (
    Rectangle,
)

from .falling_rocks import (
    MAX_LIVES,
    EntityCategory,
    Geometry,
    Entity,
    Player,
    SessionState,
    Intent,
    Outcome,
    Snapshot,
)

__all__ = [
    'Rectangle',
    'MAX_LIVES',
    'EntityCategory',
    'Geometry',
    'Entity',
    'Player',
    'SessionState',
    'Intent',
    'Outcome',
    'Snapshot',
]
