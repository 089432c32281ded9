"""
Falling Rocks data models.

Immutable records for the simulation: geometry, the player, falling
entities, the session bookkeeping and the read-only snapshot handed to
the presentation layer. Every update produces a new instance via
``model_copy(update=...)``.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rockfall.games.game_state import GameState
from .primitives import Rectangle

MAX_LIVES = 3


class EntityCategory(str, Enum):
    """Kinds of falling entities.

    Attributes:
        HAZARD: A rock, costs one life on contact
        COIN: Reward worth 10 points
        STAR: Reward worth 25 points
        GEM: Reward worth 50 points
    """
    HAZARD = "hazard"
    COIN = "coin"
    STAR = "star"
    GEM = "gem"

    @property
    def is_hazard(self) -> bool:
        return self is EntityCategory.HAZARD


class Geometry(BaseModel):
    """Scaled playfield dimensions for the current viewport.

    Attributes:
        width: Field width in pixels
        height: Field height in pixels
        player_size: Side of the (square) player hitbox
        entity_size: Side of a newly spawned entity
        player_speed: Horizontal player displacement per tick
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    player_size: int = Field(..., gt=0)
    entity_size: int = Field(..., gt=0)
    player_speed: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def max_player_x(self) -> float:
        """Rightmost x the player may occupy."""
        return max(0.0, float(self.width - self.player_size))


class Entity(BaseModel):
    """A falling object tracked by the simulation.

    Attributes:
        id: Unique, strictly increasing per session (render identity only)
        x: Left edge
        y: Top edge (negative while above the visible field)
        fall_speed: Downward displacement per tick
        category: What happens when the player catches it
        size: Side of the entity hitbox, fixed at spawn time
    """
    id: int = Field(..., ge=0)
    x: float
    y: float
    fall_speed: float = Field(..., gt=0)
    category: EntityCategory
    size: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)


class Player(BaseModel):
    """The player avatar. Only ``x`` changes during a session."""
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)


class SessionState(BaseModel):
    """Score, lives and the started/over flags of one session.

    Invariants (validated):
        - over implies started
        - lives reaching zero implies over

    Examples:
        >>> SessionState().phase
        <GameState.NOT_STARTED: 'not_started'>
        >>> SessionState(started=True, over=False, score=10, lives=2).phase
        <GameState.RUNNING: 'running'>
    """
    started: bool = False
    over: bool = False
    score: int = Field(0, ge=0)
    lives: int = Field(MAX_LIVES, ge=0, le=MAX_LIVES)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_flags(self) -> 'SessionState':
        if self.over and not self.started:
            raise ValueError('A session cannot be over before it has started')
        if self.lives == 0 and not self.over:
            raise ValueError('A session with no lives left must be over')
        return self

    @property
    def phase(self) -> GameState:
        if not self.started:
            return GameState.NOT_STARTED
        if self.over:
            return GameState.GAME_OVER
        return GameState.RUNNING


class Intent(BaseModel):
    """Normalized horizontal movement request.

    Both flags may be set at once when opposite inputs are held.
    """
    move_left: bool = False
    move_right: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def direction(self) -> int:
        """-1 for left, 1 for right, 0 when idle or when both are held."""
        return int(self.move_right) - int(self.move_left)


class Outcome(BaseModel):
    """A collision result handed to the session state machine."""
    category: EntityCategory
    entity_id: int

    model_config = ConfigDict(frozen=True)


class Snapshot(BaseModel):
    """Read-only view of the simulation after a tick.

    ``entities`` is in insertion order, stable for render-list diffing.
    """
    score: int
    lives: int
    phase: GameState
    player: Player
    entities: Tuple[Entity, ...]
    geometry: Geometry

    model_config = ConfigDict(frozen=True)
