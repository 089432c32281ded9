"""
Falling Rocks - Simulation core.

``tick`` is a pure step over an immutable SimulationState. ``Simulation``
is the stateful boundary the presentation layer talks to: it takes
commands, intent and viewport snapshots, and exposes a read-only
Snapshot after every tick.

Usage:
    sim = Simulation(viewport_width=800, viewport_height=1000, seed=42)
    sim.start()
    sim.set_intent(Intent(move_left=True))
    outcomes = sim.tick()
    print(sim.score, sim.lives, sim.phase)
"""
import random
import time
from typing import Callable, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from models import Entity, Geometry, Intent, Outcome, Player, SessionState, Snapshot
from rockfall.games.game_state import GameState
from rockfall.logging import get_logger
from games.FallingRocks import config, session
from games.FallingRocks.geometry import compute_geometry
from games.FallingRocks.physics import place_player, refit_player, step_kinematics
from games.FallingRocks.spawner import try_spawn

log = get_logger('simulation')


class SimulationState(BaseModel):
    """Everything one tick reads and replaces.

    Attributes:
        session: Score, lives and phase flags
        player: Player rectangle
        entities: Falling entities in insertion order
        last_spawn_ms: Clock reading of the last spawn (or of the start)
        next_id: Next entity id; never reset, so ids stay unique
    """
    session: SessionState = Field(default_factory=SessionState)
    player: Player
    entities: Tuple[Entity, ...] = ()
    last_spawn_ms: float = 0.0
    next_id: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def phase(self) -> GameState:
        return self.session.phase


class TickResult(NamedTuple):
    """New state plus what happened during the tick."""
    state: SimulationState
    outcomes: Tuple[Outcome, ...] = ()
    spawned: Optional[Entity] = None


def initial_state(geometry: Geometry) -> SimulationState:
    """State before the first start command."""
    return SimulationState(player=place_player(geometry))


def begin_session(
    state: SimulationState,
    session_state: SessionState,
    geometry: Geometry,
    now_ms: float,
) -> SimulationState:
    """Clear the field and recenter the player for a new session."""
    return state.model_copy(update={
        'session': session_state,
        'player': place_player(geometry),
        'entities': (),
        'last_spawn_ms': now_ms,
    })


def tick(
    state: SimulationState,
    intent: Intent,
    geometry: Geometry,
    now_ms: float,
    rng: random.Random,
) -> TickResult:
    """Advance the simulation by one frame.

    Order: spawn check, player movement, entity fall, miss removal,
    collision resolution, then outcomes folded into the session.
    Outside RUNNING the state comes back unchanged.

    Args:
        state: State at the start of the tick
        intent: Movement intent snapshot for this tick
        geometry: Geometry snapshot for this tick
        now_ms: Monotonic clock reading in milliseconds
        rng: Random source for spawns

    Returns:
        TickResult with the new state, outcomes and any spawned entity
    """
    if state.phase is not GameState.RUNNING:
        return TickResult(state=state)

    entities = state.entities
    next_id = state.next_id
    last_spawn_ms = state.last_spawn_ms

    spawned = try_spawn(now_ms, last_spawn_ms, geometry, next_id, rng)
    if spawned is not None:
        entities = entities + (spawned,)
        next_id += 1
        last_spawn_ms = now_ms

    step = step_kinematics(state.player, entities, intent, geometry)
    new_state = state.model_copy(update={
        'session': session.apply_outcomes(state.session, step.outcomes),
        'player': step.player,
        'entities': step.entities,
        'last_spawn_ms': last_spawn_ms,
        'next_id': next_id,
    })
    return TickResult(state=new_state, outcomes=step.outcomes, spawned=spawned)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Simulation:
    """Stateful wrapper around ``tick``.

    Input and resize handlers only replace the intent/geometry snapshots;
    the next tick reads them once at its start.
    """

    def __init__(
        self,
        viewport_width: float = config.SCREEN_WIDTH,
        viewport_height: float = config.SCREEN_HEIGHT,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            viewport_width: Initial usable display width
            viewport_height: Initial usable display height
            seed: Seed for the spawn RNG (ignored if rng is given)
            clock: Monotonic clock in milliseconds (default: time.monotonic)
            rng: Random source to use instead of a seeded one
        """
        self._rng = rng if rng is not None else random.Random(seed)
        self._clock = clock or _monotonic_ms
        self._geometry = compute_geometry(viewport_width, viewport_height)
        self._intent = Intent()
        self._state = initial_state(self._geometry)

    # =========================================================================
    # Commands
    # =========================================================================

    def start(self) -> None:
        """Start the first session. Ignored once started."""
        if self.phase is not GameState.NOT_STARTED:
            log.debug("start ignored in phase %s", self.phase.value)
            return
        self._state = begin_session(
            self._state, session.start(self._state.session), self._geometry, self._clock()
        )
        log.info("Session started")

    def restart(self) -> None:
        """Begin a new session from any phase."""
        previous = self._state.session
        self._state = begin_session(
            self._state, session.restart(previous), self._geometry, self._clock()
        )
        log.info("Session restarted (previous score %d)", previous.score)

    def set_intent(self, intent: Intent) -> None:
        """Replace the movement intent used by the next tick."""
        self._intent = intent

    def set_viewport(self, width: float, height: float) -> None:
        """Replace the geometry for a new viewport size.

        Before the first start the player is recentered. Otherwise it
        keeps its x, clamped into the new field, and takes the new size;
        entities are left alone.
        """
        geometry = compute_geometry(width, height)
        if geometry == self._geometry:
            return
        self._geometry = geometry
        if self.phase is GameState.NOT_STARTED:
            player = place_player(geometry)
        else:
            player = refit_player(self._state.player, geometry)
        self._state = self._state.model_copy(update={'player': player})
        log.info("Viewport %sx%s -> field %dx%d", width, height, geometry.width, geometry.height)

    def tick(self, now_ms: Optional[float] = None) -> Tuple[Outcome, ...]:
        """Run one frame. A no-op unless RUNNING.

        Args:
            now_ms: Clock reading; read from the clock when omitted

        Returns:
            Collision outcomes of this tick
        """
        if self.phase is not GameState.RUNNING:
            return ()
        if now_ms is None:
            now_ms = self._clock()

        result = tick(self._state, self._intent, self._geometry, now_ms, self._rng)
        self._state = result.state

        if result.spawned is not None:
            log.debug("Spawned %s #%d", result.spawned.category.value, result.spawned.id)
        for outcome in result.outcomes:
            log.debug("Caught %s #%d", outcome.category.value, outcome.entity_id)
        if self.phase is GameState.GAME_OVER:
            log.info("Game over, final score %d", self.score)
        return result.outcomes

    # =========================================================================
    # Read-only view
    # =========================================================================

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def phase(self) -> GameState:
        return self._state.phase

    @property
    def score(self) -> int:
        return self._state.session.score

    @property
    def lives(self) -> int:
        return self._state.session.lives

    @property
    def player(self) -> Player:
        return self._state.player

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return self._state.entities

    @property
    def geometry(self) -> Geometry:
        return self._geometry

    @property
    def intent(self) -> Intent:
        return self._intent

    def snapshot(self) -> Snapshot:
        """Frozen view for rendering."""
        return Snapshot(
            score=self.score,
            lives=self.lives,
            phase=self.phase,
            player=self.player,
            entities=self.entities,
            geometry=self._geometry,
        )
