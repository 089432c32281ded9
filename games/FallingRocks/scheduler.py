"""
Falling Rocks - Frame scheduler.

Runs at most one simulation tick per display frame, and only while the
session is RUNNING. Reaching GAME_OVER drops the pending tick; nothing is
scheduled again until start or restart.
"""
from typing import Callable, List, Optional, Tuple

from models import Outcome
from rockfall.games.game_state import GameState
from rockfall.logging import get_logger
from games.FallingRocks.simulation import Simulation

log = get_logger('scheduler')


class FrameScheduler:
    """Drives a Simulation from the display loop."""

    def __init__(self, simulation: Simulation, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            simulation: Simulation to drive
            clock: Millisecond clock passed to each tick (default: the simulation's own)
        """
        self._simulation = simulation
        self._clock = clock
        self._scheduled = simulation.phase is GameState.RUNNING
        self._ticks = 0

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    @property
    def is_scheduled(self) -> bool:
        """True while a tick is pending for the next frame."""
        return self._scheduled

    @property
    def tick_count(self) -> int:
        """Ticks executed since creation."""
        return self._ticks

    def start(self) -> None:
        """Issue the start command and schedule the loop."""
        self._simulation.start()
        self._reschedule()

    def restart(self) -> None:
        """Issue the restart command and schedule the loop."""
        self._simulation.restart()
        self._reschedule()

    def cancel(self) -> None:
        """Drop the pending tick."""
        self._scheduled = False

    def _reschedule(self) -> None:
        was_scheduled = self._scheduled
        self._scheduled = self._simulation.phase is GameState.RUNNING
        if was_scheduled and not self._scheduled:
            log.debug("Loop suspended after %d ticks", self._ticks)

    def pump(self) -> Tuple[Outcome, ...]:
        """Called once per display frame; runs the pending tick if any."""
        if not self._scheduled:
            return ()
        now_ms = self._clock() if self._clock is not None else None
        outcomes = self._simulation.tick(now_ms)
        self._ticks += 1
        self._reschedule()
        return outcomes

    def run_frames(self, count: int) -> List[Outcome]:
        """Pump ``count`` frames, e.g. for headless runs."""
        outcomes: List[Outcome] = []
        for _ in range(count):
            outcomes.extend(self.pump())
        return outcomes
