"""Standard GameState enum for Rockfall games.

All games report one of these states via their `state` property. The
frame scheduler only ticks a game while it is RUNNING.
"""
from enum import Enum


class GameState(str, Enum):
    """Session phase shared by all Rockfall games.

    States:
        NOT_STARTED: Waiting for the start command, nothing simulated
        RUNNING: Active gameplay in progress
        GAME_OVER: Terminal state, waiting for restart
    """
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"

    @property
    def is_paused(self) -> bool:
        """True when the simulation must not advance."""
        return self is not GameState.RUNNING
