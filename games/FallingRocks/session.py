"""
Falling Rocks - Session state machine.

NOT_STARTED -> RUNNING -> GAME_OVER, with restart leading back to
RUNNING. Transitions are pure functions over the immutable SessionState:
each returns a new instance and leaves its argument untouched.

Examples:
    >>> state = start(SessionState())
    >>> state = apply_outcome(state, EntityCategory.COIN)
    >>> state.score, state.lives, state.phase.value
    (10, 3, 'running')
    >>> for _ in range(3):
    ...     state = apply_outcome(state, EntityCategory.HAZARD)
    >>> state.lives, state.phase.value
    (0, 'game_over')
"""
from typing import Iterable

from models import EntityCategory, Outcome, SessionState
from rockfall.games.game_state import GameState
from games.FallingRocks import config


def fresh_running() -> SessionState:
    """A just-started session: no score, full lives."""
    return SessionState(started=True, over=False, score=0, lives=config.STARTING_LIVES)


def start(state: SessionState) -> SessionState:
    """Start command. Only valid before the first start; otherwise a no-op."""
    if state.phase is not GameState.NOT_STARTED:
        return state
    return fresh_running()


def restart(state: SessionState) -> SessionState:
    """Restart command. From any phase, begins a new running session."""
    return fresh_running()


def _fold(state: SessionState, category: EntityCategory) -> SessionState:
    if category.is_hazard:
        lives = max(0, state.lives - config.HAZARD_DAMAGE)
        # lives and over change in the same transition
        return state.model_copy(update={'lives': lives, 'over': lives == 0})
    return state.model_copy(update={'score': state.score + config.CATEGORY_POINTS[category]})


def apply_outcome(state: SessionState, category: EntityCategory) -> SessionState:
    """Fold one collision outcome into the session.

    Hazards cost a life and end the session on the hit that reaches zero.
    Rewards add their points. Outside RUNNING nothing changes, so hits
    after game over have no effect.
    """
    if state.phase is not GameState.RUNNING:
        return state
    return _fold(state, category)


def apply_outcomes(state: SessionState, outcomes: Iterable[Outcome]) -> SessionState:
    """Apply every outcome of one tick.

    The phase is checked once, before the first outcome. Outcomes of the
    same tick are independent and cumulative, so a reward caught alongside
    the final hazard still scores whatever its position in the sequence.
    """
    if state.phase is not GameState.RUNNING:
        return state
    for outcome in outcomes:
        state = _fold(state, outcome.category)
    return state
