"""Tests for the session state machine."""
import pytest
from pydantic import ValidationError

from models import EntityCategory, Outcome, SessionState
from rockfall.games.game_state import GameState
from games.FallingRocks import config, session


@pytest.fixture
def running():
    return session.start(SessionState())


def hits(state, *categories):
    for category in categories:
        state = session.apply_outcome(state, category)
    return state


class TestSessionStateValidation:
    """Invariants enforced by the model."""

    def test_defaults(self):
        state = SessionState()
        assert state.phase is GameState.NOT_STARTED
        assert state.score == 0
        assert state.lives == 3

    def test_over_requires_started(self):
        with pytest.raises(ValidationError):
            SessionState(started=False, over=True, lives=1)

    def test_zero_lives_requires_over(self):
        with pytest.raises(ValidationError):
            SessionState(started=True, over=False, lives=0)

    @pytest.mark.parametrize("lives", [-1, 4])
    def test_lives_bounds(self, lives):
        with pytest.raises(ValidationError):
            SessionState(started=True, lives=lives)

    def test_negative_score(self):
        with pytest.raises(ValidationError):
            SessionState(score=-5)

    def test_immutable(self):
        state = SessionState()
        with pytest.raises(ValidationError):
            state.score = 10


class TestTransitions:

    def test_start(self, running):
        assert running.phase is GameState.RUNNING
        assert (running.score, running.lives) == (0, 3)

    def test_start_ignored_once_running(self, running):
        scored = hits(running, EntityCategory.COIN)
        assert session.start(scored) is scored

    def test_outcomes_ignored_before_start(self):
        state = SessionState()
        assert hits(state, EntityCategory.HAZARD, EntityCategory.GEM) == state

    def test_single_hazard(self, running):
        """Scenario A."""
        state = hits(running, EntityCategory.HAZARD)
        assert state.lives == 2
        assert state.score == 0
        assert state.phase is GameState.RUNNING

    def test_three_hazards_end_the_game(self, running):
        """Scenario B."""
        state = hits(running, EntityCategory.HAZARD, EntityCategory.HAZARD, EntityCategory.HAZARD)
        assert state.lives == 0
        assert state.over
        assert state.phase is GameState.GAME_OVER

    def test_fourth_hazard_has_no_effect(self, running):
        over = hits(running, *[EntityCategory.HAZARD] * 3)
        assert hits(over, EntityCategory.HAZARD) == over

    def test_rewards_after_game_over_ignored(self, running):
        over = hits(running, *[EntityCategory.HAZARD] * 3)
        assert hits(over, EntityCategory.GEM).score == 0

    def test_rewards(self, running):
        """Scenario C."""
        state = hits(running, EntityCategory.COIN, EntityCategory.STAR, EntityCategory.GEM)
        assert state.score == 85
        assert state.lives == 3

    @pytest.mark.parametrize("category,points", [
        (EntityCategory.COIN, 10),
        (EntityCategory.STAR, 25),
        (EntityCategory.GEM, 50),
    ])
    def test_points_per_category(self, running, category, points):
        assert hits(running, category).score == points

    def test_restart_after_game_over(self, running):
        """Scenario E (session part)."""
        over = hits(running, EntityCategory.GEM, *[EntityCategory.HAZARD] * 3)
        state = session.restart(over)
        assert state.phase is GameState.RUNNING
        assert (state.score, state.lives) == (0, 3)

    def test_restart_while_running(self, running):
        state = session.restart(hits(running, EntityCategory.COIN, EntityCategory.HAZARD))
        assert (state.score, state.lives) == (0, 3)

    def test_starting_lives_from_config(self, monkeypatch):
        monkeypatch.setattr(config, 'STARTING_LIVES', 2)
        state = session.start(SessionState())
        assert (state.score, state.lives) == (0, 2)
        assert session.restart(state).lives == 2

    def test_apply_outcomes_is_cumulative(self, running):
        outcomes = [
            Outcome(category=EntityCategory.HAZARD, entity_id=1),
            Outcome(category=EntityCategory.STAR, entity_id=2),
            Outcome(category=EntityCategory.STAR, entity_id=3),
        ]
        state = session.apply_outcomes(running, outcomes)
        assert (state.score, state.lives) == (50, 2)

    @pytest.mark.parametrize("categories", [
        (EntityCategory.GEM, EntityCategory.HAZARD),
        (EntityCategory.HAZARD, EntityCategory.GEM),
    ])
    def test_final_hazard_does_not_void_same_tick_rewards(self, running, categories):
        last_life = hits(running, EntityCategory.HAZARD, EntityCategory.HAZARD)
        outcomes = [Outcome(category=c, entity_id=i) for i, c in enumerate(categories)]
        state = session.apply_outcomes(last_life, outcomes)
        assert state.phase is GameState.GAME_OVER
        assert (state.score, state.lives) == (50, 0)

    def test_apply_outcomes_after_game_over_ignored(self, running):
        over = hits(running, *[EntityCategory.HAZARD] * 3)
        outcomes = [Outcome(category=EntityCategory.GEM, entity_id=7),
                    Outcome(category=EntityCategory.HAZARD, entity_id=8)]
        assert session.apply_outcomes(over, outcomes) is over

    def test_apply_outcomes_before_start_ignored(self):
        state = SessionState()
        assert session.apply_outcomes(state, [Outcome(category=EntityCategory.COIN, entity_id=0)]) is state

    def test_transitions_do_not_mutate(self, running):
        hits(running, EntityCategory.HAZARD, EntityCategory.GEM)
        assert (running.score, running.lives) == (0, 3)
