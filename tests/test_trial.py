"""
tests/test_trial.py - Paired Trial Tests

Both strategies are judged on the same game and pick.
"""

import pandas as pd

from montyhall.constants import STRATEGIES, Outcome, Strategy
from montyhall.rng import make_rng
from montyhall.trial import play_game, play_trial, trial_results
from montyhall.types_result import TrialResult


class TestPlayTrial:
    """Test play_trial."""

    def test_returns_both_strategies(self):
        """One outcome per strategy."""
        outcomes = play_trial(make_rng(1))
        assert set(outcomes) == set(STRATEGIES)
        assert all(isinstance(o, Outcome) for o in outcomes.values())

    def test_strategies_are_complementary(self):
        """Same game and pick: exactly one of stay/switch wins."""
        rng = make_rng(2)
        for _ in range(300):
            outcomes = play_trial(rng)
            assert outcomes[Strategy.STAY] is not outcomes[Strategy.SWITCH], (
                f"Paired trial gave identical outcomes: {outcomes}"
            )

    def test_reproducible(self):
        """Same seed, same trial sequence."""
        a, b = make_rng(8), make_rng(8)
        assert [play_trial(a) for _ in range(50)] == [play_trial(b) for _ in range(50)]


class TestTrialResults:
    """Test trial_results."""

    def test_pair_shares_trial_index(self):
        """Both results carry the trial number, stay first."""
        stay, switch = trial_results(4, make_rng(0))
        assert isinstance(stay, TrialResult)
        assert stay.trial == switch.trial == 4
        assert stay.strategy is Strategy.STAY
        assert switch.strategy is Strategy.SWITCH


class TestPlayGame:
    """Test play_game."""

    def test_two_rows(self):
        """Two rows, strategy and outcome columns."""
        frame = play_game(make_rng(3))
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == ["strategy", "outcome"]
        assert list(frame["strategy"]) == ["stay", "switch"]

    def test_outcome_literals(self):
        """Outcomes use the WIN / LOSE literals."""
        frame = play_game(make_rng(3))
        assert set(frame["outcome"]) <= {"WIN", "LOSE"}
        assert sorted(frame["outcome"]) == ["LOSE", "WIN"]

    def test_default_rng(self):
        """Runs without an explicit generator."""
        assert len(play_game()) == 2
