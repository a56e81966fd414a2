"""
montyhall/trial.py - Paired Trial Runner

One trial plays both strategies against the same game, the same initial
pick and the same opened door.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd

from .constants import STRATEGIES, Outcome, Strategy
from .game import determine_winner, generate_game, open_goat_door, resolve, select_door
from .rng import ensure_rng
from .types_result import COLUMNS, TrialResult


def play_trial(rng: Optional[np.random.Generator] = None) -> Dict[Strategy, Outcome]:
    """
    Play one game and judge both strategies on it.

    Args:
        rng: Generator used for layout, pick and host choice

    Returns:
        {Strategy.STAY: Outcome, Strategy.SWITCH: Outcome}
    """
    rng = ensure_rng(rng)
    game = generate_game(rng)
    first_pick = select_door(rng)
    opened = open_goat_door(game, first_pick, rng)

    outcomes = {}
    for strategy in STRATEGIES:
        final_pick = resolve(strategy, opened, first_pick)
        outcomes[strategy] = determine_winner(final_pick, game)
    return outcomes


def trial_results(trial: int,
                  rng: Optional[np.random.Generator] = None) -> Tuple[TrialResult, TrialResult]:
    """play_trial() as a (stay, switch) pair of TrialResult."""
    outcomes = play_trial(rng)
    return tuple(TrialResult(trial, s, outcomes[s]) for s in STRATEGIES)


def play_game(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    """
    Play one game and return the two-row result table.

    Returns:
        DataFrame with columns strategy ("stay"/"switch") and
        outcome ("WIN"/"LOSE")
    """
    outcomes = play_trial(rng)
    rows = [{"strategy": s.value, "outcome": outcomes[s].value} for s in STRATEGIES]
    return pd.DataFrame(rows, columns=COLUMNS)
