"""
montyhall/types_result.py - TrialResult and BatchReport Dataclasses

Immutable result containers. Raw counts stay at full precision; rounding is
left to the reporting layer.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import pandas as pd

from .constants import STRATEGIES, Outcome, Strategy

# Column names of the row-oriented result table
COLUMNS = ["strategy", "outcome"]


@dataclass(frozen=True)
class TrialResult:
    """One strategy's outcome in one trial."""
    trial: int
    strategy: Strategy
    outcome: Outcome

    def as_row(self) -> dict:
        return {"strategy": self.strategy.value, "outcome": self.outcome.value}


@dataclass(frozen=True)
class BatchReport:
    """
    Immutable batch result: 2n trial results plus per-strategy win counts.

    wins is ordered like STRATEGIES (stay, switch). replicate is the spawned
    stream index when the batch came from run_replicates.
    """
    results: Tuple[TrialResult, ...]
    n_games: int
    wins: Tuple[int, int]
    seed: Optional[int] = None
    replicate: Optional[int] = None
    receipt: dict = field(default_factory=dict, compare=False)

    @property
    def win_counts(self) -> Dict[Strategy, int]:
        """Fresh strategy -> wins mapping."""
        return dict(zip(STRATEGIES, self.wins))

    @property
    def win_proportions(self) -> Dict[Strategy, float]:
        """Full-precision wins / n_games per strategy."""
        return {s: self.win_counts[s] / self.n_games for s in STRATEGIES}

    def win_proportion(self, strategy: Strategy) -> float:
        return self.wins[STRATEGIES.index(strategy)] / self.n_games

    def loss_counts(self) -> Dict[Strategy, int]:
        return {s: self.n_games - self.win_counts[s] for s in STRATEGIES}

    def to_frame(self) -> pd.DataFrame:
        """Row-oriented table, 2 * n_games rows, in trial order."""
        return pd.DataFrame([r.as_row() for r in self.results], columns=COLUMNS)
