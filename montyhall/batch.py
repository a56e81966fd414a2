"""
montyhall/batch.py - Batch Simulation

Repeats the paired trial n times and folds the results into a BatchReport.
Entry points: run_batch, play_n_games, run_replicates, run_config.
"""

import logging
from numbers import Integral
from typing import List, Optional

import numpy as np
import pandas as pd

from .constants import DEFAULT_N_GAMES, STRATEGIES, Outcome
from .errors import InvalidArgument
from .receipts import emit_receipt
from .report import print_proportion_table
from .rng import make_rng, spawn_rngs
from .trial import trial_results
from .types_config import SimConfig
from .types_result import BatchReport

logger = logging.getLogger(__name__)


def _check_n(n) -> None:
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 1:
        raise InvalidArgument(f"n must be an integer >= 1, got {n!r}")


def run_batch(n: int,
              rng: Optional[np.random.Generator] = None,
              seed: Optional[int] = None,
              tenant_id: str = "montyhall",
              replicate: Optional[int] = None) -> BatchReport:
    """
    Play n paired trials and count wins per strategy.

    Args:
        n: Number of trials (>= 1)
        rng: Generator to draw from; built from seed when None
        seed: Seed recorded on the report (and used if rng is None)
        tenant_id: Receipt tenant
        replicate: Spawned stream index, recorded on the report and receipt

    Returns:
        BatchReport with 2n results in trial order

    Raises:
        InvalidArgument: n is not an integer >= 1
    """
    _check_n(n)
    if rng is None:
        rng = make_rng(seed)
    logger.debug("Running batch: n=%d seed=%s", n, seed)

    results = []
    win_counts = {s: 0 for s in STRATEGIES}
    for trial in range(n):
        for result in trial_results(trial, rng):
            results.append(result)
            if result.outcome is Outcome.WIN:
                win_counts[result.strategy] += 1

    receipt = emit_receipt("batch_receipt", {
        "tenant_id": tenant_id,
        "n_games": int(n),
        "seed": seed,
        "replicate": replicate,
        "wins": {s.value: win_counts[s] for s in STRATEGIES},
    })

    report = BatchReport(
        results=tuple(results),
        n_games=int(n),
        wins=tuple(win_counts[s] for s in STRATEGIES),
        seed=seed,
        replicate=replicate,
        receipt=receipt,
    )
    logger.info(
        "Batch done: n=%d stay=%.4f switch=%.4f",
        n, *(report.win_proportions[s] for s in STRATEGIES)
    )
    return report


def play_n_games(n: int = DEFAULT_N_GAMES,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 show: bool = True) -> pd.DataFrame:
    """
    Play n games and return the 2n-row strategy/outcome table.

    When show is True the rounded row-proportion table is printed to stdout.
    """
    report = run_batch(n, rng=rng, seed=seed)
    if show:
        print_proportion_table(report)
    return report.to_frame()


def run_replicates(n: int, replicates: int,
                   seed: Optional[int] = None,
                   tenant_id: str = "montyhall") -> List[BatchReport]:
    """
    Run independent batches on spawned, non-overlapping streams.

    Replicate k ran on spawn_rngs(seed, replicates)[k]; k is stored as
    report.replicate and in the receipt.

    Args:
        n: Trials per batch
        replicates: Number of batches (>= 1)
        seed: Root seed for the spawned streams

    Returns:
        List of BatchReport, one per replicate
    """
    _check_n(n)
    if isinstance(replicates, bool) or not isinstance(replicates, Integral) or replicates < 1:
        raise InvalidArgument(f"replicates must be an integer >= 1, got {replicates!r}")

    reports = []
    for index, rng in enumerate(spawn_rngs(seed, replicates)):
        reports.append(run_batch(n, rng=rng, seed=seed, tenant_id=tenant_id, replicate=index))
    return reports


def run_config(config: SimConfig) -> BatchReport:
    """Run one batch described by a SimConfig."""
    logger.debug("Running scenario %s", config.scenario_name)
    return run_batch(
        config.n_games,
        seed=config.random_seed,
        tenant_id=config.tenant_id,
    )
