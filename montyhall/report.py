"""
montyhall/report.py - Reporting and Export

Formats batch results: the rounded strategy x outcome proportion table,
Clopper-Pearson win-rate intervals, a rich table for the CLI and a JSON
export. Nothing here changes a BatchReport.
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

import pandas as pd
from rich.table import Table
from scipy.stats import beta

from .constants import DEFAULT_CONFIDENCE, OUTCOMES, ROUND_DIGITS, STRATEGIES, Strategy
from .errors import InvalidArgument

if TYPE_CHECKING:
    from .types_result import BatchReport


def _as_frame(source: Union["BatchReport", pd.DataFrame]) -> pd.DataFrame:
    if isinstance(source, pd.DataFrame):
        return source
    return source.to_frame()


def proportion_table(source: Union["BatchReport", pd.DataFrame],
                     digits: int = ROUND_DIGITS) -> pd.DataFrame:
    """
    Row-normalized strategy x outcome table, rounded for display.

    Args:
        source: BatchReport or a strategy/outcome DataFrame
        digits: Decimal places

    Returns:
        DataFrame indexed by strategy with LOSE and WIN columns; each row sums to 1
    """
    frame = _as_frame(source)
    if frame.empty:
        raise InvalidArgument("Cannot tabulate an empty result table")

    table = pd.crosstab(frame["strategy"], frame["outcome"], normalize="index")
    rows = [s.value for s in STRATEGIES if s.value in table.index]
    table = table.reindex(index=rows, columns=[o.value for o in OUTCOMES], fill_value=0.0)
    table.index.name = "strategy"
    table.columns.name = "outcome"
    return table.round(digits)


def format_table(table: pd.DataFrame) -> str:
    """Plain-text render of a proportion table."""
    return table.to_string()


def print_proportion_table(source: Union["BatchReport", pd.DataFrame],
                           digits: int = ROUND_DIGITS) -> pd.DataFrame:
    """Print the proportion table to stdout and return it."""
    table = proportion_table(source, digits)
    print(format_table(table))
    return table


# =============================================================================
# CONFIDENCE INTERVALS
# =============================================================================

def win_rate_interval(wins: int, n: int,
                      confidence: float = DEFAULT_CONFIDENCE) -> Tuple[float, float]:
    """
    Clopper-Pearson exact interval for a win proportion.

    Uses scipy.stats.beta.ppf:
        lower = beta.ppf(alpha/2, k, n-k+1)
        upper = beta.ppf(1-alpha/2, k+1, n-k)

    Returns:
        (lower, upper)
    """
    if n < 1 or not 0 <= wins <= n:
        raise InvalidArgument(f"Need 0 <= wins <= n and n >= 1, got wins={wins}, n={n}")
    if not 0.0 < confidence < 1.0:
        raise InvalidArgument(f"confidence must be in (0, 1), got {confidence}")

    alpha = 1.0 - confidence
    lower = 0.0 if wins == 0 else float(beta.ppf(alpha / 2, wins, n - wins + 1))
    upper = 1.0 if wins == n else float(beta.ppf(1 - alpha / 2, wins + 1, n - wins))
    return lower, upper


# =============================================================================
# SUMMARY / EXPORT
# =============================================================================

def summarize(report: "BatchReport",
              confidence: float = DEFAULT_CONFIDENCE) -> Dict[str, Any]:
    """Counts, full-precision rates and intervals per strategy."""
    losses = report.loss_counts()
    strategies = {}
    for s in STRATEGIES:
        wins = report.win_counts[s]
        low, high = win_rate_interval(wins, report.n_games, confidence)
        strategies[s.value] = {
            "wins": wins,
            "losses": losses[s],
            "win_rate": report.win_proportion(s),
            "ci_low": low,
            "ci_high": high,
        }

    return {
        "n_games": report.n_games,
        "seed": report.seed,
        "confidence": confidence,
        "strategies": strategies,
        "switch_advantage": (
            report.win_proportion(Strategy.SWITCH) - report.win_proportion(Strategy.STAY)
        ),
        "payload_hash": report.receipt.get("payload_hash"),
    }


def export_report(report: "BatchReport",
                  output_path: Optional[str] = None,
                  confidence: float = DEFAULT_CONFIDENCE) -> str:
    """
    Format a BatchReport summary as JSON.

    Args:
        report: BatchReport to export
        output_path: Optional file path to write the JSON to
        confidence: Interval level

    Returns:
        str: JSON formatted output
    """
    text = json.dumps(summarize(report, confidence), indent=2)
    if output_path:
        with open(output_path, "w") as f:
            f.write(text)
    return text


def render_rich(report: "BatchReport",
                confidence: float = DEFAULT_CONFIDENCE,
                digits: int = ROUND_DIGITS) -> Table:
    """Rich table: one row per strategy with win rate and interval."""
    summary = summarize(report, confidence)
    table = Table(title=f"Monty Hall: {report.n_games} games")
    table.add_column("Strategy", style="bold")
    table.add_column("Wins", justify="right")
    table.add_column("Losses", justify="right")
    table.add_column("Win rate", justify="right")
    table.add_column(f"{confidence:.0%} CI", justify="right")

    for name, row in summary["strategies"].items():
        table.add_row(
            name,
            str(row["wins"]),
            str(row["losses"]),
            f"{row['win_rate']:.{digits}f}",
            f"[{row['ci_low']:.{digits}f}, {row['ci_high']:.{digits}f}]",
        )
    return table
