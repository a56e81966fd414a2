"""
montyhall - Monty Hall Simulation Package

Public API: single-game steps, the paired trial runner, batch simulation and
reporting. One file = one responsibility.
"""

# =============================================================================
# TYPES
# =============================================================================
from .constants import (
    DOORS,
    Content,
    Strategy,
    Outcome,
    STRATEGIES,
    OUTCOMES,
    EXPECTED_WIN_RATE,
)
from .errors import InvalidArgument
from .types_config import (
    SimConfig,
    SCENARIO_DEFAULT,
    SCENARIO_QUICK,
    SCENARIO_CONVERGENCE,
    load_config,
)
from .types_result import TrialResult, BatchReport

# =============================================================================
# GAME STEPS
# =============================================================================
from .rng import make_rng, spawn_rngs
from .game import (
    Game,
    generate_game,
    select_door,
    open_goat_door,
    change_door,
    resolve,
    determine_winner,
)

# =============================================================================
# TRIALS & BATCHES
# =============================================================================
from .trial import play_trial, play_game
from .batch import run_batch, play_n_games, run_replicates, run_config

# =============================================================================
# REPORTING
# =============================================================================
from .report import (
    proportion_table,
    format_table,
    print_proportion_table,
    win_rate_interval,
    summarize,
    export_report,
    render_rich,
)
from .receipts import dual_hash, emit_receipt

__all__ = [
    # Types
    "DOORS",
    "Content",
    "Strategy",
    "Outcome",
    "STRATEGIES",
    "OUTCOMES",
    "EXPECTED_WIN_RATE",
    "InvalidArgument",
    "SimConfig",
    "SCENARIO_DEFAULT",
    "SCENARIO_QUICK",
    "SCENARIO_CONVERGENCE",
    "load_config",
    "TrialResult",
    "BatchReport",
    # Game steps
    "make_rng",
    "spawn_rngs",
    "Game",
    "generate_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "resolve",
    "determine_winner",
    # Trials & batches
    "play_trial",
    "play_game",
    "run_batch",
    "play_n_games",
    "run_replicates",
    "run_config",
    # Reporting
    "proportion_table",
    "format_table",
    "print_proportion_table",
    "win_rate_interval",
    "summarize",
    "export_report",
    "render_rich",
    "dual_hash",
    "emit_receipt",
]
