"""
montyhall/constants.py - Game Constants

Door domain, content/strategy/outcome enums and reporting defaults.
Pure data, no behavior.
"""

from enum import Enum

# =============================================================================
# DOORS
# =============================================================================

DOORS = (1, 2, 3)
N_DOORS = len(DOORS)


# =============================================================================
# ENUMS
# =============================================================================

class Content(str, Enum):
    """What stands behind a door."""
    GOAT = "goat"
    CAR = "car"


class Strategy(str, Enum):
    """Contestant decision after the host opens a door."""
    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Trial result; values are the reporting literals."""
    WIN = "WIN"
    LOSE = "LOSE"


# Fixed order for tables and exports
STRATEGIES = (Strategy.STAY, Strategy.SWITCH)
OUTCOMES = (Outcome.LOSE, Outcome.WIN)

# =============================================================================
# REPORTING DEFAULTS
# =============================================================================

DEFAULT_N_GAMES = 100
ROUND_DIGITS = 2            # Display precision for proportion tables
DEFAULT_CONFIDENCE = 0.95   # Clopper-Pearson interval level

# Long-run win rates, used by convergence checks
EXPECTED_WIN_RATE = {
    Strategy.STAY: 1.0 / 3.0,
    Strategy.SWITCH: 2.0 / 3.0,
}
