"""
montyhall/types_config.py - SimConfig Dataclass and Scenario Presets

Immutable configuration for batch runs, plus loading from JSON/YAML files.
"""

import json
from dataclasses import asdict, dataclass, fields
from numbers import Integral
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .constants import DEFAULT_CONFIDENCE, DEFAULT_N_GAMES, ROUND_DIGITS
from .errors import InvalidArgument

__all__ = [
    "SimConfig",
    "SCENARIO_DEFAULT",
    "SCENARIO_QUICK",
    "SCENARIO_CONVERGENCE",
    "SCENARIOS",
    "load_config",
]


@dataclass(frozen=True)
class SimConfig:
    """Batch configuration (immutable)."""
    n_games: int = DEFAULT_N_GAMES
    random_seed: Optional[int] = None
    round_digits: int = ROUND_DIGITS
    confidence: float = DEFAULT_CONFIDENCE
    tenant_id: str = "montyhall"
    scenario_name: str = "DEFAULT"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise InvalidArgument on the first bad field."""
        if not _is_int(self.n_games) or self.n_games < 1:
            raise InvalidArgument(f"n_games must be an integer >= 1, got {self.n_games!r}")
        if self.random_seed is not None and (not _is_int(self.random_seed) or self.random_seed < 0):
            raise InvalidArgument(f"random_seed must be a non-negative integer, got {self.random_seed!r}")
        if not _is_int(self.round_digits) or self.round_digits < 0:
            raise InvalidArgument(f"round_digits must be an integer >= 0, got {self.round_digits!r}")
        if not isinstance(self.confidence, (int, float)) or not 0.0 < self.confidence < 1.0:
            raise InvalidArgument(f"confidence must be in (0, 1), got {self.confidence!r}")
        if not isinstance(self.tenant_id, str) or not self.tenant_id:
            raise InvalidArgument("tenant_id must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


# =============================================================================
# SCENARIO PRESETS
# =============================================================================

SCENARIO_DEFAULT = SimConfig()

SCENARIO_QUICK = SimConfig(
    n_games=100,
    random_seed=42,
    scenario_name="QUICK"
)

SCENARIO_CONVERGENCE = SimConfig(
    n_games=10_000,
    random_seed=42,
    scenario_name="CONVERGENCE"
)

SCENARIOS = {
    "DEFAULT": SCENARIO_DEFAULT,
    "QUICK": SCENARIO_QUICK,
    "CONVERGENCE": SCENARIO_CONVERGENCE,
}


# =============================================================================
# LOADING
# =============================================================================

def load_config(path: Union[str, Path]) -> SimConfig:
    """
    Load a SimConfig from a JSON or YAML file.

    Args:
        path: File path; .yaml/.yml is parsed as YAML, anything else as JSON

    Returns:
        Validated SimConfig

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidArgument: Unknown keys or invalid values
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise InvalidArgument(f"Config must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(SimConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgument(f"Unknown config keys: {unknown}")

    return SimConfig(**data)
