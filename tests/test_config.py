"""
tests/test_config.py - SimConfig Tests

Validation, presets and file loading.
"""

import json

import pytest

from montyhall.errors import InvalidArgument
from montyhall.types_config import (
    SCENARIO_CONVERGENCE,
    SCENARIO_DEFAULT,
    SCENARIO_QUICK,
    SCENARIOS,
    SimConfig,
    load_config,
)


class TestSimConfig:
    """Test SimConfig validation."""

    def test_defaults(self):
        """Defaults: 100 games, 2 digits, unseeded."""
        config = SimConfig()
        assert config.n_games == 100
        assert config.round_digits == 2
        assert config.random_seed is None

    def test_is_immutable(self):
        """SimConfig is frozen."""
        with pytest.raises(Exception):  # FrozenInstanceError
            SCENARIO_DEFAULT.n_games = 5

    @pytest.mark.parametrize("kwargs", [
        {"n_games": 0},
        {"n_games": -3},
        {"n_games": True},
        {"n_games": 1.5},
        {"random_seed": -1},
        {"round_digits": -1},
        {"confidence": 0.0},
        {"confidence": 1.0},
        {"tenant_id": ""},
    ])
    def test_rejects_invalid(self, kwargs):
        """Invalid fields raise InvalidArgument."""
        with pytest.raises(InvalidArgument):
            SimConfig(**kwargs)

    def test_presets(self):
        """Presets are registered by name."""
        assert SCENARIOS["QUICK"] is SCENARIO_QUICK
        assert SCENARIO_CONVERGENCE.n_games >= 10_000
        assert SCENARIO_CONVERGENCE.random_seed is not None


class TestLoadConfig:
    """Test load_config."""

    def test_json(self, tmp_path):
        """JSON files load into SimConfig."""
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"n_games": 250, "random_seed": 9}))
        config = load_config(path)
        assert config.n_games == 250
        assert config.random_seed == 9

    def test_yaml(self, tmp_path):
        """YAML files load into SimConfig."""
        path = tmp_path / "run.yaml"
        path.write_text("n_games: 40\nscenario_name: SMALL\n")
        config = load_config(str(path))
        assert config.n_games == 40
        assert config.scenario_name == "SMALL"

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_unknown_key(self, tmp_path):
        """Unknown keys are rejected."""
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"n_games": 10, "doors": 4}))
        with pytest.raises(InvalidArgument):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        """Invalid values are rejected."""
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"n_games": 0}))
        with pytest.raises(InvalidArgument):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        """Top level must be a mapping."""
        path = tmp_path / "run.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(InvalidArgument):
            load_config(path)
