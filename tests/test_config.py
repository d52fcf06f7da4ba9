"""Tests for simulation configuration."""

import math

import pytest

from liquidation_poa import config
from liquidation_poa.config import SimulationConfig


def test_defaults_match_reference_study():
    sim_config = SimulationConfig()
    assert sim_config.num_positions == 100
    assert sim_config.num_keepers == 20
    assert sim_config.num_runs == 10_000
    assert sim_config.reference_price == 2000.0
    assert sim_config.price_shock == pytest.approx(0.10)
    assert sim_config.true_weights == (2.0, -1.0, -1.5, 0.3, -0.3)
    assert sim_config.validate() is sim_config


def test_with_overrides_returns_new_config():
    base = SimulationConfig()
    derived = base.with_overrides(num_runs=3, true_weights=[1, 0, 0, 0, 0])
    assert derived.num_runs == 3
    assert derived.true_weights == (1.0, 0.0, 0.0, 0.0, 0.0)
    assert base.num_runs == config.SIMULATION_RUNS


@pytest.mark.parametrize("overrides", [
    {"num_positions": 0},
    {"num_keepers": -1},
    {"num_runs": 0},
    {"reference_price": 0.0},
    {"liquidation_penalty": 1.5},
    {"price_shock": 1.0},
    {"noise_level": -0.1},
    {"gas_cost": -1.0},
    {"true_weights": (1.0, 2.0)},
    {"true_weights": (1.0, 2.0, math.nan, 0.0, 0.0)},
    {"true_threshold": math.inf},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValueError, match="Invalid simulation configuration"):
        SimulationConfig().with_overrides(**overrides).validate()


def test_all_problems_reported_together():
    with pytest.raises(ValueError) as excinfo:
        SimulationConfig(num_positions=0, num_keepers=0).validate()
    message = str(excinfo.value)
    assert "num_positions" in message
    assert "num_keepers" in message
