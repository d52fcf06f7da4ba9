"""Shared test fixtures."""

import pytest

from liquidation_poa.config import SimulationConfig
from liquidation_poa.core.game_state import GameState
from liquidation_poa.core.position import Position
from liquidation_poa.core.strategy import ObfuscationStrategy


class ScriptedRandom:
    """Random source that replays a fixed sequence of uniform draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.consumed = 0

    def random(self) -> float:
        if self.consumed >= len(self.draws):
            raise AssertionError(f"Scripted random source exhausted after {self.consumed} draws")
        value = self.draws[self.consumed]
        self.consumed += 1
        return value

    def randrange(self, n: int) -> int:
        return int(self.random() * n)


class StubKeeper:
    """Keeper stand-in with the attributes the auction resolver uses."""

    def __init__(self, keeper_id: int, gas_priority: float):
        self.keeper_id = keeper_id
        self.gas_priority = gas_priority
        self.total_profit = 0.0
        self.successful_liquidations = 0

    @property
    def is_front_runner(self) -> bool:
        return self.gas_priority > 0.8

    def record_profit(self, amount: float):
        self.total_profit += amount

    def record_success(self):
        self.successful_liquidations += 1


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def stub_keepers():
    def _make(*gas_priorities):
        return [StubKeeper(i, g) for i, g in enumerate(gas_priorities)]
    return _make


@pytest.fixture
def risky_position() -> Position:
    """Opened at 130% CR; truly eligible after the 10% crash."""
    collateral = 5.0
    return Position(0, collateral=collateral, debt=collateral * 2000.0 / 1.3, age_days=100.0, volatility_score=0.5)


@pytest.fixture
def safe_position() -> Position:
    """Opened at 180% CR; scores above the threshold after the crash."""
    collateral = 5.0
    return Position(1, collateral=collateral, debt=collateral * 2000.0 / 1.8, age_days=300.0, volatility_score=0.0)


@pytest.fixture
def make_state():
    def _make(positions, strategy=ObfuscationStrategy.TRANSPARENT, price=1800.0, **kwargs):
        return GameState(positions=positions, strategy=strategy, price=price, **kwargs)
    return _make


@pytest.fixture
def small_config() -> SimulationConfig:
    return SimulationConfig(num_positions=30, num_keepers=10, num_runs=5)
