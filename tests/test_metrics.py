"""Tests for per-run welfare metrics."""

import pytest

from liquidation_poa.analysis.metrics import (
    RunResult, coverage, front_runner_share, gas_waste_ratio, profit_concentration, top_cohort_size,
)
from liquidation_poa.core.strategy import ObfuscationStrategy


@pytest.mark.parametrize("num_keepers, expected", [(1, 1), (4, 1), (5, 1), (10, 2), (20, 4), (23, 4)])
def test_top_cohort_size(num_keepers, expected):
    assert top_cohort_size(num_keepers) == expected


def test_concentration_top_four_of_twenty():
    profits = [0.0] * 16 + [10.0, 20.0, 30.0, 40.0]
    assert profit_concentration(profits, 100.0) == pytest.approx(1.0)
    even = [5.0] * 20
    assert profit_concentration(even, 100.0) == pytest.approx(0.2)


def test_concentration_with_fewer_than_five_keepers_uses_one():
    assert profit_concentration([30.0, 70.0], 100.0) == pytest.approx(0.7)


def test_concentration_is_zero_without_profit():
    assert profit_concentration([0.0] * 20, 0.0) == 0.0


def test_concentration_ignores_unassigned_profit():
    # Keeper Pool: only 70% of extracted profit reaches keepers
    profits = [17.5] * 4 + [0.0] * 16
    assert profit_concentration(profits, 100.0) == pytest.approx(0.7)


def test_concentration_is_clamped():
    assert profit_concentration([150.0], 100.0) == 1.0


def test_gas_waste_ratio():
    assert gas_waste_ratio(0, 0) == 0.0
    assert gas_waste_ratio(5, 0) == 1.0
    assert gas_waste_ratio(1, 3) == pytest.approx(0.25)


def test_coverage():
    assert coverage(0, 0) == 0.0
    assert coverage(3, 4) == pytest.approx(0.75)
    assert coverage(4, 4) == 1.0


def test_front_runner_share():
    assert front_runner_share(0.0, 0.0) == 0.0
    assert front_runner_share(25.0, 100.0) == pytest.approx(0.25)
    assert front_runner_share(100.0, 100.0) == 1.0


def test_run_result_record():
    result = RunResult(
        strategy=ObfuscationStrategy.KEEPER_POOL,
        successful_liquidations=3, failed_attempts=1, missed_liquidations=0, truly_liquidatable=3,
        total_profit=200.0, front_runner_profit=50.0, profit_concentration=0.4,
        gas_waste_ratio=0.25, coverage=1.0, keeper_profits=(70.0, 70.0),
    )
    record = result.as_record()
    assert record["strategy"] == "Keeper Pool 70/30"
    assert record["front_runner_share"] == pytest.approx(0.25)
    assert record["keeper_profits"] == [70.0, 70.0]
