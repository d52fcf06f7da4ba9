"""Tests for Price of Anarchy aggregation."""

import pytest

from liquidation_poa.analysis.metrics import RunResult
from liquidation_poa.analysis.poa import (
    compute_poa, reports_to_frame, results_to_frame, social_optimum, summarize_strategy,
)
from liquidation_poa.config import SimulationConfig
from liquidation_poa.core.strategy import ObfuscationStrategy


def _result(strategy=ObfuscationStrategy.TRANSPARENT, concentration=0.5, waste=0.1, cov=0.9,
            successful=9, failed=1, missed=1, total=100.0, front=80.0):
    return RunResult(
        strategy=strategy,
        successful_liquidations=successful, failed_attempts=failed, missed_liquidations=missed,
        truly_liquidatable=successful + missed, total_profit=total, front_runner_profit=front,
        profit_concentration=concentration, gas_waste_ratio=waste, coverage=cov,
        keeper_profits=(total,),
    )


def test_social_optimum():
    assert social_optimum(20) == pytest.approx(0.2)
    assert social_optimum(10) == pytest.approx(0.2)
    assert social_optimum(3) == pytest.approx(1 / 3)


def test_compute_poa_single_run():
    poa = compute_poa([_result(concentration=0.5, waste=0.1, cov=0.9)], 0.2)
    assert poa == pytest.approx((0.5 + 0.1 + 0.1) / 0.2)


def test_compute_poa_averages_runs():
    results = [_result(concentration=1.0, waste=0.0, cov=1.0), _result(concentration=0.0, waste=0.5, cov=0.5)]
    assert compute_poa(results, 0.2) == pytest.approx((0.5 + 0.25 + 0.25) / 0.2)


def test_compute_poa_floors_tiny_optimum():
    assert compute_poa([_result(concentration=0.01, waste=0.0, cov=1.0)], 0.0) == pytest.approx(1.0)


def test_ideal_market_poa_is_one():
    assert compute_poa([_result(concentration=0.2, waste=0.0, cov=1.0)], 0.2) == pytest.approx(1.0)


def test_compute_poa_rejects_empty():
    with pytest.raises(ValueError):
        compute_poa([], 0.2)


def test_summarize_strategy():
    results = [_result(successful=8, failed=2, missed=0, total=100.0, front=50.0, concentration=0.4),
               _result(successful=10, failed=0, missed=2, total=100.0, front=100.0, concentration=0.6)]
    report = summarize_strategy(ObfuscationStrategy.IPFE, results, SimulationConfig())
    assert report.strategy == "IPFE Only"
    assert report.avg_successful == pytest.approx(9.0)
    assert report.avg_failed == pytest.approx(1.0)
    assert report.avg_missed == pytest.approx(1.0)
    assert report.avg_concentration_pct == pytest.approx(50.0)
    assert report.avg_front_runner_share_pct == pytest.approx(75.0)
    assert report.poa == pytest.approx(compute_poa(results, 0.2))


def test_summarize_strategy_rejects_empty():
    with pytest.raises(ValueError):
        summarize_strategy(ObfuscationStrategy.IPFE, [], SimulationConfig())


def test_results_to_frame_numbers_runs_per_strategy():
    results = [_result(ObfuscationStrategy.TRANSPARENT), _result(ObfuscationStrategy.TRANSPARENT),
               _result(ObfuscationStrategy.KEEPER_POOL)]
    df = results_to_frame(results)
    assert list(df["run"]) == [1, 2, 1]
    assert list(df["strategy"]) == ["Transparent", "Transparent", "Keeper Pool 70/30"]


def test_reports_to_frame_columns():
    report = summarize_strategy(ObfuscationStrategy.TRANSPARENT, [_result()], SimulationConfig())
    df = reports_to_frame([report])
    assert list(df.columns) == ["strategy", "avg_successful", "avg_failed", "avg_missed",
                                "avg_concentration_pct", "avg_front_runner_share_pct", "poa"]
    assert len(df) == 1
