# liquidation_poa/analysis/poa.py

"""
Price of Anarchy = Nash Cost / Social Optimum.

Nash cost factors:
  - profit concentration (bad: top keepers extract everything)
  - gas waste (bad: failed attempts cost the network)
  - missed liquidations, as 1 - coverage (bad: system risk)

Social optimum: equal profit distribution, no waste, full coverage.
"""

from dataclasses import asdict, dataclass

import pandas as pd

from .metrics import top_cohort_size
from .. import config


@dataclass(frozen=True)
class StrategyReport:
    strategy: str
    avg_successful: float
    avg_failed: float
    avg_missed: float
    avg_concentration_pct: float
    avg_front_runner_share_pct: float
    poa: float


def social_optimum(num_keepers: int) -> float:
    """Top-cohort profit share under an ideal equal split (0.2 for 20 keepers)."""
    return top_cohort_size(num_keepers) / num_keepers


def nash_cost(avg_concentration: float, avg_gas_waste: float, avg_coverage: float) -> float:
    return avg_concentration + avg_gas_waste + (1.0 - avg_coverage)


def compute_poa(results: list, optimum: float) -> float:
    if not results:
        raise ValueError("compute_poa needs at least one RunResult")
    n = len(results)
    avg_concentration = sum(r.profit_concentration for r in results) / n
    avg_gas_waste = sum(r.gas_waste_ratio for r in results) / n
    avg_coverage = sum(r.coverage for r in results) / n
    return nash_cost(avg_concentration, avg_gas_waste, avg_coverage) / max(optimum, config.POA_EPSILON)


def results_to_frame(results: list) -> pd.DataFrame:
    """One row per run; `run` numbers restart at 1 for each strategy."""
    df = pd.DataFrame([r.as_record() for r in results])
    if not df.empty:
        df.insert(1, "run", df.groupby("strategy", sort=False).cumcount() + 1)
    return df


def summarize_strategy(strategy, results: list, sim_config) -> StrategyReport:
    """Reduces one strategy's batch of runs to its report record."""
    if not results:
        raise ValueError(f"No runs to summarize for strategy {strategy.label}")
    df = results_to_frame(results)
    means = df[["successful_liquidations", "failed_attempts", "missed_liquidations",
                "profit_concentration", "front_runner_share"]].mean()
    return StrategyReport(
        strategy=strategy.label,
        avg_successful=float(means["successful_liquidations"]),
        avg_failed=float(means["failed_attempts"]),
        avg_missed=float(means["missed_liquidations"]),
        avg_concentration_pct=float(means["profit_concentration"]) * 100.0,
        avg_front_runner_share_pct=float(means["front_runner_share"]) * 100.0,
        poa=compute_poa(results, social_optimum(sim_config.num_keepers)),
    )


def reports_to_frame(reports: list) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in reports])
