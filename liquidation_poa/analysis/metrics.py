# liquidation_poa/analysis/metrics.py

"""
Per-run welfare statistics.
Every ratio is guarded so that empty runs (no profit, no eligible positions)
report 0 instead of dividing by zero.
"""

from dataclasses import dataclass

import numpy as np

from ..core.strategy import ObfuscationStrategy
from .. import config


@dataclass(frozen=True)
class RunResult:
    strategy: ObfuscationStrategy
    successful_liquidations: int
    failed_attempts: int
    missed_liquidations: int
    truly_liquidatable: int
    total_profit: float
    front_runner_profit: float
    profit_concentration: float  # 0-1, higher = more concentrated
    gas_waste_ratio: float       # 0-1, higher = more wasted gas
    coverage: float              # 0-1, higher = more liquidations caught
    keeper_profits: tuple = ()   # final profit per keeper, indexed by keeper_id

    @property
    def front_runner_share(self) -> float:
        return front_runner_share(self.front_runner_profit, self.total_profit)

    def as_record(self) -> dict:
        return {
            "strategy": self.strategy.label,
            "successful_liquidations": self.successful_liquidations,
            "failed_attempts": self.failed_attempts,
            "missed_liquidations": self.missed_liquidations,
            "truly_liquidatable": self.truly_liquidatable,
            "total_profit": self.total_profit,
            "front_runner_profit": self.front_runner_profit,
            "profit_concentration": self.profit_concentration,
            "gas_waste_ratio": self.gas_waste_ratio,
            "coverage": self.coverage,
            "front_runner_share": self.front_runner_share,
            "keeper_profits": list(self.keeper_profits),
        }


def top_cohort_size(num_keepers: int) -> int:
    """Size of the 'top 20%' cohort; never less than one keeper."""
    return max(1, num_keepers // config.TOP_COHORT_DIVISOR)


def profit_concentration(keeper_profits, total_profit: float) -> float:
    """
    Share of the run's extracted profit held by the top-earning keepers.
    Gini-like: how much do the top keepers extract?
    """
    if total_profit <= 0:
        return 0.0
    profits = np.sort(np.asarray(keeper_profits, dtype=float))[::-1]
    top = profits[:top_cohort_size(len(profits))].sum()
    return min(1.0, float(top / total_profit))


def gas_waste_ratio(failed_attempts: int, successful_liquidations: int) -> float:
    return failed_attempts / max(failed_attempts + successful_liquidations, 1)


def coverage(successful_liquidations: int, truly_liquidatable: int) -> float:
    return successful_liquidations / max(truly_liquidatable, 1)


def front_runner_share(front_runner_profit: float, total_profit: float) -> float:
    if total_profit <= 0:
        return 0.0
    return min(1.0, front_runner_profit / total_profit)


def build_run_result(model) -> RunResult:
    """Freezes a finished LiquidationGameModel into a RunResult."""
    return RunResult(
        strategy=model.strategy,
        successful_liquidations=model.successful_liquidations,
        failed_attempts=model.failed_attempts,
        missed_liquidations=model.missed_liquidations,
        truly_liquidatable=model.truly_liquidatable,
        total_profit=model.total_profit_extracted,
        front_runner_profit=model.front_runner_profit,
        profit_concentration=profit_concentration(
            [k.total_profit for k in model.keepers], model.total_profit_extracted),
        gas_waste_ratio=gas_waste_ratio(model.failed_attempts, model.successful_liquidations),
        coverage=coverage(model.successful_liquidations, model.truly_liquidatable),
        keeper_profits=tuple(k.total_profit for k in model.keepers),
    )


# --- Metric Helper Functions for DataCollector ---

def get_keeper_profit(model) -> float:
    """Total profit credited to keepers (excludes Keeper Pool protocol capture)."""
    return sum(k.total_profit for k in model.keepers)


def get_protocol_capture(model) -> float:
    """Extracted profit not assigned to any keeper."""
    return max(0.0, model.total_profit_extracted - get_keeper_profit(model))
