# liquidation_poa/analysis/__init__.py

"""
Makes the analysis components (metrics, PoA, plotting) importable.
"""
from .metrics import (
    RunResult,
    build_run_result,
    profit_concentration,
    gas_waste_ratio,
    coverage,
    front_runner_share,
)

from .poa import (
    StrategyReport,
    compute_poa,
    social_optimum,
    summarize_strategy,
    results_to_frame,
    reports_to_frame,
)
