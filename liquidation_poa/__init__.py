# liquidation_poa/__init__.py

"""
Monte Carlo simulation of liquidation auctions under six obfuscation
strategies, estimating each strategy's Price of Anarchy.
"""

from .config import SimulationConfig
from .core.strategy import ObfuscationStrategy
from .model import LiquidationGameModel
from .analysis.metrics import RunResult
from .analysis.poa import StrategyReport, compute_poa, summarize_strategy

__all__ = [
    "SimulationConfig",
    "ObfuscationStrategy",
    "LiquidationGameModel",
    "RunResult",
    "StrategyReport",
    "compute_poa",
    "summarize_strategy",
]
