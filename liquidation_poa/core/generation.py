# liquidation_poa/core/generation.py

"""
Synthetic CDP population.

Every generator only needs ``rng.random()`` (a uniform float in [0, 1)), so any
``random.Random``, the mesa model's ``self.random`` or a scripted test source works.
"""

from .position import Position
from .. import config


def draw_uniform(rng, low: float, high: float) -> float:
    """Uniform draw in [low, high) from a source that only provides ``random()``."""
    return low + rng.random() * (high - low)


def generate_positions(n: int, rng, reference_price: float = config.REFERENCE_PRICE) -> list:
    """
    Opens `n` CDPs at `reference_price`, each at a target CR within
    config.TARGET_RATIO_RANGE (130-180%).
    """
    positions = []
    for i in range(n):
        collateral = draw_uniform(rng, *config.COLLATERAL_RANGE)
        target_ratio = draw_uniform(rng, *config.TARGET_RATIO_RANGE)
        debt = (collateral * reference_price) / target_ratio
        positions.append(Position(
            position_id=i,
            collateral=collateral,
            debt=debt,
            age_days=draw_uniform(rng, *config.AGE_DAYS_RANGE),
            volatility_score=rng.random(),
        ))
    return positions
