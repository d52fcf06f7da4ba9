# liquidation_poa/core/scoring.py

"""
The protocol's private risk score: a fixed linear model over the position features.
Ground truth for eligibility never depends on the obfuscation strategy.
"""

from .. import config


def score(position, weights, price: float) -> float:
    return sum(f * w for f, w in zip(position.features(price), weights))


def is_liquidatable(position, weights, price: float, threshold: float) -> bool:
    """A position is eligible when its score falls below the threshold."""
    return score(position, weights, price) < threshold


def apply_price_shock(state, pct: float) -> float:
    """
    Applies the run's single multiplicative price drop (e.g. 0.10 for a 10% crash).
    Raises RuntimeError if the state has already been shocked.
    """
    if state.shock_applied:
        raise RuntimeError("Price shock already applied to this game state")
    price_before_shock = state.price
    state.price *= (1.0 - pct)
    state.shock_applied = True
    if config.VERBOSE_LOGGING:
        print(f"    !!!! PRICE SHOCK APPLIED !!!! Price before: {price_before_shock:.2f}, "
              f"Drop: {pct:.0%}, Price after: {state.price:.2f}")
    return state.price


def liquidatable_fraction(state) -> float:
    """Share of the population that is truly eligible at the current price (calibration check)."""
    if not state.positions:
        return 0.0
    eligible = sum(1 for p in state.positions if state.is_truly_liquidatable(p))
    return eligible / len(state.positions)
