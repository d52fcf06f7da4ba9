# liquidation_poa/core/perception.py

"""
What a keeper believes about a position's eligibility, and how sure it is.

Confidence scales the keeper's bidding priority: informed keepers bid with full
confidence, while keepers shut out of the formula end up with effectively
randomized priorities.
"""

from .generation import draw_uniform
from .strategy import ObfuscationStrategy
from .. import config


def perceive(position, state, rng) -> tuple:
    """Returns (perceived_eligible, confidence in [0, 1]) under `state.strategy`."""
    strategy = state.strategy

    if strategy is ObfuscationStrategy.TRANSPARENT:
        # Keeper knows exact weights and threshold
        return state.is_truly_liquidatable(position), 1.0

    if strategy is ObfuscationStrategy.NOISE_BASED:
        # Formula is known, the threshold draw is not
        perceived_threshold = state.true_threshold * (1.0 + (rng.random() - 0.5) * 2.0 * state.noise_level)
        return state.true_score(position) < perceived_threshold, 1.0 - state.noise_level

    # Weights hidden: only the on-chain collateral ratio is observable, so cast a wide net.
    perceived_eligible = position.collateral_ratio(state.price) < config.PUBLIC_RATIO_SIGNAL

    if strategy is ObfuscationStrategy.IPFE:
        return perceived_eligible, draw_uniform(rng, *config.IPFE_CONFIDENCE_RANGE)

    # FairRAI variants and Keeper Pool: winner is random, confidence carries no information.
    return perceived_eligible, rng.random()
