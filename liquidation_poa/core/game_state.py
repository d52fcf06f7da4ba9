# liquidation_poa/core/game_state.py

from . import scoring
from .strategy import ObfuscationStrategy
from .. import config


class GameState:
    """
    Holds the state of one liquidation game: the CDP population, the shared
    ETH price, the protocol's hidden scoring parameters and the active
    obfuscation strategy.

    True weights and threshold are the same for every strategy and run so that
    results are comparable; only what keepers perceive changes.
    """
    def __init__(self, positions: list, strategy: ObfuscationStrategy,
                 price: float = config.REFERENCE_PRICE,
                 true_weights=config.TRUE_WEIGHTS,
                 true_threshold: float = config.TRUE_THRESHOLD,
                 noise_level: float = config.NOISE_LEVEL):
        self.positions = positions
        self.strategy = strategy
        self.price = float(price)
        self.true_weights = tuple(true_weights)
        self.true_threshold = float(true_threshold)
        self.noise_level = float(noise_level)
        self.shock_applied = False

    def true_score(self, position) -> float:
        return scoring.score(position, self.true_weights, self.price)

    def is_truly_liquidatable(self, position) -> bool:
        return scoring.is_liquidatable(position, self.true_weights, self.price, self.true_threshold)

    def truly_liquidatable_ids(self) -> list:
        return [p.position_id for p in self.positions if self.is_truly_liquidatable(p)]

    def __repr__(self):
        return (f"GameState(strategy='{self.strategy.label}', price={self.price:.2f}, "
                f"positions={len(self.positions)}, shocked={self.shock_applied})")
