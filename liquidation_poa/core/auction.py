# liquidation_poa/core/auction.py

"""
Liquidation auction for a single position: collect bids, pick a winner and
split the profit according to the obfuscation strategy.
"""

from .perception import perceive
from .strategy import ObfuscationStrategy
from ..processing.bid import Bid
from ..processing.bid_book import BidBook
from .. import config

# Outcome statuses
SKIPPED = "Skipped"        # Nobody bid and nothing was owed
MISSED = "Missed"          # Truly eligible but nobody bid (bad debt risk)
FAILED = "Failed"          # Someone bid on a safe position, gas wasted
LIQUIDATED = "Liquidated"


class PositionOutcome:
    """Result of auctioning one position."""
    def __init__(self, position_id: int, status: str, num_bids: int = 0,
                 winner_id: int | None = None, profit: float = 0.0,
                 shares: dict | None = None, front_runner_win: bool = False):
        self.position_id = position_id
        self.status = status
        self.num_bids = num_bids
        self.winner_id = winner_id
        self.profit = float(profit)
        self.shares = shares or {}
        self.front_runner_win = front_runner_win

    @property
    def distributed(self) -> float:
        return sum(self.shares.values())

    def __repr__(self):
        return (f"PositionOutcome(id={self.position_id}, status='{self.status}', bids={self.num_bids}, "
                f"winner={self.winner_id}, profit={self.profit:.2f})")


def collect_bids(position, state, keepers, rng) -> BidBook:
    """Every keeper, in id order, perceives the position and bids if it looks eligible."""
    book = BidBook()
    for keeper in keepers:
        perceived_eligible, confidence = perceive(position, state, rng)
        if perceived_eligible:
            book.add_bid(Bid(keeper.keeper_id, keeper.gas_priority * confidence, confidence))
    return book


def select_winner(strategy: ObfuscationStrategy, ranked: list, rng) -> int:
    """
    Index into `ranked` of the winning bid.
    Highest priority wins, except under the fair strategies where every
    bidder has an equal chance regardless of gas or confidence.
    """
    if strategy.uses_random_winner:
        return rng.randrange(len(ranked))
    return 0


def _winner_plus_others(profit: float, ranked: list, winner_index: int, winner_share: float) -> dict:
    if len(ranked) == 1:
        return {ranked[0].keeper_id: profit}
    per_other = profit * (1.0 - winner_share) / (len(ranked) - 1)
    shares = {}
    for i, bid in enumerate(ranked):
        shares[bid.keeper_id] = profit * winner_share if i == winner_index else per_other
    return shares


def split_profit(strategy: ObfuscationStrategy, profit: float, ranked: list, winner_index: int) -> dict:
    """
    Distributes a liquidation's profit among the bidders as {keeper_id: share}.

    Winner-takes-all for Transparent, Noise-Based and IPFE. FairRAI gives the
    winner 60% (50% for FairRAI 50/50) and splits the rest evenly among the
    other bidders; a lone bidder takes everything. Keeper Pool splits 70%
    evenly among all bidders and leaves 30% unassigned (protocol capture).
    """
    if strategy is ObfuscationStrategy.FAIR_RAI:
        return _winner_plus_others(profit, ranked, winner_index, config.FAIRRAI_WINNER_SHARE)
    if strategy is ObfuscationStrategy.FAIR_RAI_5050:
        return _winner_plus_others(profit, ranked, winner_index, config.FAIRRAI_5050_WINNER_SHARE)
    if strategy is ObfuscationStrategy.KEEPER_POOL:
        per_keeper = profit * config.KEEPER_POOL_SHARE / len(ranked)
        return {bid.keeper_id: per_keeper for bid in ranked}
    return {ranked[winner_index].keeper_id: profit}


def resolve_position(position, state, keepers, rng,
                     gas_cost: float = config.GAS_COST,
                     penalty: float = config.LIQUIDATION_PENALTY) -> PositionOutcome:
    """
    Runs the auction for one position and credits the keepers.

    `keepers` is the run's keeper list, indexed by keeper_id. Only keeper
    profit and success counts are mutated.
    """
    truly_eligible = state.is_truly_liquidatable(position)
    book = collect_bids(position, state, keepers, rng)

    if not book:
        return PositionOutcome(position.position_id, MISSED if truly_eligible else SKIPPED)

    ranked = book.ranked()
    winner_index = select_winner(state.strategy, ranked, rng)
    winner = keepers[ranked[winner_index].keeper_id]

    if not truly_eligible:
        if config.VERBOSE_LOGGING:
            print(f"    [Position {position.position_id}] FAILED attempt by Keeper {winner.keeper_id} "
                  f"({len(ranked)} bids). Gas wasted.")
        return PositionOutcome(position.position_id, FAILED, num_bids=len(ranked), winner_id=winner.keeper_id)

    profit = position.liquidation_profit(state.price, gas_cost, penalty)
    shares = split_profit(state.strategy, profit, ranked, winner_index)
    for keeper_id, share in shares.items():
        keepers[keeper_id].record_profit(share)
    winner.record_success()

    if config.VERBOSE_LOGGING:
        print(f"    >>> [Position {position.position_id}] LIQUIDATED by Keeper {winner.keeper_id} "
              f"(gas {winner.gas_priority:.2f}, {len(ranked)} bids). Profit: {profit:.2f} <<<")

    return PositionOutcome(
        position.position_id, LIQUIDATED,
        num_bids=len(ranked),
        winner_id=winner.keeper_id,
        profit=profit,
        shares=shares,
        front_runner_win=winner.is_front_runner,
    )
