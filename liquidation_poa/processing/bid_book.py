# liquidation_poa/processing/bid_book.py

from .bid import Bid


class BidBook:
    """Collects the bids posted against a single position."""
    def __init__(self):
        self.pending_bids = []

    def add_bid(self, bid: Bid):
        if not isinstance(bid, Bid):
            raise TypeError(f"BidBook only accepts Bid objects, got {type(bid).__name__}")
        self.pending_bids.append(bid)

    def ranked(self) -> list:
        """
        Bids sorted by priority, highest first.
        The sort is stable: equal priorities keep submission (keeper id) order.
        """
        return sorted(self.pending_bids, key=lambda b: b.priority, reverse=True)

    def view_bids(self) -> list:
        """Returns a copy of the bids in submission order."""
        return list(self.pending_bids)

    def __len__(self):
        return len(self.pending_bids)

    def __bool__(self):
        return bool(self.pending_bids)
