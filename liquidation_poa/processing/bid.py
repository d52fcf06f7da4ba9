# liquidation_poa/processing/bid.py

class Bid:
    """
    A keeper's attempt to liquidate one position.
    Priority = gas priority * confidence; higher priority executes first.
    """
    __slots__ = ("keeper_id", "priority", "confidence")

    def __init__(self, keeper_id: int, priority: float, confidence: float):
        self.keeper_id = keeper_id
        self.priority = float(priority)
        self.confidence = float(confidence)

    def __eq__(self, other):
        if not isinstance(other, Bid):
            return NotImplemented
        return (self.keeper_id, self.priority, self.confidence) == \
            (other.keeper_id, other.priority, other.confidence)

    def __repr__(self):
        return (f"Bid(keeper={self.keeper_id}, priority={self.priority:.3f}, "
                f"confidence={self.confidence:.3f})")
