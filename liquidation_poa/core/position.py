# liquidation_poa/core/position.py

from .. import config


class Position:
    """Represents a borrower's collateralized debt position (CDP)."""
    def __init__(self, position_id: int, collateral: float, debt: float,
                 age_days: float, volatility_score: float):
        self.position_id = position_id
        self.collateral = float(collateral)  # ETH
        self.debt = float(debt)              # DAI
        self.age_days = float(age_days)
        self.volatility_score = float(volatility_score)  # 0-1

    def collateral_value(self, price: float) -> float:
        return self.collateral * price

    def collateral_ratio(self, price: float) -> float:
        """
        CR = (Collateral Amount * Price) / Debt Amount.
        Returns float('inf') if debt is zero (never generated, but keeps the ratio total).
        """
        if self.debt <= 0:
            return float('inf')
        return self.collateral_value(price) / self.debt

    def features(self, price: float) -> list:
        """
        Feature vector fed to the hidden risk score:
        [collateral ratio, volatility, utilization, normalized age, size factor].
        """
        collateral_value = self.collateral_value(price)
        return [
            self.collateral_ratio(price),
            self.volatility_score,
            self.debt / collateral_value if collateral_value > 0 else float('inf'),
            min(self.age_days / config.AGE_NORMALIZATION_DAYS, 1.0),
            min(collateral_value / config.SIZE_NORMALIZATION, config.SIZE_FACTOR_CAP),
        ]

    def liquidation_profit(self, price: float,
                           gas_cost: float = config.GAS_COST,
                           penalty: float = config.LIQUIDATION_PENALTY) -> float:
        """Keeper profit for liquidating at `price`: the surplus after gas times the penalty, floored at 0."""
        surplus = self.collateral_value(price) - self.debt - gas_cost
        return max(0.0, surplus) * penalty

    def __repr__(self):
        return (f"Position(id={self.position_id}, coll={self.collateral:.2f}, "
                f"debt={self.debt:.2f}, age={self.age_days:.0f}d, vol={self.volatility_score:.2f})")
