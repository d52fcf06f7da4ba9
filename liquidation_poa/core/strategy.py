# liquidation_poa/core/strategy.py

from enum import Enum


class ObfuscationStrategy(Enum):
    """How much of the liquidation formula the protocol discloses to keepers."""
    TRANSPARENT = "Transparent"          # Everyone knows exact weights and threshold
    NOISE_BASED = "Noise-Based"          # Threshold + random noise
    IPFE = "IPFE Only"                   # Hidden weights, only the ratio is visible
    FAIR_RAI = "FairRAI 60/40"           # IPFE + commit-reveal + random selection + 60/40 split
    FAIR_RAI_5050 = "FairRAI 50/50"      # Same but 50/50 split
    KEEPER_POOL = "Keeper Pool 70/30"    # 70% equal split to keepers, 30% to protocol

    @classmethod
    def all(cls) -> list:
        """All strategies in declaration order."""
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> "ObfuscationStrategy":
        """Looks a strategy up by member name (``FAIR_RAI``) or label (``FairRAI 60/40``)."""
        key = name.strip()
        for strategy in cls:
            if key.upper() == strategy.name or key.lower() == strategy.value.lower():
                return strategy
        valid = ", ".join(s.name for s in cls)
        raise ValueError(f"Unknown obfuscation strategy '{name}'. Expected one of: {valid}")

    @property
    def label(self) -> str:
        return self.value

    @property
    def hides_weights(self) -> bool:
        """True when keepers only see the public collateral ratio."""
        return self not in (ObfuscationStrategy.TRANSPARENT, ObfuscationStrategy.NOISE_BASED)

    @property
    def uses_random_winner(self) -> bool:
        return self in (ObfuscationStrategy.FAIR_RAI,
                        ObfuscationStrategy.FAIR_RAI_5050,
                        ObfuscationStrategy.KEEPER_POOL)
