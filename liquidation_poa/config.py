# liquidation_poa/config.py

"""
Global constants and parameters for the Liquidation Obfuscation PoA Simulation.
Defaults reproduce the reference study (100 CDPs, 20 keepers, 10% ETH crash).
"""

import math
from dataclasses import dataclass, fields, replace

# --- Logging Configuration ---
VERBOSE_LOGGING = False  # Set to True to trace every bid and outcome (very noisy at 10k runs)


# Market & Simulation Setup
NUM_POSITIONS = 100          # CDPs generated fresh for every run.
NUM_KEEPERS = 20             # Competing liquidation bots.
SIMULATION_RUNS = 10_000     # Independent runs per obfuscation strategy.
REFERENCE_PRICE = 2000.0     # ETH price positions are opened at.
PRICE_SHOCK = 0.10           # 10% crash applied once per run, before bidding.

# Liquidation Economics
LIQUIDATION_PENALTY = 0.13   # MakerDAO-style 'chop'; keeper profit is this share of the surplus.
GAS_COST = 50.0              # Flat DAI cost of executing a liquidation.

# Hidden Risk Score (governance knows these, keepers may not)
# Feature order: [collateral ratio, volatility, utilization, normalized age, size factor]
TRUE_WEIGHTS = (2.0, -1.0, -1.5, 0.3, -0.3)
TRUE_THRESHOLD = 2.0         # Score must stay above this to be safe.
NOISE_LEVEL = 0.29           # Relative threshold noise for the Noise-Based strategy.

# Position Generation Ranges
COLLATERAL_RANGE = (1.0, 10.0)       # ETH per CDP.
TARGET_RATIO_RANGE = (1.3, 1.8)      # 130-180% collateralization at open.
AGE_DAYS_RANGE = (0.0, 365.0)
AGE_NORMALIZATION_DAYS = 365.0
SIZE_NORMALIZATION = 10_000.0        # Collateral value (DAI) at which size factor reaches 1.
SIZE_FACTOR_CAP = 2.0

# Perception Parameters
PUBLIC_RATIO_SIGNAL = 1.6            # Wide net cast on the on-chain ratio when weights are hidden.
IPFE_CONFIDENCE_RANGE = (0.2, 0.6)   # Keepers can't bid confidently without the formula.

# Profit Distribution
FAIRRAI_WINNER_SHARE = 0.6           # FairRAI 60/40: winner keeps 60%, others split 40%.
FAIRRAI_5050_WINNER_SHARE = 0.5      # FairRAI 50/50.
KEEPER_POOL_SHARE = 0.7              # Keeper Pool: 70% split among all bidders, 30% to protocol.

# Metrics
FRONT_RUNNER_GAS_CUTOFF = 0.8        # Gas priority above this marks a front-runner (top 20%).
TOP_COHORT_DIVISOR = 5               # Concentration looks at the top 1/5 of keepers.
POA_EPSILON = 0.01                   # Floor on the social optimum denominator.

# Seed spacing between strategies when a base seed is given.
STRATEGY_SEED_STRIDE = 1_000_003


@dataclass(frozen=True)
class SimulationConfig:
    """
    Overridable run parameters. Defaults are the module constants above.

    Use ``with_overrides`` to derive a variant and ``validate`` before running;
    the simulation core assumes a validated, positive configuration.
    """

    num_positions: int = NUM_POSITIONS
    num_keepers: int = NUM_KEEPERS
    num_runs: int = SIMULATION_RUNS
    reference_price: float = REFERENCE_PRICE
    liquidation_penalty: float = LIQUIDATION_PENALTY
    price_shock: float = PRICE_SHOCK
    noise_level: float = NOISE_LEVEL
    gas_cost: float = GAS_COST
    true_weights: tuple = TRUE_WEIGHTS
    true_threshold: float = TRUE_THRESHOLD

    def with_overrides(self, **overrides) -> "SimulationConfig":
        if "true_weights" in overrides:
            overrides["true_weights"] = tuple(float(w) for w in overrides["true_weights"])
        return replace(self, **overrides)

    def validate(self) -> "SimulationConfig":
        problems = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not math.isfinite(value):
                problems.append(f"{f.name} must be finite, got {value}")

        if self.num_positions < 1:
            problems.append(f"num_positions must be >= 1, got {self.num_positions}")
        if self.num_keepers < 1:
            problems.append(f"num_keepers must be >= 1, got {self.num_keepers}")
        if self.num_runs < 1:
            problems.append(f"num_runs must be >= 1, got {self.num_runs}")
        if not self.reference_price > 0:
            problems.append(f"reference_price must be positive, got {self.reference_price}")
        if not 0.0 <= self.liquidation_penalty <= 1.0:
            problems.append(f"liquidation_penalty must be in [0, 1], got {self.liquidation_penalty}")
        if not 0.0 <= self.price_shock < 1.0:
            problems.append(f"price_shock must be in [0, 1), got {self.price_shock}")
        if not 0.0 <= self.noise_level <= 1.0:
            problems.append(f"noise_level must be in [0, 1], got {self.noise_level}")
        if self.gas_cost < 0:
            problems.append(f"gas_cost must be non-negative, got {self.gas_cost}")
        if len(self.true_weights) != 5:
            problems.append(f"true_weights must have 5 entries, got {len(self.true_weights)}")
        elif not all(math.isfinite(w) for w in self.true_weights):
            problems.append(f"true_weights must be finite, got {self.true_weights}")

        if problems:
            raise ValueError("Invalid simulation configuration:\n  - " + "\n  - ".join(problems))
        return self
