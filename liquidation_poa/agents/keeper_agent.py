# liquidation_poa/agents/keeper_agent.py

import mesa
from .. import config


class KeeperAgent(mesa.Agent):
    """
    A liquidation bot competing for eligible positions. Its gas priority is
    fixed for the run; profit and successes accumulate during auction resolution.
    """
    def __init__(self, model: mesa.Model, keeper_id: int, gas_priority: float):
        super().__init__(model)
        self.keeper_id = keeper_id
        self.gas_priority = float(gas_priority)  # 0-1, higher = pays more gas = executes first
        self.total_profit = 0.0
        self.successful_liquidations = 0

    @property
    def is_front_runner(self) -> bool:
        return self.gas_priority > config.FRONT_RUNNER_GAS_CUTOFF

    def record_profit(self, amount: float):
        self.total_profit += float(amount)

    def record_success(self):
        self.successful_liquidations += 1

    def __repr__(self):
        return (f"KeeperAgent(id={self.keeper_id}, gas={self.gas_priority:.2f}, "
                f"profit={self.total_profit:.2f}, wins={self.successful_liquidations})")


def generate_keepers(model: mesa.Model, n: int, rng) -> list:
    """Creates `n` keepers on `model` with gas priority ~ U(0, 1) drawn from `rng`."""
    return [KeeperAgent(model, keeper_id=i, gas_priority=rng.random()) for i in range(n)]
