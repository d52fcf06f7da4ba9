# liquidation_poa/model.py

import mesa

from . import config
from .config import SimulationConfig
from .core.auction import resolve_position, FAILED, LIQUIDATED, MISSED
from .core.game_state import GameState
from .core.generation import generate_positions
from .core.scoring import apply_price_shock, liquidatable_fraction
from .core.strategy import ObfuscationStrategy
from .agents.keeper_agent import generate_keepers
from .analysis import metrics


class LiquidationGameModel(mesa.Model):
    """
    One liquidation game: a fresh CDP population and keeper set, a single
    price crash, then one auction per position under the given obfuscation
    strategy.

    Randomness comes from the model's own ``self.random`` (seeded through mesa)
    unless `random_source` is given. Any object with ``random()`` and
    ``randrange(n)`` works, which lets tests script the exact draw sequence.
    """
    def __init__(self, strategy: ObfuscationStrategy,
                 sim_config: SimulationConfig | None = None,
                 seed=None,
                 random_source=None):

        super().__init__(seed=seed)
        self.random_source = random_source if random_source is not None else self.random

        self.sim_config = (sim_config or SimulationConfig()).validate()
        self.strategy = strategy

        positions = generate_positions(self.sim_config.num_positions, self.random_source,
                                       self.sim_config.reference_price)
        self.state = GameState(
            positions=positions,
            strategy=strategy,
            price=self.sim_config.reference_price,
            true_weights=self.sim_config.true_weights,
            true_threshold=self.sim_config.true_threshold,
            noise_level=self.sim_config.noise_level,
        )
        self.keepers = generate_keepers(self, self.sim_config.num_keepers, self.random_source)

        self.successful_liquidations = 0
        self.failed_attempts = 0
        self.missed_liquidations = 0
        self.truly_liquidatable = 0
        self.total_profit_extracted = 0.0
        self.front_runner_profit = 0.0
        self.outcomes = []

        if config.VERBOSE_LOGGING:
            print(f"--- Model Initialized: Strategy = {strategy.label}, "
                  f"Positions = {len(positions)}, Keepers = {len(self.keepers)} ---")

        self.datacollector = mesa.DataCollector(
            model_reporters={
                "Strategy": lambda m: m.strategy.label,
                "Price": lambda m: m.state.price,
                "SuccessfulLiquidations": "successful_liquidations",
                "FailedAttempts": "failed_attempts",
                "MissedLiquidations": "missed_liquidations",
                "TrulyLiquidatable": "truly_liquidatable",
                "TotalProfitExtracted": "total_profit_extracted",
                "FrontRunnerProfit": "front_runner_profit",
                "KeeperProfit": metrics.get_keeper_profit,
                "ProtocolCapture": metrics.get_protocol_capture,
            },
            agent_reporters={
                "KeeperId": "keeper_id",
                "GasPriority": "gas_priority",
                "TotalProfit": "total_profit",
                "SuccessfulLiquidations": "successful_liquidations",
            }
        )
        self.running = True

    def record_outcome(self, outcome):
        self.outcomes.append(outcome)
        if outcome.status == MISSED:
            self.missed_liquidations += 1
        elif outcome.status == FAILED:
            self.failed_attempts += 1
        elif outcome.status == LIQUIDATED:
            self.successful_liquidations += 1
            self.total_profit_extracted += outcome.profit
            if outcome.front_runner_win:
                self.front_runner_profit += outcome.profit

    def step(self):
        """Crash the price, then auction every position once. The game ends after one step."""
        if not self.running:
            return
        apply_price_shock(self.state, self.sim_config.price_shock)
        self.truly_liquidatable = len(self.state.truly_liquidatable_ids())
        if config.VERBOSE_LOGGING:
            print(f"[{self.strategy.label}] Price after shock: {self.state.price:.2f}, "
                  f"truly liquidatable: {liquidatable_fraction(self.state):.0%}")

        for position in self.state.positions:
            outcome = resolve_position(
                position, self.state, self.keepers, self.random_source,
                gas_cost=self.sim_config.gas_cost,
                penalty=self.sim_config.liquidation_penalty,
            )
            self.record_outcome(outcome)

        self.datacollector.collect(self)
        self.running = False

    def run_result(self) -> metrics.RunResult:
        """Plays the game if it hasn't been played yet and returns its RunResult."""
        if self.running:
            self.step()
        return metrics.build_run_result(self)
