# liquidation_poa/core/__init__.py

"""
Makes the core components importable.
"""
from .position import Position
from .strategy import ObfuscationStrategy
from .game_state import GameState
from .generation import generate_positions
from .scoring import score, is_liquidatable, apply_price_shock
from .perception import perceive
from .auction import PositionOutcome, resolve_position, select_winner, split_profit
