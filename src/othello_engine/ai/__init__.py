"""Position evaluation and move-selection algorithms."""

from .evaluator import POSITION_WEIGHTS, evaluate, mobility
from .minimax import SEARCH_DEPTH, MinimaxSearch
from .strategies import (
    Difficulty,
    GreedyStrategy,
    MinimaxStrategy,
    RandomStrategy,
    Strategy,
    get_strategy,
    rank_moves,
    select_move,
)

__all__ = [
    "POSITION_WEIGHTS",
    "evaluate",
    "mobility",
    "SEARCH_DEPTH",
    "MinimaxSearch",
    "Difficulty",
    "GreedyStrategy",
    "MinimaxStrategy",
    "RandomStrategy",
    "Strategy",
    "get_strategy",
    "rank_moves",
    "select_move",
]
