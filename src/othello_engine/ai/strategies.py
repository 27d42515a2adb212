"""
Move-selection strategies for the three difficulty tiers.

- EASY: uniform random legal move
- MEDIUM: greedy, best 1-ply evaluation
- HARD: depth-4 minimax with alpha-beta pruning

Any other difficulty value plays the MEDIUM tier.
"""

import logging
import random
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, Optional, Tuple

from ..core import Board, Move, apply_move, generate_legal_moves
from .evaluator import evaluate
from .minimax import SEARCH_DEPTH, MinimaxSearch

logger = logging.getLogger(__name__)


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


DEFAULT_DIFFICULTY = Difficulty.MEDIUM


class Strategy(ABC):
    """Abstract interface for choosing a move."""

    name: str = "strategy"

    @abstractmethod
    def select(self, board: Board, side: int) -> Optional[Move]:
        """
        Choose a move for side.

        Args:
            board: Current board (must not be mutated)
            side: Side to move

        Returns:
            Chosen legal move, or None if side must pass
        """
        pass


class RandomStrategy(Strategy):
    """Uniform choice over legal moves."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Randomness source with a choice() method. Pass a seeded
                random.Random for reproducible play.
        """
        self.rng = rng if rng is not None else random.Random()

    def select(self, board: Board, side: int) -> Optional[Move]:
        legal_moves = generate_legal_moves(board, side)
        if not legal_moves:
            return None
        return self.rng.choice(legal_moves)


class GreedyStrategy(Strategy):
    """Best move by static evaluation one ply ahead."""

    name = "greedy"

    def select(self, board: Board, side: int) -> Optional[Move]:
        best_move = None
        best_score = None

        for move, score in score_moves(board, side):
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        return best_move


class MinimaxStrategy(Strategy):
    """Alpha-beta minimax to a fixed depth."""

    name = "minimax"

    def __init__(self, depth: int = SEARCH_DEPTH, pruning: bool = True):
        self.search = MinimaxSearch(depth=depth, pruning=pruning)

    def select(self, board: Board, side: int) -> Optional[Move]:
        move, _ = self.search.choose(board, side)
        return move


def score_moves(board: Board, side: int) -> List[Tuple[Move, int]]:
    """Legal moves paired with the evaluation of the board after each, in move order."""
    return [
        (move, evaluate(apply_move(board, move, side), side))
        for move in generate_legal_moves(board, side)
    ]


def rank_moves(board: Board, side: int) -> List[Tuple[Move, int]]:
    """
    Legal moves sorted best-first by 1-ply evaluation.

    The sort is stable, so equal scores keep row-major order.
    """
    return sorted(score_moves(board, side), key=lambda item: item[1], reverse=True)


def get_strategy(difficulty: int, rng: Optional[random.Random] = None) -> Strategy:
    """
    Build the strategy for a difficulty tier.

    Args:
        difficulty: 1, 2 or 3; anything else falls back to greedy
        rng: Randomness source for the random tier

    Returns:
        Strategy instance
    """
    try:
        tier = Difficulty(difficulty)
    except ValueError:
        logger.debug(f"Unknown difficulty {difficulty!r}, using {DEFAULT_DIFFICULTY.name}")
        tier = DEFAULT_DIFFICULTY

    if tier == Difficulty.EASY:
        return RandomStrategy(rng)
    elif tier == Difficulty.HARD:
        return MinimaxStrategy()
    return GreedyStrategy()


def select_move(
    board: Board,
    side: int,
    difficulty: int,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """
    Choose the AI move for side at the given difficulty.

    Args:
        board: Current board (left unchanged)
        side: Side to move
        difficulty: Difficulty tier
        rng: Randomness source for the random tier

    Returns:
        Chosen move, or None when side has no legal move (forced pass)
    """
    strategy = get_strategy(difficulty, rng)
    move = strategy.select(board, side)
    logger.debug(f"{strategy.name} selected {move}")
    return move
