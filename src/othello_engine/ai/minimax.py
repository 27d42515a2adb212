"""
Depth-limited minimax search with alpha-beta pruning.

Leaves are always scored from the root side's point of view, so the
maximizing/minimizing roles stay consistent through the whole tree.
Children are explored in row-major legal-move order with no move
ordering and no transposition cache.
"""

import logging
import math
from typing import Optional, Tuple

from ..core import (
    Board,
    Move,
    apply_move,
    generate_legal_moves,
    has_legal_move,
    opponent,
)
from .evaluator import evaluate

logger = logging.getLogger(__name__)

SEARCH_DEPTH = 4


class MinimaxSearch:
    """
    Fixed-depth minimax search.

    Every child is searched on its own copy of the board (apply_move never
    mutates), so sibling branches cannot observe each other.
    """

    def __init__(self, depth: int = SEARCH_DEPTH, pruning: bool = True):
        """
        Initialize search.

        Args:
            depth: Total plies searched, including the root move
            pruning: Enable alpha-beta cutoffs. Disabling gives plain
                full-width minimax with the same result.
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.pruning = pruning
        self.nodes = 0

    def choose(self, board: Board, side: int) -> Tuple[Optional[Move], Optional[float]]:
        """
        Pick the best move for side.

        Root alpha is raised after each child, so later siblings are
        searched with a narrowed window. Ties keep the first move seen.

        Args:
            board: Current board (left unchanged)
            side: Side to move

        Returns:
            (best_move, score), or (None, None) if side has no legal move
        """
        self.nodes = 0
        legal_moves = generate_legal_moves(board, side)
        if not legal_moves:
            return None, None

        best_move = None
        best_score = -math.inf
        alpha = -math.inf
        beta = math.inf

        for move in legal_moves:
            child = apply_move(board, move, side)
            score = self.search(child, self.depth - 1, False, alpha, beta, side)
            logger.debug(f"Root move {move}: score {score}")

            if score > best_score:
                best_score = score
                best_move = move

            alpha = max(alpha, score)

        logger.debug(
            f"Depth {self.depth} search chose {best_move} "
            f"(score {best_score}, {self.nodes:,} nodes, pruning={self.pruning})"
        )
        return best_move, best_score

    def search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        root_side: int,
    ) -> float:
        """
        Minimax value of a position.

        A side with no move passes, which consumes one ply. If neither side
        can move the position is terminal and scored immediately.

        Args:
            board: Position to search
            depth: Remaining plies
            maximizing: True if root_side is to move
            alpha: Best score the maximizer can already force
            beta: Best score the minimizer can already force
            root_side: Side the whole search is scored for

        Returns:
            Score from root_side's point of view
        """
        self.nodes += 1

        if depth == 0:
            return evaluate(board, root_side)

        turn_side = root_side if maximizing else opponent(root_side)
        legal_moves = generate_legal_moves(board, turn_side)

        if not legal_moves:
            if not has_legal_move(board, opponent(turn_side)):
                return evaluate(board, root_side)
            # Pass
            return self.search(board, depth - 1, not maximizing, alpha, beta, root_side)

        if maximizing:
            max_score = -math.inf
            for move in legal_moves:
                child = apply_move(board, move, turn_side)
                score = self.search(child, depth - 1, False, alpha, beta, root_side)

                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if self.pruning and beta <= alpha:
                    break

            return max_score
        else:
            min_score = math.inf
            for move in legal_moves:
                child = apply_move(board, move, turn_side)
                score = self.search(child, depth - 1, True, alpha, beta, root_side)

                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if self.pruning and beta <= alpha:
                    break

            return min_score
