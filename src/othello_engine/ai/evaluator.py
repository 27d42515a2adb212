"""
Static position evaluation.

Scores a board for one side as the sum of four terms, each contrasting
the side with its opponent:
1. Positional weights (corners high, X/C squares negative)
2. Disc differential, endgame only
3. Mobility differential, opening/midgame only
4. Corner ownership
"""

from typing import Tuple

from ..core import (
    BOARD_SIZE,
    CORNERS,
    EMPTY,
    Board,
    generate_legal_moves,
    opponent,
)

POSITION_WEIGHTS: Tuple[Tuple[int, ...], ...] = (
    (100, -20, 10, 5, 5, 10, -20, 100),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (10, -2, 5, 1, 1, 5, -2, 10),
    (5, -2, 1, 0, 0, 1, -2, 5),
    (5, -2, 1, 0, 0, 1, -2, 5),
    (10, -2, 5, 1, 1, 5, -2, 10),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (100, -20, 10, 5, 5, 10, -20, 100),
)

PHASE_THRESHOLD = 0.7
DISC_WEIGHT = 10
MOBILITY_WEIGHT = 5
CORNER_BONUS = 100

# Flattened for the row-major cell tuple
_FLAT_WEIGHTS = tuple(w for row in POSITION_WEIGHTS for w in row)


def game_phase(board: Board) -> float:
    """Fraction of the 64 cells occupied."""
    return board.total_discs / (BOARD_SIZE * BOARD_SIZE)


def mobility(board: Board, side: int) -> int:
    """Number of legal moves available to side."""
    return len(generate_legal_moves(board, side))


def positional_score(board: Board, side: int) -> int:
    """Weight-table sum of side's discs minus the opponent's."""
    score = 0
    for cell, weight in zip(board.cells, _FLAT_WEIGHTS):
        if cell == EMPTY:
            continue
        score += weight if cell == side else -weight
    return score


def corner_score(board: Board, side: int) -> int:
    score = 0
    for row, col in CORNERS:
        cell = board.get(row, col)
        if cell == side:
            score += CORNER_BONUS
        elif cell != EMPTY:
            score -= CORNER_BONUS
    return score


def evaluate(board: Board, side: int) -> int:
    """
    Score a board from side's point of view (higher is better).

    Every term is antisymmetric, so evaluate(b, BLACK) == -evaluate(b, WHITE).
    At exactly phase 0.7 neither the disc nor the mobility term applies.

    Args:
        board: Board to score
        side: Side to score for

    Returns:
        Integer score
    """
    other = opponent(side)
    score = positional_score(board, side)

    phase = game_phase(board)
    if phase > PHASE_THRESHOLD:
        score += DISC_WEIGHT * (board.count(side) - board.count(other))
    if phase < PHASE_THRESHOLD:
        score += MOBILITY_WEIGHT * (mobility(board, side) - mobility(board, other))

    score += corner_score(board, side)
    return score
