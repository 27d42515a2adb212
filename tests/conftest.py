"""Shared fixtures."""

import random

import pytest
from othello_engine.core import (
    BLACK,
    apply_move,
    create_starting_board,
    generate_legal_moves,
    opponent,
    parse_board,
)


def random_playout(seed: int, max_plies: int = 60):
    """Play random legal moves from the start, returning every (board, side) seen."""
    rng = random.Random(seed)
    board = create_starting_board()
    side = BLACK
    positions = []

    for _ in range(max_plies):
        positions.append((board, side))
        moves = generate_legal_moves(board, side)
        if not moves:
            if not generate_legal_moves(board, opponent(side)):
                break
            side = opponent(side)
            continue
        board = apply_move(board, rng.choice(moves), side)
        side = opponent(side)

    return positions


@pytest.fixture(scope="session")
def playout_positions():
    """(board, side) pairs from a few complete random games."""
    positions = []
    for seed in range(4):
        positions.extend(random_playout(seed))
    return positions


@pytest.fixture
def edge_trap_board():
    """
    Black to move with two choices on the top edge.

    (0,2) scores best one ply ahead but lets White take (0,0) and every
    Black disc; (0,6) scores worse but keeps Black alive longer.
    """
    return parse_board(
        """
        .B.WBW.W
        ........
        ........
        ........
        ........
        ........
        ........
        ........
        """
    )
