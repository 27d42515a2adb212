"""Core board representation and rules."""

from .board import (
    BLACK,
    BOARD_SIZE,
    CORNERS,
    DIRECTIONS,
    EMPTY,
    SIDE_NAMES,
    WHITE,
    Board,
    Move,
    format_board,
    opponent,
    parse_board,
)
from .rules import (
    IllegalMoveError,
    apply_move,
    compute_flips,
    count_discs,
    create_starting_board,
    generate_legal_moves,
    get_game_result,
    get_winner,
    has_legal_move,
    is_legal_move,
    is_terminal,
    place,
)

__all__ = [
    "BLACK",
    "BOARD_SIZE",
    "CORNERS",
    "DIRECTIONS",
    "EMPTY",
    "SIDE_NAMES",
    "WHITE",
    "Board",
    "Move",
    "format_board",
    "opponent",
    "parse_board",
    "IllegalMoveError",
    "apply_move",
    "compute_flips",
    "count_discs",
    "create_starting_board",
    "generate_legal_moves",
    "get_game_result",
    "get_winner",
    "has_legal_move",
    "is_legal_move",
    "is_terminal",
    "place",
]
