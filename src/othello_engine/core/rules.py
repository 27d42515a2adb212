"""
Othello game rules implementation.

Implements standard Othello rules on an 8x8 board:
- A placement must flip at least one opposing disc
- Discs flip along all 8 directions where a contiguous opposing run
  ends in one of the mover's discs
- A side with no legal placement passes
- Game ends when neither side can move or the board is full
"""

from typing import List, Optional, Tuple

from .board import (
    BLACK,
    BOARD_SIZE,
    DIRECTIONS,
    EMPTY,
    SIDE_NAMES,
    WHITE,
    Board,
    Move,
    Position,
    check_position,
    in_bounds,
    opponent,
)


class IllegalMoveError(ValueError):
    """Raised when a placement flips nothing or targets an occupied cell."""

    def __init__(self, row: int, col: int, side: int, reason: str):
        self.row = row
        self.col = col
        self.side = side
        super().__init__(f"Illegal move ({row}, {col}) for {SIDE_NAMES[side]}: {reason}")


def create_starting_board() -> Board:
    """
    Create the initial position.

    White on (3,3) and (4,4), Black on (3,4) and (4,3). Black moves first.

    Returns:
        Starting Board
    """
    return Board.empty().with_cells(
        {
            (3, 3): WHITE,
            (3, 4): BLACK,
            (4, 3): BLACK,
            (4, 4): WHITE,
        }
    )


def compute_flips(board: Board, row: int, col: int, side: int) -> List[Position]:
    """
    Compute the discs a placement would flip.

    For each direction, collect the contiguous run of opposing discs; the
    run counts only if it is non-empty and closed by one of side's discs.

    Args:
        board: Current board
        row: Target row
        col: Target column
        side: Side placing the disc

    Returns:
        Flipped positions in direction order (empty if the placement is illegal)
    """
    check_position(row, col)
    if board.cells[row * BOARD_SIZE + col] != EMPTY:
        return []

    other = opponent(side)
    cells = board.cells
    flips: List[Position] = []

    for dr, dc in DIRECTIONS:
        run = []
        r, c = row + dr, col + dc

        while in_bounds(r, c) and cells[r * BOARD_SIZE + c] == other:
            run.append((r, c))
            r += dr
            c += dc

        if run and in_bounds(r, c) and cells[r * BOARD_SIZE + c] == side:
            flips.extend(run)

    return flips


def is_legal_move(board: Board, row: int, col: int, side: int) -> bool:
    """Check if side may place a disc at (row, col)."""
    return bool(compute_flips(board, row, col, side))


def generate_legal_moves(board: Board, side: int) -> List[Move]:
    """
    Generate all legal moves for a side.

    Cells are scanned in row-major order. This order is what every
    tie-break in the AI is defined against.

    Args:
        board: Current board
        side: Side to move

    Returns:
        Legal moves with their flip counts
    """
    legal_moves = []

    for index, cell in enumerate(board.cells):
        if cell != EMPTY:
            continue
        row, col = divmod(index, BOARD_SIZE)
        flips = compute_flips(board, row, col, side)
        if flips:
            legal_moves.append(Move(row=row, col=col, flips=len(flips)))

    return legal_moves


def has_legal_move(board: Board, side: int) -> bool:
    """Check if side has at least one legal move."""
    for index, cell in enumerate(board.cells):
        if cell == EMPTY and compute_flips(board, *divmod(index, BOARD_SIZE), side):
            return True
    return False


def apply_move(board: Board, move: Move, side: int) -> Board:
    """
    Apply a move and return the resulting board.

    Flips are recomputed against the given board, so a Move generated for
    another board or side is rejected rather than trusted.

    Args:
        board: Current board (left unchanged)
        move: Move to play
        side: Side playing the move

    Returns:
        New Board after the move

    Raises:
        IllegalMoveError: if the cell is occupied or nothing would flip
    """
    return place(board, move.row, move.col, side)


def place(board: Board, row: int, col: int, side: int) -> Board:
    """Place side's disc at (row, col); see apply_move()."""
    check_position(row, col)
    if board.get(row, col) != EMPTY:
        raise IllegalMoveError(row, col, side, "cell is occupied")

    flips = compute_flips(board, row, col, side)
    if not flips:
        raise IllegalMoveError(row, col, side, "no discs would flip")

    updates = {pos: side for pos in flips}
    updates[(row, col)] = side
    return board.with_cells(updates)


def count_discs(board: Board) -> Tuple[int, int]:
    """
    Count discs for each side.

    Returns:
        (black_count, white_count)
    """
    return board.count(BLACK), board.count(WHITE)


def is_terminal(board: Board) -> bool:
    """
    Check if the game has ended.

    The game ends when the board is full or neither side can move. This
    depends only on the board, not on whose turn it is.

    Args:
        board: Board to check

    Returns:
        True if game is over
    """
    if board.empty_count == 0:
        return True
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)


def get_winner(board: Board) -> Optional[int]:
    """
    Get the side with more discs.

    Returns:
        BLACK, WHITE, or None for a draw
    """
    black, white = count_discs(board)
    if black > white:
        return BLACK
    elif white > black:
        return WHITE
    return None


def get_game_result(board: Board) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        board: Board

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(board):
        return None

    black, white = count_discs(board)
    winner = get_winner(board)

    if winner is None:
        return f"Draw {black}-{white}"
    return f"{SIDE_NAMES[winner]} wins {max(black, white)}-{min(black, white)}"
