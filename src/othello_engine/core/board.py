"""
Board representation for 8x8 Othello.

A board is an immutable row-major tuple of 64 cells:
- 0 = empty
- 1 = black disc
- 2 = white disc

Boards have value semantics: every move produces a new Board, so search
branches and the caller never observe each other's trial positions.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

BOARD_SIZE = 8
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

EMPTY = 0
BLACK = 1
WHITE = 2

SIDES = (BLACK, WHITE)

# Compass scan order: N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)

CORNERS: Tuple[Tuple[int, int], ...] = ((0, 0), (0, 7), (7, 0), (7, 7))

CHAR_MAP = {EMPTY: ".", BLACK: "B", WHITE: "W"}
SIDE_NAMES = {BLACK: "Black", WHITE: "White"}

_PARSE_MAP = {".": EMPTY, "-": EMPTY, "_": EMPTY, "B": BLACK, "X": BLACK, "W": WHITE, "O": WHITE}

Position = Tuple[int, int]


def opponent(side: int) -> int:
    """Return the other side."""
    if side == BLACK:
        return WHITE
    if side == WHITE:
        return BLACK
    raise ValueError(f"Invalid side {side}, must be {BLACK} or {WHITE}")


def in_bounds(row: int, col: int) -> bool:
    """Check if a position lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_position(row: int, col: int) -> None:
    """Guard against off-board positions (a caller bug, not a game outcome)."""
    if not in_bounds(row, col):
        raise ValueError(f"Position ({row}, {col}) is off the {BOARD_SIZE}x{BOARD_SIZE} board")


@dataclass(frozen=True)
class Move:
    """A legal placement and the number of discs it flips."""

    row: int
    col: int
    flips: int

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col}) x{self.flips}"


@dataclass(frozen=True)
class Board:
    """
    Immutable 8x8 board.

    Index of (row, col) in cells is row * 8 + col.
    """

    cells: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate board invariants."""
        if len(self.cells) != NUM_CELLS:
            raise ValueError(
                f"Board size {len(self.cells)} doesn't match expected {NUM_CELLS}"
            )
        if any(cell not in (EMPTY, BLACK, WHITE) for cell in self.cells):
            raise ValueError("Cells must be EMPTY, BLACK or WHITE")

    @classmethod
    def empty(cls) -> "Board":
        return cls(cells=(EMPTY,) * NUM_CELLS)

    def get(self, row: int, col: int) -> int:
        """Cell value at (row, col)."""
        check_position(row, col)
        return self.cells[row * BOARD_SIZE + col]

    def count(self, side: int) -> int:
        """Number of discs owned by side."""
        return self.cells.count(side)

    @property
    def empty_count(self) -> int:
        return self.cells.count(EMPTY)

    @property
    def total_discs(self) -> int:
        return NUM_CELLS - self.empty_count

    def rows(self) -> Iterator[Tuple[int, ...]]:
        """Iterate over the board one row at a time."""
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            yield self.cells[start : start + BOARD_SIZE]

    def with_cells(self, updates: Dict[Position, int]) -> "Board":
        """Return a new board with the given cells replaced."""
        cells = list(self.cells)
        for (row, col), value in updates.items():
            check_position(row, col)
            cells[row * BOARD_SIZE + col] = value
        return Board(cells=tuple(cells))

    def __str__(self) -> str:
        """Human-readable board with row/column indices."""
        lines = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for row, values in enumerate(self.rows()):
            lines.append(f"{row} " + " ".join(CHAR_MAP[v] for v in values))
        return "\n".join(lines)


def format_board(board: Board) -> str:
    """
    Render a board as 8 lines of '.', 'B' and 'W'.

    The output is accepted by parse_board().
    """
    return "\n".join("".join(CHAR_MAP[v] for v in values) for values in board.rows())


def parse_board(text: str) -> Board:
    """
    Parse the text form produced by format_board().

    Whitespace is ignored, so a board can be written on one line or eight.
    '.', '-' and '_' mean empty; 'B'/'X' black; 'W'/'O' white.

    Args:
        text: Board text

    Returns:
        Parsed Board

    Raises:
        ValueError: on unknown characters or a wrong cell count
    """
    symbols = [ch for ch in text if not ch.isspace()]
    if len(symbols) != NUM_CELLS:
        raise ValueError(f"Board text has {len(symbols)} cells, expected {NUM_CELLS}")

    cells: List[int] = []
    for ch in symbols:
        try:
            cells.append(_PARSE_MAP[ch.upper()])
        except KeyError:
            raise ValueError(f"Unknown board character {ch!r}") from None

    return Board(cells=tuple(cells))
