"""
Game session controller.

Drives a single game on top of the rules engine: turn order, automatic
passes, undo history, hints and the final result. Every accepted move
replaces the board with the new value returned by the rules engine, so
history is just the list of earlier boards.
"""

import logging
import random
from typing import List, Optional, Tuple

from ..ai import select_move
from ..core import (
    BLACK,
    SIDE_NAMES,
    Board,
    Move,
    count_discs,
    create_starting_board,
    generate_legal_moves,
    get_game_result,
    get_winner,
    has_legal_move,
    is_terminal,
    opponent,
    place,
)

logger = logging.getLogger(__name__)


class GameSession:
    """
    Mutable game wrapper around immutable boards.

    Attributes:
        board: Current board
        side: Side to move
        history: Earlier (board, side) snapshots, oldest first
        passed: Side that was skipped by the last turn change, if any
    """

    def __init__(self, board: Optional[Board] = None, side: int = BLACK):
        self.board = board if board is not None else create_starting_board()
        self.side = side
        self.history: List[Tuple[Board, int]] = []
        self.passed: Optional[int] = None

        if not self.is_over:
            self._skip_if_stuck()

    @property
    def is_over(self) -> bool:
        return is_terminal(self.board)

    @property
    def score(self) -> Tuple[int, int]:
        """(black, white) disc counts."""
        return count_discs(self.board)

    @property
    def winner(self) -> Optional[int]:
        """Winning side once the game is over; None while playing or on a draw."""
        if not self.is_over:
            return None
        return get_winner(self.board)

    @property
    def result(self) -> Optional[str]:
        return get_game_result(self.board)

    def legal_moves(self) -> List[Move]:
        return generate_legal_moves(self.board, self.side)

    def play(self, row: int, col: int) -> Move:
        """
        Play a move for the side to move.

        Args:
            row: Target row
            col: Target column

        Returns:
            The move played

        Raises:
            IllegalMoveError: if the placement is not legal
        """
        new_board = place(self.board, row, col, self.side)
        flips = new_board.count(self.side) - self.board.count(self.side) - 1

        self.history.append((self.board, self.side))
        self.board = new_board
        move = Move(row=row, col=col, flips=flips)
        logger.debug(f"{SIDE_NAMES[self.side]} played {move}")

        self._advance()
        return move

    def play_ai(self, difficulty: int, rng: Optional[random.Random] = None) -> Optional[Move]:
        """
        Let the engine move for the side to move.

        Returns:
            The move played, or None if the side had to pass
        """
        if self.is_over:
            return None

        move = select_move(self.board, self.side, difficulty, rng)
        if move is None:
            self.pass_turn()
            return None
        return self.play(move.row, move.col)

    def pass_turn(self) -> None:
        """
        Pass for the side to move.

        Raises:
            ValueError: if the side has a legal move
        """
        if has_legal_move(self.board, self.side):
            raise ValueError(f"{SIDE_NAMES[self.side]} has a legal move and cannot pass")

        self.history.append((self.board, self.side))
        self.passed = self.side
        self.side = opponent(self.side)

    def undo(self, to_side: Optional[int] = None) -> bool:
        """
        Restore an earlier position.

        Args:
            to_side: Keep undoing until this side is to move again (used to
                take back both the player's move and the AI reply). None
                undoes a single turn.

        Returns:
            True if anything was undone
        """
        if not self.history:
            return False

        self.board, self.side = self.history.pop()
        while to_side is not None and self.side != to_side and self.history:
            self.board, self.side = self.history.pop()

        self.passed = None
        return True

    def hint(self) -> Optional[Move]:
        """Legal move flipping the most discs (first in row-major order on ties)."""
        legal_moves = self.legal_moves()
        if not legal_moves:
            return None
        return max(legal_moves, key=lambda move: move.flips)

    def _advance(self) -> None:
        """Hand the turn over, skipping a side that has no legal move."""
        self.passed = None
        self.side = opponent(self.side)

        if self.is_over:
            logger.info(f"Game over: {self.result}")
            return

        self._skip_if_stuck()

    def _skip_if_stuck(self) -> None:
        """Pass for the side to move if it has no legal move."""
        if not has_legal_move(self.board, self.side):
            logger.info(f"{SIDE_NAMES[self.side]} has no legal move and passes")
            self.passed = self.side
            self.side = opponent(self.side)
