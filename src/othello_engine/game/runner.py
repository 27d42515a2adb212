"""
AI-vs-AI match runner.

Plays complete games between two difficulty tiers and tallies results.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from tqdm import tqdm

from ..ai import Strategy, get_strategy
from ..core import BLACK, WHITE, Board
from .session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of one finished game."""

    black_discs: int
    white_discs: int
    winner: Optional[int]  # BLACK, WHITE or None for a draw
    plies: int  # Moves and passes played


@dataclass
class MatchResult:
    """Aggregated outcome of a match."""

    black_difficulty: int
    white_difficulty: int
    games: List[GameRecord] = field(default_factory=list)

    @property
    def black_wins(self) -> int:
        return sum(1 for game in self.games if game.winner == BLACK)

    @property
    def white_wins(self) -> int:
        return sum(1 for game in self.games if game.winner == WHITE)

    @property
    def draws(self) -> int:
        return sum(1 for game in self.games if game.winner is None)

    @property
    def black_discs(self) -> int:
        return sum(game.black_discs for game in self.games)

    @property
    def white_discs(self) -> int:
        return sum(game.white_discs for game in self.games)


def play_game(black: Strategy, white: Strategy, board: Optional[Board] = None) -> GameRecord:
    """
    Play one game to completion.

    Args:
        black: Strategy for Black
        white: Strategy for White
        board: Starting board (default: standard opening)

    Returns:
        GameRecord of the finished game
    """
    session = GameSession(board)
    plies = 0

    while not session.is_over:
        strategy = black if session.side == BLACK else white
        move = strategy.select(session.board, session.side)
        if move is None:
            session.pass_turn()
        else:
            session.play(move.row, move.col)
        plies += 1

    black_discs, white_discs = session.score
    return GameRecord(
        black_discs=black_discs,
        white_discs=white_discs,
        winner=session.winner,
        plies=plies,
    )


def play_match(
    black: int,
    white: int,
    games: int,
    rng: Optional[random.Random] = None,
    progress: bool = True,
) -> MatchResult:
    """
    Play a series of games between two difficulty tiers.

    Args:
        black: Difficulty playing Black
        white: Difficulty playing White
        games: Number of games
        rng: Randomness source shared by random tiers
        progress: Show a tqdm progress bar

    Returns:
        MatchResult with every game record
    """
    if games < 1:
        raise ValueError(f"Number of games must be positive, got {games}")

    black_strategy = get_strategy(black, rng)
    white_strategy = get_strategy(white, rng)
    result = MatchResult(black_difficulty=black, white_difficulty=white)

    logger.info(
        f"Match: {black_strategy.name} (Black) vs {white_strategy.name} (White), {games} games"
    )

    with tqdm(total=games, desc="Match", unit=" game", disable=not progress) as pbar:
        for _ in range(games):
            record = play_game(black_strategy, white_strategy)
            result.games.append(record)
            pbar.set_postfix(black=result.black_wins, white=result.white_wins, draws=result.draws)
            pbar.update(1)

    logger.info(
        f"Match complete: Black {result.black_wins}, White {result.white_wins}, "
        f"draws {result.draws}"
    )
    return result
