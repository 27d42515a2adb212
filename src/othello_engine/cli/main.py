"""
Main CLI for the Othello engine.
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from ..ai import Difficulty, get_strategy, rank_moves
from ..core import (
    BLACK,
    SIDE_NAMES,
    WHITE,
    Board,
    IllegalMoveError,
    create_starting_board,
    generate_legal_moves,
    parse_board,
)
from ..game import GameSession, play_match
from ..utils.rich_display import GameDisplay, setup_rich_logging

SIDE_CHOICES = {"black": BLACK, "white": WHITE}


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_position(text: Optional[str]) -> Board:
    """Board from --position text, or the starting position."""
    if text is None:
        return create_starting_board()
    return parse_board(text)


def make_rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None


def play_command(args) -> int:
    """Play an interactive game against the engine."""
    setup_rich_logging(args.log_level)
    display = GameDisplay()

    try:
        board = load_position(args.position)
    except ValueError as e:
        display.log_error(f"Invalid position: {e}")
        return 1

    human = SIDE_CHOICES[args.human]
    session = GameSession(board, side=SIDE_CHOICES[args.side])
    rng = make_rng(args.seed)
    hint = None

    display.show_header(
        "Othello",
        f"You play {SIDE_NAMES[human]} | AI difficulty {args.difficulty}",
    )
    if session.passed is not None:
        display.log_warning(f"{SIDE_NAMES[session.passed]} has no legal move and passes")

    while not session.is_over:
        if session.side != human:
            ai_side = session.side
            move = session.play_ai(args.difficulty, rng)
            if move is None:
                display.log_warning(f"{SIDE_NAMES[ai_side]} (AI) passes")
            else:
                display.log_info(f"AI played ({move.row}, {move.col}), flipping {move.flips}")
            if session.passed == human:
                display.log_warning(f"{SIDE_NAMES[human]} has no legal move and passes")
            continue

        display.show_board(session.board, session.legal_moves(), hint)
        display.show_score(*session.score, side=session.side)
        hint = None

        try:
            command = input("Your move (row col | hint | undo | quit): ").strip().lower()
        except EOFError:
            display.log("")
            return 0

        if command in ("q", "quit", "exit"):
            return 0

        if command == "hint":
            hint = session.hint()
            continue

        if command == "undo":
            if not session.undo(to_side=human):
                display.log_warning("Nothing to undo")
            continue

        parts = command.replace(",", " ").split()
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            display.log_error("Enter a move as 'row col', e.g. '2 3'")
            continue

        try:
            session.play(int(parts[0]), int(parts[1]))
        except IllegalMoveError as e:
            display.log_error(str(e))
        except ValueError as e:
            # Off-board coordinates
            display.log_error(str(e))

    display.show_board(session.board)
    black, white = session.score
    display.show_score(black, white)
    display.log_success(session.result)
    return 0


def match_command(args) -> int:
    """Play AI-vs-AI games between two difficulty tiers."""
    setup_logging(args.log_level)
    display = GameDisplay()

    display.show_header(
        "Othello Match",
        f"Black: difficulty {args.black} | White: difficulty {args.white} | Games: {args.games}",
    )

    result = play_match(
        black=args.black,
        white=args.white,
        games=args.games,
        rng=make_rng(args.seed),
        progress=not args.no_progress,
    )
    display.show_match_result(result)
    return 0


def analyze_command(args) -> int:
    """Show legal moves and each tier's choice for a position."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    try:
        board = load_position(args.position)
    except ValueError as e:
        display.log_error(f"Invalid position: {e}")
        return 1

    side = SIDE_CHOICES[args.side]
    legal_moves = generate_legal_moves(board, side)

    display.show_header("Position analysis", f"{SIDE_NAMES[side]} to move")
    display.show_board(board, legal_moves)

    if not legal_moves:
        display.log_warning(f"{SIDE_NAMES[side]} has no legal move and must pass")
        return 0

    display.show_ranked_moves(rank_moves(board, side))

    rng = make_rng(args.seed)
    for tier in Difficulty:
        strategy = get_strategy(tier, rng)
        move = strategy.select(board, side)
        logger.debug(f"Tier {int(tier)} ({strategy.name}) selected {move}")
        display.log_info(f"{tier.name.title()} ({strategy.name}): ({move.row}, {move.col})")

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Othello engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against the engine")
    play_parser.add_argument(
        "--difficulty", type=int, default=int(Difficulty.MEDIUM),
        help="AI difficulty: 1=random, 2=greedy, 3=minimax (others fall back to 2)",
    )
    play_parser.add_argument(
        "--human", choices=sorted(SIDE_CHOICES), default="black", help="Side you play"
    )
    play_parser.add_argument(
        "--side", choices=sorted(SIDE_CHOICES), default="black", help="Side to move first"
    )
    play_parser.add_argument("--position", default=None, help="Starting board text (64 cells of . B W)")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed for the random tier")
    play_parser.set_defaults(func=play_command)

    # Match command
    match_parser = subparsers.add_parser("match", help="Play AI-vs-AI games")
    match_parser.add_argument("--black", type=int, default=int(Difficulty.MEDIUM), help="Black difficulty")
    match_parser.add_argument("--white", type=int, default=int(Difficulty.EASY), help="White difficulty")
    match_parser.add_argument("--games", type=int, default=10, help="Number of games")
    match_parser.add_argument("--seed", type=int, default=None, help="Random seed for the random tier")
    match_parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    match_parser.set_defaults(func=match_command)

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Rank the legal moves of a position")
    analyze_parser.add_argument("--position", default=None, help="Board text (64 cells of . B W)")
    analyze_parser.add_argument(
        "--side", choices=sorted(SIDE_CHOICES), default="black", help="Side to move"
    )
    analyze_parser.add_argument("--seed", type=int, default=None, help="Random seed for the random tier")
    analyze_parser.set_defaults(func=analyze_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
