"""
Rich-based terminal display for games and matches.

Provides clean, formatted output with:
- Board rendering with legal-move and hint markers
- Score line and status messages
- Move ranking and match summary tables
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from ..core import BLACK, BOARD_SIZE, SIDE_NAMES, WHITE, Board, Move

console = Console()
logger = logging.getLogger(__name__)

DISC_STYLES = {
    BLACK: "[bold black on green]●[/bold black on green]",
    WHITE: "[bold white on green]●[/bold white on green]",
}
EMPTY_CELL = "[green on green]·[/green on green]"
LEGAL_CELL = "[yellow on green]+[/yellow on green]"
HINT_CELL = "[bold magenta on green]*[/bold magenta on green]"


class GameDisplay:
    """Rich console output for the interactive and batch commands."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output if output is not None else console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, subtitle: str = ""):
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        if subtitle:
            self.console.print(subtitle)
        self.console.print()

    def board_table(
        self,
        board: Board,
        legal_moves: Iterable[Move] = (),
        hint: Optional[Move] = None,
    ) -> Table:
        """Create the board table; legal moves marked '+', the hint '*'."""
        marks = {move.position: LEGAL_CELL for move in legal_moves}
        if hint is not None:
            marks[hint.position] = HINT_CELL

        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("", style="dim", justify="right")
        for col in range(BOARD_SIZE):
            table.add_column(str(col), justify="center")

        for row, values in enumerate(board.rows()):
            cells = []
            for col, value in enumerate(values):
                if value in DISC_STYLES:
                    cells.append(DISC_STYLES[value])
                else:
                    cells.append(marks.get((row, col), EMPTY_CELL))
            table.add_row(str(row), *cells)

        return table

    def show_board(
        self,
        board: Board,
        legal_moves: Iterable[Move] = (),
        hint: Optional[Move] = None,
    ):
        self.console.print(self.board_table(board, legal_moves, hint))

    def show_score(self, black: int, white: int, side: Optional[int] = None):
        turn = f" | [bold]{SIDE_NAMES[side]} to move[/bold]" if side is not None else ""
        self.console.print(f"Black {black} - White {white}{turn}")

    def show_ranked_moves(self, ranked: Sequence[Tuple[Move, int]]):
        """Table of legal moves with their 1-ply scores."""
        table = Table(title="Legal moves")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Move", style="cyan")
        table.add_column("Flips", justify="right")
        table.add_column("Score", justify="right", style="bold")

        for rank, (move, score) in enumerate(ranked, start=1):
            table.add_row(str(rank), f"({move.row}, {move.col})", str(move.flips), str(score))

        self.console.print(table)

    def show_match_result(self, result) -> None:
        """Summary table for a MatchResult."""
        games = len(result.games)
        table = Table(title=f"Match result ({games} games)")
        table.add_column("Side", style="cyan")
        table.add_column("Difficulty", justify="right")
        table.add_column("Wins", justify="right", style="bold")
        table.add_column("Discs", justify="right")

        table.add_row(
            SIDE_NAMES[BLACK], str(result.black_difficulty), str(result.black_wins), str(result.black_discs)
        )
        table.add_row(
            SIDE_NAMES[WHITE], str(result.white_difficulty), str(result.white_wins), str(result.white_discs)
        )
        self.console.print(table)
        self.console.print(f"Draws: {result.draws}")


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
