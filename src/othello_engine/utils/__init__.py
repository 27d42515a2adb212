"""Utility modules for the Othello engine."""

from .rich_display import GameDisplay, console, setup_rich_logging

__all__ = [
    "GameDisplay",
    "console",
    "setup_rich_logging",
]
