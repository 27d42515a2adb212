"""Game session control and AI-vs-AI matches."""

from .runner import GameRecord, MatchResult, play_game, play_match
from .session import GameSession

__all__ = [
    "GameRecord",
    "MatchResult",
    "play_game",
    "play_match",
    "GameSession",
]
