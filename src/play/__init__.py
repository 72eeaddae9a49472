"""
Play session module.

Provides the collaborators around a game: timer, statistics, storage and
the session that ties them together.
"""
from .timer import GameTimer
from .stats import DifficultyStats, StatsBook
from .storage import GameStorage
from .session import GameSession, SessionConfig

__all__ = [
    "GameTimer",
    "DifficultyStats",
    "StatsBook",
    "GameStorage",
    "GameSession",
    "SessionConfig",
]
