"""
Per-difficulty win/loss statistics.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

DIFFICULTIES = ("easy", "medium", "hard", "custom")


@dataclass
class DifficultyStats:
    """
    Statistics for one difficulty.

    Attributes:
        games_played: Finished games, won or lost.
        wins: Games won.
        best_time: Fastest win in seconds, None until the first win.
    """

    games_played: int = 0
    wins: int = 0
    best_time: Optional[int] = None

    @property
    def win_rate(self) -> float:
        """Fraction of finished games that were won."""
        if not self.games_played:
            return 0.0
        return self.wins / self.games_played

    def record(self, won: bool, seconds: Optional[int] = None) -> None:
        """Count one finished game."""
        self.games_played += 1
        if not won:
            return
        self.wins += 1
        if seconds is not None and (
            self.best_time is None or seconds < self.best_time
        ):
            self.best_time = seconds

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "games_played": self.games_played,
            "wins": self.wins,
            "best_time": self.best_time,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DifficultyStats":
        best_time = data.get("best_time")
        return cls(
            games_played=int(data.get("games_played", 0)),
            wins=int(data.get("wins", 0)),
            best_time=int(best_time) if best_time is not None else None,
        )


@dataclass
class StatsBook:
    """Statistics for every difficulty, including custom boards."""

    entries: Dict[str, DifficultyStats] = field(
        default_factory=lambda: {name: DifficultyStats() for name in DIFFICULTIES}
    )

    def __getitem__(self, difficulty: str) -> DifficultyStats:
        return self.entries.setdefault(difficulty, DifficultyStats())

    def record(
        self, difficulty: str, won: bool, seconds: Optional[int] = None
    ) -> DifficultyStats:
        """Count one finished game and return the updated entry."""
        stats = self[difficulty]
        stats.record(won, seconds)
        return stats

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {name: stats.to_dict() for name, stats in self.entries.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatsBook":
        book = cls()
        for name, entry in data.items():
            book.entries[name] = DifficultyStats.from_dict(entry)
        return book
