"""
JSON persistence for statistics and in-progress games.

Storage problems never end a game: failures are logged and reported
through return values.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from sweeper import GameSnapshot, SnapshotError

from .stats import StatsBook

logger = logging.getLogger(__name__)

STATS_FILE = "stats.json"
STATE_FILE = "state.json"


class GameStorage:
    """Reads and writes game files in one directory."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    @property
    def stats_path(self) -> Path:
        return self.directory / STATS_FILE

    @property
    def state_path(self) -> Path:
        return self.directory / STATE_FILE

    # ========================================================================
    # File Helpers (Low-level)
    # ========================================================================

    def _write(self, path: Path, data: Any) -> bool:
        """Write JSON to path; False on failure."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(data, f, indent=2)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Failed to save %s: %s", path.name, exc)
            return False
        return True

    def _read(self, path: Path) -> Optional[Any]:
        """Read JSON from path; None if missing or unreadable."""
        if not path.exists():
            return None
        try:
            with open(path) as f:
                return json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load %s: %s", path.name, exc)
            return None

    # ========================================================================
    # Statistics
    # ========================================================================

    def save_stats(self, stats: StatsBook) -> bool:
        """Save statistics to JSON."""
        return self._write(self.stats_path, stats.to_dict())

    def load_stats(self) -> Optional[StatsBook]:
        """Load statistics, or None if absent or corrupt."""
        data = self._read(self.stats_path)
        if data is None:
            return None
        try:
            return StatsBook.from_dict(data)
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Ignoring corrupt stats file: %s", exc)
            return None

    # ========================================================================
    # Game State
    # ========================================================================

    def save_game(self, snapshot: GameSnapshot, difficulty: str) -> bool:
        """Save an in-progress game snapshot."""
        data = {"difficulty": difficulty, "snapshot": snapshot.to_dict()}
        return self._write(self.state_path, data)

    def load_game(self) -> Optional[Tuple[GameSnapshot, str]]:
        """
        Load the saved game.

        Returns:
            (snapshot, difficulty) or None if absent or corrupt.
        """
        data = self._read(self.state_path)
        if data is None:
            return None
        try:
            snapshot = GameSnapshot.from_dict(data["snapshot"])
            difficulty = str(data.get("difficulty", "custom"))
        except (KeyError, TypeError, SnapshotError) as exc:
            logger.warning("Ignoring corrupt saved game: %s", exc)
            return None
        return snapshot, difficulty

    def clear_game(self) -> None:
        """Remove the saved game if present."""
        try:
            self.state_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("Failed to remove %s: %s", self.state_path.name, exc)
