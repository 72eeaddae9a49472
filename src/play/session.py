"""
Game session: one game plus the collaborators around it.

The session is created and torn down with the view. It starts the timer
on the first accepted reveal and records statistics once per finished game.
"""
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sweeper import (
    BoardConfig,
    Game,
    MarkResult,
    MoveResult,
    Outcome,
    Phase,
    SnapshotError,
    get_preset,
)
from sweeper.config import CUSTOM

from .stats import DifficultyStats, StatsBook
from .storage import GameStorage
from .timer import GameTimer

logger = logging.getLogger(__name__)


# ============================================================================
# Session Configuration
# ============================================================================

@dataclass
class SessionConfig:
    """
    Settings for a play session.

    Attributes:
        difficulty: Preset name, or "custom".
        storage_dir: Directory for stats and saved games; None disables it.
        autosave: Save the game after every accepted move.
    """

    difficulty: str = "easy"
    storage_dir: Optional[str] = str(Path.home() / ".sweeper")
    autosave: bool = True


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """Owns a game, its timer, statistics and storage."""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        storage: Optional[GameStorage] = None,
        rng: Optional[random.Random] = None,
        timer: Optional[GameTimer] = None,
    ) -> None:
        self.config = config or SessionConfig()
        if storage is None and self.config.storage_dir:
            storage = GameStorage(self.config.storage_dir)
        self.storage = storage
        self.timer = timer or GameTimer()
        self._rng = rng

        self.stats = (self.storage and self.storage.load_stats()) or StatsBook()
        self.difficulty = self.config.difficulty
        self.game = Game(self._board_config(self.difficulty), rng)
        self._recorded = False

    def _board_config(self, difficulty: str) -> BoardConfig:
        if difficulty == CUSTOM:
            return BoardConfig()
        return get_preset(difficulty)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(
        self,
        difficulty: Optional[str] = None,
        custom: Optional[BoardConfig] = None,
    ) -> Game:
        """
        Start a fresh game.

        Args:
            difficulty: Preset name; keeps the current one if None.
            custom: Board config for a custom game. Implies "custom".
        """
        if custom is not None:
            self.difficulty = CUSTOM
            board_config = custom
        else:
            self.difficulty = difficulty or self.difficulty
            board_config = (
                self.game.config if self.difficulty == CUSTOM
                else get_preset(self.difficulty)
            )
        self.game.reset(board_config)
        self.timer.reset()
        self._recorded = False
        if self.storage:
            self.storage.clear_game()
        return self.game

    def resume(self) -> bool:
        """
        Replace the current game with the saved one.

        Returns:
            True if a saved game was restored.
        """
        if not self.storage:
            return False
        loaded = self.storage.load_game()
        if loaded is None:
            return False
        snapshot, difficulty = loaded
        try:
            game = Game.restore(snapshot, self._rng)
        except SnapshotError as exc:
            logger.warning("Discarding inconsistent saved game: %s", exc)
            self.storage.clear_game()
            return False
        self.game = game
        self.difficulty = difficulty
        self.timer.reset()
        if self.game.phase is Phase.PLAYING:
            self.timer.start()
        self._recorded = self.game.is_over
        logger.info("Resumed %s game", difficulty)
        return True

    def save(self) -> bool:
        """Save the current game; finished games are cleared instead."""
        if not self.storage:
            return False
        if self.game.is_over:
            self.storage.clear_game()
            return True
        return self.storage.save_game(self.game.snapshot(), self.difficulty)

    # ========================================================================
    # Moves
    # ========================================================================

    def reveal(self, row: int, col: int) -> MoveResult:
        """Reveal a cell and update timer and statistics."""
        return self._after_move(self.game.reveal(row, col))

    def chord_reveal(self, row: int, col: int) -> MoveResult:
        """Chord a numbered cell and update timer and statistics."""
        return self._after_move(self.game.chord_reveal(row, col))

    def toggle_mark(self, row: int, col: int) -> MarkResult:
        """Cycle the mark on a cell."""
        result = self.game.toggle_mark(row, col)
        if result.accepted and self.config.autosave:
            self.save()
        return result

    def _after_move(self, result: MoveResult) -> MoveResult:
        if not result.accepted:
            return result
        self.timer.start()
        if result.outcome in (Outcome.WON, Outcome.LOST):
            self._finish(result.outcome is Outcome.WON)
        if self.config.autosave:
            self.save()
        return result

    def _finish(self, won: bool) -> None:
        """Stop the clock and record the result once."""
        self.timer.stop()
        if self._recorded:
            return
        self._recorded = True
        seconds = self.timer.elapsed if won else None
        self.stats.record(self.difficulty, won, seconds)
        logger.info(
            "%s game %s in %ds",
            self.difficulty, "won" if won else "lost", self.timer.elapsed,
        )
        if self.storage:
            self.storage.save_stats(self.stats)

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def current_stats(self) -> DifficultyStats:
        """Statistics for the current difficulty."""
        return self.stats[self.difficulty]
