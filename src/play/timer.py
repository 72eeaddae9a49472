"""
Elapsed-time tracking for a game.

The timer only reads the clock; it never touches the board.
"""
import time
from typing import Callable, Optional


class GameTimer:
    """Whole-second stopwatch started by the first reveal."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def start(self) -> None:
        """Start timing. Does nothing if already running."""
        if self.running:
            return
        self._start = self._clock()
        self._stopped_at = None

    def stop(self) -> None:
        """Freeze the elapsed time."""
        if self.running:
            self._stopped_at = self._clock()

    def reset(self) -> None:
        """Stop and clear back to zero."""
        self._start = None
        self._stopped_at = None

    @property
    def running(self) -> bool:
        """Check if the timer is counting."""
        return self._start is not None and self._stopped_at is None

    @property
    def elapsed(self) -> int:
        """Elapsed whole seconds."""
        if self._start is None:
            return 0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return int(end - self._start)
