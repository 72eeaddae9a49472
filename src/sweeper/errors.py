"""
Error types raised by the board engine.

An ignored move is not an error: it is reported through ``Outcome.IGNORED``.
"""


class SweeperError(Exception):
    """Base class for all engine errors."""


class OutOfBounds(SweeperError, IndexError):
    """Coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) outside {height}x{width} grid"
        )
        self.row = row
        self.col = col


class InvalidConfiguration(SweeperError, ValueError):
    """Board dimensions or mine count out of range."""


class SnapshotError(SweeperError, ValueError):
    """Snapshot data is malformed or inconsistent."""


class EngineInvariantError(SweeperError, RuntimeError):
    """Internal consistency check failed."""
