"""
Game lifecycle types and move results.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .cell import Mark
from .grid import Position


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Lifecycle phase of a game."""

    NOT_STARTED = "not_started"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """Won and lost games accept no further moves."""
        return self in (Phase.WON, Phase.LOST)


class Outcome(Enum):
    """What a reveal or chord request led to."""

    CONTINUED = "continued"
    WON = "won"
    LOST = "lost"
    IGNORED = "ignored"


# ============================================================================
# State Records
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """Read-only view of the counters collaborators may poll."""

    phase: Phase
    revealed_count: int
    mine_count: int
    width: int
    height: int

    @property
    def safe_cells(self) -> int:
        """Cells that must be revealed to win."""
        return self.width * self.height - self.mine_count


@dataclass(frozen=True)
class CellDelta:
    """A cell whose visible state changed during a move."""

    row: int
    col: int
    revealed: bool
    mark: Mark
    content: str


@dataclass(frozen=True)
class MoveResult:
    """
    Result of a reveal or chord request.

    Attributes:
        outcome: Continued, won, lost or ignored.
        cells_changed: Cells revealed by the move, in reveal order.
        highlight: Neighbors to highlight after a chord whose flag count
            did not match.
        exposed_mines: All mine positions, set when the game ends.
    """

    outcome: Outcome
    cells_changed: Tuple[CellDelta, ...] = ()
    highlight: Tuple[Position, ...] = ()
    exposed_mines: Tuple[Position, ...] = ()

    @property
    def accepted(self) -> bool:
        """Check if the move changed the board."""
        return self.outcome is not Outcome.IGNORED


IGNORED = MoveResult(Outcome.IGNORED)


@dataclass(frozen=True)
class MarkResult:
    """Result of a mark toggle: the cell's mark after the request."""

    mark: Mark
    accepted: bool
