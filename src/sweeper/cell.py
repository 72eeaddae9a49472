"""
Cell module for Minesweeper game.

Represents individual cells on the game board: mine content, reveal
state and the player's mark (flag or question).
"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class Mark(Enum):
    """Player annotation on an unrevealed cell."""

    NONE = ""
    FLAG = "flag"
    QUESTION = "question"

    def next(self) -> "Mark":
        """Return the mark that follows this one in the toggle cycle."""
        return _MARK_CYCLE[self]


_MARK_CYCLE = {
    Mark.NONE: Mark.FLAG,
    Mark.FLAG: Mark.QUESTION,
    Mark.QUESTION: Mark.NONE,
}

MINE_CONTENT = "mine"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been opened.
        mark: Player annotation (none, flag or question).
        adjacent_mines: Mine count of the neighbors, computed on first
            reveal and cached. None until then.
    """

    is_mine: bool = False
    is_revealed: bool = False
    mark: Mark = Mark.NONE
    adjacent_mines: Optional[int] = None

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or marked.
        """
        if self.is_revealed or self.is_marked:
            return False
        self.is_revealed = True
        return True

    def cycle_mark(self) -> bool:
        """
        Advance the mark: none -> flag -> question -> none.

        Returns:
            True if the mark changed, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.mark = self.mark.next()
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is unrevealed and unmarked."""
        return not self.is_revealed and self.mark is Mark.NONE

    @property
    def is_marked(self) -> bool:
        """Check if cell carries any mark."""
        return self.mark is not Mark.NONE

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.mark is Mark.FLAG

    @property
    def content(self) -> str:
        """
        Visible content of a revealed cell.

        Returns:
            "mine" for a revealed mine, the digit for a numbered cell,
            and "" for a zero cell or an unrevealed one.
        """
        if not self.is_revealed:
            return ""
        if self.is_mine:
            return MINE_CONTENT
        if not self.adjacent_mines:
            return ""
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Question-marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.mark is Mark.FLAG:
            return -2
        if self.mark is Mark.QUESTION:
            return -3
        if not self.is_revealed:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines or 0
