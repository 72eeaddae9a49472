"""
Reveal engine.

Opens cells, expands zero regions with an explicit queue, and performs
chord reveals. The engine keeps a running count of revealed cells so the
win check never scans the grid. Deciding win or loss is left to ``Game``.
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .adjacency import AdjacencyResolver
from .errors import EngineInvariantError
from .grid import Grid, Position


# ============================================================================
# Step Results
# ============================================================================

@dataclass(frozen=True)
class RevealStep:
    """
    Result of a reveal request.

    Attributes:
        revealed: Newly revealed positions, in reveal order.
        mine: Position of the mine that was revealed, if any.
    """

    revealed: Tuple[Position, ...] = ()
    mine: Optional[Position] = None

    @property
    def hit_mine(self) -> bool:
        """Check if the step revealed a mine."""
        return self.mine is not None

    @property
    def changed(self) -> bool:
        """Check if anything was revealed."""
        return bool(self.revealed)


@dataclass(frozen=True)
class ChordStep(RevealStep):
    """
    Result of a chord request.

    Attributes:
        performed: True when the flag count matched and neighbors opened.
        highlight: Unrevealed neighbors to highlight when it did not.
    """

    performed: bool = False
    highlight: Tuple[Position, ...] = ()


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """Mutates reveal state of a grid and tracks how many cells are open."""

    def __init__(
        self, grid: Grid, adjacency: Optional[AdjacencyResolver] = None
    ) -> None:
        self.grid = grid
        self.adjacency = adjacency or AdjacencyResolver(grid)
        self.revealed_count = 0

    # ========================================================================
    # Single Cell (Low-level)
    # ========================================================================

    def _open(self, row: int, col: int) -> bool:
        """Reveal one cell and cache its count. False if inert."""
        cell = self.grid.get(row, col)
        if not cell.reveal():
            return False
        if not cell.is_mine and cell.adjacent_mines is None:
            cell.adjacent_mines = self.adjacency.count_mines(row, col)
        self.revealed_count += 1
        return True

    def reveal(self, row: int, col: int) -> RevealStep:
        """
        Reveal a single cell without expansion.

        Revealed or marked cells are inert and produce an empty step.
        """
        if not self._open(row, col):
            return RevealStep()
        mine = (row, col) if self.grid.get(row, col).is_mine else None
        return RevealStep(revealed=((row, col),), mine=mine)

    # ========================================================================
    # Expansion (Mid-level)
    # ========================================================================

    def flood_reveal(self, row: int, col: int) -> Tuple[Position, ...]:
        """
        Expand from a revealed zero cell across the connected zero region.

        Uses a FIFO worklist. A cell is enqueued only when it is opened,
        so revealed cells are never queued twice. Marked cells stop the
        expansion.

        Returns:
            Positions opened by the expansion, not including the origin.

        Raises:
            EngineInvariantError: If expansion reaches a mine.
        """
        origin = self.grid.get(row, col)
        if not origin.is_revealed or origin.is_mine or origin.adjacent_mines:
            return ()

        opened: List[Position] = []
        queue: Deque[Position] = deque([(row, col)])
        while queue:
            current = queue.popleft()
            for neighbor_row, neighbor_col in self.adjacency.neighbors(*current):
                neighbor = self.grid.get(neighbor_row, neighbor_col)
                if neighbor.is_revealed or neighbor.is_marked:
                    continue
                if neighbor.is_mine:
                    raise EngineInvariantError(
                        f"Flood from {current} reached mine at "
                        f"({neighbor_row}, {neighbor_col})"
                    )
                self._open(neighbor_row, neighbor_col)
                opened.append((neighbor_row, neighbor_col))
                if neighbor.adjacent_mines == 0:
                    queue.append((neighbor_row, neighbor_col))
        return tuple(opened)

    def reveal_area(self, row: int, col: int) -> RevealStep:
        """Reveal a cell and flood outward if it has no adjacent mines."""
        step = self.reveal(row, col)
        if not step.changed or step.hit_mine:
            return step
        return RevealStep(revealed=step.revealed + self.flood_reveal(row, col))

    # ========================================================================
    # Chord (High-level)
    # ========================================================================

    def chord_reveal(self, row: int, col: int) -> ChordStep:
        """
        Open all unflagged neighbors of a numbered cell.

        Runs only when the number of flagged neighbors equals the cell's
        count. Otherwise returns the unrevealed neighbors as a highlight
        and changes nothing. Question-marked neighbors stay closed, mines
        included, since only flags count toward the total. Stops at the
        first mine opened.
        """
        cell = self.grid.get(row, col)
        if not cell.is_revealed or cell.is_mine or not cell.adjacent_mines:
            return ChordStep()

        neighbors = self.adjacency.neighbors(row, col)
        if self.adjacency.count_flags(row, col) != cell.adjacent_mines:
            highlight = tuple(
                (r, c) for r, c in neighbors
                if not self.grid.get(r, c).is_revealed
            )
            return ChordStep(highlight=highlight)

        revealed: List[Position] = []
        for neighbor_row, neighbor_col in neighbors:
            step = self.reveal_area(neighbor_row, neighbor_col)
            revealed.extend(step.revealed)
            if step.hit_mine:
                return ChordStep(
                    revealed=tuple(revealed), mine=step.mine, performed=True
                )
        return ChordStep(revealed=tuple(revealed), performed=True)
