"""
Neighbor lookup for grid positions.

Neighbors depend only on (row, col, width, height), so each position's
tuple is computed once and kept in a list indexed by ``row * width + col``.
"""
from typing import List, Optional, Tuple

from .grid import Grid, Position

_OFFSETS = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


class AdjacencyResolver:
    """Memoized neighbor tuples for a grid of fixed dimensions."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._cache: List[Optional[Tuple[Position, ...]]] = [None] * len(grid)

    def neighbors(self, row: int, col: int) -> Tuple[Position, ...]:
        """
        Get valid neighboring positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Tuple of (row, col) neighbors: 3 at a corner, 5 on an edge,
            8 in the interior.

        Raises:
            OutOfBounds: If the center position is invalid.
        """
        index = self._grid.index(row, col)
        cached = self._cache[index]
        if cached is None:
            cached = tuple(
                (row + delta_row, col + delta_col)
                for delta_row, delta_col in _OFFSETS
                if self._grid.contains(row + delta_row, col + delta_col)
            )
            self._cache[index] = cached
        return cached

    def count_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for r, c in self.neighbors(row, col)
            if self._grid.get(r, c).is_mine
        )

    def count_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to a specific cell."""
        return sum(
            1 for r, c in self.neighbors(row, col)
            if self._grid.get(r, c).is_flagged
        )

    @property
    def cached_positions(self) -> int:
        """Number of positions whose neighbors have been computed."""
        return sum(1 for entry in self._cache if entry is not None)
