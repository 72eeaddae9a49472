"""
Grid storage for the board.

A pure storage and bounds-check layer: cells live in a flat list indexed
by ``row * width + col``. Game rules are enforced by ``Game``.
"""
from typing import Iterator, List, Tuple

from .cell import Cell
from .config import MAX_BOARD_SIZE
from .errors import InvalidConfiguration, OutOfBounds

Position = Tuple[int, int]


class Grid:
    """Fixed-size rectangular array of cells."""

    def __init__(self, width: int, height: int) -> None:
        if not (0 < width <= MAX_BOARD_SIZE and 0 < height <= MAX_BOARD_SIZE):
            raise InvalidConfiguration(
                f"Grid size {width}x{height} outside 1..{MAX_BOARD_SIZE}"
            )
        self.width = width
        self.height = height
        self._cells: List[Cell] = [Cell() for _ in range(width * height)]

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        """Return a grid with every cell in default state."""
        return cls(width, height)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    # ========================================================================
    # Bounds
    # ========================================================================

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def check(self, row: int, col: int) -> None:
        """Raise OutOfBounds if position is invalid."""
        if not self.contains(row, col):
            raise OutOfBounds(row, col, self.height, self.width)

    def index(self, row: int, col: int) -> int:
        """Flat index of a position."""
        self.check(row, col)
        return row * self.width + col

    def position(self, index: int) -> Position:
        """Inverse of ``index``."""
        return divmod(index, self.width)

    # ========================================================================
    # Access
    # ========================================================================

    def get(self, row: int, col: int) -> Cell:
        """Get cell at position, raising OutOfBounds if invalid."""
        return self._cells[self.index(row, col)]

    def positions(self) -> Iterator[Position]:
        """Iterate over all positions in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def items(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate over (position, cell) pairs in row-major order."""
        for index, cell in enumerate(self._cells):
            yield self.position(index), cell

    def rows(self) -> Iterator[List[Cell]]:
        """Iterate over rows of cells."""
        for row in range(self.height):
            start = row * self.width
            yield self._cells[start:start + self.width]
