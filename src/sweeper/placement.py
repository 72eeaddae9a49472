"""
Mine placement.

Mines are placed once per game, when the first reveal happens, so the
first clicked cell is always safe.
"""
import logging
import random
from typing import FrozenSet, Iterable, Optional, Set

from .errors import InvalidConfiguration
from .grid import Grid, Position

logger = logging.getLogger(__name__)


def place_mines(
    grid: Grid,
    mine_count: int,
    exclude_row: int,
    exclude_col: int,
    rng: Optional[random.Random] = None,
) -> FrozenSet[Position]:
    """
    Place mines uniformly at random, keeping one cell mine-free.

    Samples random positions and rejects duplicates and the excluded
    cell until ``mine_count`` distinct positions are chosen.

    Args:
        grid: Grid to place mines on.
        mine_count: Number of mines, in [1, cells - 1].
        exclude_row: Row of the cell to keep safe.
        exclude_col: Column of the cell to keep safe.
        rng: Random source; the module-level generator if omitted.

    Returns:
        The placed mine positions.
    """
    grid.check(exclude_row, exclude_col)
    max_mines = len(grid) - 1
    if not 1 <= mine_count <= max_mines:
        raise InvalidConfiguration(
            f"Mine count {mine_count} outside 1..{max_mines}"
        )

    rng = rng or random.Random()
    exclude = (exclude_row, exclude_col)
    chosen: Set[Position] = set()
    while len(chosen) < mine_count:
        position = (rng.randrange(grid.height), rng.randrange(grid.width))
        if position != exclude:
            chosen.add(position)

    for row, col in chosen:
        grid.get(row, col).is_mine = True

    logger.debug(
        "Placed %d mines on %dx%d grid avoiding %s",
        mine_count, grid.height, grid.width, exclude,
    )
    return frozenset(chosen)


def set_mines(grid: Grid, positions: Iterable[Position]) -> FrozenSet[Position]:
    """
    Place mines at explicit positions.

    Raises:
        OutOfBounds: If any position is outside the grid.
        InvalidConfiguration: On duplicates or a grid with no safe cell.
    """
    chosen: Set[Position] = set()
    for row, col in positions:
        grid.check(row, col)
        if (row, col) in chosen:
            raise InvalidConfiguration(f"Duplicate mine at ({row}, {col})")
        chosen.add((row, col))

    if not 1 <= len(chosen) <= len(grid) - 1:
        raise InvalidConfiguration(
            f"Mine count {len(chosen)} outside 1..{len(grid) - 1}"
        )

    for row, col in chosen:
        grid.get(row, col).is_mine = True
    return frozenset(chosen)
