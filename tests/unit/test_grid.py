"""
Unit tests for Grid storage and adjacency lookup.
"""
import pytest

from sweeper import AdjacencyResolver, Grid, InvalidConfiguration, OutOfBounds


# ============================================================================
# Grid Tests
# ============================================================================

class TestGrid:
    """Test grid creation and bounds checks."""

    def test_create_all_cells_default(self, small_grid: Grid) -> None:
        """Every cell starts unrevealed, unmarked and mine-free."""
        assert len(small_grid) == 12
        for _, cell in small_grid.items():
            assert cell.is_hidden is True
            assert cell.is_mine is False

    def test_create_classmethod(self) -> None:
        """Grid.create builds the requested dimensions."""
        grid = Grid.create(7, 5)
        assert (grid.width, grid.height) == (7, 5)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (31, 5), (5, 31)])
    def test_invalid_dimensions_rejected(self, width: int, height: int) -> None:
        """Dimensions outside 1..30 are rejected."""
        with pytest.raises(InvalidConfiguration):
            Grid(width, height)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 4)])
    def test_get_out_of_bounds_raises(
        self, small_grid: Grid, row: int, col: int
    ) -> None:
        """Out-of-range access raises instead of wrapping."""
        with pytest.raises(OutOfBounds):
            small_grid.get(row, col)

    def test_out_of_bounds_is_index_error(self, small_grid: Grid) -> None:
        """OutOfBounds can be caught as IndexError."""
        with pytest.raises(IndexError):
            small_grid.get(10, 10)

    def test_index_is_row_major(self, small_grid: Grid) -> None:
        """Flat index is row * width + col."""
        assert small_grid.index(2, 3) == 11
        assert small_grid.position(11) == (2, 3)

    def test_get_returns_same_cell(self, small_grid: Grid) -> None:
        """Cells are stored, not recreated on access."""
        small_grid.get(1, 2).is_mine = True
        assert small_grid.get(1, 2).is_mine is True
        assert small_grid.get(2, 1).is_mine is False

    def test_rows_shape(self, small_grid: Grid) -> None:
        """rows() yields height rows of width cells."""
        rows = list(small_grid.rows())
        assert len(rows) == 3
        assert all(len(row) == 4 for row in rows)


# ============================================================================
# Adjacency Tests
# ============================================================================

class TestAdjacency:
    """Test neighbor computation and memoization."""

    @pytest.mark.parametrize(
        "row,col,expected",
        [(0, 0, 3), (0, 3, 3), (2, 0, 3), (2, 3, 3), (0, 1, 5), (1, 0, 5),
         (1, 1, 8), (1, 2, 8)],
    )
    def test_neighbor_counts(
        self, small_grid: Grid, row: int, col: int, expected: int
    ) -> None:
        """Corners have 3 neighbors, edges 5, interior 8."""
        resolver = AdjacencyResolver(small_grid)
        assert len(resolver.neighbors(row, col)) == expected

    def test_neighbors_exclude_center(self, small_grid: Grid) -> None:
        """The cell itself is not its own neighbor."""
        resolver = AdjacencyResolver(small_grid)
        assert (1, 1) not in resolver.neighbors(1, 1)
        assert set(resolver.neighbors(0, 0)) == {(0, 1), (1, 0), (1, 1)}

    def test_neighbors_are_memoized(self, small_grid: Grid) -> None:
        """Repeated lookups return the cached tuple."""
        resolver = AdjacencyResolver(small_grid)
        first = resolver.neighbors(1, 1)
        assert resolver.neighbors(1, 1) is first
        assert resolver.cached_positions == 1

    def test_neighbors_out_of_bounds(self, small_grid: Grid) -> None:
        """Neighbor lookup validates the center position."""
        resolver = AdjacencyResolver(small_grid)
        with pytest.raises(OutOfBounds):
            resolver.neighbors(3, 0)

    def test_count_mines_and_flags(self, small_grid: Grid) -> None:
        """Counts only look at the 8 surrounding cells."""
        small_grid.get(0, 0).is_mine = True
        small_grid.get(2, 2).is_mine = True
        small_grid.get(0, 3).is_mine = True
        small_grid.get(1, 2).cycle_mark()
        resolver = AdjacencyResolver(small_grid)
        assert resolver.count_mines(1, 1) == 2
        assert resolver.count_flags(1, 1) == 1
        assert resolver.count_flags(0, 0) == 0
