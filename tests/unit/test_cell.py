"""
Unit tests for Cell class.

Tests reveal/mark behavior, content and observation conversion.
"""
import pytest
from sweeper import Cell, Mark


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be unrevealed and unmarked."""
        assert hidden_cell.is_revealed is False
        assert hidden_cell.mark is Mark.NONE
        assert hidden_cell.is_hidden is True

    def test_adjacent_count_starts_uncomputed(self, hidden_cell: Cell) -> None:
        """Adjacent count is computed lazily, so starts as None."""
        assert hidden_cell.adjacent_mines is None


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    @pytest.mark.parametrize("mark", [Mark.FLAG, Mark.QUESTION])
    def test_reveal_marked_cell_returns_false(self, mark: Mark) -> None:
        """A marked cell refuses reveal and keeps its mark."""
        cell = Cell(mark=mark)
        assert cell.reveal() is False
        assert cell.is_revealed is False
        assert cell.mark is mark


# ============================================================================
# Cell Mark Tests
# ============================================================================

class TestCellMark:
    """Test the none -> flag -> question -> none cycle."""

    def test_mark_cycle(self, hidden_cell: Cell) -> None:
        """Marks cycle through flag and question back to none."""
        seen = []
        for _ in range(3):
            assert hidden_cell.cycle_mark() is True
            seen.append(hidden_cell.mark)
        assert seen == [Mark.FLAG, Mark.QUESTION, Mark.NONE]

    def test_flagged_cell_properties(self, flagged_cell: Cell) -> None:
        """Flagged cell is marked and not hidden."""
        assert flagged_cell.is_flagged is True
        assert flagged_cell.is_marked is True
        assert flagged_cell.is_hidden is False

    def test_mark_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot mark a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.cycle_mark() is False
        assert hidden_cell.mark is Mark.NONE


# ============================================================================
# Cell Content / Observation Tests
# ============================================================================

class TestCellContent:
    """Test visible content and observation values."""

    def test_hidden_cell_has_no_content(self, mine_cell: Cell) -> None:
        """Unrevealed cells never show content, mines included."""
        assert mine_cell.content == ""

    def test_revealed_mine_content(self, mine_cell: Cell) -> None:
        """Revealed mine shows as mine."""
        mine_cell.reveal()
        assert mine_cell.content == "mine"
        assert mine_cell.to_observation() == 9

    def test_revealed_zero_cell_is_blank(self, hidden_cell: Cell) -> None:
        """Zero cells show no digit."""
        hidden_cell.adjacent_mines = 0
        hidden_cell.reveal()
        assert hidden_cell.content == ""
        assert hidden_cell.to_observation() == 0

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_shows_count(self, count: int) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.content == str(count)
        assert cell.to_observation() == count

    def test_mark_observations(self, hidden_cell: Cell) -> None:
        """Hidden, flagged and question cells map to -1, -2, -3."""
        assert hidden_cell.to_observation() == -1
        hidden_cell.cycle_mark()
        assert hidden_cell.to_observation() == -2
        hidden_cell.cycle_mark()
        assert hidden_cell.to_observation() == -3
