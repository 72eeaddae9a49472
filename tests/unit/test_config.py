"""
Unit tests for board configuration, presets and clamping.
"""
import pytest

from sweeper import (
    BoardConfig,
    DIFFICULTY_SETTINGS,
    InvalidConfiguration,
    clamped_config,
    custom_config,
    get_preset,
    new_game,
)
from sweeper.config import clamp_board_size, clamp_mine_count


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self) -> None:
        """Valid configuration should be created successfully."""
        config = BoardConfig(9, 9, 10)
        assert (config.width, config.height, config.num_mines) == (9, 9, 10)
        assert config.safe_cells == 71

    @pytest.mark.parametrize("width,height", [(4, 9), (9, 4), (31, 9), (9, 31)])
    def test_dimensions_out_of_range(self, width: int, height: int) -> None:
        """Width and height must be within 5..30."""
        with pytest.raises(InvalidConfiguration, match="must be between"):
            BoardConfig(width, height, 3)

    def test_zero_mines_rejected(self) -> None:
        """At least one mine is required."""
        with pytest.raises(InvalidConfiguration, match="at least one mine"):
            BoardConfig(9, 9, 0)

    def test_too_many_mines_rejected(self) -> None:
        """At least one safe cell is required."""
        with pytest.raises(InvalidConfiguration, match="Too many mines"):
            BoardConfig(5, 5, 25)

    def test_max_mines_is_valid(self) -> None:
        """cells - 1 mines is accepted."""
        assert BoardConfig(5, 5, 24).num_mines == 24

    def test_invalid_configuration_is_value_error(self) -> None:
        """Callers may catch configuration errors as ValueError."""
        with pytest.raises(ValueError):
            BoardConfig(2, 2, 1)

    def test_dict_round_trip(self) -> None:
        """Config survives to_dict/from_dict."""
        config = BoardConfig(12, 7, 20)
        assert BoardConfig.from_dict(config.to_dict()) == config

    def test_from_dict_missing_key(self) -> None:
        """Malformed config data raises InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration):
            BoardConfig.from_dict({"width": 9})


# ============================================================================
# Preset Tests
# ============================================================================

class TestPresets:
    """Test difficulty presets."""

    @pytest.mark.parametrize(
        "name,expected",
        [("easy", (9, 9, 10)), ("medium", (16, 16, 40)), ("hard", (30, 16, 99))],
    )
    def test_preset_values(self, name: str, expected) -> None:
        """Presets match the classic board sizes."""
        config = get_preset(name)
        assert (config.width, config.height, config.num_mines) == expected

    def test_unknown_preset(self) -> None:
        """Unknown names raise InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration, match="Unknown difficulty"):
            get_preset("impossible")

    def test_all_presets_listed(self) -> None:
        """The preset table holds the three built-in levels."""
        assert set(DIFFICULTY_SETTINGS) == {"easy", "medium", "hard"}

    def test_custom_uses_same_bounds(self) -> None:
        """Custom presets are validated like new games."""
        assert custom_config(10, 10, 15).num_mines == 15
        with pytest.raises(InvalidConfiguration):
            custom_config(10, 10, 100)

    def test_new_game_validates(self) -> None:
        """new_game rejects out-of-range input."""
        with pytest.raises(InvalidConfiguration):
            new_game(3, 9, 1)
        game = new_game(6, 5, 4)
        assert (game.width, game.height, game.mine_count) == (6, 5, 4)


# ============================================================================
# Clamping Tests
# ============================================================================

class TestClamping:
    """Test UI-boundary clamping."""

    @pytest.mark.parametrize("size,expected", [(1, 5), (5, 5), (17, 17), (99, 30)])
    def test_clamp_board_size(self, size: int, expected: int) -> None:
        """Board sizes are pulled into 5..30."""
        assert clamp_board_size(size) == expected

    @pytest.mark.parametrize("count,expected", [(0, 1), (10, 10), (500, 24)])
    def test_clamp_mine_count(self, count: int, expected: int) -> None:
        """Mine counts are pulled into 1..cells - 1."""
        assert clamp_mine_count(count, 25) == expected

    def test_clamped_config(self) -> None:
        """Out-of-range input becomes a valid config."""
        config = clamped_config(2, 50, 1000)
        assert (config.width, config.height) == (5, 30)
        assert config.num_mines == 149
