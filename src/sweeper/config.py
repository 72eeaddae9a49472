"""
Board configuration and difficulty presets.

``BoardConfig`` rejects out-of-range values. The ``clamp_*`` helpers are
for the UI boundary, where user input is pulled into range instead.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any

from .errors import InvalidConfiguration


# ============================================================================
# Constants
# ============================================================================

MIN_BOARD_SIZE = 5
MAX_BOARD_SIZE = 30

CUSTOM = "custom"


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name, size in (("width", self.width), ("height", self.height)):
            if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
                raise InvalidConfiguration(
                    f"Board {name} must be between {MIN_BOARD_SIZE} "
                    f"and {MAX_BOARD_SIZE}, got {size}"
                )
        max_mines = self.cell_count - 1
        if self.num_mines < 1:
            raise InvalidConfiguration("Board needs at least one mine")
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.cell_count - self.num_mines

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardConfig":
        """Build a config from a serialized dictionary."""
        try:
            return cls(
                width=int(data["width"]),
                height=int(data["height"]),
                num_mines=int(data["num_mines"]),
            )
        except (KeyError, TypeError) as exc:
            raise InvalidConfiguration(f"Malformed board config: {exc}") from exc


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(30, 16, 99)

DIFFICULTY_SETTINGS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Preset Lookup
# ============================================================================

def get_preset(name: str) -> BoardConfig:
    """
    Look up a difficulty preset by name.

    Raises:
        InvalidConfiguration: If the name is not a known preset.
    """
    try:
        return DIFFICULTY_SETTINGS[name]
    except KeyError:
        known = ", ".join(sorted(DIFFICULTY_SETTINGS))
        raise InvalidConfiguration(
            f"Unknown difficulty {name!r} (expected one of: {known})"
        ) from None


def custom_config(width: int, height: int, num_mines: int) -> BoardConfig:
    """Validate a custom preset against the same bounds as a new game."""
    return BoardConfig(width=width, height=height, num_mines=num_mines)


# ============================================================================
# UI Boundary Clamping
# ============================================================================

def clamp_board_size(size: int) -> int:
    """Pull a board dimension into [MIN_BOARD_SIZE, MAX_BOARD_SIZE]."""
    return max(MIN_BOARD_SIZE, min(size, MAX_BOARD_SIZE))


def clamp_mine_count(count: int, cell_count: int) -> int:
    """Pull a mine count into [1, cell_count - 1]."""
    return max(1, min(count, cell_count - 1))


def clamped_config(width: int, height: int, num_mines: int) -> BoardConfig:
    """Build a config from user input, clamping instead of rejecting."""
    width = clamp_board_size(width)
    height = clamp_board_size(height)
    return BoardConfig(
        width=width,
        height=height,
        num_mines=clamp_mine_count(num_mines, width * height),
    )
