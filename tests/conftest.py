"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import BoardConfig, Cell, Game, Grid, Mark
from play import GameSession, GameStorage, GameTimer, SessionConfig


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 10 mines and a fixed seed."""
    return Game(rng=random.Random(1234))


@pytest.fixture
def corner_mine_game() -> Game:
    """5x5 game with a single mine at (0, 0)."""
    return Game.with_mines(BoardConfig(5, 5, 1), [(0, 0)])


@pytest.fixture
def center_mine_game() -> Game:
    """5x5 game with a single mine at (2, 2)."""
    return Game.with_mines(BoardConfig(5, 5, 1), [(2, 2)])


@pytest.fixture
def two_mine_game() -> Game:
    """5x5 game with mines at (0, 0) and (4, 4)."""
    return Game.with_mines(BoardConfig(5, 5, 2), [(0, 0), (4, 4)])


# ============================================================================
# Grid / Cell Fixtures
# ============================================================================

@pytest.fixture
def small_grid() -> Grid:
    """Create a 4x3 grid (width 4, height 3)."""
    return Grid(4, 3)


@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def flagged_cell() -> Cell:
    """Create a flagged cell."""
    return Cell(mark=Mark.FLAG)


# ============================================================================
# Session Fixtures
# ============================================================================

class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=100."""
    return FakeClock()


@pytest.fixture
def timer(clock: FakeClock) -> GameTimer:
    """Create a timer driven by the fake clock."""
    return GameTimer(clock=clock)


@pytest.fixture
def storage(tmp_path: Path) -> GameStorage:
    """Create storage in a temporary directory."""
    return GameStorage(tmp_path / "sweeper")


@pytest.fixture
def session(storage: GameStorage, timer: GameTimer) -> GameSession:
    """Create an easy session backed by temporary storage."""
    return GameSession(
        SessionConfig(difficulty="easy", storage_dir=None),
        storage=storage,
        rng=random.Random(7),
        timer=timer,
    )
