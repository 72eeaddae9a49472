"""
Minesweeper board engine.

Provides the grid, mine placement, reveal propagation and the game state
machine, plus a gymnasium environment over them.
"""
from .cell import Cell, Mark
from .config import (
    BoardConfig,
    DIFFICULTY_SETTINGS,
    EASY,
    MEDIUM,
    HARD,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    clamped_config,
    custom_config,
    get_preset,
)
from .errors import (
    SweeperError,
    OutOfBounds,
    InvalidConfiguration,
    SnapshotError,
    EngineInvariantError,
)
from .grid import Grid
from .adjacency import AdjacencyResolver
from .placement import place_mines, set_mines
from .reveal import RevealEngine
from .state import CellDelta, GameState, MarkResult, MoveResult, Outcome, Phase
from .snapshot import CellSnapshot, GameSnapshot
from .game import Game, new_game
from .render import render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Mark",
    "BoardConfig",
    "DIFFICULTY_SETTINGS",
    "EASY",
    "MEDIUM",
    "HARD",
    "MAX_BOARD_SIZE",
    "MIN_BOARD_SIZE",
    "clamped_config",
    "custom_config",
    "get_preset",
    "SweeperError",
    "OutOfBounds",
    "InvalidConfiguration",
    "SnapshotError",
    "EngineInvariantError",
    "Grid",
    "AdjacencyResolver",
    "place_mines",
    "set_mines",
    "RevealEngine",
    "CellDelta",
    "GameState",
    "MarkResult",
    "MoveResult",
    "Outcome",
    "Phase",
    "CellSnapshot",
    "GameSnapshot",
    "Game",
    "new_game",
    "render_board",
    "MinesweeperEnv",
]
