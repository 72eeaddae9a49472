"""
Game state machine.

Owns one grid, places mines on the first reveal, and gates every move by
the current phase. Won and lost games are frozen until ``reset``.
"""
import logging
import random
from typing import FrozenSet, Iterable, Optional, Tuple

import numpy as np

from .cell import Cell, Mark
from .config import BoardConfig
from .errors import InvalidConfiguration, OutOfBounds, SnapshotError
from .grid import Grid, Position
from .placement import place_mines, set_mines
from .reveal import RevealEngine, RevealStep
from .snapshot import CellSnapshot, GameSnapshot
from .state import (
    IGNORED,
    CellDelta,
    GameState,
    MarkResult,
    MoveResult,
    Outcome,
    Phase,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper game.

    Manages the lifecycle NOT_STARTED -> PLAYING -> WON/LOST. Mines are
    placed when the first reveal is accepted, never at construction.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a game that has not started yet.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self._rng = rng or random.Random()
        self._init_board()

    @classmethod
    def with_mines(
        cls,
        config: BoardConfig,
        positions: Iterable[Position],
        rng: Optional[random.Random] = None,
    ) -> "Game":
        """
        Create a game with a fixed mine layout.

        The first reveal still starts the game but skips random placement.

        Raises:
            InvalidConfiguration: If the layout does not match the config.
        """
        game = cls(config, rng)
        game._mines = set_mines(game._grid, positions)
        if len(game._mines) != config.num_mines:
            raise InvalidConfiguration(
                f"Layout has {len(game._mines)} mines, "
                f"config expects {config.num_mines}"
            )
        return game

    # ========================================================================
    # Board Lifecycle (Low-level)
    # ========================================================================

    def _init_board(self) -> None:
        """Create a fresh grid, engine and phase."""
        self._grid = Grid(self.config.width, self.config.height)
        self._engine = RevealEngine(self._grid)
        self._mines: FrozenSet[Position] = frozenset()
        self._phase = Phase.NOT_STARTED

    def reset(self, config: Optional[BoardConfig] = None) -> None:
        """
        Start over with a fresh board.

        Discards mines, marks, reveals and cached adjacency data.

        Args:
            config: New board configuration; keeps the current one if None.
        """
        if config is not None:
            self.config = config
        self._init_board()

    def _start(self, row: int, col: int) -> None:
        """Place mines around the first reveal and begin play."""
        if not self._mines:
            self._mines = place_mines(
                self._grid, self.config.num_mines, row, col, self._rng
            )
        self._phase = Phase.PLAYING
        logger.debug("Game started at (%d, %d)", row, col)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> MoveResult:
        """
        Reveal a cell, flooding outward from zero cells.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Move result. IGNORED for a finished game or a revealed or
            marked cell.

        Raises:
            OutOfBounds: If position is outside the board.
        """
        cell = self._grid.get(row, col)
        if self._phase.is_terminal or cell.is_revealed or cell.is_marked:
            return IGNORED

        if self._phase is Phase.NOT_STARTED:
            self._start(row, col)

        return self._resolve(self._engine.reveal_area(row, col))

    def chord_reveal(self, row: int, col: int) -> MoveResult:
        """
        Open the neighbors of a numbered cell whose flags are all placed.

        When the flag count does not match, the result is IGNORED and
        carries the neighbors to highlight.
        """
        self._grid.check(row, col)
        if self._phase is not Phase.PLAYING:
            return IGNORED

        step = self._engine.chord_reveal(row, col)
        if not step.performed:
            return MoveResult(Outcome.IGNORED, highlight=step.highlight)
        if not step.changed:
            return IGNORED
        return self._resolve(step)

    def toggle_mark(self, row: int, col: int) -> MarkResult:
        """
        Cycle the mark on an unrevealed cell: none -> flag -> question.

        Returns:
            The cell's mark after the request and whether it changed.
        """
        cell = self._grid.get(row, col)
        if self._phase.is_terminal or not cell.cycle_mark():
            return MarkResult(cell.mark, accepted=False)
        return MarkResult(cell.mark, accepted=True)

    def _resolve(self, step: RevealStep) -> MoveResult:
        """Turn an engine step into a move result and update the phase."""
        deltas = tuple(self._delta(row, col) for row, col in step.revealed)

        if step.hit_mine:
            self._finish(Phase.LOST)
            return MoveResult(
                Outcome.LOST, deltas, exposed_mines=self.mine_positions
            )

        if self._engine.revealed_count == self.config.safe_cells:
            self._finish(Phase.WON)
            return MoveResult(
                Outcome.WON, deltas, exposed_mines=self.mine_positions
            )

        return MoveResult(Outcome.CONTINUED, deltas)

    def _finish(self, phase: Phase) -> None:
        """Enter a terminal phase."""
        self._phase = phase
        logger.debug(
            "Game %s with %d cells revealed",
            phase.value, self._engine.revealed_count,
        )

    def _delta(self, row: int, col: int) -> CellDelta:
        """Describe the visible state of one cell."""
        cell = self._grid.get(row, col)
        return CellDelta(row, col, cell.is_revealed, cell.mark, cell.content)

    # ========================================================================
    # Snapshot / Restore
    # ========================================================================

    def snapshot(self) -> GameSnapshot:
        """Capture the full game state for persistence."""
        cells = tuple(
            tuple(
                CellSnapshot(cell.is_revealed, cell.mark, cell.content)
                for cell in row
            )
            for row in self._grid.rows()
        )
        return GameSnapshot(
            config=self.config,
            phase=self._phase,
            revealed_count=self._engine.revealed_count,
            mines=self.mine_positions,
            cells=cells,
        )

    @classmethod
    def restore(
        cls, snapshot: GameSnapshot, rng: Optional[random.Random] = None
    ) -> "Game":
        """
        Rebuild a game from a snapshot.

        Reveals are replayed cell by cell, so counts and the revealed
        counter are recomputed and checked against the snapshot.

        Raises:
            SnapshotError: If the snapshot is inconsistent.
        """
        game = cls(snapshot.config, rng)
        if snapshot.mines:
            try:
                game._mines = set_mines(game._grid, snapshot.mines)
            except (InvalidConfiguration, OutOfBounds) as exc:
                raise SnapshotError(f"Bad mine layout: {exc}") from exc
            if len(game._mines) != snapshot.config.num_mines:
                raise SnapshotError("Mine layout does not match config")
        elif snapshot.phase is not Phase.NOT_STARTED:
            raise SnapshotError("Started game has no mines")

        for row, cells in enumerate(snapshot.cells):
            for col, saved in enumerate(cells):
                game._restore_cell(row, col, saved)

        if game._engine.revealed_count != snapshot.revealed_count:
            raise SnapshotError(
                f"Revealed count {snapshot.revealed_count} does not match "
                f"{game._engine.revealed_count} revealed cells"
            )
        game._phase = snapshot.phase
        game._check_phase()
        return game

    def _restore_cell(self, row: int, col: int, saved: CellSnapshot) -> None:
        """Apply one saved cell to the fresh grid."""
        cell = self._grid.get(row, col)
        if saved.revealed:
            if saved.mark is not Mark.NONE:
                raise SnapshotError(f"Revealed cell ({row}, {col}) is marked")
            self._engine.reveal(row, col)
            if cell.content != saved.content:
                raise SnapshotError(
                    f"Cell ({row}, {col}) content {saved.content!r} "
                    f"does not match {cell.content!r}"
                )
        else:
            cell.mark = saved.mark

    def _check_phase(self) -> None:
        """Ensure the restored phase agrees with the restored board."""
        revealed = self._engine.revealed_count
        mine_revealed = any(
            self._grid.get(row, col).is_revealed for row, col in self._mines
        )
        consistent = {
            Phase.NOT_STARTED: revealed == 0,
            Phase.PLAYING: (
                not mine_revealed and revealed < self.config.safe_cells
            ),
            Phase.WON: (
                not mine_revealed and revealed == self.config.safe_cells
            ),
            Phase.LOST: mine_revealed,
        }[self._phase]
        if not consistent:
            raise SnapshotError(
                f"Phase {self._phase.value} inconsistent with board"
            )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def phase(self) -> Phase:
        """Get current lifecycle phase."""
        return self._phase

    @property
    def state(self) -> GameState:
        """Get counters for collaborators that only read."""
        return GameState(
            phase=self._phase,
            revealed_count=self._engine.revealed_count,
            mine_count=self.config.num_mines,
            width=self.config.width,
            height=self.config.height,
        )

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells, maintained incrementally."""
        return self._engine.revealed_count

    @property
    def mine_count(self) -> int:
        """Total mines on the board."""
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for _, cell in self._grid.items() if cell.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags, as shown on a mine counter."""
        return self.config.num_mines - self.flag_count

    @property
    def mine_positions(self) -> Tuple[Position, ...]:
        """Sorted mine positions; empty before placement."""
        return tuple(sorted(self._mines))

    @property
    def is_over(self) -> bool:
        """Check if game has ended."""
        return self._phase.is_terminal

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position, raising OutOfBounds if invalid."""
        return self._grid.get(row, col)

    def neighbors(self, row: int, col: int) -> Tuple[Position, ...]:
        """Get neighbor positions of a cell."""
        return self._engine.adjacency.neighbors(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                -3 = question mark
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        return np.array(
            [[cell.to_observation() for cell in row]
             for row in self._grid.rows()],
            dtype=np.int8,
        )

    def get_valid_actions(self) -> Tuple[Position, ...]:
        """Positions a reveal would currently act on."""
        if self._phase.is_terminal:
            return ()
        return tuple(
            position for position, cell in self._grid.items()
            if cell.is_hidden
        )


# ============================================================================
# Factory
# ============================================================================

def new_game(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Game:
    """
    Create a new game after validating its dimensions.

    Raises:
        InvalidConfiguration: If width/height fall outside [5, 30] or the
            mine count outside [1, width*height - 1].
    """
    return Game(BoardConfig(width, height, mine_count), rng)
