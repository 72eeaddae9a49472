"""
Serializable game snapshots.

A snapshot holds everything needed to rebuild a game: the board config,
the phase, mine positions and each cell's revealed/mark/content triple.
``to_dict`` output is JSON-safe.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .cell import Mark
from .config import BoardConfig
from .errors import InvalidConfiguration, SnapshotError
from .grid import Position
from .state import Phase


@dataclass(frozen=True)
class CellSnapshot:
    """Visible state of one cell."""

    revealed: bool = False
    mark: Mark = Mark.NONE
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "revealed": self.revealed,
            "mark": self.mark.value,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CellSnapshot":
        """Build from a serialized dictionary."""
        return cls(
            revealed=bool(data.get("revealed", False)),
            mark=Mark(data.get("mark", "")),
            content=str(data.get("content", "")),
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Complete state of a game at one moment."""

    config: BoardConfig
    phase: Phase
    revealed_count: int
    mines: Tuple[Position, ...]
    cells: Tuple[Tuple[CellSnapshot, ...], ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "config": self.config.to_dict(),
            "phase": self.phase.value,
            "revealed_count": self.revealed_count,
            "mines": [list(position) for position in self.mines],
            "cells": [[cell.to_dict() for cell in row] for row in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSnapshot":
        """
        Build from a serialized dictionary.

        Raises:
            SnapshotError: If fields are missing or malformed.
        """
        try:
            config = BoardConfig.from_dict(data["config"])
            mines: List[Position] = [
                (int(row), int(col)) for row, col in data["mines"]
            ]
            cells = tuple(
                tuple(CellSnapshot.from_dict(cell) for cell in row)
                for row in data["cells"]
            )
            snapshot = cls(
                config=config,
                phase=Phase(data["phase"]),
                revealed_count=int(data["revealed_count"]),
                mines=tuple(mines),
                cells=cells,
            )
        except (
            AttributeError, KeyError, TypeError, ValueError, InvalidConfiguration
        ) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc}") from exc

        snapshot._check_shape()
        return snapshot

    def _check_shape(self) -> None:
        """Ensure the cell rows match the configured dimensions."""
        if len(self.cells) != self.config.height or any(
            len(row) != self.config.width for row in self.cells
        ):
            raise SnapshotError(
                f"Cell grid does not match {self.config.width}x"
                f"{self.config.height} board"
            )

    def to_json(self) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "GameSnapshot":
        """Parse a JSON string produced by ``to_json``."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise SnapshotError(f"Invalid snapshot JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot JSON must be an object")
        return cls.from_dict(data)
