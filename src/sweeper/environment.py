"""
Reveal-only gymnasium environment over ``Game``.

Each action opens one cell; marks and chords are left to human players.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .game import Game
from .render import render_board
from .state import Outcome

REWARDS = {
    Outcome.CONTINUED: 1.0,
    Outcome.WON: 10.0,
    Outcome.LOST: -10.0,
    Outcome.IGNORED: -0.1,
}


class MinesweeperEnv(gym.Env):
    """
    Episodes are single games; the board never changes size mid-run.

    Observations use the codes of ``Cell.to_observation``. An action is a
    flat cell index ``row * width + col``. Rewards come from ``REWARDS``,
    keyed by the move outcome.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.game = Game(self.config)
        self.steps = 0

        shape = (self.config.height, self.config.width)
        self.observation_space = spaces.Box(
            low=-3, high=9, shape=shape, dtype=np.int8
        )
        self.action_space = spaces.Discrete(self.config.cell_count)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Start a fresh game; ``seed`` fixes the mine layout."""
        super().reset(seed=seed)
        rng = None if seed is None else random.Random(seed)
        self.game = Game(self.config, rng)
        self.steps = 0
        return self.game.get_observation(), self._info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        row, col = divmod(int(action), self.config.width)
        self.steps += 1
        outcome = self.game.reveal(row, col).outcome
        return (
            self.game.get_observation(),
            REWARDS[outcome],
            self.game.is_over,
            False,
            self._info(),
        )

    def _info(self) -> Dict[str, Any]:
        return {
            "steps": self.steps,
            "revealed": self.game.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.phase.name,
        }

    def render(self) -> Optional[str]:
        text = render_board(self.game)
        if self.render_mode == "human":
            print(text)
            return None
        return text if self.render_mode == "ansi" else None

    def get_action_mask(self) -> np.ndarray:
        """True for every cell index a reveal would currently accept."""
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.game.get_valid_actions():
            mask[row * self.config.width + col] = True
        return mask
