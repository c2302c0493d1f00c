"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through the standard Gymnasium interface so the
engine can be exercised by automated harnesses.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .display import render_text
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (only once the game is over)

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - REWARD_SAFE for revealing a safe cell
        - REWARD_WIN for the reveal that wins the game
        - REWARD_MINE for hitting a mine
        - REWARD_INVALID for an action that changes nothing
          (revealed or flagged cell, finished game)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    REWARD_SAFE = 1.0
    REWARD_WIN = 10.0
    REWARD_MINE = -10.0
    REWARD_INVALID = -0.1

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: Easy preset).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.session = GameSession(config)
        self.config = self.session.config
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.rng = self.np_random
        self.session.new_game()
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.session.board.get_observation()
        terminated = not self.session.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.cols)

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Calculate reward for revealing a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if not self.session.reveal(row, col):
            return self.REWARD_INVALID

        if self.session.is_won:
            return self.REWARD_WIN
        if self.session.is_lost:
            return self.REWARD_MINE

        return self.REWARD_SAFE

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.revealed_count,
            "total_safe": self.config.safe_cells,
            "flag_budget": self.session.flag_budget,
            "game_state": self.session.status.name,
            "valid_actions": len(self.session.board.get_covered_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        return render_text(self.session.snapshot())

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.session.board.get_covered_positions():
            mask[row * self.config.cols + col] = True
        return mask
