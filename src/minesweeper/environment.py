"""
Gymnasium environment wrapper for Minesweeper.

Exposes the rules engine through a standard RL interface so agents can
drive the same reveal/flag/chord operations the UI does.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, BEGINNER
from .controls import Action, apply_action
from .engine import Game
from .cell import OBS_FLAGGED, OBS_MINE

# Action kinds in the order they occupy the flat action space
ACTION_KINDS = (Action.REVEAL, Action.FLAG, Action.CHORD)


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
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * rows * columns.
        Action i has kind ACTION_KINDS[i // cells] and targets the cell
        (x, y) = (j % columns, j // columns) where j = i % cells.

    Rewards:
        - +1 for an action that changed the board
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a no-op action
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BEGINNER
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )

        self._cells = self.config.total_cells
        self.action_space = spaces.Discrete(len(ACTION_KINDS) * self._cells)

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
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**31))
        self.game.reset(random.Random(board_seed))
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, x, y = self.decode_action(action)
        self._steps += 1

        reward = self._calculate_reward(kind, x, y)
        observation = self._get_observation()
        terminated = not self.game.is_active
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[Action, int, int]:
        """Convert flat action index to (kind, x, y)."""
        kind_index, cell_index = divmod(int(action), self._cells)
        y, x = divmod(cell_index, self.config.columns)
        return ACTION_KINDS[kind_index], x, y

    def encode_action(self, kind: Action, x: int, y: int) -> int:
        """Convert (kind, x, y) to a flat action index."""
        kind_index = ACTION_KINDS.index(kind)
        return kind_index * self._cells + y * self.config.columns + x

    def _calculate_reward(self, kind: Action, x: int, y: int) -> float:
        """
        Apply an action and score its outcome.

        Args:
            kind: Engine action to apply.
            x: Column index.
            y: Row index.

        Returns:
            Reward value.
        """
        if not apply_action(self.game, kind, x, y):
            return -0.1
        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_observation(self) -> np.ndarray:
        return self.game.snapshot().to_observation()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.revealed_count,
            "flags": self.game.flag_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.game.snapshot().render_text()
        if self.render_mode == "human":
            print(self.game.snapshot().render_text())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        checks = {
            Action.REVEAL: self.game.can_reveal,
            Action.FLAG: self.game.can_flag,
            Action.CHORD: self.game.can_chord,
        }
        for y in range(self.config.rows):
            for x in range(self.config.columns):
                for kind, check in checks.items():
                    if check(x, y):
                        mask[self.encode_action(kind, x, y)] = True
        return mask
