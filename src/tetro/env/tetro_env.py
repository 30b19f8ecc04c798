from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetro.game import ACTIVE_CELL, CellState, GameConfig, Outcome, TetroGame


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2


_COLORS = {
    int(CellState.EMPTY): (30, 30, 36),
    int(CellState.LOCKED): (85, 85, 85),
    int(CellState.CLEARED): (0, 255, 0),
    ACTIVE_CELL: (51, 51, 51),
}


class TetroEnv(gym.Env):
    """One env step = optional lateral move followed by one gravity tick."""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 4}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 rows_cleared_weight: float = 1.0,
                 win_reward: float = 10.0,
                 loss_penalty: float = -10.0,
                 max_episode_steps: int = 2000) -> None:
        super().__init__()
        self.game = TetroGame(config)
        self.render_mode = render_mode
        self.rows_cleared_weight = float(rows_cleared_weight)
        self.win_reward = float(win_reward)
        self.loss_penalty = float(loss_penalty)
        self.max_episode_steps = int(max_episode_steps)

        rows, cols = self.game.config.rows, self.game.config.columns
        self.observation_space = spaces.Box(
            low=ACTIVE_CELL, high=int(CellState.CLEARED), shape=(rows, cols), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.render_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        outcome = self.game.outcome
        return {
            "cleared_rows": self.game.cleared_rows,
            "outcome": outcome.value if outcome is not None else None,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.seed(seed)
        self.game.reset()
        self.game.activate()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        cleared_before = self.game.cleared_rows

        if action == Action.LEFT:
            self.game.move_left()
        elif action == Action.RIGHT:
            self.game.move_right()
        self.game.tick()
        self._steps += 1

        reward_components: Dict[str, float] = {
            "rows": self.rows_cleared_weight * float(self.game.cleared_rows - cleared_before),
        }
        if self.game.outcome is Outcome.WIN:
            reward_components["terminal"] = self.win_reward
        elif self.game.outcome is Outcome.LOSS:
            reward_components["terminal"] = self.loss_penalty

        terminated = self.game.outcome is not None
        truncated = not terminated and self._steps >= self.max_episode_steps
        reward = float(sum(reward_components.values()))

        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self._get_obs()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = _COLORS[int(grid[y, x])]
        return img

    def close(self) -> None:
        pass
