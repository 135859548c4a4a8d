"""Gymnasium-compatible wrapper around the engine.

Each step applies one input and one engine tick.  The observation is the
composited board (active piece included) as a ``(rows, cols)`` ``uint8``
array holding ``0`` for empty cells and the piece tag otherwise.  The reward
is the number of rows cleared during the step.

Actions
-------
``0`` no-op, ``1`` left, ``2`` right, ``3`` rotate clockwise,
``4`` rotate counter-clockwise.
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import COLS, ROWS
from .engine import Engine, InputKey, TickResult
from .render import ascii_frame
from .tetromino import PieceKind

ACTIONS: Tuple[Optional[InputKey], ...] = (
    None,
    InputKey.LEFT,
    InputKey.RIGHT,
    InputKey.UP,
    InputKey.DOWN,
)


class TinyTetrisEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 60,
    }

    def __init__(
        self,
        *,
        rows: int = ROWS,
        cols: int = COLS,
        gravity_ticks: int = 1,
        max_steps: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        self.rows = rows
        self.cols = cols
        self.gravity_ticks = gravity_ticks
        self.render_mode = render_mode
        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(
            low=0, high=len(PieceKind), shape=(rows, cols), dtype=np.uint8
        )
        self._max_steps = max_steps
        self._steps = 0
        self.engine = Engine(rows, cols, gravity_ticks=gravity_ticks)

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        engine_seed = int(self.np_random.integers(0, 2**32))
        self.engine = Engine(
            self.rows,
            self.cols,
            rng=random.Random(engine_seed),
            gravity_ticks=self.gravity_ticks,
        )
        self._steps = 0
        return self._observation(), self._info()

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")
        symbol = ACTIONS[int(action)]
        if symbol is not None:
            self.engine.handle_input(symbol)
        before = self.engine.score
        result = self.engine.tick()
        self._steps += 1
        terminated = result is TickResult.GAME_OVER
        truncated = (
            not terminated
            and self._max_steps is not None
            and self._steps >= self._max_steps
        )
        reward = float(self.engine.score - before)
        return self._observation(), reward, terminated, truncated, self._info()

    def render(self):
        if self.render_mode == "ansi":
            return ascii_frame(self.engine)
        return None

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _observation(self) -> np.ndarray:
        return self.engine.grid()

    def _info(self) -> Dict:
        return {"score": self.engine.score, "game_over": self.engine.game_over}
