"""Terminal front-end driving the engine through ``curses``.

The loop polls the keyboard without blocking, ticks the engine, redraws and
sleeps for a short fixed interval until the game ends or the player quits.
"""

from __future__ import annotations

import curses
import logging
import random
import time
from typing import Dict, Optional, Union

from . import render
from .board import COLS, ROWS
from .engine import GRAVITY_TICKS, Engine, InputKey, TickResult


LOGGER = logging.getLogger(__name__)

# Seconds slept between frames.
FRAME_DELAY = 0.01

KEYMAP: Dict[Union[int, str], InputKey] = {
    "a": InputKey.LEFT,
    "d": InputKey.RIGHT,
    "w": InputKey.UP,
    "s": InputKey.DOWN,
    curses.KEY_LEFT: InputKey.LEFT,
    curses.KEY_RIGHT: InputKey.RIGHT,
    curses.KEY_UP: InputKey.UP,
    curses.KEY_DOWN: InputKey.DOWN,
}

QUIT_KEYS = ("q", "Q")

# Columns reserved for the score line below the board.
SCORE_WIDTH = 16


def translate_key(code: int) -> Optional[Union[InputKey, str]]:
    """Map a ``getch`` code to an engine symbol, ``"quit"`` or ``None``."""

    if code == -1:
        return None
    if code in KEYMAP:
        return KEYMAP[code]
    if 0 <= code < 256:
        char = chr(code)
        if char in QUIT_KEYS:
            return "quit"
        return KEYMAP.get(char)
    return None


class CursesRunner:
    """Own one engine and run it inside a curses screen."""

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        *,
        seed: Optional[int] = None,
        gravity_ticks: int = GRAVITY_TICKS,
        frame_delay: float = FRAME_DELAY,
    ) -> None:
        self.engine = Engine(rows, cols, rng=random.Random(seed), gravity_ticks=gravity_ticks)
        self.frame_delay = frame_delay
        self.running = False

    def step(self, window: "curses.window", score_window: "curses.window") -> bool:
        """Run one frame; return ``False`` once the loop should stop.

        Keys are read from ``window``, the board window.
        """

        symbol = translate_key(window.getch())
        if symbol == "quit":
            LOGGER.info("Quit requested. Score: %d", self.engine.score)
            return False
        if symbol is not None:
            self.engine.handle_input(symbol)
        result = self.engine.tick()
        render.draw(window, score_window, self.engine)
        return result is TickResult.RUNNING

    def _run(self, stdscr: "curses.window") -> int:
        render.init_colors()
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            LOGGER.debug("Terminal cannot hide the cursor")
        height, width = render.window_size(self.engine)
        window = curses.newwin(height, width, 0, 0)
        window.keypad(True)
        window.timeout(0)
        score_window = curses.newwin(1, max(width, SCORE_WIDTH), height, 0)

        LOGGER.info("Game started on a %dx%d board", self.engine.rows, self.engine.cols)
        self.running = True
        while self.running:
            self.running = self.step(window, score_window)
            time.sleep(self.frame_delay)
        LOGGER.info("Game stopped. Score: %d", self.engine.score)
        return self.engine.score

    def run(self) -> int:
        """Play until game over or quit; return the final score."""

        try:
            return curses.wrapper(self._run)
        except KeyboardInterrupt:
            LOGGER.info("Interrupted. Score: %d", self.engine.score)
            return self.engine.score


def main(**kwargs) -> int:
    return CursesRunner(**kwargs).run()
