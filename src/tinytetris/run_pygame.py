"""Simple pygame front-end for the engine.

A window with one rectangle per board cell and the score in the caption.  The
loop runs at a fixed frame rate, forwarding arrow keys to the engine and
ticking it once per frame.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Tuple

import pygame

from .board import COLS, ROWS
from .engine import GRAVITY_TICKS, Engine, InputKey, TickResult
from .tetromino import PieceKind, piece_tag


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 100

Color = Tuple[int, int, int]

# Colours for each piece kind
KIND_COLORS: Dict[PieceKind, Color] = {
    PieceKind.Z: (255, 0, 0),
    PieceKind.S: (0, 255, 0),
    PieceKind.O: (255, 255, 0),
    PieceKind.J: (0, 0, 255),
    PieceKind.T: (128, 0, 128),
    PieceKind.I: (0, 255, 255),
    PieceKind.L: (255, 165, 0),
}

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS: Dict[int, Color] = {0: (0, 0, 0)}
for kind, color in KIND_COLORS.items():
    CELL_COLORS[piece_tag(kind)] = color

GRID_LINE_COLOR = (50, 50, 50)

KEYMAP: Dict[int, InputKey] = {
    pygame.K_LEFT: InputKey.LEFT,
    pygame.K_a: InputKey.LEFT,
    pygame.K_RIGHT: InputKey.RIGHT,
    pygame.K_d: InputKey.RIGHT,
    pygame.K_UP: InputKey.UP,
    pygame.K_w: InputKey.UP,
    pygame.K_DOWN: InputKey.DOWN,
    pygame.K_s: InputKey.DOWN,
}


def draw_engine(screen: pygame.Surface, engine: Engine) -> None:
    """Render every cell, active piece included."""

    for r in range(engine.rows):
        for c in range(engine.cols):
            color = CELL_COLORS[engine.cell(r, c)]
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, GRID_LINE_COLOR, rect, 1)


def handle_key(event: pygame.event.Event, engine: Engine) -> None:
    """Forward a key press to the engine."""

    symbol = KEYMAP.get(event.key)
    if symbol is not None:
        engine.handle_input(symbol)


class GameRunner:
    """Manage the window and the game loop for one engine."""

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        *,
        seed: Optional[int] = None,
        gravity_ticks: int = GRAVITY_TICKS,
        fps: int = FPS,
    ) -> None:
        self.engine = Engine(rows, cols, rng=random.Random(seed), gravity_ticks=gravity_ticks)
        self.fps = fps
        self._running = False
        self._screen: Optional[pygame.Surface] = None

    @property
    def running(self) -> bool:
        return self._running

    def step(self, events) -> bool:
        """Process ``events`` and advance one frame; ``False`` ends the loop."""

        for event in events:
            if event.type == pygame.QUIT:
                LOGGER.info("Window closed. Score: %d", self.engine.score)
                return False
            if event.type == pygame.KEYDOWN:
                handle_key(event, self.engine)
        return self.engine.tick() is TickResult.RUNNING

    def _draw(self) -> None:
        if self._screen is None:
            return
        self._screen.fill(CELL_COLORS[0])
        draw_engine(self._screen, self.engine)
        pygame.display.set_caption(f"Tetris - Score: {self.engine.score}")
        pygame.display.flip()

    def run(self) -> int:
        """Play until game over or the window is closed; return the score."""

        pygame.init()
        try:
            self._screen = pygame.display.set_mode(
                (self.engine.cols * CELL_SIZE, self.engine.rows * CELL_SIZE)
            )
            pygame.display.set_caption("Tetris")
            clock = pygame.time.Clock()
            LOGGER.info("Game started on a %dx%d board", self.engine.rows, self.engine.cols)

            self._running = True
            while self._running:
                clock.tick(self.fps)
                self._running = self.step(pygame.event.get())
                self._draw()
        except KeyboardInterrupt:
            LOGGER.info("Interrupted")
        finally:
            self._running = False
            pygame.quit()
        LOGGER.info("Game stopped. Score: %d", self.engine.score)
        return self.engine.score


def main(**kwargs) -> int:
    return GameRunner(**kwargs).run()
