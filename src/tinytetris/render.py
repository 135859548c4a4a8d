"""Character-grid renderers for the engine."""

from __future__ import annotations

import curses
from typing import List

from .engine import Engine
from .tetromino import PieceKind, piece_tag


EMPTY_CHAR = "."
BLOCK_CHAR = "#"

# Each board cell is drawn this many characters wide in a terminal so the
# board keeps a roughly square aspect.
CELL_WIDTH = 2


def ascii_lines(engine: Engine) -> List[str]:
    """Return the board rows as text followed by the score line."""

    lines = [
        "".join(BLOCK_CHAR if engine.cell(r, c) else EMPTY_CHAR for c in range(engine.cols))
        for r in range(engine.rows)
    ]
    lines.append(f"Score: {engine.score}")
    return lines


def ascii_frame(engine: Engine) -> str:
    return "\n".join(ascii_lines(engine))


def init_colors() -> None:
    """Register colour pair ``i`` as foreground ``i`` on black for every piece tag."""

    curses.start_color()
    for kind in PieceKind:
        tag = piece_tag(kind)
        curses.init_pair(tag, tag, curses.COLOR_BLACK)


def window_size(engine: Engine) -> tuple[int, int]:
    """Return the ``(height, width)`` of the boxed board window."""

    return engine.rows + 2, engine.cols * CELL_WIDTH + 2


def safe_addstr(window: "curses.window", y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        # Writes past the edge of a too-small terminal are dropped.
        pass


def draw(window: "curses.window", score_window: "curses.window", engine: Engine) -> None:
    """Draw the boxed board with the active piece, and the score line.

    ``window`` is sized by :func:`window_size`; ``score_window`` is a single
    line placed below it.
    """

    window.box()
    blank = " " * CELL_WIDTH
    for r in range(engine.rows):
        for c in range(engine.cols):
            tag = engine.cell(r, c)
            attr = curses.A_REVERSE | curses.color_pair(tag) if tag else 0
            safe_addstr(window, 1 + r, 1 + c * CELL_WIDTH, blank, attr)
    window.refresh()
    score_window.erase()
    safe_addstr(score_window, 0, 1, f"Score: {engine.score}")
    score_window.refresh()
