"""Placement helpers shared by the engine and the renderers."""

from __future__ import annotations

from typing import Optional

from .board import Board, Grid
from .tetromino import Piece, piece_geometry, piece_tag


def collides(board: Board, kind: int, x: int, y: int, rotation: int) -> bool:
    """Return ``True`` if ``kind`` placed at ``(x, y, rotation)`` is blocked.

    A placement is blocked when any of its four cells falls outside the board
    or lands on a non-zero board cell.  Bounds are tested first so the grid is
    never indexed with an off-board coordinate.
    """

    for dx, dy in piece_geometry(kind, rotation).offsets:
        row = y + dy
        col = x + dx
        if not board.in_bounds(row, col):
            return True
        if not board.is_empty(row, col):
            return True
    return False


def stamp(board: Board, kind: int, x: int, y: int, rotation: int, value: int) -> None:
    """Write ``value`` into the four cells of ``kind`` at ``(x, y, rotation)``.

    ``0`` erases the piece; :func:`piece_tag` of ``kind`` draws it.
    """

    board.fill(
        ((y + dy, x + dx) for dx, dy in piece_geometry(kind, rotation).offsets),
        value,
    )


def render_grid(board: Board, active: Optional[Piece] = None) -> Grid:
    """Return a copy of the board grid with the active piece overlaid.

    Renderers get a single 2D array to draw without the piece being written
    into the board itself.  Cells occupied by the active piece receive the tag
    of the piece's kind.
    """

    grid = board.copy_grid()
    if active is not None:
        tag = piece_tag(active.kind)
        for r, c in active.cells():
            if board.in_bounds(r, c):
                grid[r, c] = tag
    return grid
