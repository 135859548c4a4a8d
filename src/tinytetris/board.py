"""Board representation for the playfield."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray


# Default dimensions of the playfield.
ROWS = 20
COLS = 10

Grid = NDArray[np.uint8]


def create_empty_grid(rows: int = ROWS, cols: int = COLS) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((rows, cols), dtype=np.uint8)


class Board:
    """Grid of landed cells.  ``0`` is empty, ``1``-``7`` tag a piece kind."""

    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.grid: Grid = create_empty_grid(rows, cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` is on the board and holds no block."""

        if self.in_bounds(row, col):
            return bool(self.grid[row, col] == 0)
        return False

    def fill(self, cells: Iterable[Tuple[int, int]], value: int) -> None:
        """Write ``value`` into every ``(row, col)`` in ``cells``."""

        for row, col in cells:
            self.set_cell(row, col, value)

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def remove_row(self, row: int) -> None:
        """Delete ``row`` by shifting every row above it down by one.

        Row ``i`` takes the contents of row ``i - 1`` for ``i`` from ``row``
        down to ``1`` and the top row is emptied.
        """

        if not 0 <= row < self.rows:
            raise IndexError("Row out of bounds")
        self.grid[1 : row + 1] = self.grid[:row].copy()
        self.grid[0] = 0

    def copy_grid(self) -> Grid:
        return self.grid.copy()
