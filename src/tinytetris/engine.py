"""Game-state engine: spawning, movement, gravity and line clearing.

The :class:`Engine` owns the board and the active piece.  Drivers call
:meth:`Engine.tick` once per frame and :meth:`Engine.handle_input` for every
key read; renderers only use the read-only accessors (:attr:`Engine.rows`,
:attr:`Engine.cols`, :attr:`Engine.score` and :meth:`Engine.cell`).

The active piece lives outside the board until it lands, so moving it never
requires erasing stale cells.  :meth:`Engine.cell` reports it as if it were
already merged.
"""

from __future__ import annotations

import logging
import random
from enum import Enum, IntEnum
from typing import Callable, Dict, Optional

from .board import Board, COLS, Grid, ROWS
from .tetromino import ROTATIONS, Piece, PieceKind, piece_geometry, piece_tag
from .utils import collides, render_grid, stamp


LOGGER = logging.getLogger(__name__)

# Calls to ``tick`` per one-row gravity step.
GRAVITY_TICKS = 30


class TickResult(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class Phase(Enum):
    """Where the engine is in its tick cycle."""

    FALLING = "falling"
    LANDED_AND_CLEARING = "landed_and_clearing"
    GAME_OVER = "game_over"


class MoveDirection(IntEnum):
    LEFT = -1
    RIGHT = 1


class RotationDirection(IntEnum):
    """Rotation directions, valued as the step added to the rotation index."""

    CLOCKWISE = 1
    COUNTERCLOCKWISE = ROTATIONS - 1


class InputKey(str, Enum):
    """Input symbols understood by :meth:`Engine.handle_input`."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Engine:
    """Single-session game state driven by ``tick`` and ``handle_input``.

    Parameters
    ----------
    rows, cols:
        Board dimensions.  Both must be at least ``1``.
    rng:
        Source of randomness for spawning.  Anything offering ``randrange``
        and ``randint`` like :class:`random.Random` works; a fresh unseeded
        ``random.Random`` is used when omitted.
    gravity_ticks:
        Number of ``tick`` calls per gravity step.

    Raises:
        ValueError: If a dimension or ``gravity_ticks`` is below ``1``.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        *,
        rng: Optional[random.Random] = None,
        gravity_ticks: int = GRAVITY_TICKS,
    ) -> None:
        if gravity_ticks < 1:
            raise ValueError(f"gravity_ticks must be positive, got {gravity_ticks}")
        self.board = Board(rows, cols)
        self.score = 0
        self.gravity_ticks = gravity_ticks
        self.phase = Phase.FALLING
        self._rng = rng if rng is not None else random.Random()
        self._tick_count = 0
        self._actions: Dict[str, Callable[[], bool]] = {
            InputKey.LEFT: lambda: self.move(MoveDirection.LEFT),
            InputKey.RIGHT: lambda: self.move(MoveDirection.RIGHT),
            InputKey.UP: lambda: self.rotate(RotationDirection.CLOCKWISE),
            InputKey.DOWN: lambda: self.rotate(RotationDirection.COUNTERCLOCKWISE),
        }
        self.piece = self.spawn()
        if self.collides(self.piece.x, self.piece.y, self.piece.rotation):
            self._game_over("first piece does not fit")

    # Renderer accessors ------------------------------------------------
    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def cell(self, row: int, col: int) -> int:
        """Return the tag shown at ``(row, col)`` with the active piece merged.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        value = self.board.get_cell(row, col)
        if (row, col) in self.piece.cells():
            return piece_tag(self.piece.kind)
        return value

    def grid(self) -> Grid:
        """Return the whole board with the active piece merged in."""

        return render_grid(self.board, self.piece)

    # Placement primitives ----------------------------------------------
    def collides(self, x: int, y: int, rotation: int) -> bool:
        """Return ``True`` if the active kind cannot occupy ``(x, y, rotation)``."""

        return collides(self.board, self.piece.kind, x, y, rotation)

    def stamp(self, x: int, y: int, rotation: int, value: int) -> None:
        """Write ``value`` into the board cells of the active kind at ``(x, y, rotation)``."""

        stamp(self.board, self.piece.kind, x, y, rotation, value)

    def spawn(self) -> Piece:
        """Return a new random piece at the top of the board.

        The column is chosen so the piece lies fully inside the board
        horizontally.  Collisions with landed cells are left to the caller.
        """

        kind = PieceKind(self._rng.randrange(len(PieceKind)))
        rotation = self._rng.randrange(ROTATIONS)
        max_x = self.cols - piece_geometry(kind, rotation).width
        x = self._rng.randint(0, max_x) if max_x >= 0 else 0
        piece = Piece(kind=kind, rotation=rotation, x=x, y=0)
        LOGGER.debug("Spawned %s rotation=%d at x=%d", kind.name, rotation, x)
        return piece

    # Player input ------------------------------------------------------
    def move(self, direction: int) -> bool:
        """Shift the active piece one column; return ``False`` if blocked."""

        piece = self.piece
        x = piece.x + int(direction)
        if self.collides(x, piece.y, piece.rotation):
            return False
        piece.x = x
        return True

    def rotate(self, direction: int) -> bool:
        """Rotate the active piece, retrying once with a horizontal kick.

        The kick moves the piece left by the growth in width between the old
        and new orientation, keeping its right edge in place.  Returns
        ``False`` and leaves the piece untouched if both placements collide.
        """

        piece = self.piece
        rotation = (piece.rotation + int(direction)) % ROTATIONS
        x = piece.x
        if self.collides(x, piece.y, rotation):
            x -= (
                piece_geometry(piece.kind, rotation).width
                - piece_geometry(piece.kind, piece.rotation).width
            )
            if self.collides(x, piece.y, rotation):
                return False
        piece.rotation = rotation
        piece.x = x
        return True

    def handle_input(self, symbol: object) -> None:
        """Apply the action bound to ``symbol``; anything else is ignored."""

        if self.game_over:
            return
        try:
            action = self._actions.get(symbol)  # type: ignore[arg-type]
        except TypeError:  # unhashable symbols are not bound to anything
            return
        if action is not None:
            action()

    # Gravity -----------------------------------------------------------
    def tick(self) -> TickResult:
        """Advance the game clock by one frame.

        Every ``gravity_ticks``-th call moves the piece down one row, or lands
        it when it cannot fall.  Landing writes the piece into the board,
        clears full rows and spawns the next piece.
        """

        if self.game_over:
            return TickResult.GAME_OVER

        self._tick_count += 1
        if self._tick_count < self.gravity_ticks:
            return TickResult.RUNNING
        self._tick_count = 0

        piece = self.piece
        if not self.collides(piece.x, piece.y + 1, piece.rotation):
            piece.y += 1
            return TickResult.RUNNING

        if piece.y == 0:
            self._game_over("piece could not leave the spawn row")
            return TickResult.GAME_OVER

        self.phase = Phase.LANDED_AND_CLEARING
        self.stamp(piece.x, piece.y, piece.rotation, piece_tag(piece.kind))
        LOGGER.debug(
            "Landed %s rotation=%d at x=%d y=%d",
            piece.kind.name,
            piece.rotation,
            piece.x,
            piece.y,
        )
        self.clear_lines(piece.y, piece.geometry.height)

        self.piece = self.spawn()
        if self.collides(self.piece.x, self.piece.y, self.piece.rotation):
            self._game_over("no room for the next piece")
            return TickResult.GAME_OVER
        self.phase = Phase.FALLING
        return TickResult.RUNNING

    def clear_lines(self, top: int, height: int) -> int:
        """Remove full rows among ``top`` .. ``top + height - 1``.

        Rows are checked top to bottom and each full one is removed before the
        next is inspected.  Returns the number of rows removed.
        """

        cleared = 0
        for row in range(top, min(top + height, self.rows)):
            if not self.board.is_row_full(row):
                continue
            self.board.remove_row(row)
            self.score += 1
            cleared += 1
        if cleared:
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
        return cleared

    def _game_over(self, reason: str) -> None:
        self.phase = Phase.GAME_OVER
        LOGGER.info("Game over (%s). Score: %d", reason, self.score)
