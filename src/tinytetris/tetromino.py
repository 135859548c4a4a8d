"""Piece kinds, their precomputed rotation states and the active piece.

The four orientations of every piece are listed explicitly rather than being
derived by rotating a base shape.  The classic orientations are not plain 90
degree turns around a common pivot, so a lookup table keeps rotation behaviour
identical from run to run and free of pivot arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

Offset = Tuple[int, int]  # (dx, dy)

# Number of orientations stored for every piece kind.
ROTATIONS = 4


class PieceKind(IntEnum):
    """The seven piece kinds.  The value doubles as the colour index - 1."""

    Z = 0
    S = 1
    O = 2
    J = 3
    T = 4
    I = 5
    L = 6


@dataclass(frozen=True)
class Geometry:
    """Cells of one orientation plus its bounding box."""

    offsets: Tuple[Offset, Offset, Offset, Offset]
    width: int
    height: int


def _geometry(width: int, height: int, *offsets: Offset) -> Geometry:
    return Geometry(offsets=tuple(offsets), width=width, height=height)


# Indexed as GEOMETRY[kind][rotation].  Offsets are (dx, dy) from the piece's
# top-left origin; y grows downwards.
GEOMETRY: Tuple[Tuple[Geometry, ...], ...] = (
    (  # Z
        _geometry(3, 2, (0, 0), (1, 0), (1, 1), (2, 1)),
        _geometry(2, 3, (1, 0), (1, 1), (0, 1), (0, 2)),
        _geometry(3, 2, (0, 0), (1, 0), (1, 1), (2, 1)),
        _geometry(2, 3, (1, 0), (1, 1), (0, 1), (0, 2)),
    ),
    (  # S
        _geometry(3, 2, (0, 1), (1, 1), (1, 0), (2, 0)),
        _geometry(2, 3, (0, 0), (0, 1), (1, 1), (1, 2)),
        _geometry(3, 2, (0, 1), (1, 1), (1, 0), (2, 0)),
        _geometry(2, 3, (0, 0), (0, 1), (1, 1), (1, 2)),
    ),
    (  # O
        _geometry(2, 2, (0, 0), (1, 0), (0, 1), (1, 1)),
        _geometry(2, 2, (0, 0), (1, 0), (0, 1), (1, 1)),
        _geometry(2, 2, (0, 0), (1, 0), (0, 1), (1, 1)),
        _geometry(2, 2, (0, 0), (1, 0), (0, 1), (1, 1)),
    ),
    (  # J
        _geometry(2, 3, (1, 0), (1, 1), (1, 2), (0, 2)),
        _geometry(3, 2, (0, 0), (0, 1), (1, 1), (2, 1)),
        _geometry(2, 3, (0, 0), (1, 0), (0, 1), (0, 2)),
        _geometry(3, 2, (0, 0), (1, 0), (2, 0), (2, 1)),
    ),
    (  # T
        _geometry(3, 2, (0, 1), (1, 1), (2, 1), (1, 0)),
        _geometry(2, 3, (0, 0), (0, 1), (0, 2), (1, 1)),
        _geometry(3, 2, (0, 0), (1, 0), (2, 0), (1, 1)),
        _geometry(2, 3, (1, 0), (1, 1), (1, 2), (0, 1)),
    ),
    (  # I
        _geometry(4, 1, (0, 0), (1, 0), (2, 0), (3, 0)),
        _geometry(1, 4, (0, 0), (0, 1), (0, 2), (0, 3)),
        _geometry(4, 1, (0, 0), (1, 0), (2, 0), (3, 0)),
        _geometry(1, 4, (0, 0), (0, 1), (0, 2), (0, 3)),
    ),
    (  # L
        _geometry(2, 3, (0, 0), (0, 1), (0, 2), (1, 2)),
        _geometry(3, 2, (0, 0), (1, 0), (2, 0), (0, 1)),
        _geometry(2, 3, (0, 0), (1, 0), (1, 1), (1, 2)),
        _geometry(3, 2, (0, 1), (1, 1), (2, 1), (2, 0)),
    ),
)


def piece_geometry(kind: int, rotation: int) -> Geometry:
    """Return the :class:`Geometry` for ``kind`` at ``rotation``.

    Parameters
    ----------
    kind:
        A :class:`PieceKind` or its integer index.
    rotation:
        Index of the desired rotation state.  Values are wrapped so any integer
        is accepted.
    """

    return GEOMETRY[kind][rotation % ROTATIONS]


def piece_tag(kind: int) -> int:
    """Return the value a cell of ``kind`` holds once stored in the board."""

    return int(kind) + 1


@dataclass
class Piece:
    """Active falling piece in the game."""

    kind: PieceKind
    rotation: int = 0
    x: int = 0
    y: int = 0

    @property
    def geometry(self) -> Geometry:
        return piece_geometry(self.kind, self.rotation)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the global ``(row, col)`` coordinates for this piece."""

        return [(self.y + dy, self.x + dx) for dx, dy in self.geometry.offsets]
