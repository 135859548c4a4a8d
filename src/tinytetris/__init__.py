"""A small falling-block puzzle game engine with terminal and pygame front-ends."""

from .board import Board
from .tetromino import Geometry, Piece, PieceKind, piece_geometry
from .engine import Engine, InputKey, MoveDirection, Phase, RotationDirection, TickResult
from .gym_env import TinyTetrisEnv
from .utils import collides, render_grid, stamp

__all__ = [
    "Board",
    "Engine",
    "Geometry",
    "InputKey",
    "MoveDirection",
    "Phase",
    "Piece",
    "PieceKind",
    "RotationDirection",
    "TickResult",
    "TinyTetrisEnv",
    "collides",
    "piece_geometry",
    "render_grid",
    "stamp",
]
