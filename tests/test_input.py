from __future__ import annotations

import random

import pytest

from tinytetris.engine import Engine, InputKey
from tinytetris.tetromino import Piece, PieceKind


@pytest.fixture
def engine() -> Engine:
    engine = Engine(rng=random.Random(0))
    engine.piece = Piece(PieceKind.T, rotation=0, x=4, y=5)
    return engine


@pytest.mark.parametrize(
    "symbol,expected",
    [
        ("left", Piece(PieceKind.T, rotation=0, x=3, y=5)),
        ("right", Piece(PieceKind.T, rotation=0, x=5, y=5)),
        ("up", Piece(PieceKind.T, rotation=1, x=4, y=5)),
        ("down", Piece(PieceKind.T, rotation=3, x=4, y=5)),
        (InputKey.LEFT, Piece(PieceKind.T, rotation=0, x=3, y=5)),
        (InputKey.UP, Piece(PieceKind.T, rotation=1, x=4, y=5)),
    ],
)
def test_symbols_map_to_moves_and_rotations(engine, symbol, expected) -> None:
    engine.handle_input(symbol)
    assert engine.piece == expected


@pytest.mark.parametrize("symbol", ["x", "", "LEFT", None, 42, -1, ["left"], b"left"])
def test_unknown_symbols_are_ignored(engine, symbol) -> None:
    grid_before = engine.board.grid.copy()
    engine.handle_input(symbol)
    assert engine.piece == Piece(PieceKind.T, rotation=0, x=4, y=5)
    assert (engine.board.grid == grid_before).all()


def test_rejected_input_is_silent(engine) -> None:
    engine.piece = Piece(PieceKind.T, rotation=0, x=0, y=5)
    engine.handle_input("left")
    assert engine.piece.x == 0
