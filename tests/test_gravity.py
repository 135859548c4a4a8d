from __future__ import annotations

import random

import pytest

from tinytetris.engine import GRAVITY_TICKS, Engine, Phase, TickResult
from tinytetris.tetromino import Piece, PieceKind, piece_tag


def test_gravity_threshold_is_thirty_ticks() -> None:
    assert GRAVITY_TICKS == 30


def test_piece_only_falls_on_the_threshold_tick() -> None:
    engine = Engine(rng=random.Random(1))
    engine.piece = Piece(PieceKind.O, x=4, y=0)

    for _ in range(GRAVITY_TICKS - 1):
        assert engine.tick() is TickResult.RUNNING
    assert engine.piece.y == 0

    assert engine.tick() is TickResult.RUNNING
    assert engine.piece == Piece(PieceKind.O, x=4, y=1)

    # The counter starts over after each gravity step.
    for _ in range(GRAVITY_TICKS - 1):
        engine.tick()
    assert engine.piece.y == 1
    engine.tick()
    assert engine.piece.y == 2


def test_custom_gravity_ticks() -> None:
    engine = Engine(rng=random.Random(1), gravity_ticks=1)
    engine.piece = Piece(PieceKind.O, x=4, y=0)
    engine.tick()
    engine.tick()
    assert engine.piece.y == 2


@pytest.mark.parametrize("gravity_ticks", [0, -3])
def test_gravity_ticks_must_be_positive(gravity_ticks) -> None:
    with pytest.raises(ValueError):
        Engine(gravity_ticks=gravity_ticks)


def test_piece_lands_on_floor_and_next_piece_spawns(scripted_rng) -> None:
    rng = scripted_rng([PieceKind.O, 0, 0, PieceKind.I, 0, 3])
    engine = Engine(rng=rng, gravity_ticks=1)
    engine.piece = Piece(PieceKind.O, x=4, y=0)

    for _ in range(engine.rows - 2):
        assert engine.tick() is TickResult.RUNNING
    assert engine.piece.y == engine.rows - 2
    assert not engine.board.grid.any()

    assert engine.tick() is TickResult.RUNNING
    tag = piece_tag(PieceKind.O)
    assert engine.board.grid[18:, 4:6].tolist() == [[tag, tag], [tag, tag]]
    assert int(engine.board.grid.sum()) == 4 * tag
    assert engine.piece == Piece(PieceKind.I, rotation=0, x=3, y=0)
    assert engine.phase is Phase.FALLING
    assert engine.score == 0


def test_piece_lands_on_landed_blocks(scripted_rng) -> None:
    engine = Engine(rng=scripted_rng(), gravity_ticks=1)
    engine.board.set_cell(10, 0, 1)
    engine.piece = Piece(PieceKind.I, rotation=1, x=0, y=5)
    assert engine.tick() is TickResult.RUNNING
    assert engine.piece.y == 6
    engine.tick()
    assert [engine.board.get_cell(r, 0) for r in range(6, 11)] == [piece_tag(PieceKind.I)] * 4 + [1]
