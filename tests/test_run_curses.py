from __future__ import annotations

import curses

from tinytetris import render, run_curses
from tinytetris.engine import InputKey
from tinytetris.run_curses import CursesRunner, translate_key
from tinytetris.tetromino import Piece, PieceKind


class FakeWindow:
    def __init__(self, keys) -> None:
        self.keys = list(keys)

    def getch(self) -> int:
        return self.keys.pop(0) if self.keys else -1


def test_translate_key() -> None:
    assert translate_key(ord("a")) is InputKey.LEFT
    assert translate_key(ord("d")) is InputKey.RIGHT
    assert translate_key(ord("w")) is InputKey.UP
    assert translate_key(ord("s")) is InputKey.DOWN
    assert translate_key(curses.KEY_LEFT) is InputKey.LEFT
    assert translate_key(curses.KEY_DOWN) is InputKey.DOWN
    assert translate_key(ord("q")) == "quit"
    assert translate_key(ord("z")) is None
    assert translate_key(-1) is None
    assert translate_key(10_000) is None


def test_step_forwards_input_and_ticks(monkeypatch) -> None:
    drawn = []
    monkeypatch.setattr(render, "draw", lambda window, score_window, engine: drawn.append(engine))
    runner = CursesRunner(seed=0, gravity_ticks=1)
    runner.engine.piece = Piece(PieceKind.O, x=4, y=0)

    assert runner.step(FakeWindow([ord("d")]), FakeWindow([])) is True
    assert runner.engine.piece == Piece(PieceKind.O, x=5, y=1)
    assert runner.step(FakeWindow([]), FakeWindow([])) is True
    assert runner.engine.piece.y == 2
    assert len(drawn) == 2


def test_step_stops_on_quit(monkeypatch) -> None:
    monkeypatch.setattr(render, "draw", lambda window, score_window, engine: None)
    runner = CursesRunner(seed=0)
    assert runner.step(FakeWindow([ord("q")]), FakeWindow([])) is False


def test_step_stops_on_game_over(monkeypatch) -> None:
    monkeypatch.setattr(render, "draw", lambda window, score_window, engine: None)
    runner = CursesRunner(rows=4, cols=4, seed=0, gravity_ticks=1)
    runner.engine.board.set_cell(2, 0, 1)
    runner.engine.piece = Piece(PieceKind.O, x=0, y=0)
    assert runner.step(FakeWindow([]), FakeWindow([])) is False


def test_main_uses_runner(monkeypatch) -> None:
    monkeypatch.setattr(CursesRunner, "run", lambda self: 12)
    assert run_curses.main(rows=6, cols=6, seed=1) == 12
