from __future__ import annotations

from typing import Iterable, List

import pytest


class ScriptedRandom:
    """Random source replaying queued values, falling back to the lowest one."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.values: List[int] = list(values)

    def _next(self, low: int, high: int) -> int:
        if not self.values:
            return low
        value = int(self.values.pop(0))
        assert low <= value <= high, f"scripted value {value} outside [{low}, {high}]"
        return value

    def randrange(self, stop: int) -> int:
        return self._next(0, stop - 1)

    def randint(self, a: int, b: int) -> int:
        return self._next(a, b)


@pytest.fixture
def scripted_rng():
    """Return a factory for :class:`ScriptedRandom`.

    Each spawn consumes three values: kind, rotation and column.
    """

    return ScriptedRandom
