from typing import Iterable

import pytest


class FixedSequenceRandomSource:
    """Replays a fixed list of draws, checking each fits the requested bound."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.bounds: list[int] = []

    def randbelow(self, n: int) -> int:
        if not self._values:
            raise AssertionError("random source exhausted")
        value = self._values.pop(0)
        assert 0 <= value < n, f"{value} is outside [0, {n})"
        self.bounds.append(n)
        return value


@pytest.fixture
def fixed_random():
    return FixedSequenceRandomSource
