"""OS-entropy backed random source."""
from __future__ import annotations

import random

from hkid_checker.domain.random_source import RandomSource


class SystemRandomSource(RandomSource):
    def __init__(self, generator: random.Random | None = None) -> None:
        self._generator = generator or random.SystemRandom()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._generator.randrange(n)
