"""Randomness interface anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Provides uniformly distributed integers."""

    def randbelow(self, n: int) -> int:
        """Return an integer drawn uniformly from ``[0, n)``."""
        ...
