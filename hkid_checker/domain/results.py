"""Domain-level results for HKID validation."""
from __future__ import annotations

from dataclasses import dataclass

from .models import ParsedHkid, Prefix


@dataclass(frozen=True)
class ValidationOutcome:
    text: str
    parsed: ParsedHkid
    prefix: Prefix
    expected_check_char: str
    is_valid: bool

    @property
    def canonical(self) -> str:
        return self.parsed.render()

    @property
    def expected(self) -> str:
        """The canonical HKID carrying the correct check character."""
        return ParsedHkid(self.parsed.prefix, self.parsed.body, self.expected_check_char).render()
