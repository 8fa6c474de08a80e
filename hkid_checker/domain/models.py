"""Domain models for HKID generation and validation.

These dataclasses capture the parts of an HKID number: the one- or two-letter
prefix, the six-digit body and the trailing check character.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidPrefixFormat

PREFIX_PATTERN = re.compile(r"[A-Z]{1,2}")
BODY_PATTERN = re.compile(r"[0-9]{6}")
CHECK_CHAR_PATTERN = re.compile(r"[0-9A]")


def render_hkid(prefix: str, body: str, check_char: str) -> str:
    """Canonical text form, e.g. ``A123456(3)``."""
    return f"{prefix}{body}({check_char})"


class PrefixKind(str, Enum):
    KNOWN = "known"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Prefix:
    """Leading letters of an HKID, either catalogued or caller-supplied."""

    code: str
    kind: PrefixKind
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not PREFIX_PATTERN.fullmatch(self.code):
            raise InvalidPrefixFormat(str(self.code))

    @property
    def is_known(self) -> bool:
        return self.kind is PrefixKind.KNOWN

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class ParsedHkid:
    """Structural parts of a candidate HKID; the check character is not yet verified."""

    prefix: str
    body: str
    check_char: str

    def render(self) -> str:
        return render_hkid(self.prefix, self.body, self.check_char)


@dataclass(frozen=True)
class Hkid:
    prefix: Prefix
    body: str
    check_char: str

    def __post_init__(self) -> None:
        if not BODY_PATTERN.fullmatch(self.body):
            raise ValueError(f"HKID body must be exactly 6 digits, got {self.body!r}")
        if not CHECK_CHAR_PATTERN.fullmatch(self.check_char):
            raise ValueError(f"HKID check character must be 0-9 or A, got {self.check_char!r}")

    def render(self) -> str:
        return render_hkid(self.prefix.code, self.body, self.check_char)

    def __str__(self) -> str:
        return self.render()
