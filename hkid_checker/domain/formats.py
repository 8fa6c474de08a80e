"""Structural parsing of HKID text, independent of check-digit correctness."""
from __future__ import annotations

import re

from hkid_checker.config import SETTINGS

from .errors import FormatError
from .models import ParsedHkid

STRICT_PATTERN = re.compile(r"^(?P<prefix>[A-Z]{1,2})(?P<body>[0-9]{6})\((?P<check>[0-9A])\)$")
RELAXED_PATTERN = re.compile(
    r"^(?P<prefix>[A-Z]{1,2})(?P<body>[0-9]{6})(?:\((?P<check>[0-9A])\)|(?P<bare>[0-9A]))$"
)
# Always matches; only used to explain why a candidate was rejected.
_SEGMENTS = re.compile(r"^(?P<letters>[A-Z]*)(?P<digits>[0-9]*)(?P<rest>.*)$", re.DOTALL)


def normalize(text: str) -> str:
    return text.strip().upper()


def parse(text: str, require_parentheses: bool | None = None) -> ParsedHkid:
    """Split ``text`` into prefix, body and check character or raise :class:`FormatError`.

    Surrounding whitespace is trimmed and letters are upper-cased first. With
    ``require_parentheses`` (the default from settings) the check character must be
    wrapped as in ``A123456(3)``; otherwise the bare form ``A1234563`` is accepted too.
    """
    if not isinstance(text, str):
        raise FormatError(repr(text), f"expected text, got {type(text).__name__}")
    if require_parentheses is None:
        require_parentheses = SETTINGS.require_parentheses
    if not text.isascii():
        raise FormatError(text, "non-ASCII characters are not allowed")

    candidate = normalize(text)
    pattern = STRICT_PATTERN if require_parentheses else RELAXED_PATTERN
    match = pattern.match(candidate)
    if match is None:
        raise FormatError(text, _diagnose(candidate, require_parentheses))

    check_char = match.group("check") or match.group("bare")
    return ParsedHkid(prefix=match.group("prefix"), body=match.group("body"), check_char=check_char)


def _diagnose(candidate: str, require_parentheses: bool) -> str:
    if not candidate:
        return "empty input"
    if any(char.isspace() for char in candidate):
        return "internal whitespace is not allowed"

    segments = _SEGMENTS.match(candidate)
    letters, digits, rest = segments.group("letters"), segments.group("digits"), segments.group("rest")
    body_length = SETTINGS.body_length

    if not 1 <= len(letters) <= 2:
        return f"expected 1 or 2 prefix letters, found {len(letters)}"
    if require_parentheses and len(digits) == body_length + 1 and not rest:
        return "check character must be wrapped in parentheses"
    if len(digits) != body_length:
        return f"expected {body_length} digits after the prefix, found {len(digits)}"
    if not rest:
        return "missing check character"
    return f"malformed check character slot {rest!r} (expected a digit or 'A' in parentheses)"
