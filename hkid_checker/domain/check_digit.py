"""Check-digit engine for HKID numbers.

The check character is a weighted modulus-11 checksum over eight symbols:
two prefix slots (a one-letter prefix is padded with a blank slot) followed
by the six body digits. Letters count as ``A=10 .. Z=35``, digits as their
own value and the blank slot as 36. Weights run ``9, 8, ..., 2``.

The check value ``(11 - sum % 11) % 11`` is rendered as a digit, except that
10 is rendered as ``'A'``.
"""
from __future__ import annotations

from hkid_checker.config import SETTINGS

CHECK_VALUE_TEN = "A"


def char_to_value(char: str) -> int:
    """Map one HKID symbol to its numeric value; a space stands for the blank slot."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    if not char.isascii():
        raise ValueError(f"Character {char!r} cannot appear in an HKID")
    upper = char.upper()
    if "A" <= upper <= "Z":
        return ord(upper) - ord("A") + 10
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if char == " ":
        return SETTINGS.blank_slot_value
    raise ValueError(f"Character {char!r} cannot appear in an HKID")


def _symbols(prefix: str, body: str) -> str:
    if not 1 <= len(prefix) <= 2 or not (prefix.isascii() and prefix.isalpha()):
        raise ValueError(f"Prefix must be 1 or 2 letters, got {prefix!r}")
    if len(body) != SETTINGS.body_length or not (body.isascii() and body.isdigit()):
        raise ValueError(f"Body must be exactly {SETTINGS.body_length} digits, got {body!r}")
    return f"{prefix:>2}{body}"


def weighted_sum(prefix: str, body: str) -> int:
    symbols = _symbols(prefix, body)
    return sum(char_to_value(char) * weight for char, weight in zip(symbols, SETTINGS.check_weights))


def check_value(prefix: str, body: str) -> int:
    modulus = SETTINGS.modulus
    return (modulus - weighted_sum(prefix, body) % modulus) % modulus


def render_check_value(value: int) -> str:
    if value == 10:
        return CHECK_VALUE_TEN
    if 0 <= value <= 9:
        return str(value)
    raise ValueError(f"Check value must be between 0 and 10, got {value}")


def compute(prefix: str, body: str) -> str:
    return render_check_value(check_value(prefix, body))


def verify(prefix: str, body: str, check_char: str) -> bool:
    return compute(prefix, body) == check_char.strip().upper()
