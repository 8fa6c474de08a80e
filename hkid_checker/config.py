"""Central configuration for the HKID checker package."""
from __future__ import annotations

from dataclasses import dataclass

# Weights for the 8 symbol slots: two prefix slots followed by six body digits.
CHECK_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2)
# Value of the blank slot that pads a one-letter prefix.
BLANK_SLOT_VALUE = 36
MODULUS = 11
BODY_LENGTH = 6


@dataclass(slots=True, frozen=True)
class Settings:
    check_weights: tuple[int, ...]
    blank_slot_value: int
    modulus: int
    body_length: int
    require_parentheses: bool
    log_level: str


SETTINGS = Settings(
    check_weights=CHECK_WEIGHTS,
    blank_slot_value=BLANK_SLOT_VALUE,
    modulus=MODULUS,
    body_length=BODY_LENGTH,
    require_parentheses=True,
    log_level="WARNING",
)
