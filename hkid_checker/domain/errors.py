"""Error taxonomy for HKID generation and validation."""
from __future__ import annotations


class HkidError(ValueError):
    """Base class for every HKID failure surfaced to callers."""


class GenerationError(HkidError):
    """Raised when an HKID cannot be generated under the requested policy."""


class ValidationError(HkidError):
    """Raised when a validation request is malformed (not merely invalid)."""


class InvalidPrefixFormat(GenerationError):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Prefix {prefix!r} is not a valid HKID prefix format (must be 1 or 2 letters A-Z)")


class UnknownPrefix(GenerationError, ValidationError):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Prefix {prefix!r} is not recognized")


class FormatError(ValidationError):
    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid HKID format: {reason}")
