"""Application-level DTOs for HKID generation and validation."""
from __future__ import annotations

from dataclasses import dataclass

from hkid_checker.domain.models import Hkid
from hkid_checker.domain.results import ValidationOutcome


@dataclass(slots=True, frozen=True)
class GenerationRequest:
    prefix: str | None = None
    must_exist_in_enum: bool = True


@dataclass(slots=True, frozen=True)
class GenerationResponse:
    hkid: Hkid
    text: str


@dataclass(slots=True, frozen=True)
class ValidationRequest:
    text: str
    must_exist_in_enum: bool = True


@dataclass(slots=True, frozen=True)
class ValidationResponse:
    outcome: ValidationOutcome

    @property
    def is_valid(self) -> bool:
        return self.outcome.is_valid
