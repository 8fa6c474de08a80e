"""Hong Kong Identity Card (HKID) generation and validation toolkit."""
from hkid_checker.application.use_cases import (
    GenerateHkidUseCase,
    HkidContext,
    ValidateHkidUseCase,
    build_context,
    generate_hkid,
    validate_hkid,
)
from hkid_checker.domain.errors import (
    FormatError,
    GenerationError,
    HkidError,
    InvalidPrefixFormat,
    UnknownPrefix,
    ValidationError,
)
from hkid_checker.domain.prefixes import DEFAULT_CATALOG, KNOWN_PREFIXES, PrefixCatalog
from hkid_checker.domain.services import HkidGenerator, HkidValidator

__all__ = [
    "generate_hkid",
    "validate_hkid",
    "GenerateHkidUseCase",
    "ValidateHkidUseCase",
    "HkidContext",
    "build_context",
    "HkidGenerator",
    "HkidValidator",
    "PrefixCatalog",
    "DEFAULT_CATALOG",
    "KNOWN_PREFIXES",
    "HkidError",
    "GenerationError",
    "ValidationError",
    "InvalidPrefixFormat",
    "UnknownPrefix",
    "FormatError",
]
