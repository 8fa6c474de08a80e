"""Domain services implementing HKID generation and validation rules."""
from __future__ import annotations

from hkid_checker.config import SETTINGS
from hkid_checker.logger import logger

from . import check_digit
from .errors import InvalidPrefixFormat, UnknownPrefix
from .formats import parse
from .models import PREFIX_PATTERN, Hkid, Prefix
from .prefixes import PrefixCatalog
from .random_source import RandomSource
from .results import ValidationOutcome


class HkidGenerator:
    """Produces random, internally consistent HKIDs under a prefix policy."""

    def __init__(self, catalog: PrefixCatalog, random_source: RandomSource) -> None:
        self._catalog = catalog
        self._random = random_source

    def generate(self, prefix: str | None = None, must_exist_in_enum: bool = True) -> Hkid:
        resolved = self._choose_prefix(prefix, must_exist_in_enum)
        body = "".join(str(self._random.randbelow(10)) for _ in range(SETTINGS.body_length))
        hkid = Hkid(prefix=resolved, body=body, check_char=check_digit.compute(resolved.code, body))
        logger.debug("Generated HKID with %s prefix %s", resolved.kind.value, resolved.code)
        return hkid

    def _choose_prefix(self, prefix: str | None, must_exist_in_enum: bool) -> Prefix:
        if prefix is None:
            if must_exist_in_enum:
                return self._catalog.random_known_prefix(self._random)
            return self._catalog.random_unknown_prefix(self._random)

        if not isinstance(prefix, str) or not prefix.isascii():
            raise InvalidPrefixFormat(str(prefix))
        normalized = prefix.strip().upper()
        if not PREFIX_PATTERN.fullmatch(normalized):
            raise InvalidPrefixFormat(str(prefix))
        resolved = self._catalog.resolve(normalized)
        if must_exist_in_enum and not resolved.is_known:
            raise UnknownPrefix(normalized)
        return resolved


class HkidValidator:
    """Parses candidate text and checks prefix policy and check character."""

    def __init__(self, catalog: PrefixCatalog, require_parentheses: bool | None = None) -> None:
        self._catalog = catalog
        self._require_parentheses = require_parentheses

    def inspect(self, text: str, must_exist_in_enum: bool = True) -> ValidationOutcome:
        parsed = parse(text, require_parentheses=self._require_parentheses)

        prefix = self._catalog.resolve(parsed.prefix)
        if must_exist_in_enum and not prefix.is_known:
            logger.debug("Rejected HKID with unrecognized prefix %s", parsed.prefix)
            raise UnknownPrefix(parsed.prefix)

        expected = check_digit.compute(parsed.prefix, parsed.body)
        is_valid = check_digit.verify(parsed.prefix, parsed.body, parsed.check_char)
        logger.debug("Validated HKID with prefix %s: %s", parsed.prefix, "valid" if is_valid else "check digit mismatch")
        return ValidationOutcome(
            text=text,
            parsed=parsed,
            prefix=prefix,
            expected_check_char=expected,
            is_valid=is_valid,
        )

    def validate(self, text: str, must_exist_in_enum: bool = True) -> bool:
        return self.inspect(text, must_exist_in_enum).is_valid
