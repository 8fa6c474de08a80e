"""Application services orchestrating HKID generation and validation."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from hkid_checker.application.dto import (
    GenerationRequest,
    GenerationResponse,
    ValidationRequest,
    ValidationResponse,
)
from hkid_checker.domain.prefixes import DEFAULT_CATALOG, PrefixCatalog
from hkid_checker.domain.random_source import RandomSource
from hkid_checker.domain.services import HkidGenerator, HkidValidator
from hkid_checker.infrastructure.randomness.system_random import SystemRandomSource


@dataclass(slots=True)
class HkidContext:
    catalog: PrefixCatalog
    generator: HkidGenerator
    validator: HkidValidator


def build_context(
    catalog: PrefixCatalog | None = None,
    random_source: RandomSource | None = None,
    require_parentheses: bool | None = None,
) -> HkidContext:
    if catalog is None:
        catalog = DEFAULT_CATALOG
    return HkidContext(
        catalog=catalog,
        generator=HkidGenerator(catalog, random_source or SystemRandomSource()),
        validator=HkidValidator(catalog, require_parentheses=require_parentheses),
    )


@lru_cache(maxsize=1)
def build_default_context() -> HkidContext:
    return build_context()


class GenerateHkidUseCase:
    def __init__(self, context: HkidContext) -> None:
        self._context = context

    def execute(self, request: GenerationRequest) -> GenerationResponse:
        hkid = self._context.generator.generate(request.prefix, request.must_exist_in_enum)
        return GenerationResponse(hkid=hkid, text=hkid.render())


class ValidateHkidUseCase:
    def __init__(self, context: HkidContext) -> None:
        self._context = context

    def execute(self, request: ValidationRequest) -> ValidationResponse:
        outcome = self._context.validator.inspect(request.text, request.must_exist_in_enum)
        return ValidationResponse(outcome=outcome)


def generate_hkid(prefix: str | None = None, must_exist_in_enum: bool = True) -> str:
    """Generate a random HKID in canonical form, e.g. ``A123456(3)``.

    Raises ``InvalidPrefixFormat`` when ``prefix`` is not one or two letters and
    ``UnknownPrefix`` when catalog membership is required but missing.
    """
    use_case = GenerateHkidUseCase(build_default_context())
    return use_case.execute(GenerationRequest(prefix=prefix, must_exist_in_enum=must_exist_in_enum)).text


def validate_hkid(text: str, must_exist_in_enum: bool = True) -> bool:
    """Return whether ``text`` is an HKID with a correct check character.

    A wrong check character yields ``False``. Malformed text raises ``FormatError``
    and, when catalog membership is required, an unlisted prefix raises ``UnknownPrefix``.
    """
    use_case = ValidateHkidUseCase(build_default_context())
    return use_case.execute(ValidationRequest(text=text, must_exist_in_enum=must_exist_in_enum)).is_valid
