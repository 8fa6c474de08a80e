import re

import pytest

import hkid_checker
from hkid_checker import FormatError, UnknownPrefix, generate_hkid, validate_hkid
from hkid_checker.application.dto import GenerationRequest, ValidationRequest
from hkid_checker.application.use_cases import (
    GenerateHkidUseCase,
    ValidateHkidUseCase,
    build_context,
)


def test_generate_with_known_prefix_round_trips():
    hkid = generate_hkid("A", True)

    assert re.fullmatch(r"A\d{6}\([0-9A]\)", hkid)
    assert validate_hkid(hkid, True) is True


def test_generate_custom_prefix():
    assert generate_hkid("ZZ", False).startswith("ZZ")
    with pytest.raises(UnknownPrefix):
        generate_hkid("ZZ", True)


def test_generate_random_prefix_round_trips():
    for _ in range(50):
        assert validate_hkid(generate_hkid(None, True), True)
        assert validate_hkid(generate_hkid(None, False), False)


def test_validate_documented_samples():
    assert validate_hkid("A123456(7)", True) is False
    assert validate_hkid("A123456(3)", True) is True
    assert validate_hkid("a123456(7)", True) is validate_hkid("A123456(7)", True)
    with pytest.raises(FormatError):
        validate_hkid("AB1234567", True)


def test_use_cases_with_injected_random_source(fixed_random):
    context = build_context(random_source=fixed_random([1, 2, 3, 4, 5, 6]))

    generated = GenerateHkidUseCase(context).execute(GenerationRequest(prefix="a"))
    validated = ValidateHkidUseCase(context).execute(ValidationRequest(text=generated.text))

    assert generated.text == "A123456(3)"
    assert generated.hkid.prefix.code == "A"
    assert validated.is_valid
    assert validated.outcome.expected_check_char == "3"


def test_relaxed_context_accepts_bare_check_character():
    context = build_context(require_parentheses=False)
    response = ValidateHkidUseCase(context).execute(ValidationRequest(text="A1234563"))
    assert response.is_valid


def test_errors_share_value_error_base():
    assert issubclass(hkid_checker.HkidError, ValueError)
    assert issubclass(UnknownPrefix, hkid_checker.GenerationError)
    assert issubclass(UnknownPrefix, hkid_checker.ValidationError)
    assert issubclass(hkid_checker.InvalidPrefixFormat, hkid_checker.GenerationError)
    assert issubclass(FormatError, hkid_checker.ValidationError)


def test_non_ascii_input_is_rejected_by_public_operations():
    with pytest.raises(FormatError):
        validate_hkid("ı123456(3)", False)
    with pytest.raises(FormatError):
        validate_hkid("ß123456(3)", False)
    with pytest.raises(hkid_checker.InvalidPrefixFormat):
        generate_hkid("ß", False)
