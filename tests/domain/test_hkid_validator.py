import pytest

from hkid_checker.domain.errors import FormatError, UnknownPrefix
from hkid_checker.domain.prefixes import DEFAULT_CATALOG
from hkid_checker.domain.services import HkidValidator


@pytest.fixture
def validator() -> HkidValidator:
    return HkidValidator(DEFAULT_CATALOG)


@pytest.mark.parametrize(
    "text",
    ["A123456(3)", "A444227(2)", "AB987654(3)", "WX123456(9)", "A000007(0)", "a123456(3)", "  C668668(9) "],
)
def test_valid_hkids(validator: HkidValidator, text: str):
    assert validator.validate(text, must_exist_in_enum=False) is True


def test_known_prefix_valid(validator: HkidValidator):
    assert validator.validate("A123456(3)", must_exist_in_enum=True) is True
    assert validator.validate("AB123456(9)", must_exist_in_enum=False) is True


def test_wrong_check_digit_is_negative_result_not_error(validator: HkidValidator):
    assert validator.validate("A123456(7)", must_exist_in_enum=True) is False
    assert validator.validate("A123456(9)", must_exist_in_enum=False) is False


def test_lowercase_matches_uppercase(validator: HkidValidator):
    assert validator.validate("a123456(7)", True) == validator.validate("A123456(7)", True)
    assert validator.validate("a123456(3)", True) == validator.validate("A123456(3)", True)


def test_unknown_prefix_with_catalog_required(validator: HkidValidator):
    with pytest.raises(UnknownPrefix) as excinfo:
        validator.validate("XX123456(1)", must_exist_in_enum=True)
    assert excinfo.value.prefix == "XX"


def test_unknown_prefix_allowed(validator: HkidValidator):
    assert validator.validate("ZZ034129(A)", must_exist_in_enum=False) is True
    assert validator.validate("PB100001(8)", must_exist_in_enum=False) is True
    with pytest.raises(UnknownPrefix):
        validator.validate("PB100001(8)", must_exist_in_enum=True)


def test_format_checked_before_prefix(validator: HkidValidator):
    with pytest.raises(FormatError):
        validator.validate("XX12345(1)", must_exist_in_enum=True)


@pytest.mark.parametrize("text", ["AB1234567", "A12345", "A123456", "A123456()", "A12345_(7)", "ABC123456(3)"])
def test_malformed_text_raises_format_error(validator: HkidValidator, text: str):
    with pytest.raises(FormatError):
        validator.validate(text, must_exist_in_enum=True)


def test_bare_check_character_when_relaxed():
    relaxed = HkidValidator(DEFAULT_CATALOG, require_parentheses=False)
    assert relaxed.validate("A1234563", must_exist_in_enum=False) is True
    assert relaxed.validate("AB1234567", must_exist_in_enum=False) is False


def test_inspect_reports_expected_check_char(validator: HkidValidator):
    outcome = validator.inspect("a123456(7)", must_exist_in_enum=True)
    assert not outcome.is_valid
    assert outcome.canonical == "A123456(7)"
    assert outcome.expected_check_char == "3"
    assert outcome.expected == "A123456(3)"
    assert outcome.prefix.is_known
    assert outcome.text == "a123456(7)"


@pytest.mark.parametrize("valid", ["A123456(3)", "ZZ034129(A)", "A000007(0)", "WX123456(9)"])
def test_every_single_digit_mutation_is_detected(validator: HkidValidator, valid: str):
    parsed = validator.inspect(valid, must_exist_in_enum=False).parsed
    for position in range(6):
        for digit in "0123456789":
            if digit == parsed.body[position]:
                continue
            body = parsed.body[:position] + digit + parsed.body[position + 1 :]
            mutated = f"{parsed.prefix}{body}({parsed.check_char})"
            assert validator.validate(mutated, must_exist_in_enum=False) is False, mutated


def test_check_character_is_confirmed_by_check_digit_engine(validator: HkidValidator, monkeypatch):
    from hkid_checker.domain import check_digit

    calls = []
    real_verify = check_digit.verify

    def recording_verify(prefix: str, body: str, check_char: str) -> bool:
        calls.append((prefix, body, check_char))
        return real_verify(prefix, body, check_char)

    monkeypatch.setattr(check_digit, "verify", recording_verify)

    assert validator.validate("a123456(3)", must_exist_in_enum=True) is True
    assert calls == [("A", "123456", "3")]


@pytest.mark.parametrize("text", ["ı123456(3)", "ß123456(3)"])
def test_non_ascii_prefix_is_a_format_error(validator: HkidValidator, text: str):
    with pytest.raises(FormatError):
        validator.validate(text, must_exist_in_enum=False)
