import pytest

from hkid_checker.domain import check_digit


def test_char_to_value():
    assert check_digit.char_to_value("A") == 10
    assert check_digit.char_to_value("Z") == 35
    assert check_digit.char_to_value("a") == 10
    assert check_digit.char_to_value("0") == 0
    assert check_digit.char_to_value("9") == 9
    assert check_digit.char_to_value(" ") == 36


@pytest.mark.parametrize("char", ["@", "_", "-", "é", "AB", ""])
def test_char_to_value_rejects_foreign_characters(char: str):
    with pytest.raises(ValueError):
        check_digit.char_to_value(char)


@pytest.mark.parametrize(
    ("prefix", "body", "expected"),
    [
        ("A", "123456", "3"),
        ("A", "444227", "2"),
        ("A", "000000", "3"),
        ("A", "000007", "0"),
        ("ZZ", "034129", "A"),
        ("ZZ", "123456", "A"),
        ("AB", "987654", "3"),
        ("AB", "123456", "9"),
        ("WX", "123456", "9"),
        ("PB", "100001", "8"),
    ],
)
def test_compute_reference_vectors(prefix: str, body: str, expected: str):
    assert check_digit.compute(prefix, body) == expected


def test_single_letter_prefix_is_padded_with_blank_slot():
    # blank (36) * 9 + A (10) * 8, then digits weighted 7..2
    assert check_digit.weighted_sum("A", "123456") == 324 + 80 + 77


def test_both_letters_of_two_letter_prefix_carry_full_weight():
    assert check_digit.weighted_sum("AB", "000000") == 10 * 9 + 11 * 8


def test_check_value_ten_renders_as_a_and_zero_as_digit():
    assert check_digit.render_check_value(10) == "A"
    assert check_digit.render_check_value(0) == "0"
    assert check_digit.render_check_value(7) == "7"
    with pytest.raises(ValueError):
        check_digit.render_check_value(11)


def test_compute_is_deterministic():
    assert check_digit.compute("P", "123456") == check_digit.compute("P", "123456")


def test_verify_normalizes_case():
    assert check_digit.verify("ZZ", "034129", "a")
    assert check_digit.verify("zz", "034129", "A")
    assert not check_digit.verify("A", "123456", "7")


@pytest.mark.parametrize(("prefix", "body"), [("", "123456"), ("ABC", "123456"), ("A", "12345"), ("A", "1234567"), ("A", "12345_"), ("1", "123456")])
def test_compute_rejects_malformed_input(prefix: str, body: str):
    with pytest.raises(ValueError):
        check_digit.compute(prefix, body)
