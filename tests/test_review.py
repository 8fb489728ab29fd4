import pytest

from prawn.review import is_arithmetic_symbol, is_digit, is_letter, is_symbol


@pytest.mark.parametrize("char", ["a", "z", "A", "Z", "_", "m"])
def test_is_letter_true(char):
    assert is_letter(char) is True


@pytest.mark.parametrize("char", ["0", "9", " ", "-", "ñ", "", "ab"])
def test_is_letter_false(char):
    assert is_letter(char) is False


@pytest.mark.parametrize("char", list("0123456789"))
def test_is_digit_true(char):
    assert is_digit(char) is True


@pytest.mark.parametrize("char", ["a", "_", "", "12", "٣"])
def test_is_digit_false(char):
    assert is_digit(char) is False


@pytest.mark.parametrize("char", list("+-*/%=();!<>"))
def test_is_symbol_true(char):
    assert is_symbol(char) is True


@pytest.mark.parametrize("char", ["a", "1", '"', "==", ""])
def test_is_symbol_false(char):
    assert is_symbol(char) is False


@pytest.mark.parametrize("literal", ["+", "-", "*", "/", "%"])
def test_is_arithmetic_symbol_true(literal):
    assert is_arithmetic_symbol(literal) is True


@pytest.mark.parametrize("literal", ["=", ";", "==", "200", ""])
def test_is_arithmetic_symbol_false(literal):
    assert is_arithmetic_symbol(literal) is False