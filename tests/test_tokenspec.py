import pytest

from prawn.tokenspec import (
    KEYWORDS,
    SYMBOL_TOKENS,
    SYMBOLS_ARITHMETIC,
    Token,
    TokenType,
    lookup_ident,
    new_token,
)


@pytest.mark.parametrize(
    "word, expected",
    [("var", TokenType.VAR), ("write", TokenType.WRITE)],
)
def test_lookup_ident_keywords(word, expected):
    assert lookup_ident(word) is expected


@pytest.mark.parametrize("word", ["myVar", "Var", "writer", "x"])
def test_lookup_ident_plain_identifier(word):
    assert lookup_ident(word) is TokenType.IDENT


def test_new_token_fields():
    tok = new_token(TokenType.INT, "25", 7, 3)
    assert tok == Token(TokenType.INT, "25", 7, 3)
    assert tok.literal == "25"
    assert tok.position == 7
    assert tok.line == 3


def test_token_type_string_form_is_its_name():
    for member in TokenType:
        assert str(member) == member.name
        assert TokenType(member.name) is member


@pytest.mark.parametrize(
    "symbol, expected",
    [
        ("==", TokenType.EQUAL),
        ("!=", TokenType.NOT_EQUAL),
        ("<=", TokenType.LESS_OR_EQUAL),
        (">=", TokenType.GREATER_OR_EQUAL),
    ],
)
def test_multi_character_symbols(symbol, expected):
    tok = new_token(SYMBOL_TOKENS[symbol], symbol, 0, 1)
    assert tok.type is expected
    assert tok.literal == symbol
    assert lookup_ident(symbol) is TokenType.IDENT


def test_arithmetic_symbols_are_symbols_too():
    for symbol, kind in SYMBOLS_ARITHMETIC.items():
        assert SYMBOL_TOKENS[symbol] is kind


def test_keywords_round_trip_through_lookup():
    for word, kind in KEYWORDS.items():
        assert lookup_ident(word) is kind