"""Token types, token records and the symbol and keyword tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Kinds of token produced by the lexer and consumed by the parser."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"
    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    ASTERISK = "ASTERISK"
    SLASH = "SLASH"
    MOD = "MOD"
    SEMICOLON = "SEMICOLON"
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    LESS = "LESS"
    GREATER = "GREATER"
    LESS_OR_EQUAL = "LESS_OR_EQUAL"
    GREATER_OR_EQUAL = "GREATER_OR_EQUAL"
    BANG = "BANG"

    VAR = "VAR"
    WRITE = "WRITE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical token with its source location."""

    type: TokenType
    literal: str = ""
    position: int = 0
    line: int = 0


SYMBOL_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "%": TokenType.MOD,
    "=": TokenType.ASSIGN,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
    "!": TokenType.BANG,
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_OR_EQUAL,
    ">=": TokenType.GREATER_OR_EQUAL,
}

SYMBOLS_ARITHMETIC: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "%": TokenType.MOD,
}

KEYWORDS: dict[str, TokenType] = {
    "write": TokenType.WRITE,
    "var": TokenType.VAR,
}


def new_token(token_type: TokenType, literal: str, position: int, line: int) -> Token:
    """Build a token of the given type at the given location."""
    return Token(type=token_type, literal=literal, position=position, line=line)


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword type for ``ident``, or IDENT if it is not a keyword."""
    return KEYWORDS.get(ident, TokenType.IDENT)