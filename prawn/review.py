"""Character and literal classification helpers."""

from __future__ import annotations

from .tokenspec import SYMBOL_TOKENS, SYMBOLS_ARITHMETIC


def is_letter(char: str) -> bool:
    """True for an ASCII letter or underscore."""
    return len(char) == 1 and ("a" <= char <= "z" or "A" <= char <= "Z" or char == "_")


def is_digit(char: str) -> bool:
    """True for an ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def is_symbol(char: str) -> bool:
    """True if the single character starts a symbol token."""
    return len(char) == 1 and char in SYMBOL_TOKENS


def is_arithmetic_symbol(literal: str) -> bool:
    """True if ``literal`` is an arithmetic operator."""
    return literal in SYMBOLS_ARITHMETIC