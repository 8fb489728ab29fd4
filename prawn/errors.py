"""Parser error message builders."""

from __future__ import annotations


def create_error_expected(line: int, column: int, expected: str, found: str) -> str:
    """Message for a token that differs from the one expected."""
    return f"Expected '{expected}' but found '{found}' in {line}:{column}"


def create_error_unrecognizable_token(line: int, column: int, token_literal: str) -> str:
    """Message for a token the parser cannot place."""
    return f"Token Unrecognizable '{token_literal}' in {line}:{column}"