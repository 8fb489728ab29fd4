"""Recursive parser that builds the program tree from a token stream."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import takewhile
from typing import Any, Iterable, Optional, Union

from .errors import create_error_expected
from .review import is_arithmetic_symbol
from .tokenspec import Token, TokenType

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class NumberExpr:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class StringExpr:
    """A string literal."""

    value: str


@dataclass(frozen=True)
class VarExpr:
    """A reference to a variable by name."""

    name: str


@dataclass(frozen=True)
class BinaryExpr:
    """A binary operation such as ``x + 12``."""

    left: Any
    op: str
    right: Any


Node = Optional[Union[NumberExpr, StringExpr, VarExpr, BinaryExpr]]


@dataclass
class VarDeclare:
    """A ``var name = value;`` statement."""

    name: str
    value: Any

    def payload(self) -> dict[str, Any]:
        return {"Ident": self.name, "Value": self.value}


@dataclass
class WriteDecl:
    """A ``write(value);`` statement."""

    value: Any

    def payload(self) -> dict[str, Any]:
        return {"Value": self.value}


def atoi(text: str) -> int:
    """Parse a signed decimal integer; 0 if malformed, clamped to 64 bits."""
    if not _DECIMAL.fullmatch(text):
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(text)))


class Parser:
    """Parses a token sequence into a program of statement dictionaries.

    Tokens are read up to, not including, the first EOF token. Recoverable
    mistakes are collected in ``errors``; running out of tokens in the middle
    of a statement raises IndexError.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: list[Token] = list(
            takewhile(lambda tok: tok.type != TokenType.EOF, tokens)
        )
        self.position = 0
        self.errors: list[str] = []

    def _token_at(self, index: int) -> Token:
        try:
            return self.tokens[index]
        except IndexError:
            raise IndexError(f"unexpected end of input at token {index}") from None

    def _current(self) -> Token:
        return self._token_at(self.position)

    def _peek(self) -> Token:
        return self._token_at(self.position + 1)

    def next_token(self) -> Token:
        """Return the current token and advance; EOF once the input is used up."""
        if self.position < len(self.tokens):
            token = self.tokens[self.position]
            self.position += 1
            return token
        return Token(TokenType.EOF)

    def parse_expression_type(self) -> Node:
        """Turn the current INT, STRING or IDENT token into a node, else None."""
        token = self._current()
        if token.type == TokenType.INT:
            return NumberExpr(atoi(token.literal))
        if token.type == TokenType.STRING:
            return StringExpr(token.literal)
        if token.type == TokenType.IDENT:
            return VarExpr(token.literal)
        return None

    def create_binary_expression(self, left: Node) -> BinaryExpr:
        """Read an operator and right operand following ``left``."""
        self.next_token()
        operator = self._current()
        self.next_token()
        right = self.parse_expression_type()
        self.next_token()
        return BinaryExpr(left, operator.literal, right)

    def _parse_node(self) -> Optional[dict[str, Any]]:
        token = self._current()
        if token.type == TokenType.VAR:
            declaration = self.parse_var_declare()
            return None if declaration is None else {"VarDeclare": declaration.payload()}
        if token.type == TokenType.WRITE:
            write = self.parse_write_decl()
            return None if write is None else {"Write": write.payload()}
        self.errors.append(
            f"Token '{token.literal}' no reconocido position '{self.position}'"
        )
        return None

    def parse(self) -> tuple[dict[str, list[dict[str, Any]]], list[str]]:
        """Parse every statement; return the tree and the collected errors."""
        program: list[dict[str, Any]] = []
        while self.position < len(self.tokens):
            node = self._parse_node()
            if node is not None:
                program.append(node)
            else:
                self.next_token()
        return {"Program": program}, self.errors

    def parse_var_declare(self) -> Optional[VarDeclare]:
        """Parse ``var name = value;`` starting at the ``var`` token."""
        self.next_token()
        token = self._current()
        if token.type != TokenType.IDENT:
            self.errors.append(
                create_error_expected(self.position, 2, TokenType.IDENT.value, str(token.type))
            )
            return None
        name = token.literal

        self.next_token()
        token = self._current()
        if token.type != TokenType.ASSIGN:
            self.errors.append(
                create_error_expected(self.position, 2, TokenType.ASSIGN.value, str(token.type))
            )
            return None

        self.next_token()
        if is_arithmetic_symbol(self._peek().literal):
            left = self.parse_expression_type()
            value: Any = self.create_binary_expression(left)
        else:
            value = self.parse_expression_type()
            self.next_token()

        token = self._current()
        if token.type != TokenType.SEMICOLON:
            self.errors.append(f"Expected ';' but found '{token.literal}'")
            return None
        self.next_token()
        return VarDeclare(name, value)

    def parse_write_decl(self) -> Optional[WriteDecl]:
        """Parse ``write(value);`` starting at the ``write`` token.

        The position is left on the closing semicolon.
        """
        self.next_token()
        token = self._current()
        if token.type != TokenType.LPAREN:
            self.errors.append(f"Expected '(' but found '{token.literal}'.")
            return None

        self.next_token()
        value = self.parse_expression_type()

        self.next_token()
        token = self._current()
        if token.type != TokenType.RPAREN:
            self.errors.append(f"Expected ')' but found '{token.literal}'.")
            return None

        self.next_token()
        token = self._current()
        if token.type != TokenType.SEMICOLON:
            self.errors.append(f"Expected ';' but found '{token.literal}'.")
            return None
        return WriteDecl(value)