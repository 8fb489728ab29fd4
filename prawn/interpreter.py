"""Walks a parsed program and writes its output."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any, Iterable, Optional, TextIO

from .parser import BinaryExpr, NumberExpr, StringExpr, VarExpr


def render_value(node: Any, program: Iterable[Mapping[str, Any]], out: Optional[TextIO] = None) -> None:
    """Write the value of ``node``, resolving variables against ``program``.

    Strings are written as they are, numbers followed by a newline. A variable
    is written once for every declaration of that name. Binary expressions are
    not evaluated; their structure is printed.
    """
    out = sys.stdout if out is None else out
    if isinstance(node, StringExpr):
        out.write(node.value)
    elif isinstance(node, NumberExpr):
        out.write(f"{node.value}\n")
    elif isinstance(node, VarExpr):
        for statement in program:
            declaration = statement.get("VarDeclare")
            if isinstance(declaration, Mapping) and declaration.get("Ident") == node.name:
                render_value(declaration.get("Value"), program, out)
    elif isinstance(node, BinaryExpr):
        print(node, file=out)


def run(program: list[Mapping[str, Any]], out: Optional[TextIO] = None) -> None:
    """Execute every statement of ``program``."""
    out = sys.stdout if out is None else out
    for statement in program:
        if "VarDeclare" in statement:
            print("Declaracion de variable: ", statement["VarDeclare"], file=out)
        elif "Write" in statement:
            render_value(statement["Write"].get("Value"), program, out)