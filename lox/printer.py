"""Canonical source rendering of Lox expressions.

`print_expr` turns an expression tree back into Lox source text. Every
unary, binary, logical and assignment node is wrapped in parentheses, so
the output never depends on precedence rules and parsing it again gives
an expression that evaluates to the same value.

    1 + 2 * -x   renders as   (1 + (2 * (-x)))
"""

from __future__ import annotations

from decimal import Decimal

from .ast import (
    Expr, Literal, Grouping, Unary, Binary, Logical, Variable, Assign, Call,
)
from .values import format_number


def print_expr(expr: Expr) -> str:
    if isinstance(expr, Literal):
        return print_literal(expr.value)
    if isinstance(expr, Grouping):
        return f"({print_expr(expr.expression)})"
    if isinstance(expr, Unary):
        return f"({expr.operator.lexeme}{print_expr(expr.right)})"
    if isinstance(expr, (Binary, Logical)):
        return f"({print_expr(expr.left)} {expr.operator.lexeme} {print_expr(expr.right)})"
    if isinstance(expr, Variable):
        return expr.name.lexeme
    if isinstance(expr, Assign):
        return f"({expr.name.lexeme} = {print_expr(expr.value)})"
    if isinstance(expr, Call):
        args = ', '.join(print_expr(arg) for arg in expr.arguments)
        return f"{print_expr(expr.callee)}({args})"
    raise TypeError(f"Unsupported node for printing: {type(expr).__name__}")


def print_literal(value) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        text = format_number(value)
        # Lox has no negative literals or exponent syntax
        if value < 0:
            return f"(-{print_literal(-value)})"
        if 'e' in text:
            return format(Decimal(text), "f")
        return text
    if isinstance(value, str):
        return f'"{value}"'
    raise TypeError(f"Unsupported literal: {value!r}")
