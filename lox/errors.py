from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional, TextIO

from .tokens import Token, TokenType


class ParseError(Exception):
    """Internal exception used by the parser to unwind into panic mode.

    The diagnostic has already been reported by the time this is raised.
    """
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


@dataclass
class ReturnSignal:
    """Result of executing a `return` statement.

    Statement execution hands this back to its caller instead of raising,
    and it travels up until the function call that owns the body.
    """
    value: Any


class ErrorReporter:
    """Collects and formats diagnostics for a run of the interpreter."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str) -> None:
        self.report(line, '', message)

    def token_error(self, token: Token, message: str) -> None:
        if token.type is TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str) -> None:
        self.write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError) -> None:
        self.write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def write(self, text: str) -> None:
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def reset(self) -> None:
        self.had_error = False
        self.had_runtime_error = False
