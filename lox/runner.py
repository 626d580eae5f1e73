"""Driver that ties the scanner, parser and interpreter together.

A `Lox` instance owns one interpreter, so globals defined by one call to
`run` are visible to the next. That is what the interactive prompt
relies on. Syntax errors stop a run before anything is executed; a
runtime error aborts the run and is reported once.
"""

from __future__ import annotations

import builtins
from pathlib import Path
from typing import List, Optional, TextIO

from .ast import Stmt
from .errors import ErrorReporter, LoxRuntimeError
from .interpreter import Interpreter
from .parser import parse_program

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70


class Lox:
    def __init__(self, debug_level: int = 0, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.reporter = ErrorReporter(stderr)
        self.interpreter = Interpreter(debug_level=debug_level, stdout=stdout)

    @property
    def had_error(self) -> bool:
        return self.reporter.had_error

    @property
    def had_runtime_error(self) -> bool:
        return self.reporter.had_runtime_error

    def parse(self, source: str) -> List[Stmt]:
        return parse_program(source, self.reporter)

    def run(self, source: str) -> None:
        statements = self.parse(source)
        if self.reporter.had_error:
            return
        self.execute(statements)

    def execute(self, statements: List[Stmt]) -> None:
        try:
            self.interpreter.run(statements)
        except LoxRuntimeError as e:
            self.reporter.runtime_error(e)

    def exit_code(self) -> int:
        if self.reporter.had_error:
            return EXIT_DATA_ERROR
        if self.reporter.had_runtime_error:
            return EXIT_SOFTWARE
        return EXIT_OK

    def run_file(self, path: str) -> int:
        source = Path(path).read_text(encoding='utf-8')
        try:
            self.run(source)
        finally:
            self.interpreter.close()
        return self.exit_code()

    def run_prompt(self) -> int:
        try:
            while True:
                try:
                    line = builtins.input('> ')
                except EOFError:
                    break
                self.run(line)
                # A mistake on one line must not end the session
                self.reporter.reset()
        finally:
            self.interpreter.close()
        return EXIT_OK


def run_program(source: str, debug_level: int = 0) -> int:
    """Convenience function to run a Lox program from a source string.

    Returns the exit code a command-line run of the same program would use.
    """
    lox = Lox(debug_level=debug_level)
    try:
        lox.run(source)
    finally:
        lox.interpreter.close()
    return lox.exit_code()
