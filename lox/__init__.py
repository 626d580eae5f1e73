# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .errors import LoxRuntimeError, ErrorReporter
from .interpreter import Interpreter
from .parser import Parser
from .runner import Lox, run_program
from .scanner import Scanner

__all__ = [
    'run_program',
    'Lox',
    'Scanner',
    'Parser',
    'Interpreter',
    'ErrorReporter',
    'LoxRuntimeError',
]
