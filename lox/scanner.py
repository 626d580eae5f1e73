"""Lexical scanner for the Lox language.

The scanner is built on a Lark lexer configured with the Lox lexicon.
Lark only provides the raw terminals; this module converts them into
`Token` objects carrying literal values and line numbers, reports
malformed input through the `ErrorReporter`, and appends the EOF token
the parser expects.

Scanning never stops at the first problem. An unexpected character is
reported and skipped, and lexing resumes right after it, so a single run
reports every bad character in the source.
"""

from __future__ import annotations

from typing import List, Optional

from lark import Lark, UnexpectedCharacters

from .errors import ErrorReporter
from .tokens import Token, TokenType


LOX_LEXICON = r"""
    start: _token*

    _token: LEFT_PAREN | RIGHT_PAREN | LEFT_BRACE | RIGHT_BRACE
          | COMMA | DOT | MINUS | PLUS | SEMICOLON | SLASH | STAR
          | BANG | BANG_EQUAL | EQUAL | EQUAL_EQUAL
          | GREATER | GREATER_EQUAL | LESS | LESS_EQUAL
          | IDENTIFIER | STRING | UNTERMINATED_STRING | NUMBER
          | AND | CLASS | ELSE | FALSE | FUN | FOR | IF | NIL | OR
          | PRINT | RETURN | SUPER | THIS | TRUE | VAR | WHILE

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    COMMA: ","
    DOT: "."
    MINUS: "-"
    PLUS: "+"
    SEMICOLON: ";"
    SLASH: "/"
    STAR: "*"

    BANG: "!"
    BANG_EQUAL: "!="
    EQUAL: "="
    EQUAL_EQUAL: "=="
    GREATER: ">"
    GREATER_EQUAL: ">="
    LESS: "<"
    LESS_EQUAL: "<="

    // Keywords are matched by IDENTIFIER first and retyped by Lark.
    AND: "and"
    CLASS: "class"
    ELSE: "else"
    FALSE: "false"
    FUN: "fun"
    FOR: "for"
    IF: "if"
    NIL: "nil"
    OR: "or"
    PRINT: "print"
    RETURN: "return"
    SUPER: "super"
    THIS: "this"
    TRUE: "true"
    VAR: "var"
    WHILE: "while"

    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
    NUMBER: /[0-9]+(\.[0-9]+)?/
    STRING.2: /"[^"]*"/
    UNTERMINATED_STRING: /"[^"]*/

    COMMENT: /\/\/[^\n]*/
    %ignore COMMENT
    %import common.WS
    %ignore WS
"""


LOX_LEXER = Lark(
    LOX_LEXICON,
    parser='lalr',
    lexer='basic',
)


class Scanner:
    """Turns Lox source text into a list of tokens ending with EOF."""

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: List[Token] = []

    def scan_tokens(self) -> List[Token]:
        offset = 0
        line_base = 1
        while True:
            try:
                for raw in LOX_LEXER.lex(self.source[offset:]):
                    self.add_token(raw, line_base)
                break
            except UnexpectedCharacters as e:
                # Lark reports positions relative to the slice it was given
                line = line_base + e.line - 1
                self.reporter.error(line, "Unexpected character.")
                offset += e.pos_in_stream + 1
                line_base = line
        self.tokens.append(Token(TokenType.EOF, '', None, self.source.count('\n') + 1))
        return self.tokens

    def add_token(self, raw, line_base: int) -> None:
        # A string spanning lines belongs to the line it ends on
        line = line_base + raw.end_line - 1
        if raw.type == 'UNTERMINATED_STRING':
            self.reporter.error(line, "Unterminated string.")
            return
        token_type = TokenType[raw.type]
        lexeme = str(raw)
        literal = None
        if token_type is TokenType.NUMBER:
            literal = float(lexeme)
        elif token_type is TokenType.STRING:
            literal = lexeme[1:-1]
        self.tokens.append(Token(token_type, lexeme, literal, line))
