import io

from lox.errors import ErrorReporter
from lox.scanner import Scanner
from lox.tokens import TokenType


def scan(source):
    stream = io.StringIO()
    reporter = ErrorReporter(stream)
    tokens = Scanner(source, reporter).scan_tokens()
    return tokens, reporter, stream.getvalue()


def test_operators_and_punctuation():
    tokens, reporter, _ = scan('(){},.-+;/* ! != = == > >= < <=')
    assert [t.type for t in tokens] == [
        TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
        TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
        TokenType.SEMICOLON, TokenType.SLASH, TokenType.STAR,
        TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL,
        TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL,
        TokenType.EOF,
    ]
    assert not reporter.had_error


def test_keywords_are_distinguished_from_identifiers():
    tokens, _, _ = scan('var orchid = nil; fun or_else() { return this; }')
    kinds = [(t.type, t.lexeme) for t in tokens]
    assert kinds[:5] == [
        (TokenType.VAR, 'var'),
        (TokenType.IDENTIFIER, 'orchid'),
        (TokenType.EQUAL, '='),
        (TokenType.NIL, 'nil'),
        (TokenType.SEMICOLON, ';'),
    ]
    assert (TokenType.IDENTIFIER, 'or_else') in kinds
    assert (TokenType.THIS, 'this') in kinds


def test_literals_carry_values():
    tokens, _, _ = scan('12 3.25 "two words"')
    number, decimal, string = tokens[:3]
    assert number.type is TokenType.NUMBER and number.literal == 12.0
    assert isinstance(number.literal, float)
    assert decimal.literal == 3.25
    assert string.type is TokenType.STRING
    assert string.lexeme == '"two words"'
    assert string.literal == 'two words'


def test_trailing_dot_is_not_part_of_number():
    tokens, _, _ = scan('123.')
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]


def test_comments_and_whitespace_are_skipped_and_lines_counted():
    source = 'var a = 1; // trailing comment\n\n// whole line\nprint a;\n'
    tokens, _, _ = scan(source)
    print_token = next(t for t in tokens if t.type is TokenType.PRINT)
    assert print_token.line == 4
    assert tokens[-1].type is TokenType.EOF
    assert tokens[-1].line == 5
    assert all(t.type is not TokenType.SLASH for t in tokens)


def test_division_is_not_a_comment():
    tokens, _, _ = scan('a / b')
    assert [t.type for t in tokens] == [
        TokenType.IDENTIFIER, TokenType.SLASH, TokenType.IDENTIFIER, TokenType.EOF,
    ]


def test_multiline_string_advances_line_count():
    tokens, _, _ = scan('"one\ntwo"\nx')
    assert tokens[0].literal == 'one\ntwo'
    assert tokens[0].line == 2
    assert tokens[1].lexeme == 'x'
    assert tokens[1].line == 3


def test_unexpected_character_is_reported_and_scanning_continues():
    tokens, reporter, err = scan('var a = 1;\nvar b @ 2;\nprint a # b;')
    assert reporter.had_error
    assert err == (
        "[line 2] Error: Unexpected character.\n"
        "[line 3] Error: Unexpected character.\n"
    )
    lexemes = [t.lexeme for t in tokens]
    assert lexemes == ['var', 'a', '=', '1', ';', 'var', 'b', '2', ';', 'print', 'a', 'b', ';', '']
    assert tokens[-2].line == 3


def test_unterminated_string():
    tokens, reporter, err = scan('print "oops\n')
    assert reporter.had_error
    assert err == "[line 2] Error: Unterminated string.\n"
    assert [t.type for t in tokens] == [TokenType.PRINT, TokenType.EOF]


def test_empty_source_yields_only_eof():
    tokens, reporter, _ = scan('')
    assert len(tokens) == 1
    assert tokens[0].type is TokenType.EOF
    assert tokens[0].line == 1
    assert not reporter.had_error
