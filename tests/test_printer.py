import pytest

from lox.interpreter import Interpreter
from lox.parser import Parser
from lox.printer import print_expr
from lox.scanner import Scanner


def parse_expr(source):
    return Parser(Scanner(source).scan_tokens()).parse_expression()


def evaluate(source):
    interp = Interpreter()
    return interp.evaluate(parse_expr(source), interp.global_env)


@pytest.mark.parametrize('source, expected', [
    ('1 + 2 * 3', '(1 + (2 * 3))'),
    ('(1 + 2) * 3', '(((1 + 2)) * 3)'),
    ('-x', '(-x)'),
    ('!!true', '(!(!true))'),
    ('a or b and c', '(a or (b and c))'),
    ('a = b = 1', '(a = (b = 1))'),
    ('f(1, "two")(nil)', 'f(1, "two")(nil)'),
    ('1.5 >= 0.25', '(1.5 >= 0.25)'),
])
def test_print_expr(source, expected):
    assert print_expr(parse_expr(source)) == expected


@pytest.mark.parametrize('source', [
    '1 - 2 - 3',
    '2 * (3 + 4) / 7',
    '-(1 - 5) * 2',
    '"a" + "b" == "ab"',
    'nil or false or "x"',
    '!(1 < 2) and true',
    '10 / 4 + 0.5',
])
def test_printed_expression_evaluates_the_same(source):
    printed = print_expr(parse_expr(source))
    assert evaluate(printed) == evaluate(source)
