from pathlib import Path

from lox.interpreter import Interpreter
from lox.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_stringification(capsys):
    """Test program 7: how values are printed.

    Integral numbers drop the trailing ".0", division by zero follows
    IEEE-754 rather than raising, and functions print as opaque labels.
    """
    source = (EXAMPLES / 'program_7.lox').read_text(encoding='utf-8')
    statements = parse_program(source)
    interp = Interpreter()
    interp.run(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == [
        '7', '1.5', '2.5', '5', '-3', 'concat',
        'nil', 'true', 'true', 'Infinity',
        '<fn named>', '<native fn>',
    ]
