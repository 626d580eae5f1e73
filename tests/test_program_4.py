from pathlib import Path

from lox.interpreter import Interpreter
from lox.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_short_circuit(capsys):
    source = (EXAMPLES / 'program_4.lox').read_text(encoding='utf-8')
    statements = parse_program(source)
    interp = Interpreter()
    interp.run(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['hi', 'fallback', 'false', 'both', 'true', 'false', '0']
