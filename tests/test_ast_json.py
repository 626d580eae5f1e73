import json

import pytest

from lox.ast import Binary, Function, Literal, Print
from lox.ast_json import ast_from_obj, program_from_obj, program_to_obj
from lox.interpreter import Interpreter
from lox.parser import parse_program
from lox.tokens import TokenType

SOURCE = '''
var total = 0;
fun add(a, b) { return a + b; }
for (var i = 1; i <= 4; i = i + 1) {
  if (i == 3) total = add(total, 10); else total = add(total, i);
}
print total;
print !nil and "done";
'''


def test_program_roundtrip_through_json(capsys):
    statements = parse_program(SOURCE)
    text = json.dumps(program_to_obj(statements))
    restored = program_from_obj(json.loads(text))
    assert restored == statements

    Interpreter().run(restored)
    assert capsys.readouterr().out == '17\ndone\n'


def test_tokens_keep_their_type_and_line():
    statements = parse_program('fun f(x) {\n  print x * 2;\n}')
    restored = program_from_obj(json.loads(json.dumps(program_to_obj(statements))))
    func = restored[0]
    assert isinstance(func, Function)
    assert func.name.type is TokenType.IDENTIFIER
    binary = func.body[0].expression
    assert isinstance(binary, Binary)
    assert binary.operator.type is TokenType.STAR
    assert binary.operator.line == 2


def test_integer_literal_becomes_number():
    node = ast_from_obj({"type": "Print", "expression": {"type": "Literal", "value": 3}})
    assert node == Print(Literal(3.0))
    assert isinstance(node.expression.value, float)


def test_rejects_non_program():
    with pytest.raises(ValueError):
        program_from_obj({"type": "Block", "statements": []})


def test_rejects_unknown_node():
    with pytest.raises(ValueError):
        program_from_obj({"type": "Program", "body": [{"type": "Class"}]})
