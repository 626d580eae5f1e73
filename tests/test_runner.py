import io

import builtins

from lox.runner import EXIT_DATA_ERROR, EXIT_OK, EXIT_SOFTWARE, Lox, run_program


def make_lox():
    stdout, stderr = io.StringIO(), io.StringIO()
    return Lox(stdout=stdout, stderr=stderr), stdout, stderr


def feed(monkeypatch, lines):
    pending = list(lines)

    def fake_input(prompt=''):
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr(builtins, 'input', fake_input)


def test_syntax_errors_are_all_reported():
    lox, stdout, stderr = make_lox()
    lox.run('var = 1;\nprint "ok";\nprint (1;\n')
    assert stdout.getvalue() == ''
    assert stderr.getvalue() == (
        "[line 1] Error at '=': Expect variable name.\n"
        "[line 3] Error at ';': Expect ')' after expression.\n"
    )
    assert lox.exit_code() == EXIT_DATA_ERROR


def test_error_at_end_of_input():
    lox, _, stderr = make_lox()
    lox.run('print 1')
    assert stderr.getvalue() == "[line 1] Error at end: Expect ';' after value.\n"


def test_scanner_errors_are_reported_with_parse_errors():
    lox, _, stderr = make_lox()
    lox.run('print 1 @ 2;')
    assert stderr.getvalue().splitlines()[0] == "[line 1] Error: Unexpected character."
    assert lox.had_error


def test_runtime_error_exit_code():
    lox, stdout, stderr = make_lox()
    lox.run('print "a";\nprint -nil;')
    assert stdout.getvalue() == 'a\n'
    assert stderr.getvalue() == "Operand must be a number.\n[line 2]\n"
    assert lox.exit_code() == EXIT_SOFTWARE


def test_clean_run_exit_code():
    lox, stdout, _ = make_lox()
    lox.run('print 1 + 1;')
    assert stdout.getvalue() == '2\n'
    assert lox.exit_code() == EXIT_OK


def test_prompt_keeps_globals_between_lines(monkeypatch):
    lox, stdout, _ = make_lox()
    feed(monkeypatch, ['var a = 1;', 'fun inc() { a = a + 1; }', 'inc();', 'print a;'])
    assert lox.run_prompt() == EXIT_OK
    assert stdout.getvalue() == '2\n'


def test_prompt_recovers_after_errors(monkeypatch):
    lox, stdout, stderr = make_lox()
    feed(monkeypatch, ['print ;', 'print missing;', 'print "still here";'])
    assert lox.run_prompt() == EXIT_OK
    assert stdout.getvalue() == 'still here\n'
    assert stderr.getvalue() == (
        "[line 1] Error at ';': Expect expression.\n"
        "Undefined variable 'missing'.\n[line 1]\n"
    )


def test_run_file(tmp_path):
    script = tmp_path / 'script.lox'
    script.write_text('var greeting = "hi";\nprint greeting + "!";\n', encoding='utf-8')
    lox, stdout, _ = make_lox()
    assert lox.run_file(str(script)) == EXIT_OK
    assert stdout.getvalue() == 'hi!\n'


def test_run_program(capsys):
    assert run_program('print 3 * 4;') == EXIT_OK
    assert capsys.readouterr().out == '12\n'
    assert run_program('print 1 +;') == EXIT_DATA_ERROR
    assert run_program('print nil < 1;') == EXIT_SOFTWARE


def test_top_level_return_is_a_syntax_error():
    lox, stdout, stderr = make_lox()
    lox.run('if (true) return 1;\nprint "after";')
    assert stdout.getvalue() == ''
    assert stderr.getvalue() == "[line 1] Error at 'return': Can't return from top-level code.\n"
    assert lox.exit_code() == EXIT_DATA_ERROR
