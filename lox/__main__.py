"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [script]
    python -m lox [-v...] --emit-ast <script>
    python -m lox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .lox file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script the interpreter starts an interactive prompt. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.

Exit codes: 64 for a malformed command line, 65 when the program has a
syntax error, 66 when an input file is missing, 70 when it stops on a
runtime error, 0 otherwise.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast_json import program_from_obj, program_to_obj
from .runner import EXIT_DATA_ERROR, EXIT_NO_INPUT, EXIT_OK, EXIT_USAGE, Lox


class LoxArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = LoxArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Lox script (.lox) to execute; omit for a prompt')
    args = parser.parse_args(argv)

    if (args.emit_ast or args.ast) and args.script:
        parser.error('a script cannot be combined with --emit-ast/--ast')

    lox = Lox(debug_level=args.v)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            return EXIT_NO_INPUT
        statements = lox.parse(program_file.read_text(encoding='utf-8'))
        if lox.had_error:
            return EXIT_DATA_ERROR
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return EXIT_OK

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            return EXIT_NO_INPUT
        with open(ast_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        try:
            statements = program_from_obj(data)
        except (KeyError, TypeError, ValueError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            return EXIT_DATA_ERROR
        try:
            lox.execute(statements)
        finally:
            lox.interpreter.close()
        return lox.exit_code()

    if args.script:
        program_file = Path(args.script)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            return EXIT_NO_INPUT
        return lox.run_file(str(program_file))

    return lox.run_prompt()


if __name__ == '__main__':
    sys.exit(main())
