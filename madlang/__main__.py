"""CLI entry point for the Madlang evaluator.

Usage:
    python -m madlang [-v|-vv|-vvv] <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)

The program is read as a JSON AST (see `madlang.ast_json`) produced by a
separate front end. Debug information is written to `debug.txt` in the
current directory when verbosity is greater than zero. The exit status is
0 when `main` completes and 1 on any runtime failure.
"""

import argparse
import json
import sys
from pathlib import Path
from .ast_json import program_from_obj
from .interpreter import run_program


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Madlang AST evaluator")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='where debug output is written')
    parser.add_argument('program', help='Madlang program as an AST JSON file')
    args = parser.parse_args(argv)

    ast_path = Path(args.program)
    if not ast_path.exists():
        print(f"Error: file {ast_path} not found", file=sys.stderr)
        sys.exit(1)
    try:
        with open(ast_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        program = program_from_obj(data)
    except (KeyError, TypeError, ValueError) as e:
        print(f"Error: malformed AST: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(run_program(program, debug_level=args.v, debug_file=args.debug_file))

if __name__ == '__main__':
    main()
