import json
from pathlib import Path
from madlang.ast_json import program_from_obj
from madlang.interpreter import run_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_division_by_zero_halts(capsys):
    with open(EXAMPLES / 'program_4.ast.json', 'r', encoding='utf-8') as f:
        program = program_from_obj(json.load(f))
    status = run_program(program)
    captured = capsys.readouterr()
    # Output before the fault is kept; nothing after it runs
    assert captured.out.strip() == '1'
    assert captured.err.strip() == 'Error: arithmetic error'
    assert status == 1
