import json
from pathlib import Path
from madlang.ast_json import program_from_obj
from madlang.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_factorial(capsys):
    with open(EXAMPLES / 'program_1.ast.json', 'r', encoding='utf-8') as f:
        program = program_from_obj(json.load(f))
    interp = Interpreter()
    interp.run(program)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['1', '1', '120']
