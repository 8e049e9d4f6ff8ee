import json
import pytest
from madlang.__main__ import main as cli_main
from madlang.ast import Program, FuncDecl, FuncParam, VarDecl, ReturnStmt, ExprStmt, Call, Literal, Variable
from madlang.ast_json import ast_to_obj, ast_from_obj, program_from_obj
from madlang.errors import UnboundReference
from madlang.interpreter import Interpreter, run_program


def hello_program():
    return Program([FuncDecl('main', [], [ExprStmt(Call('output', [Literal(7)]))])])


def test_run_program_success(capsys):
    assert run_program(hello_program()) == 0
    captured = capsys.readouterr()
    assert captured.out == '7\n'
    assert captured.err == ''


@pytest.mark.parametrize('program, message', [
    (Program([]), 'Error: unbound reference'),
    (Program([FuncDecl('main', [], [ExprStmt(Call('output', [Literal(True)]))])]), 'Error: type mismatch'),
    (Program([ReturnStmt(Literal(0))]), 'Error: unexpected return'),
])
def test_run_program_reports_failures(program, message, capsys):
    assert run_program(program) == 1
    assert capsys.readouterr().err.strip() == message


def test_debug_log_written(tmp_path, capsys):
    log = tmp_path / 'debug.txt'
    program = Program([VarDecl('g', Literal(1)), hello_program().body[0]])
    assert run_program(program, debug_level=3, debug_file=str(log)) == 0
    text = log.read_text(encoding='utf-8')
    assert 'declare g: Integer = 1' in text
    assert 'define function main()' in text
    assert 'call main' in text


def test_debug_log_records_error_detail(tmp_path):
    log = tmp_path / 'debug.txt'
    program = Program([FuncDecl('main', [], [ExprStmt(Variable('ghost'))])])
    interp = Interpreter(debug_level=1, debug_file=str(log))
    with pytest.raises(UnboundReference):
        interp.run(program)
    assert 'undefined variable ghost' in log.read_text(encoding='utf-8')
    assert interp.debug_fp is None


def test_json_round_trip_preserves_program():
    program = hello_program()
    assert ast_from_obj(json.loads(json.dumps(ast_to_obj(program)))) == program


def test_json_keeps_booleans_distinct_from_integers():
    literal = ast_from_obj({'type': 'Literal', 'value': True})
    assert literal.value is True


@pytest.mark.parametrize('obj', [
    {'type': 'Literal', 'value': 1.5},
    {'type': 'Literal', 'value': 'text'},
    {'type': 'Mystery'},
])
def test_json_rejects_invalid_nodes(obj):
    with pytest.raises(ValueError):
        ast_from_obj(obj)


def test_json_root_must_be_program():
    with pytest.raises(ValueError):
        program_from_obj({'type': 'Variable', 'name': 'x'})


def test_cli_runs_ast_file(tmp_path, capsys):
    path = tmp_path / 'hello.ast.json'
    path.write_text(json.dumps(ast_to_obj(hello_program())), encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        cli_main([str(path)])
    assert exc.value.code == 0
    assert capsys.readouterr().out == '7\n'


def test_cli_failure_status(tmp_path, capsys):
    path = tmp_path / 'empty.ast.json'
    path.write_text(json.dumps({'type': 'Program', 'body': []}), encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        cli_main([str(path)])
    assert exc.value.code == 1
    assert capsys.readouterr().err.strip() == 'Error: unbound reference'


def test_cli_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli_main([str(tmp_path / 'absent.json')])
    assert exc.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_debug_log_shows_call_scope(tmp_path):
    log = tmp_path / 'debug.txt'
    ident = FuncDecl('ident', [FuncParam('flag')], [ReturnStmt(Variable('flag'))])
    program = Program([ident, FuncDecl('main', [], [ExprStmt(Call('ident', [Literal(True)]))])])
    assert run_program(program, debug_level=3, debug_file=str(log)) == 0
    assert 'enter ident {flag = true}' in log.read_text(encoding='utf-8')


def test_cli_malformed_json(tmp_path, capsys):
    path = tmp_path / 'broken.ast.json'
    path.write_text('{"type": "Program", "body": [', encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        cli_main([str(path)])
    assert exc.value.code == 1
    assert 'Error: malformed AST' in capsys.readouterr().err
