import io
import pytest
from madlang.ast import Call, Literal, ExprStmt
from madlang.builtin_function import BuiltinFunction
from madlang.errors import TypeMismatch, UnboundReference
from madlang.interpreter import Interpreter
from madlang.types import NoneVal


def test_builtins_predeclared_in_global_scope():
    interp = Interpreter()
    assert isinstance(interp.global_env.lookup('output'), BuiltinFunction)
    assert isinstance(interp.global_env.lookup('input'), BuiltinFunction)


def test_output_writes_integer_line(capsys):
    interp = Interpreter()
    assert interp.evaluate(Call('output', [Literal(42)])) == NoneVal()
    interp.execute(ExprStmt(Call('output', [Literal(-7)])))
    assert capsys.readouterr().out == '42\n-7\n'


def test_output_to_injected_stream():
    out = io.StringIO()
    interp = Interpreter(stdout=out)
    interp.evaluate(Call('output', [Literal(5)]))
    assert out.getvalue() == '5\n'


@pytest.mark.parametrize('args', [[], [Literal(1), Literal(2)], [Literal(True)]])
def test_output_rejects_bad_arguments(args, capsys):
    interp = Interpreter()
    with pytest.raises(TypeMismatch):
        interp.evaluate(Call('output', args))
    assert capsys.readouterr().out == ''


def test_input_reads_successive_lines():
    interp = Interpreter(stdin=io.StringIO('12\n-3\n+4\n'))
    assert interp.evaluate(Call('input')) == 12
    assert interp.evaluate(Call('input')) == -3
    assert interp.evaluate(Call('input')) == 4


def test_input_uses_process_stdin(monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('99\n'))
    interp = Interpreter()
    assert interp.evaluate(Call('input')) == 99


@pytest.mark.parametrize('text', ['abc\n', '\n', '1.5\n', ' 7\n', '1_000\n', ''])
def test_input_rejects_malformed_or_missing_line(text):
    interp = Interpreter(stdin=io.StringIO(text))
    with pytest.raises(TypeMismatch):
        interp.evaluate(Call('input'))


def test_input_takes_no_arguments():
    interp = Interpreter(stdin=io.StringIO('1\n'))
    with pytest.raises(TypeMismatch):
        interp.evaluate(Call('input', [Literal(1)]))


def test_rebinding_builtin_name_makes_it_uncallable():
    interp = Interpreter()
    interp.global_env.declare('output', 3)
    with pytest.raises(UnboundReference):
        interp.evaluate(Call('output', [Literal(1)]))
