"""Tree-walking evaluator for the Madlang language.

The interpreter executes an already-built AST (see `madlang.ast`). It keeps
a single global environment, pre-populated with the `output` and `input`
built-ins, and a cursor to the environment currently in effect. Blocks and
function calls move the cursor into a fresh child scope and always put it
back, whether the scope finishes normally, returns, or fails.

Statements produce either None (carry on) or a `ReturnSignal` holding the
value of a `return`; the signal is passed back up through enclosing blocks
and loops until `call_function` consumes it. Runtime failures are raised as
`MadlangError` subclasses and are never caught inside the interpreter.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, List, Optional, TextIO

from .std.io import BasicIO, populate_io_environment
from .types import (
    NoneVal, is_integer, is_boolean, same_kind, type_name, to_string,
    truncating_divide, truncating_remainder,
)
from .ast import (
    Program, VarDecl, FuncDecl, Block, IfStmt, WhileStmt, ReturnStmt,
    ExprStmt, Assign, BinaryOp, UnaryOp, Literal, Variable, Call, Node,
)
from .errors import (
    MadlangError, TypeMismatch, UnboundReference, ArithmeticFault,
    StackExhausted, UnexpectedReturn,
)
from .environment import Environment
from .builtin_function import BuiltinFunction


# Each Madlang call costs several Python frames; the default limit of 1000
# would cap programs at roughly 150 nested calls
RECURSION_LIMIT = 10000

ARITHMETIC_OPS = ('+', '-', '*', '/', '%')
COMPARISON_OPS = ('<', '<=', '>', '>=')
EQUALITY_OPS = ('==', '!=')


@dataclass
class ReturnSignal:
    """Result of executing a `return`: unwinds to the nearest call."""
    value: Any


class FunctionValue:
    """Represents a user-defined Madlang function."""
    def __init__(self, name: str, params: List[str], body: List[Node], closure: Environment):
        self.name = name
        self.params = tuple(params)
        self.body = body
        self.closure = closure  # environment active where the function was declared

    def __repr__(self) -> str:
        return f"<function {self.name}>"


class Interpreter:
    """Core interpreter that executes Madlang AST."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt',
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.global_env = Environment()
        self.current_env = self.global_env
        self.io = BasicIO(stdin, stdout)
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 and debug_file else None
        self.load_standard_module()

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            elif self.debug_file is None:
                print(msg, file=sys.stderr)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def load_standard_module(self):
        io_env = populate_io_environment(self.io)
        for name, builtin in io_env.values.items():
            self.global_env.declare(name, builtin)

    # Public API
    def run(self, program: Program) -> Any:
        """Execute the top-level declarations, then call `main()`.

        Returns main's result (NoneVal when it does not return a value).
        Raises MadlangError on any runtime failure and UnexpectedReturn if a
        return is executed outside every function.
        """
        self.debug(f"run: {len(program.body)} top-level statements")
        saved_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(saved_limit, RECURSION_LIMIT))
        try:
            for stmt in program.body:
                if self.execute(stmt) is not None:
                    raise UnexpectedReturn()
            main = self.global_env.lookup('main')
            if not isinstance(main, FunctionValue):
                raise UnboundReference('main is not a function')
            self.debug("call main")
            return self.call_function(main, [])
        except RecursionError:
            self.debug("error: host stack exhausted")
            raise StackExhausted('maximum recursion depth exceeded') from None
        except MadlangError as e:
            self.debug(f"error: {e} ({e.detail})")
            raise
        finally:
            sys.setrecursionlimit(saved_limit)
            self.close()

    def execute_block(self, statements: List[Node], env: Environment) -> Optional[ReturnSignal]:
        previous = self.current_env
        self.current_env = env
        try:
            for stmt in statements:
                result = self.execute(stmt)
                # propagate return signals
                if isinstance(result, ReturnSignal):
                    return result
            return None
        finally:
            self.current_env = previous

    def execute(self, node: Node) -> Optional[ReturnSignal]:
        env = self.current_env
        if isinstance(node, VarDecl):
            value = self.evaluate(node.initializer) if node.initializer is not None else NoneVal()
            env.declare(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name}: {type_name(value)} = {to_string(value)}")
            return None
        if isinstance(node, Assign):
            value = self.evaluate(node.value)
            env.assign(node.name, value)
            if self.debug_level >= 3:
                self.debug(f"assign {node.name} = {to_string(value)}")
            return None
        if isinstance(node, FuncDecl):
            func_value = FunctionValue(node.name, [p.name for p in node.params], node.body, env)
            env.declare(node.name, func_value)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name}({', '.join(func_value.params)})")
            return None
        if isinstance(node, Block):
            return self.execute_block(node.statements, Environment(parent=env))
        if isinstance(node, IfStmt):
            cond = self.evaluate(node.condition)
            self.expect_boolean(cond, 'if condition')
            if self.debug_level >= 3:
                self.debug(f"if condition -> {to_string(cond)}")
            if cond:
                return self.execute(node.then_branch)
            if node.else_branch is not None:
                return self.execute(node.else_branch)
            return None
        if isinstance(node, WhileStmt):
            while True:
                cond = self.evaluate(node.condition)
                self.expect_boolean(cond, 'while condition')
                if not cond:
                    break
                res = self.execute(node.body)
                if isinstance(res, ReturnSignal):
                    return res
            return None
        if isinstance(node, ReturnStmt):
            value = self.evaluate(node.value) if node.value is not None else NoneVal()
            if self.debug_level >= 3:
                self.debug(f"return {to_string(value)}")
            return ReturnSignal(value)
        if isinstance(node, ExprStmt):
            self.evaluate(node.expr)
            return None
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Node) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Variable):
            return self.current_env.lookup(node.name)
        if isinstance(node, UnaryOp):
            operand = self.evaluate(node.operand)
            if node.op == '-':
                if not is_integer(operand):
                    raise TypeMismatch(f'unary - expects Integer, got {type_name(operand)}')
                return -operand
            if node.op == '!':
                self.expect_boolean(operand, 'unary !')
                return not operand
            raise TypeMismatch(f'unsupported unary operator {node.op}')
        if isinstance(node, BinaryOp):
            left = self.evaluate(node.left)
            # Short-circuit: the right operand is not evaluated at all
            if node.op == '&&':
                self.expect_boolean(left, 'left operand of &&')
                if not left:
                    return False
                right = self.evaluate(node.right)
                self.expect_boolean(right, 'right operand of &&')
                return right
            if node.op == '||':
                self.expect_boolean(left, 'left operand of ||')
                if left:
                    return True
                right = self.evaluate(node.right)
                self.expect_boolean(right, 'right operand of ||')
                return right
            right = self.evaluate(node.right)
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, Call):
            func = self.current_env.lookup(node.name)
            if not isinstance(func, (FunctionValue, BuiltinFunction)):
                raise UnboundReference(f'{node.name} is not a function')
            args = [self.evaluate(arg) for arg in node.args]
            return self.call_function(func, args)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, func: Any, args: List[Any]) -> Any:
        if isinstance(func, BuiltinFunction):
            if func.arity is not None and len(args) != func.arity:
                raise TypeMismatch(f"{func.name} expects {func.arity} arguments, got {len(args)}")
            return func.fn(args)
        if isinstance(func, FunctionValue):
            if len(args) != len(func.params):
                raise TypeMismatch(f"{func.name} expects {len(func.params)} arguments, got {len(args)}")
            if self.debug_level >= 2:
                self.debug(f"call {func.name}({', '.join(to_string(a) for a in args)})")
            # New frame is parented to the closure, not the caller
            call_env = Environment(parent=func.closure)
            for param, arg in zip(func.params, args):
                call_env.declare(param, arg)
            if self.debug_level >= 3:
                self.debug(f"enter {func.name} {call_env!r}")
            res = self.execute_block(func.body, call_env)
            if isinstance(res, ReturnSignal):
                return res.value
            return NoneVal()
        raise UnboundReference(f'{func!r} is not callable')

    def expect_boolean(self, value: Any, what: str):
        if not is_boolean(value):
            raise TypeMismatch(f'{what} must be Boolean, got {type_name(value)}')

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        if op in ARITHMETIC_OPS:
            if not (is_integer(a) and is_integer(b)):
                raise TypeMismatch(f'unsupported {op} for {type_name(a)} and {type_name(b)}')
            if op == '+':
                return a + b
            if op == '-':
                return a - b
            if op == '*':
                return a * b
            if b == 0:
                raise ArithmeticFault('division by zero' if op == '/' else 'modulo by zero')
            if op == '/':
                return truncating_divide(a, b)
            return truncating_remainder(a, b)
        if op in COMPARISON_OPS:
            if not (is_integer(a) and is_integer(b)):
                raise TypeMismatch(f'comparison not supported for {type_name(a)} and {type_name(b)}')
            if op == '<': return a < b
            if op == '<=': return a <= b
            if op == '>': return a > b
            return a >= b
        if op in EQUALITY_OPS:
            if not same_kind(a, b):
                raise TypeMismatch(f'cannot compare {type_name(a)} with {type_name(b)}')
            return (a == b) if op == '==' else (a != b)
        raise TypeMismatch(f'unknown operator {op}')


def run_program(program: Program, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt',
                stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Run a program as the top-level driver and return the process exit status.

    Failures are reported on stderr; the exit status is 0 on success and 1
    otherwise.
    """
    interpreter = Interpreter(debug_level=debug_level, debug_file=debug_file, stdin=stdin, stdout=stdout)
    try:
        interpreter.run(program)
    except MadlangError as e:
        print(e, file=sys.stderr)
        return 1
    except UnexpectedReturn as e:
        print(e, file=sys.stderr)
        return 1
    return 0
