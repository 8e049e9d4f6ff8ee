from .basic_io import BasicIO
from madlang.builtin_function import BuiltinFunction
from madlang.errors import TypeMismatch
from madlang.environment import Environment
from madlang.types import NoneVal, is_integer, parse_integer, type_name
from typing import List, Any, Optional

def populate_io_environment(basic_io: Optional[BasicIO] = None) -> Environment:
        basic_io = basic_io if basic_io is not None else BasicIO()
        io_env = Environment()

        def std_output(args: List[Any]) -> Any:
            if len(args) != 1:
                raise TypeMismatch('output(x) expects 1 argument')
            value = args[0]
            if not is_integer(value):
                raise TypeMismatch(f'output argument must be Integer, got {type_name(value)}')
            basic_io.write_line(str(value))
            return NoneVal()

        def std_input(args: List[Any]) -> Any:
            if len(args) != 0:
                raise TypeMismatch('input() expects 0 arguments')
            line = basic_io.read_line()
            if line is None:
                raise TypeMismatch('input reached end of stream')
            try:
                return parse_integer(line)
            except ValueError as e:
                raise TypeMismatch(str(e))

        io_env.declare('output', BuiltinFunction('output', 1, std_output))
        io_env.declare('input', BuiltinFunction('input', 0, std_input))

        return io_env
