# Madlang language package
# This package provides a tree-walking evaluator for Madlang programs given as AST.
from .interpreter import run_program, Interpreter, FunctionValue, ReturnSignal
from .environment import Environment
from .errors import (
    MadlangError, TypeMismatch, UnboundReference, ArithmeticFault,
    StackExhausted, UnexpectedReturn,
)

__all__ = [
    'run_program',
    'Interpreter',
    'FunctionValue',
    'ReturnSignal',
    'Environment',
    'MadlangError',
    'TypeMismatch',
    'UnboundReference',
    'ArithmeticFault',
    'StackExhausted',
    'UnexpectedReturn',
]
