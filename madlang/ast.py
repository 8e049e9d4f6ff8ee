"""Abstract Syntax Tree (AST) definitions for the Madlang language.

The evaluator consumes these nodes as plain data; building them from
source text is the job of a separate front end. Statement nodes are
executed for their effects, expression nodes evaluate to a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Any


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    body: List[Node]


@dataclass
class VarDecl(Node):
    name: str
    initializer: Optional[Node] = None
    var_type: Optional[str] = None  # 'int' or 'bool'; informational only


@dataclass
class FuncParam:
    name: str
    param_type: Optional[str] = None


@dataclass
class FuncDecl(Node):
    name: str
    params: List[FuncParam]
    body: List[Node]
    return_type: Optional[str] = None


@dataclass
class Block(Node):
    statements: List[Node] = field(default_factory=list)


@dataclass
class IfStmt(Node):
    condition: Node
    then_branch: Node
    else_branch: Optional[Node] = None


@dataclass
class WhileStmt(Node):
    condition: Node
    body: Node


@dataclass
class ReturnStmt(Node):
    value: Optional[Node] = None


@dataclass
class ExprStmt(Node):
    expr: Node


@dataclass
class Assign(Node):
    name: str
    value: Node


@dataclass
class BinaryOp(Node):
    op: str  # one of + - * / % < <= > >= == != && ||
    left: Node
    right: Node


@dataclass
class UnaryOp(Node):
    op: str  # '-' or '!'
    operand: Node


@dataclass
class Literal(Node):
    value: Any  # int or bool


@dataclass
class Variable(Node):
    name: str


@dataclass
class Call(Node):
    name: str
    args: List[Node] = field(default_factory=list)
