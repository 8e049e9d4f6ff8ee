"""JSON serialization/deserialization for Madlang AST.

This module converts between Madlang AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Every node is an object
with a ``"type"`` key naming its class; this is the form in which an
external front end hands programs to the evaluator.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    VarDecl,
    FuncParam,
    FuncDecl,
    Block,
    IfStmt,
    WhileStmt,
    ReturnStmt,
    ExprStmt,
    Assign,
    BinaryOp,
    UnaryOp,
    Literal,
    Variable,
    Call,
)


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, VarDecl):
        return {
            "type": "VarDecl",
            "name": node.name,
            "initializer": ast_to_obj(node.initializer),
            "var_type": node.var_type,
        }
    if isinstance(node, FuncParam):
        return {"type": "FuncParam", "name": node.name, "param_type": node.param_type}
    if isinstance(node, FuncDecl):
        return {
            "type": "FuncDecl",
            "name": node.name,
            "params": [ast_to_obj(p) for p in node.params],
            "body": [ast_to_obj(s) for s in node.body],
            "return_type": node.return_type,
        }
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, IfStmt):
        return {
            "type": "IfStmt",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, WhileStmt):
        return {"type": "WhileStmt", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}
    if isinstance(node, ReturnStmt):
        return {"type": "ReturnStmt", "value": ast_to_obj(node.value)}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": node.name}
    if isinstance(node, Call):
        return {"type": "Call", "name": node.name, "args": [ast_to_obj(a) for a in node.args]}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def _literal_value(value: Any) -> Any:
    # JSON keeps true/false distinct from numbers; floats and strings are not Madlang values
    if isinstance(value, bool) or isinstance(value, int):
        return value
    raise ValueError(f"Literal value must be an integer or boolean, got {value!r}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "VarDecl":
        return VarDecl(
            name=obj["name"],
            initializer=ast_from_obj(obj.get("initializer")),
            var_type=obj.get("var_type"),
        )
    if t == "FuncParam":
        return FuncParam(name=obj["name"], param_type=obj.get("param_type"))
    if t == "FuncDecl":
        return FuncDecl(
            name=obj["name"],
            params=[ast_from_obj(p) for p in obj.get("params", [])],
            body=[ast_from_obj(s) for s in obj["body"]],
            return_type=obj.get("return_type"),
        )
    if t == "Block":
        return Block(statements=[ast_from_obj(s) for s in obj["statements"]])
    if t == "IfStmt":
        return IfStmt(
            condition=ast_from_obj(obj["condition"]),
            then_branch=ast_from_obj(obj["then_branch"]),
            else_branch=ast_from_obj(obj.get("else_branch")),
        )
    if t == "WhileStmt":
        return WhileStmt(condition=ast_from_obj(obj["condition"]), body=ast_from_obj(obj["body"]))
    if t == "ReturnStmt":
        return ReturnStmt(value=ast_from_obj(obj.get("value")))
    if t == "ExprStmt":
        return ExprStmt(expr=ast_from_obj(obj["expr"]))
    if t == "Assign":
        return Assign(name=obj["name"], value=ast_from_obj(obj["value"]))
    if t == "BinaryOp":
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "UnaryOp":
        return UnaryOp(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "Literal":
        return Literal(value=_literal_value(obj["value"]))
    if t == "Variable":
        return Variable(name=obj["name"])
    if t == "Call":
        return Call(name=obj["name"], args=[ast_from_obj(a) for a in obj.get("args", [])])

    raise ValueError(f"Unknown AST node type: {t}")


def program_from_obj(obj: Dict[str, Any]) -> Program:
    program = ast_from_obj(obj)
    if not isinstance(program, Program):
        raise ValueError("AST root must be a Program node")
    return program
