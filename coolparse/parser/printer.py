"""
Rendering of expression trees.

Author: xwest
"""

from dataclasses import fields
from enum import Enum
from typing import Any, Dict

from .ast_nodes import Expression, ExpressionType, ExpressionVisitor


class SExpressionPrinter(ExpressionVisitor):
    """Render an expression tree as a compact S-expression."""

    _PREFIX = {
        ExpressionType.IF: "if",
        ExpressionType.WHILE: "while",
        ExpressionType.NEW: "new",
        ExpressionType.ISVOID: "isvoid",
        ExpressionType.NEG: "~",
        ExpressionType.NOT: "not",
    }

    def visit(self, node: Expression) -> str:
        node_type = node.node_type

        if node_type == ExpressionType.NUMBER:
            return str(node.value)
        if node_type == ExpressionType.BOOLEAN:
            return "true" if node.value else "false"
        if node_type == ExpressionType.VARIABLE:
            return node.name
        if node_type == ExpressionType.NEW:
            return f"(new {node.type_name})"
        if node_type == ExpressionType.ASSIGN:
            return f"(<- {node.name} {node.value.accept(self)})"
        if node_type == ExpressionType.BINARY_EXPR:
            return f"({node.op.value} {node.left.accept(self)} {node.right.accept(self)})"

        parts = [child.accept(self) for child in node.children()]
        return f"({self._PREFIX[node_type]} {' '.join(parts)})"


def format_expression(expr: Expression) -> str:
    """Render ``expr`` as an S-expression, e.g. ``(+ 1 (* 2 3))``."""
    return expr.accept(SExpressionPrinter())


def expression_to_dict(expr: Expression) -> Dict[str, Any]:
    """Convert an expression tree into plain dicts suitable for JSON."""
    result: Dict[str, Any] = {"type": expr.node_type.value}
    for field in fields(expr):
        value = getattr(expr, field.name)
        if isinstance(value, Expression):
            value = expression_to_dict(value)
        elif isinstance(value, Enum):
            value = value.name
        result[field.name] = value
    return result
