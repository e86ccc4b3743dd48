"""
COOL Parser Package

Backtracking recursive descent parser for a subset of COOL.

Key Features:
- Scannerless grammar with identifier / type-name lookahead
- Expression trees for the expression sublanguage
- Recognition of programs, classes, features and formals
- Position-in, position-out entry points for every rule
- Furthest-failure diagnostics

Author: xwest
"""

from .ast_nodes import (
    Expression, ExpressionType, ExpressionVisitor, BinOp,
    Assign, If, While, New, IsVoid, Neg, Not, Variable, Number, Boolean, BinaryExpr,
)
from .parser import (
    Parser, Success, Failure, ParseResult, RULES, EXPRESSION_RULES,
    fold_left, fold_right,
    parse_program, parse_class, parse_feature, parse_formal,
    parse_expr, parse_term, parse_factor, parse_source,
)
from .printer import format_expression, expression_to_dict
from .errors import ParseError, PARSER_ERROR_CODES

__all__ = [
    # Core parser
    "Parser", "Success", "Failure", "ParseResult", "RULES", "EXPRESSION_RULES",
    "fold_left", "fold_right",
    "parse_program", "parse_class", "parse_feature", "parse_formal",
    "parse_expr", "parse_term", "parse_factor", "parse_source",

    # AST nodes
    "Expression", "ExpressionType", "ExpressionVisitor", "BinOp",
    "Assign", "If", "While", "New", "IsVoid", "Neg", "Not",
    "Variable", "Number", "Boolean", "BinaryExpr",

    # Rendering
    "format_expression", "expression_to_dict",

    # Error handling
    "ParseError", "PARSER_ERROR_CODES",
]
