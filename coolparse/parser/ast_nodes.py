"""
Abstract Syntax Tree node definitions for COOL expressions.

One tagged union, Expression, covers the whole expression sublanguage.
Nodes are frozen dataclasses: they compare structurally, they cannot be
mutated after the parser builds them, and each node exclusively owns its
children, so every tree is a strict tree.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List
from dataclasses import dataclass
from enum import Enum


class ExpressionType(Enum):
    """Enumeration of all expression node types."""

    ASSIGN = "Assign"
    IF = "If"
    WHILE = "While"
    NEW = "New"
    ISVOID = "IsVoid"
    NEG = "Neg"
    NOT = "Not"
    VARIABLE = "Variable"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    BINARY_EXPR = "BinaryExpr"


class BinOp(Enum):
    """Binary arithmetic operators. The value is the source symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class ExpressionVisitor(ABC):
    """Abstract visitor interface for traversing expression trees."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit an expression node."""
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    node_type: ClassVar[ExpressionType]

    def accept(self, visitor: ExpressionVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes, in source order."""
        pass

    def walk(self):
        """Yield this node and all descendants, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))


# ============================================================================
# Composite expressions
# ============================================================================

@dataclass(frozen=True)
class Assign(Expression):
    """``name <- value``"""
    name: str
    value: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.ASSIGN

    def children(self) -> List[Expression]:
        return [self.value]


@dataclass(frozen=True)
class If(Expression):
    """``if cond then then_branch else else_branch fi``"""
    cond: Expression
    then_branch: Expression
    else_branch: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.IF

    def children(self) -> List[Expression]:
        return [self.cond, self.then_branch, self.else_branch]


@dataclass(frozen=True)
class While(Expression):
    """``while cond loop body pool``"""
    cond: Expression
    body: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.WHILE

    def children(self) -> List[Expression]:
        return [self.cond, self.body]


@dataclass(frozen=True)
class BinaryExpr(Expression):
    """Binary arithmetic expression."""
    op: BinOp
    left: Expression
    right: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.BINARY_EXPR

    def children(self) -> List[Expression]:
        return [self.left, self.right]


# ============================================================================
# Unary expressions
# ============================================================================

@dataclass(frozen=True)
class IsVoid(Expression):
    operand: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.ISVOID

    def children(self) -> List[Expression]:
        return [self.operand]


@dataclass(frozen=True)
class Neg(Expression):
    """Integer negation, ``~operand``."""
    operand: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.NEG

    def children(self) -> List[Expression]:
        return [self.operand]


@dataclass(frozen=True)
class Not(Expression):
    operand: Expression

    node_type: ClassVar[ExpressionType] = ExpressionType.NOT

    def children(self) -> List[Expression]:
        return [self.operand]


# ============================================================================
# Leaves
# ============================================================================

@dataclass(frozen=True)
class New(Expression):
    type_name: str

    node_type: ClassVar[ExpressionType] = ExpressionType.NEW

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Variable(Expression):
    name: str

    node_type: ClassVar[ExpressionType] = ExpressionType.VARIABLE

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Number(Expression):
    """Integer literal; the value always fits in an unsigned 32-bit integer."""
    value: int

    node_type: ClassVar[ExpressionType] = ExpressionType.NUMBER

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Boolean(Expression):
    value: bool

    node_type: ClassVar[ExpressionType] = ExpressionType.BOOLEAN

    def children(self) -> List[Expression]:
        return []
