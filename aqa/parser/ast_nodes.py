"""
Abstract Syntax Tree node definitions for pseudocode expressions.

Expressions form a strict tree: every child has exactly one parent and
there are no back references. Nodes are immutable and compare
structurally; source spans are ignored by equality.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from ..source import Position
from ..scanner.tokens import Token
from ..values import ValueKind, Value


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end positions)."""
    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass


class Expression(ASTNode):
    """Base class for expressions."""
    pass


def _format_literal(value: Value) -> str:
    if value.kind == ValueKind.TEXT:
        return repr(value.data)
    return str(value.data)


def _render(root: 'Expression') -> str:
    """Render a tree in prefix form without recursing, e.g. `(* (+ 1 2) 3)`."""
    parts: List[str] = []
    # Holds nodes still to render and literal text pieces, popped in order
    pending: List[Any] = [root]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(_format_literal(item.value))
        elif isinstance(item, UnaryOp):
            pending.extend([")", item.operand, f"({item.operator.lexeme} "])
        else:
            pending.extend([")", item.right, " ", item.left, f"({item.operator.lexeme} "])

    return "".join(parts)


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value expression."""
    value: Value
    span: SourceSpan = field(compare=False)

    node_type = ASTNodeType.LITERAL

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True)
class UnaryOp(Expression):
    """Prefix operator applied to a single operand."""
    operator: Token
    operand: Expression
    span: SourceSpan = field(compare=False)

    node_type = ASTNodeType.UNARY_OP

    def children(self) -> List[ASTNode]:
        return [self.operand]

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation expression."""
    left: Expression
    operator: Token
    right: Expression
    span: SourceSpan = field(compare=False)

    node_type = ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return _render(self)
