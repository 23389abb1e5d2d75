"""
Pseudocode Parser Package

Implements a recursive descent expression parser, one procedure per
precedence level, producing immutable expression trees with source spans.

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTNode, ASTVisitor, SourceSpan,
    Expression, Literal, UnaryOp, BinaryOp,
)
from .parser import Parser, parse_string
from .errors import ParseError, ParseErrorKind

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNodeType", "ASTNode", "ASTVisitor", "SourceSpan",
    "Expression", "Literal", "UnaryOp", "BinaryOp",

    # Error handling
    "ParseError", "ParseErrorKind",
]
