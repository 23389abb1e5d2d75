"""
AQA Pseudocode Front End

Scanner, expression parser and tree-walking evaluator for the exam-style
pseudocode dialect.

Architecture:
    aqa/
    ├── scanner/         # Characters to tokens
    ├── parser/          # Tokens to expression trees
    └── interpreter/     # Expression trees to values

Data flows strictly scanner -> parser -> interpreter. The first error at
any stage is raised as an AqaError subclass tagged with its stage.

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

import logging

from .source import Position, SourceCursor
from .values import Value, ValueKind
from .errors import AqaError, ErrorStage, Diagnostic
from .scanner import Scanner, Token, TokenType, ScannerError, ScannerErrorKind
from .parser import Parser, Expression, ParseError, ParseErrorKind
from .interpreter import Interpreter, InterpreterError, InterpreterErrorKind

logger = logging.getLogger(__name__)


def run(source: str, filename: str = "<string>") -> Value:
    """
    Scan, parse and evaluate `source`.

    Raises:
        ScannerError, ParseError, InterpreterError: On the first failure,
            all of them AqaError subclasses
    """
    tokens = Scanner(source).scan_all()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s: tokens %s", filename, [str(token) for token in tokens])

    expression = Parser(tokens).parse()
    logger.debug("%s: tree %s", filename, expression)

    value = Interpreter().evaluate(expression)
    logger.debug("%s: value %r", filename, value)

    return value


def run_file(filepath: str) -> Value:
    """Read a UTF-8 source file and run it."""
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return run(source, filepath)


__all__ = [
    # Pipeline
    "run",
    "run_file",

    # Stages
    "Scanner",
    "Parser",
    "Interpreter",

    # Data model
    "Position",
    "SourceCursor",
    "Value",
    "ValueKind",
    "Token",
    "TokenType",
    "Expression",

    # Errors
    "AqaError",
    "ErrorStage",
    "Diagnostic",
    "ScannerError",
    "ScannerErrorKind",
    "ParseError",
    "ParseErrorKind",
    "InterpreterError",
    "InterpreterErrorKind",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
