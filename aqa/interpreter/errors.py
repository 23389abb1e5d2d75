"""
Run-time error handling for the pseudocode interpreter.

Interpreter errors are positioned at the operator token whose evaluation
failed.

Author: xwest
"""

from enum import Enum
from typing import Optional

from ..errors import AqaError, ErrorStage
from ..scanner.tokens import Token
from ..values import Value


class InterpreterErrorKind(Enum):
    MISMATCHED_TYPE = "mismatched type"
    DIVISION_BY_ZERO = "division by zero"
    INTEGER_OVERFLOW = "integer overflow"


class InterpreterError(AqaError):
    """Exception raised when an expression cannot be evaluated."""

    stage = ErrorStage.INTERPRETER

    def __init__(
        self,
        kind: InterpreterErrorKind,
        message: str,
        operator: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(kind, message, operator.position, code=code, help_text=help_text)
        self.operator = operator


INTERPRETER_ERROR_CODES = {
    "R001": "Mismatched type",
    "R002": "Division by zero",
    "R003": "Integer overflow",
}


def create_unary_mismatch_error(operator: Token, operand: Value) -> InterpreterError:
    """Create an error for a prefix operator applied to the wrong kind."""
    return InterpreterError(
        InterpreterErrorKind.MISMATCHED_TYPE,
        f"Mismatched Type: cannot apply '{operator.lexeme}' to {operand.kind.value}",
        operator,
        code="R001",
    )


def create_binary_mismatch_error(operator: Token, left: Value, right: Value) -> InterpreterError:
    """Create an error for a binary operator outside the dispatch table."""
    help_text = None
    if left.is_numeric and right.is_numeric:
        help_text = "Integer and Float operands are never mixed; write 2.0 instead of 2."

    return InterpreterError(
        InterpreterErrorKind.MISMATCHED_TYPE,
        f"Mismatched Type: cannot apply '{operator.lexeme}' to "
        f"{left.kind.value} and {right.kind.value}",
        operator,
        code="R001",
        help_text=help_text,
    )


def create_division_by_zero_error(operator: Token) -> InterpreterError:
    return InterpreterError(
        InterpreterErrorKind.DIVISION_BY_ZERO,
        "Division by zero",
        operator,
        code="R002",
        help_text="Integer division requires a non-zero divisor.",
    )


def create_integer_overflow_error(operator: Token) -> InterpreterError:
    return InterpreterError(
        InterpreterErrorKind.INTEGER_OVERFLOW,
        "Integer overflow",
        operator,
        code="R003",
        help_text="The result does not fit in a 64-bit signed integer.",
    )
