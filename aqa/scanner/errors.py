"""
Error handling for the pseudocode scanner.

Scanner errors are fatal: the first one aborts the pipeline. Each carries
the position of the lexeme that triggered it and an error code.

Author: xwest
"""

from enum import Enum
from typing import Optional

from ..errors import AqaError, ErrorStage
from ..source import Position


class ScannerErrorKind(Enum):
    UNEXPECTED_EOF = "unexpected end of input"
    UNEXPECTED_CHAR = "unexpected character"
    FAILED_TO_PARSE_FLOAT = "failed to parse float"
    FAILED_TO_PARSE_INT = "failed to parse int"


class ScannerError(AqaError):
    """
    Exception raised when the scanner cannot produce a token.

    `char` holds the offending character for UNEXPECTED_CHAR errors.
    """

    stage = ErrorStage.SCANNER

    def __init__(
        self,
        kind: ScannerErrorKind,
        message: str,
        position: Position,
        char: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(kind, message, position, code=code, help_text=help_text)
        self.char = char


# Common error codes for categorization
ERROR_CODES = {
    "S001": "Unexpected character",
    "S002": "Unexpected end of input",
    "S003": "Invalid integer literal",
    "S004": "Invalid float literal",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, position: Position,
                                      help_text: Optional[str] = None) -> ScannerError:
    """Create an error for a character that cannot start or continue a token."""
    if help_text is None:
        if char.isprintable():
            help_text = f"The character '{char}' is not valid here."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return ScannerError(
        ScannerErrorKind.UNEXPECTED_CHAR,
        f"Unexpected character: '{char}'",
        position,
        char=char,
        code="S001",
        help_text=help_text,
    )


def create_unexpected_eof_error(position: Position, help_text: Optional[str] = None) -> ScannerError:
    """Create an error for input that ends in the middle of a token."""
    return ScannerError(
        ScannerErrorKind.UNEXPECTED_EOF,
        "Unexpected EOF",
        position,
        code="S002",
        help_text=help_text,
    )


def create_failed_to_parse_int_error(lexeme: str, position: Position) -> ScannerError:
    """Create an error for digits that do not form a 64-bit signed integer."""
    return ScannerError(
        ScannerErrorKind.FAILED_TO_PARSE_INT,
        "failed to parse int",
        position,
        code="S003",
        help_text=f"'{lexeme}' does not fit in a 64-bit signed integer.",
    )


def create_failed_to_parse_float_error(lexeme: str, position: Position) -> ScannerError:
    """Create an error for a digit-and-dot run that is not a valid float."""
    return ScannerError(
        ScannerErrorKind.FAILED_TO_PARSE_FLOAT,
        "failed to parse float",
        position,
        code="S004",
        help_text=f"'{lexeme}' is not a valid floating-point number.",
    )
