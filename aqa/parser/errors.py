"""
Error handling for the pseudocode parser.

Parse errors are positioned at the offending token. There is no
resynchronization: the first error aborts parsing.

Author: xwest
"""

from enum import Enum
from typing import Optional

from ..errors import AqaError, ErrorStage
from ..scanner.tokens import Token, TokenType


class ParseErrorKind(Enum):
    UNEXPECTED_TOKEN = "unexpected token"
    EXPECTED_RIGHT_PAREN = "expected right parenthesis"
    NESTING_TOO_DEEP = "nesting too deep"


class ParseError(AqaError):
    """
    Exception raised when the parser encounters a syntax error.

    Keeps the offending token for callers that want more than the message.
    """

    stage = ErrorStage.PARSER

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(kind, message, token.position, code=code, help_text=help_text)
        self.token = token


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected right parenthesis",
    "P003": "Nesting too deep",
}


def create_unexpected_token_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an operand."""
    if found.type == TokenType.EOF:
        help_text = "The input ended where an expression was expected."
    else:
        help_text = f"'{found.lexeme}' cannot start an expression."

    return ParseError(
        ParseErrorKind.UNEXPECTED_TOKEN,
        f"Unexpected token: '{found}'",
        found,
        code="P001",
        help_text=help_text,
    )


def create_expected_right_paren_error(found: Token) -> ParseError:
    """Create an error for a parenthesised expression that is never closed."""
    return ParseError(
        ParseErrorKind.EXPECTED_RIGHT_PAREN,
        "Expected Right Parenthesis",
        found,
        code="P002",
        help_text="Add a closing parenthesis ')'.",
    )


def create_nesting_too_deep_error(found: Token, limit: int) -> ParseError:
    """Create an error for parentheses nested beyond what the parser accepts."""
    return ParseError(
        ParseErrorKind.NESTING_TOO_DEEP,
        "Expression nested too deeply",
        found,
        code="P003",
        help_text=f"At most {limit} levels of parentheses are supported.",
    )
