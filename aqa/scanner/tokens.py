"""
Token definitions for the pseudocode scanner.

This module defines the closed set of token types:
- Literals (integer, float, boolean and text, carried as a Value)
- Identifiers
- Keywords of the statement-level dialect
- Operators and punctuation
- Line breaks and the end-of-input sentinel

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union

from ..source import Position
from ..values import Value


class TokenType(Enum):
    """
    Enumeration of all token types.

    Tokens compare by type alone when the parser matches operators; the
    payload of LITERAL and IDENTIFIER tokens lives on the Token itself.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    LINE_BREAK = auto()             # \n (kept for statement separation)
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    LITERAL = auto()                # 42, 3.5, 'text', True, False
    IDENTIFIER = auto()             # total, x1

    # ========================================================================
    # Keywords
    # ========================================================================
    CONSTANT = auto()               # CONSTANT
    INT_DIVIDE = auto()             # DIV
    MODULUS = auto()                # MOD

    LOGICAL_AND = auto()            # AND
    LOGICAL_OR = auto()             # OR
    LOGICAL_NOT = auto()            # NOT

    REPEAT = auto()                 # REPEAT
    UNTIL = auto()                  # UNTIL
    WHILE = auto()                  # WHILE
    END_WHILE = auto()              # ENDWHILE

    FOR = auto()                    # FOR
    TO = auto()                     # TO
    IN = auto()                     # IN
    END_FOR = auto()                # ENDFOR

    IF = auto()                     # IF
    THEN = auto()                   # THEN
    ELSE = auto()                   # ELSE
    END_IF = auto()                 # ENDIF

    OUTPUT = auto()                 # OUTPUT

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # <-

    ADD = auto()                    # +
    SUBTRACT = auto()               # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    LESS_EQUAL = auto()             # <=
    GREATER_EQUAL = auto()          # >=
    EQUAL = auto()                  # =
    NOT_EQUAL = auto()              # !=

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme plus its source position.

    `value` is the Value of a LITERAL token and the name of an IDENTIFIER
    token; it is None for every other type.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Optional[Union[Value, str]]
    position: Position

    def __str__(self) -> str:
        if self.type == TokenType.LITERAL:
            return f"{self.type.name}({self.value!r})"
        if self.type == TokenType.IDENTIFIER:
            return f"{self.type.name}({self.value})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.position!r})")

    @property
    def is_keyword(self) -> bool:
        return self.lexeme in KEYWORDS


# Reserved words; True/False resolve to boolean literals instead
KEYWORDS = {
    "CONSTANT": TokenType.CONSTANT,

    "DIV": TokenType.INT_DIVIDE,
    "MOD": TokenType.MODULUS,

    "AND": TokenType.LOGICAL_AND,
    "OR": TokenType.LOGICAL_OR,
    "NOT": TokenType.LOGICAL_NOT,

    "REPEAT": TokenType.REPEAT,
    "UNTIL": TokenType.UNTIL,
    "WHILE": TokenType.WHILE,
    "ENDWHILE": TokenType.END_WHILE,

    "FOR": TokenType.FOR,
    "TO": TokenType.TO,
    "IN": TokenType.IN,
    "ENDFOR": TokenType.END_FOR,

    "IF": TokenType.IF,
    "THEN": TokenType.THEN,
    "ELSE": TokenType.ELSE,
    "ENDIF": TokenType.END_IF,

    "OUTPUT": TokenType.OUTPUT,
}

BOOLEAN_LITERALS = {
    "True": True,
    "False": False,
}

# Characters that are a whole token by themselves, the line break included
SINGLE_CHAR_TOKENS = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "=": TokenType.EQUAL,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "\n": TokenType.LINE_BREAK,
}
