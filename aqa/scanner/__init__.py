"""
Pseudocode Scanner Package

Implements the lexical analyzer (tokenizer) for the exam-style pseudocode
dialect: single-character lookahead, quoted text literals with escapes,
integer/float literals, keywords and identifiers.

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan_string, scan_file
from .errors import ScannerError, ScannerErrorKind

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "KEYWORDS",
    "scan_string",
    "scan_file",
    "ScannerError",
    "ScannerErrorKind",
]
