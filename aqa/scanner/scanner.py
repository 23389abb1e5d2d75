"""
Pseudocode scanner - turns source text into tokens.

One character of lookahead is enough for every construct in the dialect:
`<` may continue as `<-` or `<=`, `>` as `>=`, and `!` must continue as `!=`.
Line breaks are tokens, not whitespace.

xwest
"""

from typing import Iterator, List

from ..source import Position, SourceCursor
from ..values import INT64_MAX, Value
from .tokens import Token, TokenType, KEYWORDS, BOOLEAN_LITERALS, SINGLE_CHAR_TOKENS
from .errors import (
    create_unexpected_character_error, create_unexpected_eof_error,
    create_failed_to_parse_int_error, create_failed_to_parse_float_error,
)

# \n is deliberately absent, it becomes a LINE_BREAK token
WHITESPACE = frozenset(" \t\r\x0c")

ASCII_DIGITS = frozenset("0123456789")

ESCAPE_SEQUENCES = {
    'n': '\n',
}


class Scanner:
    """
    Lexical analyzer for the pseudocode dialect.

    Produces tokens strictly left to right. The first error raises a
    ScannerError; there is no recovery.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string (already decoded)
        """
        self.source = source
        self.cursor = SourceCursor(source)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with (and including) the EOF token."""
        while True:
            token = self.scan_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def scan_all(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens including the EOF token
        """
        return list(self)

    def scan_token(self) -> Token:
        """Skip leading whitespace and return exactly one token."""
        self._skip_whitespace()

        start = self.cursor.position
        start_offset = self.cursor.offset
        char = self.cursor.advance()

        if char is None:
            return Token(TokenType.EOF, "", None, start)

        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char], char, None, start)

        if char == '<':
            if self.cursor.match('-'):
                return self._make_token(TokenType.ASSIGN, start_offset, start)
            if self.cursor.match('='):
                return self._make_token(TokenType.LESS_EQUAL, start_offset, start)
            return self._make_token(TokenType.LESS_THAN, start_offset, start)

        if char == '>':
            if self.cursor.match('='):
                return self._make_token(TokenType.GREATER_EQUAL, start_offset, start)
            return self._make_token(TokenType.GREATER_THAN, start_offset, start)

        if char == '!':
            return self._scan_not_equal(start_offset, start)

        if char == "'":
            return self._scan_text(start_offset, start)

        if char in ASCII_DIGITS:
            return self._scan_number(start_offset, start)

        if char.isalpha():
            return self._scan_word(start_offset, start)

        raise create_unexpected_character_error(char, start)

    def _make_token(self, token_type: TokenType, start_offset: int, start: Position) -> Token:
        lexeme = self.source[start_offset:self.cursor.offset]
        return Token(token_type, lexeme, None, start)

    def _scan_not_equal(self, start_offset: int, start: Position) -> Token:
        """`!` is only valid as the first half of `!=`."""
        next_char = self.cursor.peek()
        if next_char is None:
            raise create_unexpected_eof_error(start, help_text="'!' must be followed by '='.")
        if next_char != '=':
            raise create_unexpected_character_error(
                next_char, start, help_text="'!' must be followed by '=' to form '!='."
            )
        self.cursor.advance()
        return self._make_token(TokenType.NOT_EQUAL, start_offset, start)

    def _scan_text(self, start_offset: int, start: Position) -> Token:
        """Scan a quoted text literal; the opening quote is already consumed."""
        chars = []

        while True:
            char = self.cursor.advance()
            if char is None:
                raise create_unexpected_eof_error(
                    start, help_text="Text literals must be closed with a matching ' quote."
                )
            if char == "'":
                break
            if char == '\\':
                escaped = self.cursor.advance()
                if escaped is None:
                    raise create_unexpected_eof_error(
                        start, help_text="Text literals must be closed with a matching ' quote."
                    )
                # Unknown escapes copy the character through unchanged
                chars.append(ESCAPE_SEQUENCES.get(escaped, escaped))
            else:
                chars.append(char)

        lexeme = self.source[start_offset:self.cursor.offset]
        return Token(TokenType.LITERAL, lexeme, Value.text(''.join(chars)), start)

    def _scan_number(self, start_offset: int, start: Position) -> Token:
        """Scan an integer or float literal; the first digit is already consumed."""
        is_float = False

        while True:
            char = self.cursor.peek()
            if char is None:
                break
            if char in ASCII_DIGITS:
                self.cursor.advance()
            elif char == '.':
                is_float = True
                self.cursor.advance()
            elif char.isalpha():
                raise create_unexpected_character_error(
                    char, start, help_text="Numbers cannot be directly followed by letters."
                )
            else:
                break

        lexeme = self.source[start_offset:self.cursor.offset]

        if is_float:
            try:
                value = Value.float_(float(lexeme))
            except ValueError:
                raise create_failed_to_parse_float_error(lexeme, start)
        else:
            try:
                number = int(lexeme)
            except ValueError:
                raise create_failed_to_parse_int_error(lexeme, start)
            if number > INT64_MAX:
                raise create_failed_to_parse_int_error(lexeme, start)
            value = Value.integer(number)

        return Token(TokenType.LITERAL, lexeme, value, start)

    def _scan_word(self, start_offset: int, start: Position) -> Token:
        """Scan an identifier, keyword or boolean literal."""
        while True:
            char = self.cursor.peek()
            if char is None or not char.isalnum():
                break
            self.cursor.advance()

        lexeme = self.source[start_offset:self.cursor.offset]

        if lexeme in BOOLEAN_LITERALS:
            return Token(TokenType.LITERAL, lexeme, Value.boolean(BOOLEAN_LITERALS[lexeme]), start)

        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        value = lexeme if token_type == TokenType.IDENTIFIER else None
        return Token(token_type, lexeme, value, start)

    def _skip_whitespace(self):
        while self.cursor.peek() in WHITESPACE:
            self.cursor.advance()


def scan_string(source: str) -> List[Token]:
    """
    Convenience function to scan a source string.

    Raises:
        ScannerError: If scanning fails
    """
    return Scanner(source).scan_all()


def scan_file(filepath: str) -> List[Token]:
    """
    Convenience function to scan a UTF-8 source file.

    Raises:
        ScannerError: If scanning fails
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan_string(source)
