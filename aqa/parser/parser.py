"""
Pseudocode Expression Parser

Recursive descent with one procedure per precedence level, lowest first:

    expression -> equality
    equality   -> comparison ( ( "=" | "!=" ) comparison )*
    comparison -> term ( ( "<" | "<=" | ">" | ">=" ) term )*
    term       -> factor ( ( "+" | "-" ) factor )*
    factor     -> unary ( ( "*" | "/" ) unary )*
    unary      -> ( "NOT" | "AND" ) unary | primary
    primary    -> LITERAL | "(" expression ")"

Each binary level folds to the left, which gives left associativity.
Operator chains and prefix runs are read in loops; only parentheses
recurse, up to MAX_NESTING_DEPTH levels.

Author: xwest
"""

from typing import Callable, FrozenSet, Iterable, List

from ..scanner.tokens import Token, TokenType
from ..source import Position
from .ast_nodes import Expression, Literal, UnaryOp, BinaryOp, SourceSpan
from .errors import (
    create_unexpected_token_error, create_expected_right_paren_error,
    create_nesting_too_deep_error,
)


EQUALITY_OPERATORS = frozenset({TokenType.EQUAL, TokenType.NOT_EQUAL})
COMPARISON_OPERATORS = frozenset({
    TokenType.LESS_THAN, TokenType.LESS_EQUAL,
    TokenType.GREATER_THAN, TokenType.GREATER_EQUAL,
})
TERM_OPERATORS = frozenset({TokenType.ADD, TokenType.SUBTRACT})
FACTOR_OPERATORS = frozenset({TokenType.MULTIPLY, TokenType.DIVIDE})
# AND is accepted as a prefix operator exactly as the dialect's grammar has it
UNARY_OPERATORS = frozenset({TokenType.LOGICAL_NOT, TokenType.LOGICAL_AND})

# Parentheses are the only construct parsed by recursion
MAX_NESTING_DEPTH = 50


class Parser:
    """
    Expression parser over a scanned token sequence.

    The cursor only moves forward and never moves past the EOF token.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with a sequence of tokens.

        Args:
            tokens: Tokens from the scanner, normally ending with EOF
        """
        self.tokens: List[Token] = list(tokens)
        self.current = 0
        self.depth = 0

        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            end = self.tokens[-1].position if self.tokens else Position(1, 1)
            self.tokens.append(Token(TokenType.EOF, "", None, end))

    def parse(self) -> Expression:
        """
        Parse one expression starting at the current token.

        Tokens after the expression are left unconsumed.

        Raises:
            ParseError: On the first syntax error, or parentheses nested
                deeper than MAX_NESTING_DEPTH
        """
        try:
            return self._parse_expression()
        except RecursionError:
            # Reached only when the caller's own stack is already deep
            raise create_nesting_too_deep_error(self._peek(), MAX_NESTING_DEPTH)

    def _parse_expression(self) -> Expression:
        return self._parse_equality()

    def _parse_equality(self) -> Expression:
        return self._parse_left_associative(self._parse_comparison, EQUALITY_OPERATORS)

    def _parse_comparison(self) -> Expression:
        return self._parse_left_associative(self._parse_term, COMPARISON_OPERATORS)

    def _parse_term(self) -> Expression:
        return self._parse_left_associative(self._parse_factor, TERM_OPERATORS)

    def _parse_factor(self) -> Expression:
        return self._parse_left_associative(self._parse_unary, FACTOR_OPERATORS)

    def _parse_left_associative(self, operand: Callable[[], Expression],
                                operators: FrozenSet[TokenType]) -> Expression:
        """Parse `operand (op operand)*` and fold the result to the left."""
        expr = operand()

        while self._match(operators):
            operator = self._previous()
            right = operand()
            span = SourceSpan(expr.span.start, right.span.end)
            expr = BinaryOp(expr, operator, right, span)

        return expr

    def _parse_unary(self) -> Expression:
        operators: List[Token] = []
        while self._match(UNARY_OPERATORS):
            operators.append(self._previous())

        expr = self._parse_primary()

        # The innermost prefix applies first: NOT AND x is NOT (AND x)
        for operator in reversed(operators):
            expr = UnaryOp(operator, expr, SourceSpan(operator.position, expr.span.end))

        return expr

    def _parse_primary(self) -> Expression:
        token = self._peek()

        if token.type == TokenType.LITERAL:
            self._advance()
            return Literal(token.value, SourceSpan(token.position, token.position))

        if token.type == TokenType.LEFT_PAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                raise create_nesting_too_deep_error(token, MAX_NESTING_DEPTH)

            self._advance()  # Consume (
            self.depth += 1
            try:
                expr = self._parse_expression()
            finally:
                self.depth -= 1
            if not self._check(TokenType.RIGHT_PAREN):
                raise create_expected_right_paren_error(self._peek())
            closing = self._advance()
            return self._with_span(expr, SourceSpan(token.position, closing.position))

        raise create_unexpected_token_error(token)

    @staticmethod
    def _with_span(expr: Expression, span: SourceSpan) -> Expression:
        # Parentheses only widen the span; the tree itself is unchanged
        if isinstance(expr, Literal):
            return Literal(expr.value, span)
        if isinstance(expr, UnaryOp):
            return UnaryOp(expr.operator, expr.operand, span)
        return BinaryOp(expr.left, expr.operator, expr.right, span)

    # Utility methods

    def _match(self, token_types: FrozenSet[TokenType]) -> bool:
        """Consume the current token if its type is one of `token_types`."""
        if self._peek().type in token_types:
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token; EOF is never consumed past."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def _previous(self) -> Token:
        """Return the most recently consumed token."""
        return self.tokens[max(self.current - 1, 0)]


def parse_string(source: str) -> Expression:
    """
    Convenience function to scan and parse a source string.

    Raises:
        ScannerError: If scanning fails
        ParseError: If parsing fails
    """
    from ..scanner import scan_string

    tokens = scan_string(source)
    return Parser(tokens).parse()
