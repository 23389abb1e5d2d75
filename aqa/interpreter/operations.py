"""
Operator dispatch tables for the interpreter.

The tables are built once at import time from the declarations below.
`SUPPORTED_BINARY_OPERATORS` and `SUPPORTED_UNARY_OPERATORS` must name
every ValueKind; `_verify_tables` refuses to import the module otherwise,
so a new kind cannot silently fall through to a mismatched-type error.

Integer results outside the signed 64-bit range raise OverflowError and
integer division by zero raises ZeroDivisionError; the interpreter turns
both into positioned errors. Float arithmetic follows IEEE-754.

Author: xwest
"""

import math
import operator
from typing import Callable, Dict, FrozenSet, Tuple

from ..scanner.tokens import TokenType
from ..values import INT64_MAX, INT64_MIN, Value, ValueKind

BinaryOperation = Callable[[Value, Value], Value]
UnaryOperation = Callable[[Value], Value]

ARITHMETIC_OPERATORS = frozenset({
    TokenType.ADD, TokenType.SUBTRACT, TokenType.MULTIPLY, TokenType.DIVIDE,
})
COMPARISON_OPERATORS = frozenset({
    TokenType.LESS_THAN, TokenType.LESS_EQUAL,
    TokenType.GREATER_THAN, TokenType.GREATER_EQUAL,
    TokenType.EQUAL, TokenType.NOT_EQUAL,
})

# Operators defined when both operands have the given kind
SUPPORTED_BINARY_OPERATORS: Dict[ValueKind, FrozenSet[TokenType]] = {
    ValueKind.INTEGER: ARITHMETIC_OPERATORS | COMPARISON_OPERATORS,
    ValueKind.FLOAT: ARITHMETIC_OPERATORS | COMPARISON_OPERATORS,
    ValueKind.BOOLEAN: frozenset(),
    ValueKind.TEXT: frozenset({TokenType.ADD}),
}

SUPPORTED_UNARY_OPERATORS: Dict[ValueKind, FrozenSet[TokenType]] = {
    ValueKind.INTEGER: frozenset({TokenType.SUBTRACT}),
    ValueKind.FLOAT: frozenset({TokenType.SUBTRACT}),
    ValueKind.BOOLEAN: frozenset({TokenType.LOGICAL_NOT}),
    ValueKind.TEXT: frozenset(),
}


def _checked_integer(result: int) -> Value:
    if not INT64_MIN <= result <= INT64_MAX:
        raise OverflowError(result)
    return Value.integer(result)


def _truncating_divide(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    if right == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _ieee_divide(left: float, right: float) -> float:
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    # Sign of a zero divisor counts, as in IEEE-754
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_INTEGER_ARITHMETIC = {
    TokenType.ADD: operator.add,
    TokenType.SUBTRACT: operator.sub,
    TokenType.MULTIPLY: operator.mul,
    TokenType.DIVIDE: _truncating_divide,
}

_FLOAT_ARITHMETIC = {
    TokenType.ADD: operator.add,
    TokenType.SUBTRACT: operator.sub,
    TokenType.MULTIPLY: operator.mul,
    TokenType.DIVIDE: _ieee_divide,
}

_COMPARISONS = {
    TokenType.LESS_THAN: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
    TokenType.GREATER_THAN: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.EQUAL: operator.eq,
    TokenType.NOT_EQUAL: operator.ne,
}


def _integer_arithmetic(function) -> BinaryOperation:
    return lambda left, right: _checked_integer(function(left.data, right.data))


def _float_arithmetic(function) -> BinaryOperation:
    return lambda left, right: Value.float_(float(function(left.data, right.data)))


def _comparison(function) -> BinaryOperation:
    return lambda left, right: Value.boolean(function(left.data, right.data))


def _concatenate(left: Value, right: Value) -> Value:
    return Value.text(left.data + right.data)


def _implement_binary(kind: ValueKind, token_type: TokenType) -> BinaryOperation:
    if token_type in COMPARISON_OPERATORS:
        return _comparison(_COMPARISONS[token_type])
    if kind == ValueKind.INTEGER:
        return _integer_arithmetic(_INTEGER_ARITHMETIC[token_type])
    if kind == ValueKind.FLOAT:
        return _float_arithmetic(_FLOAT_ARITHMETIC[token_type])
    if kind == ValueKind.TEXT and token_type == TokenType.ADD:
        return _concatenate
    raise RuntimeError(f"no implementation for {kind.value} {token_type.name} {kind.value}")


_UNARY_IMPLEMENTATIONS: Dict[Tuple[TokenType, ValueKind], UnaryOperation] = {
    (TokenType.SUBTRACT, ValueKind.INTEGER): lambda operand: _checked_integer(-operand.data),
    (TokenType.SUBTRACT, ValueKind.FLOAT): lambda operand: Value.float_(-operand.data),
    (TokenType.LOGICAL_NOT, ValueKind.BOOLEAN): lambda operand: Value.boolean(not operand.data),
}


def _verify_tables():
    for declared in (SUPPORTED_BINARY_OPERATORS, SUPPORTED_UNARY_OPERATORS):
        missing = set(ValueKind) - set(declared)
        if missing:
            names = ", ".join(sorted(kind.value for kind in missing))
            raise RuntimeError(f"operator table has no entry for value kind(s): {names}")

    for kind, token_types in SUPPORTED_UNARY_OPERATORS.items():
        for token_type in token_types:
            if (token_type, kind) not in _UNARY_IMPLEMENTATIONS:
                raise RuntimeError(f"no implementation for {token_type.name} {kind.value}")


def _build_binary_table() -> Dict[Tuple[ValueKind, TokenType, ValueKind], BinaryOperation]:
    table = {}
    for kind, token_types in SUPPORTED_BINARY_OPERATORS.items():
        for token_type in token_types:
            table[(kind, token_type, kind)] = _implement_binary(kind, token_type)
    return table


def _build_unary_table() -> Dict[Tuple[TokenType, ValueKind], UnaryOperation]:
    return {
        (token_type, kind): _UNARY_IMPLEMENTATIONS[(token_type, kind)]
        for kind, token_types in SUPPORTED_UNARY_OPERATORS.items()
        for token_type in token_types
    }


_verify_tables()

BINARY_OPERATIONS = _build_binary_table()
UNARY_OPERATIONS = _build_unary_table()
