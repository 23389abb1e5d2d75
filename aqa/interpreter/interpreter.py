"""
Tree-walking evaluator for pseudocode expressions.

Evaluation is a pure function of the tree: no environment, no side
effects. Both operands of a binary operator are always evaluated, left
first; nothing short-circuits and Integer is never widened to Float.

The walk is post-order over an explicit work stack, so long operator
chains such as `1 + 1 + ... + 1` cost no Python stack depth.

Author: xwest
"""

from typing import Any, List, Tuple

from ..parser.ast_nodes import ASTVisitor, Expression, Literal, UnaryOp, BinaryOp
from ..values import Value
from .operations import BINARY_OPERATIONS, UNARY_OPERATIONS
from .errors import (
    create_unary_mismatch_error, create_binary_mismatch_error,
    create_division_by_zero_error, create_integer_overflow_error,
)


class Interpreter(ASTVisitor):
    """
    Evaluates expression trees to Values.

    Holds no state between calls, so one instance can evaluate any number
    of trees.
    """

    def evaluate(self, expr: Expression) -> Value:
        """
        Evaluate an expression tree.

        Raises:
            InterpreterError: On the first operator that cannot be applied
        """
        return expr.accept(self)

    def visit(self, node: Any) -> Value:
        # (node, children_done) pairs; operand values collect on `values`
        pending: List[Tuple[Any, bool]] = [(node, False)]
        values: List[Value] = []

        while pending:
            current, children_done = pending.pop()

            if isinstance(current, Literal):
                values.append(current.value)
            elif not isinstance(current, (UnaryOp, BinaryOp)):
                raise TypeError(f"cannot evaluate {type(current).__name__}")
            elif not children_done:
                pending.append((current, True))
                # Reversed so the left operand is popped, and evaluated, first
                for child in reversed(current.children()):
                    pending.append((child, False))
            elif isinstance(current, UnaryOp):
                operand = values.pop()
                values.append(self._apply_unary(current, operand))
            else:
                right = values.pop()
                left = values.pop()
                values.append(self._apply_binary(current, left, right))

        return values.pop()

    def _apply_unary(self, node: UnaryOp, operand: Value) -> Value:
        operation = UNARY_OPERATIONS.get((node.operator.type, operand.kind))
        if operation is None:
            raise create_unary_mismatch_error(node.operator, operand)

        try:
            return operation(operand)
        except OverflowError:
            raise create_integer_overflow_error(node.operator)

    def _apply_binary(self, node: BinaryOp, left: Value, right: Value) -> Value:
        operation = BINARY_OPERATIONS.get((left.kind, node.operator.type, right.kind))
        if operation is None:
            raise create_binary_mismatch_error(node.operator, left, right)

        try:
            return operation(left, right)
        except ZeroDivisionError:
            raise create_division_by_zero_error(node.operator)
        except OverflowError:
            raise create_integer_overflow_error(node.operator)


def evaluate(expr: Expression) -> Value:
    """Convenience function to evaluate a single expression tree."""
    return Interpreter().evaluate(expr)
