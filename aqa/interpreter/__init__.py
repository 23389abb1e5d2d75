"""
Pseudocode Interpreter Package

Evaluates expression trees produced by the parser into run-time Values,
dispatching every operator through tables built once at import.

Author: xwest
"""

from .interpreter import Interpreter, evaluate
from .errors import InterpreterError, InterpreterErrorKind

__all__ = [
    "Interpreter",
    "evaluate",
    "InterpreterError",
    "InterpreterErrorKind",
]
