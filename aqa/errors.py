"""
Error taxonomy shared by the scanner, parser and interpreter.

Every failure of the pipeline is an `AqaError` tagged with the stage that
raised it. Stage modules subclass it with their own `kind` enums.

Author: xwest
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .source import Position


class ErrorStage(Enum):
    """Pipeline stage an error originated from."""
    SCANNER = "scanner"
    PARSER = "parser"
    INTERPRETER = "interpreter"


@dataclass
class Diagnostic:
    """Positioned message plus the metadata the CLI reports alongside it."""
    message: str
    position: Position
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        return f"at line {self.position.line}, column {self.position.column}: {self.message}"

    def render(self) -> str:
        """Long form used by the command-line driver."""
        prefix = self.severity
        if self.code:
            prefix += f"[{self.code}]"
        result = f"{prefix}: {self}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class AqaError(Exception):
    """
    Base exception for every pipeline failure.

    Subclasses set `stage`; `kind` is the stage-specific error kind.
    """

    stage: ErrorStage

    def __init__(
        self,
        kind: Enum,
        message: str,
        position: Position,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def position(self) -> Position:
        return self.diagnostic.position

    @property
    def line(self) -> int:
        return self.diagnostic.position.line

    @property
    def column(self) -> int:
        return self.diagnostic.position.column

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.name}, {self.position!r})"
