"""
Run-time values of the pseudocode dialect.

A value is exactly one of Integer, Float, Boolean or Text. Values are
immutable and compare structurally, so Integer(1) never equals Float(1.0).

Author: xwest
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ValueKind(Enum):
    """The closed set of value kinds."""
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    TEXT = "Text"


# Python type carried by each kind; bool is checked before int since it subclasses it
_PAYLOAD_TYPES = {
    ValueKind.INTEGER: int,
    ValueKind.FLOAT: float,
    ValueKind.BOOLEAN: bool,
    ValueKind.TEXT: str,
}


@dataclass(frozen=True)
class Value:
    """
    A tagged run-time value.

    Build values with the `integer`, `float_`, `boolean` and `text`
    constructors rather than directly, so the payload is checked against
    the kind.
    """
    kind: ValueKind
    data: Union[int, float, bool, str]

    def __post_init__(self):
        expected = _PAYLOAD_TYPES[self.kind]
        if type(self.data) is not expected:
            raise TypeError(
                f"{self.kind.value} value requires {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )
        if self.kind == ValueKind.INTEGER and not INT64_MIN <= self.data <= INT64_MAX:
            raise OverflowError(f"{self.data} does not fit in a 64-bit signed integer")

    @classmethod
    def integer(cls, data: int) -> "Value":
        return cls(ValueKind.INTEGER, data)

    @classmethod
    def float_(cls, data: float) -> "Value":
        return cls(ValueKind.FLOAT, data)

    @classmethod
    def boolean(cls, data: bool) -> "Value":
        return cls(ValueKind.BOOLEAN, data)

    @classmethod
    def text(cls, data: str) -> "Value":
        return cls(ValueKind.TEXT, data)

    @property
    def is_numeric(self) -> bool:
        return self.kind in (ValueKind.INTEGER, ValueKind.FLOAT)

    def __str__(self) -> str:
        if self.kind == ValueKind.TEXT:
            return self.data
        return str(self.data)

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.data!r})"
