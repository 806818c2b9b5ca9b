"""Value model: the recursive literal type shared by templates and stylesheets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class ValueKind(Enum):
    """Variant tag for a :class:`Value`."""

    DEFAULT = "default"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    PERCENTAGE = "percentage"
    TUPLE = "tuple"


@dataclass(frozen=True)
class Value:
    """A parsed attribute literal.

    Equality is structural and never coerces between variants, so
    ``Value.integer(5) != Value.float(5.0)``.  Tuple payloads are stored as
    Python tuples of ``Value`` so nested values stay hashable and immutable.

    ``Percentage`` keeps the raw coefficient as written (``69%`` -> 69);
    converting it to a fraction is up to the consumer.
    """

    kind: ValueKind
    data: Any = None

    # --- constructors ---------------------------------------------------------

    @classmethod
    def default(cls) -> Value:
        return DEFAULT

    @classmethod
    def string(cls, text: str) -> Value:
        return cls(ValueKind.STRING, str(text))

    @classmethod
    def integer(cls, number: int) -> Value:
        return cls(ValueKind.INTEGER, int(number))

    @classmethod
    def float(cls, number: float) -> Value:
        return cls(ValueKind.FLOAT, float(number))

    @classmethod
    def percentage(cls, coefficient: int) -> Value:
        return cls(ValueKind.PERCENTAGE, int(coefficient))

    @classmethod
    def tuple(cls, items: Iterable[Value]) -> Value:
        return cls(ValueKind.TUPLE, tuple(items))

    # --- inspection -----------------------------------------------------------

    @property
    def is_default(self) -> bool:
        return self.kind is ValueKind.DEFAULT

    def describe(self) -> str:
        """Return the variant name for use in error messages."""
        return self.kind.value

    def __str__(self) -> str:
        if self.kind is ValueKind.DEFAULT:
            return "default"
        if self.kind is ValueKind.STRING:
            escaped = self.data.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            return f'"{escaped}"'
        if self.kind is ValueKind.PERCENTAGE:
            return f"{self.data}%"
        if self.kind is ValueKind.TUPLE:
            return "(" + ", ".join(str(item) for item in self.data) + ")"
        return repr(self.data)


DEFAULT = Value(ValueKind.DEFAULT)
