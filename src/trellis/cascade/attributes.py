"""Resolved attributes and the typed accessor consumers read them through."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, TypeVar

from trellis.errors import AttributeValueError
from trellis.model.value import Value

T = TypeVar("T")

Converter = Callable[[Value], T]


@dataclass(frozen=True)
class AttributeOrigin:
    """Where the winning value for a key was declared."""

    kind: str  # "style" or "template"
    line: int
    source: str = "template"

    def __str__(self) -> str:
        if self.kind == "style":
            return f"style rule at {self.source}:{self.line}"
        return f"template line {self.line}"


@dataclass(frozen=True)
class ResolvedAttributes:
    """The final key -> value mapping for one component instance.

    ``values`` may still contain ``Value.default()`` entries; the accessors
    decide what that sentinel means for each read.
    """

    component_class: str
    component_line: int
    values: dict[str, Value] = field(default_factory=dict)
    origins: dict[str, AttributeOrigin] = field(default_factory=dict, compare=False)

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str) -> Value | None:
        return self.values.get(key)

    def attribute(self, key: str, convert: Converter[T], default: T) -> T:
        """Convert the value for *key*, or return *default* if it is not set.

        *convert* is not called for absent keys.  Any exception it raises is
        wrapped in :class:`AttributeValueError` naming this component and field.
        """
        if key not in self.values:
            return default
        return self._convert(key, convert)

    def attribute_optional(self, key: str, convert: Converter[T]) -> T | None:
        """Like :meth:`attribute`, but None when absent or explicitly ``default``."""
        value = self.values.get(key)
        if value is None or value.is_default:
            return None
        return self._convert(key, convert)

    def _convert(self, key: str, convert: Converter[T]) -> T:
        try:
            return convert(self.values[key])
        except Exception as exc:
            raise AttributeValueError(
                component=self.component_class,
                line=self.component_line,
                field=key,
                inner=exc,
                origin=self.origins.get(key),
            ) from exc
