"""Errors raised while reading resolved attributes and evaluating conditionals."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trellis.cascade.attributes import AttributeOrigin


class ConversionError(ValueError):
    """A Value could not be converted to the type a consumer asked for."""


class ConditionError(ValueError):
    """A conditional expression could not be evaluated."""


class AttributeValueError(Exception):
    """A consumer failed to read an attribute of a resolved component.

    Carries the consuming component (class and template line), the field
    being read and, when known, where the winning value was declared.
    The original exception is available as ``inner`` and ``__cause__``.
    """

    def __init__(
        self,
        component: str,
        line: int,
        field: str,
        inner: BaseException,
        origin: AttributeOrigin | None = None,
    ) -> None:
        self.component = component
        self.line = line
        self.field = field
        self.inner = inner
        self.origin = origin
        message = f"{component} (line {line}), field {field!r}: {inner}"
        if origin is not None:
            message += f" (value from {origin})"
        super().__init__(message)


class UnknownComponentClassError(LookupError):
    """No consumer is registered for a component class."""

    def __init__(self, component_class: str, line: int | None = None) -> None:
        self.component_class = component_class
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"unknown component class {component_class!r}{where}")
