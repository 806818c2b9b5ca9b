"""Standard converters for :meth:`ResolvedAttributes.attribute`.

Each converter accepts exactly the variants it names and raises
:class:`~trellis.errors.ConversionError` for anything else.
"""

from __future__ import annotations

from trellis.errors import ConversionError
from trellis.model.value import Value, ValueKind


def _expect(value: Value, *kinds: ValueKind) -> None:
    if value.kind not in kinds:
        expected = " or ".join(kind.value for kind in kinds)
        raise ConversionError(f"expected {expected}, got {value.describe()}")


def to_string(value: Value) -> str:
    _expect(value, ValueKind.STRING)
    return value.data


def to_integer(value: Value) -> int:
    _expect(value, ValueKind.INTEGER)
    return value.data


def to_float(value: Value) -> float:
    _expect(value, ValueKind.FLOAT)
    return value.data


def to_number(value: Value) -> float:
    """Accept an integer or a float literal, returning a float."""
    _expect(value, ValueKind.INTEGER, ValueKind.FLOAT)
    return float(value.data)


def to_percentage(value: Value) -> int:
    """Return the raw percentage coefficient (``69%`` -> 69)."""
    _expect(value, ValueKind.PERCENTAGE)
    return value.data


def to_fraction(value: Value) -> float:
    """Return a percentage as a fraction (``69%`` -> 0.69)."""
    return to_percentage(value) / 100.0


def to_tuple(value: Value) -> tuple[Value, ...]:
    _expect(value, ValueKind.TUPLE)
    return value.data


def to_color(value: Value) -> tuple[float, float, float, float]:
    """Convert ``(r, g, b)`` or ``(r, g, b, a)`` integers in 0-255 to RGBA floats."""
    items = to_tuple(value)
    if len(items) not in (3, 4):
        raise ConversionError(f"expected a color of 3 or 4 components, got {len(items)}")
    channels = []
    for item in items:
        channel = to_integer(item)
        if not 0 <= channel <= 255:
            raise ConversionError(f"color component {channel} is outside 0-255")
        channels.append(channel / 255.0)
    if len(channels) == 3:
        channels.append(1.0)
    return tuple(channels)  # type: ignore[return-value]


def to_vector2(value: Value) -> tuple[float, float]:
    """Convert a 2-tuple of numbers to a pair of floats."""
    items = to_tuple(value)
    if len(items) != 2:
        raise ConversionError(f"expected 2 components, got {len(items)}")
    return to_number(items[0]), to_number(items[1])
