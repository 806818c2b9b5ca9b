"""Attribute cascade: resolution and typed access to resolved attributes."""

from trellis.cascade.attributes import AttributeOrigin, Converter, ResolvedAttributes
from trellis.cascade.resolver import (
    CascadeContext,
    ResolvedComponent,
    resolve_attributes,
    resolve_tree,
)

__all__ = [
    "AttributeOrigin",
    "CascadeContext",
    "Converter",
    "ResolvedAttributes",
    "ResolvedComponent",
    "resolve_attributes",
    "resolve_tree",
]
