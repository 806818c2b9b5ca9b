"""Trellis: indentation-based UI markup templates and attribute cascades."""

__version__ = "0.1.0"

from trellis.cascade import (  # noqa: E402
    AttributeOrigin,
    CascadeContext,
    ResolvedAttributes,
    ResolvedComponent,
    resolve_attributes,
    resolve_tree,
)
from trellis.classes import ComponentClasses  # noqa: E402
from trellis.conditions import evaluate_condition  # noqa: E402
from trellis.config import TrellisConfig  # noqa: E402
from trellis.errors import (  # noqa: E402
    AttributeValueError,
    ConditionError,
    ConversionError,
    UnknownComponentClassError,
)
from trellis.model import Attribute, ComponentTemplate, RuntimeState, Value, ValueKind  # noqa: E402
from trellis.parser import ParseError, parse_template, parse_template_file, parse_value  # noqa: E402
from trellis.stylesheet import StyleRule, Stylesheet, parse_stylesheet, parse_stylesheet_file  # noqa: E402

__all__ = [
    "__version__",
    "Attribute",
    "AttributeOrigin",
    "AttributeValueError",
    "CascadeContext",
    "ComponentClasses",
    "ComponentTemplate",
    "ConditionError",
    "ConversionError",
    "ParseError",
    "ResolvedAttributes",
    "ResolvedComponent",
    "RuntimeState",
    "StyleRule",
    "Stylesheet",
    "TrellisConfig",
    "UnknownComponentClassError",
    "Value",
    "ValueKind",
    "evaluate_condition",
    "parse_stylesheet",
    "parse_stylesheet_file",
    "parse_template",
    "parse_template_file",
    "parse_value",
    "resolve_attributes",
    "resolve_tree",
]
