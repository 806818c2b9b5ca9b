"""Trellis model layer -- public type re-exports."""

from trellis.model.diagnostic import Diagnostic, Severity
from trellis.model.state import RuntimeState
from trellis.model.template import Attribute, ComponentTemplate, Evaluator
from trellis.model.value import DEFAULT, Value, ValueKind

__all__ = [
    # value
    "Value",
    "ValueKind",
    "DEFAULT",
    # template
    "Attribute",
    "ComponentTemplate",
    "Evaluator",
    # state
    "RuntimeState",
    # diagnostic
    "Severity",
    "Diagnostic",
]
