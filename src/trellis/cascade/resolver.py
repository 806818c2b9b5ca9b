"""Attribute cascade: merge style rules and template attributes per component."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from trellis.cascade.attributes import AttributeOrigin, ResolvedAttributes
from trellis.conditions import evaluate_condition
from trellis.model.template import ComponentTemplate, Evaluator
from trellis.model.value import Value
from trellis.stylesheet.model import Stylesheet

__all__ = ["CascadeContext", "ResolvedComponent", "resolve_attributes", "resolve_tree"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CascadeContext:
    """Everything resolution reads: the stylesheet, the evaluator and the runtime state."""

    stylesheet: Stylesheet = field(default_factory=Stylesheet)
    evaluator: Evaluator = evaluate_condition
    state: Any = None


@dataclass(frozen=True)
class ResolvedComponent:
    """A resolved node mirroring the shape of its template."""

    attributes: ResolvedAttributes
    children: tuple[ResolvedComponent, ...] = ()

    def walk(self) -> Iterator[ResolvedComponent]:
        yield self
        for child in self.children:
            yield from child.walk()


def resolve_attributes(
    template: ComponentTemplate, context: CascadeContext
) -> ResolvedAttributes:
    """Resolve the final attributes of *template* from the stylesheet and its own declarations.

    Every matching style rule is applied in document order, then the
    template's own attributes, each insert overwriting any earlier value for
    the same key.  Attributes whose conditional evaluates false are skipped;
    evaluator errors propagate.
    """
    values: dict[str, Value] = {}
    origins: dict[str, AttributeOrigin] = {}
    stylesheet = context.stylesheet

    for rule in stylesheet.matching(template.component_class):
        for attribute in rule.attributes:
            if attribute.check_conditional(context.evaluator, context.state):
                values[attribute.key] = attribute.value
                origins[attribute.key] = AttributeOrigin(
                    "style", attribute.line or rule.line, stylesheet.name
                )

    # Local declarations always come after the stylesheet so they win
    for attribute in template.attributes:
        if attribute.check_conditional(context.evaluator, context.state):
            values[attribute.key] = attribute.value
            origins[attribute.key] = AttributeOrigin("template", attribute.line or template.line)

    logger.debug(
        "Resolved %s (line %d): %d attribute(s)",
        template.component_class,
        template.line,
        len(values),
    )
    return ResolvedAttributes(
        component_class=template.component_class,
        component_line=template.line,
        values=values,
        origins=origins,
    )


def resolve_tree(template: ComponentTemplate, context: CascadeContext) -> ResolvedComponent:
    """Resolve *template* and all of its descendants."""
    return ResolvedComponent(
        attributes=resolve_attributes(template, context),
        children=tuple(resolve_tree(child, context) for child in template.children),
    )
