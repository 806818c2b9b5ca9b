"""Template parser: indentation-structured markup into a ComponentTemplate tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from trellis.model.template import Attribute, ComponentTemplate
from trellis.parser.errors import ExcessiveIndentationError, MissingRootError, MultipleRootsError
from trellis.parser.lines import LogicalLine, logical_lines
from trellis.parser.transformer import check_duplicates, parse_fragment

__all__ = ["parse_template", "parse_template_file"]

logger = logging.getLogger(__name__)


@dataclass
class _Pending:
    """Mutable stand-in for a ComponentTemplate while its children are collected."""

    component_class: str
    line: int
    attributes: tuple[Attribute, ...]
    children: list[_Pending] = field(default_factory=list)

    def freeze(self) -> ComponentTemplate:
        return ComponentTemplate(
            component_class=self.component_class,
            line=self.line,
            attributes=self.attributes,
            children=tuple(child.freeze() for child in self.children),
        )


def _parse_component(logical: LogicalLine) -> _Pending:
    component_class, attributes = parse_fragment(  # type: ignore[misc]
        logical.text,
        start="component",
        line=logical.number,
        column_offset=len(logical.indent),
    )
    check_duplicates(attributes, logical.number)
    return _Pending(component_class, logical.number, attributes)


def parse_template(source: str) -> ComponentTemplate:
    """Parse template markup into its single root ComponentTemplate.

    Each component line may carry an attribute block; lines indented exactly
    one unit deeper than a component become its children.  Any structural
    problem raises a :class:`~trellis.parser.errors.ParseError` subclass for
    the whole document.
    """
    root: _Pending | None = None
    # stack[d] is the most recent component at depth d.
    stack: list[_Pending] = []

    for logical in logical_lines(source):
        depth = logical.depth
        component = _parse_component(logical)

        if depth == 0:
            if root is not None:
                raise MultipleRootsError(
                    f"second root component {component.component_class!r}; "
                    f"the root {root.component_class!r} is declared on line {root.line}",
                    line=logical.number,
                )
            root = component
            stack = [component]
            continue

        if depth > len(stack):
            raise ExcessiveIndentationError(
                f"component {component.component_class!r} is indented {depth} level(s) "
                f"but its parent is at level {len(stack) - 1}"
                if stack
                else f"component {component.component_class!r} is indented before any root",
                line=logical.number,
            )

        del stack[depth:]
        stack[-1].children.append(component)
        stack.append(component)

    if root is None:
        raise MissingRootError("document contains no components")

    template = root.freeze()
    logger.debug(
        "Parsed template %r with %d component(s)",
        template.component_class,
        sum(1 for _ in template.walk()),
    )
    return template


def parse_template_file(path: str | Path, encoding: str = "utf-8") -> ComponentTemplate:
    """Read and parse a template file."""
    return parse_template(Path(path).read_text(encoding=encoding))
