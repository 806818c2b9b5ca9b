"""Template model: Attribute and ComponentTemplate dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from trellis.model.value import Value

# (expression, runtime state) -> bool; raising aborts resolution.
Evaluator = Callable[[str, Any], bool]


@dataclass(frozen=True)
class Attribute:
    """A single ``key: value`` declaration, optionally gated by a conditional.

    ``line`` is the 1-based source line the key appeared on.  It is
    diagnostic metadata only and does not take part in equality.
    """

    key: str
    value: Value
    conditional: str | None = None
    line: int = field(default=0, compare=False)

    def check_conditional(self, evaluator: Evaluator, state: Any) -> bool:
        """Return True if this attribute applies under *state*."""
        if self.conditional is None:
            return True
        return bool(evaluator(self.conditional, state))


@dataclass(frozen=True)
class ComponentTemplate:
    """A node in a parsed template tree.

    Attributes and children are kept in document order.  The tree is
    immutable once the parser returns it and may be shared freely between
    resolutions.
    """

    component_class: str
    line: int
    attributes: tuple[Attribute, ...] = ()
    children: tuple[ComponentTemplate, ...] = ()

    def get(self, key: str) -> Value | None:
        """Return the value of the last unconditional attribute named *key*."""
        found = None
        for attribute in self.attributes:
            if attribute.key == key and attribute.conditional is None:
                found = attribute.value
        return found

    def walk(self) -> Iterator[ComponentTemplate]:
        """Yield this node and all descendants, depth-first in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def depth(self) -> int:
        """Number of nesting levels below and including this node."""
        if not self.children:
            return 1
        return 1 + max(child.depth for child in self.children)
