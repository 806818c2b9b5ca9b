"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from trellis.model.template import Attribute


@dataclass(frozen=True)
class StyleRule:
    """Attributes applied to every component whose class equals ``class_matcher``."""

    class_matcher: str
    attributes: tuple[Attribute, ...]
    line: int = 0

    def matches(self, component_class: str) -> bool:
        return self.class_matcher == component_class


@dataclass(frozen=True)
class Stylesheet:
    """Style rules in source order.  Order is significant for the cascade."""

    rules: tuple[StyleRule, ...] = ()
    name: str = "<style>"

    def matching(self, component_class: str) -> Iterator[StyleRule]:
        """Yield the rules that apply to *component_class*, in document order."""
        for rule in self.rules:
            if rule.matches(component_class):
                yield rule

    @property
    def classes(self) -> frozenset[str]:
        return frozenset(rule.class_matcher for rule in self.rules)
