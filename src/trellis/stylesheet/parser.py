"""Stylesheet parser.

Syntax example::

    button { background: (255, 255, 255), padding: 4 }
    button {
        background?{ hovering }: (240, 240, 240),
    }
    label { size: 12, color: default }

Each rule is a flat ``class { attributes }`` declaration using the same
literal grammar as templates.  Rules keep their source order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from trellis.parser.lines import logical_lines
from trellis.parser.transformer import check_duplicates, parse_fragment
from trellis.stylesheet.model import StyleRule, Stylesheet

__all__ = ["parse_stylesheet", "parse_stylesheet_file"]

logger = logging.getLogger(__name__)


def parse_stylesheet(source: str, name: str = "<style>") -> Stylesheet:
    """Parse stylesheet markup into a Stylesheet.

    Indentation is not significant; every rule must carry an attribute
    block, and blocks may span several lines.
    """
    rules: list[StyleRule] = []
    for logical in logical_lines(source):
        class_matcher, attributes = parse_fragment(  # type: ignore[misc]
            logical.text,
            start="rule",
            line=logical.number,
            column_offset=len(logical.indent),
        )
        check_duplicates(attributes, logical.number)
        rules.append(StyleRule(class_matcher, attributes, line=logical.number))

    logger.debug("Parsed stylesheet %s with %d rule(s)", name, len(rules))
    return Stylesheet(rules=tuple(rules), name=name)


def parse_stylesheet_file(path: str | Path, encoding: str = "utf-8") -> Stylesheet:
    """Read and parse a stylesheet file, naming it after the path."""
    path = Path(path)
    return parse_stylesheet(path.read_text(encoding=encoding), name=str(path))
