"""Markup parsing: template documents, literals and parse errors."""

from trellis.parser.errors import (
    DuplicateAttributeError,
    ExcessiveIndentationError,
    InvalidIndentationError,
    InvalidSyntaxError,
    MissingRootError,
    MultipleRootsError,
    ParseError,
    UnterminatedBlockError,
)
from trellis.parser.lines import INDENT_WIDTH
from trellis.parser.template import parse_template, parse_template_file
from trellis.parser.transformer import parse_value

__all__ = [
    "parse_template",
    "parse_template_file",
    "parse_value",
    "INDENT_WIDTH",
    "ParseError",
    "InvalidIndentationError",
    "ExcessiveIndentationError",
    "MultipleRootsError",
    "MissingRootError",
    "DuplicateAttributeError",
    "UnterminatedBlockError",
    "InvalidSyntaxError",
]
