"""Lark Transformer that converts component, rule and literal parse trees into model objects."""

from __future__ import annotations

import functools
import logging
import re
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)

from trellis.model.template import Attribute
from trellis.model.value import DEFAULT, Value
from trellis.parser.errors import DuplicateAttributeError, InvalidSyntaxError, ParseError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(r"\\(.)")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}

# Integer and percentage literals are signed 64-bit.
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


@functools.lru_cache(maxsize=None)
def _parser() -> Lark:
    logger.debug("Building markup parser from %s", GRAMMAR_PATH)
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start=["component", "rule", "value"],
        propagate_positions=True,
    )


class MarkupTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Values, Attributes and declarations.

    ``line_offset`` shifts the grammar's line numbers (relative to the
    parsed fragment) back to document line numbers.
    """

    def __init__(self, line_offset: int = 0) -> None:
        super().__init__()
        self.line_offset = line_offset

    # ---- literals ----

    def string(self, items: list[Token]) -> Value:
        raw = str(items[0])[1:-1]
        return Value.string(_ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), raw))

    def _checked_int(self, token: Token, text: str) -> int:
        number = int(text)
        if not INTEGER_MIN <= number <= INTEGER_MAX:
            line = token.line + self.line_offset if isinstance(token.line, int) else None
            raise InvalidSyntaxError(
                f"integer literal {text} does not fit in 64 bits", line=line, column=token.column
            )
        return number

    def integer(self, items: list[Token]) -> Value:
        return Value.integer(self._checked_int(items[0], str(items[0])))

    def float(self, items: list[Token]) -> Value:
        return Value.float(float(items[0]))

    def percentage(self, items: list[Token]) -> Value:
        return Value.percentage(self._checked_int(items[0], str(items[0])[:-1]))

    def tuple(self, items: list[Value]) -> Value:
        return Value.tuple(items)

    def default(self, items: list[Token]) -> Value:
        return DEFAULT

    def value(self, items: list[Value]) -> Value:
        return items[0]

    # ---- structural ----

    @v_args(meta=True)
    def attribute(self, meta, items: list[object]) -> Attribute:
        key = str(items[0])
        conditional = None
        if len(items) == 3:
            # Strip the surrounding "?{" and "}".
            conditional = str(items[1])[2:-1].strip()
        line = meta.line + self.line_offset if not meta.empty else self.line_offset
        return Attribute(key=key, value=items[-1], conditional=conditional, line=line)  # type: ignore[arg-type]

    def attributes(self, items: list[Attribute]) -> tuple[Attribute, ...]:
        return tuple(items)

    def component(self, items: list[object]) -> tuple[str, tuple[Attribute, ...]]:
        attributes = items[1] if len(items) > 1 else ()
        return str(items[0]), attributes  # type: ignore[return-value]

    def rule(self, items: list[object]) -> tuple[str, tuple[Attribute, ...]]:
        return str(items[0]), items[1]  # type: ignore[return-value]


def check_duplicates(attributes: tuple[Attribute, ...], line: int) -> None:
    """Reject a block that declares the same unconditional key twice."""
    seen: set[str] = set()
    for attribute in attributes:
        if attribute.conditional is not None:
            continue
        if attribute.key in seen:
            raise DuplicateAttributeError(attribute.key, line=attribute.line or line)
        seen.add(attribute.key)


def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(exc, UnexpectedCharacters):
        return f"unexpected character {exc.char!r}"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "unexpected end of input"
        return f"unexpected {exc.token!s:.40}"
    return "invalid syntax"


def parse_fragment(text: str, start: str, line: int = 1, column_offset: int = 0) -> object:
    """Parse *text* with the shared grammar starting at rule *start*.

    *line* is the document line the fragment begins on; lark errors are
    re-raised as :class:`InvalidSyntaxError` with document positions.
    """
    try:
        tree = _parser().parse(text, start=start)
    except UnexpectedInput as exc:
        error_line = line
        column = None
        # End-of-input errors may carry "?" or -1 instead of a position.
        relative = getattr(exc, "line", -1)
        if isinstance(relative, int) and relative > 0:
            error_line = line + relative - 1
            if isinstance(exc.column, int):
                column = exc.column + (column_offset if relative == 1 else 0)
        raise InvalidSyntaxError(_describe(exc), line=error_line, column=column) from exc
    try:
        return MarkupTransformer(line_offset=line - 1).transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, ParseError):
            raise exc.orig_exc from None
        raise


def parse_value(text: str) -> Value:
    """Parse a single literal such as ``5``, ``69%`` or ``(1, "a")`` into a Value."""
    return parse_fragment(text, start="value")  # type: ignore[return-value]
