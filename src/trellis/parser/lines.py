"""Split markup source into logical lines.

A logical line is one component (or stylesheet rule) declaration: the
physical line it starts on plus any following lines swallowed by an
attribute block that is still open.  Blank and comment-only lines are
dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from trellis.parser.errors import InvalidIndentationError, UnterminatedBlockError

INDENT_WIDTH = 4

# Only "\n" and "\r\n" end a line; other Unicode separators stay inside the text.
_NEWLINE_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class LogicalLine:
    """A declaration and where it started."""

    number: int  # 1-based line of the first physical line
    indent: str  # leading whitespace of the first physical line
    text: str  # declaration text with the leading indent removed

    @property
    def depth(self) -> int:
        """Indentation depth in units, validating the indent on the way."""
        if "\t" in self.indent or len(self.indent) % INDENT_WIDTH:
            raise InvalidIndentationError(
                f"indentation of {len(self.indent)} column(s) is not a multiple "
                f"of {INDENT_WIDTH} spaces",
                line=self.number,
            )
        return len(self.indent) // INDENT_WIDTH


def _brace_balance(line: str) -> int:
    """Net count of ``{`` minus ``}`` outside string literals and comments."""
    balance = 0
    in_string = False
    escaped = False
    i = 0
    while i < len(line):
        ch = line[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "/" and line.startswith("//", i):
            break
        elif ch == "{":
            balance += 1
        elif ch == "}":
            balance -= 1
        i += 1
    return balance


def _is_blank(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("//")


def logical_lines(source: str) -> Iterator[LogicalLine]:
    """Yield the logical lines of *source* in document order."""
    physical = _NEWLINE_RE.split(source)
    i = 0
    while i < len(physical):
        raw = physical[i]
        if _is_blank(raw):
            i += 1
            continue

        start = i
        body = raw.lstrip(" \t")
        indent = raw[: len(raw) - len(body)]
        parts = [body]
        depth = _brace_balance(body)
        while depth > 0:
            i += 1
            if i >= len(physical):
                raise UnterminatedBlockError(
                    "attribute block is never closed", line=start + 1
                )
            parts.append(physical[i])
            depth += _brace_balance(physical[i])

        yield LogicalLine(number=start + 1, indent=indent, text="\n".join(parts))
        i += 1
