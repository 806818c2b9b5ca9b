"""Parser error types.

Every structural problem aborts the whole document; the error carries the
1-based line of the offending component or rule.
"""


class ParseError(Exception):
    """Raised when template or stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InvalidIndentationError(ParseError):
    """Leading whitespace is not a whole number of indentation units."""


class ExcessiveIndentationError(ParseError):
    """A component is indented more than one unit deeper than its parent."""


class MultipleRootsError(ParseError):
    """A second component appeared at indentation depth 0."""


class MissingRootError(ParseError):
    """The document contains no components at all."""


class DuplicateAttributeError(ParseError):
    """An unconditional key appears twice in one attribute block."""

    def __init__(self, key: str, line: int | None = None):
        self.key = key
        super().__init__(f"duplicate attribute key {key!r}", line=line)


class UnterminatedBlockError(ParseError):
    """An attribute block was opened but never closed."""


class InvalidSyntaxError(ParseError):
    """A token or literal does not match the grammar."""
