"""Error types raised while ingesting automaton input.

All of these are fatal: ingestion stops at the first problem and the
exception carries enough context (line, column, offending text) to produce
a useful diagnostic.
"""

from typing import Optional


class AutomatonError(Exception):
    """Base class for every recognised automaton failure."""


class ParseError(AutomatonError, ValueError):
    """Input text could not be turned into an initial state.

    Attributes:
        line_number: 1-based input line where the problem was found
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class UnexpectedCharacterError(ParseError):
    """A character outside the input alphabet."""

    def __init__(self, character: str, column: int, line_number: Optional[int] = None):
        super().__init__(f"unexpected character {character!r} at column {column}", line_number)
        self.character = character
        self.column = column


class RowWidthMismatchError(ParseError):
    """A seat row whose width differs from the first row."""

    def __init__(self, expected: int, actual: int, line_number: Optional[int] = None):
        super().__init__(
            f"incoming column count {actual} different from stored column count {expected}",
            line_number,
        )
        self.expected = expected
        self.actual = actual


class MalformedDirectionTokenError(ParseError):
    """A two-character direction token with a bad or missing second character."""

    def __init__(self, token: str, column: int, line_number: Optional[int] = None):
        super().__init__(f"malformed direction token {token!r} at column {column}", line_number)
        self.token = token
        self.column = column


class InputReadError(AutomatonError):
    """The input source could not be opened or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"failed to read {source}: {reason}")
        self.source = source


class CoordinateRangeError(AutomatonError, ValueError):
    """A coordinate or grid size that does not fit the address range."""
