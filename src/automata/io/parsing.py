"""Input ingestion for both automata.

All validation happens here, before any simulation starts. Parsers raise a
subclass of AutomatonError on the first problem; try_parse wraps a parser
call into a ParseResult for callers that prefer a value-or-error result.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union
import logging

from ..core.errors import (
    AutomatonError, InputReadError, MalformedDirectionTokenError,
    RowWidthMismatchError, UnexpectedCharacterError,
)
from ..seating.grid import SeatLayout
from ..seating.rules import CELL_SYMBOLS, Cell
from ..tiles.coordinates import DIRECTION_TOKENS, AxialCoordinate, Direction, HexAddressing, ORIGIN
from ..tiles.floor import TileFloor

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the error that stopped parsing."""
    value: Optional[T] = None
    error: Optional[AutomatonError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error if parsing failed."""
        if self.error is not None:
            raise self.error
        return self.value


def try_parse(parser: Callable[..., T], *args, **kwargs) -> ParseResult[T]:
    """Call a parser and capture any AutomatonError in the result."""
    try:
        return ParseResult(value=parser(*args, **kwargs))
    except AutomatonError as exc:
        return ParseResult(error=exc)


def read_input_lines(path: Union[str, Path]) -> List[str]:
    """Read all lines of an input file.

    Raises:
        InputReadError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(str(path), str(exc)) from exc


def _content_lines(lines: Iterable[str]) -> Iterator[tuple]:
    # (line_number, stripped text) up to the last non-blank line
    stripped = [line.strip() for line in lines]
    while stripped and not stripped[-1]:
        stripped.pop()
    return enumerate(stripped, start=1)


def parse_seat_row(text: str, line_number: Optional[int] = None) -> List[Cell]:
    """Convert one row of '.', 'L', '#' into cells.

    Raises:
        UnexpectedCharacterError: On any other character
    """
    row = []
    for column, character in enumerate(text):
        try:
            row.append(CELL_SYMBOLS[character])
        except KeyError:
            raise UnexpectedCharacterError(character, column, line_number) from None
    return row


def parse_seat_layout(lines: Iterable[str]) -> SeatLayout:
    """Build a seat layout from text rows.

    The first row fixes the column count. Trailing blank lines are dropped;
    a blank line between rows is a zero-width row and fails the width check.

    Raises:
        UnexpectedCharacterError: On a character outside '.', 'L', '#'
        RowWidthMismatchError: On a row of a different width than the first
        CoordinateRangeError: If the layout is too large to address
    """
    rows: List[List[Cell]] = []
    column_count = -1

    for line_number, text in _content_lines(lines):
        row = parse_seat_row(text, line_number)
        if column_count < 0:
            column_count = len(row)
        elif len(row) != column_count:
            raise RowWidthMismatchError(column_count, len(row), line_number)
        rows.append(row)

    layout = SeatLayout.from_rows(rows)
    logger.debug(f"Parsed seat layout {layout.row_count}x{layout.column_count}")
    return layout


def iter_directions(text: str, line_number: Optional[int] = None) -> Iterator[Direction]:
    """Tokenize a line of undelimited direction tokens.

    'e' and 'w' are single characters; 'se', 'sw', 'nw', 'ne' are two.

    Raises:
        UnexpectedCharacterError: On a character that cannot start a token
        MalformedDirectionTokenError: On a bad or truncated two-character token
    """
    cursor = 0
    while cursor < len(text):
        first = text[cursor]
        if first in ('s', 'n'):
            token = text[cursor:cursor + 2]
            direction = DIRECTION_TOKENS.get(token)
            if direction is None:
                raise MalformedDirectionTokenError(token, cursor, line_number)
        elif first in DIRECTION_TOKENS:
            token = first
            direction = DIRECTION_TOKENS[token]
        else:
            raise UnexpectedCharacterError(first, cursor, line_number)
        cursor += len(token)
        yield direction


def parse_tile_path(text: str, line_number: Optional[int] = None) -> AxialCoordinate:
    """Walk a line of direction tokens from the origin."""
    coordinate = ORIGIN
    for direction in iter_directions(text, line_number):
        coordinate = coordinate.step(direction)
    return coordinate


def parse_tile_floor(lines: Iterable[str], addressing: Optional[HexAddressing] = None) -> TileFloor:
    """Build the initial floor by flipping the tile each line identifies.

    Trailing blank lines are dropped. Any other blank line is an empty path
    and flips the origin tile. A tile named twice ends up white again.
    Without an explicit addressing the floor packs 16 bits per axis.

    Raises:
        UnexpectedCharacterError: On a character outside the token alphabet
        MalformedDirectionTokenError: On a bad two-character token
        CoordinateRangeError: If a tile falls outside the addressing range
    """
    floor = TileFloor(addressing)
    for line_number, text in _content_lines(lines):
        floor.toggle(parse_tile_path(text, line_number))

    logger.debug(f"Parsed tile floor with {floor.black_count()} black tiles")
    return floor
