"""Seat layout state for the seating automaton.

The layout is a dense row-major numpy vector of cell codes with a fixed
shape. Rows and columns are addressed through RectAddressing.
"""

import numpy as np
from typing import Iterator, List, Optional, Tuple
import logging

from ..core.addressing import RectAddressing, RectCoordinate
from .rules import Cell, SYMBOL_FOR_CELL

logger = logging.getLogger(__name__)

CELL_DTYPE = np.int8


class SeatLayout:
    """Rectangular grid of floor, empty and occupied cells.

    Attributes:
        row_count: Number of rows
        column_count: Number of columns
        addressing: Row-major address mapping for this shape
        cells: 1D numpy array of Cell codes, length row_count * column_count
    """

    def __init__(self, row_count: int, column_count: int, cells: Optional[np.ndarray] = None):
        """Initialize layout with given dimensions.

        Args:
            row_count: Number of rows
            column_count: Number of columns
            cells: Optional flat or 2D array of Cell codes (defaults to all floor)

        Raises:
            ValueError: If cells does not match the shape or holds unknown codes
            CoordinateRangeError: If the shape cannot be addressed
        """
        self.addressing = RectAddressing(row_count, column_count)
        self.row_count = row_count
        self.column_count = column_count

        if cells is not None:
            cells = np.asarray(cells)
            if cells.size != self.addressing.size:
                raise ValueError(
                    f"Cell array of size {cells.size} doesn't match layout size {row_count}x{column_count}"
                )
            if cells.size and not np.isin(cells, [int(cell) for cell in Cell]).all():
                raise ValueError("Cell array contains unknown cell codes")
            self.cells = cells.astype(CELL_DTYPE).reshape(-1)
        else:
            self.cells = np.full(self.addressing.size, Cell.FLOOR, dtype=CELL_DTYPE)

    @classmethod
    def from_rows(cls, rows: List[List[Cell]]) -> 'SeatLayout':
        """Build a layout from already-validated rows of cells."""
        row_count = len(rows)
        column_count = len(rows[0]) if rows else 0
        cells = np.array([int(cell) for row in rows for cell in row], dtype=CELL_DTYPE)
        return cls(row_count, column_count, cells)

    def contains(self, row: int, column: int) -> bool:
        """Check whether a coordinate lies inside the layout."""
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    def code_at(self, row: int, column: int) -> int:
        # Hot path for neighbor scans: raw code, no bounds check
        return int(self.cells[row * self.column_count + column])

    def cell_at(self, row: int, column: int) -> Cell:
        """Cell at a coordinate known to be inside the layout."""
        return Cell(self.code_at(row, column))

    def get(self, row: int, column: int) -> Cell:
        """Get cell at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(row, column):
            raise IndexError(f"Coordinates ({row}, {column}) out of bounds for {self.row_count}x{self.column_count} layout")
        return self.cell_at(row, column)

    def set(self, row: int, column: int, cell: Cell) -> None:
        """Set cell at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(row, column):
            raise IndexError(f"Coordinates ({row}, {column}) out of bounds for {self.row_count}x{self.column_count} layout")
        self.cells[self.addressing.address(row, column)] = int(cell)

    def set_address(self, address: int, cell: Cell) -> None:
        """Write a cell by its row-major address."""
        self.cells[address] = int(cell)

    def coordinates(self) -> Iterator[RectCoordinate]:
        """Iterate over every coordinate in row-major order."""
        for row in range(self.row_count):
            for column in range(self.column_count):
                yield RectCoordinate(row, column)

    def count(self, cell: Cell) -> int:
        """Count cells in the given state."""
        return int(np.count_nonzero(self.cells == int(cell)))

    def count_occupants(self) -> int:
        """Count occupied seats."""
        return self.count(Cell.OCCUPIED)

    def to_array(self) -> np.ndarray:
        """Get layout as a 2D (rows, columns) array copy."""
        return self.cells.reshape(self.row_count, self.column_count).copy()

    def copy(self) -> 'SeatLayout':
        """Create a deep copy of the layout."""
        return SeatLayout(self.row_count, self.column_count, self.cells.copy())

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        """Access cell using layout[row, column] syntax."""
        row, column = key
        return self.get(row, column)

    def __setitem__(self, key: Tuple[int, int], value: Cell) -> None:
        """Set cell using layout[row, column] = value syntax."""
        row, column = key
        self.set(row, column, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeatLayout):
            return False
        return (self.row_count == other.row_count and
                self.column_count == other.column_count and
                np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        """Render the layout using the input symbols."""
        lines = []
        for row in range(self.row_count):
            lines.append(''.join(SYMBOL_FOR_CELL[self.cell_at(row, column)]
                                 for column in range(self.column_count)))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f"SeatLayout({self.row_count}x{self.column_count}, "
                f"occupied={self.count_occupants()}, empty={self.count(Cell.EMPTY)})")
