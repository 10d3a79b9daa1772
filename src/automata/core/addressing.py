"""Rectangular coordinate addressing.

Maps (row, column) pairs onto a dense row-major integer address so cell
state can live in a flat numpy vector.
"""

from typing import NamedTuple

import numpy as np

from .errors import CoordinateRangeError

# Addresses must fit a signed 32-bit integer
MAX_ADDRESS = int(np.iinfo(np.int32).max)


class RectCoordinate(NamedTuple):
    """Position of a cell in a rectangular grid."""
    row: int
    column: int


class RectAddressing:
    """Bijection between rectangular coordinates and row-major addresses.

    Attributes:
        row_count: Number of rows in the grid
        column_count: Number of columns in the grid
    """

    def __init__(self, row_count: int, column_count: int):
        """Initialize addressing for a grid of the given shape.

        Args:
            row_count: Number of rows (>= 0)
            column_count: Number of columns (>= 0)

        Raises:
            ValueError: If either dimension is negative
            CoordinateRangeError: If the grid has more cells than can be addressed
        """
        if row_count < 0 or column_count < 0:
            raise ValueError("Grid dimensions cannot be negative")
        if row_count > MAX_ADDRESS or column_count > MAX_ADDRESS:
            raise CoordinateRangeError(
                f"Grid dimensions {row_count}x{column_count} exceed addressable range"
            )
        if row_count * column_count - 1 > MAX_ADDRESS:
            raise CoordinateRangeError(
                f"Grid of {row_count}x{column_count} cells exceeds addressable range"
            )

        self.row_count = row_count
        self.column_count = column_count

    @property
    def size(self) -> int:
        """Total number of addressable cells."""
        return self.row_count * self.column_count

    def contains(self, row: int, column: int) -> bool:
        """Check whether a coordinate lies inside the grid."""
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    def address(self, row: int, column: int) -> int:
        """Row-major address of a coordinate. No bounds check."""
        return row * self.column_count + column

    def coordinate(self, address: int) -> RectCoordinate:
        """Inverse of :meth:`address`.

        Raises:
            IndexError: If the address is outside the grid
        """
        if not (0 <= address < self.size):
            raise IndexError(f"Address {address} out of range for {self.row_count}x{self.column_count} grid")
        row, column = divmod(address, self.column_count)
        return RectCoordinate(row, column)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectAddressing):
            return False
        return self.row_count == other.row_count and self.column_count == other.column_count

    def __repr__(self) -> str:
        return f"RectAddressing({self.row_count}x{self.column_count})"
