"""Seat states and neighbor-detection policies.

Two policies decide which seats count as neighbors:

- Adjacent: the 8 cells immediately around a seat
- Line of sight: the first seat visible in each of the 8 directions,
  looking past any floor in between

An occupied seat is abandoned once the occupied-neighbor count reaches the
policy threshold (4 adjacent, 5 line of sight). An empty seat is taken when
no neighbor is occupied.
"""

from enum import IntEnum
from typing import Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import SeatLayout


class Cell(IntEnum):
    """State of one position in the seat layout."""
    FLOOR = 0
    EMPTY = 1
    OCCUPIED = 2


CELL_SYMBOLS: Dict[str, Cell] = {
    '.': Cell.FLOOR,
    'L': Cell.EMPTY,
    '#': Cell.OCCUPIED,
}
SYMBOL_FOR_CELL: Dict[Cell, str] = {cell: symbol for symbol, cell in CELL_SYMBOLS.items()}

# (row delta, column delta) for the 8 compass directions
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

ADJACENT_THRESHOLD = 4
LINE_OF_SIGHT_THRESHOLD = 5


class NeighborPolicy:
    """Counts occupied neighbors of a seat.

    Attributes:
        name: Policy identifier
        abandonment_threshold: Occupied-neighbor count at which a seat empties
        sees_past_floor: Whether a direction keeps walking over floor cells
    """

    name = "base"
    abandonment_threshold = 0
    sees_past_floor = False

    def has_occupant_towards(self, layout: 'SeatLayout', row: int, column: int,
                             d_row: int, d_column: int) -> bool:
        """Check whether the first seat in a direction is occupied.

        Args:
            layout: Snapshot to read
            row: Row of the seat being evaluated
            column: Column of the seat being evaluated
            d_row: Row step of the direction
            d_column: Column step of the direction

        Returns:
            True if an occupied seat is found before an empty seat or the edge
        """
        while True:
            row += d_row
            column += d_column

            if not layout.contains(row, column):
                return False

            cell = layout.code_at(row, column)
            if cell == Cell.OCCUPIED:
                return True
            if cell == Cell.EMPTY:
                return False

            if not self.sees_past_floor:
                return False

    def count_occupied_neighbors(self, layout: 'SeatLayout', row: int, column: int,
                                 early_exit_at_one: bool = False) -> int:
        """Count occupied neighbors of a seat.

        Scanning stops early once the answer can no longer change the
        outcome: at the first occupant when ``early_exit_at_one`` is set,
        otherwise when the abandonment threshold is reached.

        Args:
            layout: Snapshot to read
            row: Seat row
            column: Seat column
            early_exit_at_one: Only whether the count is zero matters

        Returns:
            Number of occupied neighbors (possibly capped as described)
        """
        count = 0
        for d_row, d_column in DIRECTIONS:
            if self.has_occupant_towards(layout, row, column, d_row, d_column):
                count += 1
                if early_exit_at_one or count >= self.abandonment_threshold:
                    return count
        return count

    def next_state(self, cell: Cell, occupied_neighbors: int) -> Cell:
        """Apply the seating rule to one cell."""
        if cell == Cell.EMPTY and occupied_neighbors == 0:
            return Cell.OCCUPIED
        if cell == Cell.OCCUPIED and occupied_neighbors >= self.abandonment_threshold:
            return Cell.EMPTY
        return cell

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.abandonment_threshold})"


class AdjacentPolicy(NeighborPolicy):
    """Neighbors are the 8 surrounding cells."""
    name = "adjacent"
    abandonment_threshold = ADJACENT_THRESHOLD
    sees_past_floor = False


class LineOfSightPolicy(NeighborPolicy):
    """Neighbors are the first seats visible in each direction."""
    name = "line_of_sight"
    abandonment_threshold = LINE_OF_SIGHT_THRESHOLD
    sees_past_floor = True


POLICIES: Dict[str, NeighborPolicy] = {
    AdjacentPolicy.name: AdjacentPolicy(),
    LineOfSightPolicy.name: LineOfSightPolicy(),
}


def get_policy(name: str) -> NeighborPolicy:
    """Look up a neighbor policy by name.

    Raises:
        ValueError: If no policy has that name
    """
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown neighbor policy {name!r}, expected one of {sorted(POLICIES)}") from None
