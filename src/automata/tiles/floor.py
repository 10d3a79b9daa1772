"""Black tile set for the hex floor.

Only black tiles are stored; any address not in the set is white.
"""

from typing import Iterable, List, Optional, Set
import logging

from ..core.config import DEFAULT_ADDRESS_BITS
from .coordinates import AxialCoordinate, HexAddressing

logger = logging.getLogger(__name__)


class TileFloor:
    """Sparse set of black tiles keyed by packed address.

    Attributes:
        addressing: Packing scheme for tile coordinates
        black: Set of packed addresses of black tiles
    """

    def __init__(self, addressing: Optional[HexAddressing] = None, black: Iterable[int] = ()):
        """Initialize an all-white floor, optionally seeded with black addresses.

        Args:
            addressing: Packing scheme (DEFAULT_ADDRESS_BITS per axis if None,
                the same default TileConfig uses)
            black: Packed addresses of initially black tiles
        """
        self.addressing = addressing or HexAddressing(DEFAULT_ADDRESS_BITS)
        self.black: Set[int] = set(black)

    def toggle(self, coordinate: AxialCoordinate) -> bool:
        """Flip a tile.

        Args:
            coordinate: Tile to flip

        Returns:
            True if the tile is black after the flip
        """
        address = self.addressing.address(coordinate)
        return self.toggle_address(address)

    def toggle_address(self, address: int) -> bool:
        """Flip a tile by packed address; returns True if now black."""
        if address in self.black:
            self.black.remove(address)
            return False
        self.black.add(address)
        return True

    def is_black(self, coordinate: AxialCoordinate) -> bool:
        """Check whether a tile is black."""
        if not self.addressing.contains(coordinate):
            return False
        return self.addressing.address(coordinate) in self.black

    def black_count(self) -> int:
        """Number of black tiles."""
        return len(self.black)

    def black_coordinates(self) -> List[AxialCoordinate]:
        """Coordinates of all black tiles, sorted."""
        return sorted(self.addressing.coordinate(address) for address in self.black)

    def copy(self) -> 'TileFloor':
        """Create a deep copy of the floor."""
        return TileFloor(self.addressing, self.black)

    def __len__(self) -> int:
        return len(self.black)

    def __contains__(self, coordinate: object) -> bool:
        return isinstance(coordinate, AxialCoordinate) and self.is_black(coordinate)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileFloor):
            return False
        return self.addressing == other.addressing and self.black == other.black

    def __repr__(self) -> str:
        return f"TileFloor(black={len(self.black)}, {self.addressing!r})"
