"""Axial coordinates and packed addressing for the hex tile floor.

Every step moves two units along x for east/west and one unit along x plus
two along y for the diagonal directions, which keeps all positions integral.

A coordinate packs into a single integer by biasing each axis into the
unsigned range and placing x in the high bits:

    address = (x + bias) << bits | (y + bias),   bias = 2 ** (bits - 1)

With 8 bits per axis this is ``(x + 128) << 8 | (y + 128)`` over a 256x256
field. Packing checks bounds and raises instead of wrapping.
"""

from enum import Enum
from typing import Dict, NamedTuple, Tuple

from ..core.errors import CoordinateRangeError


class Direction(Enum):
    """The six hex directions with their (dx, dy) step."""
    EAST = (2, 0)
    SOUTHEAST = (1, -2)
    SOUTHWEST = (-1, -2)
    WEST = (-2, 0)
    NORTHWEST = (-1, 2)
    NORTHEAST = (1, 2)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


DIRECTION_TOKENS: Dict[str, Direction] = {
    'e': Direction.EAST,
    'se': Direction.SOUTHEAST,
    'sw': Direction.SOUTHWEST,
    'w': Direction.WEST,
    'nw': Direction.NORTHWEST,
    'ne': Direction.NORTHEAST,
}


class AxialCoordinate(NamedTuple):
    """Position of a hex tile."""
    x: int
    y: int

    def step(self, direction: Direction) -> 'AxialCoordinate':
        """Coordinate one tile away in the given direction."""
        return AxialCoordinate(self.x + direction.dx, self.y + direction.dy)

    def neighbors(self) -> Tuple['AxialCoordinate', ...]:
        """The six adjacent coordinates, in Direction order."""
        return tuple(self.step(direction) for direction in Direction)


ORIGIN = AxialCoordinate(0, 0)


class HexAddressing:
    """Biased bit-packing of axial coordinates.

    Attributes:
        bits: Bits per axis
        bias: Offset added to each axis before packing
        min_value: Smallest representable axis value
        max_value: Largest representable axis value
    """

    def __init__(self, bits: int = 8):
        """Initialize addressing.

        Args:
            bits: Bits per axis (2-31)

        Raises:
            ValueError: If bits is out of range
        """
        if not (2 <= bits <= 31):
            raise ValueError("Address bits must be between 2 and 31")

        self.bits = bits
        self.bias = 1 << (bits - 1)
        self.min_value = -self.bias
        self.max_value = self.bias - 1
        self._mask = (1 << bits) - 1

    @property
    def capacity(self) -> int:
        """Number of distinct addresses."""
        return 1 << (2 * self.bits)

    def contains(self, coordinate: AxialCoordinate) -> bool:
        """Check whether a coordinate can be packed."""
        return (self.min_value <= coordinate.x <= self.max_value and
                self.min_value <= coordinate.y <= self.max_value)

    def address(self, coordinate: AxialCoordinate) -> int:
        """Pack a coordinate.

        Raises:
            CoordinateRangeError: If either axis is outside [min_value, max_value]
        """
        if not self.contains(coordinate):
            raise CoordinateRangeError(
                f"Coordinate ({coordinate.x}, {coordinate.y}) outside packable range "
                f"[{self.min_value}, {self.max_value}]"
            )
        return (coordinate.x + self.bias) << self.bits | (coordinate.y + self.bias)

    def coordinate(self, address: int) -> AxialCoordinate:
        """Unpack an address.

        Raises:
            CoordinateRangeError: If the address is outside the packed range
        """
        if not (0 <= address < self.capacity):
            raise CoordinateRangeError(f"Address {address} outside range [0, {self.capacity})")
        x = ((address >> self.bits) & self._mask) - self.bias
        y = (address & self._mask) - self.bias
        return AxialCoordinate(x, y)

    def neighbor_addresses(self, address: int) -> Tuple[int, ...]:
        """Packed addresses of the six tiles around an address."""
        return tuple(self.address(neighbor) for neighbor in self.coordinate(address).neighbors())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexAddressing):
            return False
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __repr__(self) -> str:
        return f"HexAddressing(bits={self.bits})"


# The compact 256x256 scheme
PACKED_BYTE = HexAddressing(8)
