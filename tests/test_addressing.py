"""Tests for rectangular and hexagonal coordinate addressing.

Both schemes must be bijections over their valid range and must refuse
coordinates they cannot represent.
"""

import pytest
from automata.core.addressing import RectAddressing, RectCoordinate, MAX_ADDRESS
from automata.core.errors import CoordinateRangeError
from automata.tiles.coordinates import (
    AxialCoordinate, Direction, HexAddressing, PACKED_BYTE, ORIGIN,
)


class TestRectAddressing:
    """Row-major addressing of seat layouts."""

    def test_address_formula(self):
        """address = row * column_count + column."""
        addressing = RectAddressing(4, 7)
        assert addressing.address(0, 0) == 0
        assert addressing.address(0, 6) == 6
        assert addressing.address(1, 0) == 7
        assert addressing.address(3, 6) == 27

    @pytest.mark.parametrize("rows,columns", [(1, 1), (3, 3), (7, 5), (1, 12), (12, 1)])
    def test_bijection(self, rows, columns):
        """coordinate(address(c)) == c for every cell."""
        addressing = RectAddressing(rows, columns)
        for row in range(rows):
            for column in range(columns):
                address = addressing.address(row, column)
                assert addressing.coordinate(address) == RectCoordinate(row, column)

        addresses = {addressing.address(r, c) for r in range(rows) for c in range(columns)}
        assert addresses == set(range(rows * columns))

    def test_contains(self):
        """Only coordinates inside the grid are valid."""
        addressing = RectAddressing(3, 4)
        assert addressing.contains(0, 0)
        assert addressing.contains(2, 3)
        assert not addressing.contains(-1, 0)
        assert not addressing.contains(0, -1)
        assert not addressing.contains(3, 0)
        assert not addressing.contains(0, 4)

    def test_coordinate_out_of_range(self):
        """Unpacking an address past the grid raises IndexError."""
        addressing = RectAddressing(2, 2)
        with pytest.raises(IndexError):
            addressing.coordinate(4)
        with pytest.raises(IndexError):
            addressing.coordinate(-1)

    def test_empty_grid(self):
        """A 0x0 grid has no addresses."""
        addressing = RectAddressing(0, 0)
        assert addressing.size == 0
        with pytest.raises(IndexError):
            addressing.coordinate(0)

    def test_too_many_cells(self):
        """Grids whose addresses overflow a signed 32-bit integer are rejected."""
        with pytest.raises(CoordinateRangeError):
            RectAddressing(1 << 16, 1 << 16)
        with pytest.raises(CoordinateRangeError):
            RectAddressing(1, MAX_ADDRESS + 1)

    def test_negative_dimensions(self):
        """Negative dimensions are a programming error."""
        with pytest.raises(ValueError):
            RectAddressing(-1, 3)


class TestHexSteps:
    """Direction deltas in doubled axial coordinates."""

    def test_direction_deltas(self):
        """Each direction adds its fixed delta."""
        assert ORIGIN.step(Direction.EAST) == AxialCoordinate(2, 0)
        assert ORIGIN.step(Direction.SOUTHEAST) == AxialCoordinate(1, -2)
        assert ORIGIN.step(Direction.SOUTHWEST) == AxialCoordinate(-1, -2)
        assert ORIGIN.step(Direction.WEST) == AxialCoordinate(-2, 0)
        assert ORIGIN.step(Direction.NORTHWEST) == AxialCoordinate(-1, 2)
        assert ORIGIN.step(Direction.NORTHEAST) == AxialCoordinate(1, 2)

    def test_opposite_directions_cancel(self):
        """Stepping out and back returns to the start."""
        pairs = [
            (Direction.EAST, Direction.WEST),
            (Direction.NORTHEAST, Direction.SOUTHWEST),
            (Direction.NORTHWEST, Direction.SOUTHEAST),
        ]
        start = AxialCoordinate(5, -4)
        for there, back in pairs:
            assert start.step(there).step(back) == start

    def test_loop_returns_to_origin(self):
        """nw, w, sw, e, e walks back to the origin."""
        coordinate = ORIGIN
        for direction in (Direction.NORTHWEST, Direction.WEST, Direction.SOUTHWEST,
                          Direction.EAST, Direction.EAST):
            coordinate = coordinate.step(direction)
        assert coordinate == ORIGIN

    def test_six_distinct_neighbors(self):
        """A tile has six different neighbors, none of them itself."""
        neighbors = AxialCoordinate(3, 2).neighbors()
        assert len(set(neighbors)) == 6
        assert AxialCoordinate(3, 2) not in neighbors


class TestHexAddressing:
    """Biased bit-packing of hex coordinates."""

    def test_packed_byte_formula(self):
        """8-bit packing is (x + 128) << 8 | (y + 128)."""
        assert PACKED_BYTE.address(ORIGIN) == (128 << 8) | 128
        assert PACKED_BYTE.address(AxialCoordinate(-128, -128)) == 0
        assert PACKED_BYTE.address(AxialCoordinate(127, 127)) == 0xFFFF
        assert PACKED_BYTE.address(AxialCoordinate(2, -2)) == (130 << 8) | 126

    def test_packed_byte_bijection(self):
        """Every representable coordinate round-trips exactly."""
        for x in range(-128, 128):
            for y in range(-128, 128):
                coordinate = AxialCoordinate(x, y)
                assert PACKED_BYTE.coordinate(PACKED_BYTE.address(coordinate)) == coordinate

    def test_every_address_decodes(self):
        """Every 16-bit address maps back to itself."""
        for address in range(PACKED_BYTE.capacity):
            assert PACKED_BYTE.address(PACKED_BYTE.coordinate(address)) == address

    @pytest.mark.parametrize("coordinate", [
        AxialCoordinate(128, 0),
        AxialCoordinate(0, 128),
        AxialCoordinate(-129, 0),
        AxialCoordinate(0, -129),
    ])
    def test_out_of_range_coordinate(self, coordinate):
        """Coordinates outside the bias range raise instead of wrapping."""
        with pytest.raises(CoordinateRangeError):
            PACKED_BYTE.address(coordinate)
        assert not PACKED_BYTE.contains(coordinate)

    def test_out_of_range_address(self):
        """Addresses outside the packed range are rejected."""
        with pytest.raises(CoordinateRangeError):
            PACKED_BYTE.coordinate(1 << 16)
        with pytest.raises(CoordinateRangeError):
            PACKED_BYTE.coordinate(-1)

    def test_wider_packing(self):
        """Wider packing reaches coordinates the byte scheme cannot."""
        wide = HexAddressing(16)
        far = AxialCoordinate(1000, -2000)
        assert wide.coordinate(wide.address(far)) == far
        assert wide.min_value == -32768
        assert wide.max_value == 32767

    def test_neighbor_addresses(self):
        """Neighbor addresses are the packed neighbor coordinates."""
        address = PACKED_BYTE.address(ORIGIN)
        expected = tuple(PACKED_BYTE.address(n) for n in ORIGIN.neighbors())
        assert PACKED_BYTE.neighbor_addresses(address) == expected

    def test_invalid_bits(self):
        """Bit widths outside 2-31 are rejected."""
        with pytest.raises(ValueError):
            HexAddressing(1)
        with pytest.raises(ValueError):
            HexAddressing(32)
