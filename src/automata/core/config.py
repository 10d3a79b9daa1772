"""Run configuration for the two automata."""

from typing import Optional

DEFAULT_TILE_GENERATIONS = 100
DEFAULT_ADDRESS_BITS = 16


class SeatingConfig:
    """Configuration for the seating automaton."""

    def __init__(self, line_of_sight: bool = False):
        """Initialize seating configuration.

        Args:
            line_of_sight: Use line-of-sight neighbors instead of adjacent ones
        """
        self.line_of_sight = bool(line_of_sight)

    @property
    def policy_name(self) -> str:
        """Name of the neighbor policy selected by this configuration."""
        return "line_of_sight" if self.line_of_sight else "adjacent"

    def copy(self) -> 'SeatingConfig':
        """Create a copy of the configuration."""
        return SeatingConfig(line_of_sight=self.line_of_sight)

    def __repr__(self) -> str:
        return f"SeatingConfig(policy={self.policy_name})"


class TileConfig:
    """Configuration for the hex tile automaton."""

    def __init__(self,
                 generations: int = DEFAULT_TILE_GENERATIONS,
                 address_bits: Optional[int] = None):
        """Initialize tile configuration.

        Args:
            generations: Number of generations (days) to simulate (>= 0)
            address_bits: Bits per axis for packed tile addresses (2-31).
                8 gives the compact 256x256 field.

        Raises:
            ValueError: If a parameter is out of range
        """
        if generations < 0:
            raise ValueError("Generation count cannot be negative")
        if address_bits is None:
            address_bits = DEFAULT_ADDRESS_BITS
        if not (2 <= address_bits <= 31):
            raise ValueError("Address bits must be between 2 and 31")

        self.generations = generations
        self.address_bits = address_bits

    def copy(self) -> 'TileConfig':
        """Create a copy of the configuration."""
        return TileConfig(generations=self.generations, address_bits=self.address_bits)

    def __repr__(self) -> str:
        return f"TileConfig(generations={self.generations}, address_bits={self.address_bits})"
