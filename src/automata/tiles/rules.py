"""Hex tile flipping rule and fixed-length simulation.

Each generation, evaluated against the black set as it was at the start:

- A black tile with zero or more than two black neighbors turns white
- A white tile with exactly two black neighbors turns black

Only black tiles and their white neighbors can flip, so those are the only
candidates examined.
"""

from typing import List, Optional, Sequence, Set
import logging

from ..core.config import DEFAULT_TILE_GENERATIONS
from ..core.engine import Change, FixedGenerations, StepEngine
from .floor import TileFloor

logger = logging.getLogger(__name__)


def count_black_neighbors(floor: TileFloor, address: int) -> int:
    """Count black tiles among the six neighbors of an address.

    Stops at 3, since any count above 2 has the same outcome.

    Args:
        floor: Black set to read
        address: Packed address of the tile

    Returns:
        Black neighbor count, capped at 3
    """
    count = 0
    for neighbor in floor.addressing.neighbor_addresses(address):
        if neighbor in floor.black:
            count += 1
            if count > 2:
                return count
    return count


def flips_black(black_neighbors: int) -> bool:
    """Whether a black tile with this many black neighbors turns white."""
    return black_neighbors == 0 or black_neighbors > 2


def flips_white(black_neighbors: int) -> bool:
    """Whether a white tile with this many black neighbors turns black."""
    return black_neighbors == 2


class TileRule:
    """Changeset computer for the hex floor."""

    def candidates(self, floor: TileFloor) -> Set[int]:
        """Black tiles plus every white neighbor of a black tile."""
        candidates = set(floor.black)
        for address in floor.black:
            candidates.update(floor.addressing.neighbor_addresses(address))
        return candidates

    def compute_changes(self, floor: TileFloor) -> List[Change]:
        """Collect the tiles that flip this generation.

        Args:
            floor: Snapshot of the previous generation

        Returns:
            One change per flipping tile, value True for black
        """
        changes = []
        for address in sorted(self.candidates(floor)):
            black_neighbors = count_black_neighbors(floor, address)
            if address in floor.black:
                if flips_black(black_neighbors):
                    changes.append(Change(address, False))
            elif flips_white(black_neighbors):
                changes.append(Change(address, True))
        return changes

    def apply_changes(self, floor: TileFloor, changes: Sequence[Change]) -> None:
        """Apply every flip as one batch."""
        for change in changes:
            if change.value:
                floor.black.add(change.address)
            else:
                floor.black.discard(change.address)


class TileSimulation:
    """Runs the hex floor for a fixed number of generations.

    Attributes:
        floor: Current floor (modified in place)
        generations: Generation budget for run()
        engine: Underlying step engine
    """

    def __init__(self, floor: TileFloor, generations: int = DEFAULT_TILE_GENERATIONS):
        """Initialize simulation.

        Args:
            floor: Initial floor, owned and evolved by the simulation
            generations: Number of generations run() performs

        Raises:
            ValueError: If generations is negative
        """
        self.floor = floor
        self.generations = generations
        self.rule = TileRule()
        self.engine = StepEngine(self.rule, floor, FixedGenerations(generations))

    @property
    def generation(self) -> int:
        """Number of generations computed so far."""
        return self.engine.generation

    def evolve(self) -> bool:
        """Advance one generation; returns True if any tile flipped."""
        return self.engine.evolve()

    def run(self, generations: Optional[int] = None) -> int:
        """Run a fixed number of generations.

        Args:
            generations: Override for the configured budget

        Returns:
            Black tile count afterwards
        """
        if generations is not None:
            self.engine.termination = FixedGenerations(generations)
        else:
            self.engine.termination = FixedGenerations(self.generations)

        self.engine.run()
        black = self.floor.black_count()
        logger.info(f"After {self.generation} generations, {black} tiles are black")
        return black
