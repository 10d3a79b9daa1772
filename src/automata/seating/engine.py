"""Seating automaton rule and simulation.

Each generation scans the previous layout and collects the seats that flip:

- Floor never changes
- An empty seat with no occupied neighbors becomes occupied
- An occupied seat with at least threshold occupied neighbors becomes empty

The simulation runs until a generation produces no changes.
"""

from typing import List, Optional, Sequence
import logging

from ..core.engine import Change, StepEngine, UntilConverged
from .grid import SeatLayout
from .rules import Cell, NeighborPolicy, AdjacentPolicy

logger = logging.getLogger(__name__)


class SeatingRule:
    """Changeset computer for a seat layout under one neighbor policy."""

    def __init__(self, policy: Optional[NeighborPolicy] = None):
        """Initialize the rule.

        Args:
            policy: Neighbor policy (adjacent if None)
        """
        self.policy = policy or AdjacentPolicy()

    def compute_changes(self, layout: SeatLayout) -> List[Change]:
        """Collect every seat whose state flips this generation.

        Reads only the given layout; nothing is written.

        Args:
            layout: Snapshot of the previous generation

        Returns:
            Changes in row-major order, one per flipping seat
        """
        changes = []
        policy = self.policy

        for row in range(layout.row_count):
            for column in range(layout.column_count):
                cell = layout.code_at(row, column)
                if cell == Cell.FLOOR:
                    continue

                # An empty seat only cares whether any neighbor is occupied
                count = policy.count_occupied_neighbors(
                    layout, row, column, early_exit_at_one=(cell == Cell.EMPTY))
                new_cell = policy.next_state(Cell(cell), count)
                if new_cell != cell:
                    changes.append(Change(layout.addressing.address(row, column), new_cell))

        return changes

    def apply_changes(self, layout: SeatLayout, changes: Sequence[Change]) -> None:
        """Write a full changeset into the layout."""
        for change in changes:
            layout.set_address(change.address, change.value)


class SeatingSimulation:
    """Runs a seat layout to its fixed point.

    Attributes:
        layout: Current layout (modified in place)
        policy: Neighbor policy in use
        engine: Underlying step engine
    """

    def __init__(self, layout: SeatLayout, policy: Optional[NeighborPolicy] = None):
        """Initialize simulation.

        Args:
            layout: Initial layout, owned and evolved by the simulation
            policy: Neighbor policy (adjacent if None)
        """
        self.layout = layout
        self.rule = SeatingRule(policy)
        self.policy = self.rule.policy
        self.engine = StepEngine(self.rule, layout, UntilConverged())

    @property
    def generation(self) -> int:
        """Number of generations computed, including the final unchanged one."""
        return self.engine.generation

    def evolve(self) -> bool:
        """Advance one generation.

        Returns:
            True if any seat changed, False once the fixed point is reached
        """
        changed = self.engine.evolve()
        if changed:
            logger.debug(f"Generation {self.generation}: {self.layout.count_occupants()} occupied")
        return changed

    def run(self) -> int:
        """Evolve until the layout stops changing.

        Returns:
            Occupied seat count at the fixed point
        """
        self.engine.run()
        occupants = self.count_occupants()
        logger.info(f"Fixed point under {self.policy.name} policy after "
                    f"{self.generation} generations: {occupants} occupied")
        return occupants

    def count_occupants(self) -> int:
        """Count occupied seats in the current layout."""
        return self.layout.count_occupants()
