"""Generation stepping shared by both automata.

A generation is a read phase followed by a write phase. The rule computes a
changeset from the current state without modifying it, then the whole
changeset is applied before the next generation is read. This is what makes
updates simultaneous rather than cascading.

The engine is composed from a rule and a termination policy:

- UntilConverged: keep stepping until a generation produces no changes
- FixedGenerations: step exactly N generations, stable or not
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Protocol, Sequence, TypeVar
import logging

logger = logging.getLogger(__name__)

S = TypeVar("S")
S_contra = TypeVar("S_contra", contravariant=True)


@dataclass(frozen=True)
class Change:
    """One entry of a changeset: the new state for an address."""
    address: int
    value: Any


class Rule(Protocol[S_contra]):
    """Transition rule for one automaton.

    ``compute_changes`` must only read the state it is given.
    ``apply_changes`` writes a full changeset into the state.
    """

    def compute_changes(self, state: S_contra) -> List[Change]:
        ...

    def apply_changes(self, state: S_contra, changes: Sequence[Change]) -> None:
        ...


class TerminationPolicy(Protocol):
    """Decides whether another generation should be computed."""

    def should_continue(self, generation: int, changed: bool) -> bool:
        ...


class UntilConverged:
    """Stop at the first generation whose changeset is empty."""

    def should_continue(self, generation: int, changed: bool) -> bool:
        return changed

    def __repr__(self) -> str:
        return "UntilConverged()"


class FixedGenerations:
    """Run an exact number of generations with no convergence check."""

    def __init__(self, count: int):
        """Initialize with a generation budget.

        Args:
            count: Number of generations to run (>= 0)

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError("Generation count cannot be negative")
        self.count = count

    def should_continue(self, generation: int, changed: bool) -> bool:
        return generation < self.count

    def __repr__(self) -> str:
        return f"FixedGenerations({self.count})"


class StepEngine(Generic[S]):
    """Drives a rule over a state store.

    Attributes:
        rule: Transition rule producing and applying changesets
        state: The state store, modified in place
        termination: Policy consulted before every generation by run()
        generation: Number of generations computed so far
        last_change_count: Size of the most recent changeset
    """

    def __init__(self, rule: Rule[S], state: S, termination: TerminationPolicy):
        self.rule = rule
        self.state = state
        self.termination = termination
        self.generation = 0
        self.last_change_count = 0

    def evolve(self) -> bool:
        """Compute and apply one generation.

        Returns:
            True if the state changed, False if the changeset was empty
        """
        changes = self.rule.compute_changes(self.state)
        self.generation += 1
        self.last_change_count = len(changes)

        if not changes:
            logger.debug(f"Generation {self.generation}: no changes")
            return False

        self.rule.apply_changes(self.state, changes)
        logger.debug(f"Generation {self.generation}: applied {len(changes)} changes")
        return True

    def run(self) -> int:
        """Evolve until the termination policy says stop.

        Returns:
            Number of generations computed by this call
        """
        start = self.generation
        changed = True
        while self.termination.should_continue(self.generation - start, changed):
            changed = self.evolve()

        computed = self.generation - start
        logger.info(f"Stopped after {computed} generations ({self.termination!r})")
        return computed
