"""Tests for the shared step engine and termination policies."""

import pytest
from automata.core.engine import Change, FixedGenerations, StepEngine, UntilConverged


class CountdownRule:
    """Decrements a single counter until it reaches zero."""

    def __init__(self):
        self.reads = 0

    def compute_changes(self, state):
        self.reads += 1
        if state[0] > 0:
            return [Change(0, state[0] - 1)]
        return []

    def apply_changes(self, state, changes):
        for change in changes:
            state[change.address] = change.value


class SwapRule:
    """Swaps two slots, reading both from the snapshot."""

    def compute_changes(self, state):
        return [Change(0, state[1]), Change(1, state[0])]

    def apply_changes(self, state, changes):
        for change in changes:
            state[change.address] = change.value


class TestUntilConverged:
    """Run until a generation produces no changes."""

    def test_runs_to_fixed_point(self):
        """Counter from 3 needs 3 changing generations plus one empty one."""
        state = [3]
        engine = StepEngine(CountdownRule(), state, UntilConverged())

        computed = engine.run()

        assert state == [0]
        assert computed == 4
        assert engine.generation == 4
        assert engine.last_change_count == 0

    def test_evolve_reports_change(self):
        """evolve() is True while changing and False at the fixed point."""
        state = [1]
        engine = StepEngine(CountdownRule(), state, UntilConverged())

        assert engine.evolve() is True
        assert engine.evolve() is False
        assert engine.evolve() is False
        assert state == [0]

    def test_already_stable(self):
        """A stable state needs exactly one generation to confirm."""
        state = [0]
        engine = StepEngine(CountdownRule(), state, UntilConverged())
        assert engine.run() == 1
        assert state == [0]


class TestFixedGenerations:
    """Run an exact number of generations."""

    def test_exact_count(self):
        """Generations continue even after the state stops changing."""
        rule = CountdownRule()
        state = [2]
        engine = StepEngine(rule, state, FixedGenerations(5))

        assert engine.run() == 5
        assert rule.reads == 5
        assert state == [0]

    def test_zero_generations(self):
        """A budget of zero leaves the state untouched."""
        state = [2]
        engine = StepEngine(CountdownRule(), state, FixedGenerations(0))
        assert engine.run() == 0
        assert state == [2]

    def test_negative_count(self):
        """Negative budgets are rejected."""
        with pytest.raises(ValueError):
            FixedGenerations(-1)

    def test_repeated_runs_add_generations(self):
        """Each run() call spends a fresh budget."""
        state = [10]
        engine = StepEngine(CountdownRule(), state, FixedGenerations(3))
        engine.run()
        engine.run()
        assert engine.generation == 6
        assert state == [4]


def test_changes_read_snapshot_only():
    """Every change is computed from the pre-step state, so a swap swaps."""
    state = ['a', 'b']
    engine = StepEngine(SwapRule(), state, FixedGenerations(1))
    engine.run()
    assert state == ['b', 'a']
