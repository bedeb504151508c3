import matplotlib

matplotlib.use("Agg")

import pytest

from matchbench.algorithms.base import MatchEngine, MatchResult
from matchbench.algorithms.brute_force import naive_search
from matchbench.registry import AlgorithmDescriptor, AlgorithmRegistry
from matchbench.selector import Selector


class FakeClock:
    """Deterministic nanosecond timer; engines advance it by a fixed cost per call."""

    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def advance(self, ns):
        self.now += ns


class TimedEngine(MatchEngine):
    """Correct engine whose every call costs `cost` fake nanoseconds."""

    def __init__(self, clock, cost, name=None):
        self.clock = clock
        self.cost = cost
        self.name = name
        self.calls = 0

    def solve(self, text, pattern):
        self.calls += 1
        self.clock.advance(self.cost)
        return MatchResult.from_indices(naive_search(text, pattern))


class FixedSelector(Selector):

    key = "fixed"

    def __init__(self, choice, clock=None, cost=0):
        self.choice = choice
        self.clock = clock
        self.cost = cost

    def choose(self, text, pattern):
        if self.clock is not None:
            self.clock.advance(self.cost)
        return self.choice

    def strategy_description(self):
        return f"Always {self.choice}"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_registry(clock):
    """Builds a registry of TimedEngines from {name: cost} (insertion order kept)."""
    def _make(costs):
        registry = AlgorithmRegistry()
        for name, cost in costs.items():
            registry.register(AlgorithmDescriptor(name, lambda n=name, c=cost: TimedEngine(clock, c, n)))
        return registry
    return _make
