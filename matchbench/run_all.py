# run_all.py
# The three ways to drive the core: every case, a chosen subset, or a selector comparison.

from .harness import BenchmarkHarness
from .registry import default_registry
from .scorer import SelectionScorer
from .selector import HeuristicSelector


def run_all(cases, registry=None):
    """Runs every registered algorithm on every case."""
    if registry is None:
        registry = default_registry()
    return BenchmarkHarness(registry).run_all(cases)


def run_subset(cases, indices, registry=None):
    """Runs every registered algorithm on the cases at the given indices."""
    if registry is None:
        registry = default_registry()
    return BenchmarkHarness(registry).run_subset(cases, indices)


def run_with_selection(cases, selector=None, registry=None):
    """Scores `selector` (HeuristicSelector by default) against the measured fastest algorithm."""
    if registry is None:
        registry = default_registry()
    if selector is None:
        selector = HeuristicSelector()
    return SelectionScorer(registry, selector).score(cases)
