"""
matchbench: exact substring search with interchangeable algorithms.

The package offers five matching engines (Naive, KMP, RabinKarp,
BoyerMoore, Hybrid), a registry to look them up by name, a benchmark
harness that times them under a warm-up + repeated-trial protocol, and a
scorer that checks whether a selector heuristic picked the fastest one.

Example Usage:
    from matchbench import TestCase, run_all, run_with_selection

    cases = [TestCase("overlap", "abababab", "abab", "0,2,4")]
    for execution in run_all(cases):
        print(execution.case.name, execution.fastest())

    summary = run_with_selection(cases)
    print(f"accuracy: {summary.accuracy:.0%}")
"""

from .algorithms import (
    ENGINES,
    BoyerMoore,
    Hybrid,
    KMP,
    MatchEngine,
    MatchResult,
    Naive,
    RabinKarp,
    indices_to_string,
)
from .harness import BenchmarkHarness, summarize
from .models import (
    AlgorithmSummary,
    CaseExecution,
    SelectionOutcome,
    SelectionSummary,
    TestCase,
    TrialMeasurement,
)
from .registry import AlgorithmDescriptor, AlgorithmRegistry, UnknownAlgorithm, default_registry
from .run_all import run_all, run_subset, run_with_selection
from .scorer import SelectionScorer
from .selector import (
    DecliningSelector,
    HeuristicSelector,
    PatternShapeSelector,
    Selector,
    get_selector,
)

__version__ = "1.0.0"
__all__ = [
    "MatchEngine",
    "MatchResult",
    "indices_to_string",
    "ENGINES",
    "Naive",
    "KMP",
    "RabinKarp",
    "BoyerMoore",
    "Hybrid",
    "AlgorithmDescriptor",
    "AlgorithmRegistry",
    "UnknownAlgorithm",
    "default_registry",
    "Selector",
    "HeuristicSelector",
    "PatternShapeSelector",
    "DecliningSelector",
    "get_selector",
    "BenchmarkHarness",
    "summarize",
    "SelectionScorer",
    "TestCase",
    "TrialMeasurement",
    "CaseExecution",
    "AlgorithmSummary",
    "SelectionOutcome",
    "SelectionSummary",
    "run_all",
    "run_subset",
    "run_with_selection",
]
