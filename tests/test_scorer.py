import pytest

from matchbench.algorithms.base import MatchEngine, MatchResult
from matchbench.harness import BenchmarkHarness
from matchbench.models import SelectionOutcome, SelectionSummary, TestCase
from matchbench.registry import AlgorithmDescriptor, UnknownAlgorithm
from matchbench.scorer import SelectionScorer
from matchbench.selector import DecliningSelector

from .conftest import FixedSelector

CASE = TestCase("overlap", "abababab", "abab", "0,2,4")


class Unfinished(MatchEngine):
    def solve(self, text, pattern):
        return MatchResult.not_implemented()


class Broken(MatchEngine):
    def solve(self, text, pattern):
        raise RuntimeError("boom")


def make_scorer(registry, selector, clock):
    return SelectionScorer(registry, selector, BenchmarkHarness(registry, timer=clock))


def test_selector_picks_fastest(make_registry, clock):
    registry = make_registry({"A": 100, "B": 40, "C": 70})
    scorer = make_scorer(registry, FixedSelector("B", clock, cost=5), clock)

    outcome = scorer.score_case(CASE)

    assert outcome.chosen_algorithm == "B"
    assert outcome.analysis_time == 5.0
    assert outcome.chosen_time == 40.0
    assert outcome.fastest_algorithm == "B"
    assert outcome.fastest_time == 40.0
    assert outcome.chose_fastest
    assert outcome.total_time == 45.0
    assert outcome.time_saved_or_lost == -5.0
    assert list(outcome.algorithm_times) == ["B", "A", "C"]


def test_selector_misses(make_registry, clock):
    registry = make_registry({"A": 100, "B": 40, "C": 70})
    scorer = make_scorer(registry, FixedSelector("A", clock, cost=10), clock)

    summary = scorer.score([CASE, CASE])

    assert summary.scored_cases == 2
    assert summary.correct_choices == 0
    assert summary.accuracy == 0.0
    # 40 - (10 + 100) per case
    assert summary.total_time_saved == -140.0
    assert summary.average_time_saved == -70.0


def test_ties_go_to_the_chosen_algorithm(make_registry, clock):
    registry = make_registry({"A": 30, "B": 30})
    outcome = make_scorer(registry, FixedSelector("B", clock), clock).score_case(CASE)
    assert outcome.fastest_algorithm == "B"
    assert outcome.chose_fastest


def test_declining_selector_scores_nothing(make_registry, clock):
    registry = make_registry({"A": 1})
    summary = make_scorer(registry, DecliningSelector(), clock).score([CASE, CASE])
    assert summary.scored_cases == 0
    assert summary.accuracy == 0.0
    assert summary.total_time_saved == 0


def test_unimplemented_choice_is_skipped(make_registry, clock):
    registry = make_registry({"A": 10})
    registry.register(AlgorithmDescriptor("Unfinished", Unfinished))
    scorer = make_scorer(registry, FixedSelector("Unfinished", clock), clock)
    assert scorer.score_case(CASE) is None


def test_failing_alternatives_are_left_out(make_registry, clock):
    registry = make_registry({"A": 10})
    registry.register(AlgorithmDescriptor("Broken", Broken))
    registry.register(AlgorithmDescriptor("Unfinished", Unfinished))
    outcome = make_scorer(registry, FixedSelector("A", clock), clock).score_case(CASE)
    assert list(outcome.algorithm_times) == ["A"]
    assert outcome.fastest_algorithm == "A"


def test_unknown_choice_raises(make_registry, clock):
    registry = make_registry({"A": 10})
    scorer = make_scorer(registry, FixedSelector("Oracle", clock), clock)
    with pytest.raises(UnknownAlgorithm):
        scorer.score([CASE])


def test_summary_math():
    outcomes = [
        SelectionOutcome("x", "A", 1.0, 4.0, {"A": 4.0, "B": 9.0}, "A", 4.0),
        SelectionOutcome("y", "A", 1.0, 9.0, {"A": 9.0, "B": 2.0}, "B", 2.0),
    ]
    summary = SelectionSummary(outcomes)
    assert summary.correct_choices == 1
    assert summary.accuracy == 0.5
    assert summary.total_time_saved == (4.0 - 5.0) + (2.0 - 10.0)
    assert SelectionSummary().average_time_saved == 0.0
