# models.py
"""
Plain data produced and consumed by the benchmarking core.

- TestCase: one (text, pattern, expected) triple supplied by a case source.
- TrialMeasurement: the outcome of timing one algorithm on one case.
- CaseExecution: every algorithm's measurement for one case.
- AlgorithmSummary: per-algorithm totals across a whole run.
- SelectionOutcome / SelectionSummary: how well a selector predicted the winner.

None of these classes contain benchmarking logic; times are nanoseconds.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TestCase:
    __test__ = False  # not a pytest test class

    name: str
    text: str
    pattern: str
    expected_result: str

    def __str__(self):
        return f"TestCase{{name='{self.name}', textLen={len(self.text)}, patternLen={len(self.pattern)}}}"


@dataclass(frozen=True)
class TrialMeasurement:
    """
    Attributes
    ----------
    algorithm_name : str
        Registry name of the algorithm that was timed.
    run_times : tuple of int
        Duration of each timed run, in order. Shorter than the configured run
        count only when a run raised.
    average_time : float or None
        Arithmetic mean of run_times; None when no run completed.
    result : str or None
        Canonical output of the last completed run.
    passed : bool
        True when result equals the case's expected result.
    implemented : bool
        False when the algorithm reported itself as not implemented.
    error : str or None
        Message of an unexpected exception raised by the algorithm.
    """
    algorithm_name: str
    run_times: Tuple[int, ...] = ()
    average_time: Optional[float] = None
    result: Optional[str] = None
    passed: bool = False
    implemented: bool = True
    error: Optional[str] = None

    @property
    def output_matches_expected(self):
        return self.passed

    @property
    def status(self):
        if not self.implemented:
            return "N/A"
        if self.error is not None:
            return "ERROR"
        return "PASS" if self.passed else "FAIL"


@dataclass(frozen=True)
class CaseExecution:
    case: TestCase
    measurements: Dict[str, TrialMeasurement] = field(default_factory=dict)

    def fastest(self):
        """Name of the fastest passing algorithm; the first one wins a tie. None if nothing passed."""
        fastest_name = None
        fastest_time = None
        for name, measurement in self.measurements.items():
            if not (measurement.implemented and measurement.passed):
                continue
            if fastest_time is None or measurement.average_time < fastest_time:
                fastest_name = name
                fastest_time = measurement.average_time
        return fastest_name


@dataclass(frozen=True)
class AlgorithmSummary:
    algorithm_name: str
    passed: int = 0
    failed: int = 0
    not_implemented: int = 0
    errors: int = 0
    average_time: Optional[float] = None
    min_time: Optional[float] = None
    max_time: Optional[float] = None


@dataclass(frozen=True)
class SelectionOutcome:
    test_case_name: str
    chosen_algorithm: str
    analysis_time: float
    chosen_time: float
    algorithm_times: Dict[str, float]
    fastest_algorithm: str
    fastest_time: float

    @property
    def total_time(self):
        """Analysis plus execution of the chosen algorithm."""
        return self.analysis_time + self.chosen_time

    @property
    def time_saved_or_lost(self):
        """Positive: the selector beat running everything and keeping the minimum."""
        return self.fastest_time - self.total_time

    @property
    def chose_fastest(self):
        return self.chosen_algorithm == self.fastest_algorithm


@dataclass(frozen=True)
class SelectionSummary:
    outcomes: List[SelectionOutcome] = field(default_factory=list)

    @property
    def scored_cases(self):
        return len(self.outcomes)

    @property
    def correct_choices(self):
        return sum(1 for outcome in self.outcomes if outcome.chose_fastest)

    @property
    def accuracy(self):
        if not self.outcomes:
            return 0.0
        return self.correct_choices / len(self.outcomes)

    @property
    def total_time_saved(self):
        return sum(outcome.time_saved_or_lost for outcome in self.outcomes)

    @property
    def average_time_saved(self):
        if not self.outcomes:
            return 0.0
        return self.total_time_saved / len(self.outcomes)
