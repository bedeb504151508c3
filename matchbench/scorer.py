# scorer.py
# Grades a selector's choice against the measured fastest algorithm.

from .harness import BenchmarkHarness
from .models import SelectionOutcome, SelectionSummary


class SelectionScorer:
    """
    For each case: time the selector's decision, time the chosen algorithm,
    time every other registered algorithm, and record whether the choice was
    the fastest one.

    Cases where the selector declines are left out entirely, as are cases
    where the chosen algorithm is not implemented or fails to run.
    """

    def __init__(self, registry, selector, harness=None):
        self.registry = registry
        self.selector = selector
        self.harness = harness if harness is not None else BenchmarkHarness(registry)

    def score_case(self, case):
        analysis_time, chosen = self.harness.time_decision(self.selector, case)
        if chosen is None:
            return None

        # UnknownAlgorithm from a bad choice propagates from here.
        chosen_measurement = self.harness.measure(chosen, case)
        if not chosen_measurement.implemented or chosen_measurement.error is not None:
            return None

        algorithm_times = {chosen: chosen_measurement.average_time}
        fastest_name = chosen
        fastest_time = chosen_measurement.average_time

        for name in self.registry.names():
            if name == chosen:
                continue
            measurement = self.harness.measure(name, case)
            if not measurement.implemented or measurement.error is not None:
                continue
            algorithm_times[name] = measurement.average_time
            if measurement.average_time < fastest_time:
                fastest_time = measurement.average_time
                fastest_name = name

        return SelectionOutcome(
            test_case_name=case.name,
            chosen_algorithm=chosen,
            analysis_time=analysis_time,
            chosen_time=chosen_measurement.average_time,
            algorithm_times=algorithm_times,
            fastest_algorithm=fastest_name,
            fastest_time=fastest_time,
        )

    def score(self, cases):
        outcomes = []
        for case in cases:
            outcome = self.score_case(case)
            if outcome is not None:
                outcomes.append(outcome)
        return SelectionSummary(outcomes)
