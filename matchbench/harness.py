# harness.py
"""
Runs matching engines over test cases under a fixed timing protocol.

For every (algorithm, case) pair the harness makes WARMUP_RUNS untimed calls,
then TRIAL_RUNS timed calls, recording each duration and their mean. The
output of the last call is compared with the case's expected result by
canonical string.

Failures stay inside their cell: an algorithm that is not implemented or
that raises is recorded as such and the run moves on. Only an unknown
algorithm name propagates, because that is a configuration error.
Everything runs sequentially in the calling thread.
"""

import time
from statistics import fmean

from .config import TRIAL_RUNS, WARMUP_RUNS
from .models import AlgorithmSummary, CaseExecution, TrialMeasurement


class BenchmarkHarness:

    def __init__(self, registry, runs=TRIAL_RUNS, warmup=WARMUP_RUNS, timer=time.perf_counter_ns):
        if runs < 1:
            raise ValueError("runs must be at least 1")
        self.registry = registry
        self.runs = runs
        self.warmup = warmup
        self.timer = timer

    def measure(self, algorithm_name, case):
        """Times one algorithm on one case. Raises UnknownAlgorithm for unregistered names."""
        engine = self.registry.instantiate(algorithm_name)
        run_times = []
        output = None

        try:
            for _ in range(self.warmup):
                output = engine.solve(case.text, case.pattern)
                if not output.implemented:
                    return TrialMeasurement(algorithm_name, implemented=False)

            for _ in range(self.runs):
                start = self.timer()
                output = engine.solve(case.text, case.pattern)
                end = self.timer()
                if not output.implemented:
                    return TrialMeasurement(algorithm_name, implemented=False)
                run_times.append(end - start)
        except NotImplementedError:
            return TrialMeasurement(algorithm_name, implemented=False)
        except Exception as e:
            return TrialMeasurement(
                algorithm_name,
                run_times=tuple(run_times),
                average_time=fmean(run_times) if run_times else None,
                error=f"{type(e).__name__}: {e}",
            )

        result = output.canonical()
        return TrialMeasurement(
            algorithm_name,
            run_times=tuple(run_times),
            average_time=fmean(run_times),
            result=result,
            passed=result == case.expected_result,
        )

    def time_decision(self, selector, case):
        """Average duration of selector.choose() over the configured runs, plus its choice."""
        total = 0
        choice = None
        for _ in range(self.runs):
            start = self.timer()
            choice = selector.choose(case.text, case.pattern)
            end = self.timer()
            total += end - start
        return total / self.runs, choice

    def run_case(self, case, algorithm_names=None):
        names = self.registry.names() if algorithm_names is None else algorithm_names
        measurements = {}
        for name in names:
            measurements[name] = self.measure(name, case)
        return CaseExecution(case, measurements)

    def run_all(self, cases):
        return [self.run_case(case) for case in cases]

    def run_subset(self, cases, indices):
        """Runs the cases at `indices`, in that order. Out-of-range indices are skipped."""
        selected = []
        for index in indices:
            if 0 <= index < len(cases):
                selected.append(cases[index])
        return self.run_all(selected)


def summarize(executions):
    """Per-algorithm pass/fail counts and timing statistics over passing cells."""
    names = []
    for execution in executions:
        for name in execution.measurements:
            if name not in names:
                names.append(name)

    summaries = {}
    for name in names:
        passed = failed = not_implemented = errors = 0
        times = []
        for execution in executions:
            measurement = execution.measurements.get(name)
            if measurement is None:
                continue
            if not measurement.implemented:
                not_implemented += 1
            elif measurement.error is not None:
                errors += 1
                failed += 1
            elif measurement.passed:
                passed += 1
                times.append(measurement.average_time)
            else:
                failed += 1

        summaries[name] = AlgorithmSummary(
            algorithm_name=name,
            passed=passed,
            failed=failed,
            not_implemented=not_implemented,
            errors=errors,
            average_time=fmean(times) if times else None,
            min_time=min(times) if times else None,
            max_time=max(times) if times else None,
        )
    return summaries
