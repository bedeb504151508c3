from matchbench import TestCase, run_all, run_subset, run_with_selection
from matchbench.registry import AlgorithmRegistry
from matchbench.selector import DecliningSelector

CASES = [
    TestCase("overlap", "abababab", "abab", "0,2,4"),
    TestCase("dna", "GATTACAGATTACAGATTACA", "GATTACA", "0,7,14"),
]


def test_run_all_uses_every_algorithm():
    executions = run_all(CASES)
    assert len(executions) == 2
    for execution in executions:
        assert len(execution.measurements) == 5
        assert execution.fastest() is not None


def test_run_subset():
    executions = run_subset(CASES, [1, 5])
    assert [e.case.name for e in executions] == ["dna"]


def test_empty_registry_is_respected():
    [execution] = run_all(CASES[:1], registry=AlgorithmRegistry())
    assert execution.measurements == {}


def test_run_with_selection():
    summary = run_with_selection(CASES)
    assert summary.scored_cases == 2
    assert 0.0 <= summary.accuracy <= 1.0
    assert run_with_selection(CASES, selector=DecliningSelector()).scored_cases == 0
