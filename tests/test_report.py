import os

from matchbench import report
from matchbench.harness import BenchmarkHarness
from matchbench.models import SelectionSummary, TestCase
from matchbench.registry import default_registry
from matchbench.scorer import SelectionScorer
from matchbench.selector import DecliningSelector, HeuristicSelector

CASES = [
    TestCase("overlap", "abababab", "abab", "0,2,4"),
    TestCase("wrong expectation", "aaaa", "aa", "9"),
]


def run_cases():
    return BenchmarkHarness(default_registry(), runs=1).run_all(CASES)


def test_results_table(capsys):
    report.print_results_table(run_cases())
    out = capsys.readouterr().out
    assert "DETAILED TEST RESULTS" in out
    assert "KMP (μs)" in out
    assert "✗ FAIL" in out
    assert "SUMMARY STATISTICS" in out
    assert "1 passed, 1 failed" in out
    # No colour codes when stdout is not a terminal.
    assert "\033[" not in out


def test_empty_results_table(capsys):
    report.print_results_table([])
    assert "No results to display." in capsys.readouterr().out


def test_selection_tables(capsys):
    selector = HeuristicSelector()
    summary = SelectionScorer(default_registry(), selector).score(CASES[:1])
    report.print_selection_table(summary, selector)
    report.print_detailed_selection_comparison(summary)
    out = capsys.readouterr().out
    assert "Strategy: Smart Selection" in out
    assert "Total test cases analyzed: 1" in out
    assert "vs KMP" in out


def test_declined_selection_table(capsys):
    report.print_selection_table(SelectionSummary(), DecliningSelector())
    assert "declined every test case" in capsys.readouterr().out


def test_charts_are_saved(tmp_path):
    timing = report.save_timing_chart(run_cases(), str(tmp_path / "timing.png"))
    summary = SelectionScorer(default_registry(), HeuristicSelector()).score(CASES[:1])
    selection = report.save_selection_chart(summary.outcomes, str(tmp_path / "selection.png"))
    empty = report.save_timing_chart([], str(tmp_path / "empty.png"))
    for path in (timing, selection, empty):
        assert os.path.getsize(path) > 0
