# main.py
# Command-line entry point: choose which cases to run and which reports to print.

import argparse
import sys

from . import report
from .file_utils import build_document_cases, load_all_cases
from .harness import BenchmarkHarness
from .registry import default_registry
from .scorer import SelectionScorer
from .selector import SELECTORS, get_selector
from .utils import parse_test_indices


def build_parser():
    parser = argparse.ArgumentParser(
        prog="matchbench",
        description="Benchmark exact string-matching algorithms and score an algorithm selector.",
        epilog=("targets: list | shared | hidden | preanalysis | gui | test indices such as '0 1 2' or '0-5'. "
                "With no targets every case is run."),
    )
    parser.add_argument("targets", nargs="*", help="What to run (see below)")
    parser.add_argument("--root", default=".", help="Directory containing testcases/shared and testcases/hidden")
    parser.add_argument("--selector", choices=sorted(SELECTORS), default="heuristic",
                        help="Selector used for the pre-analysis comparison")
    parser.add_argument("--chart", default=None, help="Also save a timing chart (PNG) to this path")
    parser.add_argument("--document", default=None, help="Benchmark against a PDF/DOCX/TXT document instead")
    parser.add_argument("--pattern", action="append", default=[], help="Pattern to search in --document (repeatable)")
    parser.add_argument("--ignore-case", action="store_true", help="Lower-case document text and patterns")
    return parser


def print_header():
    title = "MANUAL TEST RUNNER - String Matching Algorithms"
    print("╔" + "═" * 98 + "╗")
    print("║" + title.center(98) + "║")
    print("╚" + "═" * 98 + "╝")
    print()


def run_with_full_comparison(all_cases, indices, registry, selector, chart_path=None):
    """Timing table for every algorithm, then the selector comparison on the same cases."""
    harness = BenchmarkHarness(registry)
    for index in indices:
        if not 0 <= index < len(all_cases):
            print(f"[Warning] Test index {index} is out of range (0-{len(all_cases) - 1})")
    cases = [all_cases[i] for i in indices if 0 <= i < len(all_cases)]

    print(f"Running {len(cases)} test(s) with {len(registry)} algorithm(s)...\n")
    executions = harness.run_subset(all_cases, indices)
    report.print_results_table(executions)

    print("\n" + "=" * 120)
    print(f"Running PreAnalysis comparison (selector: {selector.key})...")
    print("=" * 120)
    summary = SelectionScorer(registry, selector, harness).score(cases)
    report.print_detailed_selection_comparison(summary)

    if chart_path:
        report.save_timing_chart(executions, chart_path)
        print(f"\nChart saved to: {chart_path}")
    print("\n✓ Testing complete!")
    return executions, summary


def run_preanalysis(cases, registry, selector, chart_path=None):
    print("Running pre-analysis comparison on all test cases...\n")
    summary = SelectionScorer(registry, selector).score(cases)
    report.print_selection_table(summary, selector)
    report.print_detailed_selection_comparison(summary)

    if chart_path:
        report.save_selection_chart(summary.outcomes, chart_path)
        print(f"\nChart saved to: {chart_path}")
    print("\n✓ Pre-analysis testing complete!")
    return summary


def main(argv=None):
    args = build_parser().parse_args(argv)
    targets = [t.lower() for t in args.targets]

    if targets[:1] == ["gui"]:
        from .app import launch
        launch(root_dir=args.root)
        return 0

    print_header()
    registry = default_registry()
    selector = get_selector(args.selector)

    if args.document:
        if not args.pattern:
            print("[Error] --document needs at least one --pattern.")
            return 2
        cases = build_document_cases(args.document, args.pattern, case_sensitive=not args.ignore_case)
        if not cases:
            print(f"[Error] Could not read any text from {args.document}")
            return 1
        run_with_full_comparison(cases, list(range(len(cases))), registry, selector, args.chart)
        return 0

    collection = load_all_cases(args.root)
    all_cases = collection.cases

    if not targets:
        print("Running ALL tests...\n")
        run_with_full_comparison(all_cases, list(range(len(all_cases))), registry, selector, args.chart)
    elif targets[0] == "list":
        report.print_case_list(collection)
    elif targets[0] in ("share", "shared"):
        print("Running SHARED tests...\n")
        run_with_full_comparison(all_cases, collection.shared_indices, registry, selector, args.chart)
    elif targets[0] in ("hidden", "grading"):
        print("Running HIDDEN tests...\n")
        run_with_full_comparison(all_cases, collection.hidden_indices, registry, selector, args.chart)
    elif targets[0] in ("preanalysis", "pre"):
        print("Running with PRE-ANALYSIS comparison...\n")
        run_preanalysis(all_cases, registry, selector, args.chart)
    else:
        indices, invalid = parse_test_indices(targets)
        for token in invalid:
            print(f"[Warning] Invalid test index '{token}' (ignored)")
        if not indices:
            print("No valid test indices provided. Use 'matchbench list' to see available tests.")
            return 1
        run_with_full_comparison(all_cases, indices, registry, selector, args.chart)

    return 0


if __name__ == "__main__":
    sys.exit(main())
