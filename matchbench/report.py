# report.py
# Console tables and matplotlib charts for benchmark and selection results.

import os
import sys

import matplotlib.ticker as mticker
from matplotlib.figure import Figure

from .harness import summarize
from .utils import pad_right, to_microseconds, truncate

GREEN = "32"
RED = "31"
CYAN = "36"
BOLD = "1"

TEST_NAME_WIDTH = 32
TIME_WIDTH = 18
WINNER_WIDTH = 18


def supports_color():
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""


def colorize(text, code):
    if not supports_color():
        return text
    return f"\033[{code}m{text}\033[0m"


def separator(width, char="="):
    print(char * width)


# ---------------------- Benchmark tables ----------------------
def format_cell(measurement, is_winner):
    if not measurement.implemented:
        return "N/A"
    if measurement.error is not None:
        return "✗ ERROR"
    if not measurement.passed:
        return "✗ FAIL"
    time_str = f"{to_microseconds(measurement.average_time):.3f}"
    return colorize(time_str, GREEN) if is_winner else time_str


def print_results_table(executions):
    """Average time per algorithm (μs) for every case, with the fastest passing algorithm."""
    if not executions:
        print("No results to display.")
        return

    algorithm_names = list(executions[0].measurements)
    width = TEST_NAME_WIDTH + len(algorithm_names) * TIME_WIDTH + WINNER_WIDTH

    separator(width)
    print(colorize("DETAILED TEST RESULTS - Execution Time Comparison (Average of timed runs)", f"{BOLD};{CYAN}"))
    separator(width)

    header = pad_right("Test Case", TEST_NAME_WIDTH)
    for name in algorithm_names:
        header += pad_right(f"{name} (μs)", TIME_WIDTH)
    header += pad_right("Winner", WINNER_WIDTH)
    print(colorize(header, BOLD))
    separator(width)

    for execution in executions:
        winner = execution.fastest()
        row = pad_right(truncate(execution.case.name, TEST_NAME_WIDTH - 1), TEST_NAME_WIDTH)
        for name in algorithm_names:
            measurement = execution.measurements.get(name)
            cell = "N/A" if measurement is None else format_cell(measurement, name == winner)
            row += pad_right(cell, TIME_WIDTH)
        row += colorize(f"🏆 {winner}", GREEN) if winner else "None"
        print(row)

    separator(width)
    print_summary_statistics(executions)


def print_summary_statistics(executions):
    print("\nSUMMARY STATISTICS:")
    separator(100)
    for name, summary in summarize(executions).items():
        line = f"{name:<15}: {summary.passed} passed, {summary.failed} failed"
        if summary.not_implemented:
            line += f", {summary.not_implemented} not implemented"
        if summary.average_time is not None:
            line += (f" | Avg: {to_microseconds(summary.average_time):.3f} μs, "
                     f"Min: {to_microseconds(summary.min_time):.3f} μs, "
                     f"Max: {to_microseconds(summary.max_time):.3f} μs")
        print(line)
    separator(100)


def print_case_list(collection):
    print("AVAILABLE TEST CASES:")
    separator(100)
    groups = (("SHARED TESTS:", collection.shared_indices), ("HIDDEN TESTS:", collection.hidden_indices))
    for title, indices in groups:
        print(f"\n{title}")
        separator(100, "-")
        for i in indices:
            case = collection.cases[i]
            print(f"[{i:2d}] {case.name:<30} | Text length: {len(case.text):4d} | Pattern length: {len(case.pattern):2d}")
            print(f'     Text: "{truncate(case.text, 70, "...")}"')
            print(f'     Pattern: "{case.pattern}"')
            print(f"     Expected: {case.expected_result or '(no match)'}")
    separator(100)


# ---------------------- Selection tables ----------------------
def print_selection_table(summary, selector):
    if not summary.outcomes:
        separator(100)
        print("PRE-ANALYSIS COMPARISON TABLE")
        separator(100)
        print("The selector declined every test case (no algorithm selection made).")
        print("All algorithms would run without pre-analysis.")
        separator(100)
        return

    separator(120)
    print("PRE-ANALYSIS PERFORMANCE COMPARISON")
    print(f"Strategy: {selector.strategy_description()}")
    separator(120)
    print(f"{'Test Case':<25} {'Chosen Alg':<12} {'Analysis(μs)':>12} {'Exec(μs)':>12} "
          f"{'Total(μs)':>12} {'Fastest Alg':<15} {'Time Diff(μs)':>15}")
    separator(120, "-")

    for outcome in summary.outcomes:
        mark = "✓" if outcome.chose_fastest else "✗"
        diff = f"{mark} {to_microseconds(outcome.time_saved_or_lost):.2f}"
        print(f"{truncate(outcome.test_case_name, 23):<25} "
              f"{truncate(outcome.chosen_algorithm, 10):<12} "
              f"{to_microseconds(outcome.analysis_time):12.2f} "
              f"{to_microseconds(outcome.chosen_time):12.2f} "
              f"{to_microseconds(outcome.total_time):12.2f} "
              f"{truncate(outcome.fastest_algorithm, 13):<15} "
              f"{diff:>15}")
    separator(120)
    print_selection_summary(summary)


def print_selection_summary(summary):
    print("\nPRE-ANALYSIS SUMMARY:")
    separator(120, "-")
    total_ms = summary.total_time_saved / 1_000_000.0
    average_ms = summary.average_time_saved / 1_000_000.0

    print(f"Total test cases analyzed: {summary.scored_cases}")
    print(f"Correct algorithm choices: {summary.correct_choices} / {summary.scored_cases} "
          f"({summary.accuracy * 100:.1f}%)")
    print()
    if total_ms > 0:
        print(colorize(f"✓ Pre-analysis SAVED {abs(total_ms):.4f} ms total (avg {abs(average_ms):.4f} ms per test)", GREEN))
    elif total_ms < 0:
        print(colorize(f"✗ Pre-analysis COST {abs(total_ms):.4f} ms total (avg {abs(average_ms):.4f} ms per test)", RED))
    else:
        print("Pre-analysis broke even (no time saved or lost).")
    print()
    print("INTERPRETATION:")
    print("- 'Analysis(μs)': time spent in the selector choosing an algorithm")
    print("- 'Exec(μs)': time spent executing the chosen algorithm")
    print("- 'Time Diff(μs)': fastest time - (analysis + exec); positive = saved, negative = lost")
    print("- '✓' / '✗': the selector did / did not choose the fastest algorithm")
    separator(120)


def print_detailed_selection_comparison(summary):
    """(analysis + chosen) against each alternative: negative means the selector was faster."""
    if not summary.outcomes:
        return

    names = []
    for outcome in summary.outcomes:
        for name in outcome.algorithm_times:
            if name not in names:
                names.append(name)

    separator(140)
    print("PREANALYSIS PERFORMANCE COMPARISON")
    print("Shows: (PreAnalysis + Chosen Algorithm) vs Each Algorithm")
    separator(140)
    header = f"{'Test Case':<32} {'Choice':<15} {'PreA+Choice (μs)':<20}"
    for name in names:
        header += " " + pad_right(f"vs {name}", 22)
    print(header)
    separator(140, "-")

    for outcome in summary.outcomes:
        total_us = to_microseconds(outcome.total_time)
        row = f"{truncate(outcome.test_case_name, 30):<32} {truncate(outcome.chosen_algorithm, 13):<15} {total_us:20.2f}"
        for name in names:
            other = outcome.algorithm_times.get(name)
            if name == outcome.chosen_algorithm or other is None:
                cell = " N/A"
            else:
                diff = total_us - to_microseconds(other)
                cell = " " + (colorize(f"{diff:.2f} μs", GREEN) if diff < 0 else colorize(f"+{diff:.2f} μs", RED))
            row += pad_right(cell, 23)
        print(row)
    separator(140)


# ---------------------- Charts ----------------------
def draw_timing_chart(ax, executions, fg_color="#000000"):
    """Grouped bars: average time (μs) per case, one bar per passing algorithm."""
    ax.clear()
    if not executions:
        ax.set_title("No Benchmark Data to Display", color=fg_color)
        return

    names = list(executions[0].measurements)
    case_labels = [truncate(e.case.name, 14) for e in executions]
    bar_width = 0.8 / max(len(names), 1)

    for k, name in enumerate(names):
        positions = []
        heights = []
        for i, execution in enumerate(executions):
            measurement = execution.measurements.get(name)
            if measurement is not None and measurement.passed:
                positions.append(i + k * bar_width)
                heights.append(to_microseconds(measurement.average_time))
        ax.bar(positions, heights, width=bar_width, label=name)

    ax.set_xticks([i + bar_width * (len(names) - 1) / 2 for i in range(len(executions))])
    ax.set_xticklabels(case_labels, rotation=45, ha="right", color=fg_color)
    ax.set_ylabel("Average Execution Time (μs)", color=fg_color)
    ax.set_title("Execution Time per Test Case", color=fg_color)
    ax.tick_params(axis="y", colors=fg_color)
    ax.yaxis.set_major_formatter(mticker.FuncFormatter(lambda x, p: f"{x:,.1f}"))
    ax.legend(fontsize="small")


def draw_selection_chart(ax, outcomes, fg_color="#000000"):
    """Time saved (positive) or lost (negative) by the selector per case."""
    ax.clear()
    if not outcomes:
        ax.set_title("No Selection Data to Display", color=fg_color)
        return

    labels = [truncate(o.test_case_name, 14) for o in outcomes]
    diffs = [to_microseconds(o.time_saved_or_lost) for o in outcomes]
    colors = ["green" if o.chose_fastest else "red" for o in outcomes]

    ax.bar(labels, diffs, color=colors)
    ax.axhline(0, color=fg_color, linewidth=0.8)
    ax.set_ylabel("Time Saved (+) / Lost (-) (μs)", color=fg_color)
    ax.set_title("Selector vs Fastest Algorithm", color=fg_color)
    ax.tick_params(axis="x", labelrotation=45, colors=fg_color)
    ax.tick_params(axis="y", colors=fg_color)


def _save(draw, data, path):
    fig = Figure(figsize=(10, 5), dpi=100)
    ax = fig.add_subplot(111)
    draw(ax, data)
    fig.tight_layout()
    fig.savefig(path)
    return path


def save_timing_chart(executions, path):
    return _save(draw_timing_chart, executions, path)


def save_selection_chart(outcomes, path):
    return _save(draw_selection_chart, outcomes, path)
