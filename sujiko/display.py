"""
Display Module - Plain-text rendering of puzzles, solutions and reports.

Everything here returns strings; printing is left to the caller.
"""

from typing import Dict, List, Sequence

from .solver import AnalysisReport, Puzzle, Solution

BANNER = "Sujiko Explorer"


def _given(value: int) -> str:
    """Clue cell: the digit, or a space when blank."""
    return " " if value == 0 else str(value)


def format_puzzle(puzzle: Puzzle) -> str:
    """
    Render a puzzle with its sums between the rows of clues.

    Blank cells are shown as spaces. For 100708009/22,15,17,21:

        1
         22 15
        7     8
         17 21
              9
    """
    c = [_given(v) for v in puzzle.clues]
    s = puzzle.sums
    lines = [
        f"{c[0]}  {c[1]}  {c[2]}",
        f" {s[0]} {s[1]}",
        f"{c[3]}  {c[4]}  {c[5]}",
        f" {s[2]} {s[3]}",
        f"{c[6]}  {c[7]}  {c[8]}",
    ]
    return "\n".join(lines)


def format_solution(solution: Solution) -> str:
    """Render a solved grid as three rows of space-separated digits."""
    return "\n".join(" ".join(str(v) for v in row) for row in solution.rows)


def format_solutions(solutions: Sequence[Solution]) -> str:
    lines = [f"Found {len(solutions)} solutions:"]
    for solution in solutions:
        lines.append(format_solution(solution))
        lines.append("")
    return "\n".join(lines)


def format_puzzle_counts(report: AnalysisReport) -> List[str]:
    """One line per solvable puzzle: '<definition> has <n> solutions'."""
    return [f"{entry.definition} has {entry.solution_count} solutions"
            for entry in report.entries]


def format_analysis_summary(report: AnalysisReport) -> str:
    """
    Render the closing statistics of an analysis run.

    Args:
        report: Completed (or cancelled) analysis report

    Returns:
        Multi-line summary text
    """
    lines = [
        f"Processing Time = {report.processing_time_sec:.2f} seconds",
        f"Number of potential puzzles = {report.total_puzzles}",
        f"Most solutions to a single puzzle = {report.max_solutions}",
        f"Number of single solution puzzles = {report.unique_count}",
        f"Number of solvable puzzles = {report.solvable_count}",
    ]
    if report.was_cancelled:
        lines.append("Analysis was cancelled before all puzzles were solved")
    return "\n".join(lines)


def format_help(strategies: Sequence[Dict[str, str]] = ()) -> str:
    """
    Usage text, including the puzzle layout diagram.

    Args:
        strategies: Output of get_strategy_info(), listed if given
    """
    lines = [
        "Options:",
        "-s 123456789/aa,bb,cc,dd",
        "   to solve a puzzle, where puzzle format is:",
        "   1  2  3",
        "    aa bb",
        "   4  5  6",
        "    cc dd",
        "   7  8  9   (Specify 0 for blank cells)",
        "-i",
        "   to solve every distinct (non-symmetrical) puzzle layout",
        "   and report how many solutions each one has",
        "--save",
        "   with -s or -i, remember --strategy and --workers in config.json",
    ]
    if strategies:
        lines.append("--strategy NAME")
        for info in strategies:
            lines.append(f"   {info['name']}: {info['description']}")
    return "\n".join(lines)
