"""
Test script for the command line layer

Covers text rendering, JSON settings and the -s / -i / -h modes of main.py.

Usage:
    python tests/test_cli.py
    pytest tests/test_cli.py
"""

import io
import json
import logging
import os
import sys
import tempfile
from contextlib import contextmanager, redirect_stdout
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli
from sujiko.display import (
    format_analysis_summary,
    format_help,
    format_puzzle,
    format_puzzle_counts,
    format_solution,
    format_solutions,
)
from sujiko.settings import DEFAULT_SETTINGS, load_settings, save_settings
from sujiko.solver import AnalysisReport, Puzzle, Solution, get_strategy_info


def run_cli(argv):
    """Run main.run() and capture stdout."""
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = cli.run(cli.parse_args(argv))
    return code, buffer.getvalue()


@contextmanager
def working_directory(path):
    """Run a block with path as the working directory (config.json lives there)."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(previous)


def test_format_puzzle():
    """Test the puzzle layout rendering."""
    print("\n" + "="*60)
    print("TEST: Puzzle Display")
    print("="*60)

    text = format_puzzle(Puzzle.from_definition("100708009/22,15,17,21"))
    print(text)
    assert text.split("\n") == [
        "1      ",
        " 22 15",
        "7     8",
        " 17 21",
        "      9",
    ]

    print("  [PASS] Puzzle display tests")


def test_format_solution():
    """Test solution and solution list rendering."""
    print("\n" + "="*60)
    print("TEST: Solution Display")
    print("="*60)

    solution = Solution.from_values([9, 4, 1, 7, 2, 8, 3, 5, 6])
    assert format_solution(solution) == "9 4 1\n7 2 8\n3 5 6"

    text = format_solutions([solution])
    assert text.startswith("Found 1 solutions:\n9 4 1")
    assert format_solutions([]) == "Found 0 solutions:"

    print("  [PASS] Solution display tests")


def test_format_report():
    """Test analysis report rendering."""
    print("\n" + "="*60)
    print("TEST: Report Display")
    print("="*60)

    report = AnalysisReport(strategy_name="vectorized")
    report.record((10, 10, 10, 10), 0)
    report.record((10, 14, 19, 22), 1)
    report.record((20, 20, 20, 20), 12)
    report.processing_time_sec = 1.5

    lines = format_puzzle_counts(report)
    assert lines == [
        "000000000/10,14,19,22 has 1 solutions",
        "000000000/20,20,20,20 has 12 solutions",
    ]

    summary = format_analysis_summary(report)
    print(summary)
    assert "Processing Time = 1.50 seconds" in summary
    assert "Number of potential puzzles = 3" in summary
    assert "Most solutions to a single puzzle = 12" in summary
    assert "Number of single solution puzzles = 1" in summary
    assert "Number of solvable puzzles = 2" in summary
    assert "cancelled" not in summary

    help_text = format_help(get_strategy_info())
    assert "-s 123456789/aa,bb,cc,dd" in help_text
    assert "vectorized" in help_text

    print("  [PASS] Report display tests")


def test_settings():
    """Test settings defaults, round trip and corrupt files."""
    print("\n" + "="*60)
    print("TEST: Settings")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"

        assert load_settings(path) == DEFAULT_SETTINGS

        save_settings({"workers": 4}, path)
        loaded = load_settings(path)
        assert loaded["workers"] == 4
        assert loaded["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]

        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

    print("  [PASS] Settings tests")


def test_cli_solve():
    """Test -s prints the puzzle and its solution."""
    print("\n" + "="*60)
    print("TEST: CLI Solve")
    print("="*60)

    code, output = run_cli(["-s", "000708000/22,15,17,21", "--strategy", "vectorized"])
    print(output)
    assert code == 0
    assert output.startswith("Sujiko Explorer\n")
    assert "Solving Puzzle:" in output
    assert "Found 1 solutions:" in output
    assert "9 4 1\n7 2 8\n3 5 6\n" in output

    print("  [PASS] CLI solve tests")


def test_cli_errors():
    """Test parse errors and bad strategies are printed, not raised."""
    print("\n" + "="*60)
    print("TEST: CLI Errors")
    print("="*60)

    code, output = run_cli(["-s", "000708000-22,15,17,21"])
    print(output)
    assert code == 0
    assert "Parse Error" in output
    assert "Solving Puzzle:" not in output
    assert "Found" not in output

    code, output = run_cli(["-s"])
    assert code == 0
    assert "Parse Error" in output

    code, output = run_cli(["-s", "000708000/22,15,17,21", "--strategy", "nope"])
    assert code == 0
    assert "Unknown strategy" in output
    assert "Found" not in output

    print("  [PASS] CLI error tests")


def test_cli_help():
    """Test help is shown with no option, -h and -?."""
    print("\n" + "="*60)
    print("TEST: CLI Help")
    print("="*60)

    for argv in ([], ["-h"], ["-?"], ["--bogus"]):
        code, output = run_cli(argv)
        assert code == 0
        assert "Options:" in output, argv
        assert "(Specify 0 for blank cells)" in output

    print("  [PASS] CLI help tests")


def test_settings_invalid_values():
    """Test values of the wrong type fall back to their defaults one by one."""
    print("\n" + "="*60)
    print("TEST: Settings Validation")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        path.write_text(json.dumps({
            "workers": "four",
            "progress_interval": 0,
            "debug_enabled": "yes",
            "strategy_name": 5,
            "analysis_strategy": "lexicographic",
        }), encoding="utf-8")

        loaded = load_settings(path)
        print(f"  Loaded: {loaded}")
        assert loaded["workers"] == DEFAULT_SETTINGS["workers"]
        assert loaded["progress_interval"] == DEFAULT_SETTINGS["progress_interval"]
        assert loaded["debug_enabled"] is False
        assert loaded["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]
        assert loaded["analysis_strategy"] == "lexicographic"

        # bool is an int subclass but not a worker count
        path.write_text(json.dumps({"workers": True}), encoding="utf-8")
        assert load_settings(path)["workers"] == DEFAULT_SETTINGS["workers"]

    print("  [PASS] Settings validation tests")


def test_cli_bad_config():
    """Test -s still solves when config.json holds values of the wrong type."""
    print("\n" + "="*60)
    print("TEST: CLI With Bad Config")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        Path(tmp, "config.json").write_text(
            json.dumps({"workers": "four", "progress_interval": "fast"}), encoding="utf-8")
        with working_directory(tmp):
            code, output = run_cli(["-s", "000708000/22,15,17,21", "--strategy", "vectorized"])

    print(output)
    assert code == 0
    assert "Found 1 solutions:" in output
    assert "9 4 1\n7 2 8\n3 5 6\n" in output

    print("  [PASS] CLI bad config tests")


def test_cli_save():
    """Test --save writes the effective options and refuses unknown strategies."""
    print("\n" + "="*60)
    print("TEST: CLI Save")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        with working_directory(tmp):
            code, output = run_cli(["-s", "000708000/22,15,17,21",
                                    "--strategy", "vectorized", "--workers", "3", "--save"])
            assert code == 0
            assert "Found 1 solutions:" in output
            assert "Settings saved" in output

            saved = json.loads(path.read_text(encoding="utf-8"))
            print(f"  Saved: {saved}")
            assert saved["strategy_name"] == "vectorized"
            assert saved["analysis_strategy"] == DEFAULT_SETTINGS["analysis_strategy"]
            assert saved["workers"] == 3
            assert load_settings(path) == saved

            code, output = run_cli(["-s", "000708000/22,15,17,21",
                                    "--strategy", "nope", "--save"])
            assert code == 0
            assert "Settings not saved: unknown strategy 'nope'" in output
            assert json.loads(path.read_text(encoding="utf-8")) == saved

            # Help mode never writes settings
            path.unlink()
            run_cli(["-h", "--save"])
            assert not path.exists()

    print("  [PASS] CLI save tests")


def test_cli_info():
    """Test -i prints the layout count, one line per solvable puzzle and the statistics."""
    print("\n" + "="*60)
    print("TEST: CLI Info")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        with working_directory(tmp):
            code, output = run_cli(["-i", "--strategy", "vectorized"])

    lines = output.splitlines()
    print("\n".join(lines[:6] + ["..."] + lines[-5:]))
    assert code == 0
    assert lines[:4] == [
        "Sujiko Explorer",
        "General Info:",
        "Number of ways to layout a puzzle = 26796",
        "Solving all possible puzzles...",
    ]

    puzzle_lines = lines[4:-5]
    summary = lines[-5:]
    assert summary[0].startswith("Processing Time = ")
    assert summary[0].endswith(" seconds")
    assert summary[1] == "Number of potential puzzles = 26796"
    assert summary[4] == f"Number of solvable puzzles = {len(puzzle_lines)}"

    counts = {}
    for line in puzzle_lines:
        definition, _, rest = line.partition(" has ")
        assert definition.startswith("000000000/"), line
        assert rest.endswith(" solutions"), line
        counts[definition] = int(rest[:-len(" solutions")])
    assert len(counts) == len(puzzle_lines)
    assert counts["000000000/10,14,19,22"] == 1
    assert "000000000/10,10,10,10" not in counts
    assert summary[2] == f"Most solutions to a single puzzle = {max(counts.values())}"
    unique = sum(1 for n in counts.values() if n == 1)
    assert summary[3] == f"Number of single solution puzzles = {unique}"

    print("  [PASS] CLI info tests")


class RecordingHandler(logging.Handler):
    """Collects formatted messages from one logger."""

    def __init__(self):
        super().__init__(level=logging.WARNING)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_unrecognized_arguments_logged():
    """Test unknown arguments are warned about once logging is configured."""
    print("\n" + "="*60)
    print("TEST: Unrecognized Arguments")
    print("="*60)

    handler = RecordingHandler()
    cli.logger.addHandler(handler)
    root = logging.getLogger()
    root_handlers = list(root.handlers)
    root_level = root.level
    try:
        args = cli.parse_args(["--bogus", "-s", "000708000/22,15,17,21"])
        assert args.unrecognized == ["--bogus"]
        assert args.solve == "000708000/22,15,17,21"
        assert handler.messages == []

        with tempfile.TemporaryDirectory() as tmp:
            with working_directory(tmp):
                buffer = io.StringIO()
                with redirect_stdout(buffer):
                    code = cli.main(["--bogus"])
    finally:
        cli.logger.removeHandler(handler)
        for added in root.handlers[:]:
            if added not in root_handlers:
                root.removeHandler(added)
                added.close()
        root.setLevel(root_level)

    print(f"  Logged: {handler.messages}")
    assert code == 0
    assert "Options:" in buffer.getvalue()
    assert handler.messages == ["Ignoring unrecognized arguments: --bogus"]

    print("  [PASS] Unrecognized argument tests")


TESTS = [
    ("Puzzle Display", test_format_puzzle),
    ("Solution Display", test_format_solution),
    ("Report Display", test_format_report),
    ("Settings", test_settings),
    ("Settings Validation", test_settings_invalid_values),
    ("CLI Solve", test_cli_solve),
    ("CLI Errors", test_cli_errors),
    ("CLI Help", test_cli_help),
    ("CLI Bad Config", test_cli_bad_config),
    ("CLI Save", test_cli_save),
    ("CLI Info", test_cli_info),
    ("Unrecognized Arguments", test_unrecognized_arguments_logged),
]


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# CLI TESTS")
    print("#"*60)

    results = []
    for name, test in TESTS:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
