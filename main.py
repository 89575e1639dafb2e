"""
Sujiko Explorer - Entry Point

Solves a single Sujiko puzzle, or solves every distinct puzzle layout and
reports how many solutions each one has.

Example:
    python main.py -s 000708000/22,15,17,21   # Solve a puzzle
    python main.py -i                         # Analyse all layouts
    python main.py -i --workers 4             # ... using 4 processes
    python main.py -i -w 4 --save             # ... and remember 4 processes
    python main.py -h                         # Show usage
"""

import sys
import logging
import argparse
from typing import List, Optional

from sujiko.display import (
    BANNER,
    format_analysis_summary,
    format_help,
    format_puzzle,
    format_puzzle_counts,
    format_solutions,
)
from sujiko.settings import load_settings, save_settings
from sujiko.solver import (
    AnalysisContext,
    PuzzleParseError,
    PuzzleSolver,
    SymmetryCatalog,
    get_strategy_info,
    get_strategy_names,
    run_analysis,
)


logger = logging.getLogger(__name__)


def setup_logging(debug_mode: bool = False) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug_mode else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output (stderr)
            logging.FileHandler("sujiko.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Command line application controller.

    Resolves effective options (CLI flags over saved settings) and runs
    the requested mode, printing results to stdout.
    """

    def __init__(self, strategy_name: Optional[str] = None,
                 analysis_strategy: Optional[str] = None,
                 workers: Optional[int] = None):
        """
        Initialize the application.

        Args:
            strategy_name: Strategy for solving one puzzle (overrides saved setting)
            analysis_strategy: Strategy for analysis mode (overrides saved setting)
            workers: Worker processes for analysis mode (overrides saved setting)
        """
        self.settings = load_settings()
        self.strategy_name = strategy_name or self.settings.get("strategy_name")
        self.analysis_strategy = analysis_strategy or self.settings.get("analysis_strategy")
        self.workers = workers if workers is not None else self.settings["workers"]
        self.progress_interval = self.settings["progress_interval"]

    def solve(self, definition: str) -> None:
        """
        Solve one puzzle and print it with all of its solutions.

        Parse errors and unknown strategies are printed; nothing is solved.
        """
        try:
            solver = PuzzleSolver.from_definition(definition, strategy=self.strategy_name)
        except PuzzleParseError as e:
            logger.debug(f"Rejected definition {definition!r}: {e}")
            print(f"Parse Error: {e}")
            return
        except ValueError as e:
            print(f"Error: {e}")
            return

        print("Solving Puzzle:")
        print(format_puzzle(solver.puzzle))

        result = solver.solve()
        logger.info(f"Solved {solver.puzzle} with '{result.metrics.strategy_name}' "
                    f"in {result.metrics.computation_time_ms:.1f}ms")
        print(format_solutions(result.solutions))

    def info(self) -> None:
        """Solve every canonical puzzle layout and print statistics."""
        print("General Info:")
        catalog = SymmetryCatalog.generate()
        print(f"Number of ways to layout a puzzle = {len(catalog)}")
        print("Solving all possible puzzles...")

        context = AnalysisContext(
            progress_callback=self._on_progress,
            progress_interval=self.progress_interval,
        )
        try:
            report = run_analysis(catalog, strategy=self.analysis_strategy,
                                  workers=self.workers, context=context)
        except ValueError as e:
            print(f"Error: {e}")
            return

        for line in format_puzzle_counts(report):
            print(line)
        print(format_analysis_summary(report))

    def save(self) -> None:
        """Store the effective strategies and worker count in config.json."""
        known = get_strategy_names()
        for name in (self.strategy_name, self.analysis_strategy):
            if name not in known:
                print(f"Settings not saved: unknown strategy '{name}'")
                return

        settings = dict(self.settings)
        settings["strategy_name"] = self.strategy_name
        settings["analysis_strategy"] = self.analysis_strategy
        if self.workers >= 1:
            settings["workers"] = self.workers
        save_settings(settings)
        print("Settings saved")

    def _on_progress(self, fraction: float, message: str) -> None:
        logger.info(f"Analysis progress {fraction * 100:.0f}% ({message})")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Sujiko Explorer - Solve and analyse Sujiko puzzles",
        add_help=False,
    )
    parser.add_argument(
        "--solve", "-s",
        metavar="DEFINITION",
        nargs="?",
        const="",
        help="Solve a puzzle given as 123456789/aa,bb,cc,dd"
    )
    parser.add_argument(
        "--info", "-i",
        action="store_true",
        help="Solve all distinct puzzle layouts and print statistics"
    )
    parser.add_argument(
        "--help", "-h", "-?",
        action="store_true",
        dest="show_help",
        help="Show usage"
    )
    parser.add_argument(
        "--strategy",
        help="Solving strategy (default from config.json)"
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        help="Worker processes for --info (default from config.json)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store --strategy and --workers in config.json"
    )
    args, unknown = parser.parse_known_args(argv)
    # Reported by main() once logging is set up
    args.unrecognized = unknown
    return args


def run(args: argparse.Namespace) -> int:
    """
    Dispatch the requested mode.

    Returns:
        Exit code (always 0, errors are reported as text)
    """
    print(BANNER)

    if args.solve is not None and not args.show_help:
        app = Application(strategy_name=args.strategy, workers=args.workers)
        app.solve(args.solve)
    elif args.info and not args.show_help:
        app = Application(analysis_strategy=args.strategy, workers=args.workers)
        app.info()
    else:
        print(format_help(get_strategy_info()))
        return 0

    if args.save:
        app.save()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize logging and run Sujiko Explorer."""
    args = parse_args(argv)
    setup_logging(debug_mode=args.debug)
    if load_settings()["debug_enabled"]:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.unrecognized:
        logger.warning(f"Ignoring unrecognized arguments: {' '.join(args.unrecognized)}")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
