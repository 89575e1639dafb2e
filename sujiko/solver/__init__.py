"""
Solver Package - Exhaustive solver and symmetry analysis for Sujiko puzzles.

Public API:
    - Puzzle: Immutable clues + sums, definition string parsing
    - PuzzleSolver: Enumerate or count the solutions of one puzzle
    - Solution / SolveResult / SolutionMetrics: Result types
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - SymmetryCatalog: One sum quadruple per symmetry class
    - run_analysis(): Solve every catalog entry and aggregate
    - AnalysisContext: Cancellation and progress for run_analysis

Usage:
    from sujiko.solver import PuzzleSolver, SymmetryCatalog, run_analysis

    solver = PuzzleSolver.from_definition("000708000/22,15,17,21")
    for solution in solver.all_solutions():
        print(solution.rows)

    report = run_analysis(SymmetryCatalog.generate())
    print(report.solvable_count, report.unique_count)
"""

# Core data structures
from .puzzle import (
    Puzzle,
    PuzzleParseError,
    sub_square_sums,
    SUB_SQUARES,
    MIN_SUM,
    MAX_SUM,
)
from .solution import Solution, SolutionMetrics, SolveResult
from .permutations import next_permutation, lexicographic_permutations

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    resolve_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .puzzle_solver import PuzzleSolver

# Symmetry analysis
from .symmetry import (
    SYMMETRIES,
    SymmetryCatalog,
    transform,
    transform_grid,
    images,
    orbit,
    orbit_size,
    expected_class_count,
)
from .context import AnalysisContext
from .analysis import AnalysisReport, PuzzleCount, count_puzzle, run_analysis

__all__ = [
    # Data structures
    "Puzzle",
    "PuzzleParseError",
    "sub_square_sums",
    "SUB_SQUARES",
    "MIN_SUM",
    "MAX_SUM",
    "Solution",
    "SolutionMetrics",
    "SolveResult",
    "next_permutation",
    "lexicographic_permutations",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "resolve_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "PuzzleSolver",
    # Symmetry analysis
    "SYMMETRIES",
    "SymmetryCatalog",
    "transform",
    "transform_grid",
    "images",
    "orbit",
    "orbit_size",
    "expected_class_count",
    "AnalysisContext",
    "AnalysisReport",
    "PuzzleCount",
    "count_puzzle",
    "run_analysis",
]
