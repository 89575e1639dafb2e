"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import Iterable

from .puzzle import Puzzle
from .solution import Solution, SolutionMetrics, SolveResult


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Every strategy enumerates the full 9! permutation space and must
    return the same solutions in the same (lexicographic) order; they
    differ only in how the enumeration is carried out.

    Subclasses must implement solve() and define name and description
    class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, puzzle: Puzzle) -> SolveResult:
        """
        Find every solution of the puzzle.

        Args:
            puzzle: Puzzle to solve

        Returns:
            SolveResult with solutions in lexicographic order and metrics
        """
        pass

    def count_solutions(self, puzzle: Puzzle) -> int:
        """
        Count solutions by running the full enumeration.

        Args:
            puzzle: Puzzle to solve

        Returns:
            Number of solutions
        """
        return self.solve(puzzle).solution_count

    def _build_result(self, puzzle: Puzzle, solutions: Iterable[Solution],
                      start_time: float, candidates_examined: int) -> SolveResult:
        """
        Wrap solutions and timing into a SolveResult.

        Args:
            puzzle: Puzzle that was solved
            solutions: Solutions found
            start_time: time.perf_counter() value taken before solving
            candidates_examined: Number of permutations tested

        Returns:
            SolveResult instance
        """
        metrics = SolutionMetrics(
            computation_time_ms=(time.perf_counter() - start_time) * 1000,
            candidates_examined=candidates_examined,
            strategy_name=self.name,
        )
        return SolveResult(puzzle=puzzle, solutions=list(solutions), metrics=metrics)
