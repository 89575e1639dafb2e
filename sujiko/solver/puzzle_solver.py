"""
Puzzle Solver Module - One puzzle instance bound to a solving strategy.
"""

from typing import List, Sequence, Union

from .base import SolverStrategy
from .factory import resolve_strategy
from .puzzle import Puzzle
from .solution import Solution, SolveResult


class PuzzleSolver:
    """
    Solves a single Sujiko puzzle by exhaustive search.

    Input is not validated: the caller supplies 9 clues and 4 sums.
    Infeasible or contradictory input yields zero solutions rather than
    an error.

    Example:
        solver = PuzzleSolver([0, 0, 0, 7, 0, 8, 0, 0, 0], [22, 15, 17, 21])
        for solution in solver.all_solutions():
            print(solution.rows)
    """

    def __init__(self, clues: Sequence[int], sums: Sequence[int],
                 strategy: Union[str, SolverStrategy, None] = None):
        """
        Args:
            clues: 9 clue values, 0 for blank
            sums: 4 sub-square sums
            strategy: Strategy name or instance (default: lexicographic)
        """
        self.puzzle = Puzzle.create(clues, sums)
        self.strategy = resolve_strategy(strategy)

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle,
                    strategy: Union[str, SolverStrategy, None] = None) -> 'PuzzleSolver':
        """Build a solver for an existing Puzzle."""
        return cls(puzzle.clues, puzzle.sums, strategy=strategy)

    @classmethod
    def from_definition(cls, text: str,
                        strategy: Union[str, SolverStrategy, None] = None) -> 'PuzzleSolver':
        """
        Build a solver from a definition string.

        Raises:
            PuzzleParseError: If the definition is malformed
        """
        return cls.from_puzzle(Puzzle.from_definition(text), strategy=strategy)

    def solve(self) -> SolveResult:
        """Run the strategy and return solutions with metrics."""
        return self.strategy.solve(self.puzzle)

    def all_solutions(self) -> List[Solution]:
        """Every solution, in lexicographic order."""
        return self.solve().solutions

    def count_solutions(self) -> int:
        """Number of solutions (still a full enumeration)."""
        return self.strategy.count_solutions(self.puzzle)

    def __repr__(self) -> str:
        return f"PuzzleSolver({self.puzzle.to_definition()!r}, strategy={self.strategy.name!r})"
