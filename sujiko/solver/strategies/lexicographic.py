"""
Lexicographic Strategy - Reference brute force over every permutation.
"""

import time
import logging
from typing import List

from ..base import SolverStrategy
from ..factory import register_strategy
from ..permutations import lexicographic_permutations
from ..puzzle import Puzzle
from ..solution import Solution, SolveResult

logger = logging.getLogger(__name__)


@register_strategy
class LexicographicStrategy(SolverStrategy):
    """
    Walks all 9! permutations of 1-9 in lexicographic order.

    Each candidate is checked against the clues first and the sums second;
    clues only cut down what is kept, never what is generated. This is the
    slowest strategy (roughly a second per puzzle) and the one the others
    are checked against.
    """
    name = "lexicographic"
    description = "Lexicographic (reference) - Tests every permutation in order"

    def solve(self, puzzle: Puzzle) -> SolveResult:
        start_time = time.perf_counter()

        solutions: List[Solution] = []
        examined = 0
        for candidate in lexicographic_permutations():
            examined += 1
            if puzzle.is_valid_solution(candidate):
                solutions.append(Solution(values=candidate))

        result = self._build_result(puzzle, solutions, start_time, examined)
        logger.debug(
            f"{self.name}: {puzzle} -> {result.solution_count} solutions "
            f"({examined} candidates, {result.metrics.computation_time_ms:.1f}ms)"
        )
        return result
