"""
Vectorized Strategy - numpy brute force over a precomputed permutation table.

The complete 9! permutation space is materialized once per process, in the
same lexicographic order the reference strategy walks it, together with the
four sub-square sums of every row. Solving a puzzle then becomes a lookup
of the rows with matching sums followed by a clue mask, which makes running
every canonical puzzle of the analysis practical.
"""

import time
import logging
from functools import lru_cache
from itertools import chain, permutations
from math import factorial
from typing import Dict, Tuple

import numpy as np

from ..base import SolverStrategy
from ..factory import register_strategy
from ..puzzle import DIGITS, SUB_SQUARES, Puzzle
from ..solution import Solution, SolveResult

logger = logging.getLogger(__name__)

PERMUTATION_COUNT = factorial(len(DIGITS))

SumKey = Tuple[int, int, int, int]


@lru_cache(maxsize=None)
def permutation_table() -> np.ndarray:
    """
    All permutations of 1-9 as an (N, 9) int8 array in lexicographic order.

    itertools.permutations emits lexicographic order for sorted input, so
    row i matches the i-th grid yielded by lexicographic_permutations().
    """
    start = time.perf_counter()
    flat = np.fromiter(
        chain.from_iterable(permutations(DIGITS)),
        dtype=np.int8,
        count=PERMUTATION_COUNT * len(DIGITS),
    )
    table = flat.reshape(PERMUTATION_COUNT, len(DIGITS))
    table.setflags(write=False)
    logger.debug(f"Built permutation table {table.shape} in "
                 f"{(time.perf_counter() - start) * 1000:.1f}ms")
    return table


@lru_cache(maxsize=None)
def sum_table() -> np.ndarray:
    """Sub-square sums for every row of the permutation table, shape (N, 4)."""
    table = permutation_table().astype(np.int16)
    sums = table[:, np.array(SUB_SQUARES)].sum(axis=2)
    sums.setflags(write=False)
    return sums


@lru_cache(maxsize=None)
def sum_index() -> Dict[SumKey, np.ndarray]:
    """
    Map each reachable sum quadruple to the table rows producing it.

    Row numbers within each group are ascending, so results keep
    lexicographic order.
    """
    sums = sum_table()
    keys, inverse = np.unique(sums, axis=0, return_inverse=True)
    inverse = inverse.reshape(-1)

    order = np.argsort(inverse, kind="stable")
    counts = np.bincount(inverse, minlength=len(keys))
    groups = np.split(order, np.cumsum(counts)[:-1])

    index = {tuple(int(v) for v in key): rows for key, rows in zip(keys, groups)}
    logger.debug(f"Indexed {len(index)} reachable sum quadruples")
    return index


@register_strategy
class VectorizedStrategy(SolverStrategy):
    """
    Same enumeration as the lexicographic strategy, evaluated with numpy.

    The first solve in a process pays for building the table (well under a
    second); later solves cost microseconds.
    """
    name = "vectorized"
    description = "Vectorized (numpy) - Filters a cached table of all permutations"

    def solve(self, puzzle: Puzzle) -> SolveResult:
        start_time = time.perf_counter()
        matches = self._matching_rows(puzzle)
        solutions = [Solution.from_values(row) for row in matches.tolist()]
        return self._build_result(puzzle, solutions, start_time, PERMUTATION_COUNT)

    def count_solutions(self, puzzle: Puzzle) -> int:
        """Count without building Solution objects."""
        return len(self._matching_rows(puzzle))

    def _matching_rows(self, puzzle: Puzzle) -> np.ndarray:
        """
        Table rows that solve the puzzle.

        Args:
            puzzle: Puzzle to solve

        Returns:
            (k, 9) array of solutions in lexicographic order, k may be 0
        """
        rows = sum_index().get(tuple(puzzle.sums))
        if rows is None:
            return np.empty((0, len(DIGITS)), dtype=np.int8)

        candidates = permutation_table()[rows]
        if not puzzle.has_clues:
            return candidates

        mask = np.ones(len(candidates), dtype=bool)
        for position in puzzle.clue_positions:
            mask &= candidates[:, position] == puzzle.clues[position]
        return candidates[mask]
