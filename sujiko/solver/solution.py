"""
Solution Module - Result types returned by solver strategies.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .puzzle import Puzzle, sub_square_sums


@dataclass(frozen=True)
class Solution:
    """
    A completed grid: one permutation of the digits 1-9.

    Attributes:
        values: Cell values in row-major order
    """
    values: Tuple[int, ...]

    @classmethod
    def from_values(cls, values: Sequence[int]) -> 'Solution':
        """Create a Solution from any sequence of ints."""
        return cls(values=tuple(int(v) for v in values))

    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        """The grid as three rows of three."""
        return tuple(self.values[r * 3:r * 3 + 3] for r in range(3))

    @property
    def sub_square_sums(self) -> Tuple[int, int, int, int]:
        """Sums of the four 2x2 sub-squares."""
        return sub_square_sums(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]


@dataclass
class SolutionMetrics:
    """
    Performance metrics for one solve.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        candidates_examined: Number of permutations tested
        strategy_name: Name of strategy that computed the result
    """
    computation_time_ms: float = 0.0
    candidates_examined: int = 0
    strategy_name: str = ""


@dataclass
class SolveResult:
    """
    Result of a strategy computation.

    Attributes:
        puzzle: The puzzle that was solved
        solutions: Every valid grid, in lexicographic order
        metrics: Performance statistics
    """
    puzzle: Puzzle
    solutions: List[Solution] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def solution_count(self) -> int:
        """Number of solutions found."""
        return len(self.solutions)

    @property
    def is_solvable(self) -> bool:
        """True if at least one solution exists."""
        return len(self.solutions) > 0

    @property
    def is_unique(self) -> bool:
        """True if exactly one solution exists."""
        return len(self.solutions) == 1
