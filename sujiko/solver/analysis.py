"""
Analysis Module - Solve every canonical puzzle and aggregate statistics.

Each canonical sum quadruple is solved with no clues. Puzzles are
independent, so the run can be spread over worker processes; results are
merged back in catalog order and the report is the same either way.
"""

import time
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .base import SolverStrategy
from .context import AnalysisContext
from .factory import resolve_strategy
from .puzzle import Puzzle
from .puzzle_solver import PuzzleSolver
from .symmetry import SumKey, orbit_size

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_STRATEGY = "vectorized"
DEFAULT_CHUNK_SIZE = 500


@dataclass(frozen=True)
class PuzzleCount:
    """
    Solution count of one canonical puzzle.

    Attributes:
        sums: Canonical sum quadruple
        solution_count: Number of solutions with no clues
        orbit_size: Number of symmetric variants sharing this count
    """
    sums: SumKey
    solution_count: int
    orbit_size: int

    @property
    def definition(self) -> str:
        """Blank-clue definition string, e.g. 000000000/10,14,19,22."""
        return Puzzle.from_sums(self.sums).to_definition()


@dataclass
class AnalysisReport:
    """
    Aggregated result of an analysis run.

    Attributes:
        total_puzzles: Canonical puzzles examined
        solvable_count: Puzzles with at least one solution
        unique_count: Puzzles with exactly one solution
        max_solutions: Most solutions found for a single puzzle
        processing_time_sec: Wall-clock time of the solve loop
        strategy_name: Strategy used to count solutions
        was_cancelled: True if the run stopped before the end of the catalog
        entries: Solvable puzzles in catalog order
    """
    total_puzzles: int = 0
    solvable_count: int = 0
    unique_count: int = 0
    max_solutions: int = 0
    processing_time_sec: float = 0.0
    strategy_name: str = ""
    was_cancelled: bool = False
    entries: List[PuzzleCount] = field(default_factory=list)

    def record(self, sums: Sequence[int], solution_count: int) -> None:
        """
        Add one puzzle's result to the aggregates.

        Args:
            sums: Canonical quadruple
            solution_count: Its number of solutions
        """
        self.total_puzzles += 1
        if solution_count <= 0:
            return

        self.solvable_count += 1
        if solution_count == 1:
            self.unique_count += 1
        if solution_count > self.max_solutions:
            self.max_solutions = solution_count
        quad = tuple(sums)
        self.entries.append(PuzzleCount(quad, solution_count, orbit_size(quad)))

    def total_solutions_with_symmetry(self) -> int:
        """
        Solutions summed over every quadruple, symmetric variants included.

        Over a complete catalog this is 9! since each grid has exactly one
        sum quadruple.
        """
        return sum(e.solution_count * e.orbit_size for e in self.entries)


def count_puzzle(sums: Sequence[int], strategy: Union[str, SolverStrategy, None] = None) -> int:
    """Solution count of the blank-clue puzzle with the given sums."""
    return PuzzleSolver.from_puzzle(Puzzle.from_sums(sums), strategy=strategy).count_solutions()


def _count_chunk(strategy_name: str, quads: List[SumKey]) -> List[Tuple[SumKey, int]]:
    """Process pool worker: count solutions for a block of quadruples."""
    strategy = resolve_strategy(strategy_name)
    return [(quad, count_puzzle(quad, strategy)) for quad in quads]


def _chunks(quads: List[SumKey], size: int) -> List[List[SumKey]]:
    return [quads[i:i + size] for i in range(0, len(quads), size)]


def run_analysis(
    catalog: Iterable[Sequence[int]],
    strategy: Union[str, SolverStrategy, None] = DEFAULT_ANALYSIS_STRATEGY,
    workers: int = 1,
    context: Optional[AnalysisContext] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> AnalysisReport:
    """
    Count solutions of every puzzle in the catalog.

    Args:
        catalog: Canonical quadruples, usually a SymmetryCatalog
        strategy: Strategy name or instance used for counting
        workers: Worker processes; 1 runs in this process
        context: Cancellation/progress context (a fresh one if None)
        chunk_size: Quadruples per worker task

    Returns:
        AnalysisReport with aggregates and every solvable puzzle

    Raises:
        ValueError: If the strategy name is not registered
    """
    solver_strategy = resolve_strategy(strategy)
    quads: List[SumKey] = [tuple(q) for q in catalog]
    if context is None:
        context = AnalysisContext()

    report = AnalysisReport(strategy_name=solver_strategy.name)
    logger.info(f"Analysing {len(quads)} puzzles with '{solver_strategy.name}' "
                f"({workers} worker{'s' if workers != 1 else ''})")

    start = time.perf_counter()
    if workers > 1 and len(quads) > 0:
        _run_parallel(quads, solver_strategy, workers, context, chunk_size, report)
    else:
        _run_serial(quads, solver_strategy, context, report)
    report.processing_time_sec = time.perf_counter() - start

    logger.info(
        f"Analysis finished: {report.total_puzzles} puzzles, "
        f"{report.solvable_count} solvable, {report.unique_count} unique, "
        f"max {report.max_solutions} solutions, {report.processing_time_sec:.2f}s"
        + (" (cancelled)" if report.was_cancelled else "")
    )
    return report


def _run_serial(quads: List[SumKey], strategy: SolverStrategy,
                context: AnalysisContext, report: AnalysisReport) -> None:
    total = len(quads)
    interval = max(1, context.progress_interval)
    for index, quad in enumerate(quads):
        if context.is_cancelled():
            report.was_cancelled = True
            return

        report.record(quad, count_puzzle(quad, strategy))

        done = index + 1
        if done % interval == 0 or done == total:
            _report_progress(context, done, total)


def _run_parallel(quads: List[SumKey], strategy: SolverStrategy, workers: int,
                  context: AnalysisContext, chunk_size: int, report: AnalysisReport) -> None:
    try:
        executor = ProcessPoolExecutor(max_workers=workers)
    except (PermissionError, OSError) as e:
        logger.warning(f"Process pool unavailable ({e}), analysing serially")
        _run_serial(quads, strategy, context, report)
        return

    total = len(quads)
    with executor:
        futures = [executor.submit(_count_chunk, strategy.name, chunk)
                   for chunk in _chunks(quads, max(1, chunk_size))]

        # Results are consumed in submission order so entries keep catalog order
        for position, future in enumerate(futures):
            if context.is_cancelled():
                report.was_cancelled = True
                for pending in futures[position:]:
                    pending.cancel()
                return

            for quad, count in future.result():
                report.record(quad, count)
            _report_progress(context, report.total_puzzles, total)


def _report_progress(context: AnalysisContext, done: int, total: int) -> None:
    logger.debug(f"Analysed {done}/{total} puzzles")
    context.report_progress(done / total if total else 1.0, f"{done}/{total} puzzles")
