"""
Symmetry Module - Dihedral symmetries of the puzzle and the canonical catalog.

Rotating or reflecting a solved grid gives another solved grid, and moves
the four sums around in a fixed way. Two sum quadruples related by one of
the 8 symmetries of the square therefore have the same number of solutions,
so the analysis only needs one representative per equivalence class.

Sum positions (a, b, c, d) are top-left, top-right, bottom-left,
bottom-right.
"""

import time
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Set, Tuple

from .puzzle import MAX_SUM, MIN_SUM, Puzzle

logger = logging.getLogger(__name__)

SumKey = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Symmetry:
    """
    One symmetry of the square, as index permutations.

    Attributes:
        name: Identifier used by transform()
        sum_order: For each sum position, the source position in (a, b, c, d)
        cell_order: For each grid cell, the source cell in the original grid
    """
    name: str
    sum_order: Tuple[int, int, int, int]
    cell_order: Tuple[int, ...]

    def apply_sums(self, quad: Sequence[int]) -> SumKey:
        return tuple(quad[i] for i in self.sum_order)

    def apply_cells(self, values: Sequence[int]) -> Tuple[int, ...]:
        return tuple(values[i] for i in self.cell_order)


SYMMETRIES: Tuple[Symmetry, ...] = (
    Symmetry("identity", (0, 1, 2, 3), (0, 1, 2, 3, 4, 5, 6, 7, 8)),
    Symmetry("horizontal_reflection", (1, 0, 3, 2), (2, 1, 0, 5, 4, 3, 8, 7, 6)),
    Symmetry("vertical_reflection", (2, 3, 0, 1), (6, 7, 8, 3, 4, 5, 0, 1, 2)),
    Symmetry("main_diagonal_reflection", (0, 2, 1, 3), (0, 3, 6, 1, 4, 7, 2, 5, 8)),
    Symmetry("anti_diagonal_reflection", (3, 1, 2, 0), (8, 5, 2, 7, 4, 1, 6, 3, 0)),
    Symmetry("rotate_90", (2, 0, 3, 1), (6, 3, 0, 7, 4, 1, 8, 5, 2)),
    Symmetry("rotate_270", (1, 3, 0, 2), (2, 5, 8, 1, 4, 7, 0, 3, 6)),
    Symmetry("rotate_180", (3, 2, 1, 0), (8, 7, 6, 5, 4, 3, 2, 1, 0)),
)

_BY_NAME: Dict[str, Symmetry] = {s.name: s for s in SYMMETRIES}


def symmetry_names() -> List[str]:
    """Names of the 8 symmetries, identity first."""
    return [s.name for s in SYMMETRIES]


def _lookup(name: str) -> Symmetry:
    if name not in _BY_NAME:
        available = ", ".join(symmetry_names())
        raise ValueError(f"Unknown symmetry: {name}. Available: {available}")
    return _BY_NAME[name]


def transform(quad: Sequence[int], name: str) -> SumKey:
    """
    Apply a named symmetry to a sum quadruple.

    Raises:
        ValueError: If name is not one of symmetry_names()
    """
    return _lookup(name).apply_sums(quad)


def transform_grid(values: Sequence[int], name: str) -> Tuple[int, ...]:
    """
    Apply a named symmetry to a 9-cell grid.

    sub_square_sums(transform_grid(g, t)) == transform(sub_square_sums(g), t)

    Raises:
        ValueError: If name is not one of symmetry_names()
    """
    return _lookup(name).apply_cells(values)


def images(quad: Sequence[int]) -> List[SumKey]:
    """All 8 images of quad, in SYMMETRIES order (duplicates kept)."""
    return [s.apply_sums(quad) for s in SYMMETRIES]


def orbit(quad: Sequence[int]) -> Set[SumKey]:
    """Distinct quadruples equivalent to quad."""
    return set(images(quad))


def orbit_size(quad: Sequence[int]) -> int:
    """Number of distinct quadruples equivalent to quad (1, 2, 4 or 8)."""
    return len(orbit(quad))


def expected_class_count(n: int) -> int:
    """
    Number of equivalence classes of quadruples over n values.

    Burnside's lemma over the dihedral group of order 8 gives
    n(n+1)(n^2+n+2)/8; 26796 for n = 21.
    """
    return n * (n + 1) * (n * n + n + 2) // 8


class SymmetryCatalog:
    """
    One representative sum quadruple per symmetry class.

    Entries keep the order in which they were generated, and each
    representative is the first member of its class met when counting
    a, b, c, d upward (nested, d fastest).

    Example:
        catalog = SymmetryCatalog.generate()
        len(catalog)                           # 26796
        catalog.canonical_form((30, 29, 10, 11))
    """

    def __init__(self, entries: Iterable[Sequence[int]], low: int = MIN_SUM, high: int = MAX_SUM):
        """
        Args:
            entries: Canonical quadruples, in catalog order
            low: Smallest sum value covered
            high: Largest sum value covered
        """
        self.low = low
        self.high = high
        self._entries: List[SumKey] = [tuple(int(v) for v in q) for q in entries]
        self._members: Set[SumKey] = set(self._entries)

    @classmethod
    def generate(cls, low: int = MIN_SUM, high: int = MAX_SUM) -> 'SymmetryCatalog':
        """
        Build the catalog for every quadruple with values in [low, high].

        A quadruple is kept only if none of its 8 images was kept before.

        Args:
            low: Smallest sum value
            high: Largest sum value

        Returns:
            SymmetryCatalog instance
        """
        start = time.perf_counter()
        seen: Set[SumKey] = set()
        entries: List[SumKey] = []
        values = range(low, high + 1)

        for a in values:
            for b in values:
                for c in values:
                    for d in values:
                        quad = (a, b, c, d)
                        if any(image in seen for image in images(quad)):
                            continue
                        seen.add(quad)
                        entries.append(quad)

        logger.info(f"Generated {len(entries)} canonical puzzles for sums {low}-{high} "
                    f"in {time.perf_counter() - start:.2f}s")
        return cls(entries, low=low, high=high)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SumKey]:
        return iter(self._entries)

    def __contains__(self, quad: object) -> bool:
        if not isinstance(quad, (tuple, list)):
            return False
        return tuple(quad) in self._members

    def __getitem__(self, index: int) -> SumKey:
        return self._entries[index]

    @property
    def entries(self) -> List[SumKey]:
        """Canonical quadruples in catalog order (a copy)."""
        return list(self._entries)

    def canonical_form(self, quad: Sequence[int]) -> SumKey:
        """
        Find the catalog member equivalent to quad.

        Raises:
            KeyError: If no image of quad is in the catalog (values out of range)
        """
        for image in images(quad):
            if image in self._members:
                return image
        raise KeyError(f"{tuple(quad)} is not covered by sums {self.low}-{self.high}")

    def puzzles(self) -> Iterator[Puzzle]:
        """Blank-clue puzzles for every entry."""
        for quad in self._entries:
            yield Puzzle.from_sums(quad)

    def definitions(self) -> List[str]:
        """Definition strings (blank clues) for every entry."""
        return [puzzle.to_definition() for puzzle in self.puzzles()]

    def total_layouts(self) -> int:
        """
        Number of quadruples covered including symmetric variants.

        Equals (high - low + 1) ** 4 for a generated catalog.
        """
        return sum(orbit_size(quad) for quad in self._entries)
