"""
Puzzle Module - Immutable Sujiko puzzle definition.

A puzzle is nine clue cells (0 = blank) laid out row-major on a 3x3 grid
plus four sums, one for each 2x2 sub-square:

    0 1 2
     a b
    3 4 5
     c d
    6 7 8
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

GRID_SIZE = 9
DIGITS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9)

# Cell indices covered by each sub-square, in sum order (a, b, c, d)
SUB_SQUARES: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 1, 3, 4),
    (1, 2, 4, 5),
    (3, 4, 6, 7),
    (4, 5, 7, 8),
)

# 1+2+3+4 and 6+7+8+9: the only sums four distinct digits can reach
MIN_SUM = 10
MAX_SUM = 30

DEFINITION_SEPARATOR = "/"
ASCII_DIGITS = "0123456789"


class PuzzleParseError(ValueError):
    """Raised when a puzzle definition string is malformed."""


def sub_square_sums(values: Sequence[int]) -> Tuple[int, int, int, int]:
    """
    Compute the four sub-square sums of a 9-cell grid.

    Args:
        values: Cell values in row-major order

    Returns:
        (a, b, c, d) sums for top-left, top-right, bottom-left, bottom-right
    """
    return tuple(sum(values[i] for i in square) for square in SUB_SQUARES)


def _is_decimal(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other scripts' digits
    return bool(text) and all(ch in ASCII_DIGITS for ch in text)


@dataclass(frozen=True)
class Puzzle:
    """
    Immutable puzzle representation.

    No range checking is done here: clues outside 0-9 or sums outside
    10-30 are accepted and simply lead to zero solutions.

    Attributes:
        clues: 9 values, 0 for a blank cell or the fixed digit
        sums: 4 required sub-square sums (a, b, c, d)
    """
    clues: Tuple[int, ...]
    sums: Tuple[int, ...]

    @classmethod
    def create(cls, clues: Sequence[int], sums: Sequence[int]) -> 'Puzzle':
        """
        Create a Puzzle from any sequences, converted to tuples.

        Args:
            clues: 9 clue values (0 = blank)
            sums: 4 sub-square sums

        Returns:
            Puzzle instance
        """
        return cls(clues=tuple(int(c) for c in clues),
                   sums=tuple(int(s) for s in sums))

    @classmethod
    def from_sums(cls, sums: Sequence[int]) -> 'Puzzle':
        """Create a puzzle with no clues."""
        return cls.create((0,) * GRID_SIZE, sums)

    @classmethod
    def from_definition(cls, text: str) -> 'Puzzle':
        """
        Parse a definition string such as ``000708000/22,15,17,21``.

        All whitespace is removed first. The first nine characters are the
        clues ('0' for blank), followed by '/' and four comma-separated sums.

        Args:
            text: Puzzle definition string

        Returns:
            Puzzle instance

        Raises:
            PuzzleParseError: If the string does not follow the format
        """
        compact = "".join(text.split())

        if len(compact) <= GRID_SIZE:
            raise PuzzleParseError(
                f"definition too short: expected {GRID_SIZE} clue digits, "
                f"'{DEFINITION_SEPARATOR}' and four sums"
            )

        clue_text = compact[:GRID_SIZE]
        if not _is_decimal(clue_text):
            raise PuzzleParseError(f"clues must be {GRID_SIZE} digits, got '{clue_text}'")

        if compact[GRID_SIZE] != DEFINITION_SEPARATOR:
            raise PuzzleParseError(
                f"expected '{DEFINITION_SEPARATOR}' after the clues, "
                f"got '{compact[GRID_SIZE]}'"
            )

        sum_fields = compact[GRID_SIZE + 1:].split(",")
        if len(sum_fields) != len(SUB_SQUARES):
            raise PuzzleParseError(
                f"expected {len(SUB_SQUARES)} comma-separated sums, got {len(sum_fields)}"
            )

        sums = []
        for field_text in sum_fields:
            if not _is_decimal(field_text):
                raise PuzzleParseError(f"sum '{field_text}' is not a number")
            sums.append(int(field_text))

        return cls.create([int(ch) for ch in clue_text], sums)

    def to_definition(self) -> str:
        """
        Format this puzzle as a definition string.

        Returns:
            String such as ``000708000/22,15,17,21``
        """
        clue_text = "".join(str(c) for c in self.clues)
        sum_text = ",".join(str(s) for s in self.sums)
        return f"{clue_text}{DEFINITION_SEPARATOR}{sum_text}"

    @property
    def clue_positions(self) -> Tuple[int, ...]:
        """Indices of the cells that carry a clue."""
        return tuple(i for i, c in enumerate(self.clues) if c != 0)

    @property
    def has_clues(self) -> bool:
        """True if at least one cell is fixed."""
        return any(c != 0 for c in self.clues)

    def matches_clues(self, values: Sequence[int]) -> bool:
        """
        Check that a candidate grid agrees with every clue.

        Args:
            values: Candidate cell values

        Returns:
            False on the first clue the candidate contradicts
        """
        for clue, value in zip(self.clues, values):
            if clue != 0 and clue != value:
                return False
        return True

    def matches_sums(self, values: Sequence[int]) -> bool:
        """
        Check that a candidate grid produces the required sums.

        Args:
            values: Candidate cell values

        Returns:
            False on the first sub-square whose sum differs
        """
        for square, target in zip(SUB_SQUARES, self.sums):
            if (values[square[0]] + values[square[1]]
                    + values[square[2]] + values[square[3]]) != target:
                return False
        return True

    def is_valid_solution(self, values: Sequence[int]) -> bool:
        """
        Check a candidate against clues, then sums.

        The candidate is assumed to be a permutation of 1-9.

        Args:
            values: Candidate cell values

        Returns:
            True if the candidate solves this puzzle
        """
        return self.matches_clues(values) and self.matches_sums(values)

    def __str__(self) -> str:
        return self.to_definition()
