"""
Permutations Module - Lexicographic permutation sequence.
"""

from typing import Iterator, Optional, Sequence, Tuple

from .puzzle import DIGITS


def next_permutation(values: Sequence[int]) -> Optional[Tuple[int, ...]]:
    """
    Compute the next permutation in lexicographic order.

    Args:
        values: Current permutation

    Returns:
        The following permutation, or None if values is the last one
        (fully descending)
    """
    items = list(values)

    # Rightmost position whose value is smaller than its successor
    pivot = len(items) - 2
    while pivot >= 0 and items[pivot] >= items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return None

    # Rightmost value larger than the pivot
    successor = len(items) - 1
    while items[successor] <= items[pivot]:
        successor -= 1

    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return tuple(items)


def lexicographic_permutations(start: Sequence[int] = DIGITS) -> Iterator[Tuple[int, ...]]:
    """
    Yield start and every permutation after it, in lexicographic order.

    Starting from the sorted digits this covers all 9! grids. Each call
    returns a fresh generator, so the sequence can be restarted.

    Args:
        start: First permutation to yield

    Yields:
        Permutations as tuples
    """
    current: Optional[Tuple[int, ...]] = tuple(start)
    while current is not None:
        yield current
        current = next_permutation(current)
