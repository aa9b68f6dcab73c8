"""
In-place quicksort with the Lomuto partition scheme.

The pivot is always the rightmost element of the current range and ties go
left of the boundary, so the sort is not stable.

Average cost is O(n log n). Already sorted or reverse sorted input degrades
to O(n^2) comparisons and O(n) recursion depth, which means inputs of that
shape longer than the interpreter's recursion limit raise RecursionError.
Shuffle large inputs that may already be ordered.
"""

from typing import MutableSequence, Optional

from ..core.exceptions import InvalidArgumentError
from ..core.interfaces import OrderedT
from ..core.logging_config import get_logger

logger = get_logger(__name__)


def sort(sequence: Optional[MutableSequence[OrderedT]]) -> MutableSequence[OrderedT]:
    """
    Sort a mutable sequence ascending, in place.

    Args:
        sequence: Values to sort (list or other MutableSequence)

    Returns:
        The same sequence object, now sorted

    Raises:
        InvalidArgumentError: If sequence is None
    """
    if sequence is None:
        raise InvalidArgumentError("Sequence to sort must not be None", argument_name='sequence')

    if len(sequence) <= 1:
        return sequence

    logger.debug(f"Sorting {len(sequence)} elements")
    sort_range(sequence, 0, len(sequence) - 1)
    return sequence


def sort_range(sequence: MutableSequence[OrderedT], low: int, high: int) -> None:
    """
    Sort the closed index range [low, high] in place.

    Args:
        sequence: Values being sorted
        low: First index of the range
        high: Last index of the range
    """
    if low >= high:
        return

    pivot_index = partition(sequence, low, high)
    sort_range(sequence, low, pivot_index - 1)
    sort_range(sequence, pivot_index + 1, high)


def partition(sequence: MutableSequence[OrderedT], low: int, high: int) -> int:
    """
    Partition [low, high] around the value at `high`.

    After the call every element left of the returned index is <= the pivot
    and every element right of it is greater.

    Args:
        sequence: Values being sorted
        low: First index of the range
        high: Last index of the range, holding the pivot

    Returns:
        Final index of the pivot
    """
    pivot = sequence[high]
    boundary = low - 1

    for j in range(low, high):
        if sequence[j] <= pivot:
            boundary += 1
            sequence[boundary], sequence[j] = sequence[j], sequence[boundary]

    sequence[boundary + 1], sequence[high] = sequence[high], sequence[boundary + 1]
    return boundary + 1
