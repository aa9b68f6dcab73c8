"""
Binary search over ascending sequences.

Every function here assumes the input is already sorted ascending. That
precondition is not checked: on unsorted input the result is unspecified.
Midpoints are computed as left + (right - left) // 2.
"""

from typing import Optional, Sequence

from ..core.exceptions import InvalidArgumentError
from ..core.interfaces import OrderedT

NOT_FOUND = -1


def search(array: Optional[Sequence[OrderedT]], target: OrderedT) -> int:
    """
    Find an index holding `target` (iterative).

    With duplicates, any matching index may be returned.

    Args:
        array: Ascending-sorted values
        target: Value to find

    Returns:
        Index of a match, or -1 if absent

    Raises:
        InvalidArgumentError: If array is None
    """
    if array is None:
        raise InvalidArgumentError("Array to search must not be None", argument_name='array')

    left = 0
    right = len(array) - 1

    while left <= right:
        middle = left + (right - left) // 2
        if array[middle] == target:
            return middle
        elif array[middle] > target:
            right = middle - 1
        else:
            left = middle + 1

    return NOT_FOUND


def search_recursive(
    array: Optional[Sequence[OrderedT]],
    target: OrderedT,
    left: int = 0,
    right: Optional[int] = None
) -> int:
    """
    Find an index holding `target` by recursing into half ranges.

    Args:
        array: Ascending-sorted values
        target: Value to find
        left: First index of the range to search
        right: Last index of the range (None means the last element)

    Returns:
        Index of a match, or -1 if absent

    Raises:
        InvalidArgumentError: If array is None
    """
    if array is None:
        raise InvalidArgumentError("Array to search must not be None", argument_name='array')

    if right is None:
        right = len(array) - 1

    if left > right:
        return NOT_FOUND

    middle = left + (right - left) // 2
    if array[middle] == target:
        return middle
    if array[middle] > target:
        return search_recursive(array, target, left, middle - 1)
    return search_recursive(array, target, middle + 1, right)


def find_first_occurrence(array: Optional[Sequence[OrderedT]], target: OrderedT) -> int:
    """
    Find the leftmost index holding `target`.

    A match is only a candidate: the search keeps narrowing to the left
    until the range is exhausted.

    Args:
        array: Ascending-sorted values, duplicates allowed
        target: Value to find

    Returns:
        Smallest matching index, or -1 if absent (also for None or empty input)
    """
    if not array:
        return NOT_FOUND

    left = 0
    right = len(array) - 1
    best = NOT_FOUND

    while left <= right:
        middle = left + (right - left) // 2
        if array[middle] == target:
            best = middle
            right = middle - 1
        elif array[middle] > target:
            right = middle - 1
        else:
            left = middle + 1

    return best
