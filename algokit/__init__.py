"""
algokit - classic data structures and algorithms.

A singly linked sequence, an in-place partition sort and binary search
variants, plus the demonstration service that prints them in action.
"""

from .datastructures import LinkedSequence
from .sorting import sort, sort_range, partition
from .searching import search, search_recursive, find_first_occurrence
from .core.exceptions import AlgorithmError, InvalidArgumentError, IndexOutOfRangeError

__version__ = "1.0.0"

__all__ = [
    'LinkedSequence',
    'sort',
    'sort_range',
    'partition',
    'search',
    'search_recursive',
    'find_first_occurrence',
    'AlgorithmError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
]
