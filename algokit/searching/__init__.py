"""
Searching module.

Provides binary search variants over ascending sequences.
"""

from .binary_search import search, search_recursive, find_first_occurrence, NOT_FOUND

__all__ = [
    'search',
    'search_recursive',
    'find_first_occurrence',
    'NOT_FOUND',
]
