"""
Sorting module.

Provides the in-place partition sort.
"""

from .quick_sort import sort, sort_range, partition

__all__ = [
    'sort',
    'sort_range',
    'partition',
]
