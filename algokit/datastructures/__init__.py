"""
Data structures module.

Provides the singly linked sequence.
"""

from .linked_sequence import LinkedSequence

__all__ = [
    'LinkedSequence',
]
