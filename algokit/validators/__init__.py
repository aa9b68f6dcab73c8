"""
Validators module.

Provides input order validation.
"""

from .order_validator import SortedOrderValidator

__all__ = [
    'SortedOrderValidator',
]
