"""
Core module providing foundational components for the application.

Includes interfaces, exceptions, result objects and logging helpers.
"""

from .interfaces import IValidator, SupportsOrdering
from .exceptions import (
    AlgorithmError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    ConfigurationError,
)
from .results import Result

__all__ = [
    'IValidator',
    'SupportsOrdering',
    'AlgorithmError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'ConfigurationError',
    'Result',
]
