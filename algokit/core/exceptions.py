"""
Custom exception hierarchy for the application.

Provides specific exception types for better error handling and debugging.
"""

from typing import Optional


class AlgorithmError(Exception):
    """Base exception for all algokit errors."""
    pass


class InvalidArgumentError(AlgorithmError, ValueError):
    """Raised when a required argument is absent (None) or unusable."""

    def __init__(self, message: str, argument_name: Optional[str] = None):
        super().__init__(message)
        self.argument_name = argument_name


class IndexOutOfRangeError(AlgorithmError, IndexError):
    """Raised when a positional read falls outside [0, count)."""

    def __init__(self, index: int, count: int):
        if count > 0:
            message = f"Index {index} is out of range: must be between 0 and {count - 1}"
        else:
            message = f"Index {index} is out of range: the sequence is empty"
        super().__init__(message)
        self.index = index
        self.count = count


class ConfigurationError(AlgorithmError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
