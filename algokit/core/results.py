"""
Result objects for functional error handling.

The service layer reports outcomes through Result instead of letting
exceptions from the algorithms escape to console callers.
"""

from typing import Optional, Generic, TypeVar
from dataclasses import dataclass

T = TypeVar('T')


@dataclass
class Result(Generic[T]):
    """Outcome of a service operation: a value on success, a message on failure."""

    success: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success_result(cls, value: T) -> 'Result[T]':
        """Create a success result."""
        return cls(success=True, value=value)

    @classmethod
    def failure_result(cls, error: str) -> 'Result[T]':
        """Create a failure result."""
        return cls(success=False, error=error)

    def is_success(self) -> bool:
        return self.success

    def is_failure(self) -> bool:
        return not self.success

    def get_value(self) -> T:
        """Get the value, raising ValueError if the result is a failure."""
        if not self.success:
            raise ValueError(f"Result is a failure: {self.error}")
        return self.value

    def get_error(self) -> Optional[str]:
        return self.error
