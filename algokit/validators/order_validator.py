"""
Sorted Order Validator.

Checks that a sequence is in ascending order before it is handed to a
binary search.
"""

from typing import Any, Optional, Sequence
from ..core.logging_config import get_logger
from ..core.interfaces import IValidator

logger = get_logger(__name__)


class SortedOrderValidator(IValidator):
    """
    Validates that a sequence is sorted ascending (non-decreasing).

    Used by the service layer to warn about input that breaks the binary
    search precondition. The searches themselves never call it.
    """

    def validate(self, data: Any) -> bool:
        """
        Validate ascending order.

        Args:
            data: Sequence to check

        Returns:
            True if data is a sequence in non-decreasing order, False otherwise
        """
        if data is None or not isinstance(data, Sequence) or isinstance(data, str):
            return False

        try:
            violation = self.find_first_violation(data)
        except TypeError as e:
            logger.warning(f"Elements cannot be compared: {str(e)}")
            return False

        if violation != -1:
            logger.info(
                f"Order validation failed at index {violation}: "
                f"{data[violation]!r} > {data[violation + 1]!r}"
            )
            return False

        return True

    def find_first_violation(self, data: Optional[Sequence[Any]]) -> int:
        """
        Locate the first descent in a sequence.

        Args:
            data: Sequence to scan

        Returns:
            First index i with data[i] > data[i + 1], or -1 if there is none
        """
        if not data:
            return -1

        for i in range(len(data) - 1):
            if data[i] > data[i + 1]:
                return i

        return -1
