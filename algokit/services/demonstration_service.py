"""
Demonstration Service.

Runs the console demonstrations of the linked sequence, the partition sort
and the binary searches, and exposes ad-hoc sort/search operations for the CLI.
"""

from typing import Callable, Dict, List, Optional, Sequence

from ..config.settings import Settings, get_settings
from ..core.logging_config import get_logger
from ..core.results import Result
from ..datastructures.linked_sequence import LinkedSequence
from ..searching import binary_search
from ..sorting import quick_sort
from ..validators.order_validator import SortedOrderValidator

logger = get_logger(__name__)

LARGE_SORT_VALUES = [42, 13, 7, 99, 23, 56, 1, 88, 45, 33, 67, 89, 12, 78, 90]

SEARCH_MODES = ('iterative', 'recursive', 'first')


def _format_values(values: Sequence[int]) -> str:
    return f"[{', '.join(str(value) for value in values)}]"


def _describe_match(target: int, index: int) -> str:
    if index == binary_search.NOT_FOUND:
        return f"Element {target} not found in the array"
    return f"Element {target} found at index {index}"


class DemonstrationService:
    """
    Service for running algorithm demonstrations.

    Each demonstration returns the console lines it produced, wrapped in a
    Result so that callers only print and never handle exceptions.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        order_validator: Optional[SortedOrderValidator] = None
    ):
        """
        Initialize demonstration service.

        Args:
            settings: Optional settings (uses global settings if None)
            order_validator: Optional validator (creates default if None)
        """
        self.settings = settings or get_settings()
        self.order_validator = order_validator or SortedOrderValidator()

    def demonstrate_linked_list(self) -> Result[List[str]]:
        """
        Build a small linked sequence and exercise every operation on it.

        Returns:
            Result with the output lines
        """
        try:
            lines = ["=== Linked list demonstration ===", ""]
            sequence: LinkedSequence[int] = LinkedSequence()

            lines.append("Adding elements to the list:")
            sequence.add_first(10)
            sequence.add_first(20)
            sequence.add_last(30)
            sequence.add_last(40)
            lines.append(f"List: {sequence}")
            lines.append(f"Count: {sequence.count}")
            lines.append("")

            lines.append(f"Contains 30? {sequence.contains(30)}")
            lines.append(f"Contains 50? {sequence.contains(50)}")
            lines.append("")

            lines.append(f"Value at index 1: {sequence.get_at(1)}")
            lines.append(f"Value at index 3: {sequence.get_at(3)}")
            lines.append("")

            lines.append("Removing 30:")
            sequence.remove(30)
            lines.append(f"List: {sequence}")
            lines.append(f"Count: {sequence.count}")
            lines.append("")

            lines.append("Removing 20 (the head):")
            sequence.remove(20)
            lines.append(f"List: {sequence}")
            lines.append(f"Count: {sequence.count}")

            return Result.success_result(lines)

        except Exception as e:
            logger.error(f"Linked list demonstration failed: {str(e)}", exc_info=True)
            return Result.failure_result(f"Linked list demonstration failed: {str(e)}")

    def demonstrate_quick_sort(self) -> Result[List[str]]:
        """
        Sort copies of the configured array and of a larger fixed array.

        Returns:
            Result with the output lines
        """
        try:
            lines = ["=== Quick sort demonstration ===", ""]

            numbers = list(self.settings.demo_sort_values)
            lines.append(f"Original array: {_format_values(numbers)}")
            lines.append(f"Sorted array:   {_format_values(quick_sort.sort(list(numbers)))}")
            lines.append("")

            lines.append(f"Large array ({len(LARGE_SORT_VALUES)} elements):")
            lines.append(f"Original: {_format_values(LARGE_SORT_VALUES)}")
            lines.append(f"Sorted:   {_format_values(quick_sort.sort(list(LARGE_SORT_VALUES)))}")

            return Result.success_result(lines)

        except Exception as e:
            logger.error(f"Quick sort demonstration failed: {str(e)}", exc_info=True)
            return Result.failure_result(f"Quick sort demonstration failed: {str(e)}")

    def demonstrate_binary_search(self) -> Result[List[str]]:
        """
        Run the iterative, recursive and first-occurrence searches.

        Returns:
            Result with the output lines
        """
        try:
            lines = ["=== Binary search demonstration ===", ""]

            sorted_values = list(self.settings.demo_search_values)
            self._check_order(sorted_values)
            lines.append(f"Sorted array: {_format_values(sorted_values)}")
            lines.append("")

            for target in self.settings.demo_search_targets:
                index = binary_search.search(sorted_values, target)
                lines.append(_describe_match(target, index))
            lines.append("")

            lines.append("Using recursive search:")
            recursive_target = self.settings.demo_recursive_target
            recursive_index = binary_search.search_recursive(sorted_values, recursive_target)
            lines.append(_describe_match(recursive_target, recursive_index))
            lines.append("")

            duplicates = list(self.settings.demo_duplicate_values)
            self._check_order(duplicates)
            lines.append(f"Array with duplicates: {_format_values(duplicates)}")
            first_target = self.settings.demo_first_occurrence_target
            first_index = binary_search.find_first_occurrence(duplicates, first_target)
            if first_index != binary_search.NOT_FOUND:
                lines.append(f"First occurrence of {first_target} at index {first_index}")
            else:
                lines.append(f"Element {first_target} not found in the array")

            return Result.success_result(lines)

        except Exception as e:
            logger.error(f"Binary search demonstration failed: {str(e)}", exc_info=True)
            return Result.failure_result(f"Binary search demonstration failed: {str(e)}")

    def run_all(self) -> Result[List[str]]:
        """
        Run every demonstration in order.

        Returns:
            Result with all output lines, or the first failure
        """
        lines: List[str] = []
        demonstrations = [
            self.demonstrate_linked_list,
            self.demonstrate_quick_sort,
            self.demonstrate_binary_search,
        ]

        for demonstrate in demonstrations:
            result = demonstrate()
            if result.is_failure():
                return result
            if lines:
                lines.append("")
            lines.extend(result.get_value())

        logger.info(f"Completed {len(demonstrations)} demonstrations")
        return Result.success_result(lines)

    def sort_values(self, values: Optional[List[int]]) -> Result[List[int]]:
        """
        Sort a copy of the given values.

        Args:
            values: Values to sort

        Returns:
            Result with the sorted copy
        """
        if values is None:
            return Result.failure_result("No values given to sort")

        try:
            return Result.success_result(quick_sort.sort(list(values)))
        except Exception as e:
            logger.error(f"Error sorting values: {str(e)}", exc_info=True)
            return Result.failure_result(f"Failed to sort values: {str(e)}")

    def search_values(
        self,
        values: Optional[List[int]],
        target: int,
        mode: str = 'iterative'
    ) -> Result[int]:
        """
        Search for a target with the chosen binary search variant.

        Args:
            values: Ascending-sorted values
            target: Value to find
            mode: 'iterative', 'recursive' or 'first'

        Returns:
            Result with the index found (-1 when absent)
        """
        searches: Dict[str, Callable[..., int]] = {
            'iterative': binary_search.search,
            'recursive': binary_search.search_recursive,
            'first': binary_search.find_first_occurrence,
        }
        if mode not in searches:
            return Result.failure_result(
                f"Unknown search mode '{mode}' (expected one of: {', '.join(SEARCH_MODES)})"
            )

        try:
            self._check_order(values)
            index = searches[mode](values, target)
            logger.debug(f"{mode} search for {target} returned {index}")
            return Result.success_result(index)
        except Exception as e:
            logger.error(f"Error searching values: {str(e)}", exc_info=True)
            return Result.failure_result(f"Failed to search values: {str(e)}")

    def _check_order(self, values: Optional[Sequence[int]]) -> None:
        if values is None or not self.settings.verify_sorted_input:
            return
        if not self.order_validator.validate(values):
            logger.warning("Input is not sorted ascending; binary search results are unspecified")
