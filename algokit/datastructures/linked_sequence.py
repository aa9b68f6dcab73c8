"""
Singly linked sequence.

Values live in a chain of nodes: the sequence owns the head node and every
other node is owned by its predecessor. No tail pointer is kept, so appending
walks the whole chain.

Complexity:
- add_first: O(1)
- add_last, remove, contains, get_at: O(n)
"""

from typing import Any, Generic, Iterator, Optional, TypeVar

from ..core.exceptions import IndexOutOfRangeError
from ..core.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

EMPTY_MARKER = '(empty list)'
NULL_TOKEN = 'null'
SEPARATOR = ' -> '


class _ListNode(Generic[T]):
    """One link of the chain. Never handed out to callers."""

    __slots__ = ('data', 'next')

    def __init__(self, data: T):
        self.data = data
        self.next: Optional['_ListNode[T]'] = None


def _matches(data: Any, value: Any) -> bool:
    # A None element never matches, so equality is never called on it
    return data is not None and data == value


class LinkedSequence(Generic[T]):
    """
    Singly linked list of values.

    Invariant: `count` equals the number of nodes reachable from the head,
    and the head is None exactly when `count` is 0.

    Example:
        seq = LinkedSequence()
        seq.add_first(10)
        seq.add_first(20)
        seq.add_last(30)
        str(seq)  # '20 -> 10 -> 30'
    """

    def __init__(self):
        self._head: Optional[_ListNode[T]] = None
        self._count = 0

    @property
    def count(self) -> int:
        """Number of values in the sequence."""
        return self._count

    def add_first(self, value: T) -> None:
        """
        Insert a value before the current head.

        Args:
            value: Value to insert
        """
        node = _ListNode(value)
        node.next = self._head
        self._head = node
        self._count += 1

    def add_last(self, value: T) -> None:
        """
        Append a value after the last node.

        Args:
            value: Value to append
        """
        node = _ListNode(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._count += 1

    def remove(self, value: T) -> bool:
        """
        Unlink the first node whose value equals `value`.

        Later duplicates stay in place.

        Args:
            value: Value to remove

        Returns:
            True if a node was removed, False otherwise
        """
        if self._head is None:
            return False

        if _matches(self._head.data, value):
            self._head = self._head.next
            self._count -= 1
            return True

        previous = self._head
        while previous.next is not None:
            if _matches(previous.next.data, value):
                previous.next = previous.next.next
                self._count -= 1
                return True
            previous = previous.next

        logger.debug(f"Value {value!r} not found, nothing removed")
        return False

    def contains(self, value: T) -> bool:
        """
        Check whether some node holds `value`.

        Args:
            value: Value to look for

        Returns:
            True if found, False otherwise
        """
        current = self._head
        while current is not None:
            if _matches(current.data, value):
                return True
            current = current.next
        return False

    def get_at(self, index: int) -> T:
        """
        Read the value at a zero-based position counted from the head.

        Args:
            index: Position to read

        Returns:
            The stored value

        Raises:
            IndexOutOfRangeError: If index is outside [0, count)
        """
        if index < 0 or index >= self._count:
            raise IndexOutOfRangeError(index, self._count)

        current = self._head
        for _ in range(index):
            current = current.next
        return current.data

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __str__(self) -> str:
        if self._head is None:
            return EMPTY_MARKER
        return SEPARATOR.join(
            NULL_TOKEN if value is None else str(value) for value in self
        )

    def __repr__(self) -> str:
        return f"LinkedSequence([{', '.join(repr(value) for value in self)}])"
