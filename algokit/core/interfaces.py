"""
Interface definitions using Python Protocols.

This module defines the capability contracts the algorithms rely on, using
Python's Protocol feature (structural subtyping/duck typing). Element types do
not inherit from anything: ints, floats, strings and any class implementing the
right comparison methods satisfy these Protocols automatically.

Example usage:
    class Version:
        def __init__(self, number: int):
            self.number = number

        def __le__(self, other: "Version") -> bool:
            return self.number <= other.number

        def __lt__(self, other: "Version") -> bool:
            return self.number < other.number

        def __gt__(self, other: "Version") -> bool:
            return self.number > other.number

    # Version satisfies SupportsOrdering and can be sorted or searched
"""

from typing import Protocol, Any, TypeVar, runtime_checkable


@runtime_checkable
class SupportsOrdering(Protocol):
    """
    Protocol for element types with a total order.

    Required by the partition sort (which compares with ``<=``), by the
    binary searches and by the order validator (which compare with ``==``
    and ``>``). Equality is inherited from ``object``, so only the ordering
    methods are listed.
    """

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...


OrderedT = TypeVar('OrderedT', bound=SupportsOrdering)


@runtime_checkable
class IValidator(Protocol):
    """
    Protocol defining the contract for validator classes.

    Classes that implement a `validate` method with the correct signature
    automatically satisfy this Protocol, without needing to explicitly
    inherit from it.

    Implementations:
    - SortedOrderValidator: checks that a sequence is in ascending order

    Example:
        class NonEmptyValidator:
            def validate(self, data: Any) -> bool:
                return bool(data)

        validator: IValidator = NonEmptyValidator()
        result = validator.validate([1, 2, 3])
    """

    def validate(self, data: Any) -> bool:
        """
        Validate data according to the validator's rules.

        Args:
            data: The data to validate

        Returns:
            True if the data is valid according to the validator's rules,
            False otherwise

        Raises:
            No exceptions should be raised. Invalid data should return False.
        """
        ...
