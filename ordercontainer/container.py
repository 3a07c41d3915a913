"""A list-backed container offering several traversal orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class MyContainer(Generic[T]):
    """Holds values in insertion order and walks them in several orders.

    The ordered traversals take a snapshot of the contents when they are
    requested, so changing the container afterwards does not affect an
    iterator already handed out.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: list[T] = list(values)

    def add(self, value: T) -> None:
        """Append a value to the container."""
        self._values.append(value)

    def remove(self, value: T) -> None:
        """Remove every occurrence of ``value``.

        Raises ValueError if the value is not present at all.
        """
        kept = [item for item in self._values if not item == value]
        if len(kept) == len(self._values):
            raise ValueError("Cannot remove non-existent element")
        self._values = kept

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        """Iterate in insertion order."""
        return iter(self._values)

    def __str__(self) -> str:
        return "".join(f"{value}, " for value in self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def reverse_order(self) -> Iterator[T]:
        """Iterate from the last inserted value to the first."""
        return iter(self._values[::-1])

    def ascending_order(self) -> Iterator[T]:
        """Iterate from the smallest value to the largest."""
        return iter(sorted(self._values))

    def descending_order(self) -> Iterator[T]:
        """Iterate from the largest value to the smallest."""
        return iter(sorted(self._values)[::-1])

    def sidecross_order(self) -> Iterator[T]:
        """Alternate between the smallest and largest remaining values."""
        ordered = sorted(self._values)
        result: list[T] = []
        left, right = 0, len(ordered) - 1
        from_left = True
        while left <= right:
            if from_left:
                result.append(ordered[left])
                left += 1
            else:
                result.append(ordered[right])
                right -= 1
            from_left = not from_left
        return iter(result)

    def middle_order(self) -> Iterator[T]:
        """Start at the middle of insertion order, then fan out left and right."""
        values = list(self._values)
        count = len(values)
        if not count:
            return iter(())
        mid = (count - 1) // 2
        result = [values[mid]]
        offset = 1
        while mid >= offset or mid + offset < count:
            if mid >= offset:
                result.append(values[mid - offset])
            if mid + offset < count:
                result.append(values[mid + offset])
            offset += 1
        return iter(result)