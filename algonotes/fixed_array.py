"""A fixed-capacity integer array."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from algonotes import carray

_RESULT_CAPACITY = 10


class Array:
    """An array of integers that holds at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("array size must not be negative")
        self.size = size
        self._data: list[int] = []

    @classmethod
    def _from_values(cls, values: Iterable[int], size: int) -> Array:
        data = list(values)
        arr = cls(max(size, len(data)))
        arr._data = data
        return arr

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Array(size={self.size}, items={self._data!r})"

    def append(self, x: int) -> None:
        """Append ``x`` if there is room; otherwise do nothing."""
        carray.append(self._data, x, self.size)

    def average(self) -> float:
        """Return the mean of the items."""
        return carray.average(self._data)

    def delete(self, index: int) -> None:
        """Remove the item at ``index``; out-of-range indices are ignored."""
        carray.delete(self._data, index)

    def difference_sorted(self, other: Array) -> Array:
        """Return the items of this sorted array not found in sorted ``other``."""
        return Array._from_values(
            carray.difference_sorted(self._data, other._data), _RESULT_CAPACITY
        )

    def display(self, file: TextIO | None = None) -> None:
        """Write the items separated by spaces, followed by a newline."""
        carray.display(self._data, sys.stdout if file is None else file)

    def get(self, index: int) -> int:
        """Return the item at ``index``, or -1 when out of range."""
        return carray.get(self._data, index)

    def insert(self, index: int, x: int) -> None:
        """Insert ``x`` before ``index`` if the index is valid and there is room."""
        if len(self._data) < self.size:
            carray.insert(self._data, index, x)

    def intersection_sorted(self, other: Array) -> Array:
        """Return the items common to both sorted arrays."""
        return Array._from_values(
            carray.intersection_sorted(self._data, other._data), _RESULT_CAPACITY
        )

    def is_sorted(self) -> bool:
        """Return True when the items are in non-decreasing order."""
        return carray.is_sorted(self._data)

    def max(self) -> int:
        """Return the largest item."""
        return carray.maximum(self._data)

    def merge(self, other: Array) -> Array:
        """Merge two sorted arrays into a new one sized for both."""
        return Array._from_values(
            carray.merge(self._data, other._data), len(self) + len(other)
        )

    def min(self) -> int:
        """Return the smallest item."""
        return carray.minimum(self._data)

    def rearrange(self) -> None:
        """Move negative items to the front and non-negative ones to the back."""
        carray.rearrange(self._data)

    def reverse(self) -> None:
        """Reverse the items in place."""
        carray.reverse(self._data)

    def set(self, index: int, x: int) -> None:
        """Replace the item at ``index``; out-of-range indices are ignored."""
        carray.set_item(self._data, index, x)

    def sum(self) -> int:
        """Return the sum of the items."""
        return carray.total(self._data)

    def union_sorted(self, other: Array) -> Array:
        """Return the union of two sorted arrays."""
        return Array._from_values(
            carray.union_sorted(self._data, other._data), _RESULT_CAPACITY
        )