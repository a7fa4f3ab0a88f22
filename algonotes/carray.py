"""Operations on plain integer lists used as simple arrays.

Functions that change an array work in place on the list they are given;
functions that combine arrays return a new list.
"""

from __future__ import annotations

import sys
from collections.abc import MutableSequence, Sequence
from typing import TextIO


def append(values: MutableSequence[int], x: int, capacity: int | None = None) -> None:
    """Append ``x`` unless the array already holds ``capacity`` items."""
    if capacity is None or len(values) < capacity:
        values.append(x)


def average(values: Sequence[int]) -> float:
    """Return the arithmetic mean of the values."""
    return total(values) / len(values)


def delete(values: MutableSequence[int], index: int) -> None:
    """Remove the item at ``index``; out-of-range indices are ignored."""
    if 0 <= index < len(values):
        del values[index]


def difference_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the items of sorted ``first`` that are not in sorted ``second``."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            i += 1
            j += 1
    result.extend(first[i:])
    return result


def display(values: Sequence[int], file: TextIO | None = None) -> None:
    """Write the values separated by spaces, each followed by one space."""
    out = sys.stdout if file is None else file
    out.write("".join(f"{value} " for value in values) + "\n")


def get(values: Sequence[int], index: int) -> int:
    """Return the item at ``index``, or -1 when the index is out of range."""
    if 0 <= index < len(values):
        return values[index]
    return -1


def insert(values: MutableSequence[int], index: int, x: int) -> None:
    """Insert ``x`` before ``index``; indices outside 0..len are ignored."""
    if 0 <= index <= len(values):
        values.insert(index, x)


def intersection_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the items common to two sorted arrays."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    return result


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when the values are in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def maximum(values: Sequence[int]) -> int:
    """Return the largest value."""
    if not values:
        raise ValueError("maximum of an empty array")
    return max(values)


def merge(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted arrays; on equal items the one from ``second`` comes first."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def minimum(values: Sequence[int]) -> int:
    """Return the smallest value."""
    if not values:
        raise ValueError("minimum of an empty array")
    return min(values)


def rearrange(values: MutableSequence[int]) -> None:
    """Move negative values to the front and non-negative ones to the back."""
    i = 0
    j = len(values) - 1
    while i < j:
        while i < len(values) and values[i] < 0:
            i += 1
        while j >= 0 and values[j] >= 0:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]


def reverse(values: MutableSequence[int]) -> None:
    """Reverse the array in place."""
    values.reverse()


def set_item(values: MutableSequence[int], index: int, x: int) -> None:
    """Replace the item at ``index``; out-of-range indices are ignored."""
    if 0 <= index < len(values):
        values[index] = x


def total(values: Sequence[int]) -> int:
    """Return the sum of the values."""
    return sum(values)


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the union of two sorted arrays, keeping one copy of shared items."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        elif second[j] < first[i]:
            result.append(second[j])
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result