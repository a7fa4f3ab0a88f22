"""Binary search over sorted integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in sorted ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if key == values[mid]:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_search_recursive(values: Sequence[int], low: int, high: int, key: int) -> int:
    """Search ``values[low..high]`` (inclusive) recursively; return index or -1."""
    if low > high:
        return -1
    mid = (low + high) // 2
    if key == values[mid]:
        return mid
    if key < values[mid]:
        return binary_search_recursive(values, low, mid - 1, key)
    return binary_search_recursive(values, mid + 1, high, key)