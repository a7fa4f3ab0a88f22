"""Linear search, plain and with self-organising moves."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def linear_search(values: Sequence[int], key: int) -> int:
    """Return the index of the first ``key`` in ``values``, or -1."""
    return next((i for i, value in enumerate(values) if value == key), -1)


def linear_search_swap(values: MutableSequence[int], key: int) -> int:
    """Find ``key``, swap it one place towards the front, and return its old index."""
    index = linear_search(values, key)
    if index > 0:
        values[index - 1], values[index] = values[index], values[index - 1]
    return index


def linear_search_head(values: MutableSequence[int], key: int) -> int:
    """Find ``key``, move it to the front, and return its old index."""
    index = linear_search(values, key)
    if index > 0:
        values.insert(0, values.pop(index))
    return index