"""Recursion shapes, yielding the values each one visits in order."""

from __future__ import annotations

from collections.abc import Iterator


def head_recursion(n: int) -> Iterator[int]:
    """Recurse first, then yield ``n``: values come out in ascending order."""
    if n > 0:
        yield from head_recursion(n - 1)
        yield n


def tail_recursion(n: int) -> Iterator[int]:
    """Yield ``n``, then recurse: values come out in descending order."""
    if n > 0:
        yield n
        yield from tail_recursion(n - 1)


def tree_recursion(n: int) -> Iterator[int]:
    """Yield ``n`` and recurse twice on ``n - 1``."""
    if n > 0:
        yield n
        yield from tree_recursion(n - 1)
        yield from tree_recursion(n - 1)


def _second(n: int) -> Iterator[int]:
    if n > 1:
        yield n
        yield from _first(n // 2)


def _first(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _second(n - 1)


def indirect_recursion(n: int) -> Iterator[int]:
    """Alternate between subtracting one and halving, yielding each value visited."""
    yield from _first(n)