"""A singly linked list of integers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list that grows by appending at the tail."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add(self, data: int) -> None:
        """Append ``data`` at the end of the list."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def display(self, file: TextIO | None = None) -> None:
        """Write the items, each followed by a space, then a newline."""
        out = sys.stdout if file is None else file
        out.write("".join(f"{value} " for value in self) + "\n")

    def sum(self) -> int:
        """Return the sum of the items."""
        return sum(self)