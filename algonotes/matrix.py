"""Square matrices with compact storage, and a sparse matrix of triples."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


class Matrix:
    """A square matrix of integers addressed with 1-based row and column numbers."""

    def __init__(self, dimension: int) -> None:
        if dimension < 0:
            raise ValueError("matrix dimension must not be negative")
        self.dimension = dimension
        self._data = [0] * self._capacity()

    def _capacity(self) -> int:
        return self.dimension * self.dimension

    def _check(self, i: int, j: int) -> None:
        if not (1 <= i <= self.dimension and 1 <= j <= self.dimension):
            raise IndexError(f"position ({i}, {j}) is outside a {self.dimension}x{self.dimension} matrix")

    def get(self, i: int, j: int) -> int:
        """Return the entry at row ``i``, column ``j``."""
        self._check(i, j)
        return self._data[(i - 1) * self.dimension + j - 1]

    def set(self, i: int, j: int, x: int) -> None:
        """Store ``x`` at row ``i``, column ``j``."""
        self._check(i, j)
        self._data[(i - 1) * self.dimension + j - 1] = x

    def __str__(self) -> str:
        size = self.dimension
        return "".join(
            "".join(f"{self.get(i, j)} " for j in range(1, size + 1)) + "\n"
            for i in range(1, size + 1)
        )

    def display(self, file: TextIO | None = None) -> None:
        """Write the matrix row by row, each entry followed by a space."""
        (sys.stdout if file is None else file).write(str(self))


class DiagonalMatrix(Matrix):
    """A matrix that stores only its diagonal; other entries are zero."""

    def __init__(self, dimension: int) -> None:
        super().__init__(dimension)

    def _capacity(self) -> int:
        return self.dimension

    def get(self, i: int, j: int) -> int:
        """Return the entry, which is zero off the diagonal."""
        self._check(i, j)
        return self._data[i - 1] if i == j else 0

    def set(self, i: int, j: int, x: int) -> None:
        """Store ``x`` on the diagonal; writes elsewhere are ignored."""
        self._check(i, j)
        if i == j:
            self._data[i - 1] = x


class LowerTriangularMatrix(Matrix):
    """A matrix that stores only the entries on and below its diagonal, row by row."""

    def __init__(self, dimension: int) -> None:
        super().__init__(dimension)

    def _capacity(self) -> int:
        return self.dimension * (self.dimension + 1) // 2

    def get(self, i: int, j: int) -> int:
        """Return the entry, which is zero above the diagonal."""
        self._check(i, j)
        if i >= j:
            return self._data[i * (i - 1) // 2 + j - 1]
        return 0

    def set(self, i: int, j: int, x: int) -> None:
        """Store ``x`` on or below the diagonal; writes above it are ignored."""
        self._check(i, j)
        if i >= j:
            self._data[i * (i - 1) // 2 + j - 1] = x


@dataclass(frozen=True)
class SparseElement:
    """One non-zero entry of a sparse matrix, with 0-based row and column."""

    i: int
    j: int
    x: int


@dataclass
class SparseMatrix:
    """An ``m`` by ``n`` matrix kept as a list of entries sorted by row and column."""

    m: int
    n: int
    num: int
    elements: list[SparseElement] = field(default_factory=list)

    def read(self, text: str) -> SparseMatrix:
        """Fill the entries from ``num`` whitespace-separated "row column value" triples."""
        tokens = text.split()
        needed = 3 * self.num
        if len(tokens) < needed:
            raise ValueError(f"expected {self.num} triples, got {len(tokens)} numbers")
        numbers = [int(token) for token in tokens[:needed]]
        self.elements = [
            SparseElement(*numbers[k : k + 3]) for k in range(0, needed, 3)
        ]
        return self

    def __add__(self, other: SparseMatrix) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if (self.m, self.n) != (other.m, other.n):
            return SparseMatrix(0, 0, 0)
        result: list[SparseElement] = []
        mine, theirs = self.elements, other.elements
        a = b = 0
        while a < len(mine) and b < len(theirs):
            left, right = mine[a], theirs[b]
            if (left.i, left.j) < (right.i, right.j):
                result.append(left)
                a += 1
            elif (left.i, left.j) > (right.i, right.j):
                result.append(right)
                b += 1
            else:
                result.append(SparseElement(left.i, left.j, left.x + right.x))
                a += 1
                b += 1
        result.extend(mine[a:])
        result.extend(theirs[b:])
        return SparseMatrix(self.m, self.n, len(result), result)

    def __str__(self) -> str:
        cells: dict[tuple[int, int], int] = {}
        for element in self.elements:
            cells.setdefault((element.i, element.j), element.x)
        return "".join(
            "".join(f"{cells.get((i, j), 0)} " for j in range(self.n)) + "\n"
            for i in range(self.m)
        )