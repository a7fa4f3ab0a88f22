"""Polynomials as lists of terms in descending order of exponent."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class PolynomialTerm:
    """One term ``coeff * x^exp``."""

    coeff: int
    exp: int


class Polynomial:
    """A polynomial whose terms are kept in descending order of exponent."""

    def __init__(self, terms: Iterable[PolynomialTerm]) -> None:
        self.terms: tuple[PolynomialTerm, ...] = tuple(terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __repr__(self) -> str:
        return f"Polynomial({list(self.terms)!r})"

    def add(self, other: Polynomial) -> Polynomial:
        """Return the sum, merging terms and adding coefficients of equal exponents."""
        result: list[PolynomialTerm] = []
        mine, theirs = self.terms, other.terms
        a = b = 0
        while a < len(mine) and b < len(theirs):
            left, right = mine[a], theirs[b]
            if left.exp > right.exp:
                result.append(left)
                a += 1
            elif left.exp < right.exp:
                result.append(right)
                b += 1
            else:
                result.append(PolynomialTerm(left.coeff + right.coeff, left.exp))
                a += 1
                b += 1
        result.extend(mine[a:])
        result.extend(theirs[b:])
        return Polynomial(result)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __str__(self) -> str:
        parts: list[str] = []
        last = len(self.terms) - 1
        for index, term in enumerate(self.terms):
            if term.exp == 0:
                parts.append(str(term.coeff))
                continue
            parts.append(f"{term.coeff}x^{term.exp}")
            if index < last:
                parts.append(" + ")
        return "".join(parts)

    def display(self, file: TextIO | None = None) -> None:
        """Write the polynomial followed by a newline."""
        (sys.stdout if file is None else file).write(f"{self}\n")