"""Small string algorithms: anagrams, palindromes, reversal, duplicates, permutations."""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Iterator

_BITMAP_WIDTH = 64


def is_anagram(first: str | None, second: str | None) -> bool:
    """Return True when the two strings hold the same letters the same number of times."""
    if first is None or second is None:
        return False
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def is_palindrome(text: str | None) -> bool:
    """Return True when ``text`` reads the same forwards and backwards."""
    if text is None:
        return False
    return text == text[::-1]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def duplicates_in_string(text: str) -> int:
    """Return a bitmap with bit ``c - 'a'`` set for every character seen more than once.

    Characters are expected in the range starting at ``'a'`` that fits a 64-bit map.
    """
    seen = 0
    duplicates = 0
    for ch in text:
        shift = ord(ch) - ord("a")
        if not 0 <= shift < _BITMAP_WIDTH:
            raise ValueError(f"character {ch!r} cannot be placed in the bitmap")
        bit = 1 << shift
        if seen & bit:
            duplicates |= bit
        else:
            seen |= bit
    return duplicates


def string_permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``, picking positions in order."""
    for arrangement in itertools.permutations(text):
        yield "".join(arrangement)


def string_permutations_swap(text: str) -> Iterator[str]:
    """Yield the arrangements of ``text`` produced by swapping characters in place."""
    chars = list(text)
    high = len(chars) - 1

    def _permute(low: int) -> Iterator[str]:
        if low == high:
            yield "".join(chars)
            return
        for i in range(low, high + 1):
            chars[low], chars[i] = chars[i], chars[low]
            yield from _permute(low + 1)
            chars[low], chars[i] = chars[i], chars[low]

    yield from _permute(0)