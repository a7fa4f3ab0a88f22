"""Classic numeric exercises: factorials, Fibonacci, powers, sums and more."""

from __future__ import annotations

import math
from functools import cache


def factorial_recursive(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    if n == 0:
        return 1
    return factorial_recursive(n - 1) * n


def factorial_iterative(n: int) -> int:
    """Return ``n!`` computed with a loop; negative input gives 1."""
    return math.prod(range(1, n + 1))


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number with a loop."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


@cache
def _fibonacci_cached(n: int) -> int:
    if n <= 1:
        return n
    return _fibonacci_cached(n - 2) + _fibonacci_cached(n - 1)


def fibonacci_memoized(n: int) -> int:
    """Return the ``n``-th Fibonacci number, remembering earlier results."""
    return _fibonacci_cached(n)


def fizz_buzz(n: int) -> str:
    """Return "Fizz", "Buzz", "FizzBuzz" or the number itself as text."""
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def power_recursive(n: int, p: int) -> int:
    """Return ``n`` to the power ``p`` using ``p`` multiplications."""
    if p < 0:
        raise ValueError("negative exponent")
    if p == 0:
        return 1
    return power_recursive(n, p - 1) * n


def power_optimized(n: int, p: int) -> int:
    """Return ``n`` to the power ``p`` by repeated squaring."""
    if p < 0:
        raise ValueError("negative exponent")
    if p == 0:
        return 1
    if p % 2 == 0:
        return power_optimized(n * n, p // 2)
    return n * power_optimized(n * n, p // 2)


def sum_of_n_recursive(n: int) -> int:
    """Return ``0 + 1 + ... + n`` recursively."""
    if n < 0:
        raise ValueError("sum of a negative count")
    if n == 0:
        return 0
    return sum_of_n_recursive(n - 1) + n


def sum_of_n_formula(n: int) -> int:
    """Return ``0 + 1 + ... + n`` from the closed formula."""
    return n * (n + 1) // 2


def sum_of_n_iterative(n: int) -> int:
    """Return ``0 + 1 + ... + n`` with a loop; negative input gives 0."""
    return sum(range(1, n + 1))


def ncr(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items from ``n``."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("need 0 <= r <= n")
    return math.factorial(n) // (math.factorial(r) * math.factorial(n - r))


def nested_recursion(n: int) -> int:
    """Evaluate f(n) = n - 10 if n > 100 else f(f(n + 11))."""
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n


def reverse_int(n: int) -> int:
    """Return the digits of ``n`` reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])