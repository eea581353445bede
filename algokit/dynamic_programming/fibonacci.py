"""Fibonacci-style linear recurrence."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from algokit.core.exceptions import InvalidArgumentError
from algokit.core.types import Addable

A = TypeVar("A", bound=Addable)


@overload
def fibonacci(n: int) -> int: ...


@overload
def fibonacci(n: int, first: A, second: A) -> A: ...


def fibonacci(n: int, first: Any = 0, second: Any = 1) -> Any:
    """Return the n-th term of ``v[i] = v[i-1] + v[i-2]``.

    ``v[0]`` is first and ``v[1]`` is second, so the defaults give the
    Fibonacci numbers. Any values supporting ``+`` work (floats, strings,
    matrices). Iterative: O(n) additions, O(1) space.

    The sum is always taken as ``v[i-2] + v[i-1]``; results for
    non-commutative additions depend on that order.

    Raises:
        InvalidArgumentError: If n is negative.
    """
    if n < 0:
        raise InvalidArgumentError(f"n must be non-negative, got {n}")

    previous, current = first, second
    if n == 0:
        return previous

    for _ in range(n - 1):
        previous, current = current, previous + current

    return current
