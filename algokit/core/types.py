"""Callable and value protocols shared by the algorithm families."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Protocol, TypeVar

T = TypeVar("T")
N = TypeVar("N", bound=Hashable)
A = TypeVar("A", bound="Addable")

Less = Callable[[T, T], bool]
Predicate = Callable[[T], bool]
Visitor = Callable[[N], object]


class Addable(Protocol):
    """A value whose sum with another value of its type is again that type."""

    def __add__(self: A, other: A, /) -> A:
        ...
