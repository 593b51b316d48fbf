"""Small helpers showing value transformation and swapping."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["add_to_each", "swap"]


def add_to_each(values: Iterable[int], amount: int = 5) -> list[int]:
    """Return a list with ``amount`` added to every value."""
    return [value + amount for value in values]


def swap(first: T, second: U) -> tuple[U, T]:
    """Return the two arguments in exchanged order."""
    return second, first