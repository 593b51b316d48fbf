"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "linear_search"]


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None."""
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        if values[middle] < target:
            first = middle + 1
        elif values[middle] == target:
            return middle
        else:
            last = middle - 1
    return None


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)