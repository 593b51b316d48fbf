"""Distribute the values of a sequence over several new lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["split_into_four", "split_by_parity"]

PARTS = 4


def split_into_four(values: Iterable[Any]) -> tuple[list[Any], list[Any], list[Any], list[Any]]:
    """Deal ``values`` in turn onto four lists, starting with the first."""
    parts: tuple[list[Any], ...] = tuple([] for _ in range(PARTS))
    for position, value in enumerate(values):
        parts[position % PARTS].append(value)
    first, second, third, fourth = parts
    return first, second, third, fourth


def split_by_parity(values: Iterable[Any], count: int) -> tuple[list[Any], list[Any]]:
    """Split ``values`` into an odd list and an even list according to ``count``.

    Values are taken in pairs. When ``count`` is odd the first value of each
    pair goes to the odd list; when it is even the second value of each pair
    goes to the even list. The other list stays empty.
    """
    odd: list[Any] = []
    even: list[Any] = []
    count_is_odd = count % 2 != 0
    for position, value in enumerate(values):
        if position % 2 == 0:
            if count_is_odd:
                odd.append(value)
        elif not count_is_odd:
            even.append(value)
    return odd, even