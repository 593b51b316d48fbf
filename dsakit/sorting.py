"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    for last in range(len(items) - 2, -1, -1):
        for j in range(last + 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and items[i] > key:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    start, end = low, high
    while start < end:
        while start < high and items[start] <= pivot:
            start += 1
        while items[end] > pivot:
            end -= 1
        if start < end:
            items[start], items[end] = items[end], items[start]
    items[low], items[end] = items[end], items[low]
    return end


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            loc = _partition(items, low, high)
            pending.append((loc + 1, high))
            pending.append((low, loc - 1))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by settling the smallest remaining item at each position."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items