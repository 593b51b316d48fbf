"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["SinglyLinkedList"]

EMPTY_TEXT = "List is empty."
SEPARATOR = "-->"


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list with 1-based positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, location: int) -> _Node:
        for position, node in enumerate(self._nodes(), start=1):
            if position == location:
                return node
        raise IndexError(f"invalid location {location}")

    def _check_location(self, location: int) -> None:
        if not 1 <= location <= self._size:
            raise IndexError(
                f"invalid location {location}; list has {self._size} nodes"
            )

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at_begin(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def add_after(self, location: int, value: Any) -> None:
        """Insert ``value`` after the node at 1-based ``location``.

        Raises IndexError when ``location`` is outside ``1..len(self)``.
        """
        self._check_location(location)
        anchor = self._node_at(location)
        node = _Node(value, anchor.next)
        anchor.next = node
        if anchor is self._tail:
            self._tail = node
        self._size += 1

    def delete_at(self, location: int) -> Any:
        """Remove the node at 1-based ``location`` and return its value.

        Raises IndexError when ``location`` is outside ``1..len(self)``.
        """
        self._check_location(location)
        if location == 1:
            removed = self._head
            assert removed is not None
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(location - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.value

    def delete_all(self, key: Any) -> int:
        """Remove every node whose value equals ``key``; return how many."""
        deleted = 0
        while self._head is not None and self._head.value == key:
            self._head = self._head.next
            deleted += 1
        previous = self._head
        current = previous.next if previous is not None else None
        while current is not None:
            if current.value == key:
                previous.next = current.next
                deleted += 1
            else:
                previous = current
            current = current.next
        self._tail = previous
        self._size -= deleted
        return deleted

    def sort(self) -> None:
        """Sort the values in place in ascending order."""
        for first in self._nodes():
            later = first.next
            while later is not None:
                if first.value > later.value:
                    first.value, later.value = later.value, first.value
                later = later.next

    def render(self) -> str:
        """Return the list as text such as ``1-->2-->``."""
        if self._head is None:
            return EMPTY_TEXT
        return "".join(f"{value}{SEPARATOR}" for value in self)