"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass
class _Node:
    value: Any
    prev: _Node | None = field(default=None, repr=False)
    next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with 1-based positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_location(self, location: int) -> None:
        if not 1 <= location <= self._size:
            raise IndexError(
                f"invalid location {location}; list has {self._size} nodes"
            )

    def _node_at(self, location: int) -> _Node:
        node = self._head
        for _ in range(location - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at_begin(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_after(self, location: int, value: Any) -> None:
        """Insert ``value`` after the node at 1-based ``location``.

        Raises IndexError when ``location`` is outside ``1..len(self)``.
        """
        self._check_location(location)
        anchor = self._node_at(location)
        node = _Node(value, prev=anchor, next=anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def delete_at(self, location: int) -> Any:
        """Remove the node at 1-based ``location`` and return its value.

        Raises IndexError when ``location`` is outside ``1..len(self)``.
        """
        self._check_location(location)
        node = self._node_at(location)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value