"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["BinarySearchTree"]


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; equal values are placed in the left subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: Any) -> None:
        """Add ``value`` as a new leaf."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def inorder(self) -> Iterator[Any]:
        """Yield values in left, node, right order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield values in node, left, right order."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values in left, right, node order."""
        stack: list[tuple[_Node, bool]] = (
            [(self._root, False)] if self._root is not None else []
        )
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def smallest(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def largest(self) -> Any:
        """Return the largest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; return whether one was found.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: _Node | None = None
        side = "left"
        while True:
            node = self._child(parent, side)
            while node is not None and node.value != value:
                parent = node
                side = "left" if value < node.value else "right"
                node = self._child(parent, side)
            if node is None:
                return False
            if node.left is None:
                self._attach(parent, side, node.right)
                return True
            if node.right is None:
                self._attach(parent, side, node.left)
                return True
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            parent, side, value = node, "right", successor.value

    def _child(self, parent: _Node | None, side: str) -> _Node | None:
        if parent is None:
            return self._root
        return getattr(parent, side)

    def _attach(self, parent: _Node | None, side: str, node: _Node | None) -> None:
        if parent is None:
            self._root = node
        else:
            setattr(parent, side, node)