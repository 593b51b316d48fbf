"""Interactive menu for building a linked list and deleting nodes by key."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from dsakit.linked_list import SinglyLinkedList

__all__ = ["run", "main"]

MENU = (
    "Menu to delete all nodes containing a given number:\n"
    "1.Create Single Linked List\n"
    "2.Display Linked List\n"
    "3.Delete all nodes containing a given number\n"
    "4.Exit\n"
    "Enter your choice:"
)
EMPTY_TEXT = "List is empty.\n"
INVALID_TEXT = "Invalid choice\n\n"

CREATE, DISPLAY, DELETE, EXIT = 1, 2, 3, 4
QUIT_CHOICE = -1
EXIT_STATUS = 1


class _EndOfInput(Exception):
    """Raised internally when the input runs out."""


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _reader(lines: Iterable[str]) -> Callable[[], int]:
    tokens = _tokens(lines)

    def read_int() -> int:
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return int(token)
        except ValueError as exc:
            raise ValueError(f"expected an integer, got {token!r}") from exc

    return read_int


def _create(count: int, read_int: Callable[[], int], out: TextIO) -> SinglyLinkedList:
    # The first node is always read, whatever count was given.
    out.write("Enter data of node 1: ")
    items = SinglyLinkedList([read_int()])
    for position in range(2, count + 1):
        out.write(f"Enter data of node {position}: ")
        items.append(read_int())
    out.write("\n\n")
    return items


def _display(items: SinglyLinkedList, out: TextIO) -> None:
    if not items:
        out.write(EMPTY_TEXT)
        return
    out.write("".join(f"{value}--> " for value in items))
    out.write("\n\n")


def run(lines: Iterable[str], out: TextIO) -> int:
    """Run the menu over whitespace-separated integers from ``lines``.

    Returns the exit status: 1 when the Exit option is chosen, 0 when the
    choice -1 ends the loop or the input runs out. Raises ValueError on a
    token that is not an integer.
    """
    read_int = _reader(lines)
    items = SinglyLinkedList()
    try:
        while True:
            out.write(MENU)
            choice = read_int()
            if choice == CREATE:
                out.write("Enter number of node to create: ")
                items = _create(read_int(), read_int, out)
            elif choice == DISPLAY:
                _display(items, out)
            elif choice == DELETE:
                out.write("\nEnter element to delete with key: ")
                key = read_int()
                deleted = items.delete_all(key)
                out.write(f"{deleted} elements deleted with key {key}.\n\n")
            elif choice == EXIT:
                return EXIT_STATUS
            else:
                out.write(INVALID_TEXT)
            if choice == QUIT_CHOICE:
                return 0
    except _EndOfInput:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsakit-list-menu",
        description="Build a linked list and delete all nodes holding a key.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())