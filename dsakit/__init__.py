"""Sorting, searching, a binary search tree, linked lists, list splitting and graph algorithms."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "bst",
    "cli",
    "doubly_linked_list",
    "graphs",
    "linked_list",
    "list_menu",
    "searching",
    "sorting",
    "splitting",
]