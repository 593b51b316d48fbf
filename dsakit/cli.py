"""Command line front end for the sorting, searching, tree and graph tools."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from dsakit.bst import BinarySearchTree
from dsakit.graphs import shortest_distances
from dsakit.searching import binary_search, linear_search
from dsakit.sorting import bubble_sort

__all__ = ["main"]


def _distance(token: str) -> float | int:
    if token.lower() in {"inf", "infinity"}:
        return math.inf
    try:
        return int(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a distance: {token!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description="Sort, search, build trees and compute shortest paths.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="bubble sort integers")
    sort.add_argument("values", nargs="*", type=int)

    binary = commands.add_parser("binary-search", help="search ascending integers")
    binary.add_argument("target", type=int)
    binary.add_argument("values", nargs="*", type=int)

    linear = commands.add_parser("linear-search", help="search integers in order")
    linear.add_argument("target", type=int)
    linear.add_argument("values", nargs="*", type=int)

    tree = commands.add_parser("bst", help="insert integers into a search tree")
    tree.add_argument(
        "--order",
        choices=("inorder", "preorder", "postorder"),
        default="inorder",
    )
    tree.add_argument("values", nargs="*", type=int)

    paths = commands.add_parser(
        "shortest-paths", help="all-pairs shortest distances of an n x n matrix"
    )
    paths.add_argument("size", type=int)
    paths.add_argument("distances", nargs="*", type=_distance)
    return parser


def _format_distance(value: float | int) -> str:
    return "inf" if value == math.inf else str(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and print its result; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    out = sys.stdout

    if args.command == "sort":
        out.write("Sorted elements: ")
        out.write("".join(f" {value}" for value in bubble_sort(args.values)))
        out.write("\n")
    elif args.command == "binary-search":
        index = binary_search(args.values, args.target)
        if index is None:
            out.write(f"Not found! {args.target} isn't present in the list.\n")
        else:
            out.write(f"{args.target} found at location {index + 1}.\n")
    elif args.command == "linear-search":
        index = linear_search(args.values, args.target)
        if index is None:
            out.write(f"{args.target} does not exist in the array\n")
        else:
            out.write(f"{args.target} is found in the array at position {index + 1}\n")
    elif args.command == "bst":
        tree = BinarySearchTree()
        for value in args.values:
            tree.insert(value)
        walk = getattr(tree, args.order)
        out.write(f"The elements of the tree in {args.order} traversal are:\n")
        out.write("".join(f"{value} " for value in walk()))
        out.write("\n")
    else:
        size = args.size
        if size < 0 or len(args.distances) != size * size:
            parser.error(f"shortest-paths needs exactly {max(size, 0) ** 2} distances")
        matrix = [args.distances[row * size:(row + 1) * size] for row in range(size)]
        out.write("Shortest distances between every pair of vertices:\n")
        for row in shortest_distances(matrix):
            out.write("".join(f"{_format_distance(value)}\t" for value in row))
            out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())