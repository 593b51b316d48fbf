"""Graph algorithms over adjacency and distance matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

__all__ = [
    "adjacency_matrix",
    "breadth_first",
    "depth_first",
    "shortest_distances",
    "path_matrix_stages",
    "path_matrix",
]


def _order(matrix: Sequence[Sequence[Any]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} is outside 0..{size - 1}")


def adjacency_matrix(
    vertex_count: int,
    edges: Iterable[tuple[int, int]],
    directed: bool = True,
) -> list[list[int]]:
    """Build a 0/1 adjacency matrix from 0-based ``(origin, destination)`` edges.

    Raises ValueError for an edge naming a vertex outside the graph, and
    when more edges are given than the graph can hold: n*(n-1) when
    directed, half that when undirected.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    max_edges = vertex_count * (vertex_count - 1)
    if not directed:
        max_edges //= 2
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    accepted = 0
    for origin, destination in edges:
        if not (0 <= origin < vertex_count and 0 <= destination < vertex_count):
            raise ValueError(f"invalid edge ({origin}, {destination})")
        accepted += 1
        if accepted > max_edges:
            raise ValueError(f"too many edges; at most {max_edges} allowed")
        matrix[origin][destination] = 1
        if not directed:
            matrix[destination][origin] = 1
    return matrix


def _neighbours(matrix: Sequence[Sequence[Any]], vertex: int) -> Iterator[int]:
    return (index for index, edge in enumerate(matrix[vertex]) if edge)


def breadth_first(matrix: Sequence[Sequence[Any]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    size = _order(matrix)
    _check_vertex(start, size)
    seen = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in _neighbours(matrix, vertex):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return order


def depth_first(matrix: Sequence[Sequence[Any]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order.

    Neighbours are explored in ascending vertex order.
    """
    size = _order(matrix)
    _check_vertex(start, size)
    visited = [False] * size
    order: list[int] = []
    pending: list[Iterator[int]] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        order.append(vertex)
        pending.append(_neighbours(matrix, vertex))

    visit(start)
    while pending:
        for neighbour in pending[-1]:
            if not visited[neighbour]:
                visit(neighbour)
                break
        else:
            pending.pop()
    return order


def shortest_distances(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return all-pairs shortest distances from a matrix of direct distances.

    Missing edges should be given as a large number or ``math.inf``.
    """
    _order(matrix)
    dist = [list(row) for row in matrix]
    for k, row_k in enumerate(dist):
        for row in dist:
            via = row[k]
            for j, onward in enumerate(row_k):
                if via + onward < row[j]:
                    row[j] = via + onward
    return dist


def path_matrix_stages(matrix: Sequence[Sequence[Any]]) -> Iterator[list[list[int]]]:
    """Yield the path matrix after each intermediate vertex is allowed."""
    _order(matrix)
    paths = [[1 if edge else 0 for edge in row] for row in matrix]
    for k, row_k in enumerate(paths):
        for row in paths:
            if row[k]:
                for j, reach in enumerate(row_k):
                    if reach:
                        row[j] = 1
        yield [list(row) for row in paths]


def path_matrix(matrix: Sequence[Sequence[Any]]) -> list[list[int]]:
    """Return the reachability (path) matrix of the graph."""
    result: list[list[int]] = []
    for stage in path_matrix_stages(matrix):
        result = stage
    return result