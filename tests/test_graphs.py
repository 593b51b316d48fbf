import math

import pytest

from dsakit.graphs import (
    adjacency_matrix,
    breadth_first,
    depth_first,
    path_matrix,
    path_matrix_stages,
    shortest_distances,
)


def _chain(size):
    return adjacency_matrix(size, [(i, i + 1) for i in range(size - 1)])


def test_adjacency_matrix_directed_marks_only_given_edges():
    edges = [(0, 1), (1, 2), (2, 0)]
    matrix = adjacency_matrix(3, edges)
    marked = {(i, j) for i, row in enumerate(matrix) for j, v in enumerate(row) if v}
    assert marked == set(edges)


def test_adjacency_matrix_undirected_is_symmetric():
    matrix = adjacency_matrix(4, [(0, 1), (2, 3), (1, 3)], directed=False)
    assert all(matrix[i][j] == matrix[j][i] for i in range(4) for j in range(4))
    assert sum(map(sum, matrix)) == 6


@pytest.mark.parametrize("edge", [(3, 0), (0, 3), (-1, 1), (1, -2)])
def test_adjacency_matrix_rejects_invalid_edge(edge):
    with pytest.raises(ValueError):
        adjacency_matrix(3, [edge])


def test_adjacency_matrix_rejects_too_many_edges():
    with pytest.raises(ValueError):
        adjacency_matrix(2, [(0, 1), (1, 0)], directed=False)
    assert adjacency_matrix(2, [(0, 1), (1, 0)]) == [[0, 1], [1, 0]]


def test_breadth_first_on_chain_follows_chain():
    assert breadth_first(_chain(5), 0) == [0, 1, 2, 3, 4]


def test_breadth_and_depth_first_differ_on_branching_graph():
    matrix = adjacency_matrix(4, [(0, 1), (0, 2), (1, 3)])
    assert breadth_first(matrix, 0) == [0, 1, 2, 3]
    assert depth_first(matrix, 0) == [0, 1, 3, 2]


@pytest.mark.parametrize("search", [breadth_first, depth_first])
def test_search_visits_only_reachable_vertices_once(search):
    matrix = adjacency_matrix(6, [(2, 3), (3, 4), (4, 2), (0, 1)])
    order = search(matrix, 2)
    assert order[0] == 2
    assert len(order) == len(set(order))
    assert set(order) == {2, 3, 4}


@pytest.mark.parametrize("search", [breadth_first, depth_first])
def test_search_rejects_bad_start(search):
    with pytest.raises(IndexError):
        search(_chain(3), 3)


@pytest.mark.parametrize("search", [breadth_first, depth_first, shortest_distances, path_matrix])
def test_non_square_matrix_rejected(search):
    with pytest.raises(ValueError):
        if search in (breadth_first, depth_first):
            search([[0, 1]], 0)
        else:
            search([[0, 1]])


def test_shortest_distances_invariants():
    inf = math.inf
    matrix = [
        [0, 4, inf, 10],
        [inf, 0, 3, inf],
        [inf, inf, 0, 2],
        [1, inf, inf, 0],
    ]
    dist = shortest_distances(matrix)
    size = len(matrix)
    assert all(dist[i][i] == 0 for i in range(size))
    assert all(dist[i][j] <= matrix[i][j] for i in range(size) for j in range(size))
    for i in range(size):
        for j in range(size):
            for k in range(size):
                assert dist[i][j] <= dist[i][k] + dist[k][j]
    assert matrix[0][3] == 10


def test_shortest_distances_keeps_direct_when_shortest():
    matrix = [[0, 1], [1, 0]]
    assert shortest_distances(matrix) == matrix


def test_path_matrix_of_chain_is_upper_triangle():
    size = 4
    paths = path_matrix(_chain(size))
    for i in range(size):
        for j in range(size):
            assert paths[i][j] == (1 if j > i else 0)


def test_path_matrix_is_transitive_and_contains_edges():
    matrix = adjacency_matrix(5, [(0, 1), (1, 2), (2, 0), (3, 4)])
    paths = path_matrix(matrix)
    size = len(matrix)
    for i in range(size):
        for j in range(size):
            assert paths[i][j] >= matrix[i][j]
            for k in range(size):
                if paths[i][k] and paths[k][j]:
                    assert paths[i][j] == 1


def test_path_matrix_stages_count_and_last_stage():
    matrix = _chain(4)
    stages = list(path_matrix_stages(matrix))
    assert len(stages) == 4
    assert stages[-1] == path_matrix(matrix)
    for earlier, later in zip(stages, stages[1:]):
        assert all(a <= b for ra, rb in zip(earlier, later) for a, b in zip(ra, rb))


def test_path_matrix_of_empty_graph():
    assert path_matrix([]) == []