import math

import pytest

from dsakit.cli import main
from dsakit.graphs import shortest_distances


def test_sort_prints_sorted_values(capsys):
    values = [5, -3, 9, 0, 2, 2]
    assert main(["sort", *map(str, values)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sorted elements: ")
    printed = [int(token) for token in out[len("Sorted elements: "):].split()]
    assert printed == sorted(values)


def test_binary_search_found(capsys):
    values = [1, 4, 7, 9, 12]
    assert main(["binary-search", "9", *map(str, values)]) == 0
    out = capsys.readouterr().out
    assert out == f"9 found at location {values.index(9) + 1}.\n"


def test_binary_search_not_found(capsys):
    main(["binary-search", "5", "1", "2", "3"])
    assert capsys.readouterr().out == "Not found! 5 isn't present in the list.\n"


def test_linear_search_reports_first_position(capsys):
    values = [8, 3, 3, 1]
    main(["linear-search", "3", *map(str, values)])
    out = capsys.readouterr().out
    assert out == f"3 is found in the array at position {values.index(3) + 1}\n"


def test_linear_search_missing(capsys):
    main(["linear-search", "42", "1", "2"])
    assert capsys.readouterr().out == "42 does not exist in the array\n"


@pytest.mark.parametrize("order", ["inorder", "preorder", "postorder"])
def test_bst_traversals_print_every_value(capsys, order):
    values = [50, 30, 70, 20, 40, 60, 80]
    main(["bst", "--order", order, *map(str, values)])
    lines = capsys.readouterr().out.splitlines()
    assert order in lines[0]
    printed = [int(token) for token in lines[1].split()]
    assert sorted(printed) == sorted(values)
    if order == "inorder":
        assert printed == sorted(values)
    elif order == "preorder":
        assert printed[0] == values[0]
    else:
        assert printed[-1] == values[0]


def test_shortest_paths_matches_library(capsys):
    tokens = ["0", "4", "inf", "inf", "0", "1", "2", "inf", "0"]
    main(["shortest-paths", "3", *tokens])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Shortest distances")
    printed = [
        [math.inf if cell == "inf" else int(cell) for cell in line.split("\t") if cell]
        for line in lines[1:]
    ]
    matrix = [
        [0, 4, math.inf],
        [math.inf, 0, 1],
        [2, math.inf, 0],
    ]
    assert printed == shortest_distances(matrix)


def test_shortest_paths_rejects_wrong_count(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["shortest-paths", "2", "0", "1", "1"])
    assert excinfo.value.code == 2


def test_missing_command_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2