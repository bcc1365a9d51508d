import pytest

from shortpaths.cli import (
    check_2d_equality,
    check_equality,
    format_distances,
    format_matrix,
    main,
)
from shortpaths.graph import INF, load_graph

SAME = "Parallel and Sequential versions return the same result"
DIFFERENT = "Parallel and Sequential versions don't return the same result"


def test_check_equality_same():
    assert check_equality([0, 3, INF], [0, 3, INF]) == SAME


def test_check_equality_mismatch_reports_index():
    message = check_equality([0, 3, 5], [0, 4, 5])
    assert message.startswith(DIFFERENT)
    assert message.endswith("Mismatch at index:1")


def test_check_equality_different_sizes():
    message = check_equality([0, 1], [0])
    assert message.startswith("Vectors are of different sizes.")
    assert DIFFERENT in message


def test_check_2d_equality_same():
    assert check_2d_equality([[0, INF], [2, 0]], [[0, INF], [2, 0]]) == SAME


def test_check_2d_equality_mismatch():
    message = check_2d_equality([[0, 1], [2, 0]], [[0, 1], [3, 0]])
    assert message.startswith("Mismatch found at row 1, column 0.")
    assert message.endswith(DIFFERENT)


def test_check_2d_equality_row_size():
    message = check_2d_equality([[0, 1], [2, 0]], [[0, 1], [2]])
    assert message.startswith("Row 1 has different sizes in the two 2D vectors.")


def test_check_2d_equality_outer_size():
    assert check_2d_equality([[0]], []).startswith("2D vectors are of different sizes.")


def test_format_distances():
    text = format_distances([0, 7, INF], 0)
    assert text.splitlines() == [
        "Shortest distances from source node 0:",
        "Node 0 -> 0",
        "Node 1 -> 7",
        "Node 2 -> INF",
    ]


def test_format_matrix():
    text = format_matrix([[0, INF], [3, 0]])
    assert text == (
        "Shortest distances between every pair of vertices:\n"
        "0\tINF\t\n"
        "3\t0\t\n"
    )


@pytest.mark.parametrize("argv", [[], ["B"], ["B", "5"], ["B", "5", "2", "x"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_non_numeric_nodes(capsys):
    assert main(["B", "many", "2"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_too_few_nodes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["B", "1", "2"]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_zero_threads(capsys):
    assert main(["B", "5", "0"]) == 1
    assert capsys.readouterr().err != ""


@pytest.mark.parametrize("algorithm", ["B", "F", "J", "D", "BD", "S"])
def test_main_algorithms_agree(algorithm, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([algorithm, "7", "2"]) == 0
    out = capsys.readouterr().out
    assert SAME in out
    assert DIFFERENT not in out
    assert out.count("Time Taken:") == 2
    assert len(load_graph(tmp_path / "graph.txt")) == 7


def test_main_unknown_algorithm_only_writes_graph(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["X", "4", "1"]) == 0
    assert capsys.readouterr().out == ""
    assert len(load_graph(tmp_path / "graph.txt")) == 4