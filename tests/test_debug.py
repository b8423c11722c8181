import inspect
import io

import pytest

from cpkit.debug import (
    INDENT,
    dbg,
    dbg_graph,
    dbg_line,
    dbg_row,
    dbg_segment_tree,
    format_graph,
    format_grid,
    format_segment_tree,
    format_value,
)


@pytest.fixture(autouse=True)
def _debug_enabled(monkeypatch):
    monkeypatch.delenv("ONLINE_JUDGE", raising=False)


def test_flat_list():
    assert format_value([1, 2, 3]) == "[1, 2, 3]"


def test_pair():
    assert format_value((1, 2)) == "{1, 2}"


def test_list_of_pairs():
    assert format_value([(1, 2), (3, 4)]) == "[" + format_value((1, 2)) + ", " + format_value((3, 4)) + "]"


def test_set_is_sorted():
    assert format_value({3, 1, 2}) == "{" + format_value([1, 2, 3])[1:-1] + "}"


def test_matrix_rows():
    matrix = [[1, 2], [3, 4]]
    lines = format_value(matrix).splitlines()
    assert lines == [
        "[",
        INDENT + "Row 0: " + format_value([1, 2]) + ",",
        INDENT + "Row 1: " + format_value([3, 4]),
        "]",
    ]


def test_mapping_lines():
    lines = format_value({"a": 1, "b": [1, 2]}).splitlines()
    assert lines[0] == "{"
    assert lines[1] == INDENT + "a: " + format_value(1) + ","
    assert lines[2] == INDENT + "b: " + format_value([1, 2])
    assert lines[-1] == "}"


def test_mapping_with_pair_key():
    lines = format_value({(1, 2): 5}).splitlines()
    assert lines[1] == INDENT + format_value((1, 2)) + ": 5"


def test_nested_indentation():
    lines = format_value({"k": [[1], [2]]}).splitlines()
    assert lines[1] == INDENT + "k: ["
    assert lines[2].startswith(INDENT * 2 + "Row 0: ")
    assert lines[-2] == INDENT + "]"
    assert lines[-1] == "}"


def test_format_grid_block():
    grid = [[1, 2, 3], [4, 5, 6]]
    lines = format_grid(grid, 2, 2).splitlines()
    assert len(lines) == 4
    assert lines[1] == INDENT + ", ".join(map(str, grid[0][:2]))
    assert lines[2] == INDENT + ", ".join(map(str, grid[1][:2]))


def test_format_grid_too_small():
    with pytest.raises(ValueError):
        format_grid([[1]], 2, 1)


def test_format_graph():
    lines = format_graph([[1, 2], [0], []]).splitlines()
    assert lines[0] == "{"
    assert lines[1] == INDENT + "Node 0: " + format_value([1, 2]) + ","
    assert lines[2] == INDENT + "Node 1: " + format_value([0]) + ","
    assert lines[3] == INDENT + "Node 2: " + format_value([])
    assert lines[4] == "}"


def test_format_segment_tree():
    tree = [0, 6, 3, 3]
    lines = format_segment_tree(tree).splitlines()
    assert len(lines) == len(tree) + 2
    assert lines[3] == INDENT + f"Index 2: {tree[2]},"
    assert lines[4] == INDENT + f"Index 3: {tree[3]}"


def test_dbg_explicit_line():
    out = io.StringIO()
    dbg("x", 5, line=7, stream=out)
    assert out.getvalue() == "DBG[7]: x = 5\n"


def test_dbg_reports_caller_line():
    out = io.StringIO()
    expected = inspect.currentframe().f_lineno + 1
    dbg("v", 1, stream=out)
    assert out.getvalue().startswith(f"DBG[{expected}]: v = ")


def test_dbg_row():
    out = io.StringIO()
    grid = [[1, 2], [3, 4]]
    dbg_row("grid", grid, line=3, stream=out)
    assert out.getvalue() == "DBG[3]: grid =\n" + format_value(grid) + "\n"


def test_dbg_graph_and_tree():
    out = io.StringIO()
    dbg_graph("g", [[1], [0]], line=4, stream=out)
    dbg_segment_tree("t", [0, 1], line=5, stream=out)
    assert out.getvalue() == (
        "DBG[4]: g = " + format_graph([[1], [0]]) + "\n"
        "DBG[5]: t = " + format_segment_tree([0, 1]) + "\n"
    )


def test_dbg_line():
    out = io.StringIO()
    dbg_line(out)
    assert out.getvalue() == "-" * 10 + "\n"


def test_online_judge_silences_output(monkeypatch):
    monkeypatch.setenv("ONLINE_JUDGE", "1")
    out = io.StringIO()
    dbg("x", 1, stream=out)
    dbg_line(out)
    assert out.getvalue() == ""