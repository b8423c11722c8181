"""Readable dumps of values and containers, written to stderr for debugging.

Output is suppressed when the ``ONLINE_JUDGE`` environment variable is set.
"""

from __future__ import annotations

import inspect
import os
import sys
from collections.abc import Mapping, Sequence, Set
from typing import Any, TextIO

INDENT = "    "
SEPARATOR_WIDTH = 10


def _pad(indent: int) -> str:
    return INDENT * indent


def _ordered(items) -> list:
    try:
        return sorted(items)
    except TypeError:
        return list(items)


def _is_matrix(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(row, list) for row in value)


def _format_mapping(mapping: Mapping, indent: int) -> str:
    items = list(mapping.items())
    lines = ["{"]
    for pos, (key, val) in enumerate(items):
        key_text = format_value(key, indent + 1) if isinstance(key, tuple) else str(key)
        sep = "," if pos < len(items) - 1 else ""
        lines.append(f"{_pad(indent + 1)}{key_text}: {format_value(val, indent + 1)}{sep}")
    lines.append(_pad(indent) + "}")
    return "\n".join(lines)


def _format_matrix(matrix: list, indent: int) -> str:
    lines = ["["]
    for pos, row in enumerate(matrix):
        sep = "," if pos < len(matrix) - 1 else ""
        lines.append(f"{_pad(indent + 1)}Row {pos}: {format_value(row, indent + 1)}{sep}")
    lines.append(_pad(indent) + "]")
    return "\n".join(lines)


def format_value(value: Any, indent: int = 0) -> str:
    """Render a value; containers are rendered recursively."""
    if isinstance(value, (str, bytes, bytearray)):
        return str(value) if not isinstance(value, str) else value
    if isinstance(value, Mapping):
        return _format_mapping(value, indent)
    if isinstance(value, tuple):
        return "{" + ", ".join(format_value(item, indent) for item in value) + "}"
    if isinstance(value, Set):
        return "{" + ", ".join(format_value(item, indent) for item in _ordered(value)) + "}"
    if _is_matrix(value):
        return _format_matrix(value, indent)
    if isinstance(value, Sequence):
        return "[" + ", ".join(format_value(item, indent) for item in value) + "]"
    return str(value)


def format_grid(grid: Sequence[Sequence[Any]], rows: int, cols: int, indent: int = 0) -> str:
    """Render the top-left ``rows`` x ``cols`` block of a two-dimensional grid."""
    if len(grid) < rows or any(len(row) < cols for row in grid[:rows]):
        raise ValueError(f"grid is smaller than {rows}x{cols}")
    lines = ["["]
    for row in grid[:rows]:
        cells = ", ".join(format_value(cell, indent + 1) for cell in row[:cols])
        lines.append(_pad(indent + 1) + cells)
    lines.append(_pad(indent) + "]")
    return "\n".join(lines)


def format_graph(adjacency: Sequence[Sequence[Any]], indent: int = 0) -> str:
    """Render an adjacency list, one node per line."""
    lines = ["{"]
    for node, neighbours in enumerate(adjacency):
        items = ", ".join(format_value(item, indent + 1) for item in neighbours)
        sep = "," if node < len(adjacency) - 1 else ""
        lines.append(f"{_pad(indent + 1)}Node {node}: [{items}]{sep}")
    lines.append(_pad(indent) + "}")
    return "\n".join(lines)


def format_segment_tree(tree: Sequence[Any], indent: int = 0) -> str:
    """Render an array-backed tree, one index per line."""
    lines = ["["]
    for index, value in enumerate(tree):
        sep = "," if index < len(tree) - 1 else ""
        lines.append(f"{_pad(indent + 1)}Index {index}: {value}{sep}")
    lines.append(_pad(indent) + "]")
    return "\n".join(lines)


def _enabled() -> bool:
    return "ONLINE_JUDGE" not in os.environ


def _caller_line(line: int | None) -> int:
    if line is not None:
        return line
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    return caller.f_lineno if caller is not None else 0


def _write(text: str, stream: TextIO | None) -> None:
    (sys.stderr if stream is None else stream).write(text)


def dbg(name: str, value: Any, line: int | None = None, stream: TextIO | None = None) -> None:
    """Write ``DBG[line]: name = value`` on one header line."""
    if not _enabled():
        return
    _write(f"DBG[{_caller_line(line)}]: {name} = {format_value(value)}\n", stream)


def dbg_row(name: str, value: Any, line: int | None = None, stream: TextIO | None = None) -> None:
    """Like :func:`dbg`, but the value starts on its own line."""
    if not _enabled():
        return
    _write(f"DBG[{_caller_line(line)}]: {name} =\n{format_value(value)}\n", stream)


def dbg_graph(name: str, adjacency, line: int | None = None, stream: TextIO | None = None) -> None:
    """Write an adjacency list under a debug header."""
    if not _enabled():
        return
    _write(f"DBG[{_caller_line(line)}]: {name} = {format_graph(adjacency)}\n", stream)


def dbg_segment_tree(name: str, tree, line: int | None = None, stream: TextIO | None = None) -> None:
    """Write an array-backed tree under a debug header."""
    if not _enabled():
        return
    _write(f"DBG[{_caller_line(line)}]: {name} = {format_segment_tree(tree)}\n", stream)


def dbg_line(stream: TextIO | None = None) -> None:
    """Write a horizontal separator."""
    if not _enabled():
        return
    _write("-" * SEPARATOR_WIDTH + "\n", stream)