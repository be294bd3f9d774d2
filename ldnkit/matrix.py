"""Helpers for integer matrices stored as lists of rows."""

from __future__ import annotations

import os
from itertools import islice
from typing import IO, Iterator, List, Sequence, Tuple, Union

from ldnkit.arrays import bubble_sort
from ldnkit.errors import open_file

__all__ = [
    "read_matrix",
    "format_matrix",
    "load_matrix",
    "save_matrix",
    "bubble_sort_matrix",
]

Matrix = List[List[int]]
PathLike = Union[str, "os.PathLike[str]"]


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> List[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError(f"expected {count} elements, found {len(values)}")
    return values


def _check_dims(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix dimensions must not be negative, got {rows}x{cols}")


def _shape(matrix: Sequence[Sequence[int]]) -> Tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _read_rows(tokens: Iterator[str], rows: int, cols: int) -> Matrix:
    return [_read_ints(tokens, cols) for _ in range(rows)]


def read_matrix(stream: IO[str], rows: int, cols: int) -> Matrix:
    """Read ``rows`` x ``cols`` whitespace-separated integers, row by row."""
    _check_dims(rows, cols)
    return _read_rows(_tokens(stream), rows, cols)


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Return a row-by-row listing with each cell labelled by its position."""
    parts = ["Print the Matrix:\n"]
    for i, row in enumerate(matrix, start=1):
        parts.append(f"Row {i}\n")
        cells = "".join(f"{i}{j}: {value}\t" for j, value in enumerate(row, start=1))
        if cells:
            parts.append(cells + "\n")
    return "".join(parts)


def load_matrix(path: PathLike) -> Matrix:
    """Read a file holding the row and column counts followed by the elements."""
    with open_file(path, "r") as handle:
        tokens = _tokens(handle)
        header = list(islice(tokens, 2))
        if len(header) < 2:
            raise ValueError("matrix file lacks its dimensions")
        rows, cols = (int(token) for token in header)
        _check_dims(rows, cols)
        return _read_rows(tokens, rows, cols)


def save_matrix(matrix: Sequence[Sequence[int]], path: PathLike) -> None:
    """Write the dimensions on one line, then each row space separated."""
    rows, cols = _shape(matrix)
    with open_file(path, "w") as handle:
        handle.write(f"{rows} {cols}\n")
        for row in matrix:
            handle.write("".join(f"{value} " for value in row) + "\n")


def bubble_sort_matrix(matrix: Matrix) -> None:
    """Sort all elements ascending in row-major order, in place."""
    _, cols = _shape(matrix)
    flat = [value for row in matrix for value in row]
    bubble_sort(flat)
    ordered = iter(flat)
    for row in matrix:
        row[:] = islice(ordered, cols)