"""Helpers for plain integer arrays: reading, formatting, files and sorting."""

from __future__ import annotations

import os
from itertools import islice
from typing import IO, Iterator, List, MutableSequence, Sequence, TypeVar, Union

from ldnkit.errors import check_index, open_file

__all__ = [
    "swap",
    "read_array",
    "format_array",
    "load_array",
    "save_array",
    "bubble_sort",
]

T = TypeVar("T")
PathLike = Union[str, "os.PathLike[str]"]


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> List[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError(f"expected {count} elements, found {len(values)}")
    return values


def swap(items: MutableSequence[T], i: int, j: int) -> None:
    """Exchange the elements at positions ``i`` and ``j`` in place."""
    size = len(items)
    check_index(i, size)
    check_index(j, size)
    items[i], items[j] = items[j], items[i]


def read_array(stream: IO[str], size: int) -> List[int]:
    """Read ``size`` whitespace-separated integers from ``stream``."""
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    return _read_ints(_tokens(stream), size)


def format_array(values: Sequence[int]) -> str:
    """Return the elements numbered from one, tab separated, on one line."""
    body = "".join(
        f"Element {position}: {value}\t"
        for position, value in enumerate(values, start=1)
    )
    return "Print the Array:\n" + (body + "\n" if body else "")


def load_array(path: PathLike) -> List[int]:
    """Read a file holding the element count followed by the elements."""
    with open_file(path, "r") as handle:
        tokens = _tokens(handle)
        header = next(tokens, None)
        if header is None:
            raise ValueError("array file is empty")
        size = int(header)
        if size < 0:
            raise ValueError(f"array size must not be negative, got {size}")
        return _read_ints(tokens, size)


def save_array(values: Sequence[int], path: PathLike) -> None:
    """Write the element count on one line, then the elements space separated."""
    with open_file(path, "w") as handle:
        handle.write(f"{len(values)}\n")
        handle.write("".join(f"{value} " for value in values))


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` into ascending order in place with a bubble sort."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                swap(values, j, j + 1)
                swapped = True
        if not swapped:
            break