"""A fixed-size numeric vector with in-place editing, sorting and norms."""

from __future__ import annotations

import math
import os
from itertools import islice
from typing import IO, Iterator, List, Union

from ldnkit.errors import check_division, check_index, open_file

__all__ = ["Vector"]

Number = Union[int, float]
PathLike = Union[str, "os.PathLike[str]"]

_TOLERANCE = 1e-6


def _parse_number(token: str) -> Number:
    """Turn a text token into an int when possible, otherwise a float."""
    try:
        return int(token)
    except ValueError:
        return float(token)


def _tokens(stream: IO[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def _read_numbers(tokens: Iterator[str], count: int) -> List[Number]:
    values = [_parse_number(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError(f"expected {count} elements, found {len(values)}")
    return values


def _display(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _serialise(value: Number) -> str:
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"vector size must not be negative, got {size}")
    return size


class Vector:
    """A numeric vector whose elements start at zero."""

    def __init__(self, size: int) -> None:
        self._data: List[Number] = [0] * _check_size(size)

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Number:
        return self._data[check_index(index, len(self._data))]

    def __setitem__(self, index: int, element: Number) -> None:
        self._data[check_index(index, len(self._data))] = element

    def get(self, index: int) -> Number:
        """Return the element at ``index``; raise InvalidIndex if out of range."""
        return self[index]

    def set(self, element: Number, index: int) -> None:
        """Store ``element`` at ``index``; raise InvalidIndex if out of range."""
        self[index] = element

    def scan(self, stream: IO[str]) -> None:
        """Fill every element from whitespace-separated numbers in ``stream``."""
        self._data = _read_numbers(_tokens(stream), len(self._data))

    def load(self, path: PathLike) -> None:
        """Replace the contents with a file holding the size, then the elements."""
        with open_file(path, "r") as handle:
            tokens = _tokens(handle)
            header = next(tokens, None)
            if header is None:
                raise ValueError("vector file is empty")
            size = _check_size(int(header))
            self._data = _read_numbers(tokens, size)

    def save(self, path: PathLike) -> None:
        """Write the size and then one element per line to ``path``."""
        with open_file(path, "w") as handle:
            handle.write(f"{len(self._data)}\n")
            handle.writelines(f"{_serialise(value)}\n" for value in self._data)

    def format(self) -> str:
        """Return a numbered, human-readable listing of the elements."""
        lines = ["Print the Vector:"]
        lines.extend(
            f"Element {position}: {_display(value)}"
            for position, value in enumerate(self._data, start=1)
        )
        return "\n".join(lines) + "\n"

    def is_null(self) -> bool:
        """True when every element is zero."""
        return all(value == 0 for value in self._data)

    def resize(self, newsize: int) -> None:
        """Truncate or zero-pad the vector to ``newsize`` elements."""
        _check_size(newsize)
        kept = self._data[:newsize]
        self._data = kept + [0] * (newsize - len(kept))

    def count(self, element: Number) -> int:
        """Number of elements equal to ``element``."""
        return sum(1 for value in self._data if value == element)

    def swap(self, index1: int, index2: int) -> None:
        """Exchange two elements; raise InvalidIndex if either is out of range."""
        size = len(self._data)
        check_index(index1, size)
        check_index(index2, size)
        self._data[index1], self._data[index2] = self._data[index2], self._data[index1]

    def sort(self) -> None:
        """Sort the elements into ascending order, stably."""
        self._data.sort()

    def is_sorted(self) -> bool:
        """True when the elements are in non-decreasing order."""
        return all(a <= b for a, b in zip(self._data, self._data[1:]))

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._data.reverse()

    def scale(self, scalar: Number) -> None:
        """Multiply every element by ``scalar``."""
        self._data = [value * scalar for value in self._data]

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(sum(value * value for value in self._data))

    def normalize(self) -> None:
        """Scale to unit length; raise ZeroDivision for a null vector."""
        self.scale(1 / check_division(self.norm()))

    def is_normalized(self) -> bool:
        """True when the norm is within 1e-6 of one."""
        return abs(self.norm() - 1.0) < _TOLERANCE