"""Exception hierarchy and guard helpers shared by the ldnkit containers."""

from __future__ import annotations

import math
import os
from typing import IO, Any, TypeVar, Union

__all__ = [
    "LdnError",
    "MathError",
    "ZeroDivision",
    "NegativeRoot",
    "InvalidIndex",
    "NullPointer",
    "FileError",
    "check_division",
    "check_root",
    "check_index",
    "check_pointer",
    "open_file",
]

T = TypeVar("T")
PathLike = Union[str, "os.PathLike[str]"]


class LdnError(Exception):
    """Base class of every error raised by ldnkit."""

    title = "Exception"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.title}!!!\n{self.message}"


class MathError(LdnError):
    """An arithmetic error that carries the value the operation produced."""

    title = "Math Exception"

    def __init__(self, value: float, message: str) -> None:
        super().__init__(message)
        self.value = float(value)

    def __str__(self) -> str:
        return (
            f"{super().__str__()}\n"
            f"The operation has returned the value: {self.value:g}!!!"
        )


class ZeroDivision(MathError, ZeroDivisionError):
    """Raised when a division by zero is attempted; its value is always 0."""

    title = "Division by Zero Exception"

    def __init__(self, message: str) -> None:
        super().__init__(0.0, message)


class NegativeRoot(MathError, ValueError):
    """Raised for the square root of a negative number."""

    title = "Negative Root Exception"

    def __init__(self, value: float, message: str) -> None:
        super().__init__(abs(value), message)


class InvalidIndex(LdnError, IndexError):
    """Raised when an index falls outside a container."""

    title = "Invalid Index Exception"


class NullPointer(LdnError, ValueError):
    """Raised when a required reference is missing."""

    title = "Null Pointer Exception"


class FileError(LdnError):
    """Raised when a file cannot be opened."""

    title = "File Exception"

    def __init__(self, path: PathLike, message: str) -> None:
        super().__init__(message)
        self.path = os.fspath(path)

    def __str__(self) -> str:
        return f"{super().__str__()}\nFile path: {self.path}"


def check_division(denominator: float) -> float:
    """Return the denominator, or raise ZeroDivision if it is zero."""
    if denominator == 0:
        raise ZeroDivision("Division by zero!")
    return denominator


def check_root(value: float) -> float:
    """Return the value, or raise NegativeRoot if it is negative."""
    if value < 0:
        raise NegativeRoot(math.sqrt(abs(value)), "Square Root of a Negative Number!")
    return value


def check_index(index: int, size: int) -> int:
    """Return the index, or raise InvalidIndex unless 0 <= index < size."""
    if index < 0 or index >= size:
        raise InvalidIndex("Index out of range!")
    return index


def check_pointer(pointer: T | None) -> T:
    """Return the reference, or raise NullPointer if it is None."""
    if pointer is None:
        raise NullPointer("This pointer leads to NULL!")
    return pointer


def open_file(path: PathLike, mode: str = "r") -> IO[Any]:
    """Open a file, raising FileError when it cannot be opened."""
    try:
        if "b" in mode:
            return open(path, mode)
        return open(path, mode, encoding="utf-8")
    except OSError as exc:
        raise FileError(path, "Error in opening the file!") from exc