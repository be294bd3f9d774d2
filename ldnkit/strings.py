"""Helpers for reading, showing and storing single lines of text."""

from __future__ import annotations

import os
from typing import IO, Optional, Union

from ldnkit.errors import check_pointer, open_file

__all__ = [
    "MAX_LENGTH",
    "read_string",
    "format_string",
    "load_string",
    "save_string",
]

MAX_LENGTH = 999
PathLike = Union[str, "os.PathLike[str]"]


def read_string(stream: IO[str]) -> str:
    """Read one line, newline kept, of at most MAX_LENGTH - 1 characters."""
    line = stream.readline(MAX_LENGTH - 1)
    if not line:
        raise EOFError("no text to read")
    return line


def format_string(text: Optional[str]) -> str:
    """Describe the text, or report that there is none."""
    if text is None:
        return "The String is empty\n"
    return f"The String is: {text}\n"


def load_string(path: PathLike) -> str:
    """Return the first line of a file, without its newline."""
    with open_file(path, "r") as handle:
        return handle.readline().rstrip("\n")


def save_string(text: Optional[str], path: PathLike) -> None:
    """Write the text to a file as is; raise NullPointer if it is None."""
    content = check_pointer(text)
    with open_file(path, "w") as handle:
        handle.write(content)