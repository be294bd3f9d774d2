"""A binary tree of non-negative integers with labelled positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Callable, Iterator, List, Optional

__all__ = ["MAX_CHILDREN", "Leaf", "read_tree", "format_tree"]

MAX_CHILDREN = 2
_INDENT = "       "


@dataclass(eq=False)
class Leaf:
    """One node of the tree; ``depth``, ``father`` and ``child`` locate it."""

    number: int
    depth: int = 0
    father: int = 0
    child: int = 0
    children: List[Leaf] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Position label of the form ``depth.index``."""
        return f"{self.depth}.{self.father + self.child + 1}"

    def add_child(self, number: int) -> Leaf:
        """Attach and return a new child; at most MAX_CHILDREN are allowed."""
        if len(self.children) >= MAX_CHILDREN:
            raise ValueError(f"a leaf has at most {MAX_CHILDREN} children")
        base = self.father + self.child
        leaf = Leaf(number, self.depth + 1, base, base + len(self.children))
        self.children.append(leaf)
        return leaf

    def __iter__(self) -> Iterator[Leaf]:
        """Yield this leaf and then its subtree, depth first."""
        yield self
        for child in self.children:
            yield from child


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_tree(stream: IO[str]) -> Leaf:
    """Build a tree from a stream giving, per leaf, its number then its child count.

    Negative numbers and child counts outside 0..MAX_CHILDREN are skipped and
    the value is read again; children are read depth first.
    """
    tokens = _tokens(stream)

    def read_value(accept: Callable[[int], bool]) -> int:
        while True:
            token = next(tokens, None)
            if token is None:
                raise EOFError("unexpected end of tree input")
            value = int(token)
            if accept(value):
                return value

    def non_negative(value: int) -> bool:
        return value >= 0

    def valid_count(value: int) -> bool:
        return 0 <= value <= MAX_CHILDREN

    def fill(leaf: Leaf) -> None:
        for _ in range(read_value(valid_count)):
            fill(leaf.add_child(read_value(non_negative)))

    root = Leaf(read_value(non_negative))
    fill(root)
    return root


def format_tree(root: Optional[Leaf]) -> str:
    """Return an indented drawing of the tree, one leaf per line."""
    if root is None:
        return "Empty Tree!\n"
    lines = []
    for leaf in root:
        if leaf.depth == 0:
            lines.append(f"|------ Root: {leaf.number}")
        else:
            lines.append(f"{_INDENT * leaf.depth}|------ Leaf {leaf.label}: {leaf.number}")
    return "\n".join(lines) + "\n"