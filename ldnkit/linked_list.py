"""A singly linked list of integers whose nodes carry a 1-based position."""

from __future__ import annotations

import os
from dataclasses import dataclass
from itertools import islice
from typing import IO, Iterator, List, Optional, Union

from ldnkit.errors import InvalidIndex, open_file

__all__ = ["Node", "LinkedList", "swap_nodes"]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    number: int
    position: int
    next: Optional[Node] = None


def swap_nodes(a: Node, b: Node) -> None:
    """Exchange the number and the position of two nodes, leaving links alone."""
    a.number, b.number = b.number, a.number
    a.position, b.position = b.position, a.position


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _node_lines(nodes: Iterator[Node]) -> str:
    return "".join(f"\nNode {node.position}:\n\tNumber: {node.number}" for node in nodes)


class LinkedList:
    """A singly linked list; new nodes take the last node's position plus one."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def __repr__(self) -> str:
        return f"LinkedList({[node.number for node in self]!r})"

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def _last(self) -> Optional[Node]:
        last = None
        for last in self:
            pass
        return last

    def append(self, number: int) -> Node:
        """Add ``number`` at the end of the list and return its node."""
        last = self._last()
        if last is None:
            self.head = Node(number, 1)
            return self.head
        last.next = Node(number, last.position + 1)
        return last.next

    def read_node(self, stream: IO[str]) -> Node:
        """Append the first non-negative integer read from ``stream``.

        Negative numbers are skipped and reading continues; whatever follows
        the accepted number on its line is discarded.
        """
        while True:
            line = stream.readline()
            if not line:
                raise EOFError("no number to read")
            for token in line.split():
                value = int(token)
                if value >= 0:
                    return self.append(value)

    def format(self) -> str:
        """Return a listing of every node with its position and number."""
        if self.head is None:
            return "Empty list!\n"
        return "Print the list:" + _node_lines(iter(self)) + "\n"

    @classmethod
    def from_file(cls, path: PathLike) -> LinkedList:
        """Build a list from a file holding the node count, then the numbers."""
        result = cls()
        with open_file(path, "r") as handle:
            tokens = _tokens(handle)
            header = next(tokens, None)
            if header is None:
                raise ValueError("list file is empty")
            size = int(header)
            if size < 0:
                raise ValueError(f"list size must not be negative, got {size}")
            values: List[int] = [int(token) for token in islice(tokens, size)]
        if len(values) < size:
            raise ValueError(f"expected {size} elements, found {len(values)}")
        for value in values:
            result.append(value)
        return result

    def save(self, path: PathLike) -> None:
        """Write a listing of the nodes to ``path``."""
        with open_file(path, "w") as handle:
            if self.head is None:
                handle.write("\nEmpty list!\n")
            else:
                handle.write("\nList:" + _node_lines(iter(self)))

    def sort(self) -> None:
        """Bubble sort by number; each number keeps its original position."""
        if self.head is None:
            raise ValueError("Impossible to sort an Empty List!")
        for _ in range(len(self) - 1):
            swapped = False
            node = self.head
            while node.next is not None:
                if node.number > node.next.number:
                    swap_nodes(node, node.next)
                    swapped = True
                node = node.next
            if not swapped:
                break

    def remove(self, position: int) -> int:
        """Remove the ``position``-th node (counted from 1) and return its number.

        The positions of the nodes after it are each lowered by one.
        """
        if self.head is None:
            raise InvalidIndex("Impossible to remove a node from an Empty List!")
        previous: Optional[Node] = None
        for index, node in enumerate(self, start=1):
            if index == position:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                follower = node.next
                while follower is not None:
                    follower.position -= 1
                    follower = follower.next
                node.next = None
                return node.number
            previous = node
        raise InvalidIndex("The removal has failed!!!")