"""Vectors, integer arrays and matrices, strings, binary trees and linked lists with plain-text file I/O."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "vector",
    "vector_ops",
    "arrays",
    "matrix",
    "strings",
    "tree",
    "linked_list",
]