"""Operations that combine two vectors: equality, sum and scalar products."""

from __future__ import annotations

from ldnkit.vector import Number, Vector

__all__ = [
    "vector_equal",
    "vector_sum",
    "scalar_product",
    "orthogonal",
    "orthonormal",
]


def _require_same_size(v1: Vector, v2: Vector) -> None:
    if len(v1) != len(v2):
        raise ValueError(
            f"Vectors have different sizes! ({len(v1)} and {len(v2)})"
        )


def vector_equal(v1: Vector, v2: Vector) -> bool:
    """True when both vectors have the same size and the same elements."""
    return len(v1) == len(v2) and all(a == b for a, b in zip(v1, v2))


def vector_sum(v1: Vector, v2: Vector) -> Vector:
    """Return a new vector holding the element-wise sum of two equal-size vectors."""
    _require_same_size(v1, v2)
    result = Vector(len(v1))
    for index, (a, b) in enumerate(zip(v1, v2)):
        result[index] = a + b
    return result


def scalar_product(v1: Vector, v2: Vector) -> Number:
    """Dot product of two equal-size vectors."""
    _require_same_size(v1, v2)
    return sum((a * b for a, b in zip(v1, v2)), 0)


def orthogonal(v1: Vector, v2: Vector) -> bool:
    """True when the scalar product of the two vectors is zero."""
    return scalar_product(v1, v2) == 0


def orthonormal(v1: Vector, v2: Vector) -> bool:
    """True when both vectors have unit length and are orthogonal."""
    return v1.is_normalized() and v2.is_normalized() and orthogonal(v1, v2)