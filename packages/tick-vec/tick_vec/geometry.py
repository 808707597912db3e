"""Geometric operations on vectors: dot, cross, norm, normalize, distance."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from tick_vec.backends import default_registry
from tick_vec.types import Scalar

if TYPE_CHECKING:
    from tick_vec.vector import Vector

V = TypeVar("V", bound="Vector")


def dot(a: Vector, b: Vector) -> Scalar:
    """Sum of elementwise products, accumulated left to right from zero."""
    if not a.matches(b):
        raise TypeError(
            f"dot() needs two vectors of the same type, got "
            f"{type(a).__name__} and {type(b).__name__}"
        )
    result = a.scalar(0)
    for x, y in zip(a, b):
        result += x * y
    return result


def cross(a: V, b: V) -> V:
    """Cross product. Only defined for length-3 vectors."""
    if a.length != 3 or not a.matches(b):
        raise TypeError(
            f"cross() needs two length-3 vectors of the same type, got "
            f"{type(a).__name__} and {type(b).__name__}"
        )
    return type(a)(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def norm_sq(v: Vector) -> Scalar:
    return dot(v, v)


def norm(v: Vector) -> Scalar:
    """Euclidean length, using the sqrt backend bound to the vector's type."""
    backend = type(v).backend
    if backend is None:
        backend = default_registry.resolve(v.scalar)
    return backend.sqrt(dot(v, v))


def normalize(v: V) -> V:
    """Scale *v* to unit length.

    There is no zero-vector guard: a zero vector divides by a zero norm and
    the element type's division error (or inf/nan) comes straight through.
    """
    return v / norm(v)


def distance_sq(a: Vector, b: Vector) -> Scalar:
    return norm_sq(a - b)


def distance(a: Vector, b: Vector) -> Scalar:
    return norm(a - b)
