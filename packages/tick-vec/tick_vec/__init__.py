"""tick-vec - Fixed-length vector math with pluggable scalar backends."""
from __future__ import annotations

from tick_vec.backends import (
    BackendRegistry,
    DecimalBackend,
    FloatBackend,
    FractionBackend,
    IntBackend,
    default_registry,
)
from tick_vec.geometry import cross, distance, distance_sq, dot, norm, norm_sq, normalize
from tick_vec.types import OutOfRangeError, Scalar, ScalarBackend
from tick_vec.vector import Vec2, Vec2i, Vec3, Vec3i, Vec4, Vec4i, Vector, vector_type

__all__ = [
    "BackendRegistry",
    "DecimalBackend",
    "FloatBackend",
    "FractionBackend",
    "IntBackend",
    "OutOfRangeError",
    "Scalar",
    "ScalarBackend",
    "Vec2",
    "Vec2i",
    "Vec3",
    "Vec3i",
    "Vec4",
    "Vec4i",
    "Vector",
    "cross",
    "default_registry",
    "distance",
    "distance_sq",
    "dot",
    "norm",
    "norm_sq",
    "normalize",
    "vector_type",
]
