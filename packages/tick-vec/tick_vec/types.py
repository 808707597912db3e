"""Shared types, errors, and protocols for tick-vec."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Any element type with the arithmetic a vector needs (int, float, Decimal, ...).
Scalar = Any


class OutOfRangeError(IndexError):
    """Raised by checked element access when the index is outside the vector."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"vector index {index} out of range for length {length}")


@runtime_checkable
class ScalarBackend(Protocol):
    """Protocol for scalar math backends.

    A backend supplies the square root used by ``norm``. It must be stateless
    and pure; it is bound to a vector type, never to instances.
    """

    def sqrt(self, x: Scalar) -> Scalar:
        """Return the square root of *x* in the backend's scalar type."""
        ...
