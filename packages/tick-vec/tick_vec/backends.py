"""Scalar math backends and the registry that binds them to scalar types.

A vector type looks up its backend once, when the type is defined. Callers
with custom numeric types (fixed-point, exact rationals, ...) either register
a backend for that type or pass one straight to ``vector_type()``.
"""
from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction

from tick_vec.types import Scalar, ScalarBackend


class FloatBackend:
    """``math.sqrt`` for floats."""

    def sqrt(self, x: Scalar) -> float:
        return math.sqrt(x)


class IntBackend:
    """Integer square root (floor), so integer norms stay integral."""

    def sqrt(self, x: Scalar) -> int:
        return math.isqrt(x)


class DecimalBackend:
    """``Decimal.sqrt`` under the active decimal context."""

    def sqrt(self, x: Scalar) -> Decimal:
        return Decimal(x).sqrt()


class FractionBackend:
    """Exact root for perfect squares, nearest float root otherwise."""

    def sqrt(self, x: Scalar) -> Fraction:
        x = Fraction(x)
        num = math.isqrt(x.numerator)
        den = math.isqrt(x.denominator)
        if num * num == x.numerator and den * den == x.denominator:
            return Fraction(num, den)
        return Fraction(math.sqrt(x))


class BackendRegistry:
    """Maps scalar types to the backend used by vectors of that type.

    Lookups walk the scalar type's MRO, so a subclass of a registered type
    (``bool`` for ``int``) shares its parent's backend.
    """

    def __init__(self) -> None:
        self._backends: dict[type, ScalarBackend] = {}

    def define(self, scalar: type, backend: ScalarBackend) -> None:
        """Register *backend* for *scalar*, replacing any existing entry."""
        if not isinstance(scalar, type):
            raise TypeError(f"scalar must be a type, got {scalar!r}")
        if not isinstance(backend, ScalarBackend):
            raise TypeError(
                f"{type(backend).__name__} does not provide sqrt(); "
                "not a ScalarBackend"
            )
        if scalar in self._backends:
            print(
                f"tick-vec: replacing sqrt backend for {scalar.__name__}",
                file=sys.stderr,
            )
        self._backends[scalar] = backend

    def remove(self, scalar: type) -> None:
        if scalar not in self._backends:
            raise KeyError(scalar)
        del self._backends[scalar]

    def lookup(self, scalar: type) -> ScalarBackend | None:
        """Return the backend for *scalar* or its nearest registered base."""
        for klass in scalar.__mro__:
            backend = self._backends.get(klass)
            if backend is not None:
                return backend
        return None

    def resolve(self, scalar: type) -> ScalarBackend:
        """Like lookup(), but raise LookupError when nothing is registered."""
        backend = self.lookup(scalar)
        if backend is None:
            raise LookupError(
                f"No sqrt backend registered for scalar type {scalar.__name__}"
            )
        return backend

    def __contains__(self, scalar: object) -> bool:
        return isinstance(scalar, type) and self.lookup(scalar) is not None


def _make_default_registry() -> BackendRegistry:
    registry = BackendRegistry()
    registry.define(float, FloatBackend())
    registry.define(int, IntBackend())
    registry.define(Decimal, DecimalBackend())
    registry.define(Fraction, FractionBackend())
    return registry


default_registry = _make_default_registry()
