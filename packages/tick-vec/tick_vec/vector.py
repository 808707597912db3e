"""Fixed-length vector value type with elementwise arithmetic.

Concrete vector types are made with ``vector_type(n, scalar)``, which fixes
the length, the element type, and the sqrt backend once per type:

>>> Vec3i = vector_type(3, int)
>>> Vec3i(1, 2, 3) + Vec3i(4, 5, 6)
Vec3i(5, 7, 9)
"""
from __future__ import annotations

import copy as _copy
import operator
import weakref
from numbers import Integral, Number
from typing import Any, Callable, ClassVar, Iterable, Iterator, TypeVar

from tick_vec import geometry
from tick_vec.backends import default_registry
from tick_vec.types import OutOfRangeError, Scalar, ScalarBackend

V = TypeVar("V", bound="Vector")


def _convert(scalar: type, value: Any) -> Scalar:
    """Convert *value* to *scalar*, rejecting conversions that lose information."""
    if isinstance(value, scalar):
        return value
    try:
        converted = scalar(value)
    except (ValueError, OverflowError) as exc:
        raise TypeError(
            f"{value!r} cannot be stored as {scalar.__name__}: {exc}"
        ) from exc
    if converted != value:
        raise TypeError(
            f"{value!r} cannot be stored as {scalar.__name__} without loss"
        )
    return converted


def _trunc_div(a: Any, b: Any) -> Any:
    """Integer division rounding toward zero."""
    q = a // b
    if q < 0 and q * b != a:
        return q + 1
    return q


class Vector:
    """Base class for fixed-length vectors. Use ``vector_type()`` to get one.

    Elements are stored in a private list owned by the instance. Arithmetic
    operators return new vectors; the compound forms (``+=``, ``*=``, ...)
    update the left operand in place.

    Element access comes in two forms. ``at()`` / ``set_at()`` check the index
    and raise ``OutOfRangeError``. ``v[i]`` only asserts the index, so the check
    disappears under ``python -O``.
    """

    __slots__ = ("_data",)

    length: ClassVar[int] = 0
    scalar: ClassVar[type] = float
    backend: ClassVar[ScalarBackend | None] = None
    _div: ClassVar[Callable[[Any, Any], Any]] = staticmethod(operator.truediv)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: Scalar) -> None:
        cls = type(self)
        if cls.length == 0:
            raise TypeError(
                f"{cls.__name__} has no length; define a type with vector_type()"
            )
        if len(values) != cls.length:
            raise TypeError(
                f"{cls.__name__} takes exactly {cls.length} values "
                f"({len(values)} given)"
            )
        self._data = [_convert(cls.scalar, v) for v in values]

    # --- Construction ---

    @classmethod
    def _wrap(cls: type[V], data: list[Scalar]) -> V:
        # Trusted path: data already has the right length and element type.
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_iterable(cls: type[V], values: Iterable[Scalar]) -> V:
        return cls(*values)

    @classmethod
    def zero(cls: type[V]) -> V:
        """The additive identity: every element is ``scalar(0)``."""
        return cls._wrap([cls.scalar(0)] * cls.length)

    @classmethod
    def fill(cls: type[V], value: Scalar) -> V:
        return cls._wrap([_convert(cls.scalar, value)] * cls.length)

    def copy(self: V) -> V:
        return self._wrap(list(self._data))

    def __copy__(self: V) -> V:
        return self.copy()

    def __deepcopy__(self: V, memo: dict[int, Any]) -> V:
        return self._wrap(_copy.deepcopy(self._data, memo))

    # --- Size and access ---

    def size(self) -> int:
        return self.length

    def __len__(self) -> int:
        return self.length

    def at(self, i: int) -> Scalar:
        """Return element *i*. Raises OutOfRangeError unless 0 <= i < length."""
        if not 0 <= i < self.length:
            raise OutOfRangeError(i, self.length)
        return self._data[i]

    def set_at(self, i: int, value: Scalar) -> None:
        """Replace element *i* with *value* converted to the element type."""
        if not 0 <= i < self.length:
            raise OutOfRangeError(i, self.length)
        self._data[i] = _convert(self.scalar, value)

    def __getitem__(self, i: int) -> Scalar:
        assert 0 <= i < self.length, f"vector index {i} out of range"
        return self._data[i]

    def __setitem__(self, i: int, value: Scalar) -> None:
        # Stored as given; use set_at() for checked, converting writes.
        assert 0 <= i < self.length, f"vector index {i} out of range"
        self._data[i] = value

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._data)

    def to_tuple(self) -> tuple[Scalar, ...]:
        return tuple(self._data)

    def matches(self, other: object) -> bool:
        """True if *other* is a vector with the same length and element type."""
        return (
            isinstance(other, Vector)
            and other.length == self.length
            and other.scalar is self.scalar
        )

    # --- Comparison and rendering ---

    def __eq__(self, other: object) -> bool:
        if not self.matches(other):
            return NotImplemented
        return all(a == b for a, b in zip(self._data, other._data))  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return "(" + ", ".join(str(x) for x in self._data) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self._data)})"

    # --- Unary ---

    def __neg__(self: V) -> V:
        return self._wrap([-x for x in self._data])

    def __pos__(self: V) -> V:
        return self.copy()

    def __abs__(self) -> Scalar:
        return geometry.norm(self)

    # --- Elementwise and broadcast arithmetic ---

    def _as_scalar(self, value: object) -> Scalar | None:
        """Convert a broadcast operand to the element type, None if not a scalar."""
        if isinstance(value, self.scalar) or isinstance(value, Number):
            return _convert(self.scalar, value)
        return None

    def __add__(self: V, other: object) -> V:
        if not self.matches(other):
            return NotImplemented
        return self._wrap([a + b for a, b in zip(self._data, other._data)])  # type: ignore[attr-defined]

    def __sub__(self: V, other: object) -> V:
        if not self.matches(other):
            return NotImplemented
        return self._wrap([a - b for a, b in zip(self._data, other._data)])  # type: ignore[attr-defined]

    def __mul__(self: V, other: object) -> V:
        if self.matches(other):
            return self._wrap([a * b for a, b in zip(self._data, other._data)])  # type: ignore[attr-defined]
        s = self._as_scalar(other)
        if s is None:
            return NotImplemented
        return self._wrap([a * s for a in self._data])

    def __rmul__(self: V, other: object) -> V:
        s = self._as_scalar(other)
        if s is None:
            return NotImplemented
        return self._wrap([s * a for a in self._data])

    def __truediv__(self: V, other: object) -> V:
        div = self._div
        if self.matches(other):
            return self._wrap([div(a, b) for a, b in zip(self._data, other._data)])  # type: ignore[attr-defined]
        s = self._as_scalar(other)
        if s is None:
            return NotImplemented
        return self._wrap([div(a, s) for a in self._data])

    def __iadd__(self: V, other: object) -> V:
        if not self.matches(other):
            return NotImplemented
        data = self._data
        for i, b in enumerate(other._data):  # type: ignore[attr-defined]
            data[i] += b
        return self

    def __isub__(self: V, other: object) -> V:
        if not self.matches(other):
            return NotImplemented
        data = self._data
        for i, b in enumerate(other._data):  # type: ignore[attr-defined]
            data[i] -= b
        return self

    def __imul__(self: V, other: object) -> V:
        data = self._data
        if self.matches(other):
            for i, b in enumerate(other._data):  # type: ignore[attr-defined]
                data[i] *= b
            return self
        s = self._as_scalar(other)
        if s is None:
            return NotImplemented
        for i in range(self.length):
            data[i] *= s
        return self

    def __itruediv__(self: V, other: object) -> V:
        data = self._data
        div = self._div
        if self.matches(other):
            for i, b in enumerate(other._data):  # type: ignore[attr-defined]
                data[i] = div(data[i], b)
            return self
        s = self._as_scalar(other)
        if s is None:
            return NotImplemented
        for i in range(self.length):
            data[i] = div(data[i], s)
        return self

    # --- Geometry shortcuts ---

    def dot(self, other: Vector) -> Scalar:
        return geometry.dot(self, other)

    def cross(self: V, other: V) -> V:
        return geometry.cross(self, other)

    def norm(self) -> Scalar:
        return geometry.norm(self)

    def normalize(self: V) -> V:
        return geometry.normalize(self)


_SUFFIXES: dict[type, str] = {float: "", int: "i"}

# Weak values: a type nobody references any more drops out, so its id(backend)
# key cannot be matched by a later backend reusing the same id.
_types: weakref.WeakValueDictionary[
    tuple[int, type, int, str | None], type[Vector]
] = weakref.WeakValueDictionary()


def vector_type(
    n: int,
    scalar: type = float,
    backend: ScalarBackend | None = None,
    name: str | None = None,
) -> type[Vector]:
    """Return the vector type of length *n* over *scalar*.

    Types are cached while referenced, so repeated calls with the same arguments
    return the same class. An explicit *backend* is matched by identity: pass
    the same instance each time to get the same type back. When *backend* is None the default registry supplies one; if it has
    none for *scalar*, ``norm`` resolves it from the registry at call time.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 1:
        raise ValueError(f"vector length must be an int >= 1, got {n!r}")
    if not isinstance(scalar, type):
        raise TypeError(f"scalar must be a type, got {scalar!r}")
    if backend is not None and not isinstance(backend, ScalarBackend):
        raise TypeError(f"{type(backend).__name__} is not a ScalarBackend")

    # Keyed on id(): backends need not be hashable, and a live cached class
    # keeps its backend alive.
    key = (n, scalar, id(backend), name)
    cls = _types.get(key)
    if cls is not None:
        return cls

    if name is None:
        suffix = _SUFFIXES.get(scalar)
        name = f"Vec{n}{suffix}" if suffix is not None else f"Vec{n}_{scalar.__name__}"
    div = _trunc_div if issubclass(scalar, Integral) else operator.truediv
    cls = type(
        name,
        (Vector,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "length": n,
            "scalar": scalar,
            "backend": backend if backend is not None else default_registry.lookup(scalar),
            "_div": staticmethod(div),
        },
    )
    _types[key] = cls
    return cls


Vec2 = vector_type(2)
Vec3 = vector_type(3)
Vec4 = vector_type(4)
Vec2i = vector_type(2, int)
Vec3i = vector_type(3, int)
Vec4i = vector_type(4, int)
