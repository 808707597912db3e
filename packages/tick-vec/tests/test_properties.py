"""Algebraic properties checked over seeded random integer vectors.

Integer elements keep every identity exact, so equality is checked with ==.
"""
from __future__ import annotations

import math
import random

import pytest

from tick_vec import Vec3, Vec3i, Vec4i, cross, dot, norm, normalize, vector_type

_rng = random.Random(0)
Vec5i = vector_type(5, int)


def _rand(cls: type, lo: int = -50, hi: int = 50):
    return cls(*(_rng.randint(lo, hi) for _ in range(cls.length)))


CASES = [(_rand(Vec3i), _rand(Vec3i), _rand(Vec3i)) for _ in range(25)]
WIDE_CASES = [(_rand(Vec5i), _rand(Vec5i), _rand(Vec5i)) for _ in range(25)]
NONZERO_CASES = [case for case in CASES if case[0] != Vec3i.zero()]


class TestIdentity:
    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_add_zero(self, a, b, c) -> None:
        assert a + Vec5i.zero() == a

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_sub_self(self, a, b, c) -> None:
        assert a - a == Vec5i.zero()

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_double_negation(self, a, b, c) -> None:
        assert -(-a) == a


class TestCommutativity:
    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_add(self, a, b, c) -> None:
        assert a + b == b + a

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_scalar_mul(self, a, b, c) -> None:
        s = a[0]
        assert s * b == b * s


class TestAssociativityDistributivity:
    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_add_associative(self, a, b, c) -> None:
        assert (a + b) + c == a + (b + c)

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_mul_distributes_over_add(self, a, b, c) -> None:
        assert a * (b + c) == a * b + a * c

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_scalar_distributes(self, a, b, c) -> None:
        assert 3 * (a - b) == 3 * a - 3 * b


class TestDotProperties:
    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_bilinear(self, a, b, c) -> None:
        assert dot(a + b, c) == dot(a, c) + dot(b, c)

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_symmetric(self, a, b, c) -> None:
        assert dot(a, b) == dot(b, a)

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_self_non_negative(self, a, b, c) -> None:
        assert dot(a, a) >= 0


class TestCrossProperties:
    @pytest.mark.parametrize("a,b,c", CASES)
    def test_anticommutative(self, a, b, c) -> None:
        assert cross(a, b) == -cross(b, a)

    @pytest.mark.parametrize("a,b,c", CASES)
    def test_self_is_zero(self, a, b, c) -> None:
        assert cross(a, a) == Vec3i.zero()

    @pytest.mark.parametrize("a,b,c", CASES)
    def test_orthogonal(self, a, b, c) -> None:
        n = cross(a, b)
        assert dot(n, a) == 0
        assert dot(n, b) == 0


class TestNormProperties:
    @pytest.mark.parametrize("a,b,c", CASES)
    def test_non_negative(self, a, b, c) -> None:
        assert norm(a) >= 0

    def test_zero(self) -> None:
        assert norm(Vec4i.zero()) == 0

    @pytest.mark.parametrize("a,b,c", NONZERO_CASES)
    def test_normalized_float_has_unit_length(self, a, b, c) -> None:
        v = Vec3.from_iterable(a)
        assert math.isclose(norm(normalize(v)), 1.0)


class TestEqualityConsistency:
    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_ne_is_not_eq(self, a, b, c) -> None:
        assert (a != b) == (not a == b)
        assert (a == b) == all(x == y for x, y in zip(a, b))

    @pytest.mark.parametrize("a,b,c", WIDE_CASES)
    def test_copy_equal(self, a, b, c) -> None:
        assert a == a.copy()
