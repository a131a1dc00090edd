"""
Тесты для Vector Operations — 3D Vector Algebra

Проверяемые инварианты:
1. Все операции чистые: аргументы не изменяются
2. Правая тройка для cross product
3. normalize нулевого вектора возвращает вход без изменений
"""

import math

import pytest

from src.core.domain import Vector3
from src.core.math.vector_ops import (
    vector3_add,
    vector3_cross,
    vector3_dot,
    vector3_is_close,
    vector3_magnitude,
    vector3_normalize,
)

X_AXIS = Vector3(x=1.0, y=0.0, z=0.0)
Y_AXIS = Vector3(x=0.0, y=1.0, z=0.0)
Z_AXIS = Vector3(x=0.0, y=0.0, z=1.0)


class TestVectorAdd:
    """Тесты vector3_add"""

    def test_componentwise_sum(self):
        a = Vector3(x=1.0, y=2.0, z=3.0)
        b = Vector3(x=4.0, y=5.0, z=6.0)
        assert vector3_add(a, b) == Vector3(x=5.0, y=7.0, z=9.0)

    def test_arguments_unchanged(self):
        a = Vector3(x=1.0, y=2.0, z=3.0)
        b = Vector3(x=-1.0, y=3.0, z=2.0)
        result = vector3_add(a, b)
        assert a == Vector3(x=1.0, y=2.0, z=3.0)
        assert b == Vector3(x=-1.0, y=3.0, z=2.0)
        assert result is not a and result is not b


class TestVectorCross:
    """Тесты vector3_cross"""

    def test_right_handed_basis(self):
        assert vector3_cross(X_AXIS, Y_AXIS) == Z_AXIS
        assert vector3_cross(Y_AXIS, Z_AXIS) == X_AXIS
        assert vector3_cross(Z_AXIS, X_AXIS) == Y_AXIS

    def test_anticommutative(self):
        assert vector3_cross(Y_AXIS, X_AXIS) == Vector3(x=0.0, y=0.0, z=-1.0)

    def test_general_case(self):
        a = Vector3(x=1.0, y=2.0, z=3.0)
        b = Vector3(x=4.0, y=5.0, z=6.0)
        assert vector3_cross(a, b) == Vector3(x=-3.0, y=6.0, z=-3.0)

    def test_orthogonal_to_inputs(self):
        a = Vector3(x=2.5, y=-1.0, z=0.5)
        b = Vector3(x=-1.0, y=3.0, z=2.0)
        c = vector3_cross(a, b)
        assert vector3_dot(c, a) == pytest.approx(0.0, abs=1e-12)
        assert vector3_dot(c, b) == pytest.approx(0.0, abs=1e-12)

    def test_parallel_vectors_zero(self):
        a = Vector3(x=1.0, y=2.0, z=3.0)
        b = Vector3(x=2.0, y=4.0, z=6.0)
        assert vector3_cross(a, b) == Vector3(x=0.0, y=0.0, z=0.0)


class TestVectorDot:
    """Тесты vector3_dot"""

    def test_known_value(self):
        a = Vector3(x=1.0, y=2.0, z=3.0)
        b = Vector3(x=4.0, y=5.0, z=6.0)
        assert vector3_dot(a, b) == 32.0

    def test_orthogonal_axes(self):
        assert vector3_dot(X_AXIS, Y_AXIS) == 0.0


class TestVectorMagnitude:
    """Тесты vector3_magnitude"""

    def test_pythagorean(self):
        assert vector3_magnitude(Vector3(x=3.0, y=4.0, z=0.0)) == 5.0

    def test_zero(self):
        assert vector3_magnitude(Vector3()) == 0.0

    def test_matches_dot(self):
        v = Vector3(x=1.0, y=2.0, z=3.0)
        assert vector3_magnitude(v) == math.sqrt(vector3_dot(v, v))


class TestVectorNormalize:
    """Тесты vector3_normalize"""

    def test_unit_length(self):
        v = vector3_normalize(Vector3(x=1.0, y=2.0, z=3.0))
        assert vector3_magnitude(v) == pytest.approx(1.0)

    def test_direction_preserved(self):
        v = vector3_normalize(Vector3(x=3.0, y=0.0, z=4.0))
        assert vector3_is_close(v, Vector3(x=0.6, y=0.0, z=0.8))

    def test_zero_vector_returned_unchanged(self):
        """|v| == 0 → вход возвращается как есть, без деления на ноль."""
        zero = Vector3(x=0.0, y=0.0, z=0.0)
        result = vector3_normalize(zero)
        assert result == zero
        assert result is zero

    def test_tiny_vector_still_normalized(self):
        """Нулевая длина определяется строго: малые векторы нормализуются."""
        v = vector3_normalize(Vector3(x=1e-100, y=0.0, z=0.0))
        assert vector3_is_close(v, X_AXIS)

    def test_underflowing_magnitude_treated_as_zero(self):
        """dot(v, v) уходит в 0.0 → magnitude == 0.0 → вход без изменений."""
        v = Vector3(x=1e-200, y=0.0, z=0.0)
        assert vector3_magnitude(v) == 0.0
        assert vector3_normalize(v) is v


class TestVectorIsClose:
    """Тесты vector3_is_close"""

    def test_close(self):
        a = Vector3(x=1.0, y=2.0, z=3.0)
        b = Vector3(x=1.0 + 1e-12, y=2.0, z=3.0 - 1e-12)
        assert vector3_is_close(a, b)

    def test_not_close(self):
        assert not vector3_is_close(X_AXIS, Y_AXIS)

    def test_custom_tolerance(self):
        a = Vector3(x=1.0, y=1.0, z=1.0)
        b = Vector3(x=1.01, y=1.0, z=1.0)
        assert not vector3_is_close(a, b)
        assert vector3_is_close(a, b, rel_tol=0.1)
