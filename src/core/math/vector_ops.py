"""
Vector Operations — 3D Vector Algebra

Чистые функции над Vector3: аргументы не изменяются, результат —
новый экземпляр (или float).

ПОЛИТИКА НУЛЕВОЙ ДЛИНЫ:
vector3_normalize для вектора с magnitude == 0.0 (строго) возвращает
входной вектор без изменений. Ошибка не формируется.
"""

import math

from src.core.domain.vector import Vector3
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)


def vector3_add(a: Vector3, b: Vector3) -> Vector3:
    """Покомпонентная сумма."""
    return Vector3(x=a.x + b.x, y=a.y + b.y, z=a.z + b.z)


def vector3_cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Векторное произведение (правая тройка).

    Формула:
        (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)

    Examples:
        >>> vector3_cross(Vector3(x=1, y=0, z=0), Vector3(x=0, y=1, z=0))
        Vector3(x=0.0, y=0.0, z=1.0)
    """
    return Vector3(
        x=a.y * b.z - a.z * b.y,
        y=a.z * b.x - a.x * b.z,
        z=a.x * b.y - a.y * b.x,
    )


def vector3_dot(a: Vector3, b: Vector3) -> float:
    """Скалярное произведение."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def vector3_magnitude(v: Vector3) -> float:
    """Евклидова норма: sqrt(dot(v, v))."""
    return math.sqrt(vector3_dot(v, v))


def vector3_normalize(v: Vector3) -> Vector3:
    """
    Единичный вектор того же направления.

    Returns:
        v / |v|, либо сам v если |v| == 0.0

    Examples:
        >>> vector3_normalize(Vector3(x=3, y=0, z=4))
        Vector3(x=0.6, y=0.0, z=0.8)
        >>> vector3_normalize(Vector3())
        Vector3(x=0.0, y=0.0, z=0.0)
    """
    mag = vector3_magnitude(v)
    if mag == 0.0:
        return v
    return Vector3(x=v.x / mag, y=v.y / mag, z=v.z / mag)


def vector3_is_close(
    a: Vector3,
    b: Vector3,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение с учётом толерантности.

    Returns:
        True если все три компоненты близки
    """
    return (
        is_close(a.x, b.x, rel_tol=rel_tol, abs_tol=abs_tol)
        and is_close(a.y, b.y, rel_tol=rel_tol, abs_tol=abs_tol)
        and is_close(a.z, b.z, rel_tol=rel_tol, abs_tol=abs_tol)
    )
