"""
Numerical Safeguards — Fixed-Width Arithmetic & Float Comparison

Модуль обеспечивает численное поведение примитивов ядра:
- Эмуляция целочисленной арифметики фиксированной ширины (int64/uint64)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap_int64/wrap_uint64 воспроизводят two's complement переполнение
2. Python int никогда не растёт за пределы эмулируемой ширины
3. Float сравнения всегда учитывают машинную точность
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1

_UINT64_MODULUS: Final[int] = 2**64

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ЭМУЛЯЦИЯ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================


def wrap_uint64(value: int) -> int:
    """
    Приведение целого к диапазону uint64 (по модулю 2**64).

    Examples:
        >>> wrap_uint64(5)
        5
        >>> wrap_uint64(2**64)
        0
        >>> wrap_uint64(-1)
        18446744073709551615
    """
    return value % _UINT64_MODULUS


def wrap_int64(value: int) -> int:
    """
    Приведение целого к диапазону int64 (two's complement wrap).

    Повторяет поведение знакового 64-битного сложения при переполнении:
    значения за INT64_MAX "заворачиваются" в отрицательную область.

    Examples:
        >>> wrap_int64(INT64_MAX)
        9223372036854775807
        >>> wrap_int64(INT64_MAX + 1)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    unsigned = wrap_uint64(value)
    if unsigned > INT64_MAX:
        return unsigned - _UINT64_MODULUS
    return unsigned


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
