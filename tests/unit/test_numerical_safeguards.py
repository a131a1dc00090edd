"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Эмуляцию int64/uint64 (wrap при переполнении)
2. Epsilon-сравнения float
"""

import math

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    is_close,
    wrap_int64,
    wrap_uint64,
)

# =============================================================================
# ТЕСТЫ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================


class TestBounds:
    """Тесты констант границ"""

    def test_int64_bounds(self) -> None:
        assert INT64_MAX == 9223372036854775807
        assert INT64_MIN == -9223372036854775808
        assert INT64_MIN == -INT64_MAX - 1

    def test_uint64_max(self) -> None:
        assert UINT64_MAX == 18446744073709551615


class TestWrapUint64:
    """Тесты для wrap_uint64"""

    def test_in_range_unchanged(self) -> None:
        assert wrap_uint64(0) == 0
        assert wrap_uint64(12345) == 12345
        assert wrap_uint64(UINT64_MAX) == UINT64_MAX

    def test_overflow_wraps_to_zero(self) -> None:
        assert wrap_uint64(UINT64_MAX + 1) == 0
        assert wrap_uint64(UINT64_MAX + 6) == 5

    def test_negative_wraps_to_top(self) -> None:
        assert wrap_uint64(-1) == UINT64_MAX


class TestWrapInt64:
    """Тесты для wrap_int64"""

    def test_in_range_unchanged(self) -> None:
        assert wrap_int64(0) == 0
        assert wrap_int64(-42) == -42
        assert wrap_int64(INT64_MAX) == INT64_MAX
        assert wrap_int64(INT64_MIN) == INT64_MIN

    def test_positive_overflow_wraps_negative(self) -> None:
        """INT64_MAX + 1 → INT64_MIN (two's complement)"""
        assert wrap_int64(INT64_MAX + 1) == INT64_MIN
        assert wrap_int64(INT64_MAX + 2) == INT64_MIN + 1

    def test_negative_overflow_wraps_positive(self) -> None:
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX

    def test_result_always_fits(self) -> None:
        for value in (2**64, 2**70 + 3, -(2**65) - 7, 3 * INT64_MAX):
            assert INT64_MIN <= wrap_int64(value) <= INT64_MAX


# =============================================================================
# ТЕСТЫ FLOAT
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_far_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)

    def test_nan_never_close(self) -> None:
        assert not is_close(math.nan, math.nan)

