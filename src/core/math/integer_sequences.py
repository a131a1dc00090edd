"""
Integer Sequences — Fibonacci, Factorial, Primality

Вычисления над целыми фиксированной ширины:
- fibonacci: int64, переполнение "заворачивается" (two's complement)
- factorial: uint64, вход ограничен сверху FACTORIAL_MAX_N
- is_prime: trial division нечётными делителями до floor(sqrt(n))

ИЗВЕСТНЫЕ ОГРАНИЧЕНИЯ (сохраняются намеренно):
1. fibonacci(n) для n >= 93 выходит за int64 и возвращает wrapped значение
2. factorial(n) для n > 20 возвращает 20! (cap), а не ошибку
3. factorial(n < 0) возвращает 0 как sentinel "invalid input"
"""

import logging
import math
from typing import Final

from src.core.domain.results import FailureReason, Result
from src.core.math.numerical_safeguards import wrap_int64, wrap_uint64

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Наибольший n, для которого n! помещается в uint64.
# Для n > FACTORIAL_MAX_N factorial возвращает FACTORIAL_MAX_N!
FACTORIAL_MAX_N: Final[int] = 20

# Sentinel для отрицательного входа factorial
FACTORIAL_INVALID_SENTINEL: Final[int] = 0


# =============================================================================
# FIBONACCI
# =============================================================================


def fibonacci(n: int) -> int:
    """
    n-й член последовательности Фибоначчи (F0 = 0, F1 = 1).

    Итеративный O(n) алгоритм с двумя аккумуляторами. Каждое сложение
    выполняется в int64: для n >= 93 результат переполняется и
    "заворачивается" — это известное ограничение, а не ошибка.

    Args:
        n: Индекс члена последовательности

    Returns:
        n при n <= 1 (включая отрицательные n), иначе F(n) в int64

    Examples:
        >>> fibonacci(10)
        55
        >>> fibonacci(-3)
        -3
        >>> fibonacci(93) < 0
        True
    """
    if n <= 1:
        return n

    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, wrap_int64(a + b)
    return b


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> int:
    """
    Факториал с uint64-аккумулятором и cap на FACTORIAL_MAX_N.

    Args:
        n: Аргумент

    Returns:
        - 0 (sentinel) если n < 0
        - 1 если n <= 1
        - произведение 2..min(n, 20) иначе; для n > 20 ровно 20!

    Examples:
        >>> factorial(5)
        120
        >>> factorial(-1)
        0
        >>> factorial(25) == factorial(20)
        True
    """
    if n < 0:
        return FACTORIAL_INVALID_SENTINEL
    if n <= 1:
        return 1

    result = 1
    for i in range(2, min(n, FACTORIAL_MAX_N) + 1):
        result = wrap_uint64(result * i)
    return result


def factorial_checked(n: int) -> Result[int]:
    """
    Factorial с типизированным результатом.

    Отрицательный вход → FailureReason.INVALID_INPUT вместо sentinel 0.
    Cap на 20! сохраняется: factorial_checked(25).unwrap() == 20!

    Examples:
        >>> factorial_checked(-1).failure
        <FailureReason.INVALID_INPUT: 'INVALID_INPUT'>
        >>> factorial_checked(5).unwrap()
        120
    """
    if n < 0:
        logger.debug("factorial rejected negative input: %d", n)
        return Result.failure_of(
            FailureReason.INVALID_INPUT, f"factorial of negative n={n}"
        )
    return Result.success(factorial(n))


# =============================================================================
# PRIMALITY
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Тест простоты перебором нечётных делителей.

    Алгоритм:
        n < 2 → False; n == 2 → True; чётное n → False;
        иначе проверка делителей 3, 5, 7, ... пока i * i <= n

    Examples:
        >>> is_prime(17)
        True
        >>> is_prime(18)
        False
        >>> is_prime(1)
        False
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    limit = math.isqrt(n)
    for i in range(3, limit + 1, 2):
        if n % i == 0:
            return False
    return True
