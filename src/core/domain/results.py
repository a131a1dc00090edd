"""
Result — Типизированный результат операций ядра

Явная замена sentinel-значений (None / NaN / 0): каждая checked-операция
возвращает Result, который содержит либо вычисленное значение, либо
именованную причину отказа (FailureReason).

Причины отказа не смешиваются: DIMENSION_MISMATCH и ALLOCATION_FAILURE
различимы, хотя в sentinel API обе дают None.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class FailureReason(str, Enum):
    """Причина отказа checked-операции"""

    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
    ALLOCATION_FAILURE = "ALLOCATION_FAILURE"
    UNSUPPORTED_SIZE = "UNSUPPORTED_SIZE"
    INVALID_INPUT = "INVALID_INPUT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ResultUnwrapError(Exception):
    """
    Попытка извлечь значение из неуспешного Result.

    Атрибут reason содержит исходную причину отказа.
    """

    def __init__(self, reason: FailureReason, detail: str = ""):
        self.reason = reason
        self.detail = detail
        message = f"Result is a failure: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Результат операции: значение ИЛИ причина отказа.

    Создаётся только через Result.success / Result.failure.
    """

    value: Optional[T] = None
    failure: Optional[FailureReason] = None

    # Диагностика
    detail: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure_of(cls, reason: FailureReason, detail: str = "") -> "Result[T]":
        return cls(failure=reason, detail=detail)

    @property
    def ok(self) -> bool:
        """True если операция завершилась успешно."""
        return self.failure is None

    def unwrap(self) -> T:
        """
        Извлечение значения.

        Raises:
            ResultUnwrapError: Если Result содержит причину отказа
        """
        if self.failure is not None:
            raise ResultUnwrapError(self.failure, self.detail)
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Значение при успехе, иначе default."""
        if self.failure is not None:
            return default
        return self.value  # type: ignore[return-value]
