"""
Matrix — Плотная матрица с владением буфером

Row-major матрица double-значений. Каждый экземпляр Matrix — единственный
владелец своего буфера из rows * cols элементов (zero-initialized).

Жизненный цикл:
- создание: src.core.math.matrix_ops.create_matrix / matrix_create
- освобождение: release() или выход из `with`-блока
- после освобождения любой доступ → MatrixReleasedError
- повторное release() → MatrixReleasedError

AllocationTracker считает живые буферы: после корректной работы
live_count возвращается к исходному значению.
"""

import logging
import threading
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixReleasedError(RuntimeError):
    """Использование или повторное освобождение уже освобождённой матрицы."""

    pass


# =============================================================================
# SHAPE
# =============================================================================


class MatrixShape(BaseModel):
    """
    Размерность матрицы.

    Нулевые rows/cols допустимы (пустой буфер), отрицательные — нет.
    """

    rows: int = Field(..., ge=0, strict=True, description="Количество строк")
    cols: int = Field(..., ge=0, strict=True, description="Количество столбцов")

    model_config = {"frozen": True}  # Immutable

    @property
    def size(self) -> int:
        """Длина буфера: rows * cols."""
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols


# =============================================================================
# ALLOCATION TRACKER
# =============================================================================


class AllocationTracker:
    """
    Учёт выделенных и освобождённых буферов матриц.

    Используется тестовым harness'ом для проверки отсутствия утечек:
    каждое создание должно сопровождаться ровно одним освобождением.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._allocations = 0
        self._releases = 0
        self._live_elements = 0

    def record_allocation(self, size: int) -> None:
        with self._lock:
            self._allocations += 1
            self._live_elements += size

    def record_release(self, size: int) -> None:
        with self._lock:
            self._releases += 1
            self._live_elements -= size

    @property
    def allocations(self) -> int:
        with self._lock:
            return self._allocations

    @property
    def releases(self) -> int:
        with self._lock:
            return self._releases

    @property
    def live_count(self) -> int:
        """Количество ещё не освобождённых матриц."""
        with self._lock:
            return self._allocations - self._releases

    @property
    def live_elements(self) -> int:
        """Суммарная длина ещё не освобождённых буферов."""
        with self._lock:
            return self._live_elements


# Глобальный tracker по умолчанию
_DEFAULT_TRACKER = AllocationTracker()


def get_default_tracker() -> AllocationTracker:
    """Tracker, используемый при создании матриц без явного tracker."""
    return _DEFAULT_TRACKER


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Owned handle плотной row-major матрицы.

    Прямое создание через конструктор допустимо, но обычный путь —
    create_matrix (возвращает Result) или matrix_create (возвращает None
    при ошибке). Конструктор пробрасывает MemoryError при невозможности
    выделить буфер.

    Scoped ownership:

        with create_matrix(2, 2).unwrap() as m:
            m.set(0, 0, 1.0)
        # m освобождена на любом пути выхода из блока
    """

    __slots__ = ("_shape", "_data", "_tracker", "_released")

    def __init__(
        self,
        shape: MatrixShape,
        tracker: Optional[AllocationTracker] = None,
    ) -> None:
        self._tracker = tracker if tracker is not None else get_default_tracker()
        self._data: list[float] = [0.0] * shape.size
        self._shape = shape
        self._released = False
        self._tracker.record_allocation(shape.size)
        logger.debug("matrix allocated: %dx%d", shape.rows, shape.cols)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def released(self) -> bool:
        return self._released

    @property
    def tracker(self) -> AllocationTracker:
        """Tracker, в котором учтён буфер этой матрицы."""
        return self._tracker

    def release(self) -> None:
        """
        Освобождение буфера. Допустимо ровно один раз.

        Raises:
            MatrixReleasedError: При повторном освобождении
        """
        if self._released:
            raise MatrixReleasedError("matrix already released (double release)")
        size = self._shape.size
        self._data = []
        self._released = True
        self._tracker.record_release(size)
        logger.debug("matrix released: %dx%d", self._shape.rows, self._shape.cols)

    def __enter__(self) -> "Matrix":
        self._ensure_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Явный release() внутри блока уже выполнил освобождение
        if not self._released:
            self.release()

    def _ensure_live(self) -> None:
        if self._released:
            raise MatrixReleasedError("matrix used after release")

    # Handle не копируется: копия разделяла бы буфер и освобождала его повторно
    def __copy__(self):
        raise TypeError("Matrix handles are move-only and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Matrix handles are move-only and cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError("Matrix handles are move-only and cannot be pickled")

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> MatrixShape:
        self._ensure_live()
        return self._shape

    @property
    def rows(self) -> int:
        self._ensure_live()
        return self._shape.rows

    @property
    def cols(self) -> int:
        self._ensure_live()
        return self._shape.cols

    def dimensions(self) -> tuple[int, int]:
        """(rows, cols)"""
        self._ensure_live()
        return (self._shape.rows, self._shape.cols)

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._shape.rows and 0 <= col < self._shape.cols

    def get(self, row: int, col: int) -> Optional[float]:
        """
        Чтение элемента.

        Returns:
            Значение или None, если индекс вне диапазона
            (отрицательные индексы считаются вне диапазона)
        """
        self._ensure_live()
        if not self._in_bounds(row, col):
            return None
        return self._data[row * self._shape.cols + col]

    def set(self, row: int, col: int, value: float) -> bool:
        """
        Запись элемента.

        Returns:
            True при успехе, False если индекс вне диапазона
        """
        self._ensure_live()
        if not self._in_bounds(row, col):
            return False
        self._data[row * self._shape.cols + col] = float(value)
        return True

    @property
    def data(self) -> tuple[float, ...]:
        """Снимок буфера в row-major порядке (копия, не alias)."""
        self._ensure_live()
        return tuple(self._data)

    def to_rows(self) -> list[list[float]]:
        self._ensure_live()
        cols = self._shape.cols
        return [self._data[i * cols : (i + 1) * cols] for i in range(self._shape.rows)]

    @classmethod
    def from_rows(
        cls,
        rows: list[list[float]],
        tracker: Optional[AllocationTracker] = None,
    ) -> "Matrix":
        """
        Создание матрицы из прямоугольного вложенного списка.

        Пустой список даёт матрицу 0x0. В отличие от create_matrix, ошибки
        не превращаются в Result: для этого есть
        src.core.math.matrix_ops.create_matrix_from_rows.

        Raises:
            ValueError: Если строки разной длины
            MemoryError: Если буфер не удалось выделить
        """
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise ValueError(
                    f"ragged rows: row {i} has {len(row)} columns, expected {n_cols}"
                )

        mat = cls(MatrixShape(rows=n_rows, cols=n_cols), tracker=tracker)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                mat._data[i * n_cols + j] = float(value)
        return mat

    def __repr__(self) -> str:
        if self._released:
            return "Matrix(<released>)"
        return f"Matrix(rows={self._shape.rows}, cols={self._shape.cols})"
