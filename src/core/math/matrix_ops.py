"""
Matrix Operations — Create, Destroy, Multiply, Determinant

Два уровня API:
- checked: create_matrix / create_matrix_from_rows / multiply_checked /
  determinant_checked возвращают Result с явной FailureReason
- sentinel: matrix_create / matrix_multiply (None при ошибке),
  matrix_determinant (NaN при ошибке) — тонкие обёртки над checked

ОГРАНИЧЕНИЯ:
1. Determinant реализован только для 1x1 и 2x2; 0x0 и большие
   квадратные матрицы → UNSUPPORTED_SIZE (NaN в sentinel API)
2. Умножение — классический тройной цикл, O(a.rows * b.cols * a.cols)
"""

import logging
import math
from typing import Optional

from pydantic import ValidationError

from src.core.domain.matrix import AllocationTracker, Matrix, MatrixShape
from src.core.domain.results import FailureReason, Result

logger = logging.getLogger(__name__)


# =============================================================================
# CREATE / DESTROY
# =============================================================================


def create_matrix(
    rows: int,
    cols: int,
    tracker: Optional[AllocationTracker] = None,
) -> Result[Matrix]:
    """
    Создание zero-filled матрицы rows x cols.

    Args:
        rows: Количество строк (>= 0)
        cols: Количество столбцов (>= 0)
        tracker: AllocationTracker (default: глобальный)

    Returns:
        Result с Matrix, либо:
        - INVALID_INPUT если размерность отрицательная или не int
        - ALLOCATION_FAILURE если буфер не удалось выделить
    """
    try:
        shape = MatrixShape(rows=rows, cols=cols)
    except ValidationError as e:
        logger.debug("matrix create rejected: rows=%r cols=%r", rows, cols)
        return Result.failure_of(FailureReason.INVALID_INPUT, str(e))

    try:
        return Result.success(Matrix(shape, tracker=tracker))
    except (MemoryError, OverflowError) as e:
        # OverflowError: rows * cols больше допустимой длины списка
        logger.debug("matrix allocation failed: %dx%d", rows, cols)
        return Result.failure_of(
            FailureReason.ALLOCATION_FAILURE,
            f"cannot allocate {rows}x{cols} matrix: {type(e).__name__}",
        )


def matrix_create(
    rows: int,
    cols: int,
    tracker: Optional[AllocationTracker] = None,
) -> Optional[Matrix]:
    """
    Sentinel-вариант create_matrix.

    Returns:
        Matrix или None при любой ошибке
    """
    return create_matrix(rows, cols, tracker=tracker).unwrap_or(None)


def create_matrix_from_rows(
    rows: list[list[float]],
    tracker: Optional[AllocationTracker] = None,
) -> Result[Matrix]:
    """
    Создание матрицы из прямоугольного вложенного списка.

    Returns:
        Result с Matrix, либо:
        - INVALID_INPUT если строки разной длины
        - ALLOCATION_FAILURE если буфер не удалось выделить
    """
    try:
        return Result.success(Matrix.from_rows(rows, tracker=tracker))
    except ValueError as e:
        return Result.failure_of(FailureReason.INVALID_INPUT, str(e))
    except (MemoryError, OverflowError) as e:
        logger.debug("matrix allocation from rows failed")
        return Result.failure_of(
            FailureReason.ALLOCATION_FAILURE,
            f"cannot allocate matrix from rows: {type(e).__name__}",
        )


def matrix_destroy(mat: Optional[Matrix]) -> None:
    """
    Освобождение матрицы. None допускается и игнорируется.

    Raises:
        MatrixReleasedError: При повторном освобождении
    """
    if mat is not None:
        mat.release()


# =============================================================================
# MULTIPLY
# =============================================================================


def multiply_checked(
    a: Matrix,
    b: Matrix,
    tracker: Optional[AllocationTracker] = None,
) -> Result[Matrix]:
    """
    Произведение матриц a (m x n) и b (n x p).

    Формула:
        out[i][j] = Σ_k a[i*a.cols + k] * b[k*b.cols + j]

    Args:
        a: Левая матрица
        b: Правая матрица
        tracker: AllocationTracker для результата (default: tracker матрицы a)

    Returns:
        Result с новой матрицей m x p, либо:
        - DIMENSION_MISMATCH если a.cols != b.rows (ничего не выделяется)
        - ALLOCATION_FAILURE если результат не удалось выделить

    Raises:
        MatrixReleasedError: Если a или b уже освобождены
    """
    a_rows, a_cols = a.dimensions()
    b_rows, b_cols = b.dimensions()
    if tracker is None:
        tracker = a.tracker

    if a_cols != b_rows:
        logger.debug(
            "matrix multiply dimension mismatch: %dx%d * %dx%d",
            a_rows, a_cols, b_rows, b_cols,
        )
        return Result.failure_of(
            FailureReason.DIMENSION_MISMATCH,
            f"a.cols={a_cols} != b.rows={b_rows}",
        )

    created = create_matrix(a_rows, b_cols, tracker=tracker)
    if not created.ok:
        return created
    result = created.unwrap()

    a_data = a.data
    b_data = b.data
    for i in range(a_rows):
        for j in range(b_cols):
            total = 0.0
            for k in range(a_cols):
                total += a_data[i * a_cols + k] * b_data[k * b_cols + j]
            result.set(i, j, total)

    return Result.success(result)


def matrix_multiply(
    a: Matrix,
    b: Matrix,
    tracker: Optional[AllocationTracker] = None,
) -> Optional[Matrix]:
    """
    Sentinel-вариант multiply_checked.

    Returns:
        Новая Matrix или None (несовместимые размеры / нет памяти)
    """
    return multiply_checked(a, b, tracker=tracker).unwrap_or(None)


# =============================================================================
# DETERMINANT
# =============================================================================


def determinant_checked(mat: Matrix) -> Result[float]:
    """
    Определитель для матриц 1x1 и 2x2.

    Returns:
        Result с определителем, либо:
        - INVALID_INPUT если матрица не квадратная
        - UNSUPPORTED_SIZE для 0x0 и квадратных матриц больше 2x2

    Raises:
        MatrixReleasedError: Если матрица уже освобождена
    """
    shape = mat.shape
    rows, cols = shape.rows, shape.cols

    if not shape.is_square:
        return Result.failure_of(
            FailureReason.INVALID_INPUT, f"non-square matrix {rows}x{cols}"
        )

    data = mat.data
    if rows == 1:
        return Result.success(data[0])
    if rows == 2:
        return Result.success(data[0] * data[3] - data[1] * data[2])

    return Result.failure_of(
        FailureReason.UNSUPPORTED_SIZE,
        f"determinant not implemented for {rows}x{cols}",
    )


def matrix_determinant(mat: Matrix) -> float:
    """
    Sentinel-вариант determinant_checked.

    Returns:
        Определитель или NaN (не квадратная / неподдерживаемый размер)

    Examples:
        >>> m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        >>> matrix_determinant(m)
        -2.0
        >>> m.release()
    """
    return determinant_checked(mat).unwrap_or(math.nan)
