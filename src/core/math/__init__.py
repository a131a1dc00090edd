"""
Core math modules

Численные примитивы: целочисленные последовательности, матрицы, 3D векторы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Fixed-width bounds
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Fixed-width emulation
    wrap_int64,
    wrap_uint64,
    # Float comparison
    is_close,
)

# Integer Sequences
from src.core.math.integer_sequences import (
    FACTORIAL_INVALID_SENTINEL,
    FACTORIAL_MAX_N,
    factorial,
    factorial_checked,
    fibonacci,
    is_prime,
)

# Matrix Operations
from src.core.math.matrix_ops import (
    create_matrix,
    create_matrix_from_rows,
    determinant_checked,
    matrix_create,
    matrix_destroy,
    matrix_determinant,
    matrix_multiply,
    multiply_checked,
)

# Vector Operations
from src.core.math.vector_ops import (
    vector3_add,
    vector3_cross,
    vector3_dot,
    vector3_is_close,
    vector3_magnitude,
    vector3_normalize,
)

__all__ = [
    # Numerical Safeguards — Fixed-width bounds
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Fixed-width emulation
    "wrap_int64",
    "wrap_uint64",
    # Numerical Safeguards — Float comparison
    "is_close",
    # Integer Sequences — Constants
    "FACTORIAL_INVALID_SENTINEL",
    "FACTORIAL_MAX_N",
    # Integer Sequences — Functions
    "factorial",
    "factorial_checked",
    "fibonacci",
    "is_prime",
    # Matrix Operations
    "create_matrix",
    "create_matrix_from_rows",
    "determinant_checked",
    "matrix_create",
    "matrix_destroy",
    "matrix_determinant",
    "matrix_multiply",
    "multiply_checked",
    # Vector Operations
    "vector3_add",
    "vector3_cross",
    "vector3_dot",
    "vector3_is_close",
    "vector3_magnitude",
    "vector3_normalize",
]
