"""
Domain models and value objects.

Contains the matrix handle with its allocation tracking, the Vector3 value
type, and the typed Result used by checked operations.
"""

from src.core.domain.matrix import (
    AllocationTracker,
    Matrix,
    MatrixReleasedError,
    MatrixShape,
    get_default_tracker,
)
from src.core.domain.results import FailureReason, Result, ResultUnwrapError
from src.core.domain.vector import Vector3

__all__ = [
    # Matrix model
    "AllocationTracker",
    "Matrix",
    "MatrixReleasedError",
    "MatrixShape",
    "get_default_tracker",
    # Results
    "FailureReason",
    "Result",
    "ResultUnwrapError",
    # Vector model
    "Vector3",
]
