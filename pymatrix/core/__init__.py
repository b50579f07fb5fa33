"""
Core infrastructure for PyMatrix.

Shared abstractions and numeric kernels used by the public matrix API.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, column-major linear algebra kernels
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    OutOfRangeError,
    InvalidOperationError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "OutOfRangeError",
    "InvalidOperationError",
    "NumericalError",
    "SingularMatrixError",
]
