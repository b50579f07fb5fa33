"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    OutOfRangeError,
    InvalidOperationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    # Kernels work on double-precision buffers only
    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_shape(rows: int, cols: int, name: str) -> None:
    """
    Verify a (rows, cols) pair describes a valid matrix.

    Args:
        rows: Row count
        cols: Column count
        name: Parameter name for error messages

    Raises:
        DimensionError: If either count is below one
    """
    if rows < 1 or cols < 1:
        raise DimensionError(
            f"{name}: matrix must have at least one row and one column, "
            f"got shape ({rows}, {cols})"
        )


def check_buffer_length(
    store: NDArray[np.floating[Any]],
    rows: int,
    cols: int,
    name: str,
) -> None:
    """
    Verify a column-major buffer holds exactly rows x cols values.

    Raises:
        DimensionError: If the buffer length disagrees with the shape
    """
    if store.shape[0] != rows * cols:
        raise DimensionError(
            f"{name}: buffer holds {store.shape[0]} values, "
            f"expected {rows * cols} for shape ({rows}, {cols})"
        )


def check_index(index: int, bound: int, axis: str, name: str) -> None:
    """
    Verify a row or column index lies in [0, bound).

    Raises:
        OutOfRangeError: If the index is outside the valid range
    """
    if index < 0 or index >= bound:
        raise OutOfRangeError(
            f"{name}: {axis} index {index} out of range [0, {bound})",
            index=index,
            bound=bound,
            axis=axis,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands share the same (rows, cols).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operand shapes differ, left={left}, right={right}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left column count equals the right row count.

    Raises:
        DimensionMismatchError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions disagree, left has {left[1]} columns "
            f"but right has {right[0]} rows",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_tall(rows: int, cols: int, operation: str) -> None:
    """
    Verify a matrix has at least as many rows as columns.

    Raises:
        InvalidOperationError: If rows < cols
    """
    if rows < cols:
        raise InvalidOperationError(
            f"{operation}: requires rows >= columns, got shape ({rows}, {cols}). "
            f"Decompose the transpose instead.",
            operation=operation,
            shape=(rows, cols),
        )
