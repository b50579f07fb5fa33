"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_shape / check_buffer_length: matrix shape invariants
    - check_index: entry bounds
    - check_same_shape / check_inner_dimensions: operand compatibility
    - check_tall: rows >= cols precondition
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidOperationError,
    OutOfRangeError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_buffer_length,
    check_finite,
    check_index,
    check_inner_dimensions,
    check_same_shape,
    check_shape,
    check_tall,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "X")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "X")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "X")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "X")


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "store")

    def test_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape invariants
# ═══════════════════════════════════════════════════════════════════════


class TestCheckShape:

    def test_valid(self):
        check_shape(1, 1, "X")

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_rejects_empty(self, rows, cols):
        with pytest.raises(DimensionError, match="at least one row"):
            check_shape(rows, cols, "X")

    def test_buffer_length_matches(self):
        check_buffer_length(np.zeros(6), 3, 2, "store")

    def test_buffer_length_mismatch(self):
        with pytest.raises(DimensionError, match="holds 5 values, expected 6"):
            check_buffer_length(np.zeros(5), 3, 2, "store")


class TestCheckIndex:

    def test_in_range(self):
        check_index(0, 3, "row", "entry")
        check_index(2, 3, "row", "entry")

    @pytest.mark.parametrize("index", [-1, 3])
    def test_out_of_range(self, index):
        with pytest.raises(OutOfRangeError) as exc_info:
            check_index(index, 3, "column", "entry")
        assert exc_info.value.index == index
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "column"


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestOperandShapes:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_same_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.operation == "add"
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5), "multiply")

    def test_inner_dimensions_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="inner dimensions"):
            check_inner_dimensions((2, 3), (2, 3), "multiply")


class TestCheckTall:

    def test_square_passes(self):
        check_tall(3, 3, "qr")

    def test_wide_fails(self):
        with pytest.raises(InvalidOperationError, match="transpose") as exc_info:
            check_tall(2, 3, "qr")
        assert exc_info.value.shape == (2, 3)
