"""
Matrix Design.

A design is a validated column-major buffer with its shape. It is the
only thing the public API hands to kernels: everything that reaches
pymatrix.core.compute.linalg has already been checked here.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.linalg.storage import (
    Buffer,
    from_array,
    to_array,
    get_entry,
    row,
    column,
    format_matrix,
)
from pymatrix.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_shape,
    check_buffer_length,
    check_index,
)


@dataclass(frozen=True, eq=False)
class MatrixDesign:
    """
    Validated dense matrix in column-major storage.

    Immutable after construction. The buffer is private to the design;
    constructors always copy their input.

    Construction:
        MatrixDesign.from_array([[1, 2], [3, 4]])          # nested rows
        MatrixDesign.from_array(np.arange(3.0))            # column vector
        MatrixDesign.from_buffer([1, 3, 2, 4], 2, 2)       # column-major values
    """
    _store: Buffer
    _rows: int
    _cols: int

    @classmethod
    def from_array(cls, X: ArrayLike, name: str = 'X') -> MatrixDesign:
        """Build a design from a 2-D array-like indexed [row, column]."""
        X_arr = check_array(X, name)
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        check_2d(X_arr, name)
        rows, cols = X_arr.shape
        check_shape(rows, cols, name)
        check_finite(X_arr, name)
        store, rows, cols = from_array(X_arr)
        return cls(_store=store, _rows=rows, _cols=cols)

    @classmethod
    def from_buffer(
        cls,
        store: ArrayLike,
        rows: int,
        cols: int,
        name: str = 'X',
    ) -> MatrixDesign:
        """Build a design from column-major values and an explicit shape."""
        store_arr = check_array(store, name)
        check_1d(store_arr, name)
        check_shape(rows, cols, name)
        check_buffer_length(store_arr, rows, cols, name)
        check_finite(store_arr, name)
        return cls._trusted(np.array(store_arr, copy=True), rows, cols)

    @classmethod
    def _trusted(cls, store: Buffer, rows: int, cols: int) -> MatrixDesign:
        """Wrap a kernel output buffer. The caller hands over ownership."""
        return cls(_store=store, _rows=rows, _cols=cols)

    # === Properties ===

    @property
    def store(self) -> Buffer:
        """Column-major buffer. Treat as read-only."""
        return self._store

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    # === Access ===

    def entry(self, r: int, c: int) -> float:
        """
        Value at (r, c).

        Raises:
            OutOfRangeError: If r or c lies outside the matrix
        """
        check_index(r, self._rows, 'row', 'entry')
        check_index(c, self._cols, 'column', 'entry')
        return get_entry(self._store, self._rows, self._cols, r, c)

    def row(self, r: int) -> NDArray[np.float64]:
        """Copy of row r."""
        check_index(r, self._rows, 'row', 'row')
        return row(self._store, self._rows, self._cols, r)

    def column(self, c: int) -> NDArray[np.float64]:
        """Copy of column c."""
        check_index(c, self._cols, 'column', 'column')
        return column(self._store, self._rows, self._cols, c)

    def to_array(self) -> NDArray[np.float64]:
        """2-D array copy indexed [row, column]."""
        return to_array(self._store, self._rows, self._cols)

    def __str__(self) -> str:
        return format_matrix(self._store, self._rows, self._cols)

    def __repr__(self) -> str:
        return f"MatrixDesign(rows={self._rows}, cols={self._cols})"
