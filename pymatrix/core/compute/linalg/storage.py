"""
Column-major matrix storage.

A matrix is a flat float64 buffer plus explicit (rows, cols). Entry (r, c)
of an R-row matrix lives at linear index R*c + r, so consecutive buffer
positions walk down a column.

Nothing here checks indices. Callers validate r and c first; this layer
is an addressing scheme, not a safety boundary.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


Buffer = NDArray[np.float64]


def allocate(rows: int, cols: int) -> Buffer:
    """Zero-filled buffer for a rows x cols matrix."""
    return np.zeros(rows * cols, dtype=np.float64)


def index(rows: int, cols: int, r: int, c: int) -> int:
    """Linear index of entry (r, c)."""
    return rows * c + r


def get_entry(store: Buffer, rows: int, cols: int, r: int, c: int) -> float:
    return float(store[rows * c + r])


def set_entry(store: Buffer, rows: int, cols: int, r: int, c: int, value: float) -> None:
    """Write entry (r, c) in place."""
    store[rows * c + r] = value


def copy(store: Buffer, rows: int, cols: int) -> Buffer:
    """Independent copy of a buffer."""
    return np.array(store, dtype=np.float64, copy=True)


def identity(n: int) -> Buffer:
    """n x n identity matrix."""
    store = allocate(n, n)
    # Diagonal entries sit n+1 apart
    store[::n + 1] = 1.0
    return store


def from_array(array: NDArray[np.floating[Any]]) -> tuple[Buffer, int, int]:
    """
    Column-major buffer from a 2-D array.

    Args:
        array: 2-D array indexed [row, column]

    Returns:
        (buffer, rows, cols); the buffer never aliases the input
    """
    rows, cols = array.shape
    store = np.array(array, dtype=np.float64, order='F', copy=True).ravel(order='F')
    return store, rows, cols


def to_array(store: Buffer, rows: int, cols: int) -> NDArray[np.float64]:
    """2-D array copy of a column-major buffer."""
    return np.array(store.reshape((rows, cols), order='F'), copy=True)


def row(store: Buffer, rows: int, cols: int, r: int) -> Buffer:
    """Copy of row r."""
    return np.array(store[r::rows], copy=True)


def column(store: Buffer, rows: int, cols: int, c: int) -> Buffer:
    """Copy of column c."""
    return np.array(store[rows * c:rows * (c + 1)], copy=True)


def format_matrix(store: Buffer, rows: int, cols: int) -> str:
    """
    Render a matrix as text, one braced line per row.

    >>> print(format_matrix(identity(2), 2, 2))
    {               1               0 }
    {               0               1 }
    """
    lines = []
    for r in range(rows):
        entries = " ".join(f"{store[rows * c + r]:15.12g}" for c in range(cols))
        lines.append("{ " + entries + " }")
    return "\n".join(lines)
