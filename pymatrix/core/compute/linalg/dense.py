"""
Dense matrix kernels on column-major buffers.

Norms (O(N^2)), element-wise arithmetic (O(N^2)), transpose (O(N^2)) and
matrix-matrix multiply (O(N^3)).

Every function returns a freshly allocated buffer and never writes to
its inputs. Shape agreement for add/subtract is the caller's contract;
the public boundary in pymatrix.matrix validates it before delegating here.
"""

import numpy as np

from pymatrix.core.compute.linalg.storage import Buffer, allocate
from pymatrix.core.compute.linalg.blas1 import nrm1, axpy
from pymatrix.core.exceptions import DimensionMismatchError


# === Norms ===

def one_norm(store: Buffer, rows: int, cols: int) -> float:
    """
    Matrix 1-norm: the largest absolute column sum.

    Each column is traversed with stride 1 from offset rows*c. An empty
    matrix has norm 0.0.
    """
    norm = 0.0
    for c in range(cols):
        csum = nrm1(store, rows * c, 1, rows)
        if csum > norm:
            norm = csum
    return norm


def infinity_norm(store: Buffer, rows: int, cols: int) -> float:
    """
    Matrix infinity-norm: the largest absolute row sum.

    Each row is traversed with stride rows from offset r. An empty
    matrix has norm 0.0.
    """
    norm = 0.0
    for r in range(rows):
        rsum = nrm1(store, r, rows, cols)
        if rsum > norm:
            norm = rsum
    return norm


# === Element-wise arithmetic ===

def add(a: Buffer, b: Buffer, rows: int, cols: int) -> Buffer:
    """A + B for two rows x cols buffers."""
    return np.add(a[:rows * cols], b[:rows * cols])


def subtract(a: Buffer, b: Buffer, rows: int, cols: int) -> Buffer:
    """A - B for two rows x cols buffers."""
    return np.subtract(a[:rows * cols], b[:rows * cols])


def scale(alpha: float, a: Buffer, rows: int, cols: int) -> Buffer:
    """alpha * A."""
    return np.multiply(alpha, a[:rows * cols])


def transpose(a: Buffer, rows: int, cols: int) -> Buffer:
    """
    Transpose of a rows x cols matrix.

    Returns a (cols x rows) buffer t with t[cols*r + c] == a[rows*c + r].
    """
    # Viewed as a C-ordered (cols, rows) array, a[c, r] is entry (r, c);
    # flatten() always copies.
    return a[:rows * cols].reshape((cols, rows)).T.flatten()


# === Multiplication ===

def multiply(
    a: Buffer, a_rows: int, a_cols: int,
    b: Buffer, b_rows: int, b_cols: int,
) -> Buffer:
    """
    Matrix product A·B.

    Column-oriented accumulation: output column j is the sum over k of
    column k of A scaled by B[k, j]. Terms with B[k, j] == 0.0 are skipped
    outright, which makes products with structured (triangular, banded,
    permutation) right operands cheaper without changing the result.

    Args:
        a: Left operand buffer (a_rows x a_cols)
        b: Right operand buffer (b_rows x b_cols)

    Returns:
        New (a_rows x b_cols) buffer

    Raises:
        DimensionMismatchError: If a_cols != b_rows
    """
    if a_cols != b_rows:
        raise DimensionMismatchError(
            f"multiply: inner dimensions disagree, left has {a_cols} columns "
            f"but right has {b_rows} rows",
            left_shape=(a_rows, a_cols),
            right_shape=(b_rows, b_cols),
            operation='multiply',
        )

    ab = allocate(a_rows, b_cols)
    for j in range(b_cols):
        ab_offset = a_rows * j
        b_offset = b_rows * j
        for k in range(a_cols):
            t = b[b_offset + k]
            if t != 0.0:
                axpy(t, a, a_rows * k, 1, ab, ab_offset, 1, a_rows)
    return ab
