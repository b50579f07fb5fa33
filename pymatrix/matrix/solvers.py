"""
Public entry points for dense matrix operations.

This module is the validation boundary: operands are converted to
MatrixDesign and shape-checked here, then handed to the column-major
kernels, which trust their inputs.
"""

import warnings
from typing import Literal, Union
from numpy.typing import ArrayLike

from pymatrix.core.validation import (
    check_array,
    check_finite,
    check_ndim,
    check_same_shape,
    check_inner_dimensions,
    check_tall,
)
from pymatrix.core.compute.linalg import dense
from pymatrix.matrix.design import MatrixDesign
from pymatrix.matrix.solution import QRSolution
from pymatrix.matrix.backends.cpu import HouseholderQRBackend, LapackQRBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_householder', 'cpu_lapack']

MatrixLike = Union[MatrixDesign, ArrayLike]


def as_design(A: MatrixLike, name: str = 'A') -> MatrixDesign:
    """Return A unchanged if it is a design, else validate and wrap it."""
    if isinstance(A, MatrixDesign):
        return A
    return MatrixDesign.from_array(A, name=name)


# === Norms ===

def one_norm(A: MatrixLike) -> float:
    """Largest absolute column sum of A."""
    a = as_design(A)
    return dense.one_norm(a.store, a.rows, a.cols)


def infinity_norm(A: MatrixLike) -> float:
    """Largest absolute row sum of A."""
    a = as_design(A)
    return dense.infinity_norm(a.store, a.rows, a.cols)


# === Arithmetic ===

def add(A: MatrixLike, B: MatrixLike) -> MatrixDesign:
    """
    A + B.

    Raises:
        DimensionMismatchError: If A and B differ in shape
    """
    a, b = as_design(A, 'A'), as_design(B, 'B')
    check_same_shape(a.shape, b.shape, 'add')
    return MatrixDesign._trusted(dense.add(a.store, b.store, a.rows, a.cols), a.rows, a.cols)


def subtract(A: MatrixLike, B: MatrixLike) -> MatrixDesign:
    """
    A - B.

    Raises:
        DimensionMismatchError: If A and B differ in shape
    """
    a, b = as_design(A, 'A'), as_design(B, 'B')
    check_same_shape(a.shape, b.shape, 'subtract')
    return MatrixDesign._trusted(dense.subtract(a.store, b.store, a.rows, a.cols), a.rows, a.cols)


def scale(alpha: float, A: MatrixLike) -> MatrixDesign:
    """
    alpha * A.

    Raises:
        ValidationError: If alpha is not a finite real number
    """
    alpha_arr = check_array(alpha, 'alpha')
    check_ndim(alpha_arr, 0, 'alpha')
    check_finite(alpha_arr, 'alpha')
    a = as_design(A)
    return MatrixDesign._trusted(dense.scale(float(alpha_arr), a.store, a.rows, a.cols), a.rows, a.cols)


def transpose(A: MatrixLike) -> MatrixDesign:
    """Aᵗ as a new (cols x rows) matrix."""
    a = as_design(A)
    return MatrixDesign._trusted(dense.transpose(a.store, a.rows, a.cols), a.cols, a.rows)


def multiply(A: MatrixLike, B: MatrixLike) -> MatrixDesign:
    """
    Matrix product A·B.

    Raises:
        DimensionMismatchError: If A's column count differs from B's row count
    """
    a, b = as_design(A, 'A'), as_design(B, 'B')
    check_inner_dimensions(a.shape, b.shape, 'multiply')
    product = dense.multiply(a.store, a.rows, a.cols, b.store, b.rows, b.cols)
    return MatrixDesign._trusted(product, a.rows, b.cols)


# === Decomposition ===

def qr(
    X: MatrixLike,
    *,
    backend: BackendChoice = 'auto',
) -> QRSolution:
    """
    QR decomposition of a matrix with at least as many rows as columns.

    Computes Qᵗ·X = R with R upper-triangular and Q orthogonal.

    Args:
        X: Matrix (rows x cols), array-like or MatrixDesign
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_householder': Householder reflections
              on column-major buffers (reference)
            - 'cpu_lapack': NumPy/LAPACK

    Returns:
        QRSolution with R, Qᵗ, Q, rank and a least squares solve()

    Raises:
        ValidationError: If X is invalid
        InvalidOperationError: If X has fewer rows than columns. Decompose
            the transpose instead.

    Example:
        >>> from pymatrix.matrix import qr
        >>> result = qr([[1, 2], [3, 4], [5, 6]])
        >>> result.r.shape
        (3, 2)
    """
    # === Input Validation ===
    design = as_design(X, 'X')
    check_tall(design.rows, design.cols, 'qr')

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(f"QR of {design.rows}x{design.cols} matrix is {message}",
                      RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return QRSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_householder'):
        return HouseholderQRBackend()

    elif choice == 'cpu_lapack':
        return LapackQRBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
