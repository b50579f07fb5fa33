"""
Dense matrix operations.

Public API:
    add(A, B), subtract(A, B), scale(alpha, A) -> MatrixDesign
    transpose(A), multiply(A, B) -> MatrixDesign
    one_norm(A), infinity_norm(A) -> float
    qr(X, ...) -> QRSolution

Every entry point accepts array-likes (nested rows) or MatrixDesign
instances. Validation happens here; the column-major kernels underneath
trust their inputs.

Example:
    >>> from pymatrix.matrix import qr, multiply
    >>> result = qr([[1, 2], [3, 4], [5, 6]])
    >>> result.solve([1.0, 2.0, 3.0])
"""

from pymatrix.matrix.design import MatrixDesign
from pymatrix.matrix.solution import QRSolution, QRParams
from pymatrix.matrix.solvers import (
    add,
    subtract,
    scale,
    transpose,
    multiply,
    one_norm,
    infinity_norm,
    qr,
)

__all__ = [
    "MatrixDesign",
    "QRSolution",
    "QRParams",
    "add",
    "subtract",
    "scale",
    "transpose",
    "multiply",
    "one_norm",
    "infinity_norm",
    "qr",
]
