"""
QR decomposition on column-major buffers.

The reference driver reduces A to upper-triangular R with one Householder
reflection per column while accumulating the same reflections into Qᵗ,
so that Qᵗ·A = R and A = Q·R. A LAPACK path (via NumPy) produces the
same result structure for cross-checking.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import SingularMatrixError, DimensionMismatchError
from pymatrix.core.validation import check_tall
from pymatrix.core.compute.tolerances import rank_tolerance
from pymatrix.core.compute.linalg.storage import (
    Buffer,
    copy,
    identity,
    from_array,
    to_array,
)
from pymatrix.core.compute.linalg.dense import transpose, multiply
from pymatrix.core.compute.linalg.householder import (
    generate_householder_reflection,
    apply_householder_reflection,
)


@dataclass(frozen=True, eq=False)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        r: Upper-triangular factor, column-major (rows x cols)
        qt: Transpose of the orthogonal factor, column-major (rows x rows)
        rows: Row count of the decomposed matrix
        cols: Column count of the decomposed matrix
    """
    r: Buffer
    qt: Buffer
    rows: int
    cols: int

    def q(self) -> Buffer:
        """Orthogonal factor Q (rows x rows), a new buffer."""
        return transpose(self.qt, self.rows, self.rows)

    def diagonal(self) -> NDArray[np.float64]:
        """Diagonal of R."""
        return np.array(self.r[::self.rows + 1][:self.cols], copy=True)

    @property
    def rank(self) -> int:
        """Numerical rank determined from the R diagonal."""
        diag_r = np.abs(self.diagonal())
        if len(diag_r) == 0:
            return 0
        max_diag = float(np.max(diag_r))
        if max_diag == 0.0:
            return 0
        tol = rank_tolerance(self.rows, self.cols, max_diag)
        return int(np.sum(diag_r > tol))

    def reconstruct(self) -> Buffer:
        """Q·R, which equals the decomposed matrix within rounding."""
        return multiply(self.q(), self.rows, self.rows, self.r, self.rows, self.cols)


def qr_decompose(store: Buffer, rows: int, cols: int) -> QRResult:
    """
    Householder QR decomposition.

    Algorithm, for each pivot column k = 0 .. cols-1:
        1. Generate the reflection P_k for rows k.. of column k
        2. Apply P_k to columns k+1.. of R
        3. Apply P_k to every column of Qᵗ (accumulates Qᵗ <- P_k·Qᵗ)
        4. Write the leading value onto the diagonal and exact zeros below

    The input buffer is never modified: R and Qᵗ are private working
    copies that are mutated in place and then returned.

    Args:
        store: Matrix to decompose, column-major (rows x cols)
        rows: Row count, must be >= cols
        cols: Column count

    Returns:
        QRResult with R (rows x cols) and Qᵗ (rows x rows)

    Raises:
        InvalidOperationError: If rows < cols, before anything is allocated
    """
    check_tall(rows, cols, 'qr_decompose')

    r = copy(store, rows, cols)
    qt = identity(rows)

    for k in range(cols):
        offset = rows * k + k
        length = rows - k
        a = generate_householder_reflection(r, offset, 1, length)

        for c in range(k + 1, cols):
            apply_householder_reflection(r, offset, 1, r, rows * c + k, 1, length)

        # Qᵗ is rows x rows, so it has rows columns
        for c in range(rows):
            apply_householder_reflection(r, offset, 1, qt, rows * c + k, 1, length)

        # The Householder vector is spent; column k becomes (a, 0, ..., 0)
        r[offset] = a
        r[offset + 1:offset + length] = 0.0

    return QRResult(r=r, qt=qt, rows=rows, cols=cols)


def qr_lapack(store: Buffer, rows: int, cols: int) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Same contract as qr_decompose; R is cleaned to exact zeros below the
    diagonal. Sign conventions for the diagonal may differ from the
    Householder driver.
    """
    check_tall(rows, cols, 'qr_lapack')

    Q, R = np.linalg.qr(to_array(store, rows, cols), mode='complete')
    R = np.triu(R)

    r, _, _ = from_array(R)
    qt, _, _ = from_array(Q.T)
    return QRResult(r=r, qt=qt, rows=rows, cols=cols)


def qr_solve(
    qr_result: QRResult,
    rhs: NDArray[np.floating[Any]],
    check_rank: bool = True,
) -> NDArray[np.float64]:
    """
    Solve least squares via a QR decomposition.

    Solves: min_x ||b - Ax||² given A = QR.

    The solution is computed as:
        x = R⁻¹ (Qᵗb)[:cols]

    Args:
        qr_result: Decomposition of A (rows x cols)
        rhs: Right-hand side b, shape (rows,) or (rows, m)
        check_rank: If True, raise SingularMatrixError on rank-deficient A

    Returns:
        Solution x with shape (cols,) or (cols, m)

    Raises:
        DimensionMismatchError: If rhs does not have rows entries
        SingularMatrixError: If A is rank-deficient and check_rank=True
    """
    from scipy.linalg import solve_triangular

    rows, cols = qr_result.rows, qr_result.cols
    b = np.asarray(rhs, dtype=np.float64)
    if b.shape[0] != rows:
        raise DimensionMismatchError(
            f"qr_solve: right-hand side has {b.shape[0]} rows, expected {rows}",
            left_shape=(rows, cols),
            right_shape=(b.shape[0], b.shape[1] if b.ndim > 1 else 1),
            operation='qr_solve',
        )

    rank = qr_result.rank
    if check_rank and rank < cols:
        raise SingularMatrixError(
            f"Matrix is rank-deficient: rank={rank}, expected={cols}. "
            f"The least squares solution is not unique.",
            matrix_name='A',
            rank=rank,
            expected_rank=cols,
        )

    Qt = to_array(qr_result.qt, rows, rows)
    R = to_array(qr_result.r, rows, cols)

    # Compute Qᵗb first, then back-substitute on the leading square block
    Qtb = Qt @ b
    return solve_triangular(R[:cols, :cols], Qtb[:cols], lower=False)
