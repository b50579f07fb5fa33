"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.result import Result
from pymatrix.core.validation import check_array, check_finite
from pymatrix.core.compute.linalg.storage import Buffer, to_array
from pymatrix.core.compute.linalg.qr import QRResult, qr_solve

if TYPE_CHECKING:
    from pymatrix.matrix.design import MatrixDesign


@dataclass(frozen=True, eq=False)
class QRParams:
    """
    Parameter payload for QR decomposition.

    This is the immutable data computed by backends.
    """
    factors: QRResult
    rank: int


@dataclass
class QRSolution:
    """
    User-facing QR decomposition results.

    Wraps the backend Result and exposes the factors as 2-D arrays,
    plus least squares solves against them.
    """
    _result: Result[QRParams]
    _design: 'MatrixDesign'

    @property
    def factors(self) -> QRResult:
        """Column-major factors as produced by the backend."""
        return self._result.params.factors

    @property
    def r(self) -> NDArray[np.float64]:
        """Upper-triangular factor R (rows x cols)."""
        f = self.factors
        return to_array(f.r, f.rows, f.cols)

    @property
    def qt(self) -> NDArray[np.float64]:
        """Transposed orthogonal factor Qᵗ (rows x rows)."""
        f = self.factors
        return to_array(f.qt, f.rows, f.rows)

    @property
    def q(self) -> NDArray[np.float64]:
        """Orthogonal factor Q (rows x rows)."""
        f = self.factors
        return to_array(f.q(), f.rows, f.rows)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def shape(self) -> tuple[int, int]:
        return self._design.shape

    def reconstruct(self) -> NDArray[np.float64]:
        """Q·R as a 2-D array."""
        f = self.factors
        product: Buffer = f.reconstruct()
        return to_array(product, f.rows, f.cols)

    def solve(self, b: ArrayLike) -> NDArray[np.float64]:
        """
        Least squares solution of A x ≈ b.

        Args:
            b: Right-hand side, shape (rows,) or (rows, m)

        Returns:
            x with shape (cols,) or (cols, m)

        Raises:
            ValidationError: If b is non-numeric or non-finite
            DimensionMismatchError: If b does not have rows entries
            SingularMatrixError: If A is rank-deficient
        """
        b_arr = check_array(b, 'b')
        check_finite(b_arr, 'b')
        return qr_solve(self.factors, b_arr, check_rank=True)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable summary of the decomposition."""
        rows, cols = self.shape
        lines = [
            "QR Decomposition",
            "=" * 60,
            f"Rows: {rows}",
            f"Columns: {cols}",
            f"Rank: {self.rank}",
            "",
            "Diagonal of R:",
            "-" * 60,
        ]
        for i, d in enumerate(self.factors.diagonal()):
            lines.append(f"  R[{i},{i}]: {d:14.6f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"QRSolution(rows={rows}, cols={cols}, rank={self.rank})"
