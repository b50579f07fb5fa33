"""
CPU backends for QR decomposition.

HouseholderQRBackend is the reference implementation built on the
column-major kernels. LapackQRBackend goes through NumPy/LAPACK and
serves as an independent cross-check.
"""

from typing import Any

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg.qr import QRResult, qr_decompose, qr_lapack
from pymatrix.matrix.design import MatrixDesign
from pymatrix.matrix.solution import QRParams


def _rank_warnings(factors: QRResult) -> tuple[str, ...]:
    rank = factors.rank
    if rank < factors.cols:
        return (
            f"rank-deficient: rank={rank}, expected={factors.cols}; "
            f"least squares solves will fail",
        )
    return ()


class HouseholderQRBackend:
    """
    CPU backend using Householder reflections on column-major buffers.

    Implements the Backend protocol for MatrixDesign -> QRParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_householder'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        """
        Decompose the design matrix.

        Algorithm:
            1. Copy the buffer into a private R, set Qᵗ to identity
            2. One Householder reflection per column, applied to R and Qᵗ
            3. Rank from the R diagonal

        Raises:
            InvalidOperationError: If the design has fewer rows than columns
        """
        timer = Timer()
        timer.start()

        with timer.section('householder'):
            factors = qr_decompose(design.store, design.rows, design.cols)

        with timer.section('rank'):
            rank = factors.rank

        timer.stop()

        info: dict[str, Any] = {
            'method': 'householder',
            'rank': rank,
            'reflections': design.cols,
        }

        return Result(
            params=QRParams(factors=factors, rank=rank),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_rank_warnings(factors),
        )


class LapackQRBackend:
    """CPU backend using LAPACK (through numpy.linalg.qr)."""

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        timer = Timer()
        timer.start()

        with timer.section('lapack'):
            factors = qr_lapack(design.store, design.rows, design.cols)

        with timer.section('rank'):
            rank = factors.rank

        timer.stop()

        return Result(
            params=QRParams(factors=factors, rank=rank),
            info={'method': 'lapack', 'rank': rank},
            timing=timer.result(),
            backend_name=self.name,
            warnings=_rank_warnings(factors),
        )
