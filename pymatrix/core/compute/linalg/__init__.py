"""
Linear algebra kernels for PyMatrix.

Everything here works on flat column-major float64 buffers with explicit
(rows, cols). Entry (r, c) lives at index rows*c + r.

All functions follow these conventions:
    - Outputs are freshly allocated; inputs are never written
    - Functions that mutate a buffer in place say so, and touch only the
      segment they document
    - Shape errors are raised before any allocation

Submodules:
    storage: Allocation, addressing, conversion
    blas1: Strided vector kernels (norms, dot, axpy)
    dense: Matrix norms, element-wise arithmetic, transpose, multiply
    householder: Householder reflection generation and application
    qr: QR decomposition driver and least squares solve
"""

from pymatrix.core.compute.linalg.storage import (
    allocate,
    index,
    get_entry,
    set_entry,
    copy,
    identity,
    from_array,
    to_array,
    format_matrix,
)
from pymatrix.core.compute.linalg.dense import (
    one_norm,
    infinity_norm,
    add,
    subtract,
    scale,
    transpose,
    multiply,
)
from pymatrix.core.compute.linalg.householder import (
    generate_householder_reflection,
    apply_householder_reflection,
)
from pymatrix.core.compute.linalg.qr import (
    QRResult,
    qr_decompose,
    qr_lapack,
    qr_solve,
)

__all__ = [
    # Storage
    "allocate",
    "index",
    "get_entry",
    "set_entry",
    "copy",
    "identity",
    "from_array",
    "to_array",
    "format_matrix",
    # Dense kernels
    "one_norm",
    "infinity_norm",
    "add",
    "subtract",
    "scale",
    "transpose",
    "multiply",
    # Householder
    "generate_householder_reflection",
    "apply_householder_reflection",
    # QR decomposition
    "QRResult",
    "qr_decompose",
    "qr_lapack",
    "qr_solve",
]
