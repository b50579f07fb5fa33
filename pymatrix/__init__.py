"""
PyMatrix: dense column-major linear algebra for statistical computing.

A small kernel of matrix algorithms (norms, arithmetic, multiplication,
Householder QR) on flat column-major buffers, for regression and other
statistical routines to build upon.

Submodules:
    core: Exceptions, validation, result envelope, numeric kernels
    matrix: Validated public API (arithmetic, norms, QR decomposition)
"""

__version__ = "0.1.0"

from pymatrix import matrix

__all__ = [
    "__version__",
    "matrix",
]
