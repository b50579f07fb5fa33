"""
QR backends.

Available backends:
    HouseholderQRBackend: CPU reference implementation (column-major kernels)
    LapackQRBackend: CPU implementation via NumPy/LAPACK
"""

from pymatrix.matrix.backends.cpu import HouseholderQRBackend, LapackQRBackend

__all__ = [
    "HouseholderQRBackend",
    "LapackQRBackend",
]
