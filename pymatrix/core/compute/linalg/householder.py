"""
Householder reflections.

A reflection P = I - 2uuᵗ with unit vector u maps a vector x onto
a·e1, where |a| = ‖x‖. It is the building block of the QR driver: one
reflection per pivot column zeroes everything below the diagonal.

Storage convention: generate_householder_reflection overwrites the
segment holding x with u itself (unit length, all entries explicit).
apply_householder_reflection reconstructs P from exactly that form.
"""

from pymatrix.core.compute.linalg.storage import Buffer
from pymatrix.core.compute.linalg.blas1 import segment, nrm2, dot, axpy


def generate_householder_reflection(
    store: Buffer,
    offset: int,
    stride: int,
    length: int,
) -> float:
    """
    Build the reflection that collapses a segment onto its first entry.

    On entry the segment holds x. On exit it holds the unit vector u with
    (I - 2uuᵗ)x = a·e1. Mutates store in place.

    The sign of a is opposite to x[0] (a = +‖x‖ when x[0] <= 0), so
    forming u = x - a·e1 never subtracts nearly equal numbers.

    Args:
        store: Buffer holding the segment
        offset: Index of x[0]
        stride: Distance between consecutive entries
        length: Number of entries

    Returns:
        a, the leading value of the reflected vector. 0.0 for an empty or
        all-zero segment, in which case the segment is left as zeros and
        the stored reflection acts as the identity.
    """
    a = nrm2(store, offset, stride, length)
    if a == 0.0:
        return 0.0

    x0 = store[offset]
    if x0 > 0.0:
        a = -a

    # u = x - a·e1; u[0] = x0 - a shares the sign of x0, so no cancellation.
    # nrm2 is scaled, so the divisor is finite and nonzero for any finite x.
    store[offset] = x0 - a
    u = segment(store, offset, stride, length)
    u /= nrm2(store, offset, stride, length)

    return float(a)


def apply_householder_reflection(
    u_store: Buffer, u_offset: int, u_stride: int,
    y_store: Buffer, y_offset: int, y_stride: int,
    length: int,
) -> None:
    """
    Replace a segment y with P·y = y - 2(uᵗy)u.

    u must be a segment written by generate_householder_reflection.
    Mutates y_store in place; u_store is only read (it may be the same
    buffer as y_store as long as the segments do not overlap).
    """
    s = dot(u_store, u_offset, u_stride, y_store, y_offset, y_stride, length)
    axpy(-2.0 * s, u_store, u_offset, u_stride, y_store, y_offset, y_stride, length)
