"""
Level-1 kernels over strided buffer segments.

A segment is (store, offset, stride, length): the entries
store[offset], store[offset + stride], ..., length of them. Stride 1
walks down a column; stride = rows walks along a row.

Functions that mutate say so. Segments are numpy views, so in-place
updates land in the owning buffer.
"""

import numpy as np

from pymatrix.core.compute.linalg.storage import Buffer


def segment(store: Buffer, offset: int, stride: int, length: int) -> Buffer:
    """View of a strided segment."""
    return store[offset:offset + stride * length:stride]


def nrm1(store: Buffer, offset: int, stride: int, length: int) -> float:
    """Sum of absolute values of a segment."""
    if length == 0:
        return 0.0
    return float(np.sum(np.abs(segment(store, offset, stride, length))))


def nrm2(store: Buffer, offset: int, stride: int, length: int) -> float:
    """
    Euclidean norm of a segment.

    Entries are scaled by the largest magnitude before squaring, so the
    result neither overflows nor underflows when the norm itself is
    representable.
    """
    if length == 0:
        return 0.0
    x = segment(store, offset, stride, length)
    m = float(np.max(np.abs(x)))
    if m == 0.0:
        return 0.0
    scaled = x / m
    return m * float(np.sqrt(np.dot(scaled, scaled)))


def dot(
    x_store: Buffer, x_offset: int, x_stride: int,
    y_store: Buffer, y_offset: int, y_stride: int,
    length: int,
) -> float:
    """Inner product of two segments."""
    if length == 0:
        return 0.0
    x = segment(x_store, x_offset, x_stride, length)
    y = segment(y_store, y_offset, y_stride, length)
    return float(np.dot(x, y))


def axpy(
    alpha: float,
    x_store: Buffer, x_offset: int, x_stride: int,
    y_store: Buffer, y_offset: int, y_stride: int,
    length: int,
) -> None:
    """y <- alpha*x + y. Mutates y_store in place."""
    if length == 0 or alpha == 0.0:
        return
    y = segment(y_store, y_offset, y_stride, length)
    y += alpha * segment(x_store, x_offset, x_stride, length)
