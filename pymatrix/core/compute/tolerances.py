"""
Tolerance tiers for numerical validation.

Defines precision expectations for the compute paths:
- CPU FP64 Householder: the reference path
- CPU FP64 LAPACK: same tier, used to cross-check the reference
- Ill-conditioned inputs: relaxed tier

Used by the test suite and by the rank determination in the QR driver.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned input',
)

# cond(A) > 1e4
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Relative threshold multiplier for deciding that an R diagonal entry is zero.
RANK_EPSILON = float(np.finfo(np.float64).eps)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if not backend_name.startswith('cpu'):
        raise ValueError(f"Unknown backend: {backend_name!r}")
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64


def rank_tolerance(rows: int, cols: int, max_diagonal: float) -> float:
    """Absolute cutoff below which an R diagonal entry counts as zero."""
    return max(rows, cols) * RANK_EPSILON * max_diagonal
