"""
Tolerance tiers for numerical validation.

Defines precision expectations for results computed in each working
precision:
- FP64 (float64 / complex128): near machine precision
- FP32 (float32 / complex64): relaxed for single-precision arithmetic

Ill-conditioned variants widen both tolerances. Used by the test suite
and by callers comparing factorization results (is_close).
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pycholesky.core.scalar import real_dtype


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, well-conditioned
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision (float64, complex128)',
)

# Double precision, ill-conditioned problems (cond > 1e4)
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='fp64_ill_conditioned',
    description='double precision, ill-conditioned (cond > 1e4)',
)

# Single precision, well-conditioned
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision (float32, complex64)',
)

# Single precision, ill-conditioned
FP32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp32_ill_conditioned',
    description='single precision, ill-conditioned',
)


def select_tolerance(
    dtype: DTypeLike,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select the tolerance tier for results computed in dtype."""
    if real_dtype(dtype) == np.float32:
        if is_ill_conditioned:
            return FP32_ILL_CONDITIONED
        return FP32
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64


def is_close(
    a: ArrayLike,
    b: ArrayLike,
    tier: ToleranceTier = FP64,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close under a tolerance tier.
    
    Uses the formula: |a - b| <= atol + rtol * |b|
    
    Returns:
        Boolean, or boolean array for array input
    """
    a = np.asarray(a)
    b = np.asarray(b)
    result = np.abs(a - b) <= tier.atol + tier.rtol * np.abs(b)
    if result.ndim == 0:
        return bool(result)
    return result
