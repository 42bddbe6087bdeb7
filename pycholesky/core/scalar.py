"""
Scalar abstraction over the four LAPACK element types.

Real (float32, float64) and complex (complex64, complex128) matrices go
through the same code paths; this module supplies the few element-level
operations that differ: conjugation, squared magnitude, and the real type
associated with an element type.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any


# Element types the backend kernel accepts
SUPPORTED_DTYPES: frozenset[np.dtype] = frozenset({
    np.dtype(np.float32),
    np.dtype(np.float64),
    np.dtype(np.complex64),
    np.dtype(np.complex128),
})


def is_supported(dtype: DTypeLike) -> bool:
    """True if dtype is one of the four LAPACK precisions."""
    return np.dtype(dtype) in SUPPORTED_DTYPES


def is_complex(dtype: DTypeLike) -> bool:
    """True for complex element types."""
    return np.issubdtype(np.dtype(dtype), np.complexfloating)


def real_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Real type associated with an element type.
    
    complex64 -> float32, complex128 -> float64; real types map to themselves.
    """
    return np.finfo(np.dtype(dtype)).dtype


def conj_inplace(a: NDArray[Any]) -> NDArray[Any]:
    """
    Conjugate a in place and return it.
    
    A no-op for real arrays, so callers need not branch on the element type.
    """
    if is_complex(a.dtype):
        np.conjugate(a, out=a)
    return a


def abs_sqr(a: NDArray[Any]) -> NDArray[np.floating[Any]]:
    """
    Squared magnitude |a|^2 element-wise, in the associated real type.
    
    Avoids the square root of np.abs for complex input.
    """
    if is_complex(a.dtype):
        return a.real * a.real + a.imag * a.imag
    return a * a
