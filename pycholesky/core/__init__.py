"""
Core infrastructure for pycholesky.

This module provides the abstractions the Cholesky operations are built
from.

Key components:
    types: UPLO orientation tag, Layout tag
    exceptions: Exception hierarchy
    validation: Input validators
    scalar: Element-type helpers (conjugate, squared magnitude, real type)
    triangular: Zeroing / mirroring one triangle of a square matrix
    tolerances: Tolerance tiers per working precision
    protocols: CholeskyKernel backend contract
    backends: Backend selection and the LAPACK kernel
"""

from pycholesky.core.types import UPLO, Layout
from pycholesky.core.protocols import CholeskyKernel
from pycholesky.core.exceptions import (
    CholeskyError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidLayoutError,
    NumericalError,
    NotPositiveDefiniteError,
    SingularMatrixError,
)

__all__ = [
    # Tags
    "UPLO",
    "Layout",
    # Protocols
    "CholeskyKernel",
    # Exceptions
    "CholeskyError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidLayoutError",
    "NumericalError",
    "NotPositiveDefiniteError",
    "SingularMatrixError",
]
