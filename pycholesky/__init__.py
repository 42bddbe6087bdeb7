"""
pycholesky: Cholesky factorization for Python.

Factor a Hermitian (or real symmetric) positive definite matrix once and
reuse the factor for linear solves, the inverse and the determinant, with
a choice of how much of the caller's memory each operation may reuse.

Submodules:
    cholesky: Decomposition, factorization record, derived operations
    core: Tags, exceptions, validation, backend kernels
"""

__version__ = "0.1.0"

from pycholesky.core import (
    UPLO,
    Layout,
    CholeskyKernel,
    CholeskyError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidLayoutError,
    NumericalError,
    NotPositiveDefiniteError,
    SingularMatrixError,
)
from pycholesky.cholesky import (
    CholeskyFactorized,
    cholesky,
    cholesky_into,
    cholesky_mut,
    factorizec,
    factorizec_into,
    solvec,
    solvec_into,
    solvec_mut,
    invc,
    invc_into,
    detc,
    detc_into,
    logdetc,
    logdetc_into,
)

__all__ = [
    "__version__",
    # Tags
    "UPLO",
    "Layout",
    "CholeskyKernel",
    # Decomposition
    "CholeskyFactorized",
    "cholesky",
    "cholesky_into",
    "cholesky_mut",
    "factorizec",
    "factorizec_into",
    # Derived operations
    "solvec",
    "solvec_into",
    "solvec_mut",
    "invc",
    "invc_into",
    "detc",
    "detc_into",
    "logdetc",
    "logdetc_into",
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
