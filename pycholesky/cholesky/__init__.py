"""
Cholesky decomposition of Hermitian (or real symmetric) positive definite
matrices, and the solves, inverses and determinants built on it.

Public API:
    cholesky, cholesky_into, cholesky_mut -> triangular factor
    factorizec, factorizec_into -> CholeskyFactorized (reusable)
    solvec, solvec_into, solvec_mut -> x with A @ x = b
    invc, invc_into -> A^-1
    detc, detc_into, logdetc, logdetc_into -> det(A), ln det(A)

Example:
    >>> import numpy as np
    >>> from pycholesky.cholesky import factorizec
    >>> from pycholesky.core.types import UPLO
    >>> a = np.array([[4., 12., -16.], [12., 37., -43.], [-16., -43., 98.]])
    >>> f = factorizec(a, UPLO.LOWER)
    >>> x = f.solvec([4., 13., -11.])
    >>> det = f.detc()
    >>> L = f.into_lower()
"""

from pycholesky.cholesky.factorized import CholeskyFactorized
from pycholesky.cholesky.decompose import (
    cholesky,
    cholesky_into,
    cholesky_mut,
    factorizec,
    factorizec_into,
)
from pycholesky.cholesky.solvers import (
    DEFAULT_UPLO,
    detc,
    detc_into,
    invc,
    invc_into,
    logdetc,
    logdetc_into,
    solvec,
    solvec_into,
    solvec_mut,
)

__all__ = [
    "CholeskyFactorized",
    "DEFAULT_UPLO",
    "cholesky",
    "cholesky_into",
    "cholesky_mut",
    "factorizec",
    "factorizec_into",
    "solvec",
    "solvec_into",
    "solvec_mut",
    "invc",
    "invc_into",
    "detc",
    "detc_into",
    "logdetc",
    "logdetc_into",
]
