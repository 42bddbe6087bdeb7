"""
Single-call operations on a Hermitian (or real symmetric) positive
definite matrix.

Each function factorizes A with uplo=UPLO.UPPER, so only the upper
triangle of A is read, then delegates to the matching
CholeskyFactorized method. Callers that want the lower triangle, or that
need several operations on the same A, should call factorizec() once and
use the record instead.

Ownership variants:
    solvec(a, b)        a and b borrowed, x newly allocated
    solvec_into(a, b)   b taken over, x returned in b's buffer
    solvec_mut(a, b)    b overwritten with x
    invc(a)             a borrowed
    invc_into(a)        a taken over, inverse returned in a's buffer
    detc(a), logdetc(a)             a borrowed
    detc_into(a), logdetc_into(a)   a taken over

Factorization errors (NotSquareError, InvalidLayoutError,
NotPositiveDefiniteError) propagate unchanged.

Example:
    >>> import numpy as np
    >>> from pycholesky import detc, solvec
    >>> a = np.array([[4., 12., -16.], [12., 37., -43.], [-16., -43., 98.]])
    >>> round(float(detc(a)), 9)
    36.0
    >>> np.allclose(solvec(a, [4., 13., -11.]), [-2., 1., 0.])
    True
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.backends import BackendChoice
from pycholesky.core.protocols import CholeskyKernel
from pycholesky.core.types import UPLO
from pycholesky.core.validation import check_array, check_owned, check_rhs, check_square
from pycholesky.cholesky.decompose import factorizec, factorizec_into


# Triangle read by every single-call operation
DEFAULT_UPLO = UPLO.UPPER


def _check_system(a: ArrayLike, b: Any, owned: bool) -> NDArray[np.inexact[Any]]:
    """Check a and b agree in shape before any factorization work, returning a as an array."""
    a = check_array(a, 'a')
    n = check_square(a, 'a')
    if owned:
        check_owned(b, 'b')
    else:
        b = check_array(b, 'b')
    check_rhs(b, n, 'b')
    return a


def solvec(
    a: ArrayLike,
    b: ArrayLike,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """
    Solve A @ x = b.
    
    Args:
        a: Square positive definite matrix (upper triangle is read)
        b: Right-hand side, shape (n,) or (n, k)
        backend: 'auto', 'cpu', 'lapack' or a CholeskyKernel
        
    Returns:
        x, newly allocated, with the shape of b
    """
    a = _check_system(a, b, owned=False)
    return factorizec(a, DEFAULT_UPLO, backend=backend).solvec(b)


def solvec_into(
    a: ArrayLike,
    b: NDArray[np.inexact[Any]],
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """Solve A @ x = b, returning x in b's buffer."""
    a = _check_system(a, b, owned=True)
    return factorizec(a, DEFAULT_UPLO, backend=backend).solvec_into(b)


def solvec_mut(
    a: ArrayLike,
    b: NDArray[np.inexact[Any]],
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """Solve A @ x = b, overwriting b with x and returning it."""
    a = _check_system(a, b, owned=True)
    return factorizec(a, DEFAULT_UPLO, backend=backend).solvec_mut(b)


def invc(
    a: ArrayLike,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """
    Inverse of A as a full Hermitian matrix.
    
    Args:
        a: Square positive definite matrix (upper triangle is read)
        backend: 'auto', 'cpu', 'lapack' or a CholeskyKernel
        
    Returns:
        A^-1, newly allocated
    """
    return factorizec(a, DEFAULT_UPLO, backend=backend).invc_into()


def invc_into(
    a: NDArray[np.inexact[Any]],
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """Inverse of A, computed in a's buffer."""
    return factorizec_into(a, DEFAULT_UPLO, backend=backend).invc_into()


def detc(
    a: ArrayLike,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> np.floating[Any]:
    """
    Determinant of A.
    
    Returns:
        det(A), a non-negative value of the real type associated with
        a's dtype
    """
    return factorizec(a, DEFAULT_UPLO, backend=backend).detc()


def detc_into(
    a: NDArray[np.inexact[Any]],
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> np.floating[Any]:
    """Determinant of A, factorizing in a's buffer."""
    return factorizec_into(a, DEFAULT_UPLO, backend=backend).detc_into()


def logdetc(
    a: ArrayLike,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> np.floating[Any]:
    """Natural logarithm of det(A)."""
    return factorizec(a, DEFAULT_UPLO, backend=backend).logdetc()


def logdetc_into(
    a: NDArray[np.inexact[Any]],
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> np.floating[Any]:
    """Natural logarithm of det(A), factorizing in a's buffer."""
    return factorizec_into(a, DEFAULT_UPLO, backend=backend).logdetc()
