"""
Cholesky decomposition entry points.

Each operation comes in the ownership variants of the package:
    cholesky        borrows a, returns a new factor
    cholesky_into   takes a over, returns the factor in a's buffer
    cholesky_mut    overwrites a with the factor, returns a
    factorizec      borrows a, returns a CholeskyFactorized
    factorizec_into takes a over, returns a CholeskyFactorized

Borrowing variants copy and delegate to the consuming ones, and the
consuming ones delegate to cholesky_mut, so all variants produce
bit-identical factors.

If uplo is UPLO.UPPER, computes A = U^H @ U from the upper triangle of A
and yields U. If uplo is UPLO.LOWER, computes A = L @ L^H from the lower
triangle of A and yields L. The other triangle of A is never read, and is
zero in the result.

Example:
    >>> import numpy as np
    >>> from pycholesky import UPLO, cholesky
    >>> a = np.array([[4., 12., -16.], [12., 37., -43.], [-16., -43., 98.]])
    >>> cholesky(a, UPLO.LOWER)
    array([[ 2.,  0.,  0.],
           [ 6.,  1.,  0.],
           [-8.,  5.,  3.]])
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.backends import BackendChoice, get_backend
from pycholesky.core.buffers import replicate
from pycholesky.core.protocols import CholeskyKernel
from pycholesky.core.triangular import into_triangular, triangle_values
from pycholesky.core.types import UPLO
from pycholesky.core.validation import (
    check_array,
    check_finite,
    check_owned,
    square_layout,
)
from pycholesky.cholesky.factorized import CholeskyFactorized


def cholesky(
    a: ArrayLike,
    uplo: UPLO | str = UPLO.UPPER,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """
    Cholesky factor of a Hermitian (or real symmetric) positive definite matrix.
    
    Args:
        a: Square matrix, any array-like. Not modified.
        uplo: Triangle of a to read, and of the factor to return
        backend: 'auto', 'cpu', 'lapack' or a CholeskyKernel
        
    Returns:
        New array holding U (uplo=UPPER) or L (uplo=LOWER)
        
    Raises:
        ValidationError: If a is not numeric or holds non-finite values
        NotSquareError: If a is not square
        NotPositiveDefiniteError: If a is not positive definite
    """
    a_arr = check_array(a, 'a')
    return cholesky_into(replicate(a_arr), uplo, backend=backend)


def cholesky_into(
    a: NDArray[np.inexact[Any]],
    uplo: UPLO | str = UPLO.UPPER,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """
    Cholesky factor of a, reusing a's buffer.
    
    The caller hands a over; its contents are unspecified if this raises.
    
    Returns:
        a, now holding U (uplo=UPPER) or L (uplo=LOWER)
    """
    return cholesky_mut(a, uplo, backend=backend)


def cholesky_mut(
    a: NDArray[np.inexact[Any]],
    uplo: UPLO | str = UPLO.UPPER,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> NDArray[np.inexact[Any]]:
    """
    Overwrite a with its Cholesky factor.
    
    Algorithm:
        1. Validate: ndarray, supported dtype, writeable, square,
           contiguous, finite in the uplo triangle
        2. Factor in place with the backend kernel
        3. Zero the opposite triangle
        
    Args:
        a: Writeable, contiguous square ndarray
        uplo: Triangle of a to read, and to write the factor to
        backend: 'auto', 'cpu', 'lapack' or a CholeskyKernel
        
    Returns:
        a, now holding U (uplo=UPPER) or L (uplo=LOWER)
        
    Raises:
        ValidationError: If a is not a writeable supported ndarray, or its
            uplo triangle holds non-finite values
        NotSquareError: If a is not square
        InvalidLayoutError: If a is neither C- nor F-contiguous
        NotPositiveDefiniteError: If a is not positive definite
    """
    uplo = UPLO.parse(uplo)
    kernel = get_backend(backend)
    
    # === Validation: nothing below this block may fail on input shape ===
    check_owned(a, 'a')
    layout = square_layout(a, 'a')
    check_finite(triangle_values(a, uplo), 'a')
    
    # === Factor ===
    kernel.cholesky(layout, uplo, a)
    return into_triangular(a, uplo)


def factorizec(
    a: ArrayLike,
    uplo: UPLO | str = UPLO.UPPER,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> CholeskyFactorized:
    """
    Factor a and keep the result for reuse.
    
    Args:
        a: Square matrix, any array-like. Not modified.
        uplo: Triangle of a to read, and of the stored factor
        backend: 'auto', 'cpu', 'lapack' or a CholeskyKernel
        
    Returns:
        CholeskyFactorized holding a newly allocated factor
    """
    uplo = UPLO.parse(uplo)
    kernel = get_backend(backend)
    return CholeskyFactorized(
        factor=cholesky(a, uplo, backend=kernel),
        uplo=uplo,
        kernel=kernel,
    )


def factorizec_into(
    a: NDArray[np.inexact[Any]],
    uplo: UPLO | str = UPLO.UPPER,
    *,
    backend: 'BackendChoice | CholeskyKernel' = 'auto',
) -> CholeskyFactorized:
    """
    Factor a and keep the result for reuse, reusing a's buffer.
    
    Returns:
        CholeskyFactorized whose factor is a
    """
    uplo = UPLO.parse(uplo)
    kernel = get_backend(backend)
    return CholeskyFactorized(
        factor=cholesky_into(a, uplo, backend=kernel),
        uplo=uplo,
        kernel=kernel,
    )
