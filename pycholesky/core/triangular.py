"""
Triangular-view utilities.

Helpers that act on one triangle of a square matrix in place: zeroing the
opposite triangle after a factorization, mirroring a computed triangle to
materialize a full Hermitian matrix, and the conjugate transpose used to
switch between L and U.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pycholesky.core.scalar import conj_inplace
from pycholesky.core.types import UPLO


def into_triangular(a: NDArray[Any], uplo: UPLO) -> NDArray[Any]:
    """
    Zero the triangle opposite to uplo, in place.
    
    Args:
        a: Square matrix, modified in place
        uplo: Triangle to keep (diagonal included)
        
    Returns:
        The same array
    """
    n = a.shape[0]
    if uplo is UPLO.UPPER:
        a[np.tril_indices(n, -1)] = 0
    else:
        a[np.triu_indices(n, 1)] = 0
    return a


def triangular_fill_hermitian(a: NDArray[Any], uplo: UPLO) -> NDArray[Any]:
    """
    Copy the uplo triangle into the opposite one, conjugated, in place.
    
    After this call a[i, j] == conj(a[j, i]) for all i, j, with the uplo
    triangle as the source of truth. For real input this is a plain
    symmetric mirror.
    
    Args:
        a: Square matrix, modified in place
        uplo: Triangle holding the data
        
    Returns:
        The same array
    """
    n = a.shape[0]
    if uplo is UPLO.UPPER:
        target = np.tril_indices(n, -1)
    else:
        target = np.triu_indices(n, 1)
    # a.T[i, j] is a[j, i]: the mirrored source of each target entry
    a[target] = np.conjugate(a.T[target])
    return a


def conj_transpose_into(a: NDArray[Any]) -> NDArray[Any]:
    """
    Conjugate transpose reusing a's buffer.
    
    Conjugates a in place and returns the transposed view, so no new
    matrix is allocated. The caller gives up a.
    """
    return conj_inplace(a).T


def triangle_values(a: NDArray[Any], uplo: UPLO) -> NDArray[Any]:
    """Flat array of the entries in the uplo triangle of square a, diagonal included."""
    n = a.shape[0]
    if uplo is UPLO.UPPER:
        return a[np.triu_indices(n)]
    return a[np.tril_indices(n)]
