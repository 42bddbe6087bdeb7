"""
LAPACK Cholesky kernel.

Wraps ?potrf / ?potrs / ?potri from scipy.linalg.lapack. This is the
reference backend and the one 'auto' selects.

LAPACK is column-major. A row-major buffer is handed over as its
transpose, which is a column-major view of the same memory, with the
triangle flag flipped. For a Hermitian A that view holds conj(A), so:
    - ?potrf leaves exactly the wanted factor in the caller's triangle
    - ?potri leaves exactly the wanted inverse triangle
    - ?potrs solves conj(A) x = b, so b is conjugated before and after
f2py only works in place on Fortran-contiguous arrays of the routine's
dtype; whenever it returned a copy instead, the result is written back
into the caller's buffer.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any
from scipy.linalg.lapack import get_lapack_funcs

from pycholesky.core.exceptions import NotPositiveDefiniteError, SingularMatrixError
from pycholesky.core.scalar import conj_inplace, is_complex
from pycholesky.core.types import UPLO, Layout


def _column_major(layout: Layout, uplo: UPLO, a: NDArray[Any]) -> tuple[NDArray[Any], UPLO]:
    """Column-major view of a and the triangle it occupies in that view."""
    if layout is Layout.F:
        return a, uplo
    return a.T, uplo.flip()


def _write_back(target: NDArray[Any], result: NDArray[Any]) -> None:
    """Copy result into target unless f2py already wrote there."""
    if not np.may_share_memory(target, result):
        target[...] = result


def _check_info(info: int, routine: str) -> None:
    """Raise on an illegal-argument report from LAPACK."""
    if info < 0:
        raise ValueError(
            f"illegal value in argument {-info} of LAPACK {routine}"
        )


class LapackKernel:
    """
    CPU kernel using LAPACK through SciPy.
    
    Implements the CholeskyKernel protocol. Stateless: one instance can be
    shared by any number of factorizations.
    """
    
    @property
    def name(self) -> str:
        return 'lapack'
    
    def cholesky(self, layout: Layout, uplo: UPLO, a: NDArray[Any]) -> None:
        """
        Factor a in place with ?potrf.
        
        Raises:
            NotPositiveDefiniteError: If ?potrf reports info > 0
        """
        if a.shape[0] == 0:
            return
        fa, lapack_uplo = _column_major(layout, uplo, a)
        (potrf,) = get_lapack_funcs(('potrf',), (fa,))
        c, info = potrf(fa, lower=lapack_uplo.lower, clean=False, overwrite_a=True)
        _check_info(info, 'potrf')
        if info > 0:
            raise NotPositiveDefiniteError(
                f"matrix is not positive definite: leading principal minor "
                f"of order {info} is not positive",
                leading_minor_index=int(info),
            )
        _write_back(fa, c)
    
    def solve_cholesky(
        self,
        layout: Layout,
        uplo: UPLO,
        a: NDArray[Any],
        b: NDArray[Any],
    ) -> None:
        """Overwrite b with A^-1 b using ?potrs on the factor a."""
        if a.shape[0] == 0:
            return
        fa, lapack_uplo = _column_major(layout, uplo, a)
        conjugate = layout is Layout.C and is_complex(a.dtype)
        if conjugate:
            conj_inplace(b)
        (potrs,) = get_lapack_funcs(('potrs',), (fa, b))
        x, info = potrs(fa, b, lower=lapack_uplo.lower, overwrite_b=True)
        _check_info(info, 'potrs')
        _write_back(b, x)
        if conjugate:
            conj_inplace(b)
    
    def inv_cholesky(self, layout: Layout, uplo: UPLO, a: NDArray[Any]) -> None:
        """
        Overwrite the uplo triangle of the factor a with that of A^-1 (?potri).
        
        Raises:
            SingularMatrixError: If ?potri reports info > 0
        """
        if a.shape[0] == 0:
            return
        fa, lapack_uplo = _column_major(layout, uplo, a)
        (potri,) = get_lapack_funcs(('potri',), (fa,))
        inv, info = potri(fa, lower=lapack_uplo.lower, overwrite_c=True)
        _check_info(info, 'potri')
        if info > 0:
            raise SingularMatrixError(
                f"Cholesky factor is singular: diagonal element {info} is zero",
                matrix_name='factor',
                diagonal_index=int(info),
            )
        _write_back(fa, inv)
