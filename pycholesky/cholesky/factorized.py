"""
Cholesky factorization record.

A CholeskyFactorized holds the triangular factor of a Hermitian (or real
symmetric) positive definite matrix A together with the triangle it
lives in, so that one factorization can be reused for any number of
solves, an inverse and a determinant:

    A = L @ L^H   (uplo=UPLO.LOWER, factor is L)
    A = U^H @ U   (uplo=UPLO.UPPER, factor is U)

Only the uplo triangle of the factor is meaningful. Records are built by
factorizec() / factorizec_into(); they are never modified afterwards.
Methods ending in _into and the into_lower() / into_upper() extractors
consume the record: they reuse the factor's buffer, and the record must
not be used once they return.
"""

import warnings
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.backends import get_backend
from pycholesky.core.buffers import replicate, replicate_as
from pycholesky.core.exceptions import ValidationError
from pycholesky.core.protocols import CholeskyKernel
from pycholesky.core.scalar import abs_sqr
from pycholesky.core.triangular import conj_transpose_into, triangular_fill_hermitian
from pycholesky.core.types import UPLO
from pycholesky.core.validation import (
    check_array,
    check_finite,
    check_owned,
    check_rhs,
    square_layout,
)


@dataclass(frozen=True, eq=False)
class CholeskyFactorized:
    """
    Cholesky decomposition of a Hermitian (or real symmetric) positive
    definite matrix.
    
    Attributes:
        factor: L from A = L @ L^H if uplo is LOWER, U from A = U^H @ U
            if uplo is UPPER. The opposite triangle is zero.
        uplo: Triangle of factor holding the decomposition
        kernel: Backend that produced the factor; reused by solve/invert
    """
    factor: NDArray[np.inexact[Any]]
    uplo: UPLO
    kernel: CholeskyKernel = field(default_factory=get_backend, repr=False)
    
    def __post_init__(self) -> None:
        object.__setattr__(self, 'uplo', UPLO.parse(self.uplo))
        # Hand-built records go through the same checks as computed ones
        factor = check_owned(self.factor, 'factor')
        square_layout(factor, 'factor')
        object.__setattr__(self, 'factor', factor)
    
    @property
    def n(self) -> int:
        """Dimension of the factored matrix."""
        return self.factor.shape[0]
    
    @property
    def dtype(self) -> np.dtype:
        """Element type of the factor."""
        return self.factor.dtype
    
    # ------------------------------------------------------------------
    # Factor extraction
    # ------------------------------------------------------------------
    
    def into_lower(self) -> NDArray[np.inexact[Any]]:
        """
        Return L from A = L @ L^H, consuming the record.
        
        If uplo is LOWER the factor is returned as is; otherwise its
        conjugate transpose is computed in the factor's own buffer.
        """
        if self.uplo is UPLO.LOWER:
            return self.factor
        return conj_transpose_into(self.factor)
    
    def into_upper(self) -> NDArray[np.inexact[Any]]:
        """
        Return U from A = U^H @ U, consuming the record.
        
        If uplo is UPPER the factor is returned as is; otherwise its
        conjugate transpose is computed in the factor's own buffer.
        """
        if self.uplo is UPLO.UPPER:
            return self.factor
        return conj_transpose_into(self.factor)
    
    # ------------------------------------------------------------------
    # Determinant
    # ------------------------------------------------------------------
    
    def logdetc(self) -> np.floating[Any]:
        """
        Natural logarithm of det(A).
        
        Sum of ln |f_ii|^2 over the factor's diagonal. Never overflows,
        unlike detc() for large matrices.
        """
        return np.sum(np.log(abs_sqr(np.diagonal(self.factor))))
    
    def detc(self) -> np.floating[Any]:
        """
        Determinant of A.
        
        Computed as exp(logdetc()) rather than as a product of diagonal
        entries, so intermediate values cannot overflow. The result is a
        non-negative value of the real type associated with the factor's
        dtype. Warns if the result itself is out of range.
        """
        logdet = self.logdetc()
        with np.errstate(over='ignore', under='ignore'):
            det = np.exp(logdet)
        if np.isfinite(logdet) and (np.isinf(det) or det == 0):
            warnings.warn(
                f"determinant {'overflows' if np.isinf(det) else 'underflows'} "
                f"in {det.dtype} (log-determinant is {float(logdet):.6g}); "
                f"use logdetc() instead",
                RuntimeWarning,
                stacklevel=2,
            )
        return det
    
    def detc_into(self) -> np.floating[Any]:
        """Determinant of A, consuming the record."""
        return self.detc()
    
    # ------------------------------------------------------------------
    # Inverse
    # ------------------------------------------------------------------
    
    def invc(self) -> NDArray[np.inexact[Any]]:
        """
        Inverse of A as a full Hermitian matrix.
        
        Works on a copy of the factor; the record stays usable.
        """
        copy = CholeskyFactorized(
            factor=replicate(self.factor),
            uplo=self.uplo,
            kernel=self.kernel,
        )
        return copy.invc_into()
    
    def invc_into(self) -> NDArray[np.inexact[Any]]:
        """
        Inverse of A as a full Hermitian matrix, consuming the record.
        
        The inverse is computed in the factor's buffer, then mirrored
        across the diagonal.
        
        Raises:
            NotSquareError: If the stored factor is not square
            InvalidLayoutError: If the stored factor is not contiguous
        """
        a = check_owned(self.factor, 'factor')
        layout = square_layout(a, 'factor')
        self.kernel.inv_cholesky(layout, self.uplo, a)
        return triangular_fill_hermitian(a, self.uplo)
    
    # ------------------------------------------------------------------
    # Solve
    # ------------------------------------------------------------------
    
    def solvec(self, b: ArrayLike) -> NDArray[np.inexact[Any]]:
        """
        Solve A @ x = b, leaving b untouched.
        
        Args:
            b: Right-hand side, shape (n,) or (n, k). Converted to the
                factor's dtype on copy.
                
        Returns:
            x with the shape of b
        """
        b_arr = check_array(b, 'b')
        return self.solvec_mut(replicate_as(b_arr, self.dtype, 'b'))
    
    def solvec_into(self, b: NDArray[np.inexact[Any]]) -> NDArray[np.inexact[Any]]:
        """
        Solve A @ x = b, consuming b.
        
        Returns:
            x, stored in b's buffer
        """
        return self.solvec_mut(b)
    
    def solvec_mut(self, b: NDArray[np.inexact[Any]]) -> NDArray[np.inexact[Any]]:
        """
        Solve A @ x = b, overwriting b with x.
        
        Args:
            b: Writeable ndarray of the factor's dtype, shape (n,) or (n, k)
            
        Returns:
            b, now holding x
            
        Raises:
            ValidationError: If b is not a writeable ndarray of the factor's
                dtype, or holds non-finite values
            DimensionError: If b does not match the factor's dimension
        """
        b = check_owned(b, 'b')
        layout = square_layout(self.factor, 'factor')
        check_rhs(b, self.n, 'b')
        if b.dtype != self.dtype:
            raise ValidationError(
                f"b: dtype {b.dtype} does not match factor dtype {self.dtype}"
            )
        check_finite(b, 'b')
        self.kernel.solve_cholesky(layout, self.uplo, self.factor, b)
        return b
