"""
Backend kernel protocol for pycholesky.

The kernel is the only place numerical work happens. Everything handed to
it has already been validated: square, contiguous in the stated layout, a
supported dtype, finite. We use Protocol (structural typing) rather than
ABC (nominal typing) so that test doubles and alternative backends need
not inherit from anything.
"""

from typing import Any, Protocol, runtime_checkable

from numpy.typing import NDArray

from pycholesky.core.types import UPLO, Layout


@runtime_checkable
class CholeskyKernel(Protocol):
    """
    Protocol for dense Cholesky kernels operating in place.
    
    All three operations overwrite their buffer argument. Only the uplo
    triangle of a is read or written.
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Examples: 'lapack'
        """
        ...
    
    def cholesky(self, layout: Layout, uplo: UPLO, a: NDArray[Any]) -> None:
        """
        Factor a in place, leaving L (lower) or U (upper) in its uplo triangle.
        
        Raises:
            NotPositiveDefiniteError: With the 1-based order of the first
                leading principal minor that is not positive
        """
        ...
    
    def solve_cholesky(
        self,
        layout: Layout,
        uplo: UPLO,
        a: NDArray[Any],
        b: NDArray[Any],
    ) -> None:
        """Overwrite b with the solution of A x = b, given the factor a of A."""
        ...
    
    def inv_cholesky(self, layout: Layout, uplo: UPLO, a: NDArray[Any]) -> None:
        """
        Overwrite the uplo triangle of the factor a with that triangle of A^-1.
        
        Raises:
            SingularMatrixError: If the factor has a zero diagonal entry
        """
        ...
