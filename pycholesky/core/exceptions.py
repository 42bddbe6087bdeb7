"""
Exception hierarchy for pycholesky.

All exceptions inherit from CholeskyError to allow catching any
library-specific error. Input problems live under ValidationError,
failures reported by the numerical backend live under NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class CholeskyError(Exception):
    """Base exception for all pycholesky errors."""
    pass


class ValidationError(CholeskyError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks (wrong type,
    unsupported dtype, non-finite values, read-only buffers).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when array shapes don't match expected dimensions or
    when a right-hand side does not match the matrix it is solved against.
    """
    pass


class NotSquareError(DimensionError):
    """
    Matrix is not square.
    
    Raised before any numerical work when a factorization, solve, inverse
    or determinant is requested on a matrix whose row count differs from
    its column count.
    
    Attributes:
        rows: Number of rows of the offending matrix
        cols: Number of columns of the offending matrix
    """
    
    def __init__(self, message: str, rows: int, cols: int):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class InvalidLayoutError(ValidationError):
    """
    Matrix memory layout cannot be handed to the backend directly.
    
    The backend works on contiguous row-major or column-major buffers only.
    Strided views (e.g. ``a[::2, ::2]``) must be copied by the caller or
    passed to a borrowing entry point, which copies them.
    
    Attributes:
        shape: Shape of the offending array
        strides: Strides (in bytes) of the offending array
    """
    
    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        strides: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.strides = strides


class NumericalError(CholeskyError):
    """
    Numerical computation failed.
    
    Base class for errors reported by the backend kernel.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.
    
    Raised when the factorization kernel finds a leading principal minor
    that is not positive. No partial factor is usable after this error.
    
    Attributes:
        leading_minor_index: 1-based order of the first leading principal
            minor found non-positive
        matrix_name: Name/description of the problematic matrix
    """
    
    def __init__(
        self,
        message: str,
        leading_minor_index: int,
        matrix_name: str | None = None
    ):
        super().__init__(message)
        self.leading_minor_index = leading_minor_index
        self.matrix_name = matrix_name


class SingularMatrixError(NumericalError):
    """
    Triangular factor is singular.
    
    Raised when the inversion kernel meets an exactly zero diagonal entry
    in a Cholesky factor. A factor produced by this package never triggers
    it; hand-built factorization records can.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        diagonal_index: 1-based index of the zero diagonal entry
    """
    
    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        diagonal_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.diagonal_index = diagonal_index
