"""
Input validation utilities for pycholesky.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every check here runs before
the backend kernel is called; nothing after the kernel boundary re-validates.

Design principles:
    - No silent type coercion (except np.asarray on array-likes and
      integer -> float64 promotion for borrowed inputs)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pycholesky.core.exceptions import (
    DimensionError,
    InvalidLayoutError,
    NotSquareError,
    ValidationError,
)
from pycholesky.core.scalar import SUPPORTED_DTYPES, is_supported
from pycholesky.core.types import Layout


_SUPPORTED_NAMES = ", ".join(sorted(str(dt) for dt in SUPPORTED_DTYPES))


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.inexact[Any]]:
    """
    Validate and convert input to numpy array.
    
    Accepts any array-like and converts to numpy array. Integer input is
    promoted to float64. Rejects inputs that result in object dtype
    (indicating mixed types or non-numeric data) and floating types the
    backend has no kernel for.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float32, float64, complex64 or complex128 dtype.
        Not copied if the input already was such an array.
        
    Raises:
        ValidationError: If input cannot be converted to a supported array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, bool, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.integer):
        result = result.astype(np.float64)

    check_dtype(result, name)
    return result


def check_dtype(array: NDArray[Any], name: str) -> None:
    """
    Verify the element type is one the backend kernel supports.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If dtype is not float32/float64/complex64/complex128
    """
    if not is_supported(array.dtype):
        raise ValidationError(
            f"{name}: unsupported dtype {array.dtype}, expected one of {_SUPPORTED_NAMES}"
        )


def check_owned(array: Any, name: str) -> NDArray[np.inexact[Any]]:
    """
    Verify input is a writeable ndarray the caller hands over for reuse.
    
    Consuming and mutating operations write their result into the caller's
    buffer, so no conversion is possible: the argument must already be an
    ndarray of a supported dtype.
    
    Args:
        array: Input to check
        name: Parameter name for error messages
        
    Returns:
        The same array object
        
    Raises:
        ValidationError: If input is not an ndarray, has an unsupported
            dtype, or is read-only
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray to operate on in place, "
            f"got {type(array).__name__}"
        )
    check_dtype(array, name)
    if not array.flags.writeable:
        raise ValidationError(f"{name}: array is read-only, cannot write result in place")
    return array


def check_finite(array: NDArray[np.inexact[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_square(array: NDArray[Any], name: str) -> int:
    """
    Verify array is a square matrix.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Returns:
        The matrix dimension n
        
    Raises:
        DimensionError: If array is not 2D
        NotSquareError: If row count differs from column count
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: expected square matrix, got shape ({rows}, {cols})",
            rows=rows,
            cols=cols,
        )
    return rows


def check_layout(array: NDArray[Any], name: str) -> Layout:
    """
    Determine the contiguous memory order of a 2D array.
    
    Column-major wins when the array is both (n <= 1), since that is the
    order LAPACK works in natively.
    
    Args:
        array: 2D array to inspect
        name: Parameter name for error messages
        
    Returns:
        Layout.F or Layout.C
        
    Raises:
        InvalidLayoutError: If the array is neither C- nor F-contiguous
    """
    if array.flags.f_contiguous:
        return Layout.F
    if array.flags.c_contiguous:
        return Layout.C
    raise InvalidLayoutError(
        f"{name}: neither row-major nor column-major contiguous "
        f"(shape={array.shape}, strides={array.strides}); pass a copy instead",
        shape=array.shape,
        strides=array.strides,
    )


def square_layout(array: NDArray[Any], name: str) -> Layout:
    """
    Verify array is square, then return its layout.
    
    Squareness is checked first so that a non-square strided view
    reports NotSquareError rather than InvalidLayoutError.
    
    Raises:
        DimensionError: If array is not 2D
        NotSquareError: If array is not square
        InvalidLayoutError: If array is not contiguous
    """
    check_square(array, name)
    return check_layout(array, name)


def check_rhs(b: NDArray[Any], n: int, name: str) -> None:
    """
    Verify a right-hand side matches a matrix of dimension n.
    
    Accepts a vector (n,) or a block of k right-hand sides (n, k).
    
    Args:
        b: Right-hand side to check
        n: Dimension of the coefficient matrix
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If b is not 1D/2D or its first dimension is not n
    """
    if b.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {b.ndim}D with shape {b.shape}"
        )
    if b.shape[0] != n:
        raise DimensionError(
            f"{name}: length {b.shape[0]} does not match matrix dimension {n}"
        )
