"""
Buffer copies for the borrowing entry points.

Every borrowing operation is "copy the input, then run the consuming
operation on the copy". The copies made here are always fresh, contiguous
and writeable, so the consuming operation can take them over.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from pycholesky.core.exceptions import ValidationError


def replicate(a: NDArray[Any]) -> NDArray[Any]:
    """
    Deep copy of a, keeping its memory order where it has one.
    
    Strided views come back contiguous, which is what lets borrowing
    operations accept inputs the consuming ones reject.
    """
    return np.array(a, order='K', copy=True)


def replicate_as(a: NDArray[Any], dtype: DTypeLike, name: str) -> NDArray[Any]:
    """
    Deep copy of a converted to dtype.
    
    Only same-kind conversions are allowed (real -> complex, float64 ->
    float32); dropping an imaginary part is refused.
    
    Raises:
        ValidationError: If a cannot be cast to dtype without losing its kind
    """
    dtype = np.dtype(dtype)
    if not np.can_cast(a.dtype, dtype, casting='same_kind'):
        raise ValidationError(
            f"{name}: cannot convert dtype {a.dtype} to {dtype} of the factor"
        )
    return np.array(a, dtype=dtype, order='K', copy=True)
