"""
Tags describing how a square buffer is interpreted.

UPLO names the triangle that holds meaningful data; Layout names the
memory order the backend kernel is handed. Both are closed sets: there is
no "full" triangle and no strided layout.

Usage:
    from pycholesky.core.types import UPLO, Layout
    
    uplo = UPLO.parse('L')
    if uplo is UPLO.LOWER:
        ...
"""

from enum import Enum

from pycholesky.core.exceptions import ValidationError


class UPLO(Enum):
    """Triangle of a square matrix that holds the meaningful data."""
    UPPER = 'U'
    LOWER = 'L'
    
    @classmethod
    def parse(cls, value: 'UPLO | str') -> 'UPLO':
        """
        Convert a tag or a string to a UPLO member.
        
        Accepts the LAPACK characters 'U'/'L' and the words 'upper'/'lower',
        case-insensitively.
        
        Raises:
            ValidationError: If value names neither triangle
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ('u', 'upper'):
                return cls.UPPER
            if key in ('l', 'lower'):
                return cls.LOWER
        raise ValidationError(
            f"uplo: expected UPLO.UPPER, UPLO.LOWER, 'U' or 'L', got {value!r}"
        )
    
    @property
    def lower(self) -> bool:
        """LAPACK ``lower=`` flag for this triangle."""
        return self is UPLO.LOWER
    
    def flip(self) -> 'UPLO':
        """The opposite triangle."""
        return UPLO.LOWER if self is UPLO.UPPER else UPLO.UPPER


class Layout(Enum):
    """Contiguous memory order of a 2D buffer."""
    C = 'C'  # row-major
    F = 'F'  # column-major (native LAPACK order)
