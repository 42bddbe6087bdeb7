"""
Backend selection for pycholesky.

Available backends:
    LapackKernel: CPU reference kernel using LAPACK through SciPy

Any object satisfying the CholeskyKernel protocol can be passed wherever
a backend is accepted.
"""

from typing import Literal

from pycholesky.core.backends.lapack import LapackKernel
from pycholesky.core.protocols import CholeskyKernel


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'lapack']

_LAPACK = LapackKernel()


def get_backend(choice: 'BackendChoice | CholeskyKernel' = 'auto') -> CholeskyKernel:
    """
    Resolve a backend choice to a kernel instance.
    
    Args:
        choice: 'auto', 'cpu' or 'lapack' for the LAPACK kernel, or a
            kernel object, which is returned unchanged
            
    Returns:
        Kernel ready to use
        
    Raises:
        ValueError: If an unknown backend is specified
    """
    if isinstance(choice, str):
        if choice in ('auto', 'cpu', 'lapack'):
            return _LAPACK
        raise ValueError(f"Unknown backend: {choice!r}")
    
    if isinstance(choice, CholeskyKernel):
        return choice
    
    raise ValueError(f"Unknown backend: {choice!r}")


__all__ = [
    "BackendChoice",
    "LapackKernel",
    "get_backend",
]
