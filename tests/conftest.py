"""
pytest configuration and shared fixtures.
"""

from collections import Counter

import pytest
import numpy as np

from pycholesky.core.backends.lapack import LapackKernel


# Worked example: A = L @ L.T with integer L, det(A) = 36
WORKED_A = np.array([
    [4.0, 12.0, -16.0],
    [12.0, 37.0, -43.0],
    [-16.0, -43.0, 98.0],
])
WORKED_L = np.array([
    [2.0, 0.0, 0.0],
    [6.0, 1.0, 0.0],
    [-8.0, 5.0, 3.0],
])
WORKED_B = np.array([4.0, 13.0, -11.0])
WORKED_X = np.array([-2.0, 1.0, 0.0])


def make_spd(rng, n, dtype=np.float64):
    """Random well-conditioned Hermitian positive definite matrix of dtype."""
    X = rng.standard_normal((n, n))
    if np.issubdtype(np.dtype(dtype), np.complexfloating):
        X = X + 1j * rng.standard_normal((n, n))
    A = X @ X.conj().T + n * np.eye(n)
    A = (A + A.conj().T) / 2  # exactly Hermitian
    return A.astype(dtype)


class CountingKernel:
    """LAPACK kernel that records how often each operation is called."""
    
    def __init__(self):
        self._inner = LapackKernel()
        self.calls = Counter()
    
    @property
    def name(self):
        return 'counting'
    
    @property
    def total(self):
        return sum(self.calls.values())
    
    def cholesky(self, layout, uplo, a):
        self.calls['cholesky'] += 1
        self._inner.cholesky(layout, uplo, a)
    
    def solve_cholesky(self, layout, uplo, a, b):
        self.calls['solve_cholesky'] += 1
        self._inner.solve_cholesky(layout, uplo, a, b)
    
    def inv_cholesky(self, layout, uplo, a):
        self.calls['inv_cholesky'] += 1
        self._inner.inv_cholesky(layout, uplo, a)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def worked_example():
    """Integer SPD matrix with known factor, determinant and solution."""
    return WORKED_A.copy(), WORKED_L.copy(), WORKED_B.copy(), WORKED_X.copy()


@pytest.fixture
def spd_real(rng):
    """Random 6x6 real symmetric positive definite matrix."""
    return make_spd(rng, 6)


@pytest.fixture
def spd_complex(rng):
    """Random 5x5 complex Hermitian positive definite matrix."""
    return make_spd(rng, 5, np.complex128)


@pytest.fixture
def counting_kernel():
    """Fresh call-counting kernel."""
    return CountingKernel()


@pytest.fixture
def spd_factory(rng):
    """Factory for random Hermitian positive definite matrices: f(n, dtype)."""
    def factory(n, dtype=np.float64):
        return make_spd(rng, n, dtype)
    return factory
