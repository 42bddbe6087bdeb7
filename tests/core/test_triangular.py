"""
Tests for triangular-view utilities and the scalar helpers they use.
"""

import numpy as np
import pytest

from pycholesky.core.scalar import (
    abs_sqr,
    conj_inplace,
    is_complex,
    is_supported,
    real_dtype,
)
from pycholesky.core.triangular import (
    conj_transpose_into,
    into_triangular,
    triangle_values,
    triangular_fill_hermitian,
)
from pycholesky.core.types import UPLO


# ═══════════════════════════════════════════════════════════════════════
# Scalar helpers
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:
    """Element-type helpers behave the same for real and complex input."""

    @pytest.mark.parametrize("dtype, expected", [
        (np.float32, np.float32),
        (np.float64, np.float64),
        (np.complex64, np.float32),
        (np.complex128, np.float64),
    ])
    def test_real_dtype(self, dtype, expected):
        assert real_dtype(dtype) == np.dtype(expected)

    def test_is_supported(self):
        assert is_supported(np.complex64)
        assert not is_supported(np.float16)
        assert not is_supported(np.int64)

    def test_is_complex(self):
        assert is_complex(np.complex128)
        assert not is_complex(np.float64)

    def test_abs_sqr_complex(self):
        result = abs_sqr(np.array([3 + 4j, 1j], dtype=np.complex64))
        assert result.dtype == np.float32
        np.testing.assert_array_equal(result, [25.0, 1.0])

    def test_abs_sqr_real(self):
        np.testing.assert_array_equal(abs_sqr(np.array([-2.0, 3.0])), [4.0, 9.0])

    def test_conj_inplace_complex(self):
        a = np.array([1 + 2j, 3 - 1j])
        out = conj_inplace(a)
        assert out is a
        np.testing.assert_array_equal(a, [1 - 2j, 3 + 1j])

    def test_conj_inplace_real_is_noop(self):
        a = np.array([1.0, -2.0])
        assert conj_inplace(a) is a
        np.testing.assert_array_equal(a, [1.0, -2.0])


# ═══════════════════════════════════════════════════════════════════════
# into_triangular / triangle_values
# ═══════════════════════════════════════════════════════════════════════


class TestIntoTriangular:
    """into_triangular zeroes the opposite triangle in place."""

    def test_upper(self):
        a = np.arange(1.0, 10.0).reshape(3, 3)
        out = into_triangular(a, UPLO.UPPER)
        assert out is a
        np.testing.assert_array_equal(a, np.triu(np.arange(1.0, 10.0).reshape(3, 3)))

    def test_lower_fortran_order(self):
        src = np.arange(1.0, 10.0).reshape(3, 3)
        a = np.asfortranarray(src)
        into_triangular(a, UPLO.LOWER)
        np.testing.assert_array_equal(a, np.tril(src))

    def test_triangle_values_reads_one_triangle(self):
        a = np.arange(1.0, 10.0).reshape(3, 3)
        np.testing.assert_array_equal(triangle_values(a, UPLO.UPPER), [1.0, 2.0, 3.0, 5.0, 6.0, 9.0])
        np.testing.assert_array_equal(triangle_values(a, UPLO.LOWER), [1.0, 4.0, 5.0, 7.0, 8.0, 9.0])

    def test_triangle_values_is_a_copy(self):
        a = np.ones((3, 3))
        triangle_values(a, UPLO.LOWER)[:] = 0.0
        np.testing.assert_array_equal(a, np.ones((3, 3)))

    def test_empty(self):
        a = np.empty((0, 0))
        assert into_triangular(a, UPLO.UPPER).shape == (0, 0)


# ═══════════════════════════════════════════════════════════════════════
# triangular_fill_hermitian
# ═══════════════════════════════════════════════════════════════════════


class TestTriangularFillHermitian:
    """triangular_fill_hermitian mirrors one triangle, conjugated."""

    def test_real_upper(self):
        a = np.array([[1.0, 2.0, 3.0], [0.0, 4.0, 5.0], [0.0, 0.0, 6.0]])
        triangular_fill_hermitian(a, UPLO.UPPER)
        np.testing.assert_array_equal(a, a.T)
        assert a[2, 0] == 3.0

    def test_real_lower_ignores_upper_garbage(self):
        a = np.array([[1.0, 99.0], [2.0, 3.0]])
        triangular_fill_hermitian(a, UPLO.LOWER)
        np.testing.assert_array_equal(a, [[1.0, 2.0], [2.0, 3.0]])

    def test_complex_upper_conjugates(self):
        a = np.array([[2.0, 1 + 1j], [0.0, 3.0]], dtype=np.complex128)
        triangular_fill_hermitian(a, UPLO.UPPER)
        assert a[1, 0] == 1 - 1j
        np.testing.assert_array_equal(a, a.conj().T)

    def test_complex_lower_c_order_and_f_order_agree(self):
        src = np.array([
            [1.0, 0.0, 0.0],
            [2 - 1j, 4.0, 0.0],
            [3 + 2j, 5 - 5j, 6.0],
        ])
        c = src.copy(order='C')
        f = src.copy(order='F')
        triangular_fill_hermitian(c, UPLO.LOWER)
        triangular_fill_hermitian(f, UPLO.LOWER)
        np.testing.assert_array_equal(c, f)
        np.testing.assert_array_equal(c, c.conj().T)


# ═══════════════════════════════════════════════════════════════════════
# conj_transpose_into
# ═══════════════════════════════════════════════════════════════════════


class TestConjTransposeInto:
    """conj_transpose_into reuses the buffer."""

    def test_complex(self):
        a = np.array([[1 + 1j, 2 - 3j], [0.0, 4j]])
        expected = a.conj().T.copy()
        out = conj_transpose_into(a)
        assert np.shares_memory(out, a)
        np.testing.assert_array_equal(out, expected)

    def test_real(self):
        a = np.array([[1.0, 2.0], [0.0, 3.0]])
        out = conj_transpose_into(a)
        assert np.shares_memory(out, a)
        np.testing.assert_array_equal(out, [[1.0, 0.0], [2.0, 3.0]])
