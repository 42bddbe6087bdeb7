"""
Tests for tolerance tiers.
"""

import numpy as np
import pytest

from pycholesky.core.tolerances import (
    FP32,
    FP32_ILL_CONDITIONED,
    FP64,
    FP64_ILL_CONDITIONED,
    is_close,
    select_tolerance,
)


class TestSelectTolerance:
    """Tier follows the real precision of the working dtype."""

    @pytest.mark.parametrize("dtype", [np.float64, np.complex128])
    def test_double(self, dtype):
        assert select_tolerance(dtype) is FP64
        assert select_tolerance(dtype, is_ill_conditioned=True) is FP64_ILL_CONDITIONED

    @pytest.mark.parametrize("dtype", [np.float32, np.complex64])
    def test_single(self, dtype):
        assert select_tolerance(dtype) is FP32
        assert select_tolerance(dtype, is_ill_conditioned=True) is FP32_ILL_CONDITIONED

    def test_tiers_ordered(self):
        assert FP64.rtol < FP64_ILL_CONDITIONED.rtol < FP32.rtol < FP32_ILL_CONDITIONED.rtol


class TestIsClose:
    """is_close applies |a - b| <= atol + rtol * |b|."""

    def test_scalar_returns_bool(self):
        assert is_close(1.0, 1.0 + 1e-13) is True
        assert is_close(1.0, 1.1) is False

    def test_array(self):
        result = is_close([1.0, 2.0], [1.0, 2.5])
        np.testing.assert_array_equal(result, [True, False])

    def test_fp32_tier_is_looser(self):
        assert is_close(1.0, 1.00001, FP32)
        assert not is_close(1.0, 1.00001, FP64)
