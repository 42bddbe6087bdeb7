"""
Tests for pycholesky exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via CholeskyError)
    - Diagnostic attributes on NotSquareError, InvalidLayoutError,
      NotPositiveDefiniteError, SingularMatrixError
    - str works correctly
    - Default attribute values (None for optional attributes)
"""

import pytest

from pycholesky.core.exceptions import (
    CholeskyError,
    DimensionError,
    InvalidLayoutError,
    NotPositiveDefiniteError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via CholeskyError."""

    def test_validation_error_is_cholesky_error(self):
        with pytest.raises(CholeskyError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NotSquareError("not square", rows=2, cols=3)

    def test_invalid_layout_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidLayoutError("strided")

    def test_invalid_layout_is_not_dimension_error(self):
        err = InvalidLayoutError("strided")
        assert not isinstance(err, DimensionError)

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD", leading_minor_index=1)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_numerical_error_is_not_validation_error(self):
        """Backend failures and input failures are separate branches."""
        err = NotPositiveDefiniteError("not PD", leading_minor_index=2)
        assert not isinstance(err, ValidationError)
        assert isinstance(err, CholeskyError)


# ═══════════════════════════════════════════════════════════════════════
# NotSquareError
# ═══════════════════════════════════════════════════════════════════════


class TestNotSquareError:
    """NotSquareError carries the offending dimensions."""

    def test_attributes(self):
        err = NotSquareError("a: expected square matrix", rows=3, cols=4)
        assert str(err) == "a: expected square matrix"
        assert err.rows == 3
        assert err.cols == 4

    def test_catchable_with_attributes(self):
        with pytest.raises(NotSquareError) as exc_info:
            raise NotSquareError("not square", rows=1, cols=5)
        assert exc_info.value.rows == 1
        assert exc_info.value.cols == 5


# ═══════════════════════════════════════════════════════════════════════
# InvalidLayoutError
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidLayoutError:
    """InvalidLayoutError carries shape and strides when known."""

    def test_all_attributes(self):
        err = InvalidLayoutError("strided", shape=(3, 3), strides=(96, 16))
        assert err.shape == (3, 3)
        assert err.strides == (96, 16)

    def test_defaults_are_none(self):
        err = InvalidLayoutError("strided")
        assert err.shape is None
        assert err.strides is None


# ═══════════════════════════════════════════════════════════════════════
# NotPositiveDefiniteError
# ═══════════════════════════════════════════════════════════════════════


class TestNotPositiveDefiniteError:
    """NotPositiveDefiniteError carries the failing leading minor."""

    def test_all_attributes(self):
        err = NotPositiveDefiniteError(
            "Cholesky failed",
            leading_minor_index=3,
            matrix_name="covariance",
        )
        assert str(err) == "Cholesky failed"
        assert err.leading_minor_index == 3
        assert err.matrix_name == "covariance"

    def test_matrix_name_defaults_to_none(self):
        err = NotPositiveDefiniteError("not PD", leading_minor_index=1)
        assert err.matrix_name is None

    def test_index_is_required(self):
        with pytest.raises(TypeError):
            NotPositiveDefiniteError("not PD")


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries the zero diagonal position."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "factor is singular", matrix_name="factor", diagonal_index=2
        )
        assert err.matrix_name == "factor"
        assert err.diagonal_index == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.diagonal_index is None
