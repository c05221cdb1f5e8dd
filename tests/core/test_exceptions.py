"""
Tests for PyAnova exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyAnovaError)
    - Diagnostic attributes on DistributionError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyanova.core.exceptions import (
    DimensionError,
    DistributionError,
    NumericalError,
    PyAnovaError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyAnovaError."""

    def test_validation_error_is_pyanova_error(self):
        with pytest.raises(PyAnovaError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_pyanova_error(self):
        with pytest.raises(PyAnovaError):
            raise NumericalError("computation failed")

    def test_distribution_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DistributionError("quantile failed")

    def test_distribution_error_is_not_validation_error(self):
        err = DistributionError("quantile failed")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Messages and attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSimpleExceptions:
    """ValidationError, DimensionError, NumericalError carry only a message."""

    def test_validation_error_message(self):
        err = ValidationError("alpha: must be in (0, 1), got 1.5")
        assert "(0, 1)" in str(err)

    def test_dimension_error_message(self):
        err = DimensionError("groups[1]: expected 1D array, got 2D")
        assert "expected 1D" in str(err)


class TestDistributionError:
    """DistributionError carries the distribution and its parameters."""

    def test_all_attributes(self):
        err = DistributionError(
            "f distribution: dfe must be finite and > 0, got 0",
            distribution='f',
            parameters={'dfb': 2, 'dfe': 0, 'f_value': 1.0},
        )
        assert "dfe" in str(err)
        assert err.distribution == 'f'
        assert err.parameters['dfe'] == 0

    def test_defaults_are_none(self):
        err = DistributionError("failed")
        assert err.distribution is None
        assert err.parameters is None
