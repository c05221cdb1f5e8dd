"""
Exception hierarchy for PyAnova.

All exceptions inherit from PyAnovaError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyAnovaError(Exception):
    """Base exception for all PyAnova errors."""
    pass


class ValidationError(PyAnovaError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: too few
    groups, an empty group, non-positive degrees of freedom, or a
    significance level outside (0, 1).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a group is not a 1-D sequence of observations.
    """
    pass


class NumericalError(PyAnovaError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DistributionError(NumericalError):
    """
    Distribution evaluation failed.

    Raised when a tail probability or quantile cannot be evaluated to a
    finite value.

    Attributes:
        distribution: Name of the distribution ('f', 'studentized_range')
        parameters: Parameters the evaluation was attempted with
    """

    def __init__(
        self,
        message: str,
        distribution: str | None = None,
        parameters: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.distribution = distribution
        self.parameters = parameters
