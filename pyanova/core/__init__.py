"""
Core infrastructure for PyAnova.

Shared abstractions used by the ANOVA engines.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    distributions: F and Studentized range tail/quantile evaluation
"""

from pyanova.core.result import Result
from pyanova.core.exceptions import (
    PyAnovaError,
    ValidationError,
    DimensionError,
    NumericalError,
    DistributionError,
)
from pyanova.core.distributions import (
    f_upper_tail,
    studentized_range_quantile,
    studentized_range_upper_tail,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyAnovaError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DistributionError",
    # Distributions
    "f_upper_tail",
    "studentized_range_quantile",
    "studentized_range_upper_tail",
]
