"""
Distribution utilities.

Thin, validated wrappers over scipy.stats for the two special functions
the ANOVA engines need:

F distribution:
    Upper-tail probability P(F > f) with (dfb, dfe) degrees of freedom.

Studentized range distribution:
    Quantile q such that P(Q <= q) = confidence, for k groups and dfe
    error degrees of freedom. scipy orders its parameters (k, df); the
    wrappers here take (dfe, num_groups) and reorder.

Every wrapper checks its own domain. Parameters that reach these
functions out of domain, or a non-finite value coming back from scipy,
raise DistributionError instead of leaking NaN to the caller.
"""

import math
from typing import Any

from scipy import stats as sp_stats

from pyanova.core.exceptions import DistributionError


def _require(condition: bool, message: str, distribution: str, parameters: dict[str, Any]) -> None:
    if not condition:
        raise DistributionError(message, distribution=distribution, parameters=parameters)


def _is_finite_number(value: Any) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def _clip_probability(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def f_upper_tail(dfb: float, dfe: float, f_value: float) -> float:
    """
    Complementary CDF of the F distribution.

    Args:
        dfb: Numerator (between-group) degrees of freedom, > 0
        dfe: Denominator (error) degrees of freedom, > 0
        f_value: Point at which to evaluate, >= 0

    Returns:
        P(F > f_value) in [0, 1]. Exactly 1.0 at f_value = 0.

    Raises:
        DistributionError: If a parameter is out of domain or scipy
            returns a non-finite value
    """
    parameters = {'dfb': dfb, 'dfe': dfe, 'f_value': f_value}
    for name in ('dfb', 'dfe'):
        value = parameters[name]
        _require(
            _is_finite_number(value) and float(value) > 0,
            f"f distribution: {name} must be finite and > 0, got {value}",
            'f', parameters,
        )
    _require(
        _is_finite_number(f_value) and float(f_value) >= 0,
        f"f distribution: f_value must be finite and >= 0, got {f_value}",
        'f', parameters,
    )

    if float(f_value) == 0.0:
        return 1.0

    p = float(sp_stats.f.sf(float(f_value), float(dfb), float(dfe)))
    _require(
        math.isfinite(p),
        f"f distribution: upper tail evaluated to {p}",
        'f', parameters,
    )
    return _clip_probability(p)


def studentized_range_quantile(dfe: float, num_groups: int, confidence: float) -> float:
    """
    Inverse CDF of the Studentized range distribution.

    Args:
        dfe: Error degrees of freedom, > 0
        num_groups: Number of groups k being compared, >= 2
        confidence: Lower-tail probability, in (0, 1)

    Returns:
        Critical value q > 0 with P(Q <= q) = confidence.

    Raises:
        DistributionError: If a parameter is out of domain or the
            quantile search does not produce a finite positive value
    """
    parameters = {'dfe': dfe, 'num_groups': num_groups, 'confidence': confidence}
    _require(
        _is_finite_number(dfe) and float(dfe) > 0,
        f"studentized range: dfe must be finite and > 0, got {dfe}",
        'studentized_range', parameters,
    )
    _require(
        _is_finite_number(num_groups) and float(num_groups) >= 2,
        f"studentized range: num_groups must be >= 2, got {num_groups}",
        'studentized_range', parameters,
    )
    _require(
        _is_finite_number(confidence) and 0.0 < float(confidence) < 1.0,
        f"studentized range: confidence must be in (0, 1), got {confidence}",
        'studentized_range', parameters,
    )

    q = float(sp_stats.studentized_range.ppf(float(confidence), float(num_groups), float(dfe)))
    _require(
        math.isfinite(q) and q > 0,
        f"studentized range: quantile evaluated to {q}",
        'studentized_range', parameters,
    )
    return q


def studentized_range_upper_tail(q_value: float, num_groups: int, dfe: float) -> float:
    """
    Upper-tail probability P(Q > q_value) of the Studentized range distribution.

    Used for Tukey-Kramer adjusted pairwise p-values. Same domain rules
    as studentized_range_quantile, with q_value >= 0.
    """
    parameters = {'q_value': q_value, 'num_groups': num_groups, 'dfe': dfe}
    _require(
        _is_finite_number(dfe) and float(dfe) > 0,
        f"studentized range: dfe must be finite and > 0, got {dfe}",
        'studentized_range', parameters,
    )
    _require(
        _is_finite_number(num_groups) and float(num_groups) >= 2,
        f"studentized range: num_groups must be >= 2, got {num_groups}",
        'studentized_range', parameters,
    )
    _require(
        _is_finite_number(q_value) and float(q_value) >= 0,
        f"studentized range: q_value must be finite and >= 0, got {q_value}",
        'studentized_range', parameters,
    )

    if float(q_value) == 0.0:
        return 1.0

    p = float(sp_stats.studentized_range.sf(float(q_value), float(num_groups), float(dfe)))
    _require(
        math.isfinite(p),
        f"studentized range: upper tail evaluated to {p}",
        'studentized_range', parameters,
    )
    return _clip_probability(p)
