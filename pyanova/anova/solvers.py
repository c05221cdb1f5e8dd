"""
ANOVA solver dispatch.

Public API:
    anova(groups, ...) -> AnovaResult
    tukey_kramer(groups, anova_result, alpha, ...) -> TukeyKramerResult
"""

import warnings
from typing import Any

import numpy as np

from pyanova.core.result import Result
from pyanova.core.exceptions import ValidationError
from pyanova.core.timing import Timer
from pyanova.core.validation import (
    check_scalar,
    check_positive,
    check_nonnegative,
    check_open_unit_interval,
)
from pyanova.anova._common import AnovaParams
from pyanova.anova._ss import compute_sums_of_squares, compute_f_and_p
from pyanova.anova._posthoc import tukey_kramer_impl
from pyanova.anova.design import GroupedDesign
from pyanova.anova.solution import AnovaResult, TukeyKramerResult


def anova(
    groups: Any,
    *,
    labels: Any = None,
) -> AnovaResult:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more independent groups are equal:

        H0: mu_1 = mu_2 = ... = mu_k
        H1: at least two means differ

    Args:
        groups: Sequence of groups, each a 1D numeric array-like of
            observations. Group j is reported as index j (1-based).
        labels: Optional group names used in summaries. Default x1..xk.

    Returns:
        AnovaResult with ssb, sse, dfb, dfe, msb, mse, f_value, p_value

    Raises:
        ValidationError: Fewer than 2 groups, an empty or non-finite
            group, N <= k, or a within-group sum of squares of 0 (F undefined)

    Examples:
        >>> result = anova([[1, 2, 5, 9], [2, 6, 4, 2, 3, 8], [15, 6, 26]])
        >>> result.f_value
        5.655961000788588
        >>> round(result.p_value, 6)
        0.022745
        >>> print(result.summary())
    """
    timer = Timer()
    timer.start()

    with timer.section('validation'):
        design = GroupedDesign.for_anova(groups, labels=labels)

    with timer.section('sums_of_squares'):
        ss = compute_sums_of_squares(design.groups)

    # SSE is 0 for constant groups and for spreads whose squares underflow
    if not ss.sse > 0:
        raise ValidationError(
            "groups: within-group sum of squares is 0 (every group constant "
            "to double precision), so MSE = 0 and the F statistic is undefined"
        )

    with timer.section('f_test'):
        dfb, dfe, msb, mse, f_value, p_value = compute_f_and_p(
            ss.ssb, ss.sse, design.n_obs, design.n_groups,
        )

    timer.stop()

    warn_list = []
    singletons = [
        label for label, n in zip(design.labels, design.group_sizes) if n == 1
    ]
    if singletons:
        msg = (
            f"Groups with a single observation contribute no within-group "
            f"variation: {singletons}"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warn_list.append(msg)

    params = AnovaParams(
        ssb=ss.ssb,
        sse=ss.sse,
        dfb=dfb,
        dfe=dfe,
        msb=msb,
        mse=mse,
        f_value=f_value,
        p_value=p_value,
        n_obs=design.n_obs,
        n_groups=design.n_groups,
        group_sizes=design.group_sizes,
        group_means=ss.group_means,
        grand_mean=ss.grand_mean,
        labels=design.labels,
    )

    result = Result(
        params=params,
        info={'method': 'oneway', 'design_type': 'grouped'},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warn_list),
    )

    return AnovaResult(_result=result)


def tukey_kramer(
    groups: Any,
    anova_result: AnovaResult,
    alpha: float = 0.05,
    *,
    check_consistency: bool = False,
) -> TukeyKramerResult:
    """
    Tukey-Kramer post-hoc test following one-way ANOVA.

    Compares every pair of group means against a critical difference
    derived from the Studentized range distribution for all k groups,
    with the Kramer correction for unequal group sizes. Normally run
    only after anova() has rejected equality of means.

    Args:
        groups: The same grouped data that was passed to anova()
        anova_result: Result of anova(groups); its mse and dfe are used
        alpha: Family-wise significance level in (0, 1). Default 0.05.
        check_consistency: If True, verify that groups matches the group
            count, sizes and means recorded in anova_result. Off by
            default; pairing the right data with the right result is
            the caller's responsibility.

    Returns:
        TukeyKramerResult keyed by GroupPair(i, j), 1 <= i < j <= k

    Raises:
        ValidationError: Fewer than 2 groups, an empty group, alpha
            outside (0, 1), dfe <= 0, mse < 0, or (with
            check_consistency) mismatched data

    Examples:
        >>> X = [[1, 2, 5, 9], [2, 6, 4, 2, 3, 8], [15, 6, 26]]
        >>> tk = tukey_kramer(X, anova(X))
        >>> tk.significant
        {GroupPair(i=1, j=2): False, GroupPair(i=1, j=3): True, GroupPair(i=2, j=3): True}
        >>> round(tk.q_crit[(1, 3)], 4)
        10.8439
    """
    timer = Timer()
    timer.start()

    with timer.section('validation'):
        design = GroupedDesign.for_posthoc(groups)
        labels = design.labels
        if len(anova_result.labels) == design.n_groups:
            labels = tuple(anova_result.labels)

        alpha = check_scalar(alpha, "alpha")
        check_open_unit_interval(alpha, "alpha")

        dfe = check_scalar(anova_result.dfe, "anova_result.dfe")
        check_positive(dfe, "anova_result.dfe")
        mse = check_scalar(anova_result.mse, "anova_result.mse")
        check_nonnegative(mse, "anova_result.mse")

        if check_consistency:
            _check_consistency(design, anova_result)

    with timer.section('comparisons'):
        params = tukey_kramer_impl(design.groups, labels, mse, dfe, alpha)

    timer.stop()

    warn_list = []
    if anova_result.p_value >= alpha:
        msg = (
            f"ANOVA p-value {anova_result.p_value:.4g} is not below alpha={alpha}; "
            f"pairwise comparisons after a non-significant F test"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warn_list.append(msg)

    result = Result(
        params=params,
        info={'method': 'tukey_kramer', 'check_consistency': check_consistency},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warn_list),
    )

    return TukeyKramerResult(_result=result)


# =====================================================================
# Internal helpers
# =====================================================================


def _check_consistency(design: GroupedDesign, anova_result: AnovaResult) -> None:
    """Raise if the groups do not match what anova_result was computed from."""
    if design.n_groups != anova_result.n_groups:
        raise ValidationError(
            f"groups: {design.n_groups} groups, but anova_result was computed "
            f"from {anova_result.n_groups}"
        )
    if design.group_sizes != tuple(anova_result.group_sizes):
        raise ValidationError(
            f"groups: sizes {list(design.group_sizes)} don't match anova_result "
            f"sizes {list(anova_result.group_sizes)}"
        )
    means = [float(np.mean(g)) for g in design.groups]
    if not np.allclose(means, anova_result.group_means, rtol=1e-12, atol=0.0):
        raise ValidationError(
            f"groups: means {means} don't match anova_result means "
            f"{list(anova_result.group_means)}"
        )
    expected_dfe = float(design.n_obs - design.n_groups)
    if anova_result.dfe != expected_dfe:
        raise ValidationError(
            f"anova_result.dfe = {anova_result.dfe} but groups give N - k = {expected_dfe}"
        )
