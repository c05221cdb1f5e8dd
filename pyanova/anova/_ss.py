"""
Sums of squares computation for one-way ANOVA.

Decomposes total variation about the grand mean into a between-group
and a within-group part:

    SST = sum_j sum_i (x_ji - grand_mean)^2
    SSB = sum_j n_j * (mean_j - grand_mean)^2
    SSE = sum_j sum_i (x_ji - mean_j)^2

with SST = SSB + SSE up to rounding. Degrees of freedom are k - 1 and
N - k. The F statistic and its upper-tail p-value are computed from the
mean squares.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pyanova.core.distributions import f_upper_tail


@dataclass(frozen=True)
class SumsOfSquares:
    """Intermediate decomposition, before mean squares."""
    ssb: float
    sse: float
    grand_mean: float
    group_means: tuple[float, ...]


def compute_sums_of_squares(groups: tuple[NDArray, ...]) -> SumsOfSquares:
    """
    Between- and within-group sums of squares.

    Args:
        groups: Validated 1D float64 arrays, all non-empty

    Returns:
        SumsOfSquares
    """
    grand_mean = float(np.mean(np.concatenate(groups)))
    sizes = np.array([g.shape[0] for g in groups], dtype=np.float64)
    means = np.array([np.mean(g) for g in groups], dtype=np.float64)

    ssb = float(np.sum(sizes * (means - grand_mean) ** 2))
    sse = float(sum(np.sum((g - m) ** 2) for g, m in zip(groups, means)))

    return SumsOfSquares(
        ssb=ssb,
        sse=sse,
        grand_mean=grand_mean,
        group_means=tuple(float(m) for m in means),
    )


def compute_f_and_p(
    ssb: float,
    sse: float,
    n_obs: int,
    n_groups: int,
) -> tuple[float, float, float, float, float, float]:
    """
    Degrees of freedom, mean squares, F statistic and p-value.

    Callers guarantee n_obs > n_groups >= 2 and sse > 0.

    Returns:
        (dfb, dfe, msb, mse, f_value, p_value), all floats
    """
    dfb = float(n_groups - 1)
    dfe = float(n_obs - n_groups)
    msb = ssb / dfb
    mse = sse / dfe
    f_value = msb / mse
    p_value = f_upper_tail(dfb, dfe, f_value)
    return dfb, dfe, msb, mse, f_value, p_value
