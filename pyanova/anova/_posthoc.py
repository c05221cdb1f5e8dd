"""
Tukey-Kramer pairwise comparisons.

For every pair of groups (i, j), i < j, the absolute difference of group
means is compared against

    q_crit(i, j) = q(1 - alpha; k, dfe) * sqrt(mse / 2 * (1/n_i + 1/n_j))

where q is the Studentized range quantile for all k groups, so the
family-wise error rate is controlled across the C(k, 2) comparisons.
With equal group sizes this reduces to Tukey's HSD.

Adjusted p-values use the same distribution: P(Q > |diff| / se) with
(k, dfe), matching scipy.stats.tukey_hsd.
"""

import numpy as np
from numpy.typing import NDArray

from pyanova.anova._common import GroupPair, PairwiseComparison, TukeyKramerParams
from pyanova.core.distributions import (
    studentized_range_quantile,
    studentized_range_upper_tail,
)


def pair_label(labels: tuple[str, ...], pair: GroupPair) -> str:
    """Human-readable comparison label, e.g. '|x1 - x2|'."""
    return f"|{labels[pair.i - 1]} - {labels[pair.j - 1]}|"


def iter_pairs(k: int):
    """Yield GroupPair(i, j) for 1 <= i < j <= k in lexicographic order."""
    for i in range(1, k):
        for j in range(i + 1, k + 1):
            yield GroupPair(i, j)


def tukey_kramer_impl(
    groups: tuple[NDArray, ...],
    labels: tuple[str, ...],
    mse: float,
    dfe: float,
    alpha: float,
) -> TukeyKramerParams:
    """
    Tukey-Kramer test on validated groups.

    Args:
        groups: Validated 1D float64 arrays (k >= 2, all non-empty)
        labels: Group labels, one per group
        mse: Error mean square from the ANOVA (>= 0)
        dfe: Error degrees of freedom from the ANOVA (> 0)
        alpha: Family-wise significance level in (0, 1)

    Returns:
        TukeyKramerParams with one comparison per unordered pair
    """
    k = len(groups)
    means = [float(np.mean(g)) for g in groups]
    sizes = [int(g.shape[0]) for g in groups]

    q_value = studentized_range_quantile(dfe, k, 1.0 - alpha)

    comparisons: list[PairwiseComparison] = []
    for pair in iter_pairs(k):
        a, b = pair.i - 1, pair.j - 1
        diff = abs(means[a] - means[b])
        se = float(np.sqrt((mse / 2.0) * (1.0 / sizes[a] + 1.0 / sizes[b])))
        q_crit = q_value * se

        q_stat: float | None = None
        p_val: float | None = None
        if se > 0:
            q_stat = diff / se
            p_val = studentized_range_upper_tail(q_stat, k, dfe)

        comparisons.append(PairwiseComparison(
            pair=pair,
            label=pair_label(labels, pair),
            mean_difference=diff,
            q_crit=q_crit,
            significant=bool(diff > q_crit),
            se=se,
            q_statistic=q_stat,
            p_value=p_val,
        ))

    return TukeyKramerParams(
        comparisons=tuple(comparisons),
        alpha=alpha,
        q_value=q_value,
        mse=mse,
        dfe=dfe,
        n_groups=k,
        labels=labels,
    )
