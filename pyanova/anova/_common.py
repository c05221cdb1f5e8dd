"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container: no methods, no computation.
"""

from dataclasses import dataclass
from typing import NamedTuple


class GroupPair(NamedTuple):
    """
    1-based index pair (i, j) with i < j identifying two groups.

    Compares equal to, and hashes like, the plain tuple (i, j), so
    result mappings can be indexed with either.
    """
    i: int
    j: int


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA.

    The eight core statistics are floats, degrees of freedom included.
    """
    ssb: float                          # between-group sum of squares
    sse: float                          # within-group (error) sum of squares
    dfb: float                          # k - 1
    dfe: float                          # N - k
    msb: float                          # ssb / dfb
    mse: float                          # sse / dfe
    f_value: float                      # msb / mse
    p_value: float                      # P(F(dfb, dfe) > f_value)
    n_obs: int
    n_groups: int
    group_sizes: tuple[int, ...]
    group_means: tuple[float, ...]
    grand_mean: float
    labels: tuple[str, ...]


@dataclass(frozen=True)
class PairwiseComparison:
    """One Tukey-Kramer comparison between groups pair.i and pair.j."""
    pair: GroupPair
    label: str                          # '|x1 - x2|'
    mean_difference: float              # |mean_i - mean_j|
    q_crit: float                       # q_value * se
    significant: bool                   # mean_difference > q_crit
    se: float                           # sqrt(mse / 2 * (1/n_i + 1/n_j))
    q_statistic: float | None           # mean_difference / se; None when se == 0
    p_value: float | None               # Studentized range upper tail; None when se == 0


@dataclass(frozen=True)
class TukeyKramerParams:
    """Parameter payload for the Tukey-Kramer test."""
    comparisons: tuple[PairwiseComparison, ...]   # lexicographic by (i, j)
    alpha: float
    q_value: float                      # Studentized range quantile at 1 - alpha
    mse: float
    dfe: float
    n_groups: int
    labels: tuple[str, ...]
