"""
Single-factor Analysis of Variance (ANOVA).

Public API:
    anova(groups, ...) -> AnovaResult                         # one-way F test
    tukey_kramer(groups, anova_result, ...) -> TukeyKramerResult  # pairwise post-hoc
"""

from pyanova.anova.solvers import (
    anova,
    tukey_kramer,
)
from pyanova.anova.solution import (
    AnovaResult,
    TukeyKramerResult,
)
from pyanova.anova._common import (
    GroupPair,
    PairwiseComparison,
)

__all__ = [
    "anova",
    "tukey_kramer",
    "AnovaResult",
    "TukeyKramerResult",
    "GroupPair",
    "PairwiseComparison",
]
