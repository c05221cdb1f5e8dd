"""
PyAnova: single-factor analysis of variance for Python.

One-way ANOVA with the Tukey-Kramer post-hoc test, built on numpy and
scipy, with R-style summaries.

Submodules:
    anova: One-way ANOVA and Tukey-Kramer pairwise comparisons
    core: Result envelope, exceptions, validation, distribution utilities

The name ``pyanova.anova`` refers to the subpackage; the ANOVA engine is
``pyanova.anova.anova``.
"""

__version__ = "0.1.0"

from pyanova import core
from pyanova import anova
from pyanova.anova import (
    tukey_kramer,
    AnovaResult,
    TukeyKramerResult,
    GroupPair,
    PairwiseComparison,
)

__all__ = [
    "__version__",
    "core",
    "anova",
    "tukey_kramer",
    "AnovaResult",
    "TukeyKramerResult",
    "GroupPair",
    "PairwiseComparison",
]
