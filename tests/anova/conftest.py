"""
Shared fixtures for ANOVA tests.

Provides reusable grouped datasets and a factory for hand-built
AnovaResult objects (used to feed degenerate values to tukey_kramer).
"""

import numpy as np
import pytest

from pyanova.core.result import Result
from pyanova.anova._common import AnovaParams
from pyanova.anova.solution import AnovaResult


# =====================================================================
# Grouped sample fixtures
# =====================================================================


@pytest.fixture
def balanced_groups():
    """3 groups of n=10, clear group differences (means 10, 15, 20)."""
    rng = np.random.default_rng(42)
    return [
        rng.normal(10.0, 2.0, 10),
        rng.normal(15.0, 2.0, 10),
        rng.normal(20.0, 2.0, 10),
    ]


@pytest.fixture
def unbalanced_groups():
    """3 groups of n=5, 10, 15."""
    rng = np.random.default_rng(123)
    return [
        rng.normal(10.0, 2.0, 5),
        rng.normal(15.0, 2.0, 10),
        rng.normal(20.0, 2.0, 15),
    ]


@pytest.fixture
def no_effect_groups():
    """3 groups drawn from the same population."""
    rng = np.random.default_rng(99)
    y = rng.normal(10.0, 2.0, 45)
    return [y[:15], y[15:30], y[30:]]


@pytest.fixture
def two_groups():
    """2 groups (F should equal the pooled t statistic squared)."""
    rng = np.random.default_rng(77)
    return [rng.normal(10.0, 3.0, 20), rng.normal(14.0, 3.0, 20)]


@pytest.fixture
def five_groups():
    """5 unequal groups for pair enumeration tests."""
    rng = np.random.default_rng(7)
    sizes = [4, 7, 3, 9, 6]
    means = [0.0, 1.0, 5.0, 5.5, 12.0]
    return [rng.normal(m, 1.5, n) for m, n in zip(means, sizes)]


# =====================================================================
# Hand-built results
# =====================================================================


@pytest.fixture
def make_anova_result():
    """Factory for AnovaResult objects with arbitrary mse / dfe / p_value."""

    def _make(
        *,
        mse: float = 26.825,
        dfe: float = 10.0,
        p_value: float = 0.01,
        n_groups: int = 3,
        group_sizes: tuple[int, ...] = (4, 6, 3),
        group_means: tuple[float, ...] = (4.25, 25 / 6, 47 / 3),
    ) -> AnovaResult:
        params = AnovaParams(
            ssb=0.0,
            sse=mse * dfe,
            dfb=float(n_groups - 1),
            dfe=dfe,
            msb=0.0,
            mse=mse,
            f_value=0.0,
            p_value=p_value,
            n_obs=sum(group_sizes),
            n_groups=n_groups,
            group_sizes=group_sizes,
            group_means=group_means,
            grand_mean=0.0,
            labels=tuple(f"x{i}" for i in range(1, n_groups + 1)),
        )
        return AnovaResult(_result=Result(
            params=params, info={}, timing=None, backend_name='test',
        ))

    return _make
