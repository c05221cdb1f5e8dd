"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def reference_groups():
    """Three unequal groups with published ANOVA and Tukey-Kramer values."""
    return [[1, 2, 5, 9], [2, 6, 4, 2, 3, 8], [15, 6, 26]]
