"""
Tests for the distribution utilities.

Validates:
    - f_upper_tail: range, monotonicity, endpoints, agreement with scipy
    - studentized_range_quantile: positivity, monotonicity in confidence
      and number of groups, published table values
    - studentized_range_upper_tail: inverse relation with the quantile
    - Out-of-domain parameters raise DistributionError
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pyanova.core.distributions import (
    f_upper_tail,
    studentized_range_quantile,
    studentized_range_upper_tail,
)
from pyanova.core.exceptions import DistributionError


# ═══════════════════════════════════════════════════════════════════════
# F distribution
# ═══════════════════════════════════════════════════════════════════════


class TestFUpperTail:

    def test_one_at_zero(self):
        assert f_upper_tail(2, 10, 0.0) == 1.0

    def test_reference_value(self):
        np.testing.assert_allclose(
            f_upper_tail(2.0, 10.0, 5.655961000788588), 0.022745050729447377, rtol=1e-9
        )

    def test_matches_scipy(self):
        for dfb, dfe, f in [(1, 1, 0.5), (3, 27, 2.1), (4, 100, 10.0)]:
            np.testing.assert_allclose(
                f_upper_tail(dfb, dfe, f), sp_stats.f.sf(f, dfb, dfe), rtol=1e-14
            )

    def test_monotone_non_increasing(self):
        values = [f_upper_tail(3, 20, f) for f in np.linspace(0, 20, 41)]
        assert all(0.0 <= v <= 1.0 for v in values)
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_tends_to_zero(self):
        assert f_upper_tail(3, 20, 1e6) < 1e-12

    def test_returns_float(self):
        assert isinstance(f_upper_tail(2, 10, 3.0), float)

    @pytest.mark.parametrize("dfb, dfe, f", [
        (0, 10, 1.0),
        (2, 0, 1.0),
        (2, -3, 1.0),
        (2, 10, -1.0),
        (2, 10, float('nan')),
        (2, 10, float('inf')),
        (float('nan'), 10, 1.0),
    ])
    def test_out_of_domain(self, dfb, dfe, f):
        with pytest.raises(DistributionError) as exc_info:
            f_upper_tail(dfb, dfe, f)
        assert exc_info.value.distribution == 'f'
        assert set(exc_info.value.parameters) == {'dfb', 'dfe', 'f_value'}


# ═══════════════════════════════════════════════════════════════════════
# Studentized range distribution
# ═══════════════════════════════════════════════════════════════════════


class TestStudentizedRangeQuantile:

    @pytest.mark.parametrize("dfe, k, expected", [
        (10, 3, 3.877),
        (10, 4, 4.327),
        (20, 3, 3.578),
        (30, 5, 4.102),
    ])
    def test_table_values(self, dfe, k, expected):
        """Upper 5% points from standard Studentized range tables."""
        np.testing.assert_allclose(studentized_range_quantile(dfe, k, 0.95), expected, atol=2e-3)

    def test_positive(self):
        for conf in (0.01, 0.5, 0.95, 0.999):
            assert studentized_range_quantile(10, 3, conf) > 0

    def test_increasing_in_confidence(self):
        qs = [studentized_range_quantile(10, 3, c) for c in (0.5, 0.9, 0.95, 0.99)]
        assert all(a < b for a, b in zip(qs, qs[1:]))

    def test_increasing_in_num_groups(self):
        qs = [studentized_range_quantile(15, k, 0.95) for k in (2, 3, 5, 8)]
        assert all(a < b for a, b in zip(qs, qs[1:]))

    def test_fractional_dfe(self):
        q = studentized_range_quantile(10.5, 3, 0.95)
        assert studentized_range_quantile(11, 3, 0.95) < q < studentized_range_quantile(10, 3, 0.95)

    def test_matches_scipy_parameter_order(self):
        """scipy orders (k, df); the wrapper takes (dfe, num_groups)."""
        np.testing.assert_allclose(
            studentized_range_quantile(12, 4, 0.95),
            sp_stats.studentized_range.ppf(0.95, 4, 12),
            rtol=1e-14,
        )

    @pytest.mark.parametrize("dfe, k, conf", [
        (0, 3, 0.95),
        (-1, 3, 0.95),
        (10, 1, 0.95),
        (10, 3, 0.0),
        (10, 3, 1.0),
        (10, 3, float('nan')),
    ])
    def test_out_of_domain(self, dfe, k, conf):
        with pytest.raises(DistributionError) as exc_info:
            studentized_range_quantile(dfe, k, conf)
        assert exc_info.value.distribution == 'studentized_range'


class TestStudentizedRangeUpperTail:

    def test_inverts_quantile(self):
        q = studentized_range_quantile(10, 3, 0.95)
        np.testing.assert_allclose(studentized_range_upper_tail(q, 3, 10), 0.05, atol=1e-6)

    def test_one_at_zero(self):
        assert studentized_range_upper_tail(0.0, 3, 10) == 1.0

    def test_in_unit_interval(self):
        for q in (0.1, 1.0, 3.0, 10.0):
            assert 0.0 <= studentized_range_upper_tail(q, 4, 12) <= 1.0

    def test_rejects_negative_q(self):
        with pytest.raises(DistributionError):
            studentized_range_upper_tail(-1.0, 3, 10)
