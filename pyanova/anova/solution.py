"""
User-facing ANOVA solution types.

Each solution wraps a Result[Params] and provides read-only accessors
and formatted summary output (matching R conventions).
"""

from dataclasses import dataclass
from typing import Any

from pyanova.core.result import Result
from pyanova.anova._common import (
    AnovaParams,
    GroupPair,
    PairwiseComparison,
    TukeyKramerParams,
)


# =====================================================================
# AnovaResult
# =====================================================================


@dataclass(frozen=True)
class AnovaResult:
    """
    User-facing result for one-way ANOVA.

    Produced by anova(). The eight core statistics are exposed as
    floats: ssb, sse, dfb, dfe, msb, mse, f_value, p_value.
    """
    _result: Result[AnovaParams]

    @property
    def ssb(self) -> float:
        """Between-group sum of squares."""
        return self._result.params.ssb

    @property
    def sse(self) -> float:
        """Within-group (error) sum of squares."""
        return self._result.params.sse

    @property
    def dfb(self) -> float:
        """Between-group degrees of freedom, k - 1."""
        return self._result.params.dfb

    @property
    def dfe(self) -> float:
        """Error degrees of freedom, N - k."""
        return self._result.params.dfe

    @property
    def msb(self) -> float:
        return self._result.params.msb

    @property
    def mse(self) -> float:
        return self._result.params.mse

    @property
    def f_value(self) -> float:
        """F statistic, msb / mse."""
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        """Upper-tail probability of F(dfb, dfe) at f_value."""
        return self._result.params.p_value

    @property
    def sst(self) -> float:
        """Total sum of squares, ssb + sse."""
        return self.ssb + self.sse

    @property
    def eta_squared(self) -> float:
        """Proportion of total variation explained by group membership."""
        sst = self.sst
        return self.ssb / sst if sst > 0 else 0.0

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def group_sizes(self) -> tuple[int, ...]:
        return self._result.params.group_sizes

    @property
    def group_means(self) -> tuple[float, ...]:
        return self._result.params.group_means

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def labels(self) -> tuple[str, ...]:
        return self._result.params.labels

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style one-way ANOVA summary table."""
        sig = _significance_stars(self.p_value)
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            f"Observations: {self.n_obs}    Groups: {self.n_groups}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
            f"{'Between groups':<20} {self.dfb:>6.0f} {self.ssb:>14.4f} "
            f"{self.msb:>14.4f} {self.f_value:>10.4f} {self.p_value:>12.4e} {sig}",
            f"{'Residuals':<20} {self.dfe:>6.0f} {self.sse:>14.4f} {self.mse:>14.4f}",
            f"{'Total':<20} {self.dfb + self.dfe:>6.0f} {self.sst:>14.4f}",
            "-" * 72,
            "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1",
            "",
            f"Effect size: eta^2 = {self.eta_squared:.4f}",
            "",
            f"{'Group':<20} {'n':>6} {'Mean':>14}",
        ]
        for label, n, mean in zip(self.labels, self.group_sizes, self.group_means):
            lines.append(f"{label:<20} {n:>6} {mean:>14.4f}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaResult(ssb={self.ssb!r}, sse={self.sse!r}, dfb={self.dfb!r}, "
            f"dfe={self.dfe!r}, msb={self.msb!r}, mse={self.mse!r}, "
            f"f_value={self.f_value!r}, p_value={self.p_value!r})"
        )


# =====================================================================
# TukeyKramerResult
# =====================================================================


@dataclass(frozen=True)
class TukeyKramerResult:
    """
    User-facing result for the Tukey-Kramer test.

    Produced by tukey_kramer(). The mappings mean_differences, q_crit
    and significant are built from one ordered sequence of comparisons,
    so they always share the same keys in lexicographic (i, j) order.
    Keys are GroupPair(i, j), 1-based, and also accept plain tuples.
    """
    _result: Result[TukeyKramerParams]

    @property
    def comparisons(self) -> tuple[PairwiseComparison, ...]:
        return self._result.params.comparisons

    @property
    def pairs(self) -> tuple[GroupPair, ...]:
        return tuple(c.pair for c in self.comparisons)

    @property
    def mean_differences(self) -> dict[GroupPair, float]:
        """|mean_i - mean_j| per pair."""
        return {c.pair: c.mean_difference for c in self.comparisons}

    @property
    def q_crit(self) -> dict[GroupPair, float]:
        """Critical mean difference per pair."""
        return {c.pair: c.q_crit for c in self.comparisons}

    @property
    def significant(self) -> dict[GroupPair, bool]:
        """mean_difference > q_crit per pair."""
        return {c.pair: c.significant for c in self.comparisons}

    @property
    def p_values(self) -> dict[GroupPair, float | None]:
        """Tukey-adjusted p-value per pair."""
        return {c.pair: c.p_value for c in self.comparisons}

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def q_value(self) -> float:
        """Studentized range quantile at 1 - alpha, before scaling."""
        return self._result.params.q_value

    @property
    def mse(self) -> float:
        return self._result.params.mse

    @property
    def dfe(self) -> float:
        return self._result.params.dfe

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def labels(self) -> tuple[str, ...]:
        return self._result.params.labels

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def comparison(self, i: int, j: int) -> PairwiseComparison:
        """
        Look up the comparison for groups i and j (1-based, either order).

        Raises:
            KeyError: If (i, j) does not name two distinct groups
        """
        a, b = (i, j) if i < j else (j, i)
        for c in self.comparisons:
            if c.pair == (a, b):
                return c
        raise KeyError(
            f"no comparison for groups ({i}, {j}); "
            f"valid indices are 1..{self.n_groups}, distinct"
        )

    def summary(self) -> str:
        """Generate the pairwise comparison table."""
        lines = [
            "Tukey-Kramer Multiple Comparisons",
            "=" * 72,
            f"Groups: {self.n_groups}    alpha = {self.alpha}    "
            f"q({1 - self.alpha:g}; {self.n_groups}, {self.dfe:g}) = {self.q_value:.4f}",
            "",
            f"{'Comparison':<22} {'diff':>10} {'q crit':>10} {'p adj':>12} {'Significant':>12}",
            "-" * 72,
        ]

        for c in self.comparisons:
            p_text = f"{c.p_value:>12.4e}" if c.p_value is not None else f"{'NA':>12}"
            lines.append(
                f"{c.label:<22} {c.mean_difference:>10.4f} {c.q_crit:>10.4f} "
                f"{p_text} {str(c.significant):>12}"
            )

        lines.append("-" * 72)
        return "\n".join(lines)

    def __repr__(self) -> str:
        n_sig = sum(1 for c in self.comparisons if c.significant)
        return (
            f"TukeyKramerResult(n_comparisons={len(self.comparisons)}, "
            f"n_significant={n_sig}, alpha={self.alpha})"
        )


# =====================================================================
# Helpers
# =====================================================================


def _significance_stars(p: float) -> str:
    """Return significance stars for a p-value."""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
