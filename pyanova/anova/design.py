"""
Grouped sample design object.

Wraps validated group data for the ANOVA and Tukey-Kramer engines.
Factory methods apply the preconditions each engine needs.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyanova.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_min_samples,
    check_sequence,
)
from pyanova.core.exceptions import ValidationError


@dataclass(frozen=True)
class GroupedDesign:
    """
    Validated data container for a grouped sample set.

    Created via factory methods, not directly. Group arrays are private
    read-only float64 copies, so the caller's data is never touched.
    """
    groups: tuple[NDArray[np.float64], ...]
    labels: tuple[str, ...]
    n_obs: int
    n_groups: int
    group_sizes: tuple[int, ...]

    @staticmethod
    def for_anova(
        groups: Any,
        *,
        labels: Any = None,
    ) -> 'GroupedDesign':
        """
        Create design for one-way ANOVA.

        Requires k >= 2 groups, every group non-empty and finite, and
        N > k so that the error degrees of freedom are positive.

        Args:
            groups: Sequence of 1D numeric array-likes, one per group
            labels: Optional group names (k distinct values)

        Returns:
            GroupedDesign
        """
        design = GroupedDesign._from_groups(groups, labels)
        if design.n_obs <= design.n_groups:
            raise ValidationError(
                f"groups: total observations N={design.n_obs} must exceed "
                f"number of groups k={design.n_groups} "
                f"(error degrees of freedom N - k = {design.n_obs - design.n_groups})"
            )
        return design

    @staticmethod
    def for_posthoc(
        groups: Any,
        *,
        labels: Any = None,
    ) -> 'GroupedDesign':
        """
        Create design for pairwise comparisons.

        Requires k >= 2 groups, every group non-empty and finite. The
        error degrees of freedom come from the ANOVA result instead.
        """
        return GroupedDesign._from_groups(groups, labels)

    @staticmethod
    def _from_groups(groups: Any, labels: Any) -> 'GroupedDesign':
        group_seq = check_sequence(groups, "groups")
        k = len(group_seq)
        if k < 2:
            raise ValidationError(f"groups: need at least 2 groups, got {k}")

        arrays: list[NDArray[np.float64]] = []
        for idx, g in enumerate(group_seq, start=1):
            name = f"groups[{idx}]"
            arr = check_array(g, name)
            check_1d(arr, name)
            check_min_samples(arr, 1, name)
            check_finite(arr, name)
            arr.flags.writeable = False
            arrays.append(arr)

        sizes = tuple(int(arr.shape[0]) for arr in arrays)

        return GroupedDesign(
            groups=tuple(arrays),
            labels=_validate_labels(labels, k),
            n_obs=sum(sizes),
            n_groups=k,
            group_sizes=sizes,
        )


def _validate_labels(labels: Any, k: int) -> tuple[str, ...]:
    """Default labels are x1..xk."""
    if labels is None:
        return tuple(f"x{i}" for i in range(1, k + 1))

    label_seq = check_sequence(labels, "labels")
    label_strs = tuple(str(v) for v in label_seq)
    if len(label_strs) != k:
        raise ValidationError(
            f"labels: expected {k} labels (one per group), got {len(label_strs)}"
        )
    if len(set(label_strs)) != k:
        raise ValidationError(f"labels: must be distinct, got {list(label_strs)}")
    return label_strs
