"""
Wall-clock timing for anova() and tukey_kramer().

Each engine times its phases (validation, sums of squares, F test,
pairwise comparisons) and stores the breakdown in Result.timing, e.g.

    {'total_seconds': 0.0004, 'validation': 0.0001, 'sums_of_squares': 0.0002}
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall run time plus per-phase durations.

    A phase entered more than once under the same name accumulates.
    Phases are reported in the order they were first entered.
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._began: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._began = time.perf_counter()

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block as phase `name`, even if it raises."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = (
                self._phases.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Timing dict for Result.timing.

        Raises:
            RuntimeError: If stop() has not been called
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
