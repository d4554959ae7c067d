"""
Minimum-version assertion for one build run.

A MinVerGuard is created once per run by the caller and shared by every
evaluation in that run. It holds at most one bound, set by the first
`minver(...)` selector evaluated; every other selector is checked against
it. Reads take a shared lock, the single write an exclusive one.
"""

from __future__ import annotations

import logging

from ..toolchain.bound import Bound
from ..utils.rwlock import ReadWriteLock
from .errors import ConsistencyError

logger = logging.getLogger(__name__)


class MinVerGuard:
    """
    Thread-safe holder of the run's minimum-version assertion.

    Example:
        guard = MinVerGuard()
        evaluator = SelectorEvaluator(guard)
        evaluator.evaluate(parse_selector("minver(1.40)"), version)
        guard.minimum   # StableBound(1.40)
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._minimum: Bound | None = None

    @property
    def minimum(self) -> Bound | None:
        """The asserted bound, or None while unset."""
        with self._lock.read():
            return self._minimum

    def assert_minimum(self, bound: Bound) -> None:
        """
        Record the minimum version for the rest of the run.

        Raises:
            ConsistencyError: If a minimum was already asserted, even an
                identical one.
        """
        with self._lock.write():
            if self._minimum is not None:
                raise ConsistencyError.duplicate_minver(self._minimum, bound)
            self._minimum = bound
        logger.info("Minimum toolchain version asserted: %s", bound)

    def reset(self) -> None:
        """Clear the assertion (test isolation only; a run never clears it)."""
        with self._lock.write():
            self._minimum = None


__all__ = ["MinVerGuard"]
