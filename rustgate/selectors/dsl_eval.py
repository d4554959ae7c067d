"""
DSL Expression Evaluator for selectors.

Evaluates a selector tree against the toolchain Version of the run.

Key Features:
- Channel, exact-release, nightly-date and range tests
- Minimum-version consistency check before every leaf; plain `nightly`
  is checked as a nightly of today's date
- any/all evaluate every child before combining, so a contradiction in
  a later child is never masked by an earlier result

Usage:
    guard = MinVerGuard()
    evaluator = SelectorEvaluator(guard)
    ok = evaluator.evaluate(parse_selector("since(1.31)"), version)
"""

from __future__ import annotations

import logging

from ..toolchain.bound import Bound, NightlyBound, StableBound, compare_bounds, compare_version
from ..toolchain.date import Date
from ..toolchain.release import ReleaseSelector
from ..toolchain.version import Version
from .dsl_nodes import (
    Expr, AllExpr, AnyExpr, NotExpr,
    StableExpr, BetaExpr, NightlyExpr, NightlyDateExpr, ReleaseExpr,
    SinceExpr, BeforeExpr, MinVerExpr,
)
from .errors import ConsistencyError
from .guard import MinVerGuard

logger = logging.getLogger(__name__)


# =============================================================================
# Minimum-version checks
# =============================================================================

def check_channel(minimum: Bound | None, channel: str) -> None:
    """`stable` / `beta` cannot fire once a nightly floor is asserted."""
    if isinstance(minimum, NightlyBound):
        raise ConsistencyError.nightly_channel(minimum, channel)


def check_nightly_date(minimum: Bound | None, date: Date) -> None:
    """`nightly(date)` cannot fire for a date older than the nightly floor."""
    if isinstance(minimum, NightlyBound) and date < minimum.date:
        raise ConsistencyError.nightly_date(minimum.date, date)


def check_bound(minimum: Bound | None, bound: Bound) -> None:
    """A since/before bound older than the floor is vacuous."""
    if minimum is not None and compare_bounds(bound, minimum) < 0:
        raise ConsistencyError.bad_bound(minimum, bound)


def check_release(minimum: Bound | None, release: ReleaseSelector) -> None:
    """`stable(x)` needs a stable floor no newer than x."""
    if isinstance(minimum, NightlyBound):
        raise ConsistencyError.nightly_release(minimum, release)
    if isinstance(minimum, StableBound) and release.sort_key < minimum.release.sort_key:
        raise ConsistencyError.release(minimum.release, release)


# =============================================================================
# Evaluator
# =============================================================================

class SelectorEvaluator:
    """
    Evaluates selector trees against a toolchain version.

    Stateless apart from the shared MinVerGuard, so one evaluator can serve
    every annotated site of a run, from any thread.

    Attributes:
        guard: The run's minimum-version assertion
    """

    def __init__(self, guard: MinVerGuard | None = None):
        """
        Initialize evaluator.

        Args:
            guard: Minimum-version holder shared across the run; a fresh
                one is created when omitted.
        """
        self.guard = guard if guard is not None else MinVerGuard()

    def evaluate(self, expr: Expr, version: Version) -> bool:
        """
        Evaluate an expression tree.

        Args:
            expr: Parsed selector.
            version: Toolchain version of the run.

        Returns:
            Whether the selector holds.

        Raises:
            ConsistencyError: If the selector contradicts the asserted
                minimum version, or re-asserts it.
        """
        result = self._eval(expr, version)
        logger.debug("Selector %s on %s -> %s", expr, version, result)
        return result

    def _eval(self, expr: Expr, version: Version) -> bool:
        if isinstance(expr, AllExpr):
            return all([self._eval(child, version) for child in expr.children])
        if isinstance(expr, AnyExpr):
            return any([self._eval(child, version) for child in expr.children])
        if isinstance(expr, NotExpr):
            return not self._eval(expr.child, version)
        if isinstance(expr, MinVerExpr):
            self.guard.assert_minimum(expr.bound)
            return True
        return self._eval_leaf(expr, version, self.guard.minimum)

    def _eval_leaf(self, expr: Expr, version: Version, minimum: Bound | None) -> bool:
        channel = version.channel

        if isinstance(expr, StableExpr):
            check_channel(minimum, "stable")
            return channel.is_stable
        if isinstance(expr, BetaExpr):
            check_channel(minimum, "beta")
            return channel.is_beta
        if isinstance(expr, NightlyExpr):
            check_nightly_date(minimum, Date.today())
            return channel.is_nightly
        if isinstance(expr, NightlyDateExpr):
            check_nightly_date(minimum, expr.date)
            return channel.date == expr.date
        if isinstance(expr, ReleaseExpr):
            check_release(minimum, expr.release)
            return channel.is_stable and version.release.matches(expr.release)
        if isinstance(expr, SinceExpr):
            check_bound(minimum, expr.bound)
            return compare_version(version, expr.bound) >= 0
        if isinstance(expr, BeforeExpr):
            check_bound(minimum, expr.bound)
            return compare_version(version, expr.bound) < 0

        raise TypeError(f"Unknown selector node: {type(expr).__name__}")


def evaluate(expr: Expr, version: Version, guard: MinVerGuard | None = None) -> bool:
    """Evaluate one selector; see SelectorEvaluator.evaluate."""
    return SelectorEvaluator(guard).evaluate(expr, version)


__all__ = [
    "SelectorEvaluator",
    "evaluate",
    "check_channel",
    "check_nightly_date",
    "check_bound",
    "check_release",
]
