"""
Range bounds used by since(...), before(...) and minver(...).

A bound is either a nightly date or a stable release number. Two
comparisons live here and they are deliberately different:

- compare_bounds: bound vs bound, a total order. Stable bounds order by
  release (wildcard patch as 0), nightly bounds by date, and every nightly
  bound sorts after every stable bound.
- compare_version: toolchain Version vs bound. A stable bound compares on
  the release number only, whatever the version's channel, so a beta or
  nightly that already carries 1.34 satisfies since(1.34). A nightly bound
  puts stable and beta before it, compares nightlies by date, and puts dev
  builds after it.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .date import Date
from .release import ReleaseSelector
from .version import ChannelKind, Version


def _cmp(left, right) -> int:
    return (left > right) - (left < right)


@total_ordering
class _BoundOrdering:
    """Rich comparisons for bounds, all routed through compare_bounds."""

    def __eq__(self, other):
        if not isinstance(other, (NightlyBound, StableBound)):
            return NotImplemented
        return compare_bounds(self, other) == 0

    def __lt__(self, other):
        if not isinstance(other, (NightlyBound, StableBound)):
            return NotImplemented
        return compare_bounds(self, other) < 0

    def __hash__(self):
        return hash(_bound_key(self))


@dataclass(frozen=True, eq=False)
class NightlyBound(_BoundOrdering):
    """A nightly build date used as a bound."""
    date: Date

    def __str__(self) -> str:
        return str(self.date)


@dataclass(frozen=True, eq=False)
class StableBound(_BoundOrdering):
    """A stable release number used as a bound."""
    release: ReleaseSelector

    def __str__(self) -> str:
        return str(self.release)


Bound = NightlyBound | StableBound


def _bound_key(bound: Bound) -> tuple[int, int, int, int]:
    if isinstance(bound, NightlyBound):
        return (1, bound.date.year, bound.date.month, bound.date.day)
    minor, patch = bound.release.sort_key
    return (0, minor, patch, 0)


def compare_bounds(left: Bound, right: Bound) -> int:
    """
    Total order over bounds.

    Returns:
        Negative if left sorts first, 0 if equal, positive otherwise.
    """
    return _cmp(_bound_key(left), _bound_key(right))


def compare_version(version: Version, bound: Bound) -> int:
    """
    Compare a live toolchain version against a bound.

    Returns:
        Negative if the version is older than the bound, 0 if it sits
        exactly on it, positive if newer.
    """
    if isinstance(bound, StableBound):
        actual = (version.minor, version.patch)
        return _cmp(actual, bound.release.sort_key)

    kind = version.channel.kind
    if kind in (ChannelKind.STABLE, ChannelKind.BETA):
        return -1
    if kind == ChannelKind.DEV:
        return 1
    return _cmp(version.channel.date, bound.date)


__all__ = [
    "NightlyBound",
    "StableBound",
    "Bound",
    "compare_bounds",
    "compare_version",
]
