"""
Consistency errors: selectors that can never fire under the asserted
minimum version, and duplicate minimum-version assertions.
"""

from __future__ import annotations

from ..errors import RustGateError
from ..toolchain.bound import Bound, NightlyBound, StableBound
from ..toolchain.date import Date
from ..toolchain.release import ReleaseSelector


class ConsistencyError(RustGateError):
    """
    A selector is unreachable given the asserted minimum version.

    Build with the named constructors; each message carries both
    conflicting values.

    Attributes:
        minimum: The asserted minimum bound
        requested: Text of the selector or bound that conflicts with it
    """

    def __init__(self, message: str, minimum: Bound, requested: str):
        self.minimum = minimum
        self.requested = requested
        super().__init__(message)

    @classmethod
    def nightly_date(cls, mindate: Date, date: Date) -> "ConsistencyError":
        return cls(
            f"nightly({date}) can never match: minimum version is asserted as "
            f"nightly({mindate})",
            NightlyBound(mindate),
            f"nightly({date})",
        )

    @classmethod
    def nightly_channel(cls, minimum: NightlyBound, channel: str) -> "ConsistencyError":
        return cls(
            f"`{channel}` can never match: minimum version is asserted as "
            f"nightly({minimum.date}), which requires a nightly toolchain",
            minimum,
            channel,
        )

    @classmethod
    def nightly_release(cls, minimum: NightlyBound, release: ReleaseSelector) -> "ConsistencyError":
        return cls(
            f"stable({release}) can never match: minimum version is asserted as "
            f"nightly({minimum.date}), which requires a nightly toolchain",
            minimum,
            f"stable({release})",
        )

    @classmethod
    def release(cls, minrel: ReleaseSelector, release: ReleaseSelector) -> "ConsistencyError":
        return cls(
            f"stable({release}) can never match: it is older than the asserted "
            f"minimum version {minrel}",
            StableBound(minrel),
            f"stable({release})",
        )

    @classmethod
    def bad_bound(cls, minimum: Bound, bound: Bound) -> "ConsistencyError":
        return cls(
            f"bound {bound} is older than the asserted minimum version {minimum}; "
            f"the condition is always true or always false",
            minimum,
            str(bound),
        )

    @classmethod
    def duplicate_minver(cls, minimum: Bound, new_minimum: Bound) -> "ConsistencyError":
        return cls(
            f"minver({new_minimum}) conflicts with earlier minver({minimum}): "
            f"the minimum version may only be asserted once",
            minimum,
            f"minver({new_minimum})",
        )


__all__ = ["ConsistencyError"]
