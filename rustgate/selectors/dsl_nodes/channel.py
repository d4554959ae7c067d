"""
DSL Channel Nodes for the selector language.

This module defines the nodes that test the release channel:
- StableExpr: `stable`
- ReleaseExpr: `stable(1.34)` / `stable(1.34.1)`
- BetaExpr: `beta`
- NightlyExpr: `nightly` (dated nightly or dev build)
- NightlyDateExpr: `nightly(2019-01-01)`
"""

from __future__ import annotations

from dataclasses import dataclass

from ...toolchain.date import Date
from ...toolchain.release import ReleaseSelector


@dataclass(frozen=True)
class StableExpr:
    """True on any stable toolchain."""

    def __str__(self) -> str:
        return "stable"


@dataclass(frozen=True)
class BetaExpr:
    """True on any beta toolchain."""

    def __str__(self) -> str:
        return "beta"


@dataclass(frozen=True)
class NightlyExpr:
    """True on any nightly toolchain, including undated dev builds."""

    def __str__(self) -> str:
        return "nightly"


@dataclass(frozen=True)
class NightlyDateExpr:
    """
    True on exactly one nightly.

    Attributes:
        date: Build date the nightly must carry

    Examples:
        NightlyDateExpr(Date(2019, 1, 1))  # nightly(2019-01-01)
    """
    date: Date

    def __str__(self) -> str:
        return f"nightly({self.date})"


@dataclass(frozen=True)
class ReleaseExpr:
    """
    True on exactly the selected stable release.

    Unlike since/before this requires the live channel to be stable: a
    nightly that carries the same release number does not match.

    Attributes:
        release: Release pattern; a missing patch matches every patch

    Examples:
        ReleaseExpr(ReleaseSelector(34))     # stable(1.34)
        ReleaseExpr(ReleaseSelector(34, 1))  # stable(1.34.1)
    """
    release: ReleaseSelector

    def __str__(self) -> str:
        return f"stable({self.release})"


__all__ = [
    "StableExpr",
    "BetaExpr",
    "NightlyExpr",
    "NightlyDateExpr",
    "ReleaseExpr",
]
