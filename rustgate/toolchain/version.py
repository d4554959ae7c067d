"""
Toolchain version model: release channel plus release number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .date import Date
from .release import Release


class ChannelKind(IntEnum):
    """Release track of a toolchain build."""

    STABLE = 0
    BETA = 1
    NIGHTLY = 2  # Dated nightly build
    DEV = 3      # Built from source without release metadata


@dataclass(frozen=True)
class Channel:
    """
    Release channel; only NIGHTLY carries a date.

    Use the STABLE / BETA / DEV constants and Channel.nightly(date) rather
    than building instances by hand.

    Attributes:
        kind: Which track the build came from
        date: Build date, set iff kind is NIGHTLY
    """
    kind: ChannelKind
    date: Date | None = None

    def __post_init__(self):
        """Validate that exactly the nightly variant carries a date."""
        if self.kind == ChannelKind.NIGHTLY and self.date is None:
            raise ValueError("Channel: nightly channel requires a date")
        if self.kind != ChannelKind.NIGHTLY and self.date is not None:
            raise ValueError(f"Channel: {self.kind.name.lower()} channel cannot carry a date")

    @classmethod
    def nightly(cls, date: Date) -> "Channel":
        return cls(ChannelKind.NIGHTLY, date)

    @property
    def is_stable(self) -> bool:
        return self.kind == ChannelKind.STABLE

    @property
    def is_beta(self) -> bool:
        return self.kind == ChannelKind.BETA

    @property
    def is_nightly(self) -> bool:
        """Dated nightly or undated dev build."""
        return self.kind in (ChannelKind.NIGHTLY, ChannelKind.DEV)

    def __str__(self) -> str:
        if self.kind == ChannelKind.NIGHTLY:
            return f"nightly({self.date})"
        return self.kind.name.lower()


STABLE = Channel(ChannelKind.STABLE)
BETA = Channel(ChannelKind.BETA)
DEV = Channel(ChannelKind.DEV)


@dataclass(frozen=True)
class Version:
    """
    Parsed toolchain version.

    Produced once per run from `rustc --version` and passed by value into
    every selector evaluation.

    Attributes:
        release: Release number (1.<minor>.<patch>)
        channel: Release channel
    """
    release: Release
    channel: Channel

    @property
    def minor(self) -> int:
        return self.release.minor

    @property
    def patch(self) -> int:
        return self.release.patch

    def __str__(self) -> str:
        if self.channel.kind == ChannelKind.STABLE:
            return str(self.release)
        if self.channel.kind == ChannelKind.NIGHTLY:
            return f"{self.release}-nightly ({self.channel.date})"
        return f"{self.release}-{self.channel}"


__all__ = [
    "ChannelKind",
    "Channel",
    "STABLE",
    "BETA",
    "DEV",
    "Version",
]
