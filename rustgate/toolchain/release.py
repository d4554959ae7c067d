"""
Release numbers.

- Release: the concrete (minor, patch) of an actual toolchain build
- ReleaseSelector: a pattern used inside selectors, whose patch may be
  left out to match every patch of a minor version

The major version is always 1 and is not stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config.constants import MAX_RELEASE_COMPONENT


def _check_component(owner: str, name: str, value: int) -> None:
    if not 0 <= value <= MAX_RELEASE_COMPONENT:
        raise ValueError(
            f"{owner}: {name} must be within 0..{MAX_RELEASE_COMPONENT}, got {value}"
        )


@dataclass(frozen=True, order=True)
class Release:
    """
    Release number of a real toolchain build, always fully specified.

    Attributes:
        minor: Minor version (1.<minor>)
        patch: Patch version, 0 when the toolchain did not print one
    """
    minor: int
    patch: int = 0

    def __post_init__(self):
        _check_component("Release", "minor", self.minor)
        _check_component("Release", "patch", self.patch)

    def __str__(self) -> str:
        return f"1.{self.minor}.{self.patch}"

    def matches(self, selector: "ReleaseSelector") -> bool:
        """True when this release is one the selector names."""
        if self.minor != selector.minor:
            return False
        return selector.patch is None or selector.patch == self.patch


@dataclass(frozen=True)
class ReleaseSelector:
    """
    Release pattern used by `stable(...)`, `since(...)`, `before(...)`.

    Attributes:
        minor: Minor version to match
        patch: Exact patch, or None for "any patch of this minor"

    Examples:
        ReleaseSelector(31)      # 1.31, any patch
        ReleaseSelector(31, 2)   # exactly 1.31.2
    """
    minor: int
    patch: int | None = None

    def __post_init__(self):
        _check_component("ReleaseSelector", "minor", self.minor)
        if self.patch is not None:
            _check_component("ReleaseSelector", "patch", self.patch)

    @property
    def sort_key(self) -> tuple[int, int]:
        """
        Ordering key; a wildcard patch sorts as patch 0.

        Equality stays structural (1.40 != 1.40.0), so callers that order
        selectors compare sort_key rather than the selectors themselves.
        """
        return (self.minor, self.patch if self.patch is not None else 0)

    def __str__(self) -> str:
        if self.patch is None:
            return f"1.{self.minor}"
        return f"1.{self.minor}.{self.patch}"


__all__ = ["Release", "ReleaseSelector"]
