"""
Toolchain version model.

- Date: nightly build date
- Release / ReleaseSelector: concrete release number and release pattern
- Channel / Version: parsed `rustc --version`
- NightlyBound / StableBound: range bounds and their orderings
- parse_version / get_version: parsing and (cached) compiler invocation
"""

from .date import Date, parse_unsigned
from .release import Release, ReleaseSelector
from .version import ChannelKind, Channel, STABLE, BETA, DEV, Version
from .bound import NightlyBound, StableBound, Bound, compare_bounds, compare_version
from .rustc import (
    parse_version,
    rustc_command,
    query_version_text,
    get_version,
    reset_version_cache,
)

__all__ = [
    "Date",
    "parse_unsigned",
    "Release",
    "ReleaseSelector",
    "ChannelKind",
    "Channel",
    "STABLE",
    "BETA",
    "DEV",
    "Version",
    "NightlyBound",
    "StableBound",
    "Bound",
    "compare_bounds",
    "compare_version",
    "parse_version",
    "rustc_command",
    "query_version_text",
    "get_version",
    "reset_version_cache",
]
