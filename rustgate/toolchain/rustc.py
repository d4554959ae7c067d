"""
Toolchain version detection.

Runs `rustc --version` once per process, parses the output into a
Version and caches it.

Accepted output (only the last non-empty line is read, so warnings printed
ahead of the version line are tolerated):

    rustc 1.24.1 (d3ae9a9e0 2018-02-27)
    rustc 1.35.0-beta.3 (c13114dc8 2019-04-27)
    rustc 1.36.0-nightly (938d4ffe1 2019-04-27)
    rustc 1.36.0-nightly               -> dev build (no date)
    rustc 1.36.0-dev
    rustc 1.0.0 (a59de37e9 2015-05-13) (built 2015-05-14)

Usage:
    version = parse_version("rustc 1.36.0-nightly (938d4ffe1 2019-04-27)")
    version = get_version()   # runs $RUSTC --version on first call
"""

from __future__ import annotations

import logging
import subprocess
import threading
from typing import Optional

from ..config.config import get_config
from ..config.constants import SUPPORTED_MAJOR, TOOLCHAIN_MARKER
from ..errors import ToolchainExecError, ToolchainOutputError, VersionParseError
from .date import Date, parse_unsigned
from .release import Release
from .version import BETA, DEV, STABLE, Channel, Version

logger = logging.getLogger(__name__)


# =============================================================================
# Parsing
# =============================================================================

def _last_line(text: str) -> str:
    for line in reversed(text.splitlines()):
        if line.strip():
            return line.strip()
    return ""


def _parse_channel(suffix: str | None, words: list[str]) -> Channel | None:
    """
    Resolve the channel from the `-suffix` of the version word.

    Args:
        suffix: Text after the first '-' of the version word, or None
        words: Remaining whitespace-separated words of the line

    Returns:
        Channel, or None when the line is malformed.
    """
    if suffix is None:
        return STABLE
    if suffix == "dev":
        return DEV
    if suffix.startswith("beta"):
        return BETA
    if suffix != "nightly":
        return None

    # A nightly without the (hash date) tail was built locally: treat as dev
    if not words:
        return DEV

    hash_word = words[0]
    if not hash_word.startswith("("):
        return None
    if len(words) < 2:
        return None
    date_word = words[1]
    if not date_word.endswith(")"):
        return None
    return Channel.nightly(Date.from_str(date_word[:-1]))


def _parse(text: str) -> Version | None:
    words = _last_line(text).split()
    if len(words) < 2 or words[0] != TOOLCHAIN_MARKER:
        return None

    version_channel = words[1].split("-")
    release_word = version_channel[0]
    suffix = version_channel[1] if len(version_channel) > 1 else None

    digits = release_word.split(".")
    if digits[0] != SUPPORTED_MAJOR or len(digits) < 2:
        return None
    minor = parse_unsigned(digits[1])
    patch = parse_unsigned(digits[2]) if len(digits) > 2 else 0

    channel = _parse_channel(suffix, words[2:])
    if channel is None:
        return None

    return Version(release=Release(minor, patch), channel=channel)


def parse_version(text: str) -> Version:
    """
    Parse `rustc --version` output into a Version.

    Never raises anything but VersionParseError, whatever the input.

    Args:
        text: Raw compiler output, possibly with leading diagnostic lines.

    Returns:
        Parsed Version.

    Raises:
        VersionParseError: If the text does not match the expected shape;
            the error carries the original text.
    """
    try:
        version = _parse(text)
    except ValueError:
        # Non-numeric component, out-of-range number or invalid date
        version = None
    if version is None:
        raise VersionParseError(text)
    return version


# =============================================================================
# Invocation
# =============================================================================

def query_version_text(rustc: str) -> str:
    """
    Run `<rustc> --version` and return its stdout.

    Raises:
        ToolchainExecError: If the compiler cannot be spawned.
        ToolchainOutputError: If stdout is not valid UTF-8.
    """
    logger.debug("Running %s --version", rustc)
    try:
        completed = subprocess.run(
            [rustc, "--version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as e:
        raise ToolchainExecError(rustc, str(e)) from e

    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ToolchainOutputError(rustc, str(e)) from e


def rustc_command() -> str:
    """Compiler to invoke: the configured RUSTC, `rustc` by default."""
    return get_config().toolchain.rustc


# Process-wide cache: the toolchain cannot change during one build
_version: Optional[Version] = None
_version_lock = threading.Lock()


def get_version(rustc: str | None = None) -> Version:
    """
    Get the toolchain version, invoking the compiler on first use only.

    Args:
        rustc: Compiler to run; defaults to the configured RUSTC.

    Raises:
        ToolchainExecError, ToolchainOutputError, VersionParseError
    """
    global _version
    with _version_lock:
        if _version is None:
            command = rustc or rustc_command()
            _version = parse_version(query_version_text(command))
            logger.info("Detected toolchain %s (channel %s)", _version, _version.channel)
        return _version


def reset_version_cache() -> None:
    """Forget the cached version (tests only)."""
    global _version
    with _version_lock:
        _version = None


__all__ = [
    "parse_version",
    "rustc_command",
    "query_version_text",
    "get_version",
    "reset_version_cache",
]
