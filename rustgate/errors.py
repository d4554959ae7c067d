"""
Error hierarchy for rustgate.

Four families, matching how far a failure propagates:
- Toolchain execution errors (fatal for the whole run)
- Parse errors (version text, selector text, source text)
- Consistency errors (selector unreachable under the asserted minimum)
- Placement errors (qualifier insertion on an unsupported item)

Everything except the toolchain execution errors is recoverable per
annotated fragment: callers replace the fragment with a diagnostic.
"""

from __future__ import annotations


class RustGateError(Exception):
    """Base class for every error raised by rustgate."""


# =============================================================================
# Toolchain Execution
# =============================================================================

class ToolchainExecError(RustGateError):
    """The compiler could not be run."""

    def __init__(self, rustc: str, reason: str):
        self.rustc = rustc
        self.reason = reason
        super().__init__(f"failed to run `{rustc} --version`: {reason}")


class ToolchainOutputError(RustGateError):
    """The compiler produced output that is not valid UTF-8."""

    def __init__(self, rustc: str, reason: str):
        self.rustc = rustc
        self.reason = reason
        super().__init__(f"failed to parse output of `{rustc} --version`: {reason}")


# =============================================================================
# Parse Errors
# =============================================================================

class VersionParseError(RustGateError, ValueError):
    """Version text did not match the expected `rustc --version` shape."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"unexpected output from `rustc --version`, please file an issue: {text!r}"
        )


class SelectorSyntaxError(RustGateError, ValueError):
    """Selector text did not match the selector grammar."""

    def __init__(self, message: str, column: int | None = None, source: str | None = None):
        self.message = message
        self.column = column
        self.source = source
        super().__init__(message)

    def render(self) -> str:
        """Message followed by the selector and a caret under the column."""
        if self.source is None or self.column is None:
            return self.message
        caret = " " * (self.column - 1) + "^"
        return f"{self.message}\n  {self.source}\n  {caret}"


class SourceSyntaxError(RustGateError, ValueError):
    """Source text could not be split into balanced token trees."""

    def __init__(self, message: str, line: int | None = None):
        self.message = message
        self.line = line
        super().__init__(message if line is None else f"line {line}: {message}")


# =============================================================================
# Placement Errors
# =============================================================================

class PlacementError(RustGateError):
    """A build-time qualifier was requested on an unsupported item shape."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"only allowed on {kind}")


__all__ = [
    "RustGateError",
    "ToolchainExecError",
    "ToolchainOutputError",
    "VersionParseError",
    "SelectorSyntaxError",
    "SourceSyntaxError",
    "PlacementError",
]
