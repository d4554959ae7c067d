"""
rustgate - conditional compilation by compiler version.

Parses `rustc --version` output, evaluates version selectors such as
`since(1.31)` or `all(nightly, before(2019-01-01))`, and applies them to
build scripts (gate files) and Rust source (version attributes).

Usage:
    from rustgate import MinVerGuard, evaluate, get_version, parse_selector

    guard = MinVerGuard()
    if evaluate(parse_selector("since(1.31)"), get_version(), guard):
        ...
"""

__version__ = "1.0.0"

from .errors import (
    RustGateError,
    ToolchainExecError,
    ToolchainOutputError,
    VersionParseError,
    SelectorSyntaxError,
    SourceSyntaxError,
    PlacementError,
)
from .toolchain import (
    Date,
    Release,
    ReleaseSelector,
    Channel,
    ChannelKind,
    Version,
    NightlyBound,
    StableBound,
    Bound,
    compare_bounds,
    compare_version,
    parse_version,
    get_version,
)
from .selectors import (
    ConsistencyError,
    MinVerGuard,
    SelectorEvaluator,
    evaluate,
    parse_selector,
)
from .expand import expand_source
from .gates import load_gates, evaluate_gates


__all__ = [
    "__version__",
    # Errors
    "RustGateError",
    "ToolchainExecError",
    "ToolchainOutputError",
    "VersionParseError",
    "SelectorSyntaxError",
    "SourceSyntaxError",
    "PlacementError",
    "ConsistencyError",
    # Version model
    "Date",
    "Release",
    "ReleaseSelector",
    "Channel",
    "ChannelKind",
    "Version",
    "NightlyBound",
    "StableBound",
    "Bound",
    "compare_bounds",
    "compare_version",
    "parse_version",
    "get_version",
    # Selectors
    "MinVerGuard",
    "SelectorEvaluator",
    "evaluate",
    "parse_selector",
    # Applications
    "expand_source",
    "load_gates",
    "evaluate_gates",
]
