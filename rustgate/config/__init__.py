"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    ToolchainConfig,
    LogConfig,
    ExpandConfig,
)

from .constants import (
    TOOLCHAIN_MARKER,
    SUPPORTED_MAJOR,
    DEFAULT_RUSTC,
    MAX_RELEASE_COMPONENT,
    MAX_YEAR_EXCLUSIVE,
    MAX_MONTH,
    MAX_DAY,
    SELECTOR_KEYWORDS,
    ATTRIBUTE_KEYWORDS,
    ATTR_KEYWORD,
    DEFAULT_ATTRIBUTE_NAMESPACE,
    EXAMPLE_RELEASE,
    CARGO_CFG_PREFIX,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "ToolchainConfig",
    "LogConfig",
    "ExpandConfig",
    # Constants
    "TOOLCHAIN_MARKER",
    "SUPPORTED_MAJOR",
    "DEFAULT_RUSTC",
    "MAX_RELEASE_COMPONENT",
    "MAX_YEAR_EXCLUSIVE",
    "MAX_MONTH",
    "MAX_DAY",
    "SELECTOR_KEYWORDS",
    "ATTRIBUTE_KEYWORDS",
    "ATTR_KEYWORD",
    "DEFAULT_ATTRIBUTE_NAMESPACE",
    "EXAMPLE_RELEASE",
    "CARGO_CFG_PREFIX",
]
