"""
Centralized constants for rustgate.

Everything here describes the one toolchain family rustgate understands:
its `--version` output shape and the selector vocabulary built on top of it.
"""

# ==================== Toolchain ====================

# First word of `rustc --version` output
TOOLCHAIN_MARKER = "rustc"

# Only 1.x toolchains exist; any other major fails parsing
SUPPORTED_MAJOR = "1"

DEFAULT_RUSTC = "rustc"

# Largest value of a minor/patch component (unsigned 16-bit)
MAX_RELEASE_COMPONENT = 0xFFFF


# ==================== Dates ====================

# Deliberately permissive: no real calendar check
MAX_YEAR_EXCLUSIVE = 3000
MAX_MONTH = 12
MAX_DAY = 31


# ==================== Selectors ====================

# Leading keywords, in the order used for "expected one of" diagnostics
SELECTOR_KEYWORDS = (
    "stable",
    "beta",
    "nightly",
    "since",
    "before",
    "not",
    "any",
    "all",
    "minver",
)

# Keywords usable directly as an attribute name (#[rustversion::since(..)])
ATTRIBUTE_KEYWORDS = frozenset(SELECTOR_KEYWORDS) - {"minver"}

# Conditional-attribute form: #[rustversion::attr(selector, then)]
ATTR_KEYWORD = "attr"

DEFAULT_ATTRIBUTE_NAMESPACE = "rustversion"

# Example values used in error messages
EXAMPLE_RELEASE = "1.31"


# ==================== Build Script Output ====================

CARGO_CFG_PREFIX = "cargo:rustc-cfg="
