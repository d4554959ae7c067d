"""
CLI utility functions for rustgate.

Contains:
- Shared consoles (stdout for results, stderr for diagnostics)
- Version resolution from --text or the configured compiler
- Logging level selection from -q / -v / --debug
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from ..config.config import get_config
from ..toolchain import get_version, parse_version
from ..toolchain.version import Version


# Global Consoles
console = Console()
err_console = Console(stderr=True)


def resolve_version(args) -> Version:
    """
    Version given with --text, or the detected toolchain version.

    Raises:
        VersionParseError: If the text is not `rustc --version` output.
        ToolchainExecError, ToolchainOutputError: If the compiler cannot
            be queried.
    """
    text = getattr(args, "text", None)
    if text:
        return parse_version(text)
    return get_version()


def log_level_for(args) -> str:
    """Map verbosity flags to a logging level; config decides otherwise."""
    if getattr(args, "debug", False):
        return "DEBUG"
    if getattr(args, "verbose", False):
        return "INFO"
    if getattr(args, "quiet", False):
        return "ERROR"
    return get_config().log.level


def print_error(message: str) -> None:
    """Print a failure line on stderr."""
    err_console.print(f"[bold red]error:[/] {escape(message)}", highlight=False)
