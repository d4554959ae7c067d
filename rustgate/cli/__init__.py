"""
CLI package for rustgate.
"""

from .argparser import setup_argparse
from .subcommands import handle_version, handle_eval, handle_emit, handle_expand
from .utils import console, err_console, log_level_for


__all__ = [
    "setup_argparse",
    "handle_version",
    "handle_eval",
    "handle_emit",
    "handle_expand",
    "console",
    "err_console",
    "log_level_for",
]
