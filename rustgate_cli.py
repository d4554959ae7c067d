#!/usr/bin/env python3
"""
rustgate CLI - compiler-version gates for Rust builds.

Non-interactive tool meant to be called from build scripts and CI:
  rustgate version                       Show the detected toolchain
  rustgate eval SELECTOR...              Evaluate selectors
  rustgate emit GATES_FILE               cargo:rustc-cfg directives
  rustgate expand FILE                   Expand version attributes

The compiler is taken from RUSTC (default `rustc`); pass --text to use
given `rustc --version` output instead.
"""

import sys

from rustgate.cli import (
    console,
    handle_emit,
    handle_eval,
    handle_expand,
    handle_version,
    log_level_for,
    setup_argparse,
)
from rustgate.config import get_config
from rustgate.utils.logger import setup_logger


HANDLERS = {
    "version": handle_version,
    "eval": handle_eval,
    "emit": handle_emit,
    "expand": handle_expand,
}


def main(argv=None) -> int:
    """Main entry point."""
    # Parse CLI arguments FIRST (before any config or logging)
    args = setup_argparse(argv)

    # Setup logging
    config = get_config()
    setup_logger(config.log.log_dir, log_level_for(args))

    handler = HANDLERS.get(args.command)
    if handler is None:
        console.print("[yellow]Usage: rustgate {version|eval|emit|expand} --help[/]")
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
