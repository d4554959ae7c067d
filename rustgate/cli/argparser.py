"""
Argument parsing for the rustgate CLI.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from .. import __version__


def setup_argparse(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for rustgate.

    Supports:
      version              Show the toolchain version
      eval SELECTOR...     Evaluate selectors against the toolchain
      emit GATES_FILE      Print cargo:rustc-cfg directives for a gate file
      expand FILE          Expand version attributes in a Rust source file
    """
    parser = argparse.ArgumentParser(
        prog="rustgate",
        description="rustgate - conditional compilation by compiler version",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rustgate version
  rustgate eval "since(1.31)" "all(nightly, before(2019-01-01))"
  rustgate eval stable --text "rustc 1.35.0-beta.3 (c13114dc8 2019-04-27)"

  # build.rs helper:
  rustgate emit gates.yaml

  rustgate expand src/lib.rs --namespace rustversion
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: errors only"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO, including every gate result"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: full DEBUG, including every selector evaluation"
    )

    # Add subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _setup_version_subcommand(subparsers)
    _setup_eval_subcommand(subparsers)
    _setup_emit_subcommand(subparsers)
    _setup_expand_subcommand(subparsers)

    return parser.parse_args(argv)


def _add_text_option(parser) -> None:
    parser.add_argument(
        "--text",
        help="Use this `rustc --version` output instead of running the compiler",
    )


def _setup_version_subcommand(subparsers) -> None:
    version_parser = subparsers.add_parser("version", help="Show the detected toolchain version")
    _add_text_option(version_parser)
    version_parser.add_argument("--json", action="store_true", dest="json_output", help="Output as JSON")


def _setup_eval_subcommand(subparsers) -> None:
    eval_parser = subparsers.add_parser("eval", help="Evaluate selectors")
    eval_parser.add_argument("selectors", nargs="+", metavar="SELECTOR", help="Selector, e.g. 'since(1.31)'")
    _add_text_option(eval_parser)
    eval_parser.add_argument("--json", action="store_true", dest="json_output", help="Output as JSON")


def _setup_emit_subcommand(subparsers) -> None:
    emit_parser = subparsers.add_parser("emit", help="Print cargo:rustc-cfg directives for true gates")
    emit_parser.add_argument("gates_file", metavar="GATES_FILE", help="YAML file with a 'gates' mapping")
    _add_text_option(emit_parser)


def _setup_expand_subcommand(subparsers) -> None:
    expand_parser = subparsers.add_parser("expand", help="Expand version attributes in a Rust file")
    expand_parser.add_argument("source", metavar="FILE", help="Rust source file")
    _add_text_option(expand_parser)
    expand_parser.add_argument("--namespace", help="Attribute namespace (default: RUSTGATE_ATTR_NAMESPACE or rustversion)")
    expand_parser.add_argument("-o", "--output", help="Write the expanded source here instead of stdout")
