"""
Subcommand handlers for the rustgate CLI.

Each handler takes the parsed argparse namespace and returns the process
exit code. Results go to stdout; diagnostics go to stderr.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from ..config.config import get_config
from ..errors import RustGateError, SelectorSyntaxError, SourceSyntaxError
from ..expand import expand_source
from ..gates import cargo_directives, evaluate_gates, load_gates
from ..selectors import ConsistencyError, MinVerGuard, SelectorEvaluator, parse_selector
from .utils import console, print_error, resolve_version


def handle_version(args) -> int:
    """Handle `version` subcommand."""
    try:
        version = resolve_version(args)
    except RustGateError as e:
        print_error(str(e))
        return 1

    channel = version.channel
    if args.json_output:
        output = {
            "release": str(version.release),
            "minor": version.minor,
            "patch": version.patch,
            "channel": channel.kind.name.lower(),
            "date": str(channel.date) if channel.date else None,
        }
        print(json.dumps(output, indent=2))
        return 0

    table = Table(title="Toolchain", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Release", str(version.release))
    table.add_row("Channel", channel.kind.name.lower())
    if channel.date is not None:
        table.add_row("Date", str(channel.date))
    console.print(table)
    return 0


def handle_eval(args) -> int:
    """Handle `eval` subcommand."""
    try:
        version = resolve_version(args)
    except RustGateError as e:
        print_error(str(e))
        return 1

    evaluator = SelectorEvaluator(MinVerGuard())
    rows = []
    failed = False
    for selector in args.selectors:
        try:
            value = evaluator.evaluate(parse_selector(selector), version)
            rows.append({"selector": selector, "result": value, "error": None})
        except SelectorSyntaxError as e:
            failed = True
            rows.append({"selector": selector, "result": None, "error": e.render()})
        except ConsistencyError as e:
            failed = True
            rows.append({"selector": selector, "result": None, "error": str(e)})

    if args.json_output:
        print(json.dumps({"version": str(version), "results": rows}, indent=2))
        return 1 if failed else 0

    for row in rows:
        selector = escape(row["selector"])
        if row["error"] is not None:
            print_error(f"{row['selector']}: {row['error']}")
        elif row["result"]:
            console.print(f"{selector} [green]true[/]", highlight=False)
        else:
            console.print(f"{selector} [red]false[/]", highlight=False)
    return 1 if failed else 0


def handle_emit(args) -> int:
    """Handle `emit` subcommand: cargo directives for every true gate."""
    try:
        gates = load_gates(args.gates_file)
    except (FileNotFoundError, ValueError) as e:
        print_error(str(e))
        return 1

    try:
        version = resolve_version(args)
    except RustGateError as e:
        print_error(str(e))
        return 1

    results = evaluate_gates(gates, version, MinVerGuard())

    # Plain print: cargo parses these lines verbatim
    for line in cargo_directives(results):
        print(line)

    failures = [r for r in results if not r.ok]
    for result in failures:
        print_error(f"gate '{result.name}' ({result.selector}): {result.error}")
    return 1 if failures else 0


def handle_expand(args) -> int:
    """Handle `expand` subcommand."""
    source_path = Path(args.source)
    try:
        source = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"cannot read {source_path}: {e}")
        return 1

    try:
        version = resolve_version(args)
    except RustGateError as e:
        print_error(str(e))
        return 1

    namespace = args.namespace or get_config().expand.namespace
    try:
        expanded = expand_source(source, version, MinVerGuard(), namespace)
    except SourceSyntaxError as e:
        print_error(f"{source_path}: {e}")
        return 1

    if args.output:
        Path(args.output).write_text(expanded, encoding="utf-8")
        console.print(f"[green]Wrote {escape(args.output)}[/]")
    else:
        sys.stdout.write(expanded)
    return 0


__all__ = ["handle_version", "handle_eval", "handle_emit", "handle_expand"]
