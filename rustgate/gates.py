"""
Gate files: named selectors for build scripts.

A gate file is YAML with one `gates` mapping from cfg name to selector:

    gates:
      has_u128: since(1.26)
      old_nightly: all(nightly, before(2019-01-01))

Every gate that holds becomes a `cargo:rustc-cfg=<name>` directive. Gates
are evaluated in file order against one shared MinVerGuard, so a
`minver(...)` gate constrains the gates listed after it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import yaml

from .config.constants import CARGO_CFG_PREFIX
from .errors import SelectorSyntaxError
from .selectors import ConsistencyError, MinVerGuard, SelectorEvaluator, parse_selector
from .toolchain.version import Version
from .utils.logger import get_logger

_CFG_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class GateResult:
    """
    Outcome of one gate.

    Attributes:
        name: cfg name
        selector: Selector text
        value: Whether the selector holds; None when evaluation failed
        error: Failure message when value is None
    """
    name: str
    selector: str
    value: Optional[bool]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_gates(path: str | Path) -> Dict[str, str]:
    """
    Load and validate a gate file.

    Args:
        path: YAML file path

    Returns:
        Mapping of cfg name to selector text, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a non-empty `gates` mapping of
            identifier names to selector strings
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Gate file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not raw or not isinstance(raw, dict):
        raise ValueError(f"Empty or invalid YAML in {path}")

    gates = raw.get("gates")
    if not isinstance(gates, dict) or not gates:
        raise ValueError(f"'gates' must be a non-empty mapping in {path}")

    for name, selector in gates.items():
        if not isinstance(name, str) or not _CFG_NAME.match(name):
            raise ValueError(f"Invalid cfg name {name!r} in {path}: expected a Rust identifier")
        if not isinstance(selector, str) or not selector.strip():
            raise ValueError(f"Gate '{name}' in {path}: selector must be a non-empty string")

    return dict(gates)


def evaluate_gates(
    gates: Mapping[str, str],
    version: Version,
    guard: MinVerGuard | None = None,
) -> List[GateResult]:
    """
    Evaluate every gate; a failing gate does not stop the others.

    Args:
        gates: cfg name -> selector text
        version: Toolchain version
        guard: The run's minimum-version holder

    Returns:
        One GateResult per gate, in input order
    """
    logger = get_logger()
    evaluator = SelectorEvaluator(guard)
    results: List[GateResult] = []

    for name, selector in gates.items():
        try:
            value = evaluator.evaluate(parse_selector(selector), version)
        except (SelectorSyntaxError, ConsistencyError) as e:
            logger.gate(name, selector, None, error=e)
            results.append(GateResult(name, selector, None, str(e)))
            continue
        logger.gate(name, selector, value)
        results.append(GateResult(name, selector, value))

    return results


def cargo_directives(results: List[GateResult]) -> List[str]:
    """`cargo:rustc-cfg=<name>` for every gate that holds."""
    return [f"{CARGO_CFG_PREFIX}{r.name}" for r in results if r.value]


__all__ = ["GateResult", "load_gates", "evaluate_gates", "cargo_directives"]
