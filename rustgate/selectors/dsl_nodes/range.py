"""
DSL Range Nodes for the selector language.

This module defines the bound-carrying nodes:
- SinceExpr: `since(1.31)` / `since(2019-01-01)`
- BeforeExpr: `before(...)`, the negation of since
- MinVerExpr: `minver(...)`, the one-shot minimum-version assertion
"""

from __future__ import annotations

from dataclasses import dataclass

from ...toolchain.bound import Bound


@dataclass(frozen=True)
class SinceExpr:
    """
    True on the bound and anything newer.

    A stable bound compares release numbers only, so betas and nightlies
    that already carry the release match too.
    """
    bound: Bound

    def __str__(self) -> str:
        return f"since({self.bound})"


@dataclass(frozen=True)
class BeforeExpr:
    """True on anything strictly older than the bound."""
    bound: Bound

    def __str__(self) -> str:
        return f"before({self.bound})"


@dataclass(frozen=True)
class MinVerExpr:
    """
    Assert the minimum supported toolchain for the rest of the run.

    Evaluating it records the bound in the run's MinVerGuard and yields
    True. Selectors evaluated afterwards are checked against the bound;
    asserting a second time is an error.
    """
    bound: Bound

    def __str__(self) -> str:
        return f"minver({self.bound})"


__all__ = [
    "SinceExpr",
    "BeforeExpr",
    "MinVerExpr",
]
