"""
DSL Boolean Expression Nodes for the selector language.

This module defines boolean expression nodes:
- AllExpr: AND expression (all children must be true)
- AnyExpr: OR expression (any child must be true)
- NotExpr: NOT expression (negates child)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Expr


# =============================================================================
# Boolean Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class AllExpr:
    """
    AND expression: All children must be true.

    Every child is evaluated before the results are combined, so a
    consistency error in a later child is never hidden by an earlier
    false one.

    Attributes:
        children: Tuple of child expressions; empty means true

    Examples:
        AllExpr((SinceExpr(...), BeforeExpr(...)))  # all(since(1.31), before(1.34))
    """
    children: tuple["Expr", ...]

    def __str__(self) -> str:
        return f"all({', '.join(str(c) for c in self.children)})"


@dataclass(frozen=True)
class AnyExpr:
    """
    OR expression: Any child must be true.

    Attributes:
        children: Tuple of child expressions; empty means false

    Examples:
        AnyExpr((StableExpr(), BetaExpr()))  # any(stable, beta)
    """
    children: tuple["Expr", ...]

    def __str__(self) -> str:
        return f"any({', '.join(str(c) for c in self.children)})"


@dataclass(frozen=True)
class NotExpr:
    """
    NOT expression: Negates the child expression.

    Attributes:
        child: The expression to negate
    """
    child: "Expr"

    def __str__(self) -> str:
        return f"not({self.child})"


__all__ = [
    "AllExpr",
    "AnyExpr",
    "NotExpr",
]
