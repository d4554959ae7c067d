"""
DSL Type Aliases for the selector language.

Placed in a separate module to avoid circular imports.
"""

from __future__ import annotations

from .boolean import AllExpr, AnyExpr, NotExpr
from .channel import BetaExpr, NightlyDateExpr, NightlyExpr, ReleaseExpr, StableExpr
from .range import BeforeExpr, MinVerExpr, SinceExpr


# =============================================================================
# Type Alias
# =============================================================================

# All expression types that can appear in a selector tree
Expr = (
    StableExpr | BetaExpr | NightlyExpr | NightlyDateExpr | ReleaseExpr
    | SinceExpr | BeforeExpr | MinVerExpr
    | NotExpr | AnyExpr | AllExpr
)


__all__ = [
    "Expr",
]
