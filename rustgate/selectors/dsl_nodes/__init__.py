"""
DSL AST Node Types for the selector language.

Nodes are frozen dataclasses for immutability and hashability, and each
renders back to its canonical selector text through str().

Node Categories:
- Channel nodes: StableExpr, BetaExpr, NightlyExpr, NightlyDateExpr, ReleaseExpr
- Range nodes: SinceExpr, BeforeExpr, MinVerExpr
- Boolean expression nodes: AllExpr, AnyExpr, NotExpr

Usage:
    # all(since(1.31), before(1.34))
    expr = AllExpr((
        SinceExpr(StableBound(ReleaseSelector(31))),
        BeforeExpr(StableBound(ReleaseSelector(34))),
    ))
"""

# Channel nodes
from .channel import (
    StableExpr,
    BetaExpr,
    NightlyExpr,
    NightlyDateExpr,
    ReleaseExpr,
)

# Range nodes
from .range import (
    SinceExpr,
    BeforeExpr,
    MinVerExpr,
)

# Boolean expression nodes
from .boolean import (
    AllExpr,
    AnyExpr,
    NotExpr,
)

# Type aliases
from .types import Expr


__all__ = [
    # Channel nodes
    "StableExpr",
    "BetaExpr",
    "NightlyExpr",
    "NightlyDateExpr",
    "ReleaseExpr",
    # Range nodes
    "SinceExpr",
    "BeforeExpr",
    "MinVerExpr",
    # Boolean expression nodes
    "AllExpr",
    "AnyExpr",
    "NotExpr",
    # Type aliases
    "Expr",
]
