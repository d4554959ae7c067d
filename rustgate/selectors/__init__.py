"""
Selector language: parsing and evaluation of version conditions.

    expr = parse_selector("all(since(1.31), before(1.34))")
    guard = MinVerGuard()
    evaluate(expr, version, guard)
"""

from .dsl_lexer import SelectorToken, tokenize
from .dsl_parser import SelectorParser, parse_selector
from .dsl_eval import SelectorEvaluator, evaluate
from .errors import ConsistencyError
from .guard import MinVerGuard
from .dsl_nodes import (
    Expr,
    StableExpr,
    BetaExpr,
    NightlyExpr,
    NightlyDateExpr,
    ReleaseExpr,
    SinceExpr,
    BeforeExpr,
    MinVerExpr,
    AllExpr,
    AnyExpr,
    NotExpr,
)


__all__ = [
    "SelectorToken",
    "tokenize",
    "SelectorParser",
    "parse_selector",
    "SelectorEvaluator",
    "evaluate",
    "ConsistencyError",
    "MinVerGuard",
    "Expr",
    "StableExpr",
    "BetaExpr",
    "NightlyExpr",
    "NightlyDateExpr",
    "ReleaseExpr",
    "SinceExpr",
    "BeforeExpr",
    "MinVerExpr",
    "AllExpr",
    "AnyExpr",
    "NotExpr",
]
