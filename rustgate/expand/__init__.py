"""
Expansion of version attributes in Rust source.

    expand_source(text, version, guard)

rewrites items annotated with `#[rustversion::<selector>]` or
`#[rustversion::attr(<selector>, <then>)]`.
"""

from .tokens import (
    TokenKind,
    Delimiter,
    Token,
    Group,
    TokenTree,
    Lexer,
    tokenize,
    render,
)
from .attr_args import AttrArgs, AttributeTokens, ConstQualifier, parse_attr_args
from .applier import apply_attr, apply_gate, cfg_attr, compile_error, insert_const
from .source import SourceExpander, expand_source, find_item_end


__all__ = [
    "TokenKind",
    "Delimiter",
    "Token",
    "Group",
    "TokenTree",
    "Lexer",
    "tokenize",
    "render",
    "AttrArgs",
    "AttributeTokens",
    "ConstQualifier",
    "parse_attr_args",
    "apply_attr",
    "apply_gate",
    "cfg_attr",
    "compile_error",
    "insert_const",
    "SourceExpander",
    "expand_source",
    "find_item_end",
]
