"""
Token surgery on one annotated item.

Given the evaluated selector and the item's token trees:
- apply_gate keeps the item or drops it
- apply_attr attaches an attribute or inserts `const`
- compile_error builds the diagnostic that replaces a failed item
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, List, Sequence

from ..errors import PlacementError
from .attr_args import AttributeTokens, ConstQualifier, Then
from .tokens import (
    Delimiter,
    Group,
    Token,
    TokenKind,
    TokenTree,
    ident,
    is_group,
    is_ident,
    literal,
    punct,
    with_prefix,
)


class _Qualifier(IntEnum):
    """Function qualifiers in the order Rust requires them."""
    NONE = 0
    ASYNC = 1
    UNSAFE = 2
    EXTERN = 3
    ABI = 4


_QUALIFIER_WORDS = {
    "async": _Qualifier.ASYNC,
    "unsafe": _Qualifier.UNSAFE,
    "extern": _Qualifier.EXTERN,
}


# =============================================================================
# Gates
# =============================================================================

def apply_gate(result: bool, item: Sequence[TokenTree]) -> List[TokenTree]:
    """Keep the item when the selector holds, drop it otherwise."""
    return list(item) if result else []


def apply_attr(result: bool, then: Then, item: Sequence[TokenTree]) -> List[TokenTree]:
    """
    Apply `then` to the item when the selector holds.

    Args:
        result: Selector outcome.
        then: `const` insertion or an attribute to attach.
        item: Item token trees.

    Returns:
        The rewritten item, or the item unchanged when result is false.

    Raises:
        PlacementError: If `const` is requested and the item has no `fn`.
    """
    if not result:
        return list(item)
    if isinstance(then, ConstQualifier):
        return insert_const(item)
    if isinstance(then, AttributeTokens):
        return cfg_attr(then.tokens, item[0].prefix if item else "") + list(item)
    raise TypeError(f"Unknown attr action: {type(then).__name__}")


def cfg_attr(attribute: Sequence[TokenTree], prefix: str = "") -> List[TokenTree]:
    """`#[cfg_attr(all(), <attribute>)]`"""
    inner = (
        ident("all"),
        Group(Delimiter.PAREN),
        punct(","),
        *with_prefix(attribute, " "),
    )
    return [
        punct("#", prefix),
        Group(Delimiter.BRACKET, (ident("cfg_attr"), Group(Delimiter.PAREN, inner))),
    ]


# =============================================================================
# const insertion
# =============================================================================

def insert_const(item: Sequence[TokenTree]) -> List[TokenTree]:
    """
    Insert `const` ahead of the item's fn qualifiers.

    Walks the item, looking through invisible groups, for `fn` preceded by
    qualifiers in Rust's order (`async`, `unsafe`, `extern`, ABI string).
    `const` goes before the first of those qualifiers; every other token
    is passed through.

        pub unsafe extern "C" fn f()  ->  pub const unsafe extern "C" fn f()

    Raises:
        PlacementError: If the item contains no `fn`.
    """
    out: List[TokenTree] = []
    stack: List[Iterator[TokenTree]] = [iter(item)]
    qualifier = _Qualifier.NONE
    pending: List[TokenTree] = []

    while stack:
        for tree in stack[-1]:
            if is_group(tree, Delimiter.NONE):
                stack.append(iter(tree.tokens))
                break

            if is_ident(tree, "fn"):
                head = pending + [tree]
                out.append(ident("const", head[0].prefix))
                out.extend(with_prefix(head, " "))
                for rest in reversed(stack):
                    out.extend(rest)
                return out

            rank = _QUALIFIER_WORDS.get(tree.text) if is_ident(tree) else None
            if rank is not None and rank > qualifier:
                qualifier = rank
                pending.append(tree)
            elif _is_literal(tree) and qualifier is _Qualifier.EXTERN:
                qualifier = _Qualifier.ABI
                pending.append(tree)
            else:
                qualifier = _Qualifier.NONE
                out.extend(pending)
                pending.clear()
                out.append(tree)
        else:
            stack.pop()

    raise PlacementError("a fn item")


def _is_literal(tree: TokenTree) -> bool:
    return isinstance(tree, Token) and tree.kind is TokenKind.LITERAL


# =============================================================================
# Diagnostics
# =============================================================================

def compile_error(message: str, prefix: str = "") -> List[TokenTree]:
    """`compile_error!("<message>");`"""
    escaped = message.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return [
        ident("compile_error", prefix),
        punct("!"),
        Group(Delimiter.PAREN, (literal(f'"{escaped}"'),)),
        punct(";"),
    ]


__all__ = ["apply_gate", "apply_attr", "cfg_attr", "insert_const", "compile_error"]
