"""
Arguments of the `attr` attribute.

    #[rustversion::attr(since(1.46), const)]
    #[rustversion::attr(not(nightly), derive(Debug))]

The first top-level comma separates the selector from what to apply when
it holds: the `const` qualifier (optionally followed by one comma) or the
tokens of another attribute.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..errors import SelectorSyntaxError
from ..selectors import Expr, parse_selector
from .tokens import TokenTree, is_ident, is_punct, render


@dataclass(frozen=True)
class ConstQualifier:
    """Insert `const` into the fn item."""


@dataclass(frozen=True)
class AttributeTokens:
    """Attach an attribute to the item."""
    tokens: tuple[TokenTree, ...]


Then = ConstQualifier | AttributeTokens


@dataclass(frozen=True)
class AttrArgs:
    """
    Parsed `attr(...)` arguments.

    Attributes:
        condition: Selector deciding whether `then` is applied
        then: What to apply to the item
    """
    condition: Expr
    then: Then


def parse_attr_args(tokens: Sequence[TokenTree]) -> AttrArgs:
    """
    Parse the tokens inside `attr(...)`.

    Raises:
        SelectorSyntaxError: On a malformed selector, a missing comma,
            nothing after the comma, or tokens after `const`.
    """
    tokens = list(tokens)
    comma = next((i for i, tree in enumerate(tokens) if is_punct(tree, ",")), None)
    if comma is None:
        raise SelectorSyntaxError("expected `,`")

    condition = parse_selector(render(tokens[:comma]).strip())

    rest = tokens[comma + 1:]
    if not rest:
        raise SelectorSyntaxError("expected one or more attrs")

    if is_ident(rest[0], "const"):
        trailing = rest[1:]
        if trailing and is_punct(trailing[0], ","):
            trailing = trailing[1:]
        if trailing:
            raise SelectorSyntaxError(f"unexpected token `{render(trailing[:1]).strip()}`")
        return AttrArgs(condition, ConstQualifier())

    return AttrArgs(condition, AttributeTokens(tuple(rest)))


__all__ = ["ConstQualifier", "AttributeTokens", "Then", "AttrArgs", "parse_attr_args"]
