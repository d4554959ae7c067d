"""
Attribute expansion over a whole Rust source file.

Finds outer attributes of the form

    #[rustversion::since(1.31)]
    #[rustversion::attr(not(nightly), const)]

evaluates them against the toolchain version, and rewrites the item that
follows. Attributes are expanded outermost first: the item produced by one
attribute is expanded again, and so are brace groups inside it.

A failing attribute (bad selector, minimum-version contradiction, `const`
on a non-fn item) does not stop the run; its item is replaced by a
`compile_error!` carrying the message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Sequence

from ..config.constants import ATTR_KEYWORD, ATTRIBUTE_KEYWORDS, DEFAULT_ATTRIBUTE_NAMESPACE
from ..errors import PlacementError, SelectorSyntaxError
from ..selectors import ConsistencyError, MinVerGuard, SelectorEvaluator, parse_selector
from ..toolchain.version import Version
from .applier import apply_attr, apply_gate, compile_error
from .attr_args import parse_attr_args
from .tokens import Delimiter, Group, Lexer, TokenTree, is_group, is_ident, is_punct, render, with_prefix

logger = logging.getLogger(__name__)

_SUPPORTED = ", ".join(sorted(ATTRIBUTE_KEYWORDS) + [ATTR_KEYWORD])


@dataclass(frozen=True)
class Annotation:
    """
    One matched `#[<namespace>::<keyword>(args)]` attribute.

    Attributes:
        keyword: Attribute name after the namespace
        args: The parenthesized arguments, or None when absent
        prefix: Whitespace preceding the `#`
    """
    keyword: str
    args: Group | None
    prefix: str


# =============================================================================
# Item boundaries
# =============================================================================

def find_item_end(trees: Sequence[TokenTree], start: int) -> int:
    """
    Index just past the item beginning at `start`.

    An item ends at its first top-level `;`, or at its first top-level
    brace group if no `=` has been seen at angle-bracket depth zero
    (so `const X: T = { .. };` runs to the semicolon). Without either,
    it runs to the end of the enclosing group.
    """
    angle_depth = 0
    seen_assignment = False
    for index in range(start, len(trees)):
        tree = trees[index]
        if is_punct(tree, ";"):
            return index + 1
        if seen_assignment:
            continue
        if is_group(tree, Delimiter.BRACE):
            return index + 1
        if is_punct(tree, "<") and not _before(trees, index, "="):
            angle_depth += 1
        elif is_punct(tree, ">") and angle_depth and not _after(trees, index, "-="):
            angle_depth -= 1
        elif is_punct(tree, "=") and angle_depth == 0 and _is_assignment(trees, index):
            seen_assignment = True
    return len(trees)


def _after(trees: Sequence[TokenTree], index: int, chars: str) -> bool:
    """Whether trees[index] is glued to a preceding punct from chars."""
    if index == 0 or trees[index].prefix:
        return False
    previous = trees[index - 1]
    return any(is_punct(previous, ch) for ch in chars)


def _before(trees: Sequence[TokenTree], index: int, chars: str) -> bool:
    """Whether trees[index] is glued to a following punct from chars."""
    if index + 1 >= len(trees) or trees[index + 1].prefix:
        return False
    following = trees[index + 1]
    return any(is_punct(following, ch) for ch in chars)


def _is_assignment(trees: Sequence[TokenTree], index: int) -> bool:
    # not part of ==, !=, <=, >=, =>
    return not _after(trees, index, "=!<>") and not _before(trees, index, "=>")


# =============================================================================
# Expansion
# =============================================================================

class SourceExpander:
    """
    Expands version attributes in Rust source.

    Attributes:
        version: Toolchain version attributes are evaluated against
        evaluator: Selector evaluator sharing the run's MinVerGuard
        namespace: Attribute path prefix, e.g. "rustversion"
    """

    def __init__(
        self,
        version: Version,
        guard: MinVerGuard | None = None,
        namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE,
    ):
        self.version = version
        self.evaluator = SelectorEvaluator(guard)
        self.namespace = namespace

    def expand(self, source: str) -> str:
        """
        Expand every matching attribute in the source text.

        Raises:
            SourceSyntaxError: If the source cannot be tokenized.
        """
        lexer = Lexer(source)
        trees = lexer.tokenize()
        return render(self.expand_trees(trees)) + lexer.trailing

    def expand_trees(self, trees: Sequence[TokenTree], items: bool = True) -> List[TokenTree]:
        """
        Expand a token sequence.

        Args:
            trees: Token trees.
            items: Whether the sequence holds items or statements (module,
                block, or impl body). Attributes are only matched there;
                parenthesized and bracketed groups are searched for nested
                blocks only.
        """
        out: List[TokenTree] = []
        index = 0
        while index < len(trees):
            annotation = self.match_annotation(trees, index) if items else None
            if annotation is None:
                out.append(self._expand_group(trees[index]))
                index += 1
                continue

            end = find_item_end(trees, index + 2)
            item = trees[index + 2:end]
            # The removed attribute's leading whitespace moves onto the result.
            result = with_prefix(self._apply(annotation, item), annotation.prefix)
            out.extend(self.expand_trees(result))
            index = end
        return out

    def _expand_group(self, tree: TokenTree) -> TokenTree:
        if not isinstance(tree, Group):
            return tree
        if tree.delimiter is Delimiter.BRACE:
            return replace(tree, tokens=tuple(self.expand_trees(tree.tokens)))
        return replace(tree, tokens=tuple(self.expand_trees(tree.tokens, items=False)))

    def match_annotation(self, trees: Sequence[TokenTree], index: int) -> Annotation | None:
        """Match `#[<namespace>::<keyword>...]` starting at trees[index]."""
        if index + 1 >= len(trees):
            return None
        hash_token, bracket = trees[index], trees[index + 1]
        if not is_punct(hash_token, "#") or not is_group(bracket, Delimiter.BRACKET):
            return None

        path = list(bracket.tokens)
        if len(path) >= 2 and is_punct(path[0], ":") and is_punct(path[1], ":"):
            path = path[2:]
        if len(path) < 4 or not is_ident(path[0], self.namespace):
            return None
        if not (is_punct(path[1], ":") and is_punct(path[2], ":") and is_ident(path[3])):
            return None

        rest = path[4:]
        if not rest:
            args = None
        elif len(rest) == 1 and is_group(rest[0], Delimiter.PAREN):
            args = rest[0]
        else:
            return None
        return Annotation(path[3].text, args, hash_token.prefix)

    def _apply(self, annotation: Annotation, item: Sequence[TokenTree]) -> List[TokenTree]:
        name = f"{self.namespace}::{annotation.keyword}"
        try:
            if annotation.keyword == ATTR_KEYWORD:
                if annotation.args is None:
                    raise SelectorSyntaxError(
                        f"expected attribute arguments in parentheses: #[{name}(...)]"
                    )
                args = parse_attr_args(annotation.args.tokens)
                result = self.evaluator.evaluate(args.condition, self.version)
                logger.debug("%s(%s) -> %s", name, args.condition, result)
                return apply_attr(result, args.then, item)

            if annotation.keyword not in ATTRIBUTE_KEYWORDS:
                raise SelectorSyntaxError(
                    f"unsupported attribute `{name}`, expected one of: {_SUPPORTED}"
                )
            selector = annotation.keyword
            if annotation.args is not None:
                selector = f"{selector}({render(annotation.args.tokens).strip()})"
            result = self.evaluator.evaluate(parse_selector(selector), self.version)
            logger.debug("%s -> %s", selector, result)
            return apply_gate(result, item)

        except (SelectorSyntaxError, ConsistencyError, PlacementError) as e:
            logger.warning(f"{name}: {e}")
            return compile_error(str(e), annotation.prefix)


def expand_source(
    source: str,
    version: Version,
    guard: MinVerGuard | None = None,
    namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE,
) -> str:
    """
    Expand version attributes in Rust source text.

    Args:
        source: Rust source.
        version: Toolchain version.
        guard: The run's minimum-version holder; a fresh one when omitted.
        namespace: Attribute path prefix.

    Returns:
        Expanded source. Comments are dropped; layout is otherwise kept.
    """
    return SourceExpander(version, guard, namespace).expand(source)


__all__ = ["Annotation", "SourceExpander", "expand_source", "find_item_end"]
