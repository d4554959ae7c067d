"""
DSL Parser: selector text to AST conversion.

Grammar (keyword-led, first token decides, no backtracking):

    expr     := "stable" [ "(" release [","] ")" ]
              | "beta"
              | "nightly" [ "(" date [","] ")" ]
              | "since" "(" bound [","] ")"
              | "before" "(" bound [","] ")"
              | "minver" "(" bound [","] ")"
              | "not" "(" expr [","] ")"
              | "any" "(" [ expr { "," expr } [","] ] ")"
              | "all" "(" [ expr { "," expr } [","] ] ")"
    bound    := date | release          (date iff the second token is "-")
    release  := NUMBER("1.<minor>") [ "." NUMBER(<patch>) ]
    date     := NUMBER "-" NUMBER "-" NUMBER

Usage:
    expr = parse_selector("all(since(1.31), before(1.34))")
    expr = parse_selector(tokenize("nightly(2019-01-01)"))
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from ..config.constants import EXAMPLE_RELEASE, SELECTOR_KEYWORDS
from ..errors import SelectorSyntaxError
from ..toolchain.bound import Bound, NightlyBound, StableBound
from ..toolchain.date import Date, parse_unsigned
from ..toolchain.release import ReleaseSelector
from .dsl_lexer import SelectorToken, tokenize
from .dsl_nodes import (
    Expr, AllExpr, AnyExpr, NotExpr,
    StableExpr, BetaExpr, NightlyExpr, NightlyDateExpr, ReleaseExpr,
    SinceExpr, BeforeExpr, MinVerExpr,
)

T = TypeVar("T")

_KEYWORD_LIST = ", ".join(SELECTOR_KEYWORDS)


class SelectorParser:
    """
    Recursive-descent parser over a selector token list.

    One parser instance parses one selector; use parse_selector() instead
    of driving it by hand.
    """

    def __init__(self, tokens: Sequence[SelectorToken], source: str | None = None):
        tokens = list(tokens)
        if not tokens or tokens[-1].type != "EOF":
            end = tokens[-1].column + len(tokens[-1].value) if tokens else 1
            tokens.append(SelectorToken("EOF", "", end))
        self._tokens = tokens
        self._pos = 0
        self._source = source

    # -------------------------------------------------------------------------
    # Token helpers
    # -------------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> SelectorToken:
        index = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[index]

    def _advance(self) -> SelectorToken:
        token = self._peek()
        if token.type != "EOF":
            self._pos += 1
        return token

    def _error(self, message: str, token: SelectorToken | None = None) -> SelectorSyntaxError:
        token = token or self._peek()
        return SelectorSyntaxError(message, token.column, self._source)

    def _expect(self, token_type: str, description: str) -> SelectorToken:
        token = self._peek()
        if token.type != token_type:
            found = "end of input" if token.type == "EOF" else f"`{token.value}`"
            raise self._error(f"expected {description}, found {found}")
        return self._advance()

    def _accept(self, token_type: str) -> bool:
        if self._peek().type == token_type:
            self._advance()
            return True
        return False

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def parse(self) -> Expr:
        """Parse one complete selector; trailing tokens are an error."""
        expr = self.parse_expr()
        token = self._peek()
        if token.type != "EOF":
            raise self._error(f"unexpected `{token.value}` after selector")
        return expr

    def parse_expr(self) -> Expr:
        """Dispatch on the leading keyword."""
        token = self._peek()
        keyword = token.value if token.type == "IDENT" else None
        if keyword == "stable":
            return self._parse_stable()
        if keyword == "beta":
            self._advance()
            return BetaExpr()
        if keyword == "nightly":
            return self._parse_nightly()
        if keyword == "since":
            self._advance()
            return SinceExpr(self._parenthesized(self.parse_bound))
        if keyword == "before":
            self._advance()
            return BeforeExpr(self._parenthesized(self.parse_bound))
        if keyword == "minver":
            self._advance()
            return MinVerExpr(self._parenthesized(self.parse_bound))
        if keyword == "not":
            self._advance()
            return NotExpr(self._parenthesized(self.parse_expr))
        if keyword == "any":
            self._advance()
            return AnyExpr(self._parse_list())
        if keyword == "all":
            self._advance()
            return AllExpr(self._parse_list())
        raise self._error(f"expected one of: {_KEYWORD_LIST}")

    # -------------------------------------------------------------------------
    # Keyword forms
    # -------------------------------------------------------------------------

    def _parse_stable(self) -> Expr:
        self._advance()
        if self._peek().type != "LPAREN":
            return StableExpr()
        return ReleaseExpr(self._parenthesized(self.parse_release))

    def _parse_nightly(self) -> Expr:
        self._advance()
        if self._peek().type != "LPAREN":
            return NightlyExpr()
        return NightlyDateExpr(self._parenthesized(self.parse_date))

    def _parenthesized(self, parse_inner: Callable[[], T]) -> T:
        """( inner [,] )"""
        self._expect("LPAREN", "`(`")
        value = parse_inner()
        self._accept("COMMA")
        self._expect("RPAREN", "`)`")
        return value

    def _parse_list(self) -> tuple[Expr, ...]:
        """( [expr {, expr} [,]] )"""
        self._expect("LPAREN", "`(`")
        children: list[Expr] = []
        while self._peek().type != "RPAREN":
            children.append(self.parse_expr())
            if not self._accept("COMMA"):
                break
        self._expect("RPAREN", "`,` or `)`")
        return tuple(children)

    # -------------------------------------------------------------------------
    # Literals
    # -------------------------------------------------------------------------

    def parse_bound(self) -> Bound:
        """A date when the token after the first one is `-`, else a release."""
        if self._peek(1).type == "MINUS":
            return NightlyBound(self.parse_date())
        return StableBound(self.parse_release())

    def parse_release(self) -> ReleaseSelector:
        """1.<minor>[.<patch>]"""
        start = self._peek()
        message = f"expected rustc release number, like {EXAMPLE_RELEASE}"

        if start.type != "NUMBER" or not start.value.startswith("1."):
            raise self._error(message, start)
        self._advance()

        try:
            minor = parse_unsigned(start.value[2:])
            patch = None
            if self._accept("DOT"):
                patch_token = self._peek()
                if patch_token.type != "NUMBER":
                    raise ValueError(patch_token.value)
                self._advance()
                patch = parse_unsigned(patch_token.value)
            return ReleaseSelector(minor, patch)
        except ValueError:
            raise self._error(message, start) from None

    def parse_date(self) -> Date:
        """YYYY-MM-DD"""
        start = self._peek()
        message = f"expected nightly date, like {Date.today()}"

        try:
            year = self._date_component()
            self._expect("MINUS", "`-`")
            month = self._date_component()
            self._expect("MINUS", "`-`")
            day = self._date_component()
            return Date(year, month, day)
        except (ValueError, SelectorSyntaxError):
            raise self._error(message, start) from None

    def _date_component(self) -> int:
        token = self._peek()
        if token.type != "NUMBER":
            raise ValueError(token.value)
        self._advance()
        return parse_unsigned(token.value)


def parse_selector(source: str | Sequence[SelectorToken]) -> Expr:
    """
    Parse a selector from text or from a token sequence.

    Args:
        source: Selector text, or tokens from dsl_lexer.tokenize()

    Returns:
        Expr node.

    Raises:
        SelectorSyntaxError: If the input does not match the grammar.
    """
    if isinstance(source, str):
        return SelectorParser(tokenize(source), source).parse()
    return SelectorParser(source).parse()


__all__ = ["SelectorParser", "parse_selector"]
