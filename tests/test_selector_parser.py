"""
Tests for the selector lexer and parser.

Validates that:
1. Every keyword form parses to its node
2. Optional trailing commas and whitespace are accepted
3. Nodes render back to canonical selector text
4. Malformed selectors fail with a self-explanatory message and column
"""

import pytest

from rustgate.errors import SelectorSyntaxError
from rustgate.selectors import (
    AllExpr,
    AnyExpr,
    BeforeExpr,
    BetaExpr,
    MinVerExpr,
    NightlyDateExpr,
    NightlyExpr,
    NotExpr,
    ReleaseExpr,
    SinceExpr,
    StableExpr,
    parse_selector,
    tokenize,
)
from rustgate.toolchain import Date, NightlyBound, ReleaseSelector, StableBound

KEYWORD_ERROR = "expected one of: stable, beta, nightly, since, before, not, any, all, minver"


class TestTokenize:
    """Test selector tokenization."""

    def test_release_with_patch(self):
        """A number carries at most one dot."""
        types = [t.type for t in tokenize("1.31.2")]
        assert types == ["NUMBER", "DOT", "NUMBER", "EOF"]

    def test_date(self):
        """Dates lex as numbers separated by minus signs."""
        values = [t.value for t in tokenize("2019-01-01")]
        assert values == ["2019", "-", "01", "-", "01", ""]

    def test_columns(self):
        """Columns are 1-based."""
        tokens = tokenize("not( beta)")
        assert [(t.value, t.column) for t in tokens] == [("not", 1), ("(", 4), ("beta", 6), (")", 10), ("", 11)]

    def test_unexpected_character(self):
        """Characters outside the selector alphabet are rejected."""
        with pytest.raises(SelectorSyntaxError, match="unexpected character '\\$'"):
            tokenize("stable$")


class TestParseForms:
    """Test each keyword form."""

    @pytest.mark.parametrize("text,expected", [
        ("stable", StableExpr()),
        ("stable(1.31)", ReleaseExpr(ReleaseSelector(31))),
        ("stable(1.31.2)", ReleaseExpr(ReleaseSelector(31, 2))),
        ("beta", BetaExpr()),
        ("nightly", NightlyExpr()),
        ("nightly(2019-01-01)", NightlyDateExpr(Date(2019, 1, 1))),
        ("since(1.31)", SinceExpr(StableBound(ReleaseSelector(31)))),
        ("since(2019-01-01)", SinceExpr(NightlyBound(Date(2019, 1, 1)))),
        ("before(1.34.1)", BeforeExpr(StableBound(ReleaseSelector(34, 1)))),
        ("minver(1.40)", MinVerExpr(StableBound(ReleaseSelector(40)))),
        ("minver(2020-01-01)", MinVerExpr(NightlyBound(Date(2020, 1, 1)))),
        ("not(nightly)", NotExpr(NightlyExpr())),
        ("any()", AnyExpr(())),
        ("all()", AllExpr(())),
        ("any(stable, beta)", AnyExpr((StableExpr(), BetaExpr()))),
    ])
    def test_form(self, text, expected):
        """Each form parses to its node."""
        assert parse_selector(text) == expected

    def test_nested(self):
        """Combinators nest arbitrarily."""
        expr = parse_selector("all(since(1.31), not(any(beta, nightly(2019-01-01))))")
        assert expr == AllExpr((
            SinceExpr(StableBound(ReleaseSelector(31))),
            NotExpr(AnyExpr((BetaExpr(), NightlyDateExpr(Date(2019, 1, 1))))),
        ))

    @pytest.mark.parametrize("text", [
        "since(1.31,)",
        "stable(1.31,)",
        "nightly(2019-01-01,)",
        "not(beta,)",
    ])
    def test_trailing_comma_in_single_argument(self, text):
        """A single argument may be followed by one comma."""
        parse_selector(text)

    def test_trailing_comma_in_list(self):
        """any/all accept a trailing comma."""
        assert parse_selector("all(stable, beta,)") == AllExpr((StableExpr(), BetaExpr()))

    def test_whitespace(self):
        """Whitespace between tokens is insignificant."""
        assert parse_selector("  all( since( 1.31 ) ,\n before(1.34) ) ") == parse_selector(
            "all(since(1.31), before(1.34))"
        )

    def test_token_input(self):
        """The parser also accepts a token sequence."""
        assert parse_selector(tokenize("beta")) == BetaExpr()
        assert parse_selector(tokenize("beta")[:-1]) == BetaExpr()

    @pytest.mark.parametrize("text", [
        "stable",
        "stable(1.31.2)",
        "nightly(2019-01-01)",
        "since(1.31)",
        "before(2019-01-01)",
        "minver(1.40)",
        "not(beta)",
        "any()",
        "all(since(1.31), before(1.34))",
    ])
    def test_renders_canonical_text(self, text):
        """str() of a parsed node is its canonical selector text."""
        assert str(parse_selector(text)) == text
        assert parse_selector(str(parse_selector(text))) == parse_selector(text)


class TestParseErrors:
    """Test parse failures."""

    @pytest.mark.parametrize("text", ["", "foo", "(stable)", "1.31", "any(foo)"])
    def test_unknown_keyword(self, text):
        """An unknown leading token lists every keyword."""
        with pytest.raises(SelectorSyntaxError, match=KEYWORD_ERROR):
            parse_selector(text)

    @pytest.mark.parametrize("text", ["since(2.0)", "since(1.x)", "stable(31)", "since(1.65536)", "before(1.31.)"])
    def test_bad_release(self, text):
        """Releases must look like 1.31."""
        with pytest.raises(SelectorSyntaxError, match="expected rustc release number, like 1.31"):
            parse_selector(text)

    @pytest.mark.parametrize("text", ["nightly(2019-13-01)", "nightly(2019-01)", "nightly(1.31)", "since(2019-01-x)"])
    def test_bad_date(self, text):
        """Dates must be valid YYYY-MM-DD; the message gives an example."""
        with pytest.raises(SelectorSyntaxError, match="expected nightly date, like \\d{4}-\\d{2}-\\d{2}"):
            parse_selector(text)

    def test_missing_parenthesis(self):
        """Keywords that take arguments require parentheses."""
        with pytest.raises(SelectorSyntaxError, match="expected `\\(`, found end of input"):
            parse_selector("since")

    def test_not_takes_one_argument(self):
        """not(...) holds exactly one selector."""
        with pytest.raises(SelectorSyntaxError, match="expected `\\)`, found `beta`"):
            parse_selector("not(stable, beta)")

    def test_list_needs_commas(self):
        """any/all elements are comma-separated."""
        with pytest.raises(SelectorSyntaxError, match="expected `,` or `\\)`, found `beta`"):
            parse_selector("any(stable beta)")

    def test_trailing_tokens(self):
        """Nothing may follow a complete selector."""
        with pytest.raises(SelectorSyntaxError, match="unexpected `beta` after selector"):
            parse_selector("stable beta")

    def test_error_column_and_caret(self):
        """Errors point at the offending token."""
        with pytest.raises(SelectorSyntaxError) as excinfo:
            parse_selector("all(foo)")
        err = excinfo.value
        assert err.column == 5
        assert err.render() == f"{KEYWORD_ERROR}\n  all(foo)\n      ^"
