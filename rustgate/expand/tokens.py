"""
Token-tree model of Rust source.

Source text is split into idents, literals and single-character punctuation,
with (), [] and {} nested into groups. Every tree keeps the whitespace that
preceded it, so rendering an untouched tree reproduces the source layout
minus comments. Groups with the NONE delimiter are invisible: they render
as their contents only and never come out of the lexer.

Usage:
    trees = tokenize("pub fn f() {}")
    render(trees)   # "pub fn f() {}"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Sequence

from ..errors import SourceSyntaxError


# =============================================================================
# Model
# =============================================================================

class TokenKind(str, Enum):
    """Leaf token categories."""
    IDENT = "ident"
    LITERAL = "literal"
    PUNCT = "punct"


class Delimiter(Enum):
    """Group delimiters as (open, close) text."""
    PAREN = ("(", ")")
    BRACKET = ("[", "]")
    BRACE = ("{", "}")
    NONE = ("", "")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Token:
    """
    A leaf token.

    Attributes:
        kind: IDENT, LITERAL or PUNCT
        text: Source text (one character for PUNCT)
        prefix: Whitespace preceding the token
    """
    kind: TokenKind
    text: str
    prefix: str = ""


@dataclass(frozen=True)
class Group:
    """
    A delimited token group.

    Attributes:
        delimiter: Bracket kind
        tokens: Trees between the delimiters
        prefix: Whitespace preceding the opening delimiter
        close_prefix: Whitespace preceding the closing delimiter
    """
    delimiter: Delimiter
    tokens: tuple[TokenTree, ...] = ()
    prefix: str = ""
    close_prefix: str = ""


TokenTree = Token | Group


def ident(text: str, prefix: str = "") -> Token:
    return Token(TokenKind.IDENT, text, prefix)


def punct(text: str, prefix: str = "") -> Token:
    return Token(TokenKind.PUNCT, text, prefix)


def literal(text: str, prefix: str = "") -> Token:
    return Token(TokenKind.LITERAL, text, prefix)


def is_ident(tree: TokenTree, text: str | None = None) -> bool:
    """Whether tree is an ident, optionally with the given text."""
    return (
        isinstance(tree, Token)
        and tree.kind is TokenKind.IDENT
        and (text is None or tree.text == text)
    )


def is_punct(tree: TokenTree, text: str) -> bool:
    return isinstance(tree, Token) and tree.kind is TokenKind.PUNCT and tree.text == text


def is_group(tree: TokenTree, delimiter: Delimiter) -> bool:
    return isinstance(tree, Group) and tree.delimiter is delimiter


def with_prefix(trees: Sequence[TokenTree], prefix: str) -> List[TokenTree]:
    """Copy of trees with the first tree's leading whitespace replaced."""
    trees = list(trees)
    if trees:
        trees[0] = replace(trees[0], prefix=prefix)
    return trees


# =============================================================================
# Rendering
# =============================================================================

def render(trees: Iterable[TokenTree]) -> str:
    """Render trees back to source text."""
    parts: List[str] = []
    _render_into(trees, parts)
    return "".join(parts)


def _render_into(trees: Iterable[TokenTree], parts: List[str]) -> None:
    for tree in trees:
        parts.append(tree.prefix)
        if isinstance(tree, Group):
            parts.append(tree.delimiter.open)
            _render_into(tree.tokens, parts)
            parts.append(tree.close_prefix)
            parts.append(tree.delimiter.close)
        else:
            parts.append(tree.text)


# =============================================================================
# Lexer
# =============================================================================

_OPENERS = {d.open: d for d in (Delimiter.PAREN, Delimiter.BRACKET, Delimiter.BRACE)}
_CLOSERS = {d.close: d for d in (Delimiter.PAREN, Delimiter.BRACKET, Delimiter.BRACE)}
_PUNCT_CHARS = frozenset("~!@#$%^&*-=+|;:,./<>?")

# b"..", c"..", "..", and raw forms br#".."#, cr"..", r##".."##
_RAW_STRING_START = re.compile(r'(?:b|c)?r(#*)"')
_STRING_START = re.compile(r'(?:b|c)?"')
_BYTE_CHAR_START = re.compile(r"b'")


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_ident_continue(ch: str) -> bool:
    return ch == "_" or ch.isalnum()


class Lexer:
    """
    Splits Rust source into token trees.

    After tokenize(), `trailing` holds the whitespace after the last token.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.trailing = ""

    def tokenize(self) -> List[TokenTree]:
        """
        Tokenize the whole source.

        Raises:
            SourceSyntaxError: On unbalanced delimiters, unterminated
                literals or comments, or characters outside Rust's alphabet.
        """
        # (delimiter, prefix, enclosing trees, offset of the opener)
        stack: List[tuple[Delimiter, str, List[TokenTree], int]] = []
        trees: List[TokenTree] = []

        while True:
            prefix = self._skip_trivia()
            if self.pos >= len(self.source):
                if stack:
                    delimiter, _, _, offset = stack[-1]
                    raise self._error(f"unclosed delimiter `{delimiter.open}`", offset)
                self.trailing = prefix
                return trees

            ch = self.source[self.pos]
            if ch in _OPENERS:
                stack.append((_OPENERS[ch], prefix, trees, self.pos))
                trees = []
                self.pos += 1
            elif ch in _CLOSERS:
                if not stack or stack[-1][0] is not _CLOSERS[ch]:
                    raise self._error(f"unexpected closing delimiter `{ch}`", self.pos)
                delimiter, open_prefix, parent, _ = stack.pop()
                parent.append(Group(delimiter, tuple(trees), open_prefix, prefix))
                trees = parent
                self.pos += 1
            else:
                trees.append(self._read_leaf(prefix))

    # -------------------------------------------------------------------------
    # Trivia
    # -------------------------------------------------------------------------

    def _skip_trivia(self) -> str:
        """Consume whitespace and comments; return the whitespace."""
        source = self.source
        whitespace: List[str] = []
        while self.pos < len(source):
            ch = source[self.pos]
            if ch.isspace():
                whitespace.append(ch)
                self.pos += 1
            elif source.startswith("//", self.pos):
                end = source.find("\n", self.pos)
                self.pos = len(source) if end == -1 else end
            elif source.startswith("/*", self.pos):
                self._skip_block_comment()
            else:
                break
        return "".join(whitespace)

    def _skip_block_comment(self) -> None:
        start = self.pos
        depth = 0
        while self.pos < len(self.source):
            if self.source.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.source.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        raise self._error("unterminated block comment", start)

    # -------------------------------------------------------------------------
    # Leaves
    # -------------------------------------------------------------------------

    def _read_leaf(self, prefix: str) -> Token:
        source = self.source
        start = self.pos
        ch = source[start]

        raw = _RAW_STRING_START.match(source, start)
        if raw:
            closing = '"' + raw.group(1)
            end = source.find(closing, raw.end())
            if end == -1:
                raise self._error("unterminated raw string", start)
            self.pos = end + len(closing)
            return self._literal(start, prefix)

        if _STRING_START.match(source, start):
            self.pos = self._scan_quoted(source.index('"', start), '"')
            return self._literal(start, prefix)

        if _BYTE_CHAR_START.match(source, start):
            self.pos = self._scan_quoted(start + 1, "'")
            return self._literal(start, prefix)

        if source.startswith("r#", start) and start + 2 < len(source) \
                and _is_ident_start(source[start + 2]):
            self.pos = start + 2
            self._consume_ident_chars()
            return ident(source[start:self.pos], prefix)

        if _is_ident_start(ch):
            self._consume_ident_chars()
            return ident(source[start:self.pos], prefix)

        if ch.isascii() and ch.isdigit():
            self._read_number()
            return self._literal(start, prefix)

        if ch == "'":
            if self._is_char_literal(start):
                self.pos = self._scan_quoted(start, "'")
                return self._literal(start, prefix)
            # lifetime or label: joint `'` followed by an ident
            self.pos += 1
            return punct("'", prefix)

        if ch in _PUNCT_CHARS:
            self.pos += 1
            return punct(ch, prefix)

        raise self._error(f"unexpected character {ch!r}", start)

    def _literal(self, start: int, prefix: str) -> Token:
        self._consume_ident_chars()  # suffix, e.g. 1u8 or "x"suffix
        return literal(self.source[start:self.pos], prefix)

    def _consume_ident_chars(self) -> None:
        while self.pos < len(self.source) and _is_ident_continue(self.source[self.pos]):
            self.pos += 1

    def _is_char_literal(self, start: int) -> bool:
        following = self.source[start + 1:start + 3]
        if following.startswith("\\"):
            return True
        return len(following) == 2 and following[1] == "'" and following[0] != "'"

    def _scan_quoted(self, open_pos: int, quote: str) -> int:
        """Offset just past the closing quote matching the one at open_pos."""
        i = open_pos + 1
        while i < len(self.source):
            ch = self.source[i]
            if ch == "\\":
                i += 2
            elif ch == quote:
                return i + 1
            else:
                i += 1
        kind = "string" if quote == '"' else "character literal"
        raise self._error(f"unterminated {kind}", open_pos)

    def _read_number(self) -> None:
        source = self.source
        start = self.pos
        hex_like = source.startswith(("0x", "0X"), start)
        self._consume_ident_chars()
        if self.pos + 1 < len(source) and source[self.pos] == "." \
                and source[self.pos + 1].isascii() and source[self.pos + 1].isdigit():
            self.pos += 1
            self._consume_ident_chars()
        if not hex_like and source[self.pos - 1] in "eE" and self.pos + 1 < len(source) \
                and source[self.pos] in "+-" and source[self.pos + 1].isdigit():
            self.pos += 1
            self._consume_ident_chars()

    def _error(self, message: str, offset: int) -> SourceSyntaxError:
        return SourceSyntaxError(message, self.source.count("\n", 0, offset) + 1)


def tokenize(source: str) -> List[TokenTree]:
    """Tokenize source text; trailing whitespace is discarded."""
    return Lexer(source).tokenize()


__all__ = [
    "TokenKind",
    "Delimiter",
    "Token",
    "Group",
    "TokenTree",
    "ident",
    "punct",
    "literal",
    "is_ident",
    "is_punct",
    "is_group",
    "with_prefix",
    "render",
    "Lexer",
    "tokenize",
]
