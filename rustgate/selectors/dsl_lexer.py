"""
Tokenizer for selector text.

    all(since(1.31), before(2019-01-01))

becomes IDENT LPAREN IDENT LPAREN NUMBER("1.31") RPAREN COMMA ...

Numbers take at most one embedded '.', so `1.31.2` lexes as
NUMBER("1.31") DOT NUMBER("2") and a date lexes as
NUMBER MINUS NUMBER MINUS NUMBER.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..errors import SelectorSyntaxError


_PUNCTUATION_TOKENS = {
    "(": "LPAREN",
    ")": "RPAREN",
    ",": "COMMA",
    ".": "DOT",
    "-": "MINUS",
}


@dataclass(frozen=True)
class SelectorToken:
    """
    One selector token.

    Attributes:
        type: IDENT, NUMBER, LPAREN, RPAREN, COMMA, DOT, MINUS or EOF
        value: Source text of the token ("" for EOF)
        column: 1-based column in the selector text
    """
    type: str
    value: str
    column: int

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Token({self.type}, {self.value!r}, {self.column})"


def tokenize(source: str) -> List[SelectorToken]:
    """
    Split selector text into tokens, ending with an EOF token.

    Raises:
        SelectorSyntaxError: On a character outside the selector alphabet.
    """
    tokens: List[SelectorToken] = []
    i = 0
    while i < len(source):
        ch = source[i]
        column = i + 1
        if ch.isspace():
            i += 1
            continue
        token_type = _PUNCTUATION_TOKENS.get(ch)
        if token_type is not None:
            tokens.append(SelectorToken(token_type, ch, column))
            i += 1
            continue
        if ch.isascii() and ch.isdigit():
            value = _read_number(source, i)
            tokens.append(SelectorToken("NUMBER", value, column))
            i += len(value)
            continue
        if ch.isascii() and (ch.isalpha() or ch == "_"):
            value = _read_identifier(source, i)
            tokens.append(SelectorToken("IDENT", value, column))
            i += len(value)
            continue
        raise SelectorSyntaxError(f"unexpected character {ch!r} in selector", column, source)

    tokens.append(SelectorToken("EOF", "", len(source) + 1))
    return tokens


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _read_number(text: str, start: int) -> str:
    i = start
    while i < len(text) and _is_digit(text[i]):
        i += 1
    if i + 1 < len(text) and text[i] == "." and _is_digit(text[i + 1]):
        i += 1
        while i < len(text) and _is_digit(text[i]):
            i += 1
    return text[start:i]


def _read_identifier(text: str, start: int) -> str:
    i = start
    while i < len(text) and text[i].isascii() and (text[i].isalnum() or text[i] == "_"):
        i += 1
    return text[start:i]


__all__ = ["SelectorToken", "tokenize"]
