"""
Tokenizer for graphcalc formulas.

Converts a formula string into a sequence of typed tokens. Letters and
underscores form identifiers, digits and ``.`` form numbers, and the
operators ``+ - * ** / ( ) ,`` each produce one token. Every other
character, whitespace included, is skipped without producing a token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from graphcalc.core.errors import TokenizationError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for formulas."""

    IDENTIFIER = "Identifier"
    NUMBER = "Number"

    # Operators
    PLUS = "Plus"
    MINUS = "Minus"
    MULT = "Mult"
    DIV = "Div"
    POWER = "Power"

    # Punctuation
    COMMA = "Comma"
    PAREN_START = "ParenStart"
    PAREN_END = "ParenEnd"


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the formula tokenizer."""

    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.DIV,
    "(": TokenKind.PAREN_START,
    ")": TokenKind.PAREN_END,
    ",": TokenKind.COMMA,
}


def _is_ident_char(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def _is_number_char(c: str) -> bool:
    return ("0" <= c <= "9") or c == "."


def tokenize(source: str) -> list[Token]:
    """Tokenize a formula string into a list of tokens.

    Raises:
        TokenizationError: On a number with two decimal points or a number
            made of a lone decimal point. ``pos`` is a character index.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if _is_ident_char(c):
            start = i
            while i < n and _is_ident_char(source[i]):
                i += 1
            tokens.append(Token(TokenKind.IDENTIFIER, source[start:i]))
            continue

        if _is_number_char(c):
            i, tok = _read_number(source, i)
            tokens.append(tok)
            continue

        if c == "*":
            if i + 1 < n and source[i + 1] == "*":
                tokens.append(Token(TokenKind.POWER, "**"))
                i += 2
            else:
                tokens.append(Token(TokenKind.MULT, "*"))
                i += 1
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is not None:
            tokens.append(Token(kind, c))
        i += 1

    logger.debug("Tokenized %d characters into %d tokens", n, len(tokens))
    return tokens


def _read_number(source: str, start: int) -> tuple[int, Token]:
    """Read a maximal run of digits and decimal points."""
    i = start
    n = len(source)
    seen_dot = False

    while i < n and _is_number_char(source[i]):
        if source[i] == ".":
            if seen_dot:
                raise TokenizationError("two dots in number", i)
            seen_dot = True
        i += 1

    text = source[start:i]
    if text == ".":
        raise TokenizationError("invalid number", i)
    return i, Token(TokenKind.NUMBER, text)
