from __future__ import annotations

import logging
import string
from typing import Sequence

from .tokens import (
    AlphaNumeric,
    Alternation,
    Digit,
    EndAnchor,
    Literal,
    NegativeCharGroup,
    OneOrMore,
    PositiveCharGroup,
    StartAnchor,
    Token,
    Wildcard,
    ZeroOrOne,
)

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def _single_char(token: Token, ch: str) -> bool:
    """Test one input character against a single-character token."""
    if isinstance(token, Literal):
        return ch == token.char
    if isinstance(token, Digit):
        return ch in DIGITS
    if isinstance(token, AlphaNumeric):
        return ch in ALPHANUMERIC
    if isinstance(token, PositiveCharGroup):
        return ch in token.chars
    if isinstance(token, NegativeCharGroup):
        return ch not in token.chars
    return False


def _match_from(tokens: Sequence[Token], ti: int, line: str, pos: int) -> bool:
    if ti == len(tokens):
        return True

    token = tokens[ti]
    n = len(line)

    if isinstance(token, (Literal, Digit, AlphaNumeric, PositiveCharGroup, NegativeCharGroup)):
        if pos >= n or not _single_char(token, line[pos]):
            return False
        return _match_from(tokens, ti + 1, line, pos + 1)

    if isinstance(token, StartAnchor):
        # Only meaningful at index 0, where matches() strips it.
        return False

    if isinstance(token, EndAnchor):
        if pos < n and line[pos] != "\n":
            return False
        return _match_from(tokens, ti + 1, line, pos)

    if isinstance(token, OneOrMore):
        if pos >= n or line[pos] != token.char:
            return False
        j = pos + 1
        # Greedy, and nothing is given back if the rest fails.
        while j < n and line[j] == token.char:
            j += 1
        return _match_from(tokens, ti + 1, line, j)

    if isinstance(token, ZeroOrOne):
        if pos < n and line[pos] == token.char:
            pos += 1
        return _match_from(tokens, ti + 1, line, pos)

    if isinstance(token, Wildcard):
        # At end of input there is nothing to consume; keep going.
        return _match_from(tokens, ti + 1, line, min(pos + 1, n))

    if isinstance(token, Alternation):
        rest = line[pos:]
        return rest == token.first or rest == token.second

    raise TypeError(f"unknown token: {token!r}")


def match_here(tokens: Sequence[Token], line: str, pos: int = 0) -> bool:
    """Match ``tokens`` against ``line`` starting exactly at ``pos``.

    Trailing input after the last token does not make the match fail.
    """
    return _match_from(tokens, 0, line, pos)


def matches(tokens: Sequence[Token], line: str) -> bool:
    """Return True if ``tokens`` match somewhere in ``line``.

    A leading start anchor restricts the attempt to offset 0. Otherwise every
    offset is tried left to right and the first success wins.
    """
    if tokens and isinstance(tokens[0], StartAnchor):
        logger.debug("anchored match at offset 0")
        return match_here(tokens[1:], line)

    for start in range(len(line)):
        if match_here(tokens, line, start):
            logger.debug("matched at offset %d", start)
            return True

    logger.debug("no match in %d offsets", len(line))
    return False
