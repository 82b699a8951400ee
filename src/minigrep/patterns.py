from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from .errors import PatternSyntaxError
from .matcher import matches
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
    describe_tokens,
)

logger = logging.getLogger(__name__)

_ESCAPES = {
    "d": Digit,
    "w": AlphaNumeric,
}


@dataclass(frozen=True)
class CompiledPattern:
    raw: str
    tokens: tuple[Token, ...]

    @property
    def anchored_start(self) -> bool:
        return bool(self.tokens) and isinstance(self.tokens[0], StartAnchor)

    @property
    def anchored_end(self) -> bool:
        return bool(self.tokens) and isinstance(self.tokens[-1], EndAnchor)

    def matches(self, line: str) -> bool:
        return matches(self.tokens, line)


def _scan_until(pat: str, i: int, stop: str) -> tuple[str, int]:
    """Collect characters from ``pat[i:]`` up to ``stop``.

    Returns the collected text and the index just past ``stop`` (or the end of
    the pattern when ``stop`` never shows up).
    """
    j = pat.find(stop, i)
    if j < 0:
        return pat[i:], len(pat)
    return pat[i:j], j + 1


def _tokenize(pat: str) -> list[Token]:
    out: list[Token] = []
    i = 0
    L = len(pat)

    while i < L:
        c = pat[i]

        if c == "\\":
            if i + 1 < L:
                esc = pat[i + 1]
                factory = _ESCAPES.get(esc)
                if factory is None:
                    raise PatternSyntaxError(
                        f"Unsupported escape sequence '\\{esc}'",
                        pattern=pat,
                        reason=PatternSyntaxError.UNSUPPORTED_ESCAPE,
                    )
                out.append(factory())
            # A lone trailing backslash emits nothing.
            i += 2
        elif c == "^":
            if out:
                raise PatternSyntaxError(
                    "Start anchor should be the first character",
                    pattern=pat,
                    reason=PatternSyntaxError.MISPLACED_START_ANCHOR,
                )
            out.append(StartAnchor())
            i += 1
        elif c == "$":
            if i + 1 < L:
                raise PatternSyntaxError(
                    "End anchor should be the last character",
                    pattern=pat,
                    reason=PatternSyntaxError.MISPLACED_END_ANCHOR,
                )
            out.append(EndAnchor())
            i += 1
        elif c == "[":
            i += 1
            negative = i < L and pat[i] == "^"
            if negative:
                i += 1
            chars, i = _scan_until(pat, i, "]")
            out.append(NegativeCharGroup(chars) if negative else PositiveCharGroup(chars))
        elif c == "(":
            first, i = _scan_until(pat, i + 1, "|")
            second, i = _scan_until(pat, i, ")")
            out.append(Alternation(first, second))
        elif c == ".":
            out.append(Wildcard())
            i += 1
        else:
            nxt = pat[i + 1] if i + 1 < L else None
            if nxt == "+":
                out.append(OneOrMore(c))
                i += 2
            elif nxt == "?":
                out.append(ZeroOrOne(c))
                i += 2
            else:
                out.append(Literal(c))
                i += 1

    return out


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> CompiledPattern:
    tokens = tuple(_tokenize(pattern))
    logger.debug("compiled %r -> %s", pattern, describe_tokens(tokens))
    return CompiledPattern(raw=pattern, tokens=tokens)
