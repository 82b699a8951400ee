from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    char: str

    def describe(self) -> str:
        return self.char


@dataclass(frozen=True)
class Digit:
    def describe(self) -> str:
        return "\\d"


@dataclass(frozen=True)
class AlphaNumeric:
    def describe(self) -> str:
        return "\\w"


@dataclass(frozen=True)
class Wildcard:
    def describe(self) -> str:
        return "."


@dataclass(frozen=True)
class PositiveCharGroup:
    chars: str

    def describe(self) -> str:
        return f"[{self.chars}]"


@dataclass(frozen=True)
class NegativeCharGroup:
    chars: str

    def describe(self) -> str:
        return f"[^{self.chars}]"


@dataclass(frozen=True)
class StartAnchor:
    def describe(self) -> str:
        return "^"


@dataclass(frozen=True)
class EndAnchor:
    def describe(self) -> str:
        return "$"


@dataclass(frozen=True)
class OneOrMore:
    char: str

    def describe(self) -> str:
        return f"{self.char}+"


@dataclass(frozen=True)
class ZeroOrOne:
    char: str

    def describe(self) -> str:
        return f"{self.char}?"


@dataclass(frozen=True)
class Alternation:
    """Both branches are compared against the whole remaining input."""

    first: str
    second: str

    def describe(self) -> str:
        return f"({self.first}|{self.second})"


Token = Union[
    Literal,
    Digit,
    AlphaNumeric,
    Wildcard,
    PositiveCharGroup,
    NegativeCharGroup,
    StartAnchor,
    EndAnchor,
    OneOrMore,
    ZeroOrOne,
    Alternation,
]


def describe_tokens(tokens: tuple[Token, ...]) -> str:
    return " ".join(t.describe() for t in tokens)
