import pickle

import pytest

from minigrep.errors import PatternSyntaxError
from minigrep.patterns import compile_pattern
from minigrep.tokens import (
    AlphaNumeric,
    Alternation,
    Digit,
    EndAnchor,
    Literal,
    NegativeCharGroup,
    OneOrMore,
    PositiveCharGroup,
    StartAnchor,
    Wildcard,
    ZeroOrOne,
)


def test_literals_and_classes():
    p = compile_pattern(r"a\d\w.")
    assert p.tokens == (Literal("a"), Digit(), AlphaNumeric(), Wildcard())


def test_quantifiers_bind_to_previous_literal():
    p = compile_pattern("colou?rs+x")
    assert p.tokens == (
        Literal("c"),
        Literal("o"),
        Literal("l"),
        Literal("o"),
        ZeroOrOne("u"),
        Literal("r"),
        OneOrMore("s"),
        Literal("x"),
    )


def test_anchors():
    p = compile_pattern("^ab$")
    assert p.tokens == (StartAnchor(), Literal("a"), Literal("b"), EndAnchor())
    assert p.anchored_start
    assert p.anchored_end


def test_unanchored_pattern_flags():
    p = compile_pattern("ab")
    assert not p.anchored_start
    assert not p.anchored_end


def test_character_groups():
    assert compile_pattern("[abc]").tokens == (PositiveCharGroup("abc"),)
    assert compile_pattern("[^abc]").tokens == (NegativeCharGroup("abc"),)


def test_unclosed_group_consumes_rest_of_pattern():
    assert compile_pattern("[ab$").tokens == (PositiveCharGroup("ab$"),)


def test_alternation():
    assert compile_pattern("(cat|dog)").tokens == (Alternation("cat", "dog"),)


def test_alternation_keeps_nested_parens_as_text():
    assert compile_pattern("(a(b|c))").tokens == (Alternation("a(b", "c"), Literal(")"))


def test_trailing_backslash_emits_nothing():
    assert compile_pattern("a\\").tokens == (Literal("a"),)


def test_empty_pattern():
    assert compile_pattern("").tokens == ()


@pytest.mark.parametrize(
    "pattern, reason",
    [
        ("a$b", PatternSyntaxError.MISPLACED_END_ANCHOR),
        ("\\x", PatternSyntaxError.UNSUPPORTED_ESCAPE),
        ("a^", PatternSyntaxError.MISPLACED_START_ANCHOR),
        ("^^", PatternSyntaxError.MISPLACED_START_ANCHOR),
    ],
)
def test_invalid_patterns(pattern, reason):
    with pytest.raises(PatternSyntaxError) as exc:
        compile_pattern(pattern)
    assert exc.value.reason == reason
    assert exc.value.pattern == pattern
    assert str(exc.value).startswith("Invalid pattern: ")


def test_syntax_error_is_a_value_error():
    with pytest.raises(ValueError):
        compile_pattern("\\q")


def test_compile_is_idempotent():
    assert compile_pattern("^a+[xy]$") == compile_pattern("^a+[xy]$")
    assert compile_pattern.__wrapped__("^a+[xy]$") == compile_pattern.__wrapped__("^a+[xy]$")


def test_unclosed_alternation_consumes_rest_of_pattern():
    assert compile_pattern("(ab").tokens == (Alternation("ab", ""),)
    assert compile_pattern("(a|b").tokens == (Alternation("a", "b"),)


def test_syntax_error_survives_pickling():
    with pytest.raises(PatternSyntaxError) as exc:
        compile_pattern("a^")
    err = pickle.loads(pickle.dumps(exc.value))
    assert err.reason == PatternSyntaxError.MISPLACED_START_ANCHOR
    assert err.pattern == "a^"
    assert str(err) == str(exc.value)
