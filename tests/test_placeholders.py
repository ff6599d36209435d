import pytest

from templating.placeholders import Literal, Placeholder, iter_segments


def parse(text):
    return list(iter_segments(text))


def test_plain_text_is_single_literal():
    assert parse("/api/foo/bar") == [Literal("/api/foo/bar")]


def test_empty_string_has_no_segments():
    assert parse("") == []


def test_placeholder_key_is_trimmed_and_token_kept():
    assert parse("/api/{ authType }/bar") == [
        Literal("/api/"),
        Placeholder(key="authType", token="{ authType }"),
        Literal("/bar"),
    ]


def test_adjacent_placeholders():
    assert parse("{a}{b}") == [Placeholder("a", "{a}"), Placeholder("b", "{b}")]


@pytest.mark.parametrize("text", ["{a}", "{a}{b}", "x{a}{b}y", "{a}/{b}", "{}{a}"])
def test_no_empty_literal_segments(text):
    assert all(seg.text for seg in parse(text) if isinstance(seg, Literal))


def test_leading_placeholder_then_literal():
    assert parse("{a}/x") == [Placeholder("a", "{a}"), Literal("/x")]


def test_empty_and_blank_braces_stay_literal():
    assert parse("a{}b{   }c") == [Literal("a{}b{   }c")]


def test_empty_braces_merge_with_following_literal():
    assert parse("{}{a}") == [Literal("{}"), Placeholder("a", "{a}")]


def test_unterminated_brace_is_literal_to_end():
    assert parse("/x/{ authType/y") == [Literal("/x/{ authType/y")]


def test_inner_open_brace_restarts_token():
    assert parse("{a{b}") == [Literal("{a"), Placeholder("b", "{b}")]


def test_stray_closing_brace_is_literal():
    assert parse("a}b") == [Literal("a}b")]
