"""Tests for caption sanitizing and memegen encoding."""

import pytest

from trendmeme.services.captions import (
    ELLIPSIS,
    MAX_CAPTION_LENGTH,
    MAX_ENCODED_LENGTH,
    PLACEHOLDER_CAPTION,
    build_meme_url,
    encode_for_meme,
    sanitize_caption,
)

MESSY_CAPTIONS = [
    '  "To the stars, literally!"  ',
    "“Curly quotes everywhere”",
    "``` `backticks` ```",
    '\\"escaped\\"',
    "#Monday #mood   strikes    again",
    'He said ""no"" and \'\'yes\'\'',
    "line one\nline two\t\ttabbed",
    '" \' "  spaced quotes " \' "',
    "##double hashtag",
    "　ideographic space ",
    "word " * 60,
    '"' * 500 + "x",
]


# =============================================================================
# sanitize_caption
# =============================================================================

def test_strips_whitespace_and_surrounding_quotes():
    assert sanitize_caption('  "To the stars, literally!"  ') == "To the stars, literally!"


@pytest.mark.parametrize("raw,expected", [
    ("“Curly”", "Curly"),
    ("‘single curly’", "single curly"),
    ("`code`", "code"),
    ('\\"escaped\\"', "escaped"),
    ("'''triple'''", "triple"),
])
def test_strips_quote_like_characters(raw, expected):
    assert sanitize_caption(raw) == expected


def test_inner_quotes_are_kept():
    assert sanitize_caption("When the 'fix' breaks prod") == "When the 'fix' breaks prod"


def test_removes_hashtag_marks_but_keeps_words():
    assert sanitize_caption("Me on #Monday #mood") == "Me on Monday mood"


def test_repeated_hash_marks_are_removed_in_one_pass():
    assert sanitize_caption("##tbt ###throwback") == "tbt throwback"
    assert encode_for_meme("##tbt") == "tbt"


def test_collapses_whitespace():
    assert sanitize_caption("too   many\n\nspaces\there") == "too many spaces here"


def test_collapses_quote_runs():
    assert sanitize_caption('He said ""no"" and \'\'yes\'\' ok') == "He said \"no\" and 'yes' ok"


@pytest.mark.parametrize("raw", [None, "", "   ", '""', "“”", 42])
def test_empty_input_returns_placeholder(raw):
    assert sanitize_caption(raw) == PLACEHOLDER_CAPTION


def test_long_caption_is_truncated_with_ellipsis():
    caption = sanitize_caption("a" * 200)
    assert len(caption) == MAX_CAPTION_LENGTH
    assert caption.endswith(ELLIPSIS)


def test_truncation_trims_trailing_whitespace():
    caption = sanitize_caption("a" * 118 + " " + "b" * 10)
    assert caption == "a" * 118 + ELLIPSIS


def test_caption_at_limit_is_untouched():
    raw = "x" * MAX_CAPTION_LENGTH
    assert sanitize_caption(raw) == raw


@pytest.mark.parametrize("raw", MESSY_CAPTIONS)
def test_sanitize_is_idempotent(raw):
    once = sanitize_caption(raw)
    assert sanitize_caption(once) == once


@pytest.mark.parametrize("raw", MESSY_CAPTIONS)
def test_sanitized_length_bound(raw):
    caption = sanitize_caption(raw)
    assert 0 < len(caption) <= MAX_CAPTION_LENGTH


def test_long_quote_runs_are_handled():
    assert sanitize_caption('"' * 100_000 + "x" + "'" * 100_000) == "x"


# =============================================================================
# encode_for_meme / build_meme_url
# =============================================================================

def test_encode_example_caption():
    assert encode_for_meme("To the stars, literally!") == "To_the_stars,_literally!"


@pytest.mark.parametrize("text,expected", [
    ("Why though?", "Why_though~q"),
    ("100% done", "100~p_done"),
    ('say "cheese"', "say_''cheese''"),
    ("#tbt to  last\tyear", "tbt_to_last_year"),
])
def test_encode_substitutions(text, expected):
    assert encode_for_meme(text) == expected


def test_encode_caps_length_without_ellipsis():
    encoded = encode_for_meme("w" * 300)
    assert encoded == "w" * MAX_ENCODED_LENGTH


@pytest.mark.parametrize("raw", MESSY_CAPTIONS + ['What? 50% "off"?', "ok " * 80])
def test_encoded_sanitized_text_is_path_safe(raw):
    encoded = encode_for_meme(sanitize_caption(raw))
    assert " " not in encoded
    assert "?" not in encoded
    assert "%" not in encoded
    assert '"' not in encoded
    assert len(encoded) <= MAX_ENCODED_LENGTH


def test_build_meme_url():
    url = build_meme_url("https://api.memegen.link/", "gru", "To the stars, literally!")
    assert url == "https://api.memegen.link/images/gru/_/To_the_stars,_literally!.png"
