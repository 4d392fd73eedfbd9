"""
Caption cleanup and memegen text encoding.

``sanitize_caption`` turns raw LLM output into text fit for display.
``encode_for_meme`` turns that display text into memegen's path-segment
escaping, which is not ordinary percent-encoding:

    space -> _      ? -> ~q      % -> ~p      " -> ''
"""

import re
from typing import Any

PLACEHOLDER_CAPTION = "AI is tired, try again."

MAX_CAPTION_LENGTH = 120
MAX_ENCODED_LENGTH = 140
ELLIPSIS = "…"

# Straight and curly quotes, backslash and backtick
QUOTE_CHARS = "\\\"'“”‘’`"

_WHITESPACE = re.compile(r"\s+")
# "#+" so "##tag" cleans in one pass and sanitizing stays idempotent
_HASHTAG = re.compile(r"#+(\w+)")
_DOUBLE_QUOTE_RUN = re.compile(r'"{2,}')
_SINGLE_QUOTE_RUN = re.compile(r"'{2,}")


def sanitize_caption(raw: Any) -> str:
    """
    Clean a generated caption for display.

    Never returns an empty string and never raises. Applying it to its own
    output returns the same text.
    """
    if not raw or not isinstance(raw, str):
        return PLACEHOLDER_CAPTION

    caption = _WHITESPACE.sub(" ", raw)
    # str.strip with a character set is linear, whatever the run length
    caption = caption.strip(" " + QUOTE_CHARS)
    caption = _HASHTAG.sub(r"\1", caption)
    caption = _DOUBLE_QUOTE_RUN.sub('"', caption)
    caption = _SINGLE_QUOTE_RUN.sub("'", caption)

    if not caption:
        return PLACEHOLDER_CAPTION

    if len(caption) > MAX_CAPTION_LENGTH:
        caption = caption[:MAX_CAPTION_LENGTH - 1].rstrip() + ELLIPSIS

    return caption


def encode_for_meme(text: str) -> str:
    """Encode sanitized caption text as a memegen URL path segment (max 140 chars)."""
    encoded = _HASHTAG.sub(r"\1", text.strip())
    encoded = _WHITESPACE.sub("_", encoded)
    encoded = encoded.replace("?", "~q")
    encoded = encoded.replace("%", "~p")
    encoded = encoded.replace('"', "''")
    return encoded[:MAX_ENCODED_LENGTH]


def build_meme_url(base_url: str, template: str, caption: str) -> str:
    """Build the memegen image URL with ``caption`` as bottom text and an empty top line."""
    return f"{base_url.rstrip('/')}/images/{template}/_/{encode_for_meme(caption)}.png"
