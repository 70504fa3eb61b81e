"""Whitespace handling restricted to the Unicode ``White_Space`` property.

``str.isspace`` and ``str.split`` also treat the information separators
U+001C..U+001F as whitespace; these helpers do not.
"""

from __future__ import annotations

import re

_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

_WHITESPACE_RUN = re.compile(r"[^\S\x1c-\x1f]+")
_STRIP = re.compile(r"[^\S\x1c-\x1f]*(.*?)[^\S\x1c-\x1f]*", re.DOTALL)


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _SEPARATORS


def split_whitespace(text: str) -> list[str]:
    """Split *text* on whitespace runs, dropping empty fields."""
    return [field for field in _WHITESPACE_RUN.split(text) if field]


def strip_whitespace(text: str) -> str:
    return _STRIP.fullmatch(text).group(1)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    return " ".join(split_whitespace(text))
