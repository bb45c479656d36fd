"""Small text helpers used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _BLANKS.split(text) if word]


def find(text: str, pattern: str) -> int:
    """Return the position of the first ``pattern`` in ``text``, or -1."""
    if len(pattern) > len(text):
        return -1
    return text.find(pattern)


def find_unquoted(text: str, pattern: str) -> int:
    """Return the first position of ``pattern`` outside double quotes, or -1."""
    if len(pattern) > len(text):
        return -1
    quoted = False
    last = len(text) - len(pattern)
    for pos, char in enumerate(text[: last + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1