"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Sequence

from .colors import color_from_name
from .image import Image
from .words import find, find_unquoted, split_words

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')
# Transparent entries are stored with the alpha byte set.
_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, length: int) -> str:
    length = max(0, min(length, len(text) - start))
    return text[:start] + " " * length + text[start + length :]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2 :], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2 :], "\n")
        text = _blank(text, begin, end + 3)
    return text


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
        name = words[index + 1]
    except (ValueError, IndexError):
        raise XpmError(f"XPM colour line has no colour value: {line!r}") from None
    end = words[index + 2] if index + 2 < len(words) else None
    return color_from_name(name, end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixels."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    width, height, ncolors, cpp = _read_header(next_line("header"))
    later_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour table ends")
        key = line[:cpp]
        color = _read_color(line, cpp)
        if later_wins or key not in palette:
            palette[key] = color

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel rows end")
        for x in range(width):
            color = palette.get(line[cpp * x : cpp * x + cpp], 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    if isinstance(data, (str, bytes)):
        raise TypeError("XPM data must be a sequence of strings, not a single string")
    return parse_xpm(data)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(_QUOTED.findall(strip_comments(text)))