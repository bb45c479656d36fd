"""Command-line options of the fractal viewer."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .fractal import FractalType

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

_NAMES = {
    "mandelbrot": FractalType.MANDELBROT,
    "julia": FractalType.JULIA,
}


class UsageError(Exception):
    """Raised for invalid arguments; the message is the usage text."""

    def __init__(self, invalid: Optional[str] = None) -> None:
        super().__init__(usage(invalid))
        self.invalid = invalid
        self.message = usage(invalid)


@dataclass(frozen=True)
class Options:
    fractal_type: FractalType
    julia_cx: float = -0.7
    julia_cy: float = 0.27015


def usage(invalid: Optional[str]) -> str:
    """Return the usage text, led by a complaint when ``invalid`` is given."""
    lines = []
    if invalid:
        lines.append("You need to add a valid option\n")
    lines.append("How to use fract-ol: ./fract-ol FRACTAL_TYPE [cx] [cy]\n")
    lines.append("FRACTAL_TYPE: mandelbrot, julia\n")
    lines.append("cx/cy: have to be floats or ints\n")
    return "".join(lines)


def _number(text: str) -> float:
    if not _NUMBER.fullmatch(text):
        raise UsageError(text)
    return float(text)


def parse_args(argv: Sequence[str]) -> Options:
    """Read ``FRACTAL_TYPE [cx] [cy]`` (program name excluded)."""
    if not argv:
        raise UsageError(None)
    fractal_type = _NAMES.get(argv[0])
    if fractal_type is None:
        raise UsageError(argv[0])
    options = {}
    if len(argv) >= 2:
        options["julia_cx"] = _number(argv[1])
    if len(argv) >= 3:
        options["julia_cy"] = _number(argv[2])
    return Options(fractal_type, **options)