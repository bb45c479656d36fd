"""Escape-time rendering of the Mandelbrot and Julia sets."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from .image import Image

DEFAULT_MAX_ITER = 100
DEFAULT_BASE_COLOR = 0x000001


class FractalType(enum.Enum):
    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class View:
    """Zoom, offset and colouring of the rendered part of the plane."""

    zoom: float = 1.0
    x_move: float = 0.0
    y_move: float = 0.0
    base_color: int = DEFAULT_BASE_COLOR
    julia_cx: float = -0.7
    julia_cy: float = 0.27015


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def argb(t: int, r: int, g: int, b: int) -> int:
    """Pack four channels into a 32-bit signed integer 0xTTRRGGBB."""
    return _wrap32((t << 24) | (r << 16) | (g << 8) | b)


def shade(iterations: int, base_color: int, max_iter: int) -> int:
    """Return the unsigned pixel value for a point that took ``iterations``."""
    if max_iter <= 0:
        raise ValueError(f"max_iter must be positive, got {max_iter}")
    if iterations == max_iter:
        return 0x000000
    level = _trunc_div(_wrap32(_wrap32(base_color * iterations) * 255), max_iter)
    return (base_color + argb(0, level, level, level)) & 0xFFFFFFFF


def escape_time_julia(zx: float, zy: float, cx: float, cy: float, max_iter: int) -> int:
    """Count iterations of z = z*z + c before |z| reaches 2, at most ``max_iter``.

    A start point already outside the radius gives -1.
    """
    count = -1
    while zx * zx + zy * zy < 4:
        count += 1
        if count >= max_iter:
            break
        zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
    return count


def escape_time_mandelbrot(cx: float, cy: float, max_iter: int) -> int:
    """Escape time of z = z*z + c starting from z = 0."""
    return escape_time_julia(0.0, 0.0, cx, cy, max_iter)


def _plane(image: Image, view: View) -> Iterator[tuple[int, int, float, float]]:
    half_width = image.width // 2
    half_height = image.height // 2
    for x in range(image.width):
        real = (x - half_width) * 4.0 / (image.width * view.zoom) + view.x_move
        for y in range(image.height):
            imag = (y - half_height) * 4.0 / (image.height * view.zoom) + view.y_move
            yield x, y, real, imag


def draw_mandelbrot(image: Image, view: View, max_iter: int = DEFAULT_MAX_ITER) -> Image:
    """Render the Mandelbrot set into ``image`` and return it."""
    for x, y, real, imag in _plane(image, view):
        count = escape_time_mandelbrot(real, imag, max_iter)
        image.put_pixel(x, y, shade(count, view.base_color, max_iter))
    return image


def draw_julia(image: Image, view: View, max_iter: int = DEFAULT_MAX_ITER) -> Image:
    """Render the Julia set of ``view.julia_cx + i*view.julia_cy`` into ``image``."""
    for x, y, real, imag in _plane(image, view):
        count = escape_time_julia(real, imag, view.julia_cx, view.julia_cy, max_iter)
        image.put_pixel(x, y, shade(count, view.base_color, max_iter))
    return image