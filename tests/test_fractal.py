import pytest

from fractol.fractal import (
    View,
    argb,
    draw_julia,
    draw_mandelbrot,
    escape_time_julia,
    escape_time_mandelbrot,
    shade,
)
from fractol.image import Image


def test_argb_packs_channels():
    assert argb(0, 0x12, 0x34, 0x56) == 0x123456


def test_origin_never_escapes():
    assert escape_time_mandelbrot(0.0, 0.0, 50) == 50


def test_far_point_escapes_after_first_step():
    assert escape_time_mandelbrot(2.0, 2.0, 50) == 0


def test_julia_start_outside_radius():
    assert escape_time_julia(3.0, 0.0, -0.7, 0.27015, 50) == -1


@pytest.mark.parametrize("max_iter", [1, 10, 100])
def test_escape_time_is_bounded(max_iter):
    for cx in (-2.0, -1.0, -0.5, 0.25, 0.4):
        count = escape_time_mandelbrot(cx, 0.1, max_iter)
        assert 0 <= count <= max_iter


def test_shade_inside_set_is_black():
    assert shade(100, 0x00FF00, 100) == 0


def test_shade_at_zero_iterations_is_base_color():
    assert shade(0, 0x00AB00, 100) == 0x00AB00


@pytest.mark.parametrize("iterations", [1, 17, 254])
def test_shade_grey_levels(iterations):
    value = shade(iterations, 1, 255) - 1
    assert (value >> 16) & 0xFF == iterations
    assert (value >> 8) & 0xFF == iterations
    assert value & 0xFF == iterations


def test_shade_rejects_zero_max_iter():
    with pytest.raises(ValueError):
        shade(1, 1, 0)


def test_mandelbrot_centre_pixel_is_black():
    image = draw_mandelbrot(Image(6, 6), View(), 20)
    assert image.get_pixel(3, 3) == 0


def test_mandelbrot_pixels_follow_escape_time():
    view = View(zoom=2.0, x_move=-0.5, base_color=0x000003)
    image = draw_mandelbrot(Image(5, 4), view, 30)
    x, y = 1, 3
    real = (x - 2) * 4.0 / (5 * 2.0) - 0.5
    imag = (y - 2) * 4.0 / (4 * 2.0)
    expected = shade(escape_time_mandelbrot(real, imag, 30), 3, 30)
    assert image.get_pixel(x, y) == expected


def test_julia_uses_view_constant():
    first = draw_julia(Image(6, 6), View(julia_cx=-0.7, julia_cy=0.27015), 25)
    second = draw_julia(Image(6, 6), View(julia_cx=0.285, julia_cy=0.01), 25)
    assert first.data != second.data
    expected = shade(escape_time_julia(0.0, 0.0, 0.285, 0.01, 25), 1, 25)
    assert second.get_pixel(3, 3) == expected


def test_zoom_changes_rendering():
    plain = draw_mandelbrot(Image(8, 8), View(), 20)
    zoomed = draw_mandelbrot(Image(8, 8), View(zoom=4.0), 20)
    assert plain.data != zoomed.data