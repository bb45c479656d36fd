import pytest

from fractol.cli import Options, UsageError, parse_args, usage
from fractol.fractal import FractalType


def test_usage_without_invalid_option():
    text = usage(None)
    assert text.startswith("How to use fract-ol: ./fract-ol FRACTAL_TYPE [cx] [cy]\n")
    assert "You need to add a valid option" not in text


def test_usage_with_invalid_option():
    text = usage("bad")
    assert text.startswith("You need to add a valid option\n")
    assert text.endswith("cx/cy: have to be floats or ints\n")


def test_mandelbrot_defaults():
    assert parse_args(["mandelbrot"]) == Options(FractalType.MANDELBROT, -0.7, 0.27015)


def test_julia_with_constants():
    options = parse_args(["julia", "0.285", "-0.01"])
    assert options.fractal_type is FractalType.JULIA
    assert options.julia_cx == pytest.approx(0.285)
    assert options.julia_cy == pytest.approx(-0.01)


def test_only_cx_given():
    options = parse_args(["julia", "1"])
    assert options.julia_cx == 1.0
    assert options.julia_cy == 0.27015


def test_no_arguments():
    with pytest.raises(UsageError) as info:
        parse_args([])
    assert info.value.message == usage(None)


@pytest.mark.parametrize("name", ["sierpinski", "mandelbrotx", "Julia", ""])
def test_unknown_fractal(name):
    with pytest.raises(UsageError) as info:
        parse_args([name])
    assert info.value.invalid == name


@pytest.mark.parametrize("argv", [["julia", "abc"], ["julia", "0.3", "1.2.3"], ["mandelbrot", "--"]])
def test_bad_numbers(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert str(info.value).startswith("You need to add a valid option\n")