from fractol.app import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    KEY_ESCAPE,
    SCROLL_DOWN,
    SCROLL_UP,
    Fractol,
    main,
)
from fractol.cli import parse_args, usage
from fractol.fractal import View, draw_julia, draw_mandelbrot
from fractol.hooks import Event, EventType
from fractol.image import Image


def make_app(*argv):
    return Fractol(parse_args(list(argv) or ["mandelbrot"]), width=8, height=8, max_iter=10)


def test_first_expose_renders():
    app = make_app()
    app.loop.run()
    expected = draw_mandelbrot(Image(8, 8), View(), 10)
    assert app.image.data == expected.data


def test_julia_render_uses_options():
    app = make_app("julia", "0.285", "0.01")
    image = app.render()
    expected = draw_julia(Image(8, 8), View(julia_cx=0.285, julia_cy=0.01), 10)
    assert image.data == expected.data


def test_zoom_in_and_out_cancel():
    app = make_app()
    app.zoom(2)
    assert app.view.zoom == 2.0
    app.zoom(0.5)
    assert app.view.zoom == 1.0


def test_scroll_up_zooms_and_rerenders():
    app = make_app()
    assert app.on_mouse(SCROLL_UP, 3, 3) is True
    assert app.view.zoom == 2.0
    expected = draw_mandelbrot(Image(8, 8), View(zoom=2.0), 10)
    assert app.image.data == expected.data


def test_scroll_down_zooms_out():
    app = make_app()
    assert app.on_mouse(SCROLL_DOWN, 0, 0) is True
    assert app.view.zoom == 0.5


def test_other_button_ignored():
    app = make_app()
    assert app.on_mouse(1, 0, 0) is False
    assert app.view.zoom == 1.0


def test_escape_closes_window():
    app = make_app()
    app.loop.post(Event(EventType.KEY_RELEASE, app.window, key=KEY_ESCAPE))
    app.loop.run()
    assert app.loop.windows == ()


def test_other_key_keeps_window():
    app = make_app()
    assert app.on_key(ord("a")) is False
    assert app.loop.windows == (app.window,)


def test_close_request_closes_window():
    app = make_app()
    app.loop.post(Event(EventType.CLIENT_MESSAGE, app.window, close_request=True))
    app.loop.run()
    assert app.window not in app.loop.windows


def test_main_prints_usage_on_bad_arguments(capsys):
    assert main(["nothing"]) == 1
    assert capsys.readouterr().out == usage("nothing")


def test_main_writes_ppm(capsysbinary):
    assert main(["julia", "5", "5"]) == 0
    out = capsysbinary.readouterr().out
    header = f"P6\n{DEFAULT_WIDTH} {DEFAULT_HEIGHT}\n255\n".encode("ascii")
    assert out.startswith(header)
    assert len(out) == len(header) + DEFAULT_WIDTH * DEFAULT_HEIGHT * 3