"""The fractal viewer: a window showing a fractal that zooms with the wheel."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .cli import Options, UsageError, parse_args
from .fractal import DEFAULT_MAX_ITER, FractalType, View, draw_julia, draw_mandelbrot
from .hooks import EventLoop, EventMask, EventType
from .image import Image

KEY_ESCAPE = 0xFF1B
SCROLL_UP = 4
SCROLL_DOWN = 5
DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 300
TITLE = "fract-ol"


class Fractol:
    """A fractal shown in one window of an event loop."""

    def __init__(
        self,
        options: Options,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> None:
        self.fractal_type = options.fractal_type
        self.view = View(julia_cx=options.julia_cx, julia_cy=options.julia_cy)
        self.max_iter = max_iter
        self.image = Image(width, height)
        self.loop = EventLoop()
        self.window = self.loop.new_window(width, height, TITLE)
        self.window.key_hook(self.on_key)
        self.window.mouse_hook(self.on_mouse)
        self.window.expose_hook(self.render)
        self.window.hook(EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY, self._close)

    def zoom(self, factor: float) -> None:
        """Multiply the zoom by ``factor``."""
        self.view.zoom *= factor

    def render(self) -> Image:
        """Draw the fractal into the window's image and return it."""
        if self.fractal_type is FractalType.MANDELBROT:
            draw_mandelbrot(self.image, self.view, self.max_iter)
        else:
            draw_julia(self.image, self.view, self.max_iter)
        return self.image

    def on_key(self, keycode: int) -> bool:
        """Close on Escape; return whether the key was handled."""
        if keycode == KEY_ESCAPE:
            self._close()
            return True
        return False

    def on_mouse(self, button: int, x: int, y: int) -> bool:
        """Zoom in or out with the wheel; return whether the view changed."""
        if button == SCROLL_UP:
            self.zoom(2)
        elif button == SCROLL_DOWN:
            self.zoom(0.5)
        else:
            return False
        self.render()
        return True

    def _close(self) -> None:
        if self.window in self.loop.windows:
            self.loop.destroy_window(self.window)
        self.loop.end()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer and write the final image to stdout as a PPM."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as error:
        sys.stdout.write(error.message)
        return 1
    app = Fractol(options)
    app.loop.run()
    sys.stdout.buffer.write(app.image.to_ppm())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())