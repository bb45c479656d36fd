# fractol

An escape-time renderer for the Mandelbrot and Julia sets, together with
the pieces it is built from: an in-memory pixel image that can be written
out as binary PPM, an XPM image reader with the X11 colour-name table, and
a small in-memory window/event-loop model with key, mouse, expose and loop
hooks.

## Installation

```
pip install .
```

## Command line

```
fractol FRACTAL_TYPE [cx] [cy]
```

`FRACTAL_TYPE` is `mandelbrot` or `julia`. `cx` and `cy` set the constant
`c` used for the Julia set; each must be an integer or a decimal number
such as `-0.8`, `3.` or `.5`. Without them the constant is
`-0.7 + 0.27015i`.

The command renders a 300x300 image with at most 100 iterations per point
and writes it to standard output as a binary PPM, so redirect it to a file:

```
fractol mandelbrot > mandelbrot.ppm
fractol julia > julia.ppm
fractol julia -0.8 0.156 > julia2.ppm
```

With a missing or unknown fractal type, or a value that is not a number,
the command prints how to use it and exits with status 1.

## Library

```python
from fractol.image import Image
from fractol.fractal import View, draw_mandelbrot, escape_time_julia

image = Image(800, 800)
draw_mandelbrot(image, View(), 100)
with open("mandelbrot.ppm", "wb") as out:
    out.write(image.to_ppm())

escape_time_julia(0.0, 0.0, -0.7, 0.27015, 100)
```

Modules:

- `fractol.fractal`: `draw_mandelbrot`, `draw_julia`, `escape_time_mandelbrot`,
  `escape_time_julia`, the colouring helpers `argb` and `shade`, the
  `FractalType` enum and the `View` dataclass (zoom, offsets, base colour and
  Julia constant).
- `fractol.image`: `Image`, a pixel buffer of 8, 16, 24 or 32 bits per pixel
  in either byte order, with `put_pixel`, `get_pixel` and `to_ppm`.
- `fractol.colors`: `color_from_name` looks up X11 colour names such as
  `"dark orange"` or hexadecimal specs such as `"#ff8c00"`; `"none"` gives
  -1 and unknown names give 0.
- `fractol.xpm`: `xpm_file_to_image` and `xpm_to_image` load XPM pictures
  into an `Image`, `parse_xpm` reads the XPM strings themselves and
  `strip_comments` blanks out C comments; malformed input raises `XpmError`.
- `fractol.pixel`: `PixelFormat.from_masks` describes a visual by its
  channel masks and `PixelFormat.encode` turns 0xRRGGBB into its pixel value.
- `fractol.words`: `split_words`, `find` and `find_unquoted` text helpers.
- `fractol.hooks`: `EventLoop` keeps windows, queues events posted with
  `post`, hands them to each `Window`'s hooks (`hook`, `key_hook`,
  `mouse_hook`, `expose_hook`) and calls a loop hook after each batch, until
  the last window is destroyed or `end()` is called. Without a loop hook,
  `run` returns once the queue is empty.
- `fractol.cli`: `parse_args` turns arguments into `Options` or raises
  `UsageError` carrying the `usage` text.
- `fractol.app`: `Fractol` ties these together: `on_mouse` with wheel
  buttons 4 and 5 zooms by 2 or 0.5 and redraws, `on_key` with Escape
  closes the window and ends the loop, `render` draws into `Fractol.image`.

## What it does not do

Windows and events exist only in memory: nothing is shown on screen and no
keyboard or mouse input is read. The command draws one image and writes it
as PPM; zooming and closing happen only when events are posted to the loop
or `Fractol.on_mouse` and `Fractol.on_key` are called from code.

## Tests

```
pip install .[test]
pytest
```