"""Mandelbrot and Julia set renderer with image, XPM and event-loop helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]