"""Conversion of 0xRRGGBB colours to pixel values of a visual."""

from __future__ import annotations

from dataclasses import dataclass


def _split_mask(mask: int) -> tuple[int, int]:
    """Return the bit offset and bit width of a contiguous channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive integer, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    ones = mask >> shift
    bits = (~ones & (ones + 1)).bit_length() - 1
    return shift, bits


def _scale(channel: int, bits: int) -> int:
    """Reduce a 16-bit channel value to ``bits`` bits."""
    if bits <= 16:
        return channel >> (16 - bits)
    return channel << (bits - 16)


@dataclass(frozen=True)
class PixelFormat:
    """Layout of the red, green and blue fields inside a pixel value."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(
        cls, depth: int, red_mask: int, green_mask: int, blue_mask: int
    ) -> PixelFormat:
        """Build a format from the channel masks of a TrueColor visual."""
        red_shift, red_bits = _split_mask(red_mask)
        green_shift, green_bits = _split_mask(green_mask)
        blue_shift, blue_bits = _split_mask(blue_mask)
        return cls(
            depth=depth,
            red_shift=red_shift,
            red_bits=red_bits,
            green_shift=green_shift,
            green_bits=green_bits,
            blue_shift=blue_shift,
            blue_bits=blue_bits,
        )

    def encode(self, color: int) -> int:
        """Return the pixel value for ``color``; deep visuals take it as is."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            (_scale(red, self.red_bits) << self.red_shift)
            + (_scale(green, self.green_bits) << self.green_shift)
            + (_scale(blue, self.blue_bits) << self.blue_shift)
        )