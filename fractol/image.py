"""In-memory pixel buffers that fractals and XPM files are drawn into."""

from __future__ import annotations

from dataclasses import dataclass, field

_PIXEL_SIZES = (8, 16, 24, 32)


@dataclass
class Image:
    """A ``width`` x ``height`` pixel buffer stored row by row in ``data``."""

    width: int
    height: int
    bits_per_pixel: int = 32
    big_endian: bool = False
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        if self.bits_per_pixel not in _PIXEL_SIZES:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row."""
        return self.width * self.bytes_per_pixel

    @property
    def endian(self) -> int:
        """1 when pixels are stored most significant byte first, else 0."""
        return 1 if self.big_endian else 0

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color``, cut to the pixel size, at column ``x`` row ``y``."""
        size = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * size)) - 1)
        self.data[offset : offset + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value at column ``x`` row ``y``."""
        size = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + size], self._byteorder)

    def to_ppm(self) -> bytes:
        """Return the image as a binary PPM, reading pixels as 0xRRGGBB."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for y in range(self.height):
            for x in range(self.width):
                value = self.get_pixel(x, y)
                body += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
        return header + bytes(body)