"""
Pixel values and the in-memory pixel grid.

PixelBuffer keeps all pixels in one contiguous bytearray, four bytes per
pixel in B, G, R, A order, row-major. Row 0 is always the visual top row.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

CHANNELS = 4


@dataclass(frozen=True)
class Pixel:
    """
    One BGRA pixel. Alpha only matters for 32-bit images.

    Attributes:
        blue: Blue channel (0-255)
        green: Green channel (0-255)
        red: Red channel (0-255)
        alpha: Alpha channel (0-255), ignored at 24-bit depth
    """
    blue: int = 0
    green: int = 0
    red: int = 0
    alpha: int = 0

    def __post_init__(self):
        for name in ("blue", "green", "red", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: int = 0) -> "Pixel":
        return cls(blue=blue, green=green, red=red, alpha=alpha)

    def to_bgra(self) -> bytes:
        return bytes((self.blue, self.green, self.red, self.alpha))

    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def is_black(self) -> bool:
        return self.red == 0 and self.green == 0 and self.blue == 0

    @property
    def is_white(self) -> bool:
        return self.red == 255 and self.green == 255 and self.blue == 255


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)


class PixelBuffer:
    """Row-major grid of pixels indexed by (row, col)."""

    def __init__(self, width: int, height: int, fill: Pixel = BLACK):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid buffer size {width}x{height}")
        self.width = width
        self.height = height
        self._data = bytearray(fill.to_bgra() * (width * height))

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"pixel ({row}, {col}) outside {self.height} rows x {self.width} cols"
            )
        return (row * self.width + col) * CHANNELS

    def get(self, row: int, col: int) -> Pixel:
        off = self._offset(row, col)
        b, g, r, a = self._data[off:off + CHANNELS]
        return Pixel(b, g, r, a)

    def set(self, row: int, col: int, pixel: Pixel) -> None:
        off = self._offset(row, col)
        self._data[off:off + CHANNELS] = pixel.to_bgra()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._data == other._data
        )

    def fill(self, pixel: Pixel) -> None:
        self._data[:] = pixel.to_bgra() * (self.width * self.height)

    def row_bytes(self, row: int) -> bytes:
        """Packed BGRA bytes of one row."""
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} outside {self.height} rows")
        start = row * self.width * CHANNELS
        return bytes(self._data[start:start + self.width * CHANNELS])

    def store_row(self, row: int, bgra: bytes) -> None:
        """Replace one row from packed BGRA bytes."""
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} outside {self.height} rows")
        expected = self.width * CHANNELS
        if len(bgra) != expected:
            raise ValueError(f"row needs {expected} bytes, got {len(bgra)}")
        start = row * expected
        self._data[start:start + expected] = bgra

    def rows(self) -> Iterator[List[Pixel]]:
        for row in range(self.height):
            yield [self.get(row, col) for col in range(self.width)]

    def copy(self) -> "PixelBuffer":
        clone = PixelBuffer(0, 0)
        clone.width = self.width
        clone.height = self.height
        clone._data = bytearray(self._data)
        return clone
