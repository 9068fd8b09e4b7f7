"""
BMP reader and writer for uncompressed 24-bit and 32-bit images.

Only four header fields are interpreted: pixel-data offset (u32 @10),
width (i32 @18), height (i32 @22) and bit depth (u16 @28). Everything
before the pixel data is kept as an opaque HeaderBlob and written back
unchanged, so fields the codec never looks at survive a round trip.
"""

import io
import logging
import os
import struct
from dataclasses import dataclass
from typing import BinaryIO, Dict, Optional, Union

from .byte_cursor import ByteCursor
from .core.options import CodecOptions, DEFAULT_OPTIONS, RowOrder
from .errors import (
    BmpIoError,
    InvalidDimensionsError,
    InvalidSignatureError,
    TruncatedDataError,
    UnsupportedBitDepthError,
)
from .pixels import CHANNELS, Pixel, PixelBuffer

logger = logging.getLogger(__name__)

BMP_SIGNATURE = 0x4D42  # "BM" read little-endian
SUPPORTED_BIT_COUNTS = (24, 32)

FILE_SIZE_FIELD = 2
OFFSET_FIELD = 10
HEADER_SIZE_FIELD = 14
WIDTH_FIELD = 18
HEIGHT_FIELD = 22
PLANES_FIELD = 26
BIT_COUNT_FIELD = 28
COMPRESSION_FIELD = 30
IMAGE_SIZE_FIELD = 34

Source = Union[str, os.PathLike, bytes, bytearray, BinaryIO]
Sink = Union[str, os.PathLike, BinaryIO]


@dataclass(frozen=True)
class HeaderBlob:
    """Raw file prefix [0, offset_to_pixel_data), echoed verbatim on write."""
    data: bytes

    @property
    def offset_to_pixel_data(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def fields(self) -> Dict[str, int]:
        """
        Unpack the standard header fields for display.

        Only fields fully inside the blob are returned; the codec itself
        never relies on anything but offset, width, height and bit count.
        """
        layout = (
            ("file_size", "<I", FILE_SIZE_FIELD),
            ("data_offset", "<I", OFFSET_FIELD),
            ("header_size", "<I", HEADER_SIZE_FIELD),
            ("width", "<i", WIDTH_FIELD),
            ("height", "<i", HEIGHT_FIELD),
            ("planes", "<H", PLANES_FIELD),
            ("bits_per_pixel", "<H", BIT_COUNT_FIELD),
            ("compression", "<I", COMPRESSION_FIELD),
            ("image_size", "<I", IMAGE_SIZE_FIELD),
        )
        values = {}
        for name, fmt, offset in layout:
            if offset + struct.calcsize(fmt) <= len(self.data):
                values[name] = struct.unpack_from(fmt, self.data, offset)[0]
        return values


@dataclass(frozen=True)
class ImageInfo:
    """
    Header fields the codec interprets.

    Attributes:
        width: Pixels per row
        height: Number of rows (always positive once decoded)
        bit_count: Bits per pixel, 24 or 32
        top_down: True when the file's height field was negative
    """
    width: int
    height: int
    bit_count: int
    top_down: bool = False

    @property
    def bytes_per_pixel(self) -> int:
        return self.bit_count // 8

    @property
    def has_alpha(self) -> bool:
        return self.bit_count == 32


class BmpImage:
    """A decoded BMP: header blob, image info and top-down pixel buffer."""

    def __init__(self, header: HeaderBlob, info: ImageInfo, pixels: PixelBuffer):
        if (pixels.width, pixels.height) != (info.width, info.height):
            raise ValueError(
                f"Pixel buffer {pixels.width}x{pixels.height} does not match "
                f"image info {info.width}x{info.height}"
            )
        self.header = header
        self.info = info
        self.pixels = pixels

    @property
    def width(self) -> int:
        return self.info.width

    @property
    def height(self) -> int:
        return self.info.height

    @property
    def bit_count(self) -> int:
        return self.info.bit_count

    @property
    def top_down(self) -> bool:
        return self.info.top_down

    def pixel_at(self, row: int, col: int) -> Pixel:
        """Pixel at (row, col); raises IndexError outside the image."""
        return self.pixels.get(row, col)

    def set_pixel_at(self, row: int, col: int, pixel: Pixel) -> None:
        """Store pixel at (row, col); raises IndexError outside the image."""
        self.pixels.set(row, col, pixel)

    def __repr__(self) -> str:
        order = "top-down" if self.top_down else "bottom-up"
        return (
            f"BmpImage({self.width}x{self.height}, {self.bit_count}-bit, "
            f"{order}, header={len(self.header)} bytes)"
        )


class BmpDecoder:
    """Reads a BMP stream into a BmpImage, normalizing rows to top-down."""

    def __init__(self, options: CodecOptions = DEFAULT_OPTIONS):
        self.options = options

    def decode(self, source: Source) -> BmpImage:
        if isinstance(source, (bytes, bytearray)):
            return self.decode_stream(io.BytesIO(bytes(source)))
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            try:
                with open(path, "rb") as f:
                    return self.decode_stream(f, name=path)
            except BmpIoError:
                raise
            except OSError as exc:
                raise BmpIoError(f"Could not open file: {exc.strerror or exc}", path) from exc
        return self.decode_stream(source)

    def decode_stream(self, stream: BinaryIO, name: Optional[str] = None) -> BmpImage:
        cursor = ByteCursor(stream, name=name)
        cursor.seek(0)

        signature = cursor.u16()
        if signature != BMP_SIGNATURE:
            raise InvalidSignatureError(signature)

        cursor.skip(8)  # file size + reserved
        offset = cursor.u32()
        cursor.skip(4)  # info header size

        width = cursor.i32()
        height = cursor.i32()
        top_down = height < 0
        height = abs(height)

        cursor.skip(2)  # planes
        bit_count = cursor.u16()

        if bit_count not in SUPPORTED_BIT_COUNTS:
            raise UnsupportedBitDepthError(bit_count)

        self._validate(cursor, offset, width, height, bit_count)

        info = ImageInfo(width=width, height=height, bit_count=bit_count, top_down=top_down)
        pixels = self._read_pixels(cursor, offset, info)

        cursor.seek(0)
        header = HeaderBlob(cursor.read_exact(offset))

        logger.debug(
            f"Decoded {width}x{height} {bit_count}-bit "
            f"{'top-down' if top_down else 'bottom-up'} BMP, pixel data at {offset}"
        )
        return BmpImage(header, info, pixels)

    def _validate(
        self,
        cursor: ByteCursor,
        offset: int,
        width: int,
        height: int,
        bit_count: int,
    ) -> None:
        limit = self.options.max_dimension
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(f"Invalid BMP dimensions {width}x{height}")
        if width > limit or height > limit:
            raise InvalidDimensionsError(
                f"BMP dimensions {width}x{height} exceed the limit of {limit}"
            )

        if not self.options.validate_length:
            return

        needed = offset + height * self.options.row_stride(width, bit_count)
        available = cursor.size()
        if available < needed:
            raise TruncatedDataError(
                f"BMP pixel data exceeds file length: need {needed} bytes, "
                f"file has {available}",
                cursor.name,
            )

    def _read_pixels(self, cursor: ByteCursor, offset: int, info: ImageInfo) -> PixelBuffer:
        width, height = info.width, info.height
        bpp = info.bytes_per_pixel
        padding = self.options.row_padding(width, info.bit_count)
        pixels = PixelBuffer(width, height)

        cursor.seek(offset)
        for disk_row in range(height):
            raw = cursor.read_exact(width * bpp)
            if padding:
                cursor.skip(padding)

            if bpp == CHANNELS:
                bgra = raw
            else:
                # Widen BGR to BGRA with a zero alpha.
                bgra = bytearray(width * CHANNELS)
                for channel in range(3):
                    bgra[channel::CHANNELS] = raw[channel::3]

            row = disk_row if info.top_down else height - 1 - disk_row
            pixels.store_row(row, bytes(bgra))

        return pixels


class BmpEncoder:
    """Writes a BmpImage: header blob verbatim, then padded pixel rows."""

    def __init__(self, options: CodecOptions = DEFAULT_OPTIONS):
        self.options = options

    def encode(self, image: BmpImage, sink: Sink) -> None:
        if isinstance(sink, (str, os.PathLike)):
            path = os.fspath(sink)
            try:
                with open(path, "wb") as f:
                    self.encode_stream(image, f, name=path)
            except BmpIoError:
                raise
            except OSError as exc:
                raise BmpIoError(f"Failed to write file: {exc.strerror or exc}", path) from exc
            return
        self.encode_stream(image, sink)

    def encode_bytes(self, image: BmpImage) -> bytes:
        buffer = io.BytesIO()
        self.encode_stream(image, buffer)
        return buffer.getvalue()

    def _disk_rows(self, image: BmpImage):
        rows = range(image.height)
        if self.options.row_order is RowOrder.MATCH_HEADER and not image.top_down:
            return reversed(rows)
        return rows

    def encode_stream(self, image: BmpImage, stream: BinaryIO, name: Optional[str] = None) -> None:
        info = image.info
        padding = bytes(self.options.row_padding(info.width, info.bit_count))

        try:
            stream.write(image.header.data)
            for row in self._disk_rows(image):
                bgra = image.pixels.row_bytes(row)
                if info.has_alpha:
                    stream.write(bgra)
                else:
                    bgr = bytearray(info.width * 3)
                    for channel in range(3):
                        bgr[channel::3] = bgra[channel::CHANNELS]
                    stream.write(bgr)
                stream.write(padding)
        except OSError as exc:
            raise BmpIoError(f"write failed: {exc}", name) from exc

        logger.debug(
            f"Encoded {info.width}x{info.height} {info.bit_count}-bit BMP "
            f"({self.options.row_order.value} row order)"
        )


def decode(source: Source, options: CodecOptions = DEFAULT_OPTIONS) -> BmpImage:
    """Decode a BMP from a path, bytes, or binary file object."""
    return BmpDecoder(options).decode(source)


def decode_bytes(data: bytes, options: CodecOptions = DEFAULT_OPTIONS) -> BmpImage:
    return BmpDecoder(options).decode(bytes(data))


def encode(image: BmpImage, sink: Sink, options: CodecOptions = DEFAULT_OPTIONS) -> None:
    """Encode image to a path or binary file object."""
    BmpEncoder(options).encode(image, sink)


def encode_bytes(image: BmpImage, options: CodecOptions = DEFAULT_OPTIONS) -> bytes:
    return BmpEncoder(options).encode_bytes(image)
