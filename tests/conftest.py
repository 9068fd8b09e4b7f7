"""Shared fixtures: hand-built BMP files with full control over the header."""

import struct

import pytest

from bmp_raster_editor.core.options import CodecOptions, PaddingMode


def build_bmp(rows, bit_count=24, top_down=False, padding=PaddingMode.BGR_STRIDE, extra_header=b""):
    """
    Serialize visual rows (top row first) of (r, g, b[, a]) tuples.

    extra_header is inserted between the info header and the pixel data
    to exercise the opaque header passthrough.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    options = CodecOptions(padding=padding)
    pad = bytes(options.row_padding(width, bit_count))

    disk_rows = rows if top_down else list(reversed(rows))
    pixel_data = bytearray()
    for row in disk_rows:
        for px in row:
            r, g, b = px[:3]
            pixel_data += bytes((b, g, r))
            if bit_count == 32:
                pixel_data.append(px[3] if len(px) > 3 else 255)
        pixel_data += pad

    offset = 14 + 40 + len(extra_header)
    file_size = offset + len(pixel_data)
    file_header = b"BM" + struct.pack("<IHHI", file_size, 0xBEEF, 0xCAFE, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        40,
        width,
        -height if top_down else height,
        1,
        bit_count,
        0,
        len(pixel_data),
        2835,
        2835,
        0,
        0,
    )
    return file_header + info_header + extra_header + bytes(pixel_data)


def gradient_rows(width, height, alpha=False):
    """Distinct color per pixel so row/column mix-ups are visible."""
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            px = ((x * 40) % 256, (y * 50) % 256, (x + y * 7) % 256)
            if alpha:
                px = px + ((x * y) % 256,)
            row.append(px)
        rows.append(row)
    return rows


@pytest.fixture
def bmp_builder():
    return build_bmp


@pytest.fixture
def gradient():
    return gradient_rows


@pytest.fixture
def bmp_file(tmp_path):
    """Write a 6x4 24-bit bottom-up gradient BMP and return its path."""
    path = tmp_path / "input.bmp"
    path.write_bytes(build_bmp(gradient_rows(6, 4)))
    return path


@pytest.fixture
def white_bmp_file(tmp_path):
    """A 5x5 all-white 24-bit BMP."""
    path = tmp_path / "white.bmp"
    path.write_bytes(build_bmp([[(255, 255, 255)] * 5 for _ in range(5)]))
    return path
