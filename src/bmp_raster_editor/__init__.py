"""
BMP Raster Editor - read, edit and rewrite 24/32-bit BMP images

Byte-faithful header passthrough, top-down pixel buffer, line drawing.
"""

__version__ = "0.1.0"

from bmp_raster_editor.errors import (
    BmpError,
    BmpIoError,
    TruncatedDataError,
    InvalidSignatureError,
    UnsupportedBitDepthError,
    InvalidDimensionsError,
)
from bmp_raster_editor.pixels import Pixel, PixelBuffer, BLACK, WHITE
from bmp_raster_editor.core.options import CodecOptions, PaddingMode, RowOrder
from bmp_raster_editor.bmp_codec import (
    BmpImage,
    BmpDecoder,
    BmpEncoder,
    HeaderBlob,
    ImageInfo,
    decode,
    decode_bytes,
    encode,
    encode_bytes,
)
from bmp_raster_editor.raster_editor import RasterEditor
from bmp_raster_editor.preview import preview

__all__ = [
    "BmpError",
    "BmpIoError",
    "TruncatedDataError",
    "InvalidSignatureError",
    "UnsupportedBitDepthError",
    "InvalidDimensionsError",
    "Pixel",
    "PixelBuffer",
    "BLACK",
    "WHITE",
    "CodecOptions",
    "PaddingMode",
    "RowOrder",
    "BmpImage",
    "BmpDecoder",
    "BmpEncoder",
    "HeaderBlob",
    "ImageInfo",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "RasterEditor",
    "preview",
    "__version__",
]
