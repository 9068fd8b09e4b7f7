"""
Codec options: compatibility switches and decode limits.

The defaults reproduce the historical row padding and write rows in the
order the header declares. Both can be overridden per call, from the CLI,
or through environment variables (see CodecOptions.from_env).
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

PADDING_ENV = "BMP_EDITOR_PADDING"
ROW_ORDER_ENV = "BMP_EDITOR_ROW_ORDER"
MAX_DIMENSION_ENV = "BMP_EDITOR_MAX_DIMENSION"

DEFAULT_MAX_DIMENSION = 32768


class PaddingMode(Enum):
    """How the per-row padding is computed."""
    BGR_STRIDE = "bgr"      # (4 - width*3 % 4) % 4, even at 32-bit (historical)
    PIXEL_STRIDE = "pixel"  # (4 - width*bytes_per_pixel % 4) % 4


class RowOrder(Enum):
    """
    Which on-disk row order the encoder emits.

    MATCH_HEADER is the default, a change from the historical writer
    (AS_STORED) which always emitted top-down rows. The preserved header
    keeps its height sign, so AS_STORED turns a bottom-up file upside down
    and decode(encode(image)) only reproduces the pixels under MATCH_HEADER.
    """
    MATCH_HEADER = "match-header"  # honour the header's height sign
    AS_STORED = "as-stored"        # always top-down, whatever the header says (historical)


PADDING_ALIASES: Dict[str, PaddingMode] = {
    "bgr": PaddingMode.BGR_STRIDE,
    "bgr_stride": PaddingMode.BGR_STRIDE,
    "legacy": PaddingMode.BGR_STRIDE,
    "pixel": PaddingMode.PIXEL_STRIDE,
    "pixel_stride": PaddingMode.PIXEL_STRIDE,
    "correct": PaddingMode.PIXEL_STRIDE,
}

ROW_ORDER_ALIASES: Dict[str, RowOrder] = {
    "match_header": RowOrder.MATCH_HEADER,
    "header": RowOrder.MATCH_HEADER,
    "as_stored": RowOrder.AS_STORED,
    "top_down": RowOrder.AS_STORED,
    "legacy": RowOrder.AS_STORED,
}


@dataclass(frozen=True)
class CodecOptions:
    """
    Settings shared by the decoder and encoder.

    Attributes:
        padding: Row padding formula (decode and encode must agree)
        row_order: On-disk row order written by the encoder
        max_dimension: Largest accepted width or height
        validate_length: Check the stream holds all declared pixel rows
                         before allocating the buffer
    """
    padding: PaddingMode = PaddingMode.BGR_STRIDE
    row_order: RowOrder = RowOrder.MATCH_HEADER
    max_dimension: int = DEFAULT_MAX_DIMENSION
    validate_length: bool = True

    def __post_init__(self):
        if self.max_dimension <= 0:
            raise ValueError(f"max_dimension must be positive, got {self.max_dimension}")

    def row_padding(self, width: int, bit_count: int) -> int:
        """Number of zero bytes after each row of `width` pixels."""
        if self.padding is PaddingMode.BGR_STRIDE:
            stride = width * 3
        else:
            stride = width * (bit_count // 8)
        return (4 - stride % 4) % 4

    def row_stride(self, width: int, bit_count: int) -> int:
        """On-disk bytes per row, padding included."""
        return width * (bit_count // 8) + self.row_padding(width, bit_count)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CodecOptions":
        """Build options from BMP_EDITOR_* environment variables."""
        # Imported here: parsing imports this module for the enums.
        from .parsing import parse_padding_mode, parse_row_order

        env = os.environ if environ is None else environ
        kwargs = {}

        padding = env.get(PADDING_ENV, "").strip()
        if padding:
            kwargs["padding"] = parse_padding_mode(padding)

        row_order = env.get(ROW_ORDER_ENV, "").strip()
        if row_order:
            kwargs["row_order"] = parse_row_order(row_order)

        max_dimension = env.get(MAX_DIMENSION_ENV, "").strip()
        if max_dimension:
            try:
                kwargs["max_dimension"] = int(max_dimension)
            except ValueError:
                raise ValueError(
                    f"Invalid {MAX_DIMENSION_ENV} '{max_dimension}'. Use a positive integer."
                )

        return cls(**kwargs)


DEFAULT_OPTIONS = CodecOptions()
