"""
Unified workflows shared by the CLI and scripts.

Each action decodes, optionally edits and re-encodes a BMP, and reports
the outcome as an OperationResult instead of raising codec errors.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple

from bmp_raster_editor.bmp_codec import BmpImage, decode, encode
from bmp_raster_editor.errors import BmpError
from bmp_raster_editor.pixels import BLACK, Pixel
from bmp_raster_editor.raster_editor import RasterEditor
from .options import CodecOptions, DEFAULT_OPTIONS, RowOrder
from .results import OperationResult

logger = logging.getLogger(__name__)

# The drawing applied by the interactive edit flow.
DEFAULT_CROSS = ((40, 60), (160, 120))


class DrawKind(Enum):
    """Supported drawing operations."""
    PIXEL = "pixel"
    LINE = "line"
    CROSS = "cross"


@dataclass(frozen=True)
class DrawOperation:
    """
    One editor call.

    Attributes:
        kind: Operation type
        start: (x, y) of the pixel, line start, or first cross corner
        end: (x, y) of the line end or opposite cross corner (unused for PIXEL)
        color: Color to draw with
    """
    kind: DrawKind
    start: Tuple[int, int]
    end: Optional[Tuple[int, int]] = None
    color: Pixel = BLACK

    def apply(self, editor: RasterEditor) -> int:
        """Run against editor; returns the number of points visited (0 for a clipped PIXEL)."""
        x0, y0 = self.start
        if self.kind is DrawKind.PIXEL:
            return int(editor.set_pixel(x0, y0, self.color))

        if self.end is None:
            raise ValueError(f"{self.kind.value} operation needs an end point")
        x1, y1 = self.end
        if self.kind is DrawKind.LINE:
            return editor.draw_line(x0, y0, x1, y1, self.color)

        return editor.draw_diagonal_cross(x0, y0, x1, y1, self.color)


def _fill_image_fields(result: OperationResult, image: BmpImage) -> None:
    result.size = (image.width, image.height)
    result.bit_count = image.bit_count
    result.metadata["top_down"] = image.top_down
    result.metadata["header_bytes"] = len(image.header)


def inspect_bmp(input_path: str, options: CodecOptions = DEFAULT_OPTIONS) -> OperationResult:
    """
    Decode a BMP and report its header fields.

    Returns:
        OperationResult with size, bit depth and header fields in metadata
    """
    try:
        image = decode(input_path, options)
    except BmpError as e:
        logger.debug(f"inspect_bmp failed: {e}")
        return OperationResult.failure("inspect_bmp", str(e), input_path=str(input_path))

    result = OperationResult.success("inspect_bmp", input_path=str(input_path))
    _fill_image_fields(result, image)
    result.metadata["header"] = image.header.fields()
    return result


def edit_bmp(
    input_path: str,
    output_path: str,
    operations: Sequence[DrawOperation] = (),
    options: CodecOptions = DEFAULT_OPTIONS,
) -> OperationResult:
    """
    Decode input_path, apply operations in order, encode to output_path.

    With no operations this is a plain decode/encode copy.

    Returns:
        OperationResult; on failure errors holds the codec message and the
        output file may be partially written.
    """
    result = OperationResult.success(
        "edit_bmp",
        input_path=str(input_path),
        output_path=str(output_path),
    )

    try:
        image = decode(input_path, options)
        _fill_image_fields(result, image)

        editor = RasterEditor(image)
        for op in operations:
            result.points_drawn += op.apply(editor)

        if Path(output_path).resolve() == Path(input_path).resolve():
            result.add_warning("Output overwrites the input file")
        if not image.top_down and options.row_order is RowOrder.AS_STORED:
            result.add_warning(
                "Bottom-up input written in top-down row order; "
                "readers will show it vertically flipped"
            )

        encode(image, output_path, options)
    except BmpError as e:
        logger.debug(f"edit_bmp failed: {e}")
        result.add_error(str(e))

    return result
