"""
Core module for BMP Raster Editor.

This module provides the single source of truth for:
- Codec options and environment configuration (options.py)
- Point, color and option-name parsing (parsing.py)
- Result objects (results.py)
- Unified inspect/edit workflows (actions.py, imported directly)

The CLI should call into this module rather than implementing its own logic.
"""

from .options import CodecOptions, PaddingMode, RowOrder, DEFAULT_OPTIONS
from .parsing import parse_point, parse_color, parse_padding_mode, parse_row_order
from .results import OperationResult

__all__ = [
    # Options
    "CodecOptions",
    "PaddingMode",
    "RowOrder",
    "DEFAULT_OPTIONS",
    # Parsing
    "parse_point",
    "parse_color",
    "parse_padding_mode",
    "parse_row_order",
    # Results
    "OperationResult",
]
