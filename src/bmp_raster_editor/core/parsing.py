"""
Centralized parsing helpers for points, colors and option names.

The CLI and scripts must import these helpers rather than re-implement.
All of them raise ValueError; the CLI converts that to typer.BadParameter.
"""

from typing import Dict, Tuple

from bmp_raster_editor.pixels import Pixel
from .options import (
    PaddingMode,
    RowOrder,
    PADDING_ALIASES,
    ROW_ORDER_ALIASES,
)

NAMED_COLORS: Dict[str, Pixel] = {
    "black": Pixel.from_rgb(0, 0, 0),
    "white": Pixel.from_rgb(255, 255, 255),
    "red": Pixel.from_rgb(255, 0, 0),
    "green": Pixel.from_rgb(0, 255, 0),
    "blue": Pixel.from_rgb(0, 0, 255),
}


def _normalize(value: str) -> str:
    return value.lower().strip().replace("-", "_")


def _parse_int(text: str) -> int:
    text = text.strip()
    if text.lower().startswith("0x"):
        return int(text, 16)
    return int(text)


def parse_point(value: str) -> Tuple[int, int]:
    """
    Parse a coordinate pair.

    Accepts "x,y" or "x:y" with decimal or 0x-prefixed hex components.
    Negative values are allowed; out-of-range points are clipped by the
    editor rather than rejected here.

    Raises:
        ValueError: If value is not two integers.
    """
    parts = value.replace(":", ",").split(",")
    try:
        if len(parts) != 2:
            raise ValueError()
        return (_parse_int(parts[0]), _parse_int(parts[1]))
    except ValueError:
        raise ValueError(
            f"Invalid point '{value}'. Use 'x,y' like '40,60'."
        )


def parse_color(value: str) -> Pixel:
    """
    Parse a color into a Pixel.

    Accepts:
        - Named colors: "black", "white", "red", "green", "blue"
        - Hex: "#RRGGBB" or "#RRGGBBAA"
        - Components: "r,g,b" or "r,g,b,a"

    Raises:
        ValueError: If value cannot be parsed or a channel is out of range.
    """
    text = value.strip()
    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return named

    try:
        if text.startswith("#"):
            digits = text[1:]
            if len(digits) not in (6, 8):
                raise ValueError()
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        else:
            channels = [int(part) for part in text.split(",")]
            if len(channels) not in (3, 4):
                raise ValueError()
        return Pixel.from_rgb(*channels)
    except ValueError:
        raise ValueError(
            f"Invalid color '{value}'. Use a name (black), hex (#FF0000) or 'r,g,b[,a]'."
        )


def parse_padding_mode(value: str) -> PaddingMode:
    """Parse a padding mode name ("bgr", "pixel" and aliases)."""
    normalized = _normalize(value)
    if normalized in PADDING_ALIASES:
        return PADDING_ALIASES[normalized]
    valid = ", ".join(sorted(PADDING_ALIASES.keys()))
    raise ValueError(f"Invalid padding mode '{value}'. Valid modes: {valid}")


def parse_row_order(value: str) -> RowOrder:
    """Parse a row order name ("match-header", "as-stored" and aliases)."""
    normalized = _normalize(value)
    if normalized in ROW_ORDER_ALIASES:
        return ROW_ORDER_ALIASES[normalized]
    valid = ", ".join(sorted(ROW_ORDER_ALIASES.keys()))
    raise ValueError(f"Invalid row order '{value}'. Valid values: {valid}")
