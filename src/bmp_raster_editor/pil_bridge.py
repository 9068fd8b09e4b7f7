"""Conversion between decoded BMP images and Pillow images."""

import logging

from PIL import Image

from .bmp_codec import BmpImage
from .pixels import CHANNELS

logger = logging.getLogger(__name__)


def to_pil_image(image: BmpImage) -> Image.Image:
    """
    Build a Pillow image from the pixel buffer.

    24-bit images become "RGB"; 32-bit images become "RGBA" with the
    stored alpha channel.
    """
    data = b"".join(image.pixels.row_bytes(row) for row in range(image.height))
    mode = "RGBA" if image.info.has_alpha else "RGB"
    # Raw decoder "BGRA" unpacks into RGBA; for RGB the fourth byte is skipped.
    raw_mode = "BGRA" if mode == "RGBA" else "BGRX"
    pil_img = Image.frombytes(mode, (image.width, image.height), data, "raw", raw_mode, image.width * CHANNELS)
    logger.debug(f"Converted {image!r} to Pillow {mode} image")
    return pil_img


def save_as(image: BmpImage, path: str, format: str = "PNG") -> None:
    """Save through Pillow in any format it supports (PNG by default)."""
    to_pil_image(image).save(path, format=format)
