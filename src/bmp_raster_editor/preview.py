"""ASCII preview of a decoded image."""

from typing import List

from .bmp_codec import BmpImage

BLACK_CHAR = "@"
WHITE_CHAR = "*"
OTHER_CHAR = " "


def preview(image: BmpImage) -> List[str]:
    """
    Render the image as text, one string per row, top row first.

    Pure black maps to '@', pure white to '*', anything else to a blank.
    """
    lines = []
    for row in image.pixels.rows():
        chars = []
        for pixel in row:
            if pixel.is_black:
                chars.append(BLACK_CHAR)
            elif pixel.is_white:
                chars.append(WHITE_CHAR)
            else:
                chars.append(OTHER_CHAR)
        lines.append("".join(chars))
    return lines
