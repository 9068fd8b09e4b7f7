"""
Drawing operations over a decoded image.

Coordinates follow the pixel accessor: x selects the row, y the column.
Points outside the image are silently clipped.
"""

import logging

from .bmp_codec import BmpImage
from .pixels import Pixel

logger = logging.getLogger(__name__)


class RasterEditor:
    """Mutates a BmpImage's pixels in place."""

    def __init__(self, image: BmpImage):
        self.image = image

    def set_pixel(self, x: int, y: int, color: Pixel) -> bool:
        """
        Write color at row x, column y.

        The point must lie inside 0 <= x < width, 0 <= y < height and also
        inside the buffer (x < height, y < width); anything else is a no-op.

        Returns:
            True if the pixel was written, False if (x, y) was outside
            the image (not an error).
        """
        width, height = self.image.width, self.image.height
        if 0 <= x < width and 0 <= y < height and x < height and y < width:
            self.image.pixels.set(x, y, color)
            return True
        return False

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Pixel) -> int:
        """
        Rasterize the segment (x0, y0)-(x1, y1) with integer Bresenham.

        Both endpoints are plotted. Returns the number of points visited,
        including clipped ones.
        """
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        points = 0

        while True:
            self.set_pixel(x0, y0, color)
            points += 1

            if x0 == x1 and y0 == y1:
                break

            e2 = 2 * err
            if e2 >= dy:
                if x0 == x1:
                    break
                err += dy
                x0 += sx
            if e2 <= dx:
                if y0 == y1:
                    break
                err += dx
                y0 += sy

        return points

    def draw_diagonal_cross(self, x1: int, y1: int, x2: int, y2: int, color: Pixel) -> int:
        """Draw both diagonals of the rectangle with corners (x1, y1) and (x2, y2)."""
        logger.debug(f"Drawing diagonal cross ({x1}, {y1})-({x2}, {y2})")
        return (
            self.draw_line(x1, y1, x2, y2, color)
            + self.draw_line(x1, y2, x2, y1, color)
        )

    def fill(self, color: Pixel) -> None:
        self.image.pixels.fill(color)
