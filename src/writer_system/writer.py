"""
Writer - text and bitmap blitting onto a pixel matrix

The writer keeps a cursor column. Every operation draws starting at the
cursor and moves it right by the width it drew, so consecutive calls lay
text, icons and gaps out side by side; the matrix grows to fit.
"""
from typing import List, Optional, Sequence

from matrix_system.pixel_matrix import PixelMatrix
from .font import Font
from .image_bitmap import image_to_bitmap


class Writer:
    """
    Cursor-based writer on a PixelMatrix

    Usage:
        matrix = PixelMatrix(8)
        writer = Writer(matrix)
        writer.write_text("HI", FONT_5X7, WHITE, BLACK)
        writer.spacer(2, BLACK)
        writer.write_bitmap(icon)
    """

    def __init__(self, matrix: PixelMatrix, logger=None):
        self.matrix = matrix
        self.pos = 0  # cursor column, never decreases
        self.logger = logger

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.debug(message)

    def write_text(self, text: str, font: Font, color: int, bg_color: int) -> int:
        """
        Draw `text`, painting lit bits with `color` and the rest with `bg_color`

        Returns:
            New cursor position
        """
        start = self.pos
        for char in font.expand(text):
            for column in font.glyph(char):
                for k in range(font.height):
                    if column & (1 << k):
                        self.matrix.set_pixel(self.pos, k, color)
                    else:
                        self.matrix.set_pixel(self.pos, k, bg_color)
                self.pos += 1
        self._log(f"Text {text!r} at columns {start}..{self.pos}")
        return self.pos

    def write_text_alpha(self, text: str, font: Font, color: int, alpha: int) -> int:
        """
        Blend `text` over what is already in the matrix

        Only lit bits are drawn; alpha follows PixelMatrix.set_pixel_alpha
        (255 keeps the existing pixel, 0 draws `color` fully).

        Returns:
            New cursor position
        """
        start = self.pos
        for char in font.expand(text):
            for column in font.glyph(char):
                for k in range(font.height):
                    if column & (1 << k):
                        self.matrix.set_pixel_alpha(self.pos, k, color, alpha)
                self.pos += 1
        self._log(f"Text {text!r} (alpha {alpha}) at columns {start}..{self.pos}")
        return self.pos

    def write_bitmap(self, bitmap: Sequence[Sequence[int]]) -> int:
        """
        Draw a row-major bitmap (bitmap[y][x]) at the cursor

        Rows may have different lengths; the cursor advances by the widest.

        Returns:
            New cursor position
        """
        width = 0
        for y, row in enumerate(bitmap):
            width = max(width, len(row))
            for x, color in enumerate(row):
                self.matrix.set_pixel(self.pos + x, y, color)
        self._log(f"Bitmap {width}x{len(bitmap)} at column {self.pos}")
        self.pos += width
        return self.pos

    def write_image(self, image, height: Optional[int] = None, background: int = 0) -> int:
        """Draw a decoded Pillow image, see image_to_bitmap()"""
        bitmap: List[List[int]] = image_to_bitmap(image, height, background)
        return self.write_bitmap(bitmap)

    def spacer(self, width: int, color: int) -> int:
        """Fill `width` full-height columns with `color`"""
        if width < 0:
            raise ValueError(f"Spacer width must not be negative, got {width}")
        for y in range(self.matrix.rows):
            for x in range(width):
                self.matrix.set_pixel(self.pos + x, y, color)
        self.pos += width
        return self.pos
