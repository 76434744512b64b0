"""
Writer System - text and bitmaps on a pixel matrix

- Font / FONT_5X7: column-bitmap fonts with {alias} expansion
- Writer: cursor-based blitting of text, bitmaps, images and spacers
- image_to_bitmap: Pillow image to row-major color bitmap
"""

from .font import Font, FONT_5X7, expand_alias
from .image_bitmap import image_to_bitmap
from .writer import Writer

__all__ = ['Font', 'FONT_5X7', 'expand_alias', 'image_to_bitmap', 'Writer']
