"""
Unit tests for fonts, the Writer and image conversion
"""

import pytest
from PIL import Image

from matrix_system import PixelMatrix, Pixel, RED, GREEN, BLUE, WHITE, BLACK, RowOutOfBoundsError
from writer_system import Font, FONT_5X7, Writer, expand_alias, image_to_bitmap

# 'I' in the 5x7 font: serifs on rows 0 and 6, full bar in the middle column
GLYPH_I = [0x00, 0x41, 0x7F, 0x41, 0x00, 0x00]


def test_expand_alias():
    aliases = {"heart": "<3", "smile": ":)"}
    assert expand_alias("I {heart} U", aliases) == "I <3 U"
    assert expand_alias("{smile}{smile}", aliases) == ":):)"
    assert expand_alias("{unknown}", aliases) == "{unknown}"
    assert expand_alias("{{heart}", aliases) == "{heart}"


def test_builtin_font_glyphs():
    assert FONT_5X7.height == 7
    assert FONT_5X7.glyph("I") == GLYPH_I
    assert FONT_5X7.glyph("A") == [0x7E, 0x11, 0x11, 0x11, 0x7E, 0x00]
    assert FONT_5X7.glyph(" ") == [0] * 6
    assert len(FONT_5X7.bitmap) == 95


def test_unknown_character_uses_fallback():
    assert FONT_5X7.glyph("é") == FONT_5X7.glyph("?")
    font = Font(height=3, bitmap={"x": [0b101]})
    assert font.glyph("y") == []


def test_text_width():
    assert FONT_5X7.text_width("AB") == 12
    assert FONT_5X7.text_width("{smile}") == 12
    assert FONT_5X7.text_width("") == 0


def test_font_rejects_tall_columns():
    with pytest.raises(ValueError):
        Font(height=3, bitmap={"x": [0b1000]})
    with pytest.raises(ValueError):
        Font(height=0, bitmap={})


def test_write_text():
    m = PixelMatrix(8)
    w = Writer(m)
    assert w.write_text("I", FONT_5X7, WHITE, BLUE) == 6
    assert w.pos == 6
    assert m.columns == 6

    assert [m.get_pixel(2, y) for y in range(7)] == [WHITE] * 7
    assert [m.get_pixel(0, y) for y in range(7)] == [BLUE] * 7
    assert m.get_pixel(1, 0) == WHITE
    assert m.get_pixel(1, 3) == BLUE
    # rows below the font are not touched
    assert m.get_pixel(2, 7) == BLACK


def test_write_text_advances_cursor():
    m = PixelMatrix(7)
    w = Writer(m)
    w.write_text("I", FONT_5X7, WHITE, BLACK)
    w.write_text("I", FONT_5X7, RED, BLACK)
    assert w.pos == 12
    assert m.get_pixel(8, 3) == RED
    assert m.get_pixel(2, 3) == WHITE


def test_write_text_alpha_only_draws_lit_bits():
    m = PixelMatrix(7)
    Writer(m).spacer(6, RED)

    w = Writer(m)
    assert w.write_text_alpha("I", FONT_5X7, WHITE, 0) == 6
    assert m.get_pixel(2, 3) == WHITE
    assert m.get_pixel(0, 3) == RED
    assert m.get_pixel(1, 3) == RED


def test_write_text_alpha_blends():
    m = PixelMatrix(7)
    Writer(m).write_text_alpha("I", FONT_5X7, WHITE, 128)
    assert m.get_pixel(2, 0) == Pixel(127, 127, 127)
    # the last lit column of "I" is column 3; blank columns do not grow the matrix
    assert m.columns == 4


def test_font_taller_than_matrix():
    m = PixelMatrix(4)
    with pytest.raises(RowOutOfBoundsError):
        Writer(m).write_text("I", FONT_5X7, WHITE, BLACK)


def test_write_bitmap():
    m = PixelMatrix(4)
    w = Writer(m)
    w.spacer(1, GREEN)
    assert w.write_bitmap([[RED, GREEN], [BLUE]]) == 3
    assert m.get_pixel(1, 0) == RED
    assert m.get_pixel(2, 0) == GREEN
    assert m.get_pixel(1, 1) == BLUE
    assert m.get_pixel(2, 1) == BLACK


def test_spacer():
    m = PixelMatrix(3)
    w = Writer(m)
    assert w.spacer(2, GREEN) == 2
    assert m.columns == 2
    assert all(m.get_pixel(x, y) == GREEN for x in range(2) for y in range(3))
    assert w.spacer(0, RED) == 2
    with pytest.raises(ValueError):
        w.spacer(-1, RED)


def test_write_image():
    img = Image.new("RGB", (2, 3), (10, 20, 30))
    img.putpixel((1, 2), (1, 2, 3))

    m = PixelMatrix(3)
    w = Writer(m)
    assert w.write_image(img) == 2
    assert m.get_pixel(0, 0) == Pixel(10, 20, 30)
    assert m.get_pixel(1, 2) == Pixel(1, 2, 3)


def test_image_transparency_uses_background():
    img = Image.new("RGBA", (1, 1), (255, 0, 0, 0))
    assert image_to_bitmap(img, background=BLUE) == [[BLUE]]


def test_image_resized_to_height():
    img = Image.new("RGB", (4, 2), (255, 255, 255))
    bitmap = image_to_bitmap(img, height=4)
    assert len(bitmap) == 4
    assert all(len(row) == 8 for row in bitmap)
