"""
Unit tests for the Pixel color codec
"""

import pytest

from matrix_system import Pixel, encode, decode, OutOfRangeError, RED, GREEN, BLUE, WHITE, BLACK


def test_encode_decode_round_trip():
    for rgb in [(0, 0, 0), (255, 255, 255), (1, 2, 3), (255, 0, 128), (17, 200, 99)]:
        assert decode(encode(*rgb)) == rgb


def test_encode_packs_channels():
    assert encode(0x12, 0x34, 0x56) == 0x123456
    assert encode(1, 2, 3).rgb == (1, 2, 3)


@pytest.mark.parametrize("rgb, channel", [
    ((256, 0, 0), "red"),
    ((0, -1, 0), "green"),
    ((0, 0, 300), "blue"),
])
def test_encode_rejects_out_of_range(rgb, channel):
    with pytest.raises(OutOfRangeError) as exc:
        encode(*rgb)
    assert exc.value.code == "OUT_OF_RANGE"
    assert exc.value.details["name"] == channel
    assert isinstance(exc.value, ValueError)


def test_encode_rejects_non_int():
    with pytest.raises(TypeError):
        Pixel(1.5, 0, 0)


def test_decode_ignores_high_bits():
    assert decode(0xFF123456) == (0x12, 0x34, 0x56)


def test_packed_value_is_masked():
    assert Pixel(0x1FF0000) == 0xFF0000


def test_partial_components_rejected():
    with pytest.raises(ValueError):
        Pixel(1, 2)


def test_named_constants():
    assert RED == 0xFF0000
    assert GREEN == 0x00FF00
    assert BLUE == 0x0000FF
    assert WHITE == 0xFFFFFF
    assert BLACK == 0
    assert isinstance(RED, int)


def test_components():
    p = Pixel(10, 20, 30)
    assert (p.r, p.g, p.b) == (10, 20, 30)
    assert repr(p) == "Pixel(r=10, g=20, b=30)"


def test_hex():
    assert Pixel.from_hex("#FF4500") == Pixel(255, 69, 0)
    assert Pixel.from_hex("00ff00") == GREEN
    assert Pixel(255, 69, 0).hex() == "FF4500"
    with pytest.raises(ValueError):
        Pixel.from_hex("FFF")
