"""
Pixel - packed RGB color

Colors are plain integers laid out as 0x00RRGGBB. Pixel extends int, so a
Pixel can be stored in the matrix buffer, compared with raw ints and handed to
LED libraries without conversion, while still exposing its components.
"""
from typing import Optional, Tuple

from .errors import OutOfRangeError


def _check_component(name: str, value: int) -> None:
    if not isinstance(value, int):
        raise TypeError(f"{name} component must be an int, got {type(value).__name__}")
    if value < 0 or value > 255:
        raise OutOfRangeError(name, value)


class Pixel(int):
    """Packed RGB color that IS an int

    Usage:
        pixel = Pixel(255, 0, 0)          # red, components validated
        pixel = Pixel(0xFF0000)           # red, from a packed value
        print(pixel.r, pixel.g, pixel.b)
        matrix.set_pixel(0, 0, pixel)
    """

    def __new__(cls, r: int, g: Optional[int] = None, b: Optional[int] = None) -> 'Pixel':
        """Create a pixel from three components or from one packed value

        Args:
            r: Red component (0-255) OR a packed color
            g: Green component (0-255) OR None if r is packed
            b: Blue component (0-255) OR None if r is packed

        Raises:
            OutOfRangeError: If a component is outside 0-255
            ValueError: If only one of g/b is given
        """
        if g is None and b is None:
            # Bits above 23 are not part of the color
            return int.__new__(cls, int(r) & 0xFFFFFF)
        if g is None or b is None:
            raise ValueError("Must provide either just a packed value or all three RGB values")
        _check_component("red", r)
        _check_component("green", g)
        _check_component("blue", b)
        return int.__new__(cls, (r << 16) | (g << 8) | b)

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & 0xFF

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def hex(self) -> str:
        """Color as 'RRGGBB'"""
        return f"{int(self):06X}"

    @classmethod
    def from_hex(cls, text: str) -> 'Pixel':
        """Parse 'RRGGBB' or '#RRGGBB'"""
        digits = text[1:] if text.startswith('#') else text
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {text!r}")
        return cls(int(digits, 16))

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"


def encode(r: int, g: int, b: int) -> Pixel:
    """Pack three 0-255 components into a color"""
    return Pixel(r, g, b)


def decode(color: int) -> Tuple[int, int, int]:
    """Unpack a color into (r, g, b); bits above 23 are ignored"""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


RED = Pixel(255, 0, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)
WHITE = Pixel(255, 255, 255)
BLACK = Pixel(0, 0, 0)
