"""
Matrix System - pixel matrix for addressable LED panels

Components:

- Pixel: packed RGB color class that extends int
- PixelMatrix: fixed-row, growable-column grid of colors
- interleave / stripe_to_bytes: serpentine export for folded LED strips
- MatrixConfig: matrix shape and panel wiring parity
- to_json / from_json: JSON form of a matrix

Usage:
    from matrix_system import PixelMatrix, concat, WHITE, RED

    matrix = PixelMatrix(8)
    matrix.set_pixel(0, 0, WHITE)
    matrix.set_pixel_alpha(0, 0, RED, 128)
    banner = concat(matrix, matrix.slice(0, 1))
    even, odd = banner.interleaved_stripes()
    payload = stripe_to_bytes(even)
"""

from .errors import (
    MatrixError,
    OutOfRangeError,
    RowOutOfBoundsError,
    ColumnOutOfBoundsError,
    ColumnNegativeError,
    RowMismatchError,
    RangeOutOfBoundsError,
    CorruptStateError,
    InvalidRowsError,
    MatrixFormatError,
)
from .pixel import Pixel, encode, decode, RED, GREEN, BLUE, WHITE, BLACK
from .stripes import interleave, stripe_to_bytes
from .pixel_matrix import PixelMatrix, concat
from .config import MatrixConfig, select_stripe
from .serialization import to_dict, from_dict, to_json, from_json

__all__ = [
    'MatrixError',
    'OutOfRangeError',
    'RowOutOfBoundsError',
    'ColumnOutOfBoundsError',
    'ColumnNegativeError',
    'RowMismatchError',
    'RangeOutOfBoundsError',
    'CorruptStateError',
    'InvalidRowsError',
    'MatrixFormatError',
    'Pixel',
    'encode',
    'decode',
    'RED',
    'GREEN',
    'BLUE',
    'WHITE',
    'BLACK',
    'interleave',
    'stripe_to_bytes',
    'PixelMatrix',
    'concat',
    'MatrixConfig',
    'select_stripe',
    'to_dict',
    'from_dict',
    'to_json',
    'from_json',
]

__version__ = '1.0.0'
