import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from matrix_system import PixelMatrix, WHITE, RED


@pytest.fixture
def empty_matrix():
    return PixelMatrix(8, 0)


@pytest.fixture
def slice_matrix():
    """8x10 matrix with White, Red, Red, White on row 4, columns 4..7"""
    m = PixelMatrix(8, 10)
    m.set_pixel(4, 4, WHITE)
    m.set_pixel(5, 4, RED)
    m.set_pixel(6, 4, RED)
    m.set_pixel(7, 4, WHITE)
    return m


@pytest.fixture
def numbered_matrix():
    """3 rows x 2 columns holding 1..6 in column-major order"""
    m = PixelMatrix(3, 2)
    for i in range(6):
        m.set_pixel(i // 3, i % 3, i + 1)
    return m
