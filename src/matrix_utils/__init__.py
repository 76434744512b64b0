"""
Utilities package - shared helpers for the pixel matrix packages
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter, NullLogger

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'NullLogger',
]
