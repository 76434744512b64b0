"""
JSON form of a pixel matrix: {"rows": 8, "bitmap": [0, 16711680, ...]}

`bitmap` is the column-major buffer as plain integers.
"""
import json
from typing import Any, Dict

from .errors import MatrixFormatError
from .pixel_matrix import PixelMatrix


def to_dict(matrix: PixelMatrix) -> Dict[str, Any]:
    return {"rows": matrix.rows, "bitmap": [int(c) for c in matrix.bitmap]}


def from_dict(data: Dict[str, Any], logger=None) -> PixelMatrix:
    """
    Rebuild a matrix from its dict form

    Raises:
        MatrixFormatError: If keys are missing, rows is not positive, the
            bitmap holds non-colors or its length is not a multiple of rows
    """
    if not isinstance(data, dict):
        raise MatrixFormatError(f"expected an object, got {type(data).__name__}")
    if "rows" not in data or "bitmap" not in data:
        raise MatrixFormatError("'rows' and 'bitmap' are required")

    rows = data["rows"]
    bitmap = data["bitmap"]
    if not isinstance(rows, int) or isinstance(rows, bool) or rows <= 0:
        raise MatrixFormatError(f"rows must be a positive integer, got {rows!r}")
    if not isinstance(bitmap, list):
        raise MatrixFormatError("bitmap must be a list")
    if len(bitmap) % rows != 0:
        raise MatrixFormatError(f"bitmap length {len(bitmap)} is not a multiple of {rows}")
    for index, color in enumerate(bitmap):
        if not isinstance(color, int) or isinstance(color, bool) or not 0 <= color <= 0xFFFFFF:
            raise MatrixFormatError(f"bitmap[{index}] is not a 24-bit color: {color!r}")

    return PixelMatrix._from_bitmap(rows, list(bitmap), logger)


def to_json(matrix: PixelMatrix, indent=None) -> str:
    return json.dumps(to_dict(matrix), indent=indent)


def from_json(text: str, logger=None) -> PixelMatrix:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MatrixFormatError(f"not valid JSON ({e.msg})") from e
    return from_dict(data, logger)
