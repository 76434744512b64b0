"""
Matrix errors - one exception type per failure kind

Every error carries a stable `code` and a `details` dict so callers (the CLI,
a transport layer) can decide policy without parsing messages. Each class
also derives from the closest builtin so generic `except IndexError` /
`except ValueError` handlers keep working.
"""
from typing import Optional


class MatrixError(Exception):
    """Base class for pixel matrix errors"""

    code = "MATRIX_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class OutOfRangeError(MatrixError, ValueError):
    """Color component or alpha outside 0..255"""

    code = "OUT_OF_RANGE"

    def __init__(self, name: str, value, low: int = 0, high: int = 255):
        super().__init__(
            f"{name} must be between {low} and {high}, got {value!r}",
            details={"name": name, "value": value, "low": low, "high": high},
        )


class RowOutOfBoundsError(MatrixError, IndexError):
    """Row index outside [0, rows)"""

    code = "ROW_OUT_OF_BOUNDS"

    def __init__(self, y: int, rows: int):
        super().__init__(
            f"y={y} out of bounds for {rows} rows",
            details={"y": y, "rows": rows},
        )


class ColumnOutOfBoundsError(MatrixError, IndexError):
    """Column index outside [0, columns) on a read"""

    code = "COLUMN_OUT_OF_BOUNDS"

    def __init__(self, x: int, columns: int):
        super().__init__(
            f"x={x} out of bounds for {columns} columns",
            details={"x": x, "columns": columns},
        )


class ColumnNegativeError(MatrixError, IndexError):
    """Negative column index (or column count) on a growing write"""

    code = "COLUMN_NEGATIVE"

    def __init__(self, x: int):
        super().__init__(f"x={x} must not be negative", details={"x": x})


class RowMismatchError(MatrixError, ValueError):
    """Composing matrices with different row counts"""

    code = "ROW_MISMATCH"

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"cannot combine a {actual}-row matrix with a {expected}-row matrix",
            details={"expected": expected, "actual": actual},
        )


class RangeOutOfBoundsError(MatrixError, IndexError):
    """Slice bounds outside 0 <= low <= high <= columns"""

    code = "RANGE_OUT_OF_BOUNDS"

    def __init__(self, low: int, high: int, columns: int):
        super().__init__(
            f"slice [{low}:{high}] invalid for {columns} columns",
            details={"low": low, "high": high, "columns": columns},
        )


class CorruptStateError(MatrixError, RuntimeError):
    """Buffer length no longer matches rows * columns"""

    code = "CORRUPT_STATE"

    def __init__(self, length: int, rows: int, columns: int):
        super().__init__(
            f"invalid matrix length {length} for {rows} rows x {columns} columns",
            details={"length": length, "rows": rows, "columns": columns},
        )


class InvalidRowsError(MatrixError, ValueError):
    """Row count that is not a positive integer"""

    code = "INVALID_ROWS"

    def __init__(self, rows):
        super().__init__(
            f"rows must be a positive integer, got {rows!r}",
            details={"rows": rows},
        )


class MatrixFormatError(MatrixError, ValueError):
    """Serialized matrix document that cannot be loaded"""

    code = "MATRIX_FORMAT"

    def __init__(self, reason: str):
        super().__init__(f"invalid matrix document: {reason}", details={"reason": reason})
