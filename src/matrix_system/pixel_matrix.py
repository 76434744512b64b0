"""
PixelMatrix - growable grid of packed colors for LED panels

The row count is fixed at creation (the height of the panel); the column
count grows on demand as pixels are written further to the right, which is
how scrolling text is built up before being shown.

Storage is a single column-major list: column x, row y lives at index
x * rows + y. A whole column is therefore contiguous, matching the order in
which a folded LED strip runs through the panel.
"""
from typing import Iterator, List, Tuple, Union

from .errors import (
    ColumnNegativeError,
    ColumnOutOfBoundsError,
    CorruptStateError,
    InvalidRowsError,
    OutOfRangeError,
    RangeOutOfBoundsError,
    RowMismatchError,
    RowOutOfBoundsError,
)
from .pixel import BLACK, Pixel, decode
from .stripes import interleave, stripe_to_bytes

_MAX_COLOR = 0xFFFFFF


def _check_color(color: int) -> None:
    if not isinstance(color, int):
        raise TypeError(f"color must be an int, got {type(color).__name__}")
    if color < 0 or color > _MAX_COLOR:
        raise OutOfRangeError("color", color, 0, _MAX_COLOR)


class PixelMatrix:
    """Pixel matrix with a fixed number of rows and growable columns

    Usage:
        matrix = PixelMatrix(8)                 # 8 rows, 0 columns
        matrix.set_pixel(4, 4, WHITE)           # grows to 5 columns
        matrix.get_pixel(2, 2)                  # BLACK, never written
        even, odd = matrix.interleaved_stripes()
        payload = stripe_to_bytes(even)
    """

    def __init__(self, rows: int, columns: int = 0, logger=None):
        """
        Args:
            rows: Number of rows, a positive int
            columns: Initial number of columns (may be 0)
            logger: Optional ClassLogger for growth/composition messages

        Raises:
            InvalidRowsError: If rows is not a positive int
            ColumnNegativeError: If columns is negative
        """
        if not isinstance(rows, int) or isinstance(rows, bool) or rows <= 0:
            raise InvalidRowsError(rows)
        if columns < 0:
            raise ColumnNegativeError(columns)
        self._rows = rows
        self._columns = columns
        self._bitmap: List[int] = [0] * (rows * columns)
        self.logger = logger

    @classmethod
    def _from_bitmap(cls, rows: int, bitmap: List[int], logger=None) -> 'PixelMatrix':
        """Wrap an already validated column-major list (taken, not copied)"""
        matrix = cls(rows, 0, logger)
        matrix._bitmap = bitmap
        matrix._columns = len(bitmap) // rows
        return matrix

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        """Current number of columns

        Raises:
            CorruptStateError: If the buffer no longer matches rows x columns
        """
        length = len(self._bitmap)
        if length % self._rows != 0 or length // self._rows != self._columns:
            raise CorruptStateError(length, self._rows, self._columns)
        return self._columns

    @property
    def bitmap(self) -> List[int]:
        """Copy of the column-major buffer"""
        return list(self._bitmap)

    def __len__(self) -> int:
        return len(self._bitmap)

    # --- Addressing ---

    def _check_row(self, y: int) -> None:
        if y < 0 or y >= self._rows:
            raise RowOutOfBoundsError(y, self._rows)

    def ensure_capacity(self, x: int, y: int) -> None:
        """
        Validate (x, y) for a write and grow the matrix so column x exists

        New columns are black. Existing pixels keep their place.

        Raises:
            RowOutOfBoundsError: If y is outside [0, rows)
            ColumnNegativeError: If x is negative
        """
        self._check_row(y)
        if x < 0:
            raise ColumnNegativeError(x)
        columns = self.columns
        if x >= columns:
            # list.extend over-allocates, so column-by-column growth stays amortized
            self._bitmap.extend([0] * ((x + 1 - columns) * self._rows))
            self._columns = x + 1
            if self.logger:
                self.logger.debug(f"Grew matrix from {columns} to {self._columns} columns")

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Paint the pixel at column x, row y, growing the matrix if needed"""
        _check_color(color)
        self.ensure_capacity(x, y)
        self._bitmap[x * self._rows + y] = color

    def set_pixel_alpha(self, x: int, y: int, color: int, alpha: int) -> None:
        """
        Blend `color` into the pixel at column x, row y

        `alpha` weights the pixel already there: 255 keeps it unchanged,
        0 replaces it with `color`. Each channel is
        (old * alpha + new * (255 - alpha)) // 255.

        Raises:
            OutOfRangeError: If alpha is outside 0-255 or color is not 24-bit
        """
        _check_color(color)
        if not isinstance(alpha, int) or alpha < 0 or alpha > 255:
            raise OutOfRangeError("alpha", alpha)
        self.ensure_capacity(x, y)
        index = x * self._rows + y
        r0, g0, b0 = decode(self._bitmap[index])
        r1, g1, b1 = decode(color)
        inverse = 255 - alpha
        r = (r0 * alpha + r1 * inverse) // 255
        g = (g0 * alpha + g1 * inverse) // 255
        b = (b0 * alpha + b1 * inverse) // 255
        self._bitmap[index] = Pixel(r, g, b)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """
        Color of the pixel at column x, row y (never grows the matrix)

        Raises:
            RowOutOfBoundsError: If y is outside [0, rows)
            ColumnOutOfBoundsError: If x is outside [0, columns)
        """
        self._check_row(y)
        columns = self.columns
        if x < 0 or x >= columns:
            raise ColumnOutOfBoundsError(x, columns)
        return Pixel(self._bitmap[x * self._rows + y])

    def fill(self, color: int) -> None:
        """Set every existing pixel to `color`"""
        _check_color(color)
        self._bitmap[:] = [color] * len(self._bitmap)

    def clear(self) -> None:
        self.fill(BLACK)

    def __getitem__(self, key: Union[Tuple[int, int], slice]) -> Union[Pixel, 'PixelMatrix']:
        # matrix[x, y] -> pixel, matrix[low:high] -> column slice
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("Column slices do not support a step")
            low = 0 if key.start is None else key.start
            high = self.columns if key.stop is None else key.stop
            return self.slice(low, high)
        x, y = key
        return self.get_pixel(x, y)

    def __setitem__(self, key: Tuple[int, int], color: int) -> None:
        x, y = key
        self.set_pixel(x, y, color)

    def columns_iter(self) -> Iterator[List[Pixel]]:
        """Yield each column top to bottom"""
        rows = self._rows
        for base in range(0, self.columns * rows, rows):
            yield [Pixel(c) for c in self._bitmap[base:base + rows]]

    # --- Composition ---

    def slice(self, low: int, high: int) -> 'PixelMatrix':
        """
        Independent copy of columns [low, high)

        Raises:
            RangeOutOfBoundsError: Unless 0 <= low <= high <= columns
        """
        columns = self.columns
        if low < 0 or high < low or high > columns:
            raise RangeOutOfBoundsError(low, high, columns)
        bitmap = self._bitmap[low * self._rows:high * self._rows]
        return PixelMatrix._from_bitmap(self._rows, bitmap, self.logger)

    def append(self, *others: 'PixelMatrix') -> None:
        """
        Append the columns of `others` after this matrix's columns

        All operands are checked first, so a row mismatch leaves this matrix
        unchanged.

        Raises:
            RowMismatchError: If any operand has a different row count
        """
        for other in others:
            if other.rows != self._rows:
                raise RowMismatchError(self._rows, other.rows)
        # Snapshot first so appending a matrix to itself is well defined
        chunks = [list(other._bitmap) for other in others]
        before = self.columns
        for chunk in chunks:
            self._bitmap.extend(chunk)
        self._columns = len(self._bitmap) // self._rows
        if self.logger and others:
            self.logger.debug(
                f"Appended {len(others)} matrices: {before} -> {self._columns} columns"
            )

    def copy(self) -> 'PixelMatrix':
        return PixelMatrix._from_bitmap(self._rows, list(self._bitmap), self.logger)

    # --- Hardware export ---

    def interleaved_stripes(self) -> Tuple[List[int], List[int]]:
        """
        Serpentine orderings of the matrix for a folded LED strip

        Returns:
            (even, odd): `even` shows correctly when the matrix starts at an
            even column of the panel, `odd` at an odd column
        """
        if self.columns == 0:
            return [], []
        return interleave(self._rows, self._bitmap)

    def to_bytes(self, parity: str = "even") -> bytes:
        """RGB bytes of the `parity` stripe"""
        even, odd = self.interleaved_stripes()
        if parity == "even":
            return stripe_to_bytes(even)
        if parity == "odd":
            return stripe_to_bytes(odd)
        raise ValueError(f"parity must be 'even' or 'odd', got {parity!r}")

    # --- Comparison ---

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelMatrix):
            return NotImplemented
        return self._rows == other._rows and self._bitmap == other._bitmap

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelMatrix(rows={self._rows}, columns={self._columns})"


def concat(first: PixelMatrix, *others: PixelMatrix) -> PixelMatrix:
    """
    New matrix made of `first` followed by `others`; inputs are not modified

    Raises:
        RowMismatchError: If any operand has a different row count than `first`
    """
    result = first.copy()
    result.append(*others)
    return result
