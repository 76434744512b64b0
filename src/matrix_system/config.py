"""
Matrix configuration
"""

from dataclasses import dataclass
from typing import List, Tuple

from .errors import ColumnNegativeError, InvalidRowsError
from .pixel_matrix import PixelMatrix

STRIPE_PARITIES = ("even", "odd")


@dataclass
class MatrixConfig:
    """Shape of a matrix and the wiring parity of the panel it is shown on"""
    rows: int = 8
    initial_columns: int = 0
    stripe_parity: str = "even"  # parity of the panel column the matrix starts at

    def validate(self) -> None:
        """
        Raises:
            InvalidRowsError: If rows is not a positive int
            ColumnNegativeError: If initial_columns is negative
            ValueError: If stripe_parity is not 'even' or 'odd'
        """
        if not isinstance(self.rows, int) or isinstance(self.rows, bool) or self.rows <= 0:
            raise InvalidRowsError(self.rows)
        if self.initial_columns < 0:
            raise ColumnNegativeError(self.initial_columns)
        if self.stripe_parity not in STRIPE_PARITIES:
            raise ValueError(
                f"stripe_parity must be one of {STRIPE_PARITIES}, got {self.stripe_parity!r}"
            )

    def create_matrix(self, logger=None) -> PixelMatrix:
        self.validate()
        return PixelMatrix(self.rows, self.initial_columns, logger=logger)

    def stripe(self, matrix: PixelMatrix) -> List[int]:
        """The stripe of `matrix` matching this panel's parity"""
        return select_stripe(matrix, self.stripe_parity)


def select_stripe(matrix: PixelMatrix, parity: str) -> List[int]:
    stripes: Tuple[List[int], List[int]] = matrix.interleaved_stripes()
    if parity not in STRIPE_PARITIES:
        raise ValueError(f"parity must be one of {STRIPE_PARITIES}, got {parity!r}")
    return stripes[STRIPE_PARITIES.index(parity)]
