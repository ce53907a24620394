from typing import List

import numpy as np

from models.pixel import Pixel


class BinaryImage:
    """
    Read-only two-class view of a grayscale image.

    A sample is classified as *background* (the traversable class the
    scanner seeds from) exactly when its intensity equals 0. Every other
    intensity is a *stroke* sample. This is an equality test, not a
    threshold.

    Notes:
      • The classification grid is computed once in __init__ and never
        written afterwards.
      • Neighbour queries return only in-bounds pixels, in the fixed order
        down, right, up, left.
    """

    def __init__(self, gray: np.ndarray):
        gray = np.asarray(gray)
        if gray.size == 0:
            gray = gray.reshape(0, 0)
        if gray.ndim != 2:
            raise ValueError(
                f"BinaryImage expects a 2-D intensity grid, got shape {gray.shape}"
            )

        self._is_background = gray == 0
        self._is_background.setflags(write=False)

    # ------------------------------------------------------------------
    # Extents
    # ------------------------------------------------------------------

    def rows(self) -> int:
        return self._is_background.shape[0]

    def columns(self) -> int:
        # shape is (0, 0) or (0, n); an empty grid has no columns
        if self.rows() == 0:
            return 0
        return self._is_background.shape[1]

    @property
    def shape(self):
        return self.rows(), self.columns()

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_correct(self, row: int, col: int) -> bool:
        """True when (row, col) lies inside the grid."""
        return 0 <= row < self.rows() and 0 <= col < self.columns()

    def is_background(self, row: int, col: int) -> bool:
        """
        Class of the sample at (row, col), fixed at construction time.
        Raises IndexError when the position is outside the grid.
        """
        if not self.is_correct(row, col):
            raise IndexError(
                f"pixel ({row}, {col}) outside image of shape {self.shape}"
            )
        return bool(self._is_background[row, col])

    def is_stroke(self, row: int, col: int) -> bool:
        return not self.is_background(row, col)

    def background_mask(self) -> np.ndarray:
        """Read-only boolean grid, True on background samples."""
        return self._is_background

    # ------------------------------------------------------------------
    # Neighbourhood
    # ------------------------------------------------------------------

    def neighbours(self, row: int, col: int) -> List[Pixel]:
        """
        4-connected neighbours that lie within bounds, ordered:
        (row+1, col), (row, col+1), (row-1, col), (row, col-1).
        """
        result = []
        for r, c in ((row + 1, col), (row, col + 1), (row - 1, col), (row, col - 1)):
            if self.is_correct(r, c):
                result.append(Pixel(r, c))
        return result
