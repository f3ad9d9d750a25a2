"""Two-dimensional type-II discrete cosine transform over packed luminance values."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence, TypeVar

import numpy as np

SIZE_MULTIPLIER = 2

T = TypeVar("T")


@lru_cache(maxsize=None)
def _dct2_matrix(size: int) -> np.ndarray:
    """Unnormalised DCT-II coefficients: ``M[k, n] = cos(pi * (n + 0.5) * k / size)``."""
    freqs = np.arange(size, dtype=np.float64).reshape(-1, 1)
    samples = np.arange(size, dtype=np.float64)
    return np.cos(np.pi * (samples + 0.5) * freqs / size)


class DctContext:
    """Precomputed DCT for images of ``width * 2 x height * 2`` pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"DCT dimensions must be positive: {width} x {height}")
        self.width = width * SIZE_MULTIPLIER
        self.height = height * SIZE_MULTIPLIER
        self._row_matrix = _dct2_matrix(self.width)
        self._col_matrix = _dct2_matrix(self.height)

    def __repr__(self) -> str:
        return f"DctContext(width={self.width}, height={self.height})"

    def dct_2d(self, values: Sequence[float]) -> list[float]:
        """Transform row-major values of ``width x height`` into DCT amplitudes."""
        data = np.asarray(values, dtype=np.float64)
        expected = self.width * self.height
        if data.size != expected:
            raise ValueError(f"expected {expected} values, found {data.size}")
        grid = data.reshape(self.height, self.width)
        rows_done = grid @ self._row_matrix.T
        both_done = self._col_matrix @ rows_done
        return both_done.astype(np.float32).ravel().tolist()

    def crop_2d(self, values: Sequence[T]) -> list[T]:
        """Keep only the low-frequency quarter of a transformed grid."""
        return crop_2d_dct(values, self.width)


def crop_2d_dct(values: Sequence[T], rowstride: int) -> list[T]:
    """Crop a packed 2D grid to its top-left quarter.

    ``rowstride`` is the width of the uncropped grid and must be a positive
    multiple of the size multiplier.
    """
    if rowstride % SIZE_MULTIPLIER != 0:
        raise ValueError(f"rowstride must be a multiple of {SIZE_MULTIPLIER}: {rowstride}")
    new_rowstride = rowstride // SIZE_MULTIPLIER
    if new_rowstride <= 0:
        raise ValueError(f"rowstride cannot be cropped: {rowstride}")

    items = list(values)
    kept_rows = len(items) // (rowstride * SIZE_MULTIPLIER) + 1
    cropped = [
        value
        for row in range(kept_rows)
        for value in items[row * rowstride: row * rowstride + new_rowstride]
    ]
    return cropped[: len(items) // (SIZE_MULTIPLIER * SIZE_MULTIPLIER)]