"""Hash algorithms and the bit generators that work on resized luminance values."""

from __future__ import annotations

from enum import Enum
from itertools import chain, pairwise
from typing import Iterable, Iterator, Sequence

import numpy as np


class HashAlg(Enum):
    """Available hash algorithms."""

    MEAN = "Mean"
    GRADIENT = "Gradient"
    VERT_GRADIENT = "VertGradient"
    DOUBLE_GRADIENT = "DoubleGradient"
    BLOCKHASH = "Blockhash"

    def round_hash_size(self, width: int, height: int) -> tuple[int, int]:
        """Round the hash size up to what this algorithm needs."""
        if self is HashAlg.DOUBLE_GRADIENT:
            return next_multiple_of_2(width), next_multiple_of_2(height)
        if self is HashAlg.BLOCKHASH:
            return next_multiple_of_4(width), next_multiple_of_4(height)
        return width, height

    def resize_dimensions(self, width: int, height: int) -> tuple[int, int]:
        """Size the image is scaled to before hashing into ``width x height`` bits."""
        if self is HashAlg.MEAN:
            return width, height
        if self is HashAlg.GRADIENT:
            return width + 1, height
        if self is HashAlg.VERT_GRADIENT:
            return width, height + 1
        if self is HashAlg.DOUBLE_GRADIENT:
            return width // 2 + 1, height // 2 + 1
        raise ValueError("Blockhash algorithm does not resize")


def next_multiple_of_2(x: int) -> int:
    """Smallest multiple of 2 not below ``x``."""
    return (x + 1) & ~1


def next_multiple_of_4(x: int) -> int:
    """Smallest multiple of 4 not below ``x``."""
    return (x + 3) & ~3


def mean_hash_u8(luma: Sequence[int]) -> Iterator[bool]:
    """One bit per value: set where it is at least the truncated integer mean."""
    values = list(luma)
    mean = sum(values) // len(values)
    return (value >= mean for value in values)


def mean_hash_f32(luma: Sequence[float]) -> Iterator[bool]:
    """One bit per value: set where it is at least the single-precision mean."""
    values = np.asarray(luma, dtype=np.float32)
    total = np.add.accumulate(values, dtype=np.float32)[-1]
    mean = total / np.float32(values.size)
    return (bool(flag) for flag in values >= mean)


def _gradient(values: Iterable) -> Iterator[bool]:
    return (last < this for last, this in pairwise(values))


def _check_rowstride(rowstride: int) -> None:
    if rowstride <= 0:
        raise ValueError(f"rowstride must be positive: {rowstride}")


def gradient_hash(luma: Sequence, rowstride: int) -> Iterator[bool]:
    """Compare neighbours along each row; a bit is set where the value rises."""
    _check_rowstride(rowstride)
    return chain.from_iterable(
        _gradient(luma[start:start + rowstride]) for start in range(0, len(luma), rowstride)
    )


def vert_gradient_hash(luma: Sequence, rowstride: int) -> Iterator[bool]:
    """Compare neighbours down each column; a bit is set where the value rises."""
    _check_rowstride(rowstride)
    return chain.from_iterable(_gradient(luma[col::rowstride]) for col in range(rowstride))


def double_gradient_hash(luma: Sequence, rowstride: int) -> Iterator[bool]:
    """Row gradient bits followed by column gradient bits."""
    return chain(gradient_hash(luma, rowstride), vert_gradient_hash(luma, rowstride))