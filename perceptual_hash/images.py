"""Image helpers: grayscale, blur, difference and 8-bit pixel iteration."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

import numpy as np
from PIL import Image, ImageFilter

_DIRECT_MODES = {"L", "LA", "RGB", "RGBA"}
_SIXTEEN_BIT_MODES = {"I;16", "I;16L", "I;16B", "I;16N"}


class FilterType(Enum):
    """Resampling filters used when shrinking images."""

    NEAREST = "Nearest"
    TRIANGLE = "Triangle"
    CATMULL_ROM = "CatmullRom"
    GAUSSIAN = "Gaussian"
    LANCZOS3 = "Lanczos3"

    def resampling(self) -> Image.Resampling:
        """The Pillow resampling filter closest to this one."""
        return _RESAMPLING[self]


_RESAMPLING = {
    FilterType.NEAREST: Image.Resampling.NEAREST,
    FilterType.TRIANGLE: Image.Resampling.BILINEAR,
    FilterType.CATMULL_ROM: Image.Resampling.BICUBIC,
    # Pillow has no Gaussian resampler; Hamming is the nearest smooth window.
    FilterType.GAUSSIAN: Image.Resampling.HAMMING,
    FilterType.LANCZOS3: Image.Resampling.LANCZOS,
}


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.mode or (image.mode == "P" and "transparency" in image.info)


def to_grayscale(image: Image.Image) -> Image.Image:
    """Return an 8-bit grayscale image without alpha; grayscale input is returned as is."""
    if image.mode == "L":
        return image
    if image.mode in _SIXTEEN_BIT_MODES:
        return Image.fromarray((np.asarray(image).astype(np.uint32) >> 8).astype(np.uint8), "L")
    return image.convert("L")


def _blurrable(image: Image.Image) -> Image.Image:
    if image.mode in _DIRECT_MODES:
        return image
    return image.convert("RGBA")


def blur(image: Image.Image, sigma: float) -> Image.Image:
    """Gaussian blur with standard deviation ``sigma``; non 8-bit images become RGBA."""
    return _blurrable(image).filter(ImageFilter.GaussianBlur(radius=sigma))


def diff_images(left: Image.Image, right: Image.Image) -> Image.Image:
    """Subtract ``right`` from ``left`` channel by channel, wrapping around at 256."""
    if left.mode != right.mode or left.size != right.size:
        raise ValueError(
            f"cannot diff {left.mode} {left.size} against {right.mode} {right.size}"
        )
    a = np.asarray(left, dtype=np.uint8)
    b = np.asarray(right, dtype=np.uint8)
    return Image.fromarray(a - b, left.mode)


def _pixel_array(image: Image.Image) -> np.ndarray:
    if image.mode in _DIRECT_MODES:
        source = image
    elif image.mode in _SIXTEEN_BIT_MODES:
        return (np.asarray(image).astype(np.uint32) >> 8).astype(np.uint8)[..., np.newaxis]
    elif image.mode in {"1", "I", "F"}:
        source = image.convert("L")
    elif _has_alpha(image):
        source = image.convert("RGBA")
    else:
        source = image.convert("RGB")
    array = np.asarray(source, dtype=np.uint8)
    if array.ndim == 2:
        array = array[..., np.newaxis]
    return array


def iter_pixels8(image: Image.Image) -> Iterator[tuple[int, int, tuple[int, ...]]]:
    """Yield ``(x, y, channels)`` for every pixel in row-major order, channels scaled to 8 bits.

    Where there are 2 or 4 channels the last one is alpha.
    """
    array = _pixel_array(image)
    for y, row in enumerate(array.tolist()):
        for x, channels in enumerate(row):
            yield x, y, tuple(channels)