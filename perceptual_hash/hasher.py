"""Configuration of perceptual hashing and the hasher built from it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

import numpy as np
from PIL import Image

from perceptual_hash.algorithms import (
    HashAlg,
    double_gradient_hash,
    gradient_hash,
    mean_hash_f32,
    mean_hash_u8,
    vert_gradient_hash,
)
from perceptual_hash.bits import bools_to_bytes
from perceptual_hash.blockhash import blockhash
from perceptual_hash.dct import DctContext
from perceptual_hash.imagehash import ImageHash
from perceptual_hash.images import FilterType, blur, diff_images, to_grayscale

_DEFAULT_SIGMAS = (5.0, 10.0)


@dataclass(frozen=True)
class HasherConfig:
    """Builder for a :class:`Hasher`; every setter returns a new config.

    ``max_bytes`` gives hashes a fixed capacity in bytes; ``None`` means any size.
    """

    width: int = 8
    height: int = 8
    gauss_sigmas: tuple[float, float] | None = None
    filter_type: FilterType = FilterType.LANCZOS3
    use_dct: bool = False
    algorithm: HashAlg = HashAlg.GRADIENT
    max_bytes: int | None = None

    def hash_size(self, width: int, height: int) -> HasherConfig:
        """Set the hash dimensions in bits; some algorithms round them up."""
        return replace(self, width=width, height=height)

    def resize_filter(self, filter_type: FilterType) -> HasherConfig:
        """Set the filter used to shrink images; Blockhash does not resize."""
        return replace(self, filter_type=filter_type)

    def hash_alg(self, algorithm: HashAlg) -> HasherConfig:
        """Set the hash algorithm."""
        return replace(self, algorithm=algorithm)

    def preproc_dct(self) -> HasherConfig:
        """Hash the low frequencies of a DCT instead of the pixels; ignored by Blockhash."""
        return replace(self, use_dct=True)

    def preproc_diff_gauss(self) -> HasherConfig:
        """Enable Difference of Gaussians preprocessing with sigmas 5 and 10."""
        return self.preproc_diff_gauss_sigmas(*_DEFAULT_SIGMAS)

    def preproc_diff_gauss_sigmas(self, sigma_a: float, sigma_b: float) -> HasherConfig:
        """Enable Difference of Gaussians preprocessing with the given sigmas."""
        return replace(self, gauss_sigmas=(sigma_a, sigma_b))

    def to_hasher(self) -> Hasher:
        """Build a hasher; raises ``ValueError`` if the hash cannot fit ``max_bytes``."""
        width, height = self.algorithm.round_hash_size(self.width, self.height)
        if self.max_bytes is not None and width * height > self.max_bytes * 8:
            raise ValueError(f"hash size too large for container: {width} x {height}")

        dct = None
        if self.use_dct and self.algorithm is not HashAlg.BLOCKHASH:
            dct = DctContext(*self.algorithm.resize_dimensions(width, height))

        return Hasher(
            algorithm=self.algorithm,
            width=width,
            height=height,
            gauss_sigmas=self.gauss_sigmas,
            filter_type=self.filter_type,
            dct=dct,
            max_bytes=self.max_bytes,
        )


@dataclass(frozen=True)
class Hasher:
    """Computes hashes of images; build one with :meth:`HasherConfig.to_hasher`."""

    algorithm: HashAlg
    width: int
    height: int
    gauss_sigmas: tuple[float, float] | None
    filter_type: FilterType
    dct: DctContext | None
    max_bytes: int | None

    def hash_image(self, image: Image.Image) -> ImageHash:
        """Hash ``image`` with the configured options."""
        image = self._gauss_preproc(image)

        if self.algorithm is HashAlg.BLOCKHASH:
            raw = blockhash(image, self.width, self.height)
        else:
            grayscale = to_grayscale(image)
            resize_width, resize_height = self.algorithm.resize_dimensions(
                self.width, self.height
            )
            values, floats = self._hash_values(grayscale, resize_width, resize_height)
            raw = bools_to_bytes(self._bits(values, floats, resize_width))

        return ImageHash.from_bytes(raw, self.max_bytes)

    def _gauss_preproc(self, image: Image.Image) -> Image.Image:
        if self.gauss_sigmas is None:
            return image
        sigma_a, sigma_b = self.gauss_sigmas
        return diff_images(blur(image, sigma_a), blur(image, sigma_b))

    def _resize(self, image: Image.Image, width: int, height: int) -> list[int]:
        resized = image.resize((width, height), resample=self.filter_type.resampling())
        return np.asarray(resized, dtype=np.uint8).ravel().tolist()

    def _hash_values(
        self, grayscale: Image.Image, width: int, height: int
    ) -> tuple[list, bool]:
        if self.dct is None:
            return self._resize(grayscale, width, height), False
        pixels = self._resize(grayscale, self.dct.width, self.dct.height)
        transformed = self.dct.dct_2d([float(value) for value in pixels])
        return self.dct.crop_2d(transformed), True

    def _bits(self, values: list, floats: bool, rowstride: int) -> Iterator[bool]:
        if self.algorithm is HashAlg.MEAN:
            return mean_hash_f32(values) if floats else mean_hash_u8(values)
        if self.algorithm is HashAlg.GRADIENT:
            return gradient_hash(values, rowstride)
        if self.algorithm is HashAlg.VERT_GRADIENT:
            return vert_gradient_hash(values, rowstride)
        return double_gradient_hash(values, rowstride)