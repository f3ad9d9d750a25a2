"""The result of hashing an image: packed hash bits with distance and Base64 helpers."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from perceptual_hash.bits import hamming


class InvalidBytesError(ValueError):
    """Hash bytes could not be turned into an :class:`ImageHash`.

    ``expected`` and ``found`` are set when the data was too long for the
    container. They are ``None`` when the input was not valid Base64.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: int | None = None,
        found: int | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.found = found


@dataclass(frozen=True)
class ImageHash:
    """Packed bits of a perceptual hash; the image itself is not retained."""

    data: bytes

    def as_bytes(self) -> bytes:
        """The raw bytes of this hash."""
        return self.data

    @classmethod
    def from_bytes(cls, data: bytes, max_bytes: int | None = None) -> ImageHash:
        """Build a hash from raw bytes.

        With ``max_bytes`` the hash has a fixed capacity. Longer data is
        rejected, and shorter data is zero-filled up to that capacity.
        """
        raw = bytes(data)
        if max_bytes is None:
            return cls(raw)
        if len(raw) > max_bytes:
            raise InvalidBytesError(
                f"hash bytes have the wrong length: expected {max_bytes}, found {len(raw)}",
                expected=max_bytes,
                found=len(raw),
            )
        return cls(raw.ljust(max_bytes, b"\x00"))

    def dist(self, other: ImageHash) -> int:
        """Hamming distance to ``other``: the number of differing bits.

        The result has no meaning unless both hashes come from the same size
        and algorithm.
        """
        return hamming(self.data, other.data)

    @classmethod
    def from_base64(cls, encoded: str, max_bytes: int | None = None) -> ImageHash:
        """Build a hash from a Base64 string.

        Raises :class:`InvalidBytesError` if the string is not valid Base64,
        and otherwise behaves as :meth:`from_bytes`.
        """
        try:
            raw = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as error:
            raise InvalidBytesError(f"invalid base64: {error}") from error
        return cls.from_bytes(raw, max_bytes)

    def to_base64(self) -> str:
        """The hash bytes as a standard padded Base64 string."""
        return base64.b64encode(self.data).decode("ascii")