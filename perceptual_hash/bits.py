"""Packing of hash bits into bytes and Hamming distance."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator


def _pack(bools: Iterator[bool]) -> Iterator[int]:
    while True:
        chunk = list(islice(bools, 8))
        if not chunk:
            return
        yield sum(1 << shift for shift, bit in enumerate(chunk) if bit)


def bools_to_bytes(bools: Iterable[bool]) -> bytes:
    """Pack bits into bytes, least significant bit first; a partial last byte is zero-filled."""
    return bytes(_pack(iter(bools)))


def packed_length(bit_count: int) -> int:
    """Number of bytes needed to hold ``bit_count`` bits."""
    return -(-bit_count // 8)


def hamming(left: bytes, right: bytes) -> int:
    """Count differing bits between two byte strings, over their common length."""
    return sum((a ^ b).bit_count() for a, b in zip(left, right))