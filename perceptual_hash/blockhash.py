"""The Blockhash.io perceptual hash, computed over unscaled images."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

import numpy as np
from PIL import Image

from perceptual_hash.bits import bools_to_bytes
from perceptual_hash.images import iter_pixels8

T = TypeVar("T")

_FLOAT_EQ_MARGIN = np.float32(0.001)
_SORT_THRESHOLD = 8


def blockhash(image: Image.Image, width: int, height: int) -> bytes:
    """Hash ``image`` into ``width x height`` bits; both must be multiples of 4."""
    if width % 4 != 0:
        raise ValueError(f"width must be multiple of 4: {width}")
    if height % 4 != 0:
        raise ValueError(f"height must be multiple of 4: {height}")

    image_width, image_height = image.size
    pixels = list(iter_pixels8(image))
    channel_count = len(pixels[0][2]) if pixels else 1

    if image_width % width == 0 and image_height % height == 0:
        return _blockhash_fast(pixels, channel_count, image.size, width, height)
    return _blockhash_slow(pixels, channel_count, image.size, width, height)


def _channel_scale(channel_count: int) -> int:
    if channel_count in (3, 4):
        return 255 * 3
    if channel_count in (1, 2):
        return 255
    raise ValueError(f"unrecognized channel count from image: {channel_count}")


def _blockhash_fast(pixels, channel_count, size, width, height) -> bytes:
    image_width, image_height = size
    block_width = image_width // width
    block_height = image_height // height
    blocks = [0] * (width * height)

    for x, y, channels in pixels:
        blocks[(y // block_height) * width + x // block_width] += sum_px(channels)

    cmp_factor = _channel_scale(channel_count) * (block_width * block_height) // 2
    return _gen_hash(blocks, width, cmp_factor, lambda left, right: left == right)


def _fract(value: np.float32) -> np.float32:
    return value - np.trunc(value)


def _blockhash_slow(pixels, channel_count, size, width, height) -> bytes:
    image_width, image_height = size
    blocks = np.zeros(width * height, dtype=np.float32)
    block_width = np.float32(image_width) / np.float32(width)
    block_height = np.float32(image_height) / np.float32(height)
    one = np.float32(1.0)

    def add(block_x: int, block_y: int, amount: np.float32) -> None:
        blocks[block_y * width + block_x] += amount

    for x, y, channels in pixels:
        px_sum = np.float32(sum_px(channels))
        fx, fy = np.float32(x), np.float32(y)

        block_x = fx / block_width
        block_y = fy / block_height

        # The offset is the remainder of one block step, not a shift of x itself.
        x_mod = fx + np.fmod(one, block_width)
        y_mod = fy + np.fmod(one, block_height)

        weight_left = _fract(x_mod)
        weight_right = one - weight_left
        weight_top = _fract(y_mod)
        weight_bottom = one - weight_top

        block_left = int(np.floor(block_x))
        block_top = int(np.floor(block_y))
        block_right = int(np.ceil(block_x)) if np.trunc(x_mod) == 0 else block_left
        block_bottom = int(np.ceil(block_y)) if np.trunc(y_mod) == 0 else block_top

        add(block_left, block_top, px_sum * weight_left * weight_top)
        add(block_left, block_bottom, px_sum * weight_left * weight_bottom)
        add(block_right, block_top, px_sum * weight_right * weight_top)
        add(block_right, block_bottom, px_sum * weight_right * weight_bottom)

    cmp_factor = (
        np.float32(_channel_scale(channel_count)) * (block_width * block_height) / np.float32(2)
    )
    return _gen_hash(
        list(blocks),
        width,
        cmp_factor,
        lambda left, right: abs(left - right) < _FLOAT_EQ_MARGIN,
    )


def _gen_hash(blocks, width, cmp_factor, equal) -> bytes:
    group_len = width * 4
    groups = [blocks[start:start + group_len] for start in range(0, len(blocks), group_len)]

    def bits():
        for group in groups:
            median = get_median(group)
            for block in group:
                yield bool(block > median or (equal(block, median) and median > cmp_factor))

    return bools_to_bytes(bits())


def sum_px(channels: Sequence[int]) -> int:
    """Sum the colour channels of one 8-bit pixel; fully transparent pixels count as white."""
    count = len(channels)
    if count == 4:
        return 255 * 3 if channels[3] == 0 else sum(channels[:3])
    if count == 3:
        return sum(channels)
    if count == 2:
        return 255 if channels[1] == 0 else channels[0]
    if count == 1:
        return channels[0]
    raise ValueError(f"unsupported channel count in image: {count}")


def get_median(data: Sequence[T]) -> T:
    """The element at index ``len(data) // 2`` of ``data`` in sorted order."""
    return qselect(data, len(data) // 2)


def qselect(data: Sequence[T], k: int) -> T:
    """The ``k``-th smallest element of ``data`` (zero based); ``data`` is not modified."""
    items = list(data)
    if not 0 <= k < len(items):
        raise ValueError(f"k = {k} is out of range for data of length {len(items)}")

    low, high = 0, len(items)
    while True:
        span = items[low:high]
        if len(span) < _SORT_THRESHOLD:
            span.sort()
            return span[k - low]
        pivot_idx = _partition(items, low, high)
        if k == pivot_idx:
            return items[pivot_idx]
        if k < pivot_idx:
            high = pivot_idx
        else:
            low = pivot_idx + 1


def _partition(items: list, low: int, high: int) -> int:
    last = high - 1
    candidates = sorted(
        [(items[low], low), (items[(low + high) // 2], (low + high) // 2), (items[last], last)],
        key=lambda pair: pair[0],
    )
    pivot_idx = candidates[1][1]
    items[pivot_idx], items[last] = items[last], items[pivot_idx]
    pivot = items[last]

    current = low
    for index in range(low, last):
        if items[index] < pivot:
            items[index], items[current] = items[current], items[index]
            current += 1
    items[current], items[last] = items[last], items[current]
    return current


def _shuffled(data: Sequence[T], seed: int) -> list[T]:
    items = list(data)
    random.Random(seed).shuffle(items)
    return items