import pytest

from perceptual_hash.dct import SIZE_MULTIPLIER, DctContext, crop_2d_dct


def test_crop_2d_dct():
    packed = list(range(64))
    assert crop_2d_dct(packed, 8) == [
        0, 1, 2, 3,
        8, 9, 10, 11,
        16, 17, 18, 19,
        24, 25, 26, 27,
    ]


def test_crop_rejects_odd_rowstride():
    with pytest.raises(ValueError):
        crop_2d_dct(list(range(9)), 3)


def test_crop_rejects_zero_rowstride():
    with pytest.raises(ValueError):
        crop_2d_dct([], 0)


def test_context_dimensions_are_multiplied():
    ctx = DctContext(4, 3)
    assert (ctx.width, ctx.height) == (4 * SIZE_MULTIPLIER, 3 * SIZE_MULTIPLIER)


def test_context_rejects_zero_size():
    with pytest.raises(ValueError):
        DctContext(0, 4)


def test_constant_input_has_only_dc_component():
    ctx = DctContext(2, 2)
    out = ctx.dct_2d([1.0] * 16)
    assert out[0] == pytest.approx(16.0)
    assert all(abs(v) < 1e-4 for v in out[1:])


def test_dct_is_linear():
    ctx = DctContext(2, 3)
    size = ctx.width * ctx.height
    a = [float(i % 7) for i in range(size)]
    b = [float((i * 3) % 5) for i in range(size)]
    summed = ctx.dct_2d([x + y for x, y in zip(a, b)])
    separate = [x + y for x, y in zip(ctx.dct_2d(a), ctx.dct_2d(b))]
    assert summed == pytest.approx(separate, abs=1e-3)


def test_dct_output_length_matches_input():
    ctx = DctContext(3, 2)
    out = ctx.dct_2d([0.5] * (ctx.width * ctx.height))
    assert len(out) == ctx.width * ctx.height


def test_dct_rejects_wrong_length():
    ctx = DctContext(2, 2)
    with pytest.raises(ValueError):
        ctx.dct_2d([1.0] * 15)


def test_context_crop_keeps_quarter():
    ctx = DctContext(2, 2)
    values = list(range(16))
    assert ctx.crop_2d(values) == [0, 1, 4, 5]