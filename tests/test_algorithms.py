import pytest

from perceptual_hash.algorithms import (
    HashAlg,
    double_gradient_hash,
    gradient_hash,
    mean_hash_f32,
    mean_hash_u8,
    next_multiple_of_2,
    next_multiple_of_4,
    vert_gradient_hash,
)


def test_enum_names_match_serialised_form():
    assert HashAlg("Mean") is HashAlg.MEAN
    assert HashAlg("DoubleGradient") is HashAlg.DOUBLE_GRADIENT
    assert HashAlg("Blockhash") is HashAlg.BLOCKHASH


@pytest.mark.parametrize("x", range(0, 40))
def test_next_multiple_of_2(x):
    result = next_multiple_of_2(x)
    assert result % 2 == 0
    assert 0 <= result - x < 2


@pytest.mark.parametrize("x", range(0, 40))
def test_next_multiple_of_4(x):
    result = next_multiple_of_4(x)
    assert result % 4 == 0
    assert 0 <= result - x < 4


def test_round_hash_size_unchanged_for_plain_algorithms():
    for alg in (HashAlg.MEAN, HashAlg.GRADIENT, HashAlg.VERT_GRADIENT):
        assert alg.round_hash_size(7, 9) == (7, 9)


def test_round_hash_size_double_gradient_and_blockhash():
    assert HashAlg.DOUBLE_GRADIENT.round_hash_size(7, 9) == (
        next_multiple_of_2(7), next_multiple_of_2(9))
    assert HashAlg.BLOCKHASH.round_hash_size(7, 9) == (
        next_multiple_of_4(7), next_multiple_of_4(9))
    assert HashAlg.BLOCKHASH.round_hash_size(8, 12) == (8, 12)


def test_resize_dimensions():
    w, h = 8, 6
    assert HashAlg.MEAN.resize_dimensions(w, h) == (w, h)
    assert HashAlg.GRADIENT.resize_dimensions(w, h) == (w + 1, h)
    assert HashAlg.VERT_GRADIENT.resize_dimensions(w, h) == (w, h + 1)
    assert HashAlg.DOUBLE_GRADIENT.resize_dimensions(w, h) == (w // 2 + 1, h // 2 + 1)


def test_blockhash_does_not_resize():
    with pytest.raises(ValueError):
        HashAlg.BLOCKHASH.resize_dimensions(8, 8)


def test_mean_hash_u8():
    assert list(mean_hash_u8([0, 10, 20, 30])) == [False, False, True, True]


def test_mean_hash_u8_truncates_mean():
    assert list(mean_hash_u8([1, 2])) == [True, True]


def test_mean_hash_f32():
    assert list(mean_hash_f32([1.0, 2.0])) == [False, True]


def test_mean_hash_bit_count_matches_input():
    values = [3, 200, 17, 90, 45, 128, 0, 255, 66]
    assert len(list(mean_hash_u8(values))) == len(values)
    assert len(list(mean_hash_f32([float(v) for v in values]))) == len(values)


def test_gradient_hash_rows():
    luma = [1, 2, 3, 2, 1, 0]
    assert list(gradient_hash(luma, 3)) == [True, True, False, False]


def test_vert_gradient_hash_columns():
    luma = [1, 2, 3, 2, 1, 0]
    assert list(vert_gradient_hash(luma, 3)) == [True, False, False]


def test_double_gradient_is_rows_then_columns():
    luma = [4, 9, 1, 7, 7, 2, 0, 5, 8]
    expected = list(gradient_hash(luma, 3)) + list(vert_gradient_hash(luma, 3))
    assert list(double_gradient_hash(luma, 3)) == expected


def test_gradient_length_is_rows_times_comparisons():
    width, height = 9, 8
    luma = list(range(width * height))
    assert len(list(gradient_hash(luma, width))) == height * (width - 1)
    assert len(list(vert_gradient_hash(luma, width))) == width * (height - 1)


def test_gradient_works_on_floats():
    luma = [0.5, 0.25, 0.75, 1.0]
    assert list(gradient_hash(luma, 2)) == list(gradient_hash([2, 1, 3, 4], 2))


@pytest.mark.parametrize("func", [gradient_hash, vert_gradient_hash, double_gradient_hash])
def test_rowstride_must_be_positive(func):
    with pytest.raises(ValueError):
        list(func([1, 2, 3], 0))