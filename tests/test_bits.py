import pytest

from dnszone.bits import leading_zeroes, trailing_zeroes


@pytest.mark.parametrize("n", range(64))
def test_single_bit_positions(n):
    assert trailing_zeroes(1 << n) == n
    assert leading_zeroes(1 << n) + n == 63


def test_empty_mask():
    assert trailing_zeroes(0) == 64
    assert leading_zeroes(0) == 64


def test_full_mask():
    full = 0xFFFFFFFFFFFFFFFF
    assert trailing_zeroes(full) == 0
    assert leading_zeroes(full) == 0


@pytest.mark.parametrize("low, high", [(0, 63), (3, 40), (17, 18), (5, 5)])
def test_lowest_and_highest_bit_bound_the_mask(low, high):
    mask = (1 << low) | (1 << high)
    assert trailing_zeroes(mask) == low
    assert leading_zeroes(mask) == 63 - high


def test_bits_above_64_are_ignored():
    assert trailing_zeroes(1 << 64) == 64
    assert leading_zeroes((1 << 70) | 1) == leading_zeroes(1)


def test_negative_is_treated_as_twos_complement():
    assert trailing_zeroes(-8) == trailing_zeroes(8)
    assert leading_zeroes(-1) == 0