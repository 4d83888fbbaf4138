"""Bit scanning on 64-bit masks."""

_MASK64 = (1 << 64) - 1


def trailing_zeroes(mask: int) -> int:
    """Count trailing zero bits of a 64-bit mask; 64 for an empty mask."""
    mask &= _MASK64
    if not mask:
        return 64
    return (mask & -mask).bit_length() - 1


def leading_zeroes(mask: int) -> int:
    """Count leading zero bits of a 64-bit mask; 64 for an empty mask."""
    mask &= _MASK64
    return 64 - mask.bit_length()