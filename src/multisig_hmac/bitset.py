"""Bit operations over the 32-bit participant bitfield."""

from __future__ import annotations

from collections.abc import Iterator

from .constants import BITFIELD_MASK, BITFIELD_WIDTH
from .errors import InvalidBitfieldError


def validate_bitfield(bitfield: int) -> int:
    """Ensure a bitfield is an unsigned 32-bit integer.

    Raises:
        InvalidBitfieldError: If the value is negative, wider than 32 bits or not an int.
    """
    if isinstance(bitfield, bool) or not isinstance(bitfield, int):
        raise InvalidBitfieldError(f"Bitfield must be an int, got {type(bitfield).__name__}")
    if bitfield & ~BITFIELD_MASK:
        raise InvalidBitfieldError(f"Bitfield does not fit in {BITFIELD_WIDTH} bits: {bitfield}")
    return bitfield


def popcount(bitfield: int) -> int:
    """Count the set bits in a bitfield."""
    return validate_bitfield(bitfield).bit_count()


def leading_zeros(bitfield: int) -> int:
    """Count leading zero bits of a 32-bit value; 32 for zero."""
    return BITFIELD_WIDTH - validate_bitfield(bitfield).bit_length()


def highest_set_bit_plus_one(bitfield: int) -> int:
    """Return one more than the position of the highest set bit.

    This is the minimum number of keys a verifier must hold to cover every
    index in the bitfield. Zero has no set bit and yields 0.
    """
    return BITFIELD_WIDTH - leading_zeros(bitfield)


def set_bit_positions(bitfield: int) -> Iterator[int]:
    """Yield the positions of set bits in ascending order."""
    remaining = validate_bitfield(bitfield)
    position = 0
    while remaining:
        if remaining & 1:
            yield position
        remaining >>= 1
        position += 1
