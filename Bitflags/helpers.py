#!/usr/bin/env python3

from .errors import BitRangeError, BitShapeError

# --- Field Constants --- #
BIT_WIDTH = 64
MAX_INDEX = BIT_WIDTH - 1
ALL_ONES = (1 << BIT_WIDTH) - 1

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF

# Index -> single-bit mask. Immutable, shared process-wide.
BITS = tuple(1 << i for i in range(BIT_WIDTH))


def bit_mask(index: int) -> int:
    """Returns the single-bit mask for a bit index (0-63)."""
    check_index(index)
    return BITS[index]


# --- Validation --- #
def check_index(index: int) -> int:
    """Raises BitRangeError unless 0 <= index <= 63."""
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"Bit index must be an int, got: {type(index).__name__}")
    if not 0 <= index <= MAX_INDEX:
        raise BitRangeError(
            f"Bit index out of range: {index}. Min: 0 Max: {MAX_INDEX}"
        )
    return index


def check_range(low: int, high: int) -> tuple[int, int]:
    """Raises BitRangeError unless 0 <= low <= high <= 63."""
    check_index(low)
    check_index(high)
    if low > high:
        raise BitRangeError(f"Invalid bit range: low ({low}) > high ({high})")
    return low, high


def check_scalar(value: int, limit: int = ALL_ONES) -> int:
    """Raises BitRangeError unless 0 <= value <= limit."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Bitfield value must be an int, got: {type(value).__name__}")
    if not 0 <= value <= limit:
        raise BitRangeError(
            f"Value out of range: {value:#x}. Min: 0x0 Max: {limit:#x}"
        )
    return value


def is_single_bit(mask: int) -> bool:
    return mask.bit_count() == 1


def check_single_bit(mask: int) -> int:
    """Raises BitShapeError unless the mask has exactly one bit set."""
    check_scalar(mask)
    if not is_single_bit(mask):
        raise BitShapeError(f"Bitmask must represent a single bit, got: {mask:#x}")
    return mask


# --- Masks --- #
def range_mask(low: int, high: int) -> int:
    """
    Builds a mask of contiguous ones covering bits low..high (inclusive).

    range_mask(2, 5) == 0b00111100
    """
    check_range(low, high)
    width = high - low + 1
    return ((1 << width) - 1) << low


def width_mask(low: int, high: int) -> int:
    """Right-aligned mask as wide as the range low..high."""
    return (1 << (high - low + 1)) - 1


def mask_shift(mask: int) -> int:
    """Index of the lowest set bit of a mask, 0 for an empty mask."""
    if mask == 0:
        return 0
    return (mask & -mask).bit_length() - 1


# --- Bit Helpers --- #
def get_bit(field: int, bit_position: int) -> int:
    """Gets the value of a single bit at a given position."""
    return (field >> bit_position) & 0x1


def set_bit(field: int, bit_position: int) -> int:
    """Sets a specific bit in a field to 1."""
    mask = 1 << bit_position
    return (field & ~mask) | mask


def clear_bit(field: int, bit_position: int) -> int:
    """Clears a specific bit in a field to 0."""
    mask = ~(1 << bit_position)
    return field & mask


def toggle_bit(field: int, bit_position: int) -> int:
    """Flips a specific bit in a field."""
    return field ^ (1 << bit_position)


def get_bits(field: int, mask: int, shift: int) -> int:
    """Gets the value of a range of bits using a mask and shift."""
    return (field & mask) >> shift


def set_bits(field: int, value: int, mask: int, shift: int) -> int:
    """Sets a range of bits in a field to a given value."""
    return (field & ~mask) | ((value << shift) & mask)
