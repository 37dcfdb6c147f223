#!/usr/bin/env python3

import logging
from collections.abc import Mapping
from enum import Enum

from .errors import BitArityError, BitNameError
from .helpers import (
    ALL_ONES,
    BIT_WIDTH,
    BITS,
    UINT8_MAX,
    UINT16_MAX,
    UINT32_MAX,
    check_index,
    check_range,
    check_scalar,
    check_single_bit,
    clear_bit,
    get_bit,
    get_bits,
    range_mask,
    set_bit,
    set_bits,
    toggle_bit,
    width_mask,
)

logger = logging.getLogger(__name__)


# --- Label Helpers --- #
def label_name(key) -> str:
    """Resolves a label (str or Enum member) to its registry name."""
    if isinstance(key, Enum):
        return key.name
    if isinstance(key, str):
        return key
    raise TypeError(f"Labels must be str or Enum members, got: {type(key).__name__}")


def _label_names(names) -> list[str]:
    """Resolves a sequence of labels. A bare label is rejected, not iterated."""
    if isinstance(names, (str, Enum)):
        raise TypeError(f"Expected a sequence of names, got a single name: {names!r}")
    return [label_name(name) for name in names]


def _label_items(labels, aliases=False) -> list[tuple[str, int]]:
    """
    Normalizes a label set into (name, value) pairs.

    Accepts an Enum class, a mapping of name -> value, or an iterable of
    (name, value) pairs. Enum aliases are only included when `aliases` is set.
    """
    if isinstance(labels, type) and issubclass(labels, Enum):
        if aliases:
            return [(name, member.value) for name, member in labels.__members__.items()]
        return [(member.name, member.value) for member in labels]
    if isinstance(labels, Mapping):
        return [(label_name(name), value) for name, value in labels.items()]
    return [(label_name(name), value) for name, value in labels]


# --- Mask Operations --- #
def _or(value: int, mask: int) -> int:
    return value | mask


def _and_not(value: int, mask: int) -> int:
    return value & ~mask


def _xor(value: int, mask: int) -> int:
    return value ^ mask


class Bitflag:
    """
    Fixed-width (64-bit) bitfield with named bits and named masks.

    State:
        - value: the 64-bit unsigned scalar. The only state used by equality,
          hashing and the bitwise combinators.
        - named bits: name -> single-bit mask. Names and bits are unique.
        - named masks: name -> any 64-bit mask. Names are unique, masks may
          repeat or overlap.

    Lookup policies differ by call shape and are kept distinct on purpose:
        - Strict calls (by-index, by-name, registrations and the named-bit
          bulk operations) raise BitRangeError/BitNameError/BitShapeError.
        - Try calls (try_register_*, try_define_mask, get_bitmask_for_name,
          get_mask_for_name, reverse_lookup) return False/None instead.
        - Single-name mask calls (apply_mask, clear_masked_bits,
          toggle_by_mask) return whether the name was found.
          extract_masked_value is the exception and raises BitNameError.
        - Bulk mask calls over a sequence of names skip unknown names.

    Instances are not synchronized. For concurrent use build one template
    and hand every consumer its own clone().
    """

    def __init__(self, value: int = 0):
        self._value = check_scalar(value)
        self._named_bits: dict[str, int] = {}
        self._named_masks: dict[str, int] = {}

    # --- Construction --- #
    @classmethod
    def from_uint8(cls, value: int) -> "Bitflag":
        return cls(check_scalar(value, UINT8_MAX))

    @classmethod
    def from_uint16(cls, value: int) -> "Bitflag":
        return cls(check_scalar(value, UINT16_MAX))

    @classmethod
    def from_uint32(cls, value: int) -> "Bitflag":
        return cls(check_scalar(value, UINT32_MAX))

    @classmethod
    def from_uint64(cls, value: int) -> "Bitflag":
        return cls(check_scalar(value))

    @classmethod
    def from_names(cls, names) -> "Bitflag":
        """
        Creates a bitfield whose named bits follow the order of `names`.

        Args:
            names: Ordered labels, the first is bound to bit 0.

        Raises:
            BitArityError: More than 64 names.
            BitNameError: A name appears twice.
        """
        names = _label_names(names)
        if len(names) > BIT_WIDTH:
            raise BitArityError(
                f"Too many names: {len(names)}. Max: {BIT_WIDTH} bits."
            )

        flags = cls()
        for index, name in enumerate(names):
            flags.register_bit(name, index)
        return flags

    @classmethod
    def from_labels(cls, labels) -> "Bitflag":
        """
        Creates a bitfield from labels carrying explicit bit indices.

        Args:
            labels: An Enum class, a mapping of name -> index, or an
                iterable of (name, index) pairs. Indices must be 0-63.

        Raises:
            BitArityError: More than 64 labels.
            BitRangeError: A label's index is outside 0-63.
            BitNameError: A name or an index is used twice.
        """
        items = _label_items(labels)
        if len(items) > BIT_WIDTH:
            raise BitArityError(
                f"Label set has {len(items)} entries; only {BIT_WIDTH}-bit fields supported."
            )

        flags = cls()
        for name, index in items:
            flags.register_bit(name, index)
        return flags

    def _derive(self, value: int, named_bits=False, named_masks=False) -> "Bitflag":
        derived = type(self)(value)
        if named_bits:
            derived._named_bits = dict(self._named_bits)
        if named_masks:
            derived._named_masks = dict(self._named_masks)
        return derived

    # --- Value --- #
    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int):
        self._value = check_scalar(value)

    def to_uint8(self) -> int:
        return self._value & UINT8_MAX

    def to_uint16(self) -> int:
        return self._value & UINT16_MAX

    def to_uint32(self) -> int:
        return self._value & UINT32_MAX

    def load_uint8(self, value: int):
        self._value = check_scalar(value, UINT8_MAX)

    def load_uint16(self, value: int):
        self._value = check_scalar(value, UINT16_MAX)

    def load_uint32(self, value: int):
        self._value = check_scalar(value, UINT32_MAX)

    def set_all(self):
        self._value = ALL_ONES

    def clear_all(self):
        self._value = 0

    # --- Single Bits --- #
    def get(self, index: int) -> bool:
        """Returns whether the bit at `index` is set."""
        return bool(get_bit(self._value, check_index(index)))

    def get_by_mask(self, mask: int) -> bool:
        """Returns whether the single bit selected by `mask` is set."""
        return (self._value & check_single_bit(mask)) != 0

    def set(self, index: int):
        self._value = set_bit(self._value, check_index(index))

    def clear(self, index: int):
        self._value = clear_bit(self._value, check_index(index))

    def toggle(self, index: int):
        self._value = toggle_bit(self._value, check_index(index))

    # --- Bulk: Mask / Indices / Names --- #
    def set_bitmask(self, mask: int):
        self._value |= check_scalar(mask)

    def clear_bitmask(self, mask: int):
        self._value &= ~check_scalar(mask)

    def toggle_bitmask(self, mask: int):
        self._value ^= check_scalar(mask)

    def set_bits(self, indices):
        self._value |= self._indices_mask(indices)

    def clear_bits(self, indices):
        self._value &= ~self._indices_mask(indices)

    def toggle_bits(self, indices):
        self._value ^= self._indices_mask(indices)

    def set_named(self, names):
        """Sets every named bit. Raises BitNameError on the first unknown name."""
        self._value |= self._names_mask(names)

    def clear_named(self, names):
        """Clears every named bit. Raises BitNameError on the first unknown name."""
        self._value &= ~self._names_mask(names)

    def toggle_named(self, names):
        """Flips every named bit. Raises BitNameError on the first unknown name."""
        self._value ^= self._names_mask(names)

    def _indices_mask(self, indices) -> int:
        # Validated up front so a bad index leaves the value untouched
        mask = 0
        for index in indices:
            mask |= BITS[check_index(index)]
        return mask

    def _names_mask(self, names) -> int:
        mask = 0
        for name in _label_names(names):
            mask |= self._require_bit(name)
        return mask

    # --- Combinators & Equality --- #
    def or_with(self, other: "Bitflag") -> "Bitflag":
        """New bitfield holding `self | other`. Registries are not carried over."""
        return type(self)(self._value | self._other_value(other))

    def and_with(self, other: "Bitflag") -> "Bitflag":
        return type(self)(self._value & self._other_value(other))

    def xor_with(self, other: "Bitflag") -> "Bitflag":
        return type(self)(self._value ^ self._other_value(other))

    def complement(self) -> "Bitflag":
        return type(self)(~self._value & ALL_ONES)

    def equals(self, other) -> bool:
        """Value-only comparison; named bits and masks are ignored."""
        return isinstance(other, Bitflag) and self._value == other._value

    @staticmethod
    def _other_value(other) -> int:
        if not isinstance(other, Bitflag):
            raise TypeError(
                f"Bitwise operations need a Bitflag operand, got: {type(other).__name__}"
            )
        return other._value

    def __or__(self, other):
        if not isinstance(other, Bitflag):
            return NotImplemented
        return self.or_with(other)

    def __and__(self, other):
        if not isinstance(other, Bitflag):
            return NotImplemented
        return self.and_with(other)

    def __xor__(self, other):
        if not isinstance(other, Bitflag):
            return NotImplemented
        return self.xor_with(other)

    def __invert__(self):
        return self.complement()

    def __eq__(self, other):
        if not isinstance(other, Bitflag):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(("bitfield", self._value))

    def __repr__(self):
        return (
            f"Bitflag(0x{self._value:016X}, named_bits={len(self._named_bits)}, "
            f"named_masks={len(self._named_masks)})"
        )

    # --- Named Bits --- #
    @property
    def named_bits(self) -> dict[str, int]:
        """Snapshot of the name -> single-bit mask registry."""
        return dict(self._named_bits)

    def try_register_bit(self, name, index: int) -> bool:
        """
        Binds `name` to the bit at `index`.

        Returns False if the name or the bit is already bound.
        Raises BitRangeError for an index outside 0-63.
        """
        check_index(index)
        return self._add_named_bit(label_name(name), BITS[index])

    def try_register_bitmask(self, name, mask: int) -> bool:
        """
        Binds `name` to the bit selected by `mask`.

        Returns False if the name or the bit is already bound.
        Raises BitShapeError unless `mask` has exactly one bit set.
        """
        check_single_bit(mask)
        return self._add_named_bit(label_name(name), mask)

    def register_bit(self, name, index: int):
        if not self.try_register_bit(name, index):
            raise BitNameError(f"Bit '{label_name(name)}' or index {index} already exists.")

    def register_bitmask(self, name, mask: int):
        if not self.try_register_bitmask(name, mask):
            raise BitNameError(f"Bit '{label_name(name)}' or bitmask {mask:#x} already exists.")

    def _add_named_bit(self, name: str, mask: int) -> bool:
        if name in self._named_bits or mask in self._named_bits.values():
            logger.debug("Named bit rejected: %s -> %#x (duplicate)", name, mask)
            return False
        self._named_bits[name] = mask
        logger.debug("Named bit: %s -> %#x", name, mask)
        return True

    def _require_bit(self, name) -> int:
        name = label_name(name)
        mask = self._named_bits.get(name)
        if mask is None:
            raise BitNameError(f"No bit named '{name}' found.")
        return mask

    def get_by_name(self, name) -> bool:
        return (self._value & self._require_bit(name)) != 0

    def set_by_name(self, name, state: bool = True):
        mask = self._require_bit(name)
        if state:
            self._value |= mask
        else:
            self._value &= ~mask

    def clear_by_name(self, name):
        self._value &= ~self._require_bit(name)

    def get_bitmask_for_name(self, name):
        """Returns the mask bound to `name`, or None."""
        return self._named_bits.get(label_name(name))

    def reverse_lookup(self, index: int):
        """Returns the name bound to bit `index`, or None."""
        mask = BITS[check_index(index)]
        for name, named_mask in self._named_bits.items():
            if named_mask == mask:
                return name
        return None

    def set_named_bits(self) -> list[str]:
        """Names of the registered bits that are currently set, in registration order."""
        return [name for name, mask in self._named_bits.items() if self._value & mask]

    def enumerate_flags(self):
        """Yields (name, state) for every named bit."""
        for name, mask in self._named_bits.items():
            yield name, (self._value & mask) != 0

    # --- Named Masks --- #
    @property
    def named_masks(self) -> dict[str, int]:
        """Snapshot of the name -> mask registry."""
        return dict(self._named_masks)

    def try_define_mask(self, name, mask: int) -> bool:
        """Defines a named mask. Returns False if the name already exists."""
        name = label_name(name)
        check_scalar(mask)
        if name in self._named_masks:
            logger.debug("Named mask rejected: %s (duplicate)", name)
            return False
        self._named_masks[name] = mask
        logger.debug("Named mask: %s -> %#x", name, mask)
        return True

    def define_mask(self, name, mask: int):
        """Defines a named mask. Raises BitNameError if the name already exists."""
        if not self.try_define_mask(name, mask):
            raise BitNameError(f"Mask '{label_name(name)}' is already defined.")

    def define_mask_label(self, member: Enum):
        """Defines a named mask from an Enum member's name and value."""
        if not isinstance(member, Enum):
            raise TypeError(f"Expected an Enum member, got: {type(member).__name__}")
        self.define_mask(member.name, member.value)

    def define_masks(self, labels):
        """
        Defines one named mask per label, using the label's value as the mask.

        Args:
            labels: An Enum class (aliases included), a mapping of
                name -> mask, or an iterable of (name, mask) pairs.

        Raises:
            BitNameError: On the first duplicate name. Nothing is defined.
        """
        items = _label_items(labels, aliases=True)
        seen = set(self._named_masks)
        for name, mask in items:
            check_scalar(mask)
            if name in seen:
                raise BitNameError(f"Mask '{name}' is already defined.")
            seen.add(name)

        for name, mask in items:
            self.define_mask(name, mask)

    def get_mask_for_name(self, name):
        """Returns the mask defined as `name`, or None."""
        return self._named_masks.get(label_name(name))

    def extract_masked_value(self, name) -> int:
        """Returns `value & mask`. Raises BitNameError for an undefined mask."""
        name = label_name(name)
        mask = self._named_masks.get(name)
        if mask is None:
            raise BitNameError(f"Mask '{name}' is not defined.")
        return self._value & mask

    def _mask_in_place(self, name, operation) -> bool:
        mask = self._named_masks.get(label_name(name))
        if mask is None:
            return False
        self._value = operation(self._value, mask)
        return True

    def _mask_new(self, name, operation):
        mask = self._named_masks.get(label_name(name))
        if mask is None:
            return None
        derived = self.clone()
        derived._value = operation(derived._value, mask)
        return derived

    def _masks_in_place(self, names, operation):
        for name in _label_names(names):
            mask = self._named_masks.get(name)
            if mask is not None:
                self._value = operation(self._value, mask)

    def _masks_new(self, names, operation) -> "Bitflag":
        derived = self.clone()
        derived._masks_in_place(names, operation)
        return derived

    def apply_mask(self, name) -> bool:
        """ORs the named mask into the value. Returns False for an unknown name."""
        return self._mask_in_place(name, _or)

    def clear_masked_bits(self, name) -> bool:
        """Clears the bits of the named mask. Returns False for an unknown name."""
        return self._mask_in_place(name, _and_not)

    def toggle_by_mask(self, name) -> bool:
        """Flips the bits of the named mask. Returns False for an unknown name."""
        return self._mask_in_place(name, _xor)

    def apply_mask_new(self, name):
        """Clone with the named mask applied, or None for an unknown name."""
        return self._mask_new(name, _or)

    def clear_masked_bits_new(self, name):
        return self._mask_new(name, _and_not)

    def toggle_by_mask_new(self, name):
        return self._mask_new(name, _xor)

    # Unknown names are skipped in all bulk mask operations
    def apply_masks(self, names):
        self._masks_in_place(names, _or)

    def clear_masks(self, names):
        self._masks_in_place(names, _and_not)

    def toggle_masks(self, names):
        self._masks_in_place(names, _xor)

    def apply_masks_new(self, names) -> "Bitflag":
        return self._masks_new(names, _or)

    def clear_masks_new(self, names) -> "Bitflag":
        return self._masks_new(names, _and_not)

    def toggle_masks_new(self, names) -> "Bitflag":
        return self._masks_new(names, _xor)

    # --- Ranges --- #
    @staticmethod
    def build_range_mask(low: int, high: int) -> int:
        return range_mask(low, high)

    def extract_range(self, low: int, high: int) -> int:
        """Returns bits low..high (inclusive) right-aligned to bit 0."""
        return get_bits(self._value, range_mask(low, high), low)

    def insert_range(self, value: int, low: int, high: int):
        """
        Replaces bits low..high (inclusive) with `value`.

        Bits of `value` wider than the range are discarded:
            insert_range(0xFF, 0, 3) -> bits 0..3 = 0b1111
        """
        check_range(low, high)
        check_scalar(value)
        field = value & width_mask(low, high)
        self._value = set_bits(self._value, field, range_mask(low, high), low)

    # --- Clones --- #
    def clone(self) -> "Bitflag":
        """Independent copy of the value, named bits and named masks."""
        return self._derive(self._value, named_bits=True, named_masks=True)

    def clone_without_masks(self) -> "Bitflag":
        return self._derive(self._value, named_bits=True)

    def clone_value_only(self) -> "Bitflag":
        return self._derive(self._value)

    def clone_unset(self) -> "Bitflag":
        """Named bits only, with every bit cleared."""
        return self._derive(0, named_bits=True)

    def clone_with_mask(self, mask) -> "Bitflag":
        """Named bits only, with the value ANDed with `mask` (int or Bitflag)."""
        if isinstance(mask, Bitflag):
            mask = mask.value
        return self._derive(self._value & check_scalar(mask), named_bits=True)

    def attach_names_from(self, other: "Bitflag"):
        """
        Copies the named bits of `other` into this bitfield. The value is untouched.

        Raises BitNameError if this bitfield already has named bits.
        """
        if self._named_bits:
            raise BitNameError("This Bitflag instance already has named bits defined.")
        self._named_bits = dict(other._named_bits)
        logger.debug("Attached %d named bits", len(self._named_bits))

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    # --- Derived Queries --- #
    def pop_count(self) -> int:
        return self._value.bit_count()

    def first_set_bit_index(self) -> int:
        """Index of the lowest set bit; 64 when no bit is set."""
        if self._value == 0:
            return BIT_WIDTH
        return (self._value & -self._value).bit_length() - 1

    def last_set_bit_index(self) -> int:
        """Index of the highest set bit; -1 when no bit is set."""
        return self._value.bit_length() - 1

    def is_power_of_two(self) -> bool:
        return self._value != 0 and (self._value & (self._value - 1)) == 0
