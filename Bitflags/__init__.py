"""
Bitflags Package
================

This package provides a 64-bit bitfield with named bits, named masks and
bit-range access, plus adapters for carrying bitfields as python-can
arbitration identifiers.

Example Usage:
-------------
from Bitflags import Bitflag

flags = Bitflag.from_names(["A", "B", "C"])
flags.set_named(["A", "C"])
flags.value            # 0b101
flags.set_named_bits() # ["A", "C"]

flags.define_mask("LOW_NIBBLE", 0x0F)
flags.apply_mask("LOW_NIBBLE")    # True, value 0x0F
flags.apply_mask("Unknown")       # False
flags.apply_masks(["Unknown"])    # skipped silently

flags.insert_range(0xFF, 4, 7)    # value 0xFF
flags.extract_range(4, 7)         # 0x0F

Lookup policy by call shape:
    strict (by index/name, registrations, named-bit bulk) -> raises
    try (try_register_*, try_define_mask, *_for_name, reverse_lookup) -> False/None
    single-name mask ops (apply_mask, ...) -> found flag
    bulk mask ops -> unknown names skipped
"""

# --- Core bitfield --- #
from .bitflag import Bitflag

# --- Errors --- #
from .errors import (
    BitArityError,
    BitflagError,
    BitNameError,
    BitRangeError,
    BitShapeError,
)

# --- Bit table and helpers --- #
from .helpers import ALL_ONES, BIT_WIDTH, BITS, bit_mask, range_mask

# --- python-can adapters --- #
from .api import (
    compose_id,
    field_value,
    flags_from_message,
    id_layout_template,
    make_message,
)
from .listeners import CSVListener, FieldLogConfig

# --- Expose a version number ---
__version__ = "1.0.0"
