#!/usr/bin/env python3

# --- Bitflag Errors --- #
class BitflagError(Exception):
    """Base class for all bitflag errors."""


class BitRangeError(BitflagError, IndexError):
    """Bit index, range endpoint or raw scalar outside the 64-bit field."""


class BitNameError(BitflagError, LookupError):
    """Name missing where one is required, or duplicated on registration."""


class BitShapeError(BitflagError, ValueError):
    """Mask expected to address a single bit has a population count != 1."""


class BitArityError(BitflagError, ValueError):
    """More labels supplied than the 64-bit field can hold."""
