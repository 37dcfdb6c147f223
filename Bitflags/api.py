#!/usr/bin/env python3

import logging
from can import Message

from .bitflag import Bitflag
from .enums import canIdFields
from .errors import BitRangeError
from .helpers import get_bits, mask_shift

logger = logging.getLogger(__name__)

# --- CAN ID Constants --- #
EXTENDED_ID_MAX = 0x1FFFFFFF
GROUP_ID = 0x07


def id_layout_template() -> Bitflag:
    """
    Builds an empty bitfield describing the 29-bit extended CAN identifier.

    The named masks are taken from canIdFields. Clone the template once per
    consumer rather than sharing it.
    """
    template = Bitflag()
    template.define_masks(canIdFields)
    return template


def field_value(flags: Bitflag, mask_name) -> int:
    """Returns a named-mask field of `flags` right-aligned to bit 0."""
    mask = flags.get_mask_for_name(mask_name)
    masked = flags.extract_masked_value(mask_name)
    return get_bits(masked, mask, mask_shift(mask))


def compose_id(
    device_address: int,
    device_type: int,
    message_type: int,
    *,
    group_id: int = GROUP_ID,
) -> Bitflag:
    """
    Constructs an identifier bitfield from its fields.

    Args:
        device_address: The destination device's node ID (0-255).
        device_type: Device type code (e.g. deviceType.CAN2PWM.value).
        message_type: Message type code (e.g. messageTypes.PWM_COMMAND.value).
        group_id: Group ID (5 bits).

    Returns:
        A layout bitfield carrying the composed identifier.
    """
    flags = id_layout_template()
    flags.insert_range(group_id, 24, 28)
    flags.insert_range(message_type, 16, 23)
    flags.insert_range(device_type, 8, 15)
    flags.insert_range(device_address, 0, 7)
    return flags


def make_message(flags: Bitflag, data=b"") -> Message:
    """
    Constructs a python-can Message using `flags` as the extended arbitration ID.

    Args:
        flags: Bitfield holding the identifier (29 bits max).
        data: Optional payload.

    Returns:
        A python-can Message object ready to be sent.
    """
    if flags.value > EXTENDED_ID_MAX:
        raise BitRangeError(
            f"Arbitration ID out of range: {flags.value:#x}. Max: {EXTENDED_ID_MAX:#x}"
        )
    return Message(arbitration_id=flags.value, is_extended_id=True, data=data)


def flags_from_message(msg: Message, template: Bitflag) -> Bitflag:
    """Decodes a received message's arbitration ID into a clone of `template`."""
    flags = template.clone()
    flags.value = msg.arbitration_id
    logger.debug("Decoded %X -> %s", msg.arbitration_id, flags)
    return flags
