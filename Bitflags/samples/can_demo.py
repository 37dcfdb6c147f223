#!/usr/bin/env python3

import logging
import can

from ..api import (
    compose_id,
    field_value,
    flags_from_message,
    id_layout_template,
    make_message,
)
from ..enums import canIdFields, deviceType, messageTypes
from ..listeners import CSVListener

logger = logging.getLogger(__name__)

CHANNEL = "bitflags-demo"
NODE_ID = 0x2A


def run(log_dir="./logs", file_name="bitflags_can"):
    """
    Composes a CAN identifier, sends it over a virtual bus and decodes the
    received identifier back into named fields (also logged to CSV).
    """
    print("== CAN Identifier Bitflag Demo ==")

    template = id_layout_template()
    tx_flags = compose_id(
        device_address=NODE_ID,
        device_type=deviceType.CAN2PWM.value,
        message_type=messageTypes.PWM_COMMAND.value,
    )
    message = make_message(tx_flags, data=[0x05, 0xDC])
    print(f"Composed ID: 0x{tx_flags.value:08X}")

    csv_listener = CSVListener(template, log_dir=log_dir, log_name=file_name)
    try:
        with can.Bus(interface="virtual", channel=CHANNEL, receive_own_messages=True) as bus:
            bus.send(message)
            rx_msg = bus.recv(timeout=1.0)
            if rx_msg is None:
                logger.warning("No message received on virtual channel %s", CHANNEL)
                return None
            csv_listener(rx_msg)
    finally:
        csv_listener.stop()

    rx_flags = flags_from_message(rx_msg, template)
    for name in canIdFields:
        print(f"{name.name}: 0x{field_value(rx_flags, name):02X}")
    print(f"Logged to: {csv_listener.log_path}")
    return rx_flags
