#!/usr/bin/env python3

import csv
import logging
import os
import time
from dataclasses import dataclass, field
from datetime import datetime
from can import Listener, Message

from .api import field_value, flags_from_message
from .bitflag import Bitflag, label_name

logger = logging.getLogger(__name__)


@dataclass
class FieldLogConfig:
    # fmt: off
    enabled: bool = True
    bits:    list = field(default_factory=list)  # named bits, logged as 0/1
    masks:   list = field(default_factory=list)  # named masks, logged right-aligned
    # fmt: on


class CSVListener(Listener):
    """
    CSV listener that decodes each arbitration ID into a bitfield and logs
    its named fields.
    Can specify:
    - The template bitfield (named bits and named masks) to decode with
    - What named bits and masks to log
    - Log file name
    """

    def __init__(self, template: Bitflag, log_dir, log_name, log_config=None):
        """

        args:
            - template: Bitfield whose registries describe the identifier.
            - log_dir: Path to a dir for logging. Created if missing.
            - log_name: Base name for the CSV log.
            - log_config: A FieldLogConfig or a plain dict of its fields.
              Defaults to every named mask and no named bits.
        """
        self.template = template.clone()
        self.log_dir = log_dir
        self.log_name = log_name

        # If no config was passed, use the default
        if log_config is None:
            logger.info("No CSVLog config specified. Applying defaults.")
            self.log_config = FieldLogConfig(masks=list(self.template.named_masks))
        elif isinstance(log_config, dict):
            self.log_config = FieldLogConfig(**log_config)
        else:
            self.log_config = log_config
        logger.info("Configuring CSVLogging with:\n%s", self.log_config)

        # Create the csv file
        os.makedirs(log_dir, exist_ok=True)
        date_slug = "_" + time.strftime("%Y-%m-%d_%H-%M-%S")
        self.log_path = os.path.join(log_dir, log_name + date_slug + ".csv")
        logger.info("Creating: %s", self.log_path)
        self.csv_file = open(self.log_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)

        # Write headers
        header_row = self._setup_table()
        logger.debug("Writing: %s", header_row)
        self.csv_writer.writerow(header_row)

    def _setup_table(self):
        """Creates the csv header, dropping configured fields the template does not know."""
        known_masks = self.template.named_masks
        known_bits = self.template.named_bits
        configured_masks = [label_name(name) for name in self.log_config.masks]
        configured_bits = [label_name(name) for name in self.log_config.bits]

        for name in configured_masks:
            if name not in known_masks:
                logger.info("Unknown mask field: %s", name)
        for name in configured_bits:
            if name not in known_bits:
                logger.info("Unknown bit field: %s", name)

        self.mask_fields = [name for name in configured_masks if name in known_masks]
        self.bit_fields = [name for name in configured_bits if name in known_bits]

        default_headers = ["timestamp", "CAN ID"]
        return default_headers + self.mask_fields + self.bit_fields

    def on_message_received(self, msg: Message) -> None:
        if not self.log_config.enabled:
            return

        flags = flags_from_message(msg, self.template)

        defaults = [
            datetime.fromtimestamp(msg.timestamp),
            f"{msg.arbitration_id:X}",
        ]
        mask_data = [field_value(flags, name) for name in self.mask_fields]
        bit_data = [int(flags.get_by_name(name)) for name in self.bit_fields]

        # Write to file here
        self.csv_writer.writerow(defaults + mask_data + bit_data)
        self.csv_file.flush()

    def __call__(self, msg: Message) -> None:
        self.on_message_received(msg)

    def stop(self):
        self.csv_file.close()

    def on_error(self, exc: Exception) -> None:
        raise exc
