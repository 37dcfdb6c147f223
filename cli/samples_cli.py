#!/usr/bin/env python3
import argparse

from Bitflags.samples import SAMPLES

# This file provides a _basic_ command-line interface for the example_use.py file at
# the root of this project


def valid_sample(value):
    """
    Validates that the passed value names a registered sample (case-insensitive).
    """
    name = value.lower()
    if name not in SAMPLES:
        raise argparse.ArgumentTypeError(
            f"Unknown sample: {value}. Available: {', '.join(SAMPLES)}"
        )
    return name


def parse_cli():
    """Parses commandline args (using argparse) for the Bitflags sample runner."""

    parser = argparse.ArgumentParser(
        description="Bitflags sample runner\n"
    )

    # Sample to run
    parser.add_argument(
        "sample",
        type=valid_sample,
        help=f"Sample to run. One of: {', '.join(SAMPLES)}",
    )

    # File path to write logs too (can sample only)
    parser.add_argument(
        "-ld",
        "--log_dir",
        type=str,
        default="./logs",
        help="Path at which to create CSV log files.",
    )

    # File name for logs
    parser.add_argument(
        "-f",
        "--file_name",
        type=str,
        default="bitflags_can",
        help="Base name for CSV log files.",
    )

    parser.add_argument(
        "-log",
        "--loglevel",
        default="info",
        choices=["notset", "debug", "info", "warning", "error", "critical"],
        help="Provide logging level. Example --loglevel debug, default=info",
    )
    return parser


# This allows the cli to be called independently for testing purposes.
if __name__ == "__main__":
    parser = parse_cli()
    args = parser.parse_args()
    print(f"{args}")
