#!/usr/bin/env python3

import logging
from Bitflags.samples import run_sample
from cli import samples_cli as cli

# ---- Handle Command-line Arguments ---- #

parser = cli.parse_cli()
args = parser.parse_args()

# ---- Configure Stdout Logging ---- #

logging.basicConfig(
    # Set based on cli args
    level=args.loglevel.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler()
    ],
)
logger = logging.getLogger(__name__)

# ---- Run Sample ---- #

logger.info("Running sample: %s", args.sample)
if args.sample == "can":
    flags = run_sample(args.sample, log_dir=args.log_dir, file_name=args.file_name)
else:
    flags = run_sample(args.sample)
logger.info("Result: %s", flags)
