#!/usr/bin/env python3
"""Demo: drive loguru from -v/-q, with the flags usable around a subcommand.

Usage:
    python scripts/demo_loguru.py run -vvv
    python scripts/demo_loguru.py -q run
"""

import argparse
import sys

from loguru import logger

from verbosity_flag import configure_loguru, extract_verbosity


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: -v/-q from anywhere
    verbosity, remaining = extract_verbosity(argv)
    configure_loguru(verbosity)

    # Pass 2: the rest
    parser = argparse.ArgumentParser(description="Foo")
    parser.add_argument("command", nargs="?", default="run")
    parser.parse_args(remaining)

    logger.error("Engines exploded")
    logger.warning("Engines smoking")
    logger.info("Engines exist")
    logger.debug("Engine temperature is 200 degrees")
    logger.trace("Engine subsection is 300 degrees")
    return 0


if __name__ == "__main__":
    sys.exit(main())
