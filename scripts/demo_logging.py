#!/usr/bin/env python3
"""Demo: drive stdlib logging from -v/-q.

Usage:
    python scripts/demo_logging.py          # errors only
    python scripts/demo_logging.py -vv      # down to info
    python scripts/demo_logging.py -q       # nothing
"""

import argparse
import logging
import sys

from verbosity_flag import TRACE_LEVEL, add_verbosity_arguments, configure_logging, Verbosity


def main(argv=None):
    parser = argparse.ArgumentParser(description="Foo")
    add_verbosity_arguments(parser)
    args = parser.parse_args(argv)

    configure_logging(Verbosity.from_args(args))

    log = logging.getLogger("engine")
    log.error("Engines exploded")
    log.warning("Engines smoking")
    log.info("Engines exist")
    log.debug("Engine temperature is 200 degrees")
    log.log(TRACE_LEVEL, "Engine subsection is 300 degrees")
    return 0


if __name__ == "__main__":
    sys.exit(main())
