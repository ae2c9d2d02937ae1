"""
Backend glue — hand a Verbosity to stdlib logging or loguru.

Neither helper decides anything about levels; they only pass on the
filter value the accumulator produced. Silence goes through the same
path, as the OFF filter of each flavor.

loguru is optional (``pip install verbosity-flag[loguru]``) and only
imported when ``configure_loguru`` is called.
"""

import logging
import sys
from typing import Callable, Optional, TextIO, Union

from .verbosity import Verbosity

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOGURU_FORMAT = "<level>{level: <8}</level> | {message}"


def configure_logging(verbosity: Verbosity, stream: Optional[TextIO] = None,
                      fmt: str = LOG_FORMAT) -> logging.Logger:
    """Configure the root stdlib logger from a Verbosity.

    Replaces any handlers already on the root logger.

    Args:
        verbosity: Parsed verbosity
        stream: Output stream (default: stderr)
        fmt: ``logging.Formatter`` format string

    Returns:
        The root logger
    """
    logging.basicConfig(
        level=verbosity.log_level_filter(),
        stream=stream if stream is not None else sys.stderr,
        format=fmt,
        force=True,
    )
    return logging.getLogger()


def configure_loguru(verbosity: Verbosity,
                     sink: Union[TextIO, Callable, None] = None,
                     fmt: str = LOGURU_FORMAT) -> int:
    """Replace loguru's handlers with one sink filtered by a Verbosity.

    Args:
        verbosity: Parsed verbosity
        sink: Anything ``logger.add`` accepts (default: stderr)
        fmt: loguru format string

    Returns:
        The handler id from ``logger.add``
    """
    from loguru import logger

    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=verbosity.loguru_level_filter(),
        format=fmt,
    )
