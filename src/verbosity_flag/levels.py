"""
Severity scale and its two output flavors.

The scale is a small signed integer. Everything the accumulator computes
is expressed on it, and translated to a backend level only at the edge:

    ←── quieter ──────────────────────────── louder ──→
    -1     0      1      2      3      4
    off    error  warn   info   debug  trace

Values above 4 collapse to trace, values below 0 to off.

Flavors:
    log     — stdlib ``logging`` numeric levels (TRACE registered as 5)
    loguru  — loguru level names
"""

import logging
from typing import Optional, Union

# Scale values
OFF = -1
ERROR = 0
WARN = 1
INFO = 2
DEBUG = 3
TRACE = 4

# stdlib logging has no trace level, register one below DEBUG
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

# "Show nothing" filters. Both are valid levels for their backend.
LOG_OFF = logging.CRITICAL + 1
LOGURU_OFF = 100

LOG_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO,
              logging.DEBUG, TRACE_LEVEL)
LOGURU_LEVELS = ("ERROR", "WARNING", "INFO", "DEBUG", "TRACE")

_LOG_NAME_ALIASES = {
    'WARN': logging.WARNING,
    'TRACE': TRACE_LEVEL,
}


def clamp(verbosity: int) -> int:
    """Clamp a signed verbosity onto the scale [OFF, TRACE]."""
    return max(OFF, min(TRACE, verbosity))


def log_level_for(verbosity: int) -> Optional[int]:
    """Map a signed verbosity to a stdlib logging level, None for off."""
    rank = clamp(verbosity)
    if rank == OFF:
        return None
    return LOG_LEVELS[rank]


def loguru_level_for(verbosity: int) -> Optional[str]:
    """Map a signed verbosity to a loguru level name, None for off."""
    rank = clamp(verbosity)
    if rank == OFF:
        return None
    return LOGURU_LEVELS[rank]


def rank_of_log_level(level: Union[int, str, None]) -> int:
    """Translate a stdlib logging level (number or name) onto the scale.

    Args:
        level: ``logging.WARNING``, ``"warning"``, ``"WARN"``, ... or None

    Returns:
        Scale value, OFF for None

    Raises:
        ValueError: level is not one of the five mapped severities
    """
    if level is None:
        return OFF
    if isinstance(level, str):
        name = level.upper()
        number = _LOG_NAME_ALIASES.get(name, logging.getLevelName(name))
        if not isinstance(number, int):
            raise ValueError(f"Unknown logging level name: {level!r}")
        level = number
    try:
        return LOG_LEVELS.index(level)
    except ValueError:
        raise ValueError(f"Unsupported logging level: {level!r}") from None


def rank_of_loguru_level(name: Optional[str]) -> int:
    """Translate a loguru level name onto the scale (OFF for None)."""
    if name is None:
        return OFF
    try:
        return LOGURU_LEVELS.index(name.upper())
    except ValueError:
        raise ValueError(f"Unsupported loguru level: {name!r}") from None
