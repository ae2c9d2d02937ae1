"""verbosity_flag — control logging level with -v/--verbose and -q/--quiet.

Counts repeated -v and -q flags and maps the net verbosity onto a
logging level, for stdlib ``logging`` or for loguru.

By default only errors are reported:
    -q      silences output
    -v      shows warnings
    -vv     shows info
    -vvv    shows debug
    -vvvv   shows trace

Pick another default with a policy (WarnLevel, InfoLevel), or subclass
LevelPolicy for full control.

Public API:
    Verbosity               — the -v/-q accumulator
    LevelPolicy             — policy base class
    ErrorLevel, WarnLevel, InfoLevel — built-in policies
    add_verbosity_arguments — add the flags to an argparse parser
    verbosity_parent_parser — parent parser holding the flags
    extract_verbosity       — two-pass global flag extraction
    configure_logging       — set up stdlib logging from a Verbosity
    configure_loguru        — set up loguru from a Verbosity
"""

from verbosity_flag._version import __version__, __app_name__
from verbosity_flag.levels import TRACE_LEVEL, LOG_OFF, LOGURU_OFF
from verbosity_flag.policy import LevelPolicy, ErrorLevel, WarnLevel, InfoLevel
from verbosity_flag.verbosity import Verbosity
from verbosity_flag.cli import (
    add_verbosity_arguments, verbosity_parent_parser, extract_verbosity,
)
from verbosity_flag.backends import configure_logging, configure_loguru

__all__ = [
    "__version__", "__app_name__",
    "TRACE_LEVEL", "LOG_OFF", "LOGURU_OFF",
    "LevelPolicy", "ErrorLevel", "WarnLevel", "InfoLevel",
    "Verbosity",
    "add_verbosity_arguments", "verbosity_parent_parser", "extract_verbosity",
    "configure_logging", "configure_loguru",
]
