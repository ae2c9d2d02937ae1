"""
Verbosity — the -v/-q accumulator.

Holds the two occurrence counts and the policy chosen at construction.
Every derived value is recomputed from those three on each query:

    value = policy.default_rank() - quiet + verbose

The value is unclamped; the level accessors clamp it onto the scale
(see ``levels``), so any value below 0 means no output and any value
of 4 or more means trace.
"""

from dataclasses import dataclass
from typing import Any, Optional, Type, Union

from . import levels
from .policy import ErrorLevel, LevelPolicy


@dataclass(frozen=True)
class Verbosity:
    """Net verbosity from repeated -v/--verbose and -q/--quiet flags.

    Usage::

        v = Verbosity(verbose=2)
        v.log_level()          # logging.INFO
        v.loguru_level()       # 'INFO'
        str(v)                 # '2'

        Verbosity(quiet=1).is_silent     # True
        Verbosity(policy=InfoLevel).log_level_filter()   # logging.INFO
    """
    verbose: int = 0
    quiet: int = 0
    policy: Union[Type[LevelPolicy], LevelPolicy] = ErrorLevel

    def __post_init__(self):
        # Policies are stateless; store the class so equality ignores instances
        if not isinstance(self.policy, type):
            object.__setattr__(self, 'policy', type(self.policy))

    @classmethod
    def new(cls, verbose: int, quiet: int,
            policy: Union[Type[LevelPolicy], LevelPolicy] = ErrorLevel) -> 'Verbosity':
        """Create a verbosity by explicitly setting the counts."""
        return cls(verbose=verbose, quiet=quiet, policy=policy)

    @classmethod
    def from_args(cls, args: Any,
                  policy: Union[Type[LevelPolicy], LevelPolicy] = ErrorLevel) -> 'Verbosity':
        """Build from a parsed argparse namespace.

        Missing or None ``verbose``/``quiet`` attributes count as zero, so
        namespaces from parsers without the flags are accepted.
        """
        return cls(verbose=getattr(args, 'verbose', 0) or 0,
                   quiet=getattr(args, 'quiet', 0) or 0,
                   policy=policy)

    @property
    def value(self) -> int:
        """Signed verbosity before clamping."""
        return self.policy.default_rank() - self.quiet + self.verbose

    def log_level(self) -> Optional[int]:
        """The stdlib logging level. None means all output is disabled."""
        return levels.log_level_for(self.value)

    def log_level_filter(self) -> int:
        """The stdlib logging threshold, ``LOG_OFF`` when silent."""
        if self.is_silent:
            return levels.LOG_OFF
        return levels.log_level_for(self.value)

    def loguru_level(self) -> Optional[str]:
        """The loguru level name. None means all output is disabled."""
        return levels.loguru_level_for(self.value)

    def loguru_level_filter(self) -> Union[str, int]:
        """The loguru threshold, ``LOGURU_OFF`` when silent."""
        if self.is_silent:
            return levels.LOGURU_OFF
        return levels.loguru_level_for(self.value)

    @property
    def is_silent(self) -> bool:
        """True if the user requested complete silence (not just fewer logs)."""
        return self.value < 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
