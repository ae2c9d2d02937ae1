"""
Level policies — default severity and flag help text.

A policy is a stateless class. The accumulator calls its classmethods,
so a policy is passed around as the class itself (an instance works too).

Usage::

    class QuietByDefault(LevelPolicy):
        @classmethod
        def default_log(cls):
            return None

        @classmethod
        def verbose_help(cls):
            return "Enable output (repeat for more)"
"""

import logging
from typing import Optional

from . import levels


class LevelPolicy:
    """Base class for level policies.

    Subclasses provide ``default_log()``, ``default_loguru()``, or both.
    A program that only uses one flavor only defines that one; the other
    is translated from it. The help accessors return the stock strings
    (no long help).
    """

    @classmethod
    def default_log(cls) -> Optional[int]:
        """Default stdlib logging level at zero net verbosity (None = off)."""
        return levels.log_level_for(cls.default_rank())

    @classmethod
    def default_loguru(cls) -> Optional[str]:
        """Default loguru level name at zero net verbosity (None = off)."""
        return levels.loguru_level_for(cls.default_rank())

    @classmethod
    def default_rank(cls) -> int:
        """The default severity on the internal scale (-1 for off).

        Taken from ``default_log()`` when the policy defines it, else from
        ``default_loguru()``.

        Raises:
            NotImplementedError: the policy defines neither default
        """
        if _defines(cls, 'default_log'):
            return levels.rank_of_log_level(cls.default_log())
        if _defines(cls, 'default_loguru'):
            return levels.rank_of_loguru_level(cls.default_loguru())
        raise NotImplementedError(
            f"{cls.__name__} must define default_log() or default_loguru()")

    @classmethod
    def verbose_help(cls) -> Optional[str]:
        return "More output per occurrence"

    @classmethod
    def verbose_long_help(cls) -> Optional[str]:
        return None

    @classmethod
    def quiet_help(cls) -> Optional[str]:
        return "Less output per occurrence"

    @classmethod
    def quiet_long_help(cls) -> Optional[str]:
        return None


class ErrorLevel(LevelPolicy):
    """Errors by default; -v shows warnings, -q silences."""

    @classmethod
    def default_log(cls) -> Optional[int]:
        return logging.ERROR

    @classmethod
    def default_loguru(cls) -> Optional[str]:
        return "ERROR"


class WarnLevel(LevelPolicy):
    """Warnings by default."""

    @classmethod
    def default_log(cls) -> Optional[int]:
        return logging.WARNING

    @classmethod
    def default_loguru(cls) -> Optional[str]:
        return "WARNING"


class InfoLevel(LevelPolicy):
    """Info by default."""

    @classmethod
    def default_log(cls) -> Optional[int]:
        return logging.INFO

    @classmethod
    def default_loguru(cls) -> Optional[str]:
        return "INFO"


def _defines(policy, name):
    """True if ``policy`` overrides the LevelPolicy accessor ``name``."""
    return getattr(policy, name).__func__ is not getattr(LevelPolicy, name).__func__
