"""argparse integration for -v/--verbose and -q/--quiet.

Three ways to hook the flags into a host program:

  1. add_verbosity_arguments(parser)     # flags on an existing parser
  2. parents=[verbosity_parent_parser()] # share across subcommands
  3. extract_verbosity(argv)             # Docker-style global flags

The third is a two-pass parse: the flags are pulled out of argv first,
from anywhere, so they work before OR after a subcommand:

  tool -vv build --target x
  tool build --target x -vv

Help text comes from the policy.
"""

import argparse
import logging

from verbosity_flag.policy import ErrorLevel
from verbosity_flag.verbosity import Verbosity

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Flag definitions (help filled in per policy)
# ---------------------------------------------------------------------------
VERBOSITY_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0},
    "--quiet": {"aliases": ["-q"], "action": "count", "default": 0},
}


def _flag_help(policy, flag):
    """Pick the help string for a flag: long help if the policy has one."""
    if flag == "--verbose":
        return policy.verbose_long_help() or policy.verbose_help()
    return policy.quiet_long_help() or policy.quiet_help()


def add_verbosity_arguments(parser, policy=ErrorLevel):
    """Add -v/--verbose and -q/--quiet to a parser.

    The two flags share a mutually exclusive group, so argparse rejects
    a command line that uses both (usage error, exit status 2).

    Args:
        parser: ArgumentParser to extend.
        policy: LevelPolicy supplying the help text.

    Returns:
        The mutually exclusive group holding the flags.
    """
    group = parser.add_mutually_exclusive_group()
    for flag, kwargs in VERBOSITY_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        group.add_argument(flag, *kwargs["aliases"],
                           help=_flag_help(policy, flag), **kw)
    return group


def verbosity_parent_parser(policy=ErrorLevel):
    """Build a help-less parser holding the flags, for parents=[...]."""
    parent = argparse.ArgumentParser(add_help=False)
    add_verbosity_arguments(parent, policy)
    return parent


def extract_verbosity(argv, policy=ErrorLevel):
    """Two-pass parse: pull -v/-q from anywhere in argv.

    Args:
        argv: Argument list (without the program name).
        policy: LevelPolicy for the resulting Verbosity.

    Returns:
        (Verbosity, remaining_argv)
    """
    global_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    add_verbosity_arguments(global_parser, policy)

    global_args, remaining = global_parser.parse_known_args(list(argv))
    verbosity = Verbosity.from_args(global_args, policy)
    log.debug("verbosity %s from -v x%d -q x%d",
              verbosity, verbosity.verbose, verbosity.quiet)
    return verbosity, remaining
