"""
Release number for verbosity_flag.

setup.py reads PIP_VERSION from here, so a release bump is one edit to
VERSION_INFO / PRE_RELEASE below.
"""

VERSION_INFO = (0, 1, 0)
PRE_RELEASE = "alpha"  # None once stable; "beta", "rc1", ...

__app_name__ = "verbosity_flag"

# PEP 440 spelling of the pre-release tags we use
_PEP440_PRE = {"alpha": "a0", "beta": "b0"}


def _release():
    return ".".join(str(part) for part in VERSION_INFO)


def get_base_version():
    """Human-facing version, e.g. ``0.1.0-alpha``."""
    if PRE_RELEASE:
        return f"{_release()}-{PRE_RELEASE}"
    return _release()


def get_pip_version():
    """PEP 440 version for packaging, e.g. ``0.1.0a0`` or ``0.1.0rc1``."""
    if PRE_RELEASE:
        return _release() + _PEP440_PRE.get(PRE_RELEASE, PRE_RELEASE)
    return _release()


__version__ = BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
