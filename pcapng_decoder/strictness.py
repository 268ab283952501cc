"""
Module for deciding what to do when pcapng data isn't strictly valid,
but could still be decoded.
"""

import contextlib
import warnings
from enum import Enum

from pcapng_decoder.exceptions import PcapngStrictnessWarning


class Strictness(Enum):
    NONE = 0  # No warnings, keep whatever we can
    WARN = 1  # Keep whatever we can, but warn of potential issues
    FIX = 2  # Warn of potential issues, fix *if possible*
    FORBID = 3  # raise exception on potential issues


strict_level = Strictness.FORBID


def set_strictness(level):
    if not isinstance(level, Strictness):
        raise TypeError("expected a Strictness level, got {0!r}".format(level))
    global strict_level
    strict_level = level


def get_strictness():
    return strict_level


@contextlib.contextmanager
def strictness_override(level):
    """Temporarily change the default strictness level"""
    previous = get_strictness()
    set_strictness(level)
    try:
        yield
    finally:
        set_strictness(previous)


def resolve(level=None):
    "Return the given level, or the configured default if it's None."
    if level is None:
        return strict_level
    if not isinstance(level, Strictness):
        raise TypeError("expected a Strictness level, got {0!r}".format(level))
    return level


def problem(error, level=None):
    "Raise the given exception, or just warn about it if we're lenient."
    level = resolve(level)
    if level == Strictness.FORBID:
        raise error
    elif level in (Strictness.WARN, Strictness.FIX):
        warnings.warn(PcapngStrictnessWarning(str(error)))


def warn(msg, level=None):
    "Show a warning with the given message."
    if resolve(level) != Strictness.NONE:
        warnings.warn(PcapngStrictnessWarning(msg))


def should_fix(level=None):
    "Helper function for showing code used to fix questionable pcapng data."
    return resolve(level) == Strictness.FIX
