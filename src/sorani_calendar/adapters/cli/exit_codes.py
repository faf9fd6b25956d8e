"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    * 0–1: generic success / failure
    * 22: EINVAL, the date text or an option value was rejected
    * 78: EX_CONFIG (sysexits.h), the configuration is unusable

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
