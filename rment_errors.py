#!/usr/bin/env python3
"""
Error types and exit codes for rment

Only fatal conditions are modelled as exceptions. Anything that goes wrong
while removing a single entry is recorded in the removal report instead.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes"""

    OK = 0
    FAILURE = 1
    USAGE = 2  # argparse
    CWD_FAILURE = 3
    LOG_FAILURE = 4
    CONFIG_FAILURE = 5


class RmentError(Exception):
    """Base class for fatal rment errors"""

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WorkingDirectoryError(RmentError):
    """The current working directory could not be determined"""

    exit_code = ExitCode.CWD_FAILURE


class LogSetupError(RmentError):
    """The log file could not be opened"""

    exit_code = ExitCode.LOG_FAILURE


class ConfigError(RmentError):
    """The configuration directory could not be prepared"""

    exit_code = ExitCode.CONFIG_FAILURE
