# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/system/exceptions.py

"""
eiplint-specific exception classes.

Lint rules report expected problems as diagnostic strings; these exceptions
are for faults that should stop the run (bad config, unreadable input,
a resolver that cannot produce an answer).
"""


class EipLintError(Exception):
    """Base exception for all eiplint errors."""
    pass


class ConfigError(EipLintError):
    """Raised when there are configuration validation or loading errors."""
    pass


class ValidationError(EipLintError):
    """Raised when input files or paths handed to the linter are unusable."""
    pass


class ResolverError(EipLintError):
    """Raised when no EIP number can be determined for a filename."""

    def __init__(self, message: str, filename: str = None):
        self.filename = filename
        super().__init__(message)
