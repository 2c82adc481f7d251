"""Exceptions raised by the nullability checker."""

from __future__ import annotations


class NullcheckError(Exception):
    """Base class for all nullcheck failures."""


class ConfigurationError(NullcheckError):
    """Invalid arguments, missing paths or a malformed config file."""


class EmptyUniverseError(NullcheckError):
    """No header files were found in the search folders."""

    def __init__(self, message: str = "no headers found in search folders"):
        super().__init__(message)
