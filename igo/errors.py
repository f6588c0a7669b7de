"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from IGOUserError.

Programming errors and bugs should NOT inherit from IGOUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class IGOUserError(Exception):
    """
    Base class for all user-facing errors of the import ordering checker.

    These errors indicate problems that the user can fix:
    configuration issues, missing paths, unsupported files, etc.
    """
    pass


class ConfigError(IGOUserError):
    """Invalid or unreadable rule configuration."""
    pass


class TargetNotFoundError(IGOUserError):
    """A path given on the command line does not exist."""
    pass


class UnsupportedLanguageError(IGOUserError):
    """File extension has no import declaration parser."""
    pass


__all__ = ["IGOUserError", "ConfigError", "TargetNotFoundError", "UnsupportedLanguageError"]
