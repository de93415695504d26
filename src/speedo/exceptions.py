"""Custom exceptions for Speedo.

Messages say what went wrong and how to fix it.
"""

from __future__ import annotations


class SpeedoError(Exception):
    """Base exception for all Speedo errors."""

    pass


class ConfigError(SpeedoError):
    """Error in configuration.

    Raised when configuration is invalid or missing required fields.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        full_message = message
        if field:
            full_message = f"Configuration error in '{field}': {message}"
        super().__init__(full_message)


class HomeDirectoryError(ConfigError):
    """The home directory could not be resolved.

    Raised instead of building a log path from a missing home directory.
    """

    def __init__(self, env_var: str = "HOME"):
        self.env_var = env_var
        message = (
            "Home directory not set.\n"
            f"Set the {env_var} environment variable or pass home to Config.\n"
            "Example: Config(home='/home/me')"
        )
        super().__init__(message, field="home")


class LogWriteError(SpeedoError):
    """Error writing a profiling log.

    Raised when the log folder cannot be created or the file cannot be written.
    """

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"Could not write log to '{path}': {message}")
