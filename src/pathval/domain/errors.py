"""Exception hierarchy raised by pathval operations."""

from __future__ import annotations


class PathValueError(Exception):
    """Base class for errors originating in pathval itself."""


class NotRelativeError(PathValueError, ValueError):
    """Raised when a path does not start with the requested base path."""

    def __init__(self, path: str, base: str) -> None:
        super().__init__(f"{path} is not relative to {base}")
        self.path = path
        self.base = base


class HomeDirectoryError(PathValueError, OSError):
    """Raised (or carried) when the user's home directory cannot be determined."""


class OwnerLookupError(PathValueError, OSError):
    """Raised when file ownership cannot be read or changed on this platform."""


class SerializationError(PathValueError, ValueError):
    """Raised when an encoded path record is malformed."""


class ConfigError(PathValueError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "PathValueError",
    "NotRelativeError",
    "HomeDirectoryError",
    "OwnerLookupError",
    "SerializationError",
    "ConfigError",
]
