"""
Summary: Domain layer exports for the immutable path value model.
Why: Offer one import location for PathValue, errors, and mode constants.
"""

from __future__ import annotations

from . import permissions
from .errors import (
    ConfigError,
    HomeDirectoryError,
    NotRelativeError,
    OwnerLookupError,
    PathValueError,
    SerializationError,
)
from .path_value import PathFilter, PathValue, apply_path_filters, check

__all__ = [
    "ConfigError",
    "HomeDirectoryError",
    "NotRelativeError",
    "OwnerLookupError",
    "PathFilter",
    "PathValue",
    "PathValueError",
    "SerializationError",
    "apply_path_filters",
    "check",
    "permissions",
]
