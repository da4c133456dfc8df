"""
pathval - immutable, chainable filesystem path values.

Example usage:

    from pathval import PathValue, permissions

    config_dir = PathValue("~/.config/myapp", permissions.PRIVATE_DIR).resolve()
    if config_dir.has_error:
        raise config_dir.error

    config_dir.mkdirs()
    settings = config_dir.join("settings.toml").with_mode(permissions.PRIVATE_FILE)
    settings.write_text("debug = false\\n")
"""

from __future__ import annotations

from .domain import (
    ConfigError,
    HomeDirectoryError,
    NotRelativeError,
    OwnerLookupError,
    PathFilter,
    PathValue,
    PathValueError,
    SerializationError,
    apply_path_filters,
    check,
    permissions,
)
from .domain.serialization import from_json, to_json
from .platform.filesystem.ownership import UserIdentity, get_owner
from .platform.filesystem.tempdir import new_temp_dir, new_temp_dir_with_cleanup, temp_dir

__all__ = [
    "ConfigError",
    "HomeDirectoryError",
    "NotRelativeError",
    "OwnerLookupError",
    "PathFilter",
    "PathValue",
    "PathValueError",
    "SerializationError",
    "UserIdentity",
    "apply_path_filters",
    "check",
    "from_json",
    "get_owner",
    "new_temp_dir",
    "new_temp_dir_with_cleanup",
    "permissions",
    "temp_dir",
    "to_json",
]
__version__ = "0.2.0"
