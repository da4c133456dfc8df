"""Where: src/pathval/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to platform modules without file I/O.
Trade-offs: - Invalid values silently fall back to defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pathval.config.config import (
    CONSOLE_LOG_LEVEL_DEFAULT,
    COPY_BUFFER_SIZE_DEFAULT,
    config as app_config,
)
# Temporary directories --------------------------------------------------------

# Raw config value. Expansion and the $PATHVAL_TEMP_ROOT fallback happen per call.
TEMP_ROOT: Path | None = app_config.temp_root

# Copy -------------------------------------------------------------------------

_copy_buffer_size = getattr(app_config, "copy_buffer_size", COPY_BUFFER_SIZE_DEFAULT)
COPY_BUFFER_SIZE: int = (
    _copy_buffer_size
    if isinstance(_copy_buffer_size, int) and _copy_buffer_size > 0
    else COPY_BUFFER_SIZE_DEFAULT
)

# Logging ----------------------------------------------------------------------

LOG_FILE: Path | None = app_config.log_file

_level_name = str(app_config.console_log_level or CONSOLE_LOG_LEVEL_DEFAULT).upper()
_level = logging.getLevelName(_level_name)
CONSOLE_LOG_LEVEL: int = _level if isinstance(_level, int) else logging.WARNING


__all__ = [
    "TEMP_ROOT",
    "COPY_BUFFER_SIZE",
    "LOG_FILE",
    "CONSOLE_LOG_LEVEL",
]
