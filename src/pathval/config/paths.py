"""Shared path utilities for configuration and temporary locations.

This module centralizes how the library discovers locations for its
configuration file and the root used for temporary directories.

Policy:
- Config: ``$PATHVAL_CONFIG`` when set, else
  ``$XDG_CONFIG_HOME/pathval/config.toml`` (``~/.config`` when unset).
- Temp root: the config value, else ``$PATHVAL_TEMP_ROOT``, else ``<home>/tmp``.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "PATHVAL_CONFIG"
ENV_TEMP_ROOT: Final[str] = "PATHVAL_TEMP_ROOT"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _config_home(env: Mapping[str, str] | None = None) -> Path:
    """Return the XDG configuration home, falling back to ``~/.config``."""

    mapping = env if env is not None else os.environ
    xdg = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    if xdg:
        return Path(xdg)
    return Path("~") / ".config"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Args:
        env: Optional environment mapping; defaults to ``os.environ``.

    Returns:
        Path: Absolute location of ``config.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _config_home(env) / "pathval" / "config.toml",
    )


def temp_root_override(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the configured temp root, or ``None`` to use ``<home>/tmp``.

    Args:
        explicit_path: Value from the configuration file, if any.
        env: Optional environment mapping; defaults to ``os.environ``.
    """
    mapping = env if env is not None else os.environ
    if explicit_path is None and not (mapping.get(ENV_TEMP_ROOT) or "").strip():
        return None

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=mapping,
        env_var=ENV_TEMP_ROOT,
        default_factory=lambda: Path("~") / "tmp",
    )


__all__ = [
    "ENV_CONFIG_PATH",
    "ENV_TEMP_ROOT",
    "default_config_path",
    "temp_root_override",
    "resolve_overridable_path",
]
