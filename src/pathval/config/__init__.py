"""Configuration package for pathval."""

from __future__ import annotations

from .config import Config
from .paths import default_config_path, temp_root_override

__all__ = ["Config", "default_config_path", "temp_root_override"]
