"""
Summary: Named permission modes used when creating files and directories.
Why: Keep default modes in one frozen table instead of scattered octal literals.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

PRIVATE_FILE: Final[int] = 0o600
PRIVATE_EXE: Final[int] = 0o700
PRIVATE_DIR: Final[int] = 0o700

READONLY_FILE: Final[int] = 0o644
READONLY_DIR: Final[int] = 0o755

PUBLIC_FILE: Final[int] = 0o666
PUBLIC_DIR: Final[int] = 0o777


PERMISSIONS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "PRIVATE_FILE": PRIVATE_FILE,
        "PRIVATE_EXE": PRIVATE_EXE,
        "PRIVATE_DIR": PRIVATE_DIR,
        "READONLY_FILE": READONLY_FILE,
        "READONLY_DIR": READONLY_DIR,
        "PUBLIC_FILE": PUBLIC_FILE,
        "PUBLIC_DIR": PUBLIC_DIR,
    }
)


def format_mode(mode: int) -> str:
    """Render ``mode`` as a zero-padded octal literal such as ``0o644``."""

    return f"0o{mode:03o}"


__all__ = [
    "PRIVATE_FILE",
    "PRIVATE_EXE",
    "PRIVATE_DIR",
    "READONLY_FILE",
    "READONLY_DIR",
    "PUBLIC_FILE",
    "PUBLIC_DIR",
    "PERMISSIONS",
    "format_mode",
]
