"""Temporary directories under the user's home (``~/tmp`` by default)."""

from __future__ import annotations

import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from pathval.config.paths import temp_root_override
from pathval.config.settings import TEMP_ROOT
from pathval.domain.path_value import PathValue
from pathval.platform.logging import logger

TempDirCleanup = Callable[[], None]


def _split_pattern(name_pattern: str) -> tuple[str, str]:
    """Split a name pattern into mkdtemp prefix and suffix.

    The random part replaces the last ``*``; without one it is appended.
    """
    if "*" in name_pattern:
        prefix, _, suffix = name_pattern.rpartition("*")
        return prefix, suffix
    return name_pattern, ""


def new_temp_dir(name_pattern: str = "", *, root: Path | str | None = None) -> PathValue:
    """Create a uniquely named directory and return it.

    The directory lives under ``root``, else the configured temp root, else
    ``$PATHVAL_TEMP_ROOT``, else ``<home>/tmp``, which is created when
    missing. The root is expanded and the environment read on every call.
    The returned value carries the home directory's mode. The caller is
    responsible for removing it.

    Args:
        name_pattern: ``"temp"`` yields names like ``tempZd93lsk``;
            ``"*temp"`` yields names like ``83dwilsCtemp``; ``""`` is random.
        root: Explicit parent directory overriding configuration. It is
            expanded and resolved like the configured root.

    Raises:
        OSError: If the home lookup or either directory creation fails.
    """
    home = PathValue.home()
    if home.error is not None:
        raise home.error

    configured_root = temp_root_override(root if root is not None else TEMP_ROOT)
    if configured_root is not None:
        temp_root = PathValue(str(configured_root), home.mode)
    else:
        temp_root = home.join("tmp")
    temp_root.mkdirs()

    prefix, suffix = _split_pattern(name_pattern)
    created = tempfile.mkdtemp(suffix=suffix, prefix=prefix, dir=temp_root.path)
    logger.debug(
        "Created temporary directory %s",
        created,
        extra={"operation": "tempdir", "path": created},
    )
    return PathValue(created, home.mode)


def new_temp_dir_with_cleanup(
    name_pattern: str = "", *, root: Path | str | None = None
) -> tuple[PathValue, TempDirCleanup]:
    """Create a temporary directory and return it with a removal callback.

    Example:
        tmp, cleanup = new_temp_dir_with_cleanup("build")
        try:
            ...
        finally:
            cleanup()
    """
    directory = new_temp_dir(name_pattern, root=root)

    def cleanup() -> None:
        directory.remove()

    return directory, cleanup


@contextmanager
def temp_dir(name_pattern: str = "", *, root: Path | str | None = None) -> Iterator[PathValue]:
    """Yield a temporary directory that is removed when the block exits."""

    directory, cleanup = new_temp_dir_with_cleanup(name_pattern, root=root)
    try:
        yield directory
    finally:
        cleanup()


__all__ = ["TempDirCleanup", "new_temp_dir", "new_temp_dir_with_cleanup", "temp_dir"]
