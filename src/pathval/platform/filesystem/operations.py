"""
Summary: Filesystem operations consuming a PathValue and calling the host OS.
Why: Keep OS calls out of the value model so each stays a single delegation.
"""

from __future__ import annotations

import errno
import os
import shutil
import stat as stat_module
from datetime import datetime
from typing import IO, TYPE_CHECKING

from pathval.config.settings import COPY_BUFFER_SIZE
from pathval.platform.logging import logger

if TYPE_CHECKING:
    from pathval.domain.path_value import PathFilter, PathValue

_NOT_FOUND_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def stat(path: "PathValue") -> os.stat_result:
    return os.stat(path.path)


def exists(path: "PathValue") -> bool:
    """Return ``True`` only when ``stat`` succeeds.

    Any failure, not only a missing entry, is reported as ``False``; other
    errors (permission denied, I/O) are logged at debug level.
    """
    try:
        _ = os.stat(path.path)
    except OSError as exc:
        if exc.errno not in _NOT_FOUND_ERRNOS:
            logger.debug("stat failed for %s: %s", path.path, exc)
        return False
    return True


def is_dir(path: "PathValue") -> bool:
    try:
        return stat_module.S_ISDIR(os.stat(path.path).st_mode)
    except OSError:
        return False


def is_file(path: "PathValue") -> bool:
    """Return ``not is_dir``; missing or unreadable paths count as files."""

    return not is_dir(path)


def mod_time(path: "PathValue") -> tuple[datetime, OSError | None]:
    """Return the modification time, or the current time with the error."""

    try:
        info = os.stat(path.path)
    except OSError as exc:
        return datetime.now(), exc
    return datetime.fromtimestamp(info.st_mtime), None


def read(path: "PathValue") -> bytes:
    with open(path.path, "rb") as handle:
        return handle.read()


def read_text(path: "PathValue", encoding: str = "utf-8") -> str:
    return read(path).decode(encoding)


def write(path: "PathValue", data: bytes) -> None:
    """Truncate and write ``data``; new files are created with ``path.mode``."""

    fd = os.open(path.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, path.mode)
    with os.fdopen(fd, "wb") as handle:
        _ = handle.write(data)
    logger.debug(
        "Wrote %d bytes to %s",
        len(data),
        path.path,
        extra={"operation": "write", "path": path.path, "detail": f"{len(data)} bytes"},
    )


def write_text(path: "PathValue", text: str, encoding: str = "utf-8") -> None:
    write(path, text.encode(encoding))


def touch(path: "PathValue") -> None:
    write(path, b"")


def open_path(path: "PathValue") -> IO[bytes]:
    """Open an existing file for reading, or create it when absent."""

    if exists(path):
        return open(path.path, "rb")
    fd = os.open(path.path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, path.mode)
    return os.fdopen(fd, "w+b")


def mkdir(path: "PathValue") -> None:
    os.mkdir(path.path, path.mode)
    logger.debug("Created directory %s", path.path, extra={"operation": "mkdir", "path": path.path})


def mkdirs(path: "PathValue") -> None:
    os.makedirs(path.path, path.mode, exist_ok=True)
    logger.debug(
        "Ensured directory tree %s",
        path.path,
        extra={"operation": "mkdir", "path": path.path, "detail": "recursive"},
    )


def remove(path: "PathValue") -> None:
    """Remove a file or a whole directory tree; absent paths are ignored."""

    try:
        if os.path.isdir(path.path) and not os.path.islink(path.path):
            shutil.rmtree(path.path)
        else:
            os.remove(path.path)
    except FileNotFoundError:
        return
    logger.debug("Removed %s", path.path, extra={"operation": "remove", "path": path.path})


def rename(source: "PathValue", target: "PathValue") -> "PathValue":
    """Rename ``source`` to ``target`` and return ``target``.

    Fails across filesystem boundaries, as ``os.rename`` does.
    """
    os.rename(source.path, target.path)
    logger.debug(
        "Renamed %s to %s",
        source.path,
        target.path,
        extra={"operation": "rename", "path": source.path, "target": target.path},
    )
    return target


def move_to(source: "PathValue", directory: "PathValue") -> "PathValue":
    """Create ``directory`` if needed and rename ``source`` into it."""

    mkdirs(directory)
    return rename(source, directory.join(source.name()))


def copy_to(source: "PathValue", target: "PathValue") -> "PathValue":
    """Copy the bytes of ``source`` into ``target`` and sync to disk.

    The target is truncated only after it is known to be a different file,
    so copying a file onto itself (under any alias) leaves it intact.
    Not atomic: a partial ``target`` may remain if the copy fails midway.

    Raises:
        shutil.SameFileError: If ``source`` and ``target`` are the same file.
    """
    with open(source.path, "rb") as src:
        fd = os.open(target.path, os.O_WRONLY | os.O_CREAT, target.mode)
        with os.fdopen(fd, "wb") as dst:
            src_info = os.fstat(src.fileno())
            dst_info = os.fstat(dst.fileno())
            if (src_info.st_dev, src_info.st_ino) == (dst_info.st_dev, dst_info.st_ino):
                raise shutil.SameFileError(
                    f"{source.path} and {target.path} are the same file"
                )
            os.ftruncate(dst.fileno(), 0)
            shutil.copyfileobj(src, dst, COPY_BUFFER_SIZE)
            dst.flush()
            os.fsync(dst.fileno())
    logger.debug(
        "Copied %s to %s",
        source.path,
        target.path,
        extra={"operation": "copy", "path": source.path, "target": target.path},
    )
    return target


def read_dir(path: "PathValue", *filters: "PathFilter") -> list["PathValue"]:
    """List the children of a directory, or of the parent when ``path`` is a file.

    Children are returned in name order, keep ``path``'s mode, and are
    included only when every filter accepts them.
    """
    from pathval.domain.path_value import apply_path_filters

    directory = path if is_dir(path) else path.parent()
    children = (directory.join(name) for name in sorted(os.listdir(directory.path)))
    return [child for child in children if apply_path_filters(child, *filters)]


__all__ = [
    "stat",
    "exists",
    "is_dir",
    "is_file",
    "mod_time",
    "read",
    "read_text",
    "write",
    "write_text",
    "touch",
    "open_path",
    "mkdir",
    "mkdirs",
    "remove",
    "rename",
    "move_to",
    "copy_to",
    "read_dir",
]
