"""
Summary: Immutable path value bundling a path string, a mode, and a carried error.
Why: Replace string concatenation and scattered os calls with chainable values.
"""

from __future__ import annotations

import os
import stat as stat_module
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import IO, Any

from pathval.platform.filesystem import operations, ownership
from pathval.platform.logging import logger

from .errors import HomeDirectoryError, NotRelativeError
from .permissions import PRIVATE_DIR, READONLY_DIR, READONLY_FILE

PathFilter = Callable[["PathValue"], bool]


def _clean(path: str) -> str:
    """Lexically clean ``path``; the empty string stays empty.

    POSIX ``normpath`` keeps exactly two leading slashes; they collapse to one.
    """

    if not path:
        return ""
    cleaned = os.path.normpath(path)
    if os.sep == "/" and cleaned.startswith("//"):
        cleaned = cleaned[1:]
    return cleaned


def _join(*elements: str) -> str:
    """Join non-empty elements with the separator, then clean the result."""

    non_empty = [element for element in elements if element]
    if not non_empty:
        return ""
    return _clean(os.sep.join(non_empty))


@dataclass(slots=True, frozen=True)
class PathValue:
    """A path string plus the permission mode used when creating it.

    Every method that looks like a mutation returns a new instance. The
    ``error`` field is advisory: operations that can fail while still
    producing a usable value (``home``, ``resolve``) store the failure here
    instead of raising, so callers must check ``has_error`` (or ``check``)
    before trusting the path.

    ``==`` compares path, mode and error; ``equal`` compares path strings only.
    """

    path: str
    mode: int
    error: BaseException | None = None

    # Constructors ---------------------------------------------------------

    @classmethod
    def for_file(cls, path: str) -> "PathValue":
        """Create a value with the default file mode (``0o644``)."""

        return cls(path, READONLY_FILE)

    @classmethod
    def for_dir(cls, path: str) -> "PathValue":
        """Create a value with the default directory mode (``0o755``)."""

        return cls(path, READONLY_DIR)

    @classmethod
    def home(cls) -> "PathValue":
        """Return the current user's home directory.

        On success the mode is the directory's actual permission bits. If the
        home directory cannot be determined or stat'ed, the returned value has
        mode ``PRIVATE_DIR`` and carries the error. A set but empty
        ``$HOME`` counts as undetermined.
        """

        if os.name == "posix" and os.environ.get("HOME") == "":
            logger.debug("$HOME is set but empty")
            return cls("", PRIVATE_DIR, HomeDirectoryError("$HOME is empty"))

        path = os.path.expanduser("~")
        if path == "~" or not path:
            logger.debug("Could not determine home directory")
            return cls("", PRIVATE_DIR, HomeDirectoryError("could not determine home directory"))

        try:
            info = os.stat(path)
        except OSError as exc:
            logger.debug("Failed to stat home directory %s: %s", path, exc)
            return cls(path, PRIVATE_DIR, exc)

        return cls(path, stat_module.S_IMODE(info.st_mode))

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "PathValue":
        """Rebuild a value from the flat record produced by ``to_dict``."""

        from .serialization import decode

        return decode(record)

    # Field access and copy-on-write ---------------------------------------

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def with_mode(self, mode: int) -> "PathValue":
        """Return a copy with ``mode`` replaced.

        This never touches the filesystem; use ``write``/``mkdir`` to apply it.
        """

        return replace(self, mode=mode)

    def with_path(self, path: str) -> "PathValue":
        return replace(self, path=path)

    def with_error(self, error: BaseException | None) -> "PathValue":
        return replace(self, error=error)

    def copy(self) -> "PathValue":
        return replace(self)

    def equal(self, other: "PathValue") -> bool:
        """Return whether both values hold the same path string."""

        return self.path == other.path

    def to_dict(self) -> dict[str, Any]:
        from .serialization import encode

        return encode(self)

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    # Pure path algorithms -------------------------------------------------

    def parent(self) -> "PathValue":
        """Return the parent directory; ``"."`` for a bare name."""

        return self.with_path(_clean(os.path.dirname(self.path)) or ".")

    def join(self, *segments: str) -> "PathValue":
        """Append ``segments`` to the path and clean the result.

        The segments are joined together first and then appended as a single
        unit. No legality or length validation is performed.
        """

        return self.with_path(_join(self.path, _join(*segments)))

    def resolve(self) -> "PathValue":
        """Expand ``~`` and relative paths to an absolute path.

        Values already carrying an error are returned unchanged. A failure to
        determine the working directory is recorded on the returned value.
        """

        if self.has_error:
            return self

        if self.path.startswith("~"):
            remainder = self.path.lstrip("~").lstrip(os.sep)
            return PathValue.home().join(remainder).with_mode(self.mode)

        try:
            absolute = os.path.abspath(self.path)
        except OSError as exc:
            logger.debug("Failed to resolve %s: %s", self.path, exc)
            return self.with_error(exc)
        return self.with_error(None).with_path(absolute)

    def name(self) -> str:
        """Return the final path segment, ignoring trailing separators."""

        if not self.path:
            return "."
        stripped = self.path.rstrip(os.sep)
        if not stripped:
            return os.sep
        return os.path.basename(stripped)

    def suffix(self) -> str:
        """Return the extension of the final segment, dot included.

        ``/some/zipfile.tar.gz`` -> ``.gz``; ``/some/dirname`` -> ``""``.
        """

        _, tail = os.path.split(self.path)
        index = tail.rfind(".")
        if index < 0:
            return ""
        return tail[index:]

    def stem(self) -> str:
        """Return the final segment without its extension.

        Names with one or two dot-separated parts keep only the first part.
        Longer names drop the last two parts, so ``archive.tar.gz`` gives
        ``archive`` and ``v1.2.3.release`` gives ``v1.2``.
        """

        segments = self.name().split(".")
        if len(segments) <= 2:
            return segments[0]
        return ".".join(segments[:-2])

    def split(self) -> list[str]:
        """Split on the OS separator, keeping empty segments."""

        return self.path.split(os.sep)

    def relative_to(self, base: "PathValue") -> "PathValue":
        """Return this path expressed relative to ``base`` by string prefix.

        Raises:
            NotRelativeError: If the path string does not start with ``base``.
        """

        if not self.path.startswith(base.path):
            raise NotRelativeError(self.path, base.path)
        remainder = self.path[len(base.path):].removeprefix(os.sep)
        return PathValue(remainder, self.mode)

    # Filesystem delegations -----------------------------------------------

    def stat(self) -> os.stat_result:
        return operations.stat(self)

    def exists(self) -> bool:
        return operations.exists(self)

    def is_dir(self) -> bool:
        return operations.is_dir(self)

    def is_file(self) -> bool:
        return operations.is_file(self)

    def mod_time(self) -> tuple[datetime, OSError | None]:
        return operations.mod_time(self)

    def read(self) -> bytes:
        return operations.read(self)

    def read_text(self, encoding: str = "utf-8") -> str:
        return operations.read_text(self, encoding=encoding)

    def write(self, data: bytes) -> None:
        operations.write(self, data)

    def write_text(self, text: str, encoding: str = "utf-8") -> None:
        operations.write_text(self, text, encoding=encoding)

    def touch(self) -> None:
        operations.touch(self)

    def open(self) -> IO[bytes]:
        return operations.open_path(self)

    def mkdir(self) -> None:
        operations.mkdir(self)

    def mkdirs(self) -> None:
        operations.mkdirs(self)

    def remove(self) -> None:
        operations.remove(self)

    def rename(self, target: "PathValue") -> "PathValue":
        return operations.rename(self, target)

    def move_to(self, directory: "PathValue") -> "PathValue":
        return operations.move_to(self, directory)

    def copy_to(self, target: "PathValue") -> "PathValue":
        return operations.copy_to(self, target)

    def read_dir(self, *filters: PathFilter) -> list["PathValue"]:
        return operations.read_dir(self, *filters)

    def owner(self) -> ownership.UserIdentity:
        return ownership.get_owner(self.path)

    def chown(self, user: ownership.UserIdentity) -> None:
        ownership.chown(self, user)

    def chown_tree(self, user: ownership.UserIdentity) -> None:
        ownership.chown_tree(self, user)


def check(*paths: PathValue | Iterable[PathValue]) -> BaseException | None:
    """Return the first error carried by ``paths`` in order, or ``None``.

    Accepts values directly or iterables of values, so both
    ``check(a, b)`` and ``check([a, b])`` work.
    """

    for item in paths:
        candidates = (item,) if isinstance(item, PathValue) else item
        for candidate in candidates:
            if candidate.error is not None:
                return candidate.error
    return None


def apply_path_filters(path: PathValue, *filters: PathFilter) -> bool:
    """Return ``True`` when every filter accepts ``path`` (vacuously for none)."""

    return all(path_filter(path) for path_filter in filters)


__all__ = ["PathFilter", "PathValue", "apply_path_filters", "check"]
