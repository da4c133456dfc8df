"""Where: src/pathval/platform/filesystem/ownership.py
What: Owner lookup and ownership changes for files and directory trees.
Why: Isolate the platform-specific identity calls (``pwd``, ``os.chown``).
Assumptions: - POSIX systems expose ``pwd`` and ``os.chown``; Windows does not.
Trade-offs: - Windows lookups fail with ``OwnerLookupError`` instead of using Win32.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pathval.domain.errors import OwnerLookupError
from pathval.platform.logging import logger

_IS_WINDOWS = sys.platform == "win32"

if not _IS_WINDOWS:
    import pwd

if TYPE_CHECKING:
    from pathval.domain.path_value import PathValue


@dataclass(slots=True, frozen=True)
class UserIdentity:
    """Numeric and named identity of an account."""

    name: str
    uid: int
    gid: int
    home: str = ""

    @classmethod
    def from_passwd(cls, entry: Any) -> "UserIdentity":
        """Build an identity from a ``pwd.struct_passwd`` entry."""

        return cls(name=entry.pw_name, uid=entry.pw_uid, gid=entry.pw_gid, home=entry.pw_dir)

    @classmethod
    def lookup(cls, name: str) -> "UserIdentity":
        """Look up an account by login name.

        Raises:
            OwnerLookupError: If the platform has no user database or the
                name is unknown.
        """
        _require_posix("user lookup")
        try:
            return cls.from_passwd(pwd.getpwnam(name))
        except KeyError as exc:
            raise OwnerLookupError(f"unknown user: {name}") from exc

    @classmethod
    def current(cls) -> "UserIdentity":
        """Return the identity of the effective user of this process."""

        _require_posix("user lookup")
        uid = os.geteuid()
        try:
            return cls.from_passwd(pwd.getpwuid(uid))
        except KeyError as exc:
            raise OwnerLookupError(f"unknown user id: {uid}") from exc


def _require_posix(action: str) -> None:
    if _IS_WINDOWS:
        raise OwnerLookupError(f"{action} is not implemented on Windows")


def get_owner(path: str | os.PathLike[str]) -> UserIdentity:
    """Return the owner of ``path``.

    Raises:
        OwnerLookupError: If the file cannot be stat'ed, the uid has no
            account, or the platform is unsupported.
    """
    _require_posix("file owner lookup")
    try:
        info = os.stat(path)
    except OSError as exc:
        raise OwnerLookupError(f"failed to get file info for {os.fspath(path)}: {exc}") from exc

    try:
        return UserIdentity.from_passwd(pwd.getpwuid(info.st_uid))
    except KeyError as exc:
        raise OwnerLookupError(f"unknown user id: {info.st_uid}") from exc


def chown(path: "PathValue", user: UserIdentity) -> None:
    """Change the owner and group of ``path`` to ``user``."""

    _require_posix("chown")
    os.chown(path.path, user.uid, user.gid)
    logger.debug(
        "Changed owner of %s to %s",
        path.path,
        user.name,
        extra={"operation": "chown", "path": path.path, "detail": user.name},
    )


def chown_tree(path: "PathValue", user: UserIdentity) -> None:
    """Apply ``chown`` to ``path`` and, for directories, every entry below it.

    Entries are visited depth-first; the first failure aborts the walk.
    Symbolic links to directories are chowned but not descended into.
    """
    chown(path, user)
    if not path.is_dir() or os.path.islink(path.path):
        return
    for child in path.read_dir():
        chown_tree(child, user)


__all__ = ["UserIdentity", "get_owner", "chown", "chown_tree"]
