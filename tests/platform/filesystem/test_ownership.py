"""Tests for owner lookup and chown helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from pathval import OwnerLookupError, PathValue, UserIdentity, get_owner
from pathval.platform.filesystem import ownership

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="requires pwd")


@pytest.fixture
def current_user() -> UserIdentity:
    """Return the effective user, skipping when it has no passwd entry."""

    try:
        return UserIdentity.current()
    except OwnerLookupError:
        pytest.skip("effective uid has no passwd entry")


def test_get_owner_returns_file_owner(tmp_path: Path, current_user: UserIdentity) -> None:
    target = tmp_path / "owned.txt"
    _ = target.write_text("x")

    owner = get_owner(str(target))

    assert owner.uid == os.stat(target).st_uid
    assert owner == PathValue.for_file(str(target)).owner()
    assert owner.uid == current_user.uid


def test_get_owner_missing_path(tmp_path: Path) -> None:
    with pytest.raises(OwnerLookupError, match="failed to get file info"):
        _ = get_owner(str(tmp_path / "missing"))


def test_get_owner_unknown_uid(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch.object(ownership.pwd, "getpwuid", side_effect=KeyError("uid"))

    with pytest.raises(OwnerLookupError, match="unknown user id"):
        _ = get_owner(str(tmp_path))


def test_lookup_by_name_round_trips(current_user: UserIdentity) -> None:
    assert UserIdentity.lookup(current_user.name) == current_user


def test_lookup_unknown_name() -> None:
    with pytest.raises(OwnerLookupError, match="unknown user"):
        _ = UserIdentity.lookup("no-such-user-for-pathval-tests")


def test_windows_reports_unimplemented(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(ownership, "_IS_WINDOWS", True)
    user = UserIdentity(name="someone", uid=1000, gid=1000)

    with pytest.raises(OwnerLookupError, match="not implemented on Windows"):
        _ = get_owner(str(tmp_path))
    with pytest.raises(OwnerLookupError):
        PathValue.for_dir(str(tmp_path)).chown(user)


def test_chown_passes_uid_and_gid(tmp_path: Path, mocker: MockerFixture) -> None:
    chown = mocker.patch.object(ownership.os, "chown")
    user = UserIdentity(name="svc", uid=1234, gid=5678)

    PathValue.for_dir(str(tmp_path)).chown(user)

    chown.assert_called_once_with(str(tmp_path), 1234, 5678)


def test_chown_to_self_succeeds(tmp_path: Path, current_user: UserIdentity) -> None:
    target = PathValue.for_file(str(tmp_path / "mine.txt"))
    target.touch()

    target.chown(current_user)

    assert os.stat(target).st_uid == current_user.uid


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "root"
    (root / "c").mkdir(parents=True)
    _ = (root / "b.txt").write_text("x")
    _ = (root / "c" / "d.txt").write_text("x")
    return root


def test_chown_tree_visits_depth_first(tree: Path, mocker: MockerFixture) -> None:
    chown = mocker.patch.object(ownership.os, "chown")
    user = UserIdentity(name="svc", uid=1, gid=2)

    PathValue.for_dir(str(tree)).chown_tree(user)

    visited = [call.args[0] for call in chown.call_args_list]
    assert visited == [
        str(tree),
        str(tree / "b.txt"),
        str(tree / "c"),
        str(tree / "c" / "d.txt"),
    ]


def test_chown_tree_on_file_changes_only_that_file(tree: Path, mocker: MockerFixture) -> None:
    chown = mocker.patch.object(ownership.os, "chown")

    PathValue.for_file(str(tree / "b.txt")).chown_tree(UserIdentity("svc", 1, 2))

    chown.assert_called_once_with(str(tree / "b.txt"), 1, 2)


def test_chown_tree_stops_at_first_failure(tree: Path, mocker: MockerFixture) -> None:
    chown = mocker.patch.object(ownership.os, "chown", side_effect=PermissionError(1, "nope"))

    with pytest.raises(PermissionError):
        PathValue.for_dir(str(tree)).chown_tree(UserIdentity("svc", 1, 2))

    assert chown.call_count == 1


def test_chown_tree_does_not_follow_directory_symlinks(
    tree: Path, tmp_path: Path, mocker: MockerFixture
) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    _ = (outside / "secret.txt").write_text("x")
    (tree / "link").symlink_to(outside, target_is_directory=True)
    chown = mocker.patch.object(ownership.os, "chown")

    PathValue.for_dir(str(tree)).chown_tree(UserIdentity("svc", 1, 2))

    visited = [call.args[0] for call in chown.call_args_list]
    assert str(tree / "link") in visited
    assert str(tree / "link" / "secret.txt") not in visited
