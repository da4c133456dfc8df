"""Shared pytest fixtures for pathval tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

HOME_MODE: int = 0o750


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``~`` at a fresh directory with a known permission mode."""

    home = tmp_path / "home"
    home.mkdir()
    os.chmod(home, HOME_MODE)
    monkeypatch.setenv("HOME", str(home))
    return home
