"""Tests for configuration path resolution helpers."""

from pathlib import Path

from pathval.config.paths import (
    default_config_path,
    resolve_overridable_path,
    temp_root_override,
)


def test_config_path_env_override(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path({"PATHVAL_CONFIG": str(target)}) == target.resolve()


def test_config_path_follows_xdg_config_home(tmp_path: Path) -> None:
    expected = (tmp_path / "xdg" / "pathval" / "config.toml").resolve()

    assert default_config_path({"XDG_CONFIG_HOME": str(tmp_path / "xdg")}) == expected


def test_config_path_default_under_home() -> None:
    expected = (Path("~").expanduser() / ".config" / "pathval" / "config.toml").resolve()

    assert default_config_path({}) == expected


def test_blank_env_override_is_ignored() -> None:
    assert default_config_path({"PATHVAL_CONFIG": "   "}) == default_config_path({})


def test_temp_root_override_defaults_to_none() -> None:
    assert temp_root_override(None, env={}) is None


def test_temp_root_override_from_env_and_config(tmp_path: Path) -> None:
    from_env = temp_root_override(None, env={"PATHVAL_TEMP_ROOT": str(tmp_path / "env")})
    from_config = temp_root_override(
        tmp_path / "config", env={"PATHVAL_TEMP_ROOT": str(tmp_path / "env")}
    )

    assert from_env == (tmp_path / "env").resolve()
    assert from_config == (tmp_path / "config").resolve()


def test_resolve_overridable_path_uses_factory(tmp_path: Path) -> None:
    result = resolve_overridable_path(
        explicit_path=None,
        env={},
        env_var="UNSET_VAR",
        default_factory=lambda: tmp_path / "fallback",
    )

    assert result == (tmp_path / "fallback").resolve()
