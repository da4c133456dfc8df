"""Test configuration management."""

from pathlib import Path

import pytest

from pathval import ConfigError
from pathval.config.config import COPY_BUFFER_SIZE_DEFAULT, Config


def test_default_config() -> None:
    config = Config()

    assert config.temp_root is None
    assert config.log_file is None
    assert config.console_log_level == "WARNING"
    assert config.copy_buffer_size == COPY_BUFFER_SIZE_DEFAULT


def test_string_paths_are_converted() -> None:
    config = Config(temp_root="/scratch", log_file="  ")  # type: ignore[arg-type]

    assert config.temp_root == Path("/scratch")
    assert config.log_file is None


def test_load_missing_file_uses_defaults_without_writing(config_file: Path) -> None:
    config = Config.load()

    assert config == Config()
    assert not config_file.exists()


def test_save_load_toml(config_file: Path) -> None:
    original = Config(
        temp_root=Path("/scratch/tmp"),
        log_file=Path("/var/log/pathval.log"),
        console_log_level="DEBUG",
        copy_buffer_size=4096,
    )

    written = original.save()
    assert written == config_file
    assert config_file.exists()

    Config.reset()
    loaded = Config.load()

    assert loaded == original
    assert Config.load() is loaded


def test_save_omits_unset_paths(tmp_path: Path) -> None:
    target = tmp_path / "plain.toml"

    _ = Config().save(target)

    content = target.read_text(encoding="utf-8")
    assert "\ntemp_root =" not in content
    assert "console_log_level = \"WARNING\"" in content
    assert Config.load(target) == Config()


def test_windows_style_paths_survive_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "win.toml"
    original = Config(temp_root=Path("C:\\Users\\me\\tmp"))

    _ = original.save(target)

    assert Config.load(target).temp_root == Path("C:\\Users\\me\\tmp")


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    target = tmp_path / "broken.toml"
    _ = target.write_text("temp_root = [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration file"):
        _ = Config.load(target)


def test_unknown_keys_raise_config_error(tmp_path: Path) -> None:
    target = tmp_path / "extra.toml"
    _ = target.write_text('surprise = "value"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="surprise"):
        _ = Config.load(target)
