"""Configuration management for pathval."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from pathval.config.file_ops import write_text_file
from pathval.config.paths import default_config_path
from pathval.domain.errors import ConfigError

logger = logging.getLogger(__name__)

COPY_BUFFER_SIZE_DEFAULT: Final[int] = 1024 * 1024
CONSOLE_LOG_LEVEL_DEFAULT: Final[str] = "WARNING"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Root directory for temporary directories (defaults to ~/tmp)
    temp_root: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Console handler level name
    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT

    # Chunk size used when copying file contents
    copy_buffer_size: int = COPY_BUFFER_SIZE_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` (the default config path when omitted).

        Returns:
            Path: Location the configuration was written to.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target if target is not None else default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathval Configuration File")
        lines.append("")

        lines.append("# Root directory for temporary directories (optional)")
        lines.append('# Example: temp_root = "~/tmp"')
        if config["temp_root"] is not None:
            lines.append(f"temp_root = {self._format_toml_value(config['temp_root'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "~/.cache/pathval/pathval.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR)")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        lines.append("# Buffer size in bytes used by copy operations")
        lines.append(
            f"copy_buffer_size = {self._format_toml_value(config['copy_buffer_size'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from ``source`` or the default config path.

        A missing file yields defaults without writing anything to disk.

        Raises:
            ConfigError: If the file exists but is not valid TOML or has
                unknown keys.
        """
        if source is None and cls._instance is not None:
            return cls._instance

        config_file = source if source is not None else default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                raise ConfigError(
                    f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
                )

            instance = cls(**config_dict)
            logger.debug("Configuration loaded from %s", config_file)

        if source is None:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached singleton so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


# Global configuration instance
config = Config.load()
