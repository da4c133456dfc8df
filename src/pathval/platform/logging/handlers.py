"""Rich console handler that renders path-carrying log records.

Where: platform/logging/handlers.py
What: Format ``path`` / ``target`` record extras with styled separators.
Why: Keep long absolute paths readable in terminal output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that renders filesystem operations with compact paths."""

    _OPERATION_STYLES: ClassVar[dict[str, str]] = {
        "read": "cyan",
        "write": "green",
        "mkdir": "green",
        "remove": "red",
        "rename": "magenta",
        "copy": "magenta",
        "chown": "yellow",
        "tempdir": "blue",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators and ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."

        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_operation_message(self, record: logging.LogRecord) -> Text | None:
        """Render records tagged with an ``operation`` extra.

        The formatted message is replaced by the operation name, the compact
        path (and target), and an optional ``detail`` extra.
        """

        operation = getattr(record, "operation", None)
        path = getattr(record, "path", None)
        if not isinstance(operation, str) or path is None:
            return None

        color = self._OPERATION_STYLES.get(operation, "blue")
        text = Text()
        _ = text.append(f"{operation} ", style=Style(color=color, bold=True))
        _ = text.append_text(self._format_path(str(path)))

        target = getattr(record, "target", None)
        if target is not None:
            _ = text.append(" → ", style=Style(color=color))
            _ = text.append_text(self._format_path(str(target)))

        detail = getattr(record, "detail", None)
        if detail:
            _ = text.append(f" ({detail})", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for filesystem operations."""

        operation_text = self._render_operation_message(record)
        if operation_text is not None:
            return operation_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
