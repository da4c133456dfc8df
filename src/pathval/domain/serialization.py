"""Encode and decode PathValue instances as flat keyed records.

The record shape is ``{"path": str, "mode": int, "err": str | None}``.
Errors survive only as their message: decoding yields a ``PathValueError``
carrying the original text, not the original exception type.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from .errors import PathValueError, SerializationError

if TYPE_CHECKING:
    from .path_value import PathValue

PATH_KEY: Final[str] = "path"
MODE_KEY: Final[str] = "mode"
ERROR_KEY: Final[str] = "err"


def encode(value: "PathValue") -> dict[str, Any]:
    error = value.error
    return {
        PATH_KEY: value.path,
        MODE_KEY: value.mode,
        ERROR_KEY: str(error) if error is not None else None,
    }


def decode(record: Mapping[str, Any]) -> "PathValue":
    """Build a PathValue from a record produced by ``encode``.

    Raises:
        SerializationError: If ``path`` or ``mode`` is missing or mistyped.
    """
    from .path_value import PathValue

    path = record.get(PATH_KEY)
    mode = record.get(MODE_KEY)
    if not isinstance(path, str):
        raise SerializationError(f"'{PATH_KEY}' must be a string, got {path!r}")
    if isinstance(mode, bool) or not isinstance(mode, int):
        raise SerializationError(f"'{MODE_KEY}' must be an integer, got {mode!r}")

    raw_error = record.get(ERROR_KEY)
    error = PathValueError(str(raw_error)) if raw_error is not None else None
    return PathValue(path, mode, error)


def to_json(value: "PathValue") -> str:
    return json.dumps(encode(value))


def from_json(payload: str | bytes) -> "PathValue":
    try:
        record = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid path record: {exc}") from exc
    if not isinstance(record, dict):
        raise SerializationError("Path record must be a JSON object")
    return decode(record)


__all__ = ["encode", "decode", "to_json", "from_json"]
