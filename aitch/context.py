"""Rendering context: the output writer, dynamic data and the first write error."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Context", "RenderError", "get", "must_get"]

_MISSING = object()


class RenderError(Exception):
    """Raised when rendering failed because the writer reported an error."""


@dataclass
class Context:
    """State shared by every node while a tree is rendered.

    ``error`` holds the first error the writer raised; once it is set,
    further writes are ignored.
    """

    writer: Any = None
    data: Optional[dict] = None
    cargo: Any = None
    parent: Optional["Context"] = None
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self.data is None:
            self.data = {}

    def write(self, data) -> None:
        """Write text (or UTF-8 bytes) to the writer unless an error was already recorded."""
        if self.error is not None:
            return
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        try:
            self.writer.write(data)
        except (OSError, ValueError) as exc:
            self.error = exc


def _matches(value, kind) -> bool:
    if value is None or not isinstance(value, kind):
        return False
    if isinstance(value, bool):
        kinds = kind if isinstance(kind, tuple) else (kind,)
        return any(k is bool or k is object for k in kinds)
    return True


def _lookup(ctx: Context, key: str, kind):
    if ctx.data and key in ctx.data and _matches(ctx.data[key], kind):
        return ctx.data[key]
    cargo = ctx.cargo
    if cargo is None:
        return _MISSING
    if isinstance(cargo, Mapping):
        if key in cargo and _matches(cargo[key], kind):
            return cargo[key]
        return _MISSING
    if key.startswith("_"):
        return _MISSING
    value = getattr(cargo, key, _MISSING)
    if value is not _MISSING and _matches(value, kind):
        return value
    return _MISSING


def get(ctx: Optional[Context], key: str, kind=object, default=None):
    """Return the value for ``key`` from the context data, then from the cargo.

    The value must be an instance of ``kind``; otherwise ``default`` is returned.
    The cargo may be a mapping or an object whose attribute is named ``key``.
    """
    if ctx is None:
        return default
    value = _lookup(ctx, key, kind)
    return default if value is _MISSING else value


def must_get(ctx: Optional[Context], key: str, kind=object):
    """Like :func:`get`, but raise ``KeyError`` when the value is missing or of the wrong kind."""
    value = _MISSING if ctx is None else _lookup(ctx, key, kind)
    if value is _MISSING:
        raise KeyError(f"missing or invalid context data for key {key!r}")
    return value