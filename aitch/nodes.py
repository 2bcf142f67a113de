"""Core node and value types for writing fluent HTML."""

from __future__ import annotations

import enum
import html
import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from aitch.context import Context, RenderError

__all__ = [
    "NodeType",
    "Node",
    "Value",
    "ConcatValue",
    "DynamicValueKey",
    "Text",
    "Comment",
    "Fragment",
    "new_values",
    "concat_value",
    "text",
    "comment",
    "fragment",
    "is_valid_name",
    "raise_on_invalid_name",
]

#: When true, factories raise ``ValueError`` for invalid element/attribute names
#: instead of returning ``None``.
raise_on_invalid_name = False

_NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9._\-:]*")

_CO_VARARGS = 0x04


def is_valid_name(name: str) -> bool:
    """Return whether ``name`` is usable as an element or attribute name."""
    return isinstance(name, str) and _NAME_PATTERN.fullmatch(name) is not None


class NodeType(enum.Enum):
    ELEMENT = enum.auto()
    ATTRIBUTE = enum.auto()
    TEXT = enum.auto()
    COMMENT = enum.auto()
    PROCESSING_INSTRUCTION = enum.auto()
    DOCUMENT = enum.auto()
    FRAGMENT = enum.auto()
    COLLECTION = enum.auto()
    CONDITIONAL = enum.auto()
    DYNAMIC = enum.auto()
    IMPERATIVE = enum.auto()
    ITERATOR = enum.auto()


class Node(ABC):
    """Anything that can be rendered: elements, attributes, text and so on."""

    node_type: ClassVar[NodeType]
    name: str

    @abstractmethod
    def render(self, ctx: Context) -> None:
        """Write the node to the context writer; raise ``RenderError`` on failure."""

    def _done(self, ctx: Context) -> None:
        if ctx.error is not None:
            raise RenderError(str(ctx.error)) from ctx.error


class DynamicValueKey(str):
    """A key whose value is taken from ``Context.data`` at render time."""


def _accepts_argument(fn) -> bool | None:
    """Whether ``fn`` takes a positional argument; ``None`` if unknown."""
    func = getattr(fn, "__func__", None)
    if func is not None:
        code = getattr(func, "__code__", None)
        bound = 1
    else:
        code = getattr(fn, "__code__", None)
        bound = 0
        if code is None:
            call = getattr(type(fn), "__call__", None)
            code = getattr(call, "__code__", None)
            bound = 1
    if code is None:
        return None
    if code.co_flags & _CO_VARARGS:
        return True
    return code.co_argcount - bound > 0


def _call(fn, ctx: Context):
    return fn(ctx) if _accepts_argument(fn) else fn()


def _stringify(obj: Any, ctx: Context) -> str:
    if obj is None:
        return ""
    if isinstance(obj, Value):
        return obj._resolve(ctx)
    if isinstance(obj, DynamicValueKey):
        data = ctx.data or {}
        return _stringify(data.get(str(obj)), ctx)
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).decode("utf-8")
    if callable(obj):
        return _stringify(_call(obj, ctx), ctx)
    return str(obj)


class Value(ABC):
    """A piece of content resolved to text at render time."""

    @abstractmethod
    def _resolve(self, ctx: Context) -> str:
        ...

    def render(self, ctx: Context) -> bool:
        """Write the value; return whether anything was written."""
        resolved = self._resolve(ctx)
        if resolved:
            ctx.write(resolved)
        return bool(resolved)


class _Literal(Value):
    __slots__ = ("source",)

    def __init__(self, source: Any):
        self.source = source

    def _resolve(self, ctx: Context) -> str:
        return _stringify(self.source, ctx)

    def __repr__(self) -> str:
        return f"_Literal({self.source!r})"


class ConcatValue(Value):
    """A value made of several parts written one after another."""

    def __init__(self, *parts: Any):
        self.parts = new_values(*parts)

    def _resolve(self, ctx: Context) -> str:
        return "".join(part._resolve(ctx) for part in self.parts)


def _to_value(obj: Any) -> Value:
    return obj if isinstance(obj, Value) else _Literal(obj)


def new_values(*args: Any) -> list[Value]:
    """Wrap every non-``None`` argument as a :class:`Value`."""
    return [_to_value(arg) for arg in args if arg is not None]


def concat_value(*args: Any) -> ConcatValue:
    """Create a value that concatenates all of its arguments."""
    return ConcatValue(*args)


class Text(Node):
    """Text content; ``&``, ``<`` and ``>`` are escaped."""

    node_type = NodeType.TEXT
    name = "#text"

    def __init__(self, *contents: Any):
        self.values = new_values(*contents)

    def render(self, ctx: Context) -> None:
        for value in self.values:
            resolved = value._resolve(ctx)
            if resolved:
                ctx.write(html.escape(resolved, quote=False))
        self._done(ctx)


class Comment(Node):
    """An HTML comment."""

    node_type = NodeType.COMMENT
    name = "#comment"

    def __init__(self, *contents: Any):
        self.values = new_values(*contents)

    def render(self, ctx: Context) -> None:
        ctx.write("<!--")
        for value in self.values:
            value.render(ctx)
        ctx.write("-->")
        self._done(ctx)


class Fragment(Node):
    """Raw content written as is; it need not be well-formed HTML."""

    node_type = NodeType.FRAGMENT
    name = "#fragment"

    def __init__(self, *contents: Any):
        self.values = new_values(*contents)

    def render(self, ctx: Context) -> None:
        for value in self.values:
            value.render(ctx)
        self._done(ctx)


def text(*args: Any) -> Text:
    """Create a text node."""
    return Text(*args)


def comment(*args: Any) -> Comment:
    """Create a comment node."""
    return Comment(*args)


def fragment(*args: Any) -> Fragment:
    """Create a fragment node."""
    return Fragment(*args)