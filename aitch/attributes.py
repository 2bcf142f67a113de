"""Attribute nodes: plain, boolean and delimited (such as class and style)."""

from __future__ import annotations

from typing import Any, Optional

from aitch import nodes
from aitch.context import Context
from aitch.nodes import Node, NodeType, is_valid_name, new_values

__all__ = [
    "Attribute",
    "BooleanAttribute",
    "DelimitedAttribute",
    "attribute",
    "boolean_attribute",
    "delimited_attribute",
]


def _accept_name(name: str) -> bool:
    if is_valid_name(name):
        return True
    if nodes.raise_on_invalid_name:
        raise ValueError(f"invalid html attribute name: {name}")
    return False


class Attribute(Node):
    """An attribute with a value: `` name="value"``."""

    node_type = NodeType.ATTRIBUTE

    def __init__(self, name: str, *values: Any):
        self.name = name
        self.values = new_values(*values)

    def render(self, ctx: Context) -> None:
        ctx.write(" ")
        ctx.write(self.name)
        ctx.write('="')
        for value in self.values:
            value.render(ctx)
        ctx.write('"')
        self._done(ctx)

    def __repr__(self) -> str:
        return f"Attribute({self.name!r})"


class BooleanAttribute(Node):
    """An attribute that has a name and no value."""

    node_type = NodeType.ATTRIBUTE

    def __init__(self, name: str):
        self.name = name

    def render(self, ctx: Context) -> None:
        ctx.write(" ")
        ctx.write(self.name)
        self._done(ctx)

    def __repr__(self) -> str:
        return f"BooleanAttribute({self.name!r})"


class DelimitedAttribute(Node):
    """An attribute whose values are joined by a delimiter.

    When given several times to one element, the values are merged into one attribute.
    """

    node_type = NodeType.ATTRIBUTE

    def __init__(self, name: str, delimiter: str, *values: Any):
        self.name = name
        self.delimiter = delimiter
        self.values = new_values(*values)

    def render(self, ctx: Context) -> None:
        ctx.write(" ")
        ctx.write(self.name)
        ctx.write('="')
        wrote = False
        for value in self.values:
            if wrote:
                ctx.write(self.delimiter)
            wrote = value.render(ctx)
        ctx.write('"')
        self._done(ctx)

    def __repr__(self) -> str:
        return f"DelimitedAttribute({self.name!r}, {self.delimiter!r})"


def attribute(name: str, *args: Any) -> Optional[Attribute]:
    """Create an attribute; return ``None`` for an invalid name (or raise, if configured)."""
    if not _accept_name(name):
        return None
    return Attribute(name, *args)


def boolean_attribute(name: str) -> Optional[BooleanAttribute]:
    """Create a boolean attribute; return ``None`` for an invalid name (or raise, if configured)."""
    if not _accept_name(name):
        return None
    return BooleanAttribute(name)


def delimited_attribute(name: str, delimiter: str, *args: Any) -> Optional[DelimitedAttribute]:
    """Create a delimited attribute; return ``None`` for an invalid name (or raise, if configured)."""
    if not _accept_name(name):
        return None
    return DelimitedAttribute(name, delimiter, *args)