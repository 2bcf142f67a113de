"""Conditional nodes: content and attributes that appear only when a condition holds."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from aitch.collection import Collection
from aitch.context import Context
from aitch.nodes import Node, NodeType

__all__ = ["Conditional", "conditional", "when"]

ConditionalFunc = Callable[[Context], bool]


class Conditional(Node):
    """Nodes rendered only when ``fn(ctx)`` is true.

    Attribute nodes are kept apart; an element holding this node applies them
    conditionally.
    """

    node_type = NodeType.CONDITIONAL
    name = "#conditional"

    def __init__(self, fn: ConditionalFunc, *nodes: Optional[Node]):
        if fn is None:
            raise ValueError("a conditional needs a condition function")
        self.fn = fn
        self.nodes: list[Node] = []
        self.attributes: list[Node] = []
        for node in nodes:
            if node is None:
                continue
            if node.node_type is NodeType.ATTRIBUTE:
                self.attributes.append(node)
            else:
                self.nodes.append(node)

    def render(self, ctx: Context) -> None:
        if self.fn(ctx):
            for node in self.nodes:
                node.render(ctx)
        self._done(ctx)


def conditional(fn: Optional[ConditionalFunc], *args: Optional[Node]) -> Node:
    """Create a conditional node; without a function this is a plain collection."""
    if fn is None:
        return Collection(*args)
    return Conditional(fn, *args)


def when(key: str, *args: Optional[Node]) -> Node:
    """Create a node conditional on ``key`` being present in ``Context.data``.

    A boolean value is taken as the result. A key starting with ``!`` negates
    the condition.
    """
    if key.startswith("!"):
        name = key[1:]

        def absent(ctx: Context) -> bool:
            data = ctx.data or {}
            if name not in data:
                return True
            value = data[name]
            return not value if isinstance(value, bool) else False

        return conditional(absent, *args)

    name = str(key)

    def present(ctx: Context) -> bool:
        data = ctx.data or {}
        if name not in data:
            return False
        value = data[name]
        return value if isinstance(value, bool) else True

    return conditional(present, *args)