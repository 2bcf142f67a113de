"""Collections of nodes, fixed or gathered at render time."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional

from aitch.context import Context
from aitch.nodes import Node, NodeType

__all__ = ["Collection", "ContentCollector", "collection", "content_collect"]


class Collection(Node):
    """A group of nodes rendered one after another.

    Attribute nodes in a collection are not rendered by the collection itself;
    an element that holds the collection takes them as its own attributes.
    """

    node_type = NodeType.COLLECTION
    name = "#collection"

    def __init__(self, *nodes: Optional[Node]):
        self.nodes: list[Node] = [node for node in nodes if node is not None]

    def render(self, ctx: Context) -> None:
        for node in self.nodes:
            if node.node_type is not NodeType.ATTRIBUTE:
                node.render(ctx)
        self._done(ctx)

    def __repr__(self) -> str:
        return f"Collection({self.nodes!r})"


class ContentCollector(Node):
    """Content whose nodes are obtained from a function each time it is rendered.

    Attribute nodes returned by the function are ignored.
    """

    node_type = NodeType.DYNAMIC
    name = "#collector"

    def __init__(self, collector: Callable[[Context], Iterable[Optional[Node]]]):
        self.collector = collector

    def render(self, ctx: Context) -> None:
        for node in self.collector(ctx) or ():
            if node is not None and node.node_type is not NodeType.ATTRIBUTE:
                node.render(ctx)
        self._done(ctx)


def collection(*args: Optional[Node]) -> Collection:
    """Create a collection of nodes; ``None`` entries are dropped."""
    return Collection(*args)


def content_collect(collector) -> Node:
    """Create dynamic content from ``collector(ctx)``; an empty collection if it is ``None``."""
    if collector is None:
        return Collection()
    return ContentCollector(collector)