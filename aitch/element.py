"""Element nodes: normal elements with contents and void elements without."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from aitch import nodes
from aitch.attributes import Attribute, DelimitedAttribute
from aitch.collection import Collection
from aitch.conditional import Conditional
from aitch.context import Context
from aitch.nodes import Node, NodeType, Text, is_valid_name

__all__ = ["Element", "VoidElement", "element", "void_element", "attributes_and_contents"]

_VOID_ELEMENT_NAMES = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True)
class _ConditionalAttribute:
    attribute: Node
    conditions: tuple

    def evaluate(self, ctx: Context) -> bool:
        return all(condition(ctx) for condition in self.conditions)


def attributes_and_contents(conditions, content: Iterable[Optional[Node]]):
    """Split nodes into ``(attributes, conditional attributes, contents)``.

    Attributes inside collections are lifted out; attributes inside conditionals
    (or found while ``conditions`` apply) become conditional attributes carrying
    every condition that must hold for them.
    """
    conditions = tuple(conditions or ())
    attrs: list[Node] = []
    cond_attrs: list[_ConditionalAttribute] = []
    contents: list[Node] = []
    for item in content:
        if item is None:
            continue
        if item.node_type is NodeType.ATTRIBUTE:
            if conditions:
                cond_attrs.append(_ConditionalAttribute(item, conditions))
            else:
                attrs.append(item)
            continue
        contents.append(item)
        if isinstance(item, Collection):
            more_attrs, more_cond, _ = attributes_and_contents(conditions, item.nodes)
            attrs.extend(more_attrs)
            cond_attrs.extend(more_cond)
        elif isinstance(item, Conditional):
            nested = conditions + (item.fn,)
            cond_attrs.extend(_ConditionalAttribute(a, nested) for a in item.attributes)
            _, more_cond, _ = attributes_and_contents(nested, item.nodes)
            cond_attrs.extend(more_cond)
    return attrs, cond_attrs, contents


def _to_nodes(contents: Sequence[Any]) -> list[Node]:
    return [item if isinstance(item, Node) else Text(item) for item in contents]


def _values_of(node: Node) -> list:
    if isinstance(node, (Attribute, DelimitedAttribute)):
        return list(node.values)
    return []


def _merged(base: DelimitedAttribute, extra: Iterable[Node]) -> DelimitedAttribute:
    values = list(base.values)
    for node in extra:
        values.extend(_values_of(node))
    return DelimitedAttribute(base.name, base.delimiter, *values)


class _Tag(Node):
    node_type = NodeType.ELEMENT

    def __init__(self, name: str, *contents: Any):
        attrs, cond_attrs, children = attributes_and_contents(None, _to_nodes(contents))
        self.name = name
        self.attributes: list[Node] = []
        self._indices: dict[str, int] = {}
        self.conditionals: list[_ConditionalAttribute] = cond_attrs
        self._children = children
        self._add_attributes(attrs)

    def _add_attributes(self, attrs: Iterable[Node]) -> None:
        for att in attrs:
            index = self._indices.get(att.name)
            if index is None:
                self._indices[att.name] = len(self.attributes)
                self.attributes.append(att)
                continue
            existing = self.attributes[index]
            if isinstance(existing, DelimitedAttribute) and isinstance(att, DelimitedAttribute):
                self.attributes[index] = _merged(existing, [att])
            else:
                self.attributes[index] = att

    def _evaluate_conditionals(self, ctx: Context) -> dict[str, list[Node]]:
        result: dict[str, list[Node]] = {}
        for conditional_attribute in self.conditionals:
            if conditional_attribute.evaluate(ctx):
                attr = conditional_attribute.attribute
                result.setdefault(attr.name, []).append(attr)
        return result

    def _render_attributes(self, ctx: Context) -> None:
        evaluated = self._evaluate_conditionals(ctx) if self.conditionals else {}
        if not evaluated:
            for attr in self.attributes:
                attr.render(ctx)
            return
        for name, index in self._indices.items():
            attr = self.attributes[index]
            extra = evaluated.get(name)
            if extra is None:
                attr.render(ctx)
            elif isinstance(attr, DelimitedAttribute):
                _merged(attr, extra).render(ctx)
            else:
                extra[-1].render(ctx)
        for name, extra in evaluated.items():
            if name in self._indices:
                continue
            first = extra[0]
            if isinstance(first, DelimitedAttribute):
                _merged(first, extra[1:]).render(ctx)
            else:
                extra[-1].render(ctx)

    def _open(self, ctx: Context) -> None:
        ctx.write("<")
        ctx.write(self.name)
        self._render_attributes(ctx)
        ctx.write(">")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Element(_Tag):
    """An element with attributes, contents and a closing tag."""

    def __init__(self, name: str, *contents: Any):
        super().__init__(name, *contents)
        self.contents: list[Node] = self._children
        del self._children

    def render(self, ctx: Context) -> None:
        self._open(ctx)
        for child in self.contents:
            child.render(ctx)
        ctx.write("</")
        ctx.write(self.name)
        ctx.write(">")
        self._done(ctx)


class VoidElement(_Tag):
    """An element with attributes only and no closing tag; other contents are ignored."""

    def __init__(self, name: str, *contents: Any):
        super().__init__(name, *contents)
        del self._children

    def render(self, ctx: Context) -> None:
        self._open(ctx)
        self._done(ctx)


def _accept_tag_name(name: str) -> bool:
    if is_valid_name(name):
        return True
    if nodes.raise_on_invalid_name:
        raise ValueError(f"invalid html tag name: {name}")
    return False


def element(name: str, *args: Any) -> Optional[Node]:
    """Create an element, or a void element when ``name`` is an HTML void element.

    Returns ``None`` for an invalid name (or raises ``ValueError``, if configured).
    """
    if not _accept_tag_name(name):
        return None
    if name in _VOID_ELEMENT_NAMES:
        return VoidElement(name, *args)
    return Element(name, *args)


def void_element(name: str, *args: Any) -> Optional[VoidElement]:
    """Create a void element; ``None`` for an invalid name (or raise, if configured)."""
    if not _accept_tag_name(name):
        return None
    return VoidElement(name, *args)