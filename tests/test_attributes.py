import io

import pytest

from aitch import nodes
from aitch.attributes import (
    Attribute,
    BooleanAttribute,
    DelimitedAttribute,
    attribute,
    boolean_attribute,
    delimited_attribute,
)
from aitch.context import Context, RenderError
from aitch.nodes import DynamicValueKey, NodeType

BAD_NAME = " not a valid name"


def render_node(node, **data):
    writer = io.StringIO()
    node.render(Context(writer, dict(data)))
    return writer.getvalue()


class ErrorWriter:
    def write(self, data):
        raise OSError("error")


def test_attribute():
    a = attribute("foo", "bar")
    assert isinstance(a, Attribute)
    assert a.node_type is NodeType.ATTRIBUTE
    assert a.name == "foo"
    assert len(a.values) == 1


def test_attribute_bad_name():
    assert attribute(BAD_NAME) is None


def test_attribute_bad_name_raises_when_configured(monkeypatch):
    monkeypatch.setattr(nodes, "raise_on_invalid_name", True)
    with pytest.raises(ValueError, match="invalid html attribute name"):
        attribute(BAD_NAME)


def test_attribute_render():
    a = attribute("foo", "bar")
    assert render_node(a) == ' foo="bar"'
    with pytest.raises(RenderError):
        a.render(Context(ErrorWriter()))


def test_attribute_dynamic_value():
    a = attribute("id", DynamicValueKey("id"))
    assert render_node(a, id=7) == ' id="7"'
    assert render_node(a) == ' id=""'


def test_boolean_attribute():
    a = boolean_attribute("foo")
    assert isinstance(a, BooleanAttribute)
    assert a.node_type is NodeType.ATTRIBUTE
    assert a.name == "foo"


def test_boolean_attribute_bad_name(monkeypatch):
    assert boolean_attribute(BAD_NAME) is None
    monkeypatch.setattr(nodes, "raise_on_invalid_name", True)
    with pytest.raises(ValueError):
        boolean_attribute(BAD_NAME)


def test_boolean_attribute_render():
    a = boolean_attribute("foo")
    assert render_node(a) == " foo"
    with pytest.raises(RenderError):
        a.render(Context(ErrorWriter()))


def test_delimited_attribute():
    a = delimited_attribute("foo", " ", "a", "b")
    assert isinstance(a, DelimitedAttribute)
    assert a.node_type is NodeType.ATTRIBUTE
    assert a.name == "foo"
    assert len(a.values) == 2


def test_delimited_attribute_bad_name(monkeypatch):
    assert delimited_attribute(BAD_NAME, "") is None
    monkeypatch.setattr(nodes, "raise_on_invalid_name", True)
    with pytest.raises(ValueError):
        delimited_attribute(BAD_NAME, "")


def test_delimited_attribute_render():
    a = delimited_attribute("foo", " ", "a", "b")
    assert render_node(a) == ' foo="a b"'
    with pytest.raises(RenderError):
        a.render(Context(ErrorWriter()))


def test_delimited_attribute_skips_none():
    a = delimited_attribute("class", " ", "a", None, "b")
    assert len(a.values) == 2
    assert render_node(a) == ' class="a b"'


def test_delimited_attribute_empty_value_no_extra_delimiter():
    a = delimited_attribute("class", " ", DynamicValueKey("missing"), "b")
    assert render_node(a) == ' class="b"'
    a = delimited_attribute("class", " ", "a", DynamicValueKey("missing"), "b")
    assert render_node(a) == ' class="a b"'


def test_delimited_attribute_custom_delimiter():
    a = DelimitedAttribute("style", "; ", "width:1px", "height:2px")
    assert render_node(a) == ' style="width:1px; height:2px"'