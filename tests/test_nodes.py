import io

import pytest

from aitch.context import Context, RenderError
from aitch.nodes import (
    ConcatValue,
    DynamicValueKey,
    NodeType,
    comment,
    concat_value,
    fragment,
    is_valid_name,
    new_values,
    text,
)


def render_node(node, **data):
    writer = io.StringIO()
    node.render(Context(writer, dict(data)))
    return writer.getvalue()


class ErrorWriter:
    def write(self, data):
        raise OSError("error")


def test_comment():
    node = comment("foo")
    assert node.node_type is NodeType.COMMENT
    assert node.name == "#comment"
    assert len(node.values) == 1


def test_comment_render():
    node = comment("foo")
    assert render_node(node) == "<!--foo-->"
    with pytest.raises(RenderError):
        node.render(Context(ErrorWriter()))


def test_fragment():
    node = fragment("foo", None, "bar")
    assert node.node_type is NodeType.FRAGMENT
    assert node.name == "#fragment"
    assert len(node.values) == 2


def test_fragment_render():
    node = fragment("foo", None, "bar")
    assert render_node(node) == "foobar"
    with pytest.raises(RenderError) as info:
        node.render(Context(ErrorWriter()))
    assert isinstance(info.value.__cause__, OSError)


def test_fragment_is_not_escaped():
    assert render_node(fragment("<b>", "&")) == "<b>&"


def test_text_escapes():
    node = text("a < b & c > d")
    assert node.node_type is NodeType.TEXT
    assert render_node(node) == "a &lt; b &amp; c &gt; d"


def test_text_render_error():
    with pytest.raises(RenderError):
        text("x").render(Context(ErrorWriter()))


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Hello ", "Hello "),
        (b"there ", "there "),
        (True, "true"),
        (False, "false"),
        (1, "1"),
        (1.2, "1.2"),
        (3, "3"),
    ],
)
def test_value_kinds(value, expected):
    assert render_node(fragment(value)) == expected


def test_callable_without_context():
    assert render_node(fragment(lambda: " something")) == " something"


def test_callable_with_context():
    def increment(ctx):
        ctx.data["id"] += 1
        return str(ctx.data["id"]).encode()

    writer = io.StringIO()
    ctx = Context(writer, {"id": 0})
    node = fragment(increment, ",", increment)
    node.render(ctx)
    assert writer.getvalue() == "1,2"
    assert ctx.data["id"] == 2


def test_dynamic_value_key():
    node = fragment("Hello, ", DynamicValueKey("name"))
    assert render_node(node, name="Aitch!") == "Hello, Aitch!"
    assert render_node(node) == "Hello, "


def test_concat_value():
    value = concat_value("width:", DynamicValueKey("w"), b"px")
    assert isinstance(value, ConcatValue)
    assert render_node(fragment(value), w=10) == "width:10px"


def test_value_render_reports_something_written():
    empty, filled = new_values(DynamicValueKey("missing"), "x")
    writer = io.StringIO()
    ctx = Context(writer)
    assert empty.render(ctx) is False
    assert filled.render(ctx) is True
    assert writer.getvalue() == "x"


def test_new_values_skips_none():
    assert len(new_values(None, "a", None, 1)) == 2


@pytest.mark.parametrize("name", ["p", "data-foo", "x:y", "a.b_c", "H1"])
def test_valid_names(name):
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", ["", " not a valid name", "1abc", "a b", "-x", "a\n"])
def test_invalid_names(name):
    assert is_valid_name(name) is False