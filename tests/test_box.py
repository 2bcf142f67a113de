import io

import pytest

from aitch.context import Context, RenderError
from aitch.css import box
from aitch.element import element
from aitch.nodes import DynamicValueKey, NodeType


def render(node, data=None):
    buffer = io.StringIO()
    node.render(Context(writer=buffer, data=data))
    return buffer.getvalue()


class _FailingWriter:
    def write(self, data):
        raise OSError("error")


PROPERTIES = [
    (box.display, "display"),
    (box.position, "position"),
    (box.top, "top"),
    (box.right, "right"),
    (box.bottom, "bottom"),
    (box.left, "left"),
    (box.z_index, "z-index"),
    (box.float_, "float"),
    (box.clear, "clear"),
    (box.flex, "flex"),
    (box.flex_grow, "flex-grow"),
    (box.flex_shrink, "flex-shrink"),
    (box.flex_basis, "flex-basis"),
    (box.justify_content, "justify-content"),
    (box.align_items, "align-items"),
    (box.align_content, "align-content"),
    (box.align_self, "align-self"),
    (box.gap, "gap"),
    (box.row_gap, "row-gap"),
    (box.column_gap, "column-gap"),
    (box.width, "width"),
    (box.height, "height"),
    (box.min_width, "min-width"),
    (box.max_width, "max-width"),
    (box.min_height, "min-height"),
    (box.max_height, "max-height"),
    (box.margin, "margin"),
    (box.margin_top, "margin-top"),
    (box.margin_right, "margin-right"),
    (box.margin_bottom, "margin-bottom"),
    (box.margin_left, "margin-left"),
    (box.padding, "padding"),
    (box.padding_top, "padding-top"),
    (box.padding_right, "padding-right"),
    (box.padding_bottom, "padding-bottom"),
    (box.padding_left, "padding-left"),
    (box.border, "border"),
    (box.border_width, "border-width"),
    (box.border_color, "border-color"),
    (box.border_style, "border-style"),
    (box.border_radius, "border-radius"),
    (box.border_top, "border-top"),
    (box.border_bottom, "border-bottom"),
    (box.border_left, "border-left"),
    (box.border_right, "border-right"),
    (box.box_sizing, "box-sizing"),
    (box.aspect_ratio, "aspect-ratio"),
    (box.contain, "contain"),
    (box.content_visibility, "content-visibility"),
    (box.resize, "resize"),
    (box.grid_template_columns, "grid-template-columns"),
    (box.grid_template_rows, "grid-template-rows"),
    (box.grid_column, "grid-column"),
    (box.grid_row, "grid-row"),
    (box.grid_area, "grid-area"),
    (box.grid_auto_flow, "grid-auto-flow"),
    (box.place_items, "place-items"),
    (box.place_content, "place-content"),
    (box.place_self, "place-self"),
    (box.list_style, "list-style"),
    (box.list_style_type, "list-style-type"),
    (box.list_style_position, "list-style-position"),
    (box.list_style_image, "list-style-image"),
    (box.border_collapse, "border-collapse"),
    (box.border_spacing, "border-spacing"),
    (box.table_layout, "table-layout"),
    (box.empty_cells, "empty-cells"),
]


@pytest.mark.parametrize("factory, css_name", PROPERTIES)
def test_property_renders(factory, css_name):
    assert render(factory("foo")) == f' style="{css_name}:foo"'


@pytest.mark.parametrize("factory, css_name", PROPERTIES)
def test_property_is_style_attribute(factory, css_name):
    node = factory("foo")
    reference = box.style_property(css_name, "foo")
    assert node.node_type is NodeType.ATTRIBUTE
    assert node.name == "style"
    assert reference.name == node.name
    assert render(node) == render(reference)


def test_style_property_without_value():
    assert render(box.style_property("display")) == ' style="display:"'


def test_style_property_concatenates_parts():
    assert render(box.width(10, "px", " !important")) == ' style="width:10px !important"'


def test_none_parts_are_dropped():
    assert render(box.margin(None, "0 auto")) == ' style="margin:0 auto"'


def test_dynamic_value():
    node = box.width(DynamicValueKey("w"))
    assert render(node, {"w": 12}) == ' style="width:12"'


def test_properties_merge_on_element():
    node = element("p", box.width("10px"), box.height("5px"), "text")
    assert render(node) == '<p style="width:10px; height:5px">text</p>'


def test_render_error_is_raised():
    with pytest.raises(RenderError):
        box.display("block").render(Context(writer=_FailingWriter()))