"""Inline style properties for layout, box model, grid, lists and tables.

Each function returns a ``style`` attribute holding one property. When an element
is given several of them, they merge into a single ``style`` attribute with the
declarations separated by ``"; "``.
"""

from __future__ import annotations

from typing import Any

from aitch.attributes import DelimitedAttribute
from aitch.nodes import ConcatValue

__all__ = [
    "style_property",
    "display",
    "position",
    "top",
    "right",
    "bottom",
    "left",
    "z_index",
    "float_",
    "clear",
    "flex",
    "flex_grow",
    "flex_shrink",
    "flex_basis",
    "justify_content",
    "align_items",
    "align_content",
    "align_self",
    "gap",
    "row_gap",
    "column_gap",
    "width",
    "height",
    "min_width",
    "max_width",
    "min_height",
    "max_height",
    "margin",
    "margin_top",
    "margin_right",
    "margin_bottom",
    "margin_left",
    "padding",
    "padding_top",
    "padding_right",
    "padding_bottom",
    "padding_left",
    "border",
    "border_width",
    "border_color",
    "border_style",
    "border_radius",
    "border_top",
    "border_bottom",
    "border_left",
    "border_right",
    "box_sizing",
    "aspect_ratio",
    "contain",
    "content_visibility",
    "resize",
    "grid_template_columns",
    "grid_template_rows",
    "grid_column",
    "grid_row",
    "grid_area",
    "grid_auto_flow",
    "place_items",
    "place_content",
    "place_self",
    "list_style",
    "list_style_type",
    "list_style_position",
    "list_style_image",
    "border_collapse",
    "border_spacing",
    "table_layout",
    "empty_cells",
]

_STYLE = "style"
_STYLES_DELIMITER = "; "


def style_property(name: str, *args: Any) -> DelimitedAttribute:
    """Create a ``style`` attribute declaring the CSS property ``name`` with the given value parts."""
    return DelimitedAttribute(_STYLE, _STYLES_DELIMITER, ConcatValue(f"{name}:", *args))


# Layout


def display(*args: Any) -> DelimitedAttribute:
    """Set the ``display`` property."""
    return style_property("display", *args)


def position(*args: Any) -> DelimitedAttribute:
    """Set the ``position`` property."""
    return style_property("position", *args)


def top(*args: Any) -> DelimitedAttribute:
    """Set the ``top`` property."""
    return style_property("top", *args)


def right(*args: Any) -> DelimitedAttribute:
    """Set the ``right`` property."""
    return style_property("right", *args)


def bottom(*args: Any) -> DelimitedAttribute:
    """Set the ``bottom`` property."""
    return style_property("bottom", *args)


def left(*args: Any) -> DelimitedAttribute:
    """Set the ``left`` property."""
    return style_property("left", *args)


def z_index(*args: Any) -> DelimitedAttribute:
    """Set the ``z-index`` property."""
    return style_property("z-index", *args)


def float_(*args: Any) -> DelimitedAttribute:
    """Set the ``float`` property."""
    return style_property("float", *args)


def clear(*args: Any) -> DelimitedAttribute:
    """Set the ``clear`` property."""
    return style_property("clear", *args)


# Flexbox


def flex(*args: Any) -> DelimitedAttribute:
    """Set the ``flex`` property."""
    return style_property("flex", *args)


def flex_grow(*args: Any) -> DelimitedAttribute:
    """Set the ``flex-grow`` property."""
    return style_property("flex-grow", *args)


def flex_shrink(*args: Any) -> DelimitedAttribute:
    """Set the ``flex-shrink`` property."""
    return style_property("flex-shrink", *args)


def flex_basis(*args: Any) -> DelimitedAttribute:
    """Set the ``flex-basis`` property."""
    return style_property("flex-basis", *args)


def justify_content(*args: Any) -> DelimitedAttribute:
    """Set the ``justify-content`` property."""
    return style_property("justify-content", *args)


def align_items(*args: Any) -> DelimitedAttribute:
    """Set the ``align-items`` property."""
    return style_property("align-items", *args)


def align_content(*args: Any) -> DelimitedAttribute:
    """Set the ``align-content`` property."""
    return style_property("align-content", *args)


def align_self(*args: Any) -> DelimitedAttribute:
    """Set the ``align-self`` property."""
    return style_property("align-self", *args)


def gap(*args: Any) -> DelimitedAttribute:
    """Set the ``gap`` property."""
    return style_property("gap", *args)


def row_gap(*args: Any) -> DelimitedAttribute:
    """Set the ``row-gap`` property."""
    return style_property("row-gap", *args)


def column_gap(*args: Any) -> DelimitedAttribute:
    """Set the ``column-gap`` property."""
    return style_property("column-gap", *args)


# Sizing


def width(*args: Any) -> DelimitedAttribute:
    """Set the ``width`` property."""
    return style_property("width", *args)


def height(*args: Any) -> DelimitedAttribute:
    """Set the ``height`` property."""
    return style_property("height", *args)


def min_width(*args: Any) -> DelimitedAttribute:
    """Set the ``min-width`` property."""
    return style_property("min-width", *args)


def max_width(*args: Any) -> DelimitedAttribute:
    """Set the ``max-width`` property."""
    return style_property("max-width", *args)


def min_height(*args: Any) -> DelimitedAttribute:
    """Set the ``min-height`` property."""
    return style_property("min-height", *args)


def max_height(*args: Any) -> DelimitedAttribute:
    """Set the ``max-height`` property."""
    return style_property("max-height", *args)


# Spacing


def margin(*args: Any) -> DelimitedAttribute:
    """Set the ``margin`` property."""
    return style_property("margin", *args)


def margin_top(*args: Any) -> DelimitedAttribute:
    """Set the ``margin-top`` property."""
    return style_property("margin-top", *args)


def margin_right(*args: Any) -> DelimitedAttribute:
    """Set the ``margin-right`` property."""
    return style_property("margin-right", *args)


def margin_bottom(*args: Any) -> DelimitedAttribute:
    """Set the ``margin-bottom`` property."""
    return style_property("margin-bottom", *args)


def margin_left(*args: Any) -> DelimitedAttribute:
    """Set the ``margin-left`` property."""
    return style_property("margin-left", *args)


def padding(*args: Any) -> DelimitedAttribute:
    """Set the ``padding`` property."""
    return style_property("padding", *args)


def padding_top(*args: Any) -> DelimitedAttribute:
    """Set the ``padding-top`` property."""
    return style_property("padding-top", *args)


def padding_right(*args: Any) -> DelimitedAttribute:
    """Set the ``padding-right`` property."""
    return style_property("padding-right", *args)


def padding_bottom(*args: Any) -> DelimitedAttribute:
    """Set the ``padding-bottom`` property."""
    return style_property("padding-bottom", *args)


def padding_left(*args: Any) -> DelimitedAttribute:
    """Set the ``padding-left`` property."""
    return style_property("padding-left", *args)


# Border


def border(*args: Any) -> DelimitedAttribute:
    """Set the ``border`` property."""
    return style_property("border", *args)


def border_width(*args: Any) -> DelimitedAttribute:
    """Set the ``border-width`` property."""
    return style_property("border-width", *args)


def border_color(*args: Any) -> DelimitedAttribute:
    """Set the ``border-color`` property."""
    return style_property("border-color", *args)


def border_style(*args: Any) -> DelimitedAttribute:
    """Set the ``border-style`` property."""
    return style_property("border-style", *args)


def border_radius(*args: Any) -> DelimitedAttribute:
    """Set the ``border-radius`` property."""
    return style_property("border-radius", *args)


def border_top(*args: Any) -> DelimitedAttribute:
    """Set the ``border-top`` property."""
    return style_property("border-top", *args)


def border_bottom(*args: Any) -> DelimitedAttribute:
    """Set the ``border-bottom`` property."""
    return style_property("border-bottom", *args)


def border_left(*args: Any) -> DelimitedAttribute:
    """Set the ``border-left`` property."""
    return style_property("border-left", *args)


def border_right(*args: Any) -> DelimitedAttribute:
    """Set the ``border-right`` property."""
    return style_property("border-right", *args)


# Display and box


def box_sizing(*args: Any) -> DelimitedAttribute:
    """Set the ``box-sizing`` property."""
    return style_property("box-sizing", *args)


def aspect_ratio(*args: Any) -> DelimitedAttribute:
    """Set the ``aspect-ratio`` property."""
    return style_property("aspect-ratio", *args)


def contain(*args: Any) -> DelimitedAttribute:
    """Set the ``contain`` property."""
    return style_property("contain", *args)


def content_visibility(*args: Any) -> DelimitedAttribute:
    """Set the ``content-visibility`` property."""
    return style_property("content-visibility", *args)


def resize(*args: Any) -> DelimitedAttribute:
    """Set the ``resize`` property."""
    return style_property("resize", *args)


# Grid


def grid_template_columns(*args: Any) -> DelimitedAttribute:
    """Set the ``grid-template-columns`` property."""
    return style_property("grid-template-columns", *args)


def grid_template_rows(*args: Any) -> DelimitedAttribute:
    """Set the ``grid-template-rows`` property."""
    return style_property("grid-template-rows", *args)


def grid_column(*args: Any) -> DelimitedAttribute:
    """Set the ``grid-column`` property."""
    return style_property("grid-column", *args)


def grid_row(*args: Any) -> DelimitedAttribute:
    """Set the ``grid-row`` property."""
    return style_property("grid-row", *args)


def grid_area(*args: Any) -> DelimitedAttribute:
    """Set the ``grid-area`` property."""
    return style_property("grid-area", *args)


def grid_auto_flow(*args: Any) -> DelimitedAttribute:
    """Set the ``grid-auto-flow`` property."""
    return style_property("grid-auto-flow", *args)


def place_items(*args: Any) -> DelimitedAttribute:
    """Set the ``place-items`` property."""
    return style_property("place-items", *args)


def place_content(*args: Any) -> DelimitedAttribute:
    """Set the ``place-content`` property."""
    return style_property("place-content", *args)


def place_self(*args: Any) -> DelimitedAttribute:
    """Set the ``place-self`` property."""
    return style_property("place-self", *args)


# Lists


def list_style(*args: Any) -> DelimitedAttribute:
    """Set the ``list-style`` property."""
    return style_property("list-style", *args)


def list_style_type(*args: Any) -> DelimitedAttribute:
    """Set the ``list-style-type`` property."""
    return style_property("list-style-type", *args)


def list_style_position(*args: Any) -> DelimitedAttribute:
    """Set the ``list-style-position`` property."""
    return style_property("list-style-position", *args)


def list_style_image(*args: Any) -> DelimitedAttribute:
    """Set the ``list-style-image`` property."""
    return style_property("list-style-image", *args)


# Tables


def border_collapse(*args: Any) -> DelimitedAttribute:
    """Set the ``border-collapse`` property."""
    return style_property("border-collapse", *args)


def border_spacing(*args: Any) -> DelimitedAttribute:
    """Set the ``border-spacing`` property."""
    return style_property("border-spacing", *args)


def table_layout(*args: Any) -> DelimitedAttribute:
    """Set the ``table-layout`` property."""
    return style_property("table-layout", *args)


def empty_cells(*args: Any) -> DelimitedAttribute:
    """Set the ``empty-cells`` property."""
    return style_property("empty-cells", *args)