import io

import pytest

from aitch.context import Context
from aitch.css import styling
from aitch.css.box import style_property
from aitch.css.units import px
from aitch.element import element
from aitch.nodes import DynamicValueKey


def _render(node, data=None):
    out = io.StringIO()
    node.render(Context(writer=out, data=data))
    return out.getvalue()


PROPERTIES = [
    (styling.background, "background"),
    (styling.background_color, "background-color"),
    (styling.background_image, "background-image"),
    (styling.background_size, "background-size"),
    (styling.background_position, "background-position"),
    (styling.background_repeat, "background-repeat"),
    (styling.color, "color"),
    (styling.font_size, "font-size"),
    (styling.font_weight, "font-weight"),
    (styling.font_family, "font-family"),
    (styling.line_height, "line-height"),
    (styling.letter_spacing, "letter-spacing"),
    (styling.text_align, "text-align"),
    (styling.text_transform, "text-transform"),
    (styling.text_decoration, "text-decoration"),
    (styling.white_space, "white-space"),
    (styling.word_break, "word-break"),
    (styling.opacity, "opacity"),
    (styling.box_shadow, "box-shadow"),
    (styling.visibility, "visibility"),
    (styling.overflow, "overflow"),
    (styling.overflow_x, "overflow-x"),
    (styling.overflow_y, "overflow-y"),
    (styling.cursor, "cursor"),
    (styling.transition, "transition"),
    (styling.transition_duration, "transition-duration"),
    (styling.transition_timing_function, "transition-timing-function"),
    (styling.transform, "transform"),
    (styling.animation, "animation"),
    (styling.user_select, "user-select"),
    (styling.pointer_events, "pointer-events"),
    (styling.isolation, "isolation"),
    (styling.object_fit, "object-fit"),
    (styling.object_position, "object-position"),
    (styling.font_style, "font-style"),
    (styling.font_variant, "font-variant"),
    (styling.font_stretch, "font-stretch"),
    (styling.direction, "direction"),
    (styling.tab_size, "tab-size"),
    (styling.filter_, "filter"),
    (styling.backdrop_filter, "backdrop-filter"),
    (styling.mix_blend_mode, "mix-blend-mode"),
    (styling.box_decoration_break, "box-decoration-break"),
    (styling.scroll_behavior, "scroll-behavior"),
    (styling.scroll_snap_type, "scroll-snap-type"),
    (styling.scroll_snap_align, "scroll-snap-align"),
    (styling.scroll_margin, "scroll-margin"),
    (styling.scroll_padding, "scroll-padding"),
    (styling.animation_name, "animation-name"),
    (styling.animation_duration, "animation-duration"),
    (styling.animation_timing_function, "animation-timing-function"),
    (styling.animation_delay, "animation-delay"),
    (styling.animation_iteration_count, "animation-iteration-count"),
    (styling.animation_direction, "animation-direction"),
    (styling.animation_fill_mode, "animation-fill-mode"),
    (styling.animation_play_state, "animation-play-state"),
    (styling.transition_property, "transition-property"),
    (styling.transition_delay, "transition-delay"),
    (styling.touch_action, "touch-action"),
    (styling.will_change, "will-change"),
    (styling.caret_color, "caret-color"),
    (styling.scroll_snap_stop, "scroll-snap-stop"),
    (styling.speak, "speak"),
    (styling.page_break_before, "page-break-before"),
    (styling.page_break_after, "page-break-after"),
    (styling.page_break_inside, "page-break-inside"),
]


@pytest.mark.parametrize("factory, prop", PROPERTIES, ids=[p for _, p in PROPERTIES])
def test_property_renders(factory, prop):
    assert _render(factory("foo")) == f' style="{prop}:foo"'


@pytest.mark.parametrize("factory, prop", PROPERTIES, ids=[p for _, p in PROPERTIES])
def test_property_is_style_attribute(factory, prop):
    attr = factory("foo")
    reference = style_property(prop, "foo")
    assert attr.name == "style"
    assert reference.name == attr.name
    assert _render(attr) == _render(reference)


def test_properties_merge_on_element():
    p = element("p", styling.color("red"), styling.opacity(0.5), "x")
    assert _render(p) == '<p style="color:red; opacity:0.5">x</p>'


def test_property_with_unit_and_dynamic_value():
    attr = styling.font_size(px(DynamicValueKey("size")), " !important")
    assert _render(attr, {"size": 12}) == ' style="font-size:12px !important"'


def test_property_without_value():
    assert _render(styling.cursor()) == ' style="cursor:"'