"""Inline style properties for backgrounds, typography, visual effects and motion.

Each function returns a ``style`` attribute holding one property. When an element
is given several of them, they merge into a single ``style`` attribute with the
declarations separated by ``"; "``.
"""

from __future__ import annotations

from typing import Any

from aitch.attributes import DelimitedAttribute
from aitch.css.box import style_property

__all__ = [
    "background",
    "background_color",
    "background_image",
    "background_size",
    "background_position",
    "background_repeat",
    "color",
    "font_size",
    "font_weight",
    "font_family",
    "line_height",
    "letter_spacing",
    "text_align",
    "text_transform",
    "text_decoration",
    "white_space",
    "word_break",
    "opacity",
    "box_shadow",
    "visibility",
    "overflow",
    "overflow_x",
    "overflow_y",
    "cursor",
    "transition",
    "transition_duration",
    "transition_timing_function",
    "transform",
    "animation",
    "user_select",
    "pointer_events",
    "isolation",
    "object_fit",
    "object_position",
    "font_style",
    "font_variant",
    "font_stretch",
    "direction",
    "tab_size",
    "filter_",
    "backdrop_filter",
    "mix_blend_mode",
    "box_decoration_break",
    "scroll_behavior",
    "scroll_snap_type",
    "scroll_snap_align",
    "scroll_margin",
    "scroll_padding",
    "animation_name",
    "animation_duration",
    "animation_timing_function",
    "animation_delay",
    "animation_iteration_count",
    "animation_direction",
    "animation_fill_mode",
    "animation_play_state",
    "transition_property",
    "transition_delay",
    "touch_action",
    "will_change",
    "caret_color",
    "scroll_snap_stop",
    "speak",
    "page_break_before",
    "page_break_after",
    "page_break_inside",
]


# Background


def background(*args: Any) -> DelimitedAttribute:
    """Set the ``background`` property."""
    return style_property("background", *args)


def background_color(*args: Any) -> DelimitedAttribute:
    """Set the ``background-color`` property."""
    return style_property("background-color", *args)


def background_image(*args: Any) -> DelimitedAttribute:
    """Set the ``background-image`` property."""
    return style_property("background-image", *args)


def background_size(*args: Any) -> DelimitedAttribute:
    """Set the ``background-size`` property."""
    return style_property("background-size", *args)


def background_position(*args: Any) -> DelimitedAttribute:
    """Set the ``background-position`` property."""
    return style_property("background-position", *args)


def background_repeat(*args: Any) -> DelimitedAttribute:
    """Set the ``background-repeat`` property."""
    return style_property("background-repeat", *args)


# Typography


def color(*args: Any) -> DelimitedAttribute:
    """Set the ``color`` property."""
    return style_property("color", *args)


def font_size(*args: Any) -> DelimitedAttribute:
    """Set the ``font-size`` property."""
    return style_property("font-size", *args)


def font_weight(*args: Any) -> DelimitedAttribute:
    """Set the ``font-weight`` property."""
    return style_property("font-weight", *args)


def font_family(*args: Any) -> DelimitedAttribute:
    """Set the ``font-family`` property."""
    return style_property("font-family", *args)


def line_height(*args: Any) -> DelimitedAttribute:
    """Set the ``line-height`` property."""
    return style_property("line-height", *args)


def letter_spacing(*args: Any) -> DelimitedAttribute:
    """Set the ``letter-spacing`` property."""
    return style_property("letter-spacing", *args)


def text_align(*args: Any) -> DelimitedAttribute:
    """Set the ``text-align`` property."""
    return style_property("text-align", *args)


def text_transform(*args: Any) -> DelimitedAttribute:
    """Set the ``text-transform`` property."""
    return style_property("text-transform", *args)


def text_decoration(*args: Any) -> DelimitedAttribute:
    """Set the ``text-decoration`` property."""
    return style_property("text-decoration", *args)


def white_space(*args: Any) -> DelimitedAttribute:
    """Set the ``white-space`` property."""
    return style_property("white-space", *args)


def word_break(*args: Any) -> DelimitedAttribute:
    """Set the ``word-break`` property."""
    return style_property("word-break", *args)


# Visual


def opacity(*args: Any) -> DelimitedAttribute:
    """Set the ``opacity`` property."""
    return style_property("opacity", *args)


def box_shadow(*args: Any) -> DelimitedAttribute:
    """Set the ``box-shadow`` property."""
    return style_property("box-shadow", *args)


def visibility(*args: Any) -> DelimitedAttribute:
    """Set the ``visibility`` property."""
    return style_property("visibility", *args)


def overflow(*args: Any) -> DelimitedAttribute:
    """Set the ``overflow`` property."""
    return style_property("overflow", *args)


def overflow_x(*args: Any) -> DelimitedAttribute:
    """Set the ``overflow-x`` property."""
    return style_property("overflow-x", *args)


def overflow_y(*args: Any) -> DelimitedAttribute:
    """Set the ``overflow-y`` property."""
    return style_property("overflow-y", *args)


def cursor(*args: Any) -> DelimitedAttribute:
    """Set the ``cursor`` property."""
    return style_property("cursor", *args)


# Animation and transition


def transition(*args: Any) -> DelimitedAttribute:
    """Set the ``transition`` property."""
    return style_property("transition", *args)


def transition_duration(*args: Any) -> DelimitedAttribute:
    """Set the ``transition-duration`` property."""
    return style_property("transition-duration", *args)


def transition_timing_function(*args: Any) -> DelimitedAttribute:
    """Set the ``transition-timing-function`` property."""
    return style_property("transition-timing-function", *args)


def transform(*args: Any) -> DelimitedAttribute:
    """Set the ``transform`` property."""
    return style_property("transform", *args)


def animation(*args: Any) -> DelimitedAttribute:
    """Set the ``animation`` property."""
    return style_property("animation", *args)


# Miscellaneous


def user_select(*args: Any) -> DelimitedAttribute:
    """Set the ``user-select`` property."""
    return style_property("user-select", *args)


def pointer_events(*args: Any) -> DelimitedAttribute:
    """Set the ``pointer-events`` property."""
    return style_property("pointer-events", *args)


def isolation(*args: Any) -> DelimitedAttribute:
    """Set the ``isolation`` property."""
    return style_property("isolation", *args)


def object_fit(*args: Any) -> DelimitedAttribute:
    """Set the ``object-fit`` property."""
    return style_property("object-fit", *args)


def object_position(*args: Any) -> DelimitedAttribute:
    """Set the ``object-position`` property."""
    return style_property("object-position", *args)


# Typography extras


def font_style(*args: Any) -> DelimitedAttribute:
    """Set the ``font-style`` property."""
    return style_property("font-style", *args)


def font_variant(*args: Any) -> DelimitedAttribute:
    """Set the ``font-variant`` property."""
    return style_property("font-variant", *args)


def font_stretch(*args: Any) -> DelimitedAttribute:
    """Set the ``font-stretch`` property."""
    return style_property("font-stretch", *args)


def direction(*args: Any) -> DelimitedAttribute:
    """Set the ``direction`` property."""
    return style_property("direction", *args)


def tab_size(*args: Any) -> DelimitedAttribute:
    """Set the ``tab-size`` property."""
    return style_property("tab-size", *args)


# Filters and effects


def filter_(*args: Any) -> DelimitedAttribute:
    """Set the ``filter`` property."""
    return style_property("filter", *args)


def backdrop_filter(*args: Any) -> DelimitedAttribute:
    """Set the ``backdrop-filter`` property."""
    return style_property("backdrop-filter", *args)


def mix_blend_mode(*args: Any) -> DelimitedAttribute:
    """Set the ``mix-blend-mode`` property."""
    return style_property("mix-blend-mode", *args)


def box_decoration_break(*args: Any) -> DelimitedAttribute:
    """Set the ``box-decoration-break`` property."""
    return style_property("box-decoration-break", *args)


# Scrolling


def scroll_behavior(*args: Any) -> DelimitedAttribute:
    """Set the ``scroll-behavior`` property."""
    return style_property("scroll-behavior", *args)


def scroll_snap_type(*args: Any) -> DelimitedAttribute:
    """Set the ``scroll-snap-type`` property."""
    return style_property("scroll-snap-type", *args)


def scroll_snap_align(*args: Any) -> DelimitedAttribute:
    """Set the ``scroll-snap-align`` property."""
    return style_property("scroll-snap-align", *args)


def scroll_margin(*args: Any) -> DelimitedAttribute:
    """Set the ``scroll-margin`` property."""
    return style_property("scroll-margin", *args)


def scroll_padding(*args: Any) -> DelimitedAttribute:
    """Set the ``scroll-padding`` property."""
    return style_property("scroll-padding", *args)


# Animation extras


def animation_name(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-name`` property."""
    return style_property("animation-name", *args)


def animation_duration(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-duration`` property."""
    return style_property("animation-duration", *args)


def animation_timing_function(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-timing-function`` property."""
    return style_property("animation-timing-function", *args)


def animation_delay(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-delay`` property."""
    return style_property("animation-delay", *args)


def animation_iteration_count(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-iteration-count`` property."""
    return style_property("animation-iteration-count", *args)


def animation_direction(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-direction`` property."""
    return style_property("animation-direction", *args)


def animation_fill_mode(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-fill-mode`` property."""
    return style_property("animation-fill-mode", *args)


def animation_play_state(*args: Any) -> DelimitedAttribute:
    """Set the ``animation-play-state`` property."""
    return style_property("animation-play-state", *args)


# Transition extras


def transition_property(*args: Any) -> DelimitedAttribute:
    """Set the ``transition-property`` property."""
    return style_property("transition-property", *args)


def transition_delay(*args: Any) -> DelimitedAttribute:
    """Set the ``transition-delay`` property."""
    return style_property("transition-delay", *args)


# Interactivity


def touch_action(*args: Any) -> DelimitedAttribute:
    """Set the ``touch-action`` property."""
    return style_property("touch-action", *args)


def will_change(*args: Any) -> DelimitedAttribute:
    """Set the ``will-change`` property."""
    return style_property("will-change", *args)


def caret_color(*args: Any) -> DelimitedAttribute:
    """Set the ``caret-color`` property."""
    return style_property("caret-color", *args)


def scroll_snap_stop(*args: Any) -> DelimitedAttribute:
    """Set the ``scroll-snap-stop`` property."""
    return style_property("scroll-snap-stop", *args)


# Accessibility


def speak(*args: Any) -> DelimitedAttribute:
    """Set the ``speak`` property."""
    return style_property("speak", *args)


# Print and media


def page_break_before(*args: Any) -> DelimitedAttribute:
    """Set the ``page-break-before`` property."""
    return style_property("page-break-before", *args)


def page_break_after(*args: Any) -> DelimitedAttribute:
    """Set the ``page-break-after`` property."""
    return style_property("page-break-after", *args)


def page_break_inside(*args: Any) -> DelimitedAttribute:
    """Set the ``page-break-inside`` property."""
    return style_property("page-break-inside", *args)