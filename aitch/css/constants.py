"""Common CSS keyword values, usable anywhere a style property takes a value."""

from __future__ import annotations

import enum

__all__ = [
    "IMPORTANT",
    "Display",
    "Position",
    "TextAlign",
    "BorderStyle",
    "FontWeight",
    "Justify",
    "Align",
    "Overflow",
    "Visibility",
    "TextTransform",
    "WhiteSpace",
]

#: Suffix that marks a declaration as important, e.g. ``width(px(10), IMPORTANT)``.
IMPORTANT = " !important"


class _Keyword(str, enum.Enum):
    """A CSS keyword that renders as its plain value."""

    def __str__(self) -> str:
        return self.value


class Display(_Keyword):
    """Values for the ``display`` property."""

    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    FLEX = "flex"
    GRID = "grid"
    NONE = "none"


class Position(_Keyword):
    """Values for the ``position`` property."""

    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"


class TextAlign(_Keyword):
    """Values for the ``text-align`` property."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class BorderStyle(_Keyword):
    """Values for the ``border-style`` property."""

    NONE = "none"
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"


class FontWeight(_Keyword):
    """Values for the ``font-weight`` property."""

    NORMAL = "normal"
    BOLD = "bold"
    LIGHT = "lighter"
    BOLDER = "bolder"


class Justify(_Keyword):
    """Values for the ``justify-content`` property."""

    START = "flex-start"
    CENTER = "center"
    END = "flex-end"
    BETWEEN = "space-between"
    AROUND = "space-around"


class Align(_Keyword):
    """Values for the ``align-items`` and related properties."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"
    BASELINE = "baseline"


class Overflow(_Keyword):
    """Values for the ``overflow`` properties."""

    VISIBLE = "visible"
    HIDDEN = "hidden"
    SCROLL = "scroll"
    AUTO = "auto"


class Visibility(_Keyword):
    """Values for the ``visibility`` property."""

    VISIBLE = "visible"
    HIDDEN = "hidden"
    COLLAPSE = "collapse"


class TextTransform(_Keyword):
    """Values for the ``text-transform`` property."""

    NONE = "none"
    CAPITALIZE = "capitalize"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


class WhiteSpace(_Keyword):
    """Values for the ``white-space`` property."""

    NORMAL = "normal"
    NOWRAP = "nowrap"
    PRE = "pre"
    PRE_WRAP = "pre-wrap"
    PRE_LINE = "pre-line"