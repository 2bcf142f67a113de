"""CSS length units: each function appends its unit to the given value parts."""

from __future__ import annotations

from typing import Any

from aitch.nodes import ConcatValue

__all__ = [
    "px",
    "pt",
    "pc",
    "in_",
    "cm",
    "mm",
    "em",
    "rem",
    "percent",
    "vw",
    "vh",
    "vmin",
    "vmax",
    "ch",
    "ex",
]


def _with_unit(unit: str, args: tuple) -> ConcatValue:
    return ConcatValue(*args, unit)


def px(*args: Any) -> ConcatValue:
    """A value in pixels (``px``)."""
    return _with_unit("px", args)


def pt(*args: Any) -> ConcatValue:
    """A value in points (``pt``)."""
    return _with_unit("pt", args)


def pc(*args: Any) -> ConcatValue:
    """A value in picas (``pc``)."""
    return _with_unit("pc", args)


def in_(*args: Any) -> ConcatValue:
    """A value in inches (``in``)."""
    return _with_unit("in", args)


def cm(*args: Any) -> ConcatValue:
    """A value in centimetres (``cm``)."""
    return _with_unit("cm", args)


def mm(*args: Any) -> ConcatValue:
    """A value in millimetres (``mm``)."""
    return _with_unit("mm", args)


def em(*args: Any) -> ConcatValue:
    """A value relative to the parent font size (``em``)."""
    return _with_unit("em", args)


def rem(*args: Any) -> ConcatValue:
    """A value relative to the root font size (``rem``)."""
    return _with_unit("rem", args)


def percent(*args: Any) -> ConcatValue:
    """A percentage value (``%``)."""
    return _with_unit("%", args)


def vw(*args: Any) -> ConcatValue:
    """A value in viewport widths (``vw``)."""
    return _with_unit("vw", args)


def vh(*args: Any) -> ConcatValue:
    """A value in viewport heights (``vh``)."""
    return _with_unit("vh", args)


def vmin(*args: Any) -> ConcatValue:
    """A value in the smaller of ``vw`` and ``vh`` (``vmin``)."""
    return _with_unit("vmin", args)


def vmax(*args: Any) -> ConcatValue:
    """A value in the larger of ``vw`` and ``vh`` (``vmax``)."""
    return _with_unit("vmax", args)


def ch(*args: Any) -> ConcatValue:
    """A value in widths of the ``0`` glyph (``ch``)."""
    return _with_unit("ch", args)


def ex(*args: Any) -> ConcatValue:
    """A value in x-heights of the current font (``ex``)."""
    return _with_unit("ex", args)