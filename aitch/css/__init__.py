"""Inline CSS style properties, length units and keyword values."""

__all__ = ["box", "constants", "styling", "units"]