"""Fluent HTML building and rendering with dynamic, data-driven content."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "collection",
    "conditional",
    "context",
    "css",
    "element",
    "nodes",
]