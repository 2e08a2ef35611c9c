"""Component dependency graph building and rendering."""

from .discovery import GraphBuilder, build_graph
from .renderer import render_ascii, render_html

__all__ = [
    "GraphBuilder",
    "build_graph",
    "render_ascii",
    "render_html",
]
