"""Vue component dependency graph package."""

from .generator import generate, generate_ascii_tree, generate_graph, generate_html_tree
from .models import DependencyGraph, ExtractedReferences, FileSet, GraphOptions, OutputFormat

__version__ = "0.1.0"

__all__ = [
    "DependencyGraph",
    "ExtractedReferences",
    "FileSet",
    "GraphOptions",
    "OutputFormat",
    "generate",
    "generate_ascii_tree",
    "generate_graph",
    "generate_html_tree",
]
