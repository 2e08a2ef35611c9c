#!/usr/bin/env python3
"""
Tree generation orchestration.

Collects component files once per run, builds a single graph shared by all
targets, and hands it to the requested renderer.
"""

import logging
from typing import Optional

from .models import DependencyGraph, GraphOptions, OutputFormat
from .tree import build_graph, render_ascii, render_html
from .utils import canonical_path, find_component_files


def generate_graph(options: GraphOptions, logger: Optional[logging.Logger] = None) -> DependencyGraph:
    """Build the dependency graph for every target. Raises OSError if root can't be listed."""
    file_set = find_component_files(options.root)
    return build_graph(options.targets, file_set, logger=logger)


def generate_ascii_tree(options: GraphOptions, logger: Optional[logging.Logger] = None) -> str:
    """Render one ASCII tree per target."""
    graph = generate_graph(options, logger)
    return "\n".join(render_ascii(canonical_path(t), graph) for t in options.targets)


def generate_html_tree(options: GraphOptions, logger: Optional[logging.Logger] = None) -> str:
    """Render all targets as roots of a single HTML document."""
    graph = generate_graph(options, logger)
    return render_html([canonical_path(t) for t in options.targets], graph)


def generate(options: GraphOptions, logger: Optional[logging.Logger] = None) -> str:
    """Render according to ``options.output``."""
    if options.output is OutputFormat.HTML:
        return generate_html_tree(options, logger)
    return generate_ascii_tree(options, logger)
