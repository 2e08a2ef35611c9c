#!/usr/bin/env python3
"""
Shared utilities for component source analysis.

Provides the reference extraction used by the graph builder.
"""

from .component_parser import ComponentParser

__all__ = [
    "ComponentParser",
]
