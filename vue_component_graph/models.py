#!/usr/bin/env python3
"""
Data models for component dependency analysis.

Contains the data structures shared by the extractor, the graph builder and
the renderers.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Tuple


# Ordered, deduplicated absolute paths of every candidate component file.
FileSet = Tuple[Path, ...]


class OutputFormat(Enum):
    """Supported renderings of a dependency graph."""
    ASCII = "ascii"
    HTML = "html"


@dataclass(frozen=True)
class ExtractedReferences:
    """Component names referenced by a single file, in discovery order."""
    imported_names: Tuple[str, ...] = ()
    used_tags: Tuple[str, ...] = ()

    def all_names(self) -> Tuple[str, ...]:
        """Imports first, then tags."""
        return self.imported_names + self.used_tags


@dataclass
class DependencyGraph:
    """
    Mapping of component file to its ordered set of direct dependencies.

    A path being a key means the file has been visited, whatever the size
    of its dependency set. Files that could not be read are never keys.
    """
    edges: Dict[Path, Dict[Path, None]] = field(default_factory=dict)

    def __contains__(self, path: Path) -> bool:
        return path in self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def has_node(self, path: Path) -> bool:
        return path in self.edges

    def add_node(self, path: Path) -> None:
        """Mark a file as visited with an empty dependency set."""
        self.edges.setdefault(path, {})

    def add_dependency(self, node: Path, dependency: Path) -> bool:
        """Add an edge, returning False if it was already present."""
        dependencies = self.edges[node]
        if dependency in dependencies:
            return False
        dependencies[dependency] = None
        return True

    def dependencies_of(self, path: Path) -> List[Path]:
        """Direct dependencies of a file; empty for files never visited."""
        return list(self.edges.get(path, {}))

    def nodes(self) -> Iterator[Path]:
        return iter(self.edges)

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to a JSON-serializable dictionary."""
        return {
            str(node): [str(dep) for dep in deps]
            for node, deps in self.edges.items()
        }


@dataclass
class GraphOptions:
    """Options for a single generation run."""
    root: Path
    targets: List[Path] = field(default_factory=list)
    output: OutputFormat = OutputFormat.ASCII
