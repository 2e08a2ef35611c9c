"""Component dependency discovery and graph building."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Set, Tuple

from ..models import DependencyGraph, FileSet
from ..shared.component_parser import ComponentParser
from ..utils.file_utils import read_file_content
from ..utils.path_utils import canonical_path, resolve_component_path


class GraphBuilder:
    """
    Builds a dependency graph by depth-first traversal of component references.

    One builder shares a single graph across every entry it visits, so
    subtrees reachable from several entries are only read once. A reference
    back to a file still being visited (the file itself or one of its
    ancestors) gets no edge: self-references and cycles are omitted so the
    resulting graph stays acyclic and renders without a visited set.

    Traversal keeps its own stack of open files rather than recursing, so
    the depth of a component chain is not bounded by the interpreter's
    recursion limit.
    """

    def __init__(
        self,
        file_set: FileSet,
        graph: DependencyGraph | None = None,
        logger: logging.Logger | None = None,
    ):
        self.file_set = file_set
        self.graph = graph if graph is not None else DependencyGraph()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = ComponentParser()
        self._in_progress: Set[Path] = set()

    def build(self, entry_paths: Iterable[str | Path]) -> DependencyGraph:
        """Visit every entry and return the shared graph."""
        for entry in entry_paths:
            self.visit(entry)
        return self.graph

    def visit(self, path: str | Path) -> None:
        """Visit a file and, transitively, everything it references."""
        frame = self._open(path)
        if frame is None:
            return

        stack: List[Tuple[Path, Iterator[str]]] = [frame]
        while stack:
            node, names = stack[-1]
            name = next(names, None)
            if name is None:
                stack.pop()
                self._in_progress.discard(node)
                continue

            dependency = self._resolve(node, name)
            if dependency is None:
                continue
            if self.graph.add_dependency(node, dependency):
                self.logger.debug("%s -> %s", node.name, dependency.name)

            child = self._open(dependency)
            if child is not None:
                stack.append(child)

    def _open(self, path: str | Path) -> Tuple[Path, Iterator[str]] | None:
        """Read and register a file, returning its pending reference names."""
        node = canonical_path(path)
        if self.graph.has_node(node):
            return None

        try:
            content = read_file_content(node)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.debug("Skipping unreadable file %s: %s", node, e)
            return None

        # Must happen before descending: the key is the cycle guard
        self.graph.add_node(node)
        self._in_progress.add(node)
        self.logger.debug("Visiting %s", node)
        return node, iter(self.parser.extract(content).all_names())

    def _resolve(self, node: Path, name: str) -> Path | None:
        """Resolve a referenced name, dropping unknown names and back references."""
        resolved = resolve_component_path(name, self.file_set)
        if resolved is None:
            self.logger.debug("Unresolved reference %r in %s", name, node.name)
            return None

        dependency = canonical_path(resolved)
        if dependency in self._in_progress:
            self.logger.debug("Cyclic reference %s -> %s omitted", node.name, dependency.name)
            return None
        return dependency


def build_graph(
    entry_paths: Iterable[str | Path],
    file_set: FileSet,
    logger: logging.Logger | None = None,
) -> DependencyGraph:
    """Build one dependency graph shared by all entry paths."""
    return GraphBuilder(file_set, logger=logger).build(entry_paths)
