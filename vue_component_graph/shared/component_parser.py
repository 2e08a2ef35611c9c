#!/usr/bin/env python3
"""
Heuristic component reference extraction for Vue single-file components.

This is pattern matching over raw text, not a grammar. Known limitations:
tags inside comments or string literals are picked up, and components that
are only rendered dynamically (``<component :is>``, render functions,
runtime registration) are missed.
"""

import re
from typing import List, Set

from ..models import ExtractedReferences


class ComponentParser:
    """
    Extracts referenced component names from file content.

    Named imports come from ``import { A, B as C } from '...'`` statements
    (``import type`` statements are ignored). Tag usages come from opening
    tags that look like components: kebab-case or PascalCase names.
    """

    def __init__(self):
        # Brace lists may span multiple lines
        self.import_pattern = re.compile(
            r'import\s+(?!type)\{([^}]+)\}\s+from\s+[\'"][^\'"]+[\'"]'
        )
        self.alias_pattern = re.compile(r'\bas\s+.*$', re.DOTALL)
        self.tag_pattern = re.compile(r'<([A-Za-z][A-Za-z0-9-]*)')

    def extract(self, content: str) -> ExtractedReferences:
        """Extract imported names and used tags from file content."""
        return ExtractedReferences(
            imported_names=tuple(self.extract_imports(content)),
            used_tags=tuple(self.extract_tags(content)),
        )

    def extract_imports(self, content: str) -> List[str]:
        """Extract named imports in statement order, left to right."""
        names = []
        for match in self.import_pattern.finditer(content):
            for raw_name in match.group(1).split(','):
                name = self.alias_pattern.sub('', raw_name).strip()
                if name:
                    names.append(name)
        return names

    def extract_tags(self, content: str) -> List[str]:
        """Extract component-like tag names, first occurrence first."""
        seen: Set[str] = set()
        tags = []
        for match in self.tag_pattern.finditer(content):
            tag = match.group(1)
            if tag in seen:
                continue
            seen.add(tag)
            if self._is_component_tag(tag):
                tags.append(tag)
        return tags

    @staticmethod
    def _is_component_tag(tag: str) -> bool:
        """Native HTML elements are lowercase without a hyphen."""
        return '-' in tag or tag[0].isupper()
