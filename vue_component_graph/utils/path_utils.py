#!/usr/bin/env python3
"""
Path utility functions for component resolution.

Handles path canonicalization and mapping component names to files.
"""

import os
import re
from pathlib import Path
from typing import Optional, Set, Union

from ..models import FileSet
from .file_utils import COMPONENT_EXTENSION

_CASE_BOUNDARY = re.compile(r'([a-z])([A-Z])')


def canonical_path(path: Union[str, Path]) -> Path:
    """Absolute, normalized form of a path. Symlinks are left as-is."""
    return Path(os.path.abspath(path))


def to_kebab_case(name: str) -> str:
    """Convert a PascalCase or camelCase name to kebab-case."""
    return _CASE_BOUNDARY.sub(r'\1-\2', name).lower()


def component_base_name(file_path: Path, extension: str = COMPONENT_EXTENSION) -> str:
    """Lowercased file name with the component extension removed."""
    name = file_path.name
    if name.endswith(extension):
        name = name[:-len(extension)]
    return name.lower()


def resolve_component_path(name: str, file_set: FileSet) -> Optional[Path]:
    """
    Resolve a component name to a file.

    ``UserCard`` matches ``user-card.vue`` or ``usercard.vue`` (any case).
    The first match in file set order wins, so files sharing a base name in
    different directories resolve to whichever was enumerated first.

    Only when neither form matches anywhere is the name retried with its
    hyphens removed, so a kebab tag such as ``foo-bar`` can still reach
    ``FooBar.vue``. An exact kebab or lowercase match always wins over it.
    """
    lower = name.lower()
    resolved = _first_match({to_kebab_case(name), lower}, file_set)
    if resolved is None and '-' in lower:
        resolved = _first_match({lower.replace('-', '')}, file_set)
    return resolved


def _first_match(candidates: Set[str], file_set: FileSet) -> Optional[Path]:
    """First file whose base name is one of the candidates."""
    for file_path in file_set:
        if component_base_name(file_path) in candidates:
            return file_path
    return None
